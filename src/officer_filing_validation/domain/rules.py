"""Shared rule library used by the appointment, termination and update validators.

Each rule appends zero or more errors to the pass's ``RuleContext`` and never
raises for bad input. Rules that depend on registry data take the resolved
snapshot explicitly; callers skip them when the fetch failed.

Usage example:
    from officer_filing_validation.domain.rules import RuleContext, check_company_not_dissolved

    ctx = RuleContext(errors=ValidationResult(), config=config)
    check_company_not_dissolved(ctx, profile)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from ..config import ValidationConfig
from ..observability import get_logger
from . import field_rules
from .errors import ValidationError, ValidationResult
from .filing import CompanyProfileSnapshot, OfficerAppointmentSnapshot
from .messages import MessageKey
from .reference_data import describe_company_type

logger = get_logger("officer_filing_validation.domain.rules")

MIN_AGE = 16
MAX_AGE = 110

CharsetFn = Callable[[str], bool]


@dataclass(frozen=True)
class RuleContext:
    """Error sink and reference data for a single validation pass."""

    errors: ValidationResult
    config: ValidationConfig

    def report(
        self,
        key: str,
        location: str | None = None,
        *replacements: str,
        rejected: str | None = None,
    ) -> None:
        message = self.config.messages.get(key, *replacements)
        values = None if rejected is None else {"rejected": rejected}
        self.errors.add(ValidationError.validation(message, location, values=values))

    def report_service_unavailable(self, cause: Exception) -> None:
        message = self.config.messages.get(MessageKey.SERVICE_UNAVAILABLE)
        self.errors.add(ValidationError.service(message, values={"cause": str(cause)}))


def whole_years_between(start: date, end: date) -> int:
    """Completed calendar years from start to end (negative if end precedes start)."""
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


def check_required_text(
    ctx: RuleContext,
    value: str | None,
    *,
    location: str,
    max_length: int,
    blank_key: str,
    length_key: str,
    characters_key: str,
    charset: CharsetFn,
) -> None:
    if value is None or field_rules.is_blank(value):
        ctx.report(blank_key, location)
        return
    check_optional_text(
        ctx,
        value,
        location=location,
        max_length=max_length,
        length_key=length_key,
        characters_key=characters_key,
        charset=charset,
    )


def check_optional_text(
    ctx: RuleContext,
    value: str | None,
    *,
    location: str,
    max_length: int,
    length_key: str,
    characters_key: str,
    charset: CharsetFn,
) -> None:
    """Length and character checks for a value that may be omitted."""
    if value is None or field_rules.is_blank(value):
        return
    if not field_rules.within_length(value, max_length):
        ctx.report(length_key, location, rejected=value)
    if not charset(value):
        ctx.report(characters_key, location, rejected=value)


def check_date_present_and_not_future(
    ctx: RuleContext,
    value: date | None,
    *,
    today: date,
    location: str,
    missing_key: str,
    future_key: str,
) -> None:
    if value is None:
        ctx.report(missing_key, location)
    elif value > today:
        ctx.report(future_key, location, rejected=value.isoformat())


def check_date_on_or_after(
    ctx: RuleContext,
    value: date,
    earliest: date,
    *,
    key: str,
    location: str,
) -> None:
    if value < earliest:
        ctx.report(key, location, rejected=value.isoformat())


def check_company_not_dissolved(
    ctx: RuleContext,
    profile: CompanyProfileSnapshot,
    *,
    dissolved_key: str = MessageKey.COMPANY_DISSOLVED,
    cessation_key: str = MessageKey.COMPANY_DISSOLVED,
) -> None:
    """Report a dissolved status, or failing that a pending cessation date."""
    if profile.status is None:
        logger.error(
            "Company status missing for %s; skipping dissolved check", profile.company_number
        )
        return
    if profile.status == "dissolved":
        ctx.report(dissolved_key)
    elif profile.date_of_cessation is not None:
        ctx.report(cessation_key)


def check_company_type_permitted(
    ctx: RuleContext,
    profile: CompanyProfileSnapshot,
    *,
    key: str = MessageKey.COMPANY_TYPE_NOT_PERMITTED,
) -> None:
    company_type = profile.company_type
    if company_type is None:
        logger.error("Company type missing for %s; skipping type check", profile.company_number)
        return
    if company_type not in ctx.config.allowed_company_types:
        ctx.report(key, None, describe_company_type(company_type))


def check_officer_role_permitted(
    ctx: RuleContext, appointment: OfficerAppointmentSnapshot
) -> None:
    role = appointment.officer_role
    if role is None:
        logger.error("Officer role missing on appointment record; skipping role check")
        return
    if role not in ctx.config.allowed_officer_roles:
        ctx.report(MessageKey.OFFICER_ROLE)


def check_officer_not_terminated(
    ctx: RuleContext, appointment: OfficerAppointmentSnapshot
) -> None:
    if appointment.resigned_on is not None:
        ctx.report(
            MessageKey.DIRECTOR_ALREADY_REMOVED,
            "$.reference_appointment_id",
            appointment.director_name,
        )


def check_on_or_after_incorporation(
    ctx: RuleContext,
    value: date | None,
    profile: CompanyProfileSnapshot,
    *,
    key: str,
    location: str,
    missing_key: str | None = None,
) -> None:
    """Compare a filing date with the incorporation date, skipping when it is unknown."""
    incorporated = profile.date_of_creation
    if incorporated is None:
        logger.error(
            "Incorporation date missing for %s; skipping incorporation check",
            profile.company_number,
        )
        return
    if value is None:
        if missing_key is not None:
            ctx.report(missing_key, location)
        return
    check_date_on_or_after(ctx, value, incorporated, key=key, location=location)
