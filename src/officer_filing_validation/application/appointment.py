"""Validation of new director appointment filings.

Field rules always run in full. The only early exits are a blank company
number on the transaction and a failed company profile lookup; errors found
before either exit are kept.

Usage example:
    from officer_filing_validation.application.appointment import AppointmentValidator

    validator = AppointmentValidator(gateway=gateway, config=ValidationConfig.from_env())
    result = validator.validate(submission, transaction=transaction, token=token)
    if result.has_errors():
        ...
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from ..config import ValidationConfig
from ..domain import field_rules
from ..domain.address import validate_address
from ..domain.errors import ValidationResult
from ..domain.filing import CompanyProfileSnapshot, FilingSubmission, Transaction
from ..domain.messages import AddressContext, MessageKey
from ..domain.rules import (
    MAX_AGE,
    MIN_AGE,
    RuleContext,
    check_company_not_dissolved,
    check_company_type_permitted,
    check_date_present_and_not_future,
    check_on_or_after_incorporation,
    check_optional_text,
    check_required_text,
    whole_years_between,
)
from ..exceptions import NotFoundError, ServiceUnavailableError
from ..observability import get_logger
from ..protocols import CompanyDataGateway

logger = get_logger("officer_filing_validation.application.appointment")

FIRST_NAME_MAX_LENGTH = 50
LAST_NAME_MAX_LENGTH = 160
MIDDLE_NAME_MAX_LENGTH = 50
TITLE_MAX_LENGTH = 50
FORMER_NAMES_MAX_LENGTH = 160
OCCUPATION_MAX_LENGTH = 100
NATIONALITIES_MAX_LENGTH = 50

_NATIONALITY_LENGTH_KEYS = {
    1: MessageKey.NATIONALITY_LENGTH,
    2: MessageKey.NATIONALITY_LENGTH49,
    3: MessageKey.NATIONALITY_LENGTH48,
}


class AppointmentValidator:
    """Validate a director appointment against field rules and the company profile."""

    def __init__(
        self,
        *,
        gateway: CompanyDataGateway,
        config: ValidationConfig,
        today_fn: Callable[[], date] = date.today,
    ) -> None:
        self._gateway = gateway
        self._config = config
        self._today_fn = today_fn

    def validate(
        self, submission: FilingSubmission, *, transaction: Transaction, token: str
    ) -> ValidationResult:
        ctx = RuleContext(errors=ValidationResult(), config=self._config)
        today = self._today_fn()

        self._validate_fields(ctx, submission, today)

        company_number = transaction.company_number
        if company_number is None or field_rules.is_blank(company_number):
            ctx.report(MessageKey.COMPANY_NUMBER_BLANK)
            return self._finish(ctx, transaction)

        if not submission.is_home_address_same_as_service_address:
            validate_address(
                AddressContext.RESIDENTIAL,
                ctx,
                submission.residential_address,
                path="$.residential_address",
            )
        if not submission.is_service_address_same_as_registered_office_address:
            validate_address(
                AddressContext.CORRESPONDENCE,
                ctx,
                submission.service_address,
                path="$.service_address",
            )

        profile = self._fetch_company_profile(ctx, transaction, company_number, token)
        if profile is None:
            return self._finish(ctx, transaction)

        check_company_not_dissolved(ctx, profile)
        check_company_type_permitted(ctx, profile)
        check_on_or_after_incorporation(
            ctx,
            submission.appointed_on,
            profile,
            key=MessageKey.APPOINTMENT_DATE_AFTER_INCORPORATION_DATE,
            location="$.appointed_on",
            missing_key=MessageKey.APPOINTMENT_DATE_MISSING,
        )
        return self._finish(ctx, transaction)

    def _fetch_company_profile(
        self,
        ctx: RuleContext,
        transaction: Transaction,
        company_number: str,
        token: str,
    ) -> CompanyProfileSnapshot | None:
        try:
            return self._gateway.get_company_profile(transaction.id, company_number, token)
        except ServiceUnavailableError as exc:
            logger.warning("Company profile service unavailable for %s: %s", company_number, exc)
            ctx.report_service_unavailable(exc)
        except NotFoundError as exc:
            logger.info("Company profile not found for %s: %s", company_number, exc)
            ctx.report(MessageKey.CANNOT_FIND_COMPANY)
        return None

    def _validate_fields(self, ctx: RuleContext, submission: FilingSubmission, today: date) -> None:
        _validate_names(ctx, submission)
        _validate_nationalities(ctx, submission)
        check_optional_text(
            ctx,
            submission.occupation,
            location="$.occupation",
            max_length=OCCUPATION_MAX_LENGTH,
            length_key=MessageKey.OCCUPATION_LENGTH,
            characters_key=MessageKey.OCCUPATION_CHARACTERS,
            charset=field_rules.matches_allowed_character_set,
        )
        _validate_date_of_birth(ctx, submission, today)
        check_date_present_and_not_future(
            ctx,
            submission.appointed_on,
            today=today,
            location="$.appointed_on",
            missing_key=MessageKey.APPOINTMENT_DATE_MISSING,
            future_key=MessageKey.APPOINTMENT_DATE_IN_PAST,
        )
        if submission.protected_details is None:
            ctx.report(MessageKey.PROTECTED_DETAILS_MISSING, "$.protected_details")
        if submission.consent_to_act is None:
            ctx.report(MessageKey.CONSENT_TO_ACT_MISSING, "$.consent_to_act")
        elif not submission.consent_to_act:
            ctx.report(MessageKey.CONSENT_TO_ACT_FALSE, "$.consent_to_act")
        if (
            submission.is_home_address_same_as_service_address
            and submission.is_service_address_same_as_registered_office_address
        ):
            ctx.report(MessageKey.ADDRESS_LINKS_MULTIPLE_FLAGS)

    def _finish(self, ctx: RuleContext, transaction: Transaction) -> ValidationResult:
        logger.info(
            "Appointment validation for transaction %s finished with %s errors",
            transaction.id,
            ctx.errors.error_count,
        )
        return ctx.errors.seal()


def _validate_names(ctx: RuleContext, submission: FilingSubmission) -> None:
    names = field_rules.matches_name_character_set
    check_required_text(
        ctx,
        submission.first_name,
        location="$.first_name",
        max_length=FIRST_NAME_MAX_LENGTH,
        blank_key=MessageKey.FIRST_NAME_BLANK,
        length_key=MessageKey.FIRST_NAME_LENGTH,
        characters_key=MessageKey.FIRST_NAME_CHARACTERS,
        charset=names,
    )
    check_required_text(
        ctx,
        submission.last_name,
        location="$.last_name",
        max_length=LAST_NAME_MAX_LENGTH,
        blank_key=MessageKey.LAST_NAME_BLANK,
        length_key=MessageKey.LAST_NAME_LENGTH,
        characters_key=MessageKey.LAST_NAME_CHARACTERS,
        charset=names,
    )
    check_optional_text(
        ctx,
        submission.middle_names,
        location="$.middle_names",
        max_length=MIDDLE_NAME_MAX_LENGTH,
        length_key=MessageKey.MIDDLE_NAME_LENGTH,
        characters_key=MessageKey.MIDDLE_NAME_CHARACTERS,
        charset=names,
    )
    check_optional_text(
        ctx,
        submission.title,
        location="$.title",
        max_length=TITLE_MAX_LENGTH,
        length_key=MessageKey.TITLE_LENGTH,
        characters_key=MessageKey.TITLE_CHARACTERS,
        charset=names,
    )
    check_optional_text(
        ctx,
        submission.former_names,
        location="$.former_names",
        max_length=FORMER_NAMES_MAX_LENGTH,
        length_key=MessageKey.FORMER_NAMES_LENGTH,
        characters_key=MessageKey.FORMER_NAMES_CHARACTERS,
        charset=names,
    )


def _validate_date_of_birth(ctx: RuleContext, submission: FilingSubmission, today: date) -> None:
    if submission.date_of_birth is None:
        ctx.report(MessageKey.DATE_OF_BIRTH_BLANK, "$.date_of_birth")
        return
    born = submission.date_of_birth.as_date()

    age_now = whole_years_between(born, today)
    if age_now >= MAX_AGE:
        ctx.report(MessageKey.DATE_OF_BIRTH_OVERAGE, "$.date_of_birth")
    if age_now < MIN_AGE:
        ctx.report(MessageKey.DATE_OF_BIRTH_UNDERAGE, "$.date_of_birth")

    if submission.appointed_on is None:
        return
    age_at_appointment = whole_years_between(born, submission.appointed_on)
    if age_at_appointment >= MAX_AGE:
        ctx.report(MessageKey.DATE_OF_BIRTH_OVERAGE, "$.date_of_birth")
    if age_at_appointment < MIN_AGE:
        ctx.report(MessageKey.APPOINTMENT_DATE_UNDERAGE, "$.appointed_on")


def _check_nationality(ctx: RuleContext, value: str, location: str) -> None:
    if not field_rules.matches_allowed_character_set(value):
        ctx.report(MessageKey.NATIONALITY_CHARACTERS, location, rejected=value)
    if not field_rules.contains_ignore_case(ctx.config.allowed_nationalities, value):
        ctx.report(MessageKey.INVALID_NATIONALITY, location, rejected=value)


def _validate_nationalities(ctx: RuleContext, submission: FilingSubmission) -> None:
    first, second, third = (
        None if value is None or field_rules.is_blank(value) else value
        for value in submission.nationalities
    )

    if first is None:
        ctx.report(MessageKey.NATIONALITY_BLANK, "$.nationality1")
    else:
        _check_nationality(ctx, first, "$.nationality1")

    if second is not None:
        _check_nationality(ctx, second, "$.nationality2")
        if first is not None and field_rules.equals_ignore_case(first, second):
            ctx.report(MessageKey.DUPLICATE_NATIONALITY2, "$.nationality2", rejected=second)

    if third is not None:
        _check_nationality(ctx, third, "$.nationality3")
        duplicates_earlier = any(
            earlier is not None and field_rules.equals_ignore_case(earlier, third)
            for earlier in (first, second)
        )
        if duplicates_earlier:
            ctx.report(MessageKey.DUPLICATE_NATIONALITY3, "$.nationality3", rejected=third)

    populated = [value for value in (first, second, third) if value is not None]
    if not populated:
        return
    combined = ",".join(value.replace(",", "").strip() for value in populated)
    if not field_rules.within_length(combined, NATIONALITIES_MAX_LENGTH):
        ctx.report(_NATIONALITY_LENGTH_KEYS[len(populated)], "$.nationality1", rejected=combined)
