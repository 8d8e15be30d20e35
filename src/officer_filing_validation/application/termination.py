"""Validation of director removal (termination) filings.

The transaction, the referenced appointment and the company profile are
fetched in that order. A failed appointment lookup is reported and leaves
the appointment unresolved; the company profile is still fetched so that
company-level problems are reported in the same pass.

Usage example:
    from officer_filing_validation.application.termination import TerminationValidator

    validator = TerminationValidator(gateway=gateway, config=config)
    result = validator.validate(submission, transaction_id="123-456", token=token)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from ..config import ValidationConfig
from ..domain import field_rules
from ..domain.errors import ValidationResult
from ..domain.filing import (
    CompanyProfileSnapshot,
    FilingSubmission,
    OfficerAppointmentSnapshot,
    Transaction,
)
from ..domain.messages import MessageKey
from ..domain.reference_data import MIN_RESIGNATION_DATE
from ..domain.rules import (
    RuleContext,
    check_company_not_dissolved,
    check_company_type_permitted,
    check_date_on_or_after,
    check_date_present_and_not_future,
    check_officer_not_terminated,
    check_officer_role_permitted,
    check_on_or_after_incorporation,
)
from ..exceptions import NotFoundError, ServiceUnavailableError, TransactionServiceError
from ..observability import get_logger
from ..protocols import CompanyDataGateway

logger = get_logger("officer_filing_validation.application.termination")

_RESIGNED_ON = "$.resigned_on"


@dataclass(frozen=True)
class _ResolvedRecords:
    """Registry records for one pass; ``None`` means the lookup failed or was skipped."""

    appointment: OfficerAppointmentSnapshot | None
    profile: CompanyProfileSnapshot | None


class TerminationValidator:
    """Validate the removal of an existing director."""

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
        self, submission: FilingSubmission, *, transaction_id: str, token: str
    ) -> ValidationResult:
        ctx = RuleContext(errors=ValidationResult(), config=self._config)
        self._validate_fields(ctx, submission)

        transaction = self._fetch_transaction(ctx, transaction_id, token)
        if transaction is None:
            return self._finish(ctx, transaction_id)
        company_number = transaction.company_number
        if company_number is None or field_rules.is_blank(company_number):
            ctx.report(MessageKey.COMPANY_NUMBER_BLANK)
            return self._finish(ctx, transaction_id)

        # The profile is fetched even when the appointment lookup failed.
        appointment = self._resolve_appointment(
            ctx, submission, transaction, company_number, token
        )
        profile = self._fetch_company_profile(ctx, transaction, company_number, token)
        records = _ResolvedRecords(appointment=appointment, profile=profile)

        if records.appointment is not None:
            self._validate_against_records(ctx, submission, records.appointment, records.profile)
        if records.profile is not None:
            check_company_type_permitted(
                ctx, records.profile, key=MessageKey.COMPANY_TYPE_NOT_PERMITTED_TERMINATION
            )
        return self._finish(ctx, transaction_id)

    def _validate_fields(self, ctx: RuleContext, submission: FilingSubmission) -> None:
        if field_rules.is_blank(submission.reference_etag):
            ctx.report(MessageKey.ETAG_BLANK, "$.reference_etag")
        if field_rules.is_blank(submission.reference_appointment_id):
            ctx.report(MessageKey.OFFICER_ID_BLANK, "$.reference_appointment_id")
        check_date_present_and_not_future(
            ctx,
            submission.resigned_on,
            today=self._today_fn(),
            location=_RESIGNED_ON,
            missing_key=MessageKey.REMOVAL_DATE_MISSING,
            future_key=MessageKey.REMOVAL_DATE_IN_PAST,
        )

    def _validate_against_records(
        self,
        ctx: RuleContext,
        submission: FilingSubmission,
        appointment: OfficerAppointmentSnapshot,
        profile: CompanyProfileSnapshot | None,
    ) -> None:
        check_officer_not_terminated(ctx, appointment)
        resigned_on = submission.resigned_on
        if resigned_on is not None:
            check_date_on_or_after(
                ctx,
                resigned_on,
                MIN_RESIGNATION_DATE,
                key=MessageKey.REMOVAL_DATE_AFTER_2009,
                location=_RESIGNED_ON,
            )
            if profile is not None:
                check_on_or_after_incorporation(
                    ctx,
                    resigned_on,
                    profile,
                    key=MessageKey.REMOVAL_DATE_AFTER_INCORPORATION_DATE,
                    location=_RESIGNED_ON,
                )
            appointed_on = appointment.effective_appointed_on
            if appointed_on is None:
                logger.error("Appointment date missing on appointment record; skipping check")
            else:
                check_date_on_or_after(
                    ctx,
                    resigned_on,
                    appointed_on,
                    key=MessageKey.REMOVAL_DATE_AFTER_APPOINTMENT_DATE,
                    location=_RESIGNED_ON,
                )
        if profile is not None:
            check_company_not_dissolved(
                ctx,
                profile,
                dissolved_key=MessageKey.COMPANY_DISSOLVED_TERMINATION,
                cessation_key=MessageKey.COMPANY_ABOUT_TO_BE_DISSOLVED,
            )

        reference_etag = submission.reference_etag
        if reference_etag is not None and not field_rules.is_blank(reference_etag):
            if reference_etag != appointment.etag:
                ctx.report(MessageKey.ETAG_INVALID, "$.reference_etag")
        check_officer_role_permitted(ctx, appointment)

    def _fetch_transaction(
        self, ctx: RuleContext, transaction_id: str, token: str
    ) -> Transaction | None:
        try:
            return self._gateway.get_transaction(transaction_id, token)
        except TransactionServiceError as exc:
            logger.warning("Transaction %s could not be retrieved: %s", transaction_id, exc)
            ctx.report_service_unavailable(exc)
            return None

    def _resolve_appointment(
        self,
        ctx: RuleContext,
        submission: FilingSubmission,
        transaction: Transaction,
        company_number: str,
        token: str,
    ) -> OfficerAppointmentSnapshot | None:
        appointment_id = submission.reference_appointment_id
        if appointment_id is None or field_rules.is_blank(appointment_id):
            return None
        try:
            return self._gateway.get_officer_appointment(
                transaction.id, company_number, appointment_id, token
            )
        except ServiceUnavailableError as exc:
            logger.warning("Appointment service unavailable for %s: %s", company_number, exc)
            ctx.report_service_unavailable(exc)
        except NotFoundError as exc:
            logger.info("Appointment %s not found for %s: %s", appointment_id, company_number, exc)
            ctx.report(MessageKey.DIRECTOR_NOT_FOUND, "$.reference_appointment_id")
        return None

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

    def _finish(self, ctx: RuleContext, transaction_id: str) -> ValidationResult:
        logger.info(
            "Termination validation for transaction %s finished with %s errors",
            transaction_id,
            ctx.errors.error_count,
        )
        return ctx.errors.seal()
