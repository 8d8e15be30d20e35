"""Tests for termination (director removal) filing validation."""

from dataclasses import replace
from datetime import date

import pytest

from officer_filing_validation.application.termination import TerminationValidator
from officer_filing_validation.config import ValidationConfig
from officer_filing_validation.domain.errors import ErrorType, ValidationResult
from officer_filing_validation.domain.filing import (
    CompanyProfileSnapshot,
    FilingSubmission,
    OfficerAppointmentSnapshot,
    Transaction,
)
from officer_filing_validation.exceptions import (
    ServiceUnavailableError,
    TransactionServiceError,
)
from officer_filing_validation.infrastructure import CompaniesHouseGateway
from tests.fakes import FakeCompanyDataGateway, FakeHttpClient
from tests.support.results import error_messages

TODAY = date(2023, 6, 15)

_REMOVED_TOO_EARLY = (
    "You have entered a date too far in the past. Please check the date and resubmit"
)
_BEFORE_INCORPORATION = (
    "Date director was removed must be on or after the date the company was incorporated"
)
_BEFORE_APPOINTMENT = (
    "Date director was removed must be on or after the date the director was appointed"
)
_ETAG_OUT_OF_DATE = (
    "The Officers information is out of date. Please start the process again "
    "and make a new submission"
)


@pytest.fixture
def validator(
    fake_gateway: FakeCompanyDataGateway, validation_config: ValidationConfig
) -> TerminationValidator:
    return TerminationValidator(
        gateway=fake_gateway, config=validation_config, today_fn=lambda: TODAY
    )


def _validate(validator: TerminationValidator, submission: FilingSubmission) -> ValidationResult:
    return validator.validate(submission, transaction_id="123-456", token="token-1")


def test_valid_removal_has_no_errors(
    validator: TerminationValidator,
    valid_termination_submission: FilingSubmission,
    fake_gateway: FakeCompanyDataGateway,
) -> None:
    result = _validate(validator, valid_termination_submission)

    assert not result.has_errors()
    assert result.sealed
    assert [call[0] for call in fake_gateway.calls] == [
        "get_transaction",
        "get_officer_appointment",
        "get_company_profile",
    ]


def test_missing_reference_fields(
    validator: TerminationValidator, fake_gateway: FakeCompanyDataGateway
) -> None:
    result = _validate(validator, FilingSubmission())

    assert error_messages(result) == [
        "ETag must be completed",
        "Officer ID must be completed",
        "Enter the date the director was removed",
    ]
    assert not fake_gateway.called("get_officer_appointment")
    assert fake_gateway.called("get_company_profile")


def test_future_removal_date(
    validator: TerminationValidator, valid_termination_submission: FilingSubmission
) -> None:
    submission = replace(valid_termination_submission, resigned_on=date(2023, 6, 16))

    result = _validate(validator, submission)

    assert error_messages(result) == ["Enter a date that is today or in the past"]
    assert result.errors[0].location == "$.resigned_on"


def test_transaction_failure_is_a_service_error(
    validator: TerminationValidator,
    valid_termination_submission: FilingSubmission,
    fake_gateway: FakeCompanyDataGateway,
) -> None:
    fake_gateway.failures["get_transaction"] = TransactionServiceError("123-456", "HTTP 500")
    submission = replace(valid_termination_submission, reference_etag="")

    result = _validate(validator, submission)

    assert [error.type for error in result] == [ErrorType.VALIDATION, ErrorType.SERVICE]
    assert [call[0] for call in fake_gateway.calls] == ["get_transaction"]


def test_blank_company_number_on_transaction(
    validator: TerminationValidator,
    valid_termination_submission: FilingSubmission,
    fake_gateway: FakeCompanyDataGateway,
) -> None:
    fake_gateway.transactions["123-456"] = Transaction(id="123-456", company_number=None)

    result = _validate(validator, valid_termination_submission)

    assert error_messages(result) == ["The company number cannot be null or blank"]
    assert [call[0] for call in fake_gateway.calls] == ["get_transaction"]


def test_unknown_appointment_still_checks_company_type(
    validator: TerminationValidator,
    valid_termination_submission: FilingSubmission,
    fake_gateway: FakeCompanyDataGateway,
    company_profile: CompanyProfileSnapshot,
) -> None:
    fake_gateway.profiles[company_profile.company_number] = replace(
        company_profile, company_type="limited-partnership"
    )
    submission = replace(valid_termination_submission, reference_appointment_id="missing")

    result = _validate(validator, submission)

    assert error_messages(result) == [
        "Officer not found. Please confirm the details and resubmit",
        "You cannot remove an officer from a Limited partnership using this service",
    ]
    assert result.errors[0].location == "$.reference_appointment_id"


def test_appointment_service_unavailable(
    validator: TerminationValidator,
    valid_termination_submission: FilingSubmission,
    fake_gateway: FakeCompanyDataGateway,
) -> None:
    fake_gateway.failures["get_officer_appointment"] = ServiceUnavailableError("Appointments")

    result = _validate(validator, valid_termination_submission)

    assert [error.type for error in result] == [ErrorType.SERVICE]
    assert fake_gateway.called("get_company_profile")


def test_unknown_company_still_checks_appointment(
    validator: TerminationValidator,
    valid_termination_submission: FilingSubmission,
    fake_gateway: FakeCompanyDataGateway,
    appointment_record: OfficerAppointmentSnapshot,
) -> None:
    fake_gateway.profiles.clear()
    fake_gateway.appointments[("01234567", "appt-1")] = replace(
        appointment_record, officer_role="secretary"
    )

    result = _validate(validator, valid_termination_submission)

    assert error_messages(result) == ["We cannot find the company", "You can only remove directors"]


def test_every_date_and_record_problem_reported_together(
    validator: TerminationValidator,
    fake_gateway: FakeCompanyDataGateway,
    company_profile: CompanyProfileSnapshot,
    appointment_record: OfficerAppointmentSnapshot,
) -> None:
    fake_gateway.profiles[company_profile.company_number] = replace(
        company_profile, date_of_creation=date(2021, 3, 1), company_type="invalid-type"
    )
    fake_gateway.appointments[("01234567", "appt-1")] = replace(
        appointment_record, appointed_on=date(2021, 3, 1)
    )
    submission = FilingSubmission(
        resigned_on=date(1022, 9, 13),
        reference_etag="stale-etag",
        reference_appointment_id="appt-1",
    )

    result = _validate(validator, submission)

    assert result.error_count == 5
    assert set(error_messages(result)) == {
        _REMOVED_TOO_EARLY,
        _BEFORE_INCORPORATION,
        _BEFORE_APPOINTMENT,
        _ETAG_OUT_OF_DATE,
        "You cannot remove an officer from a invalid-type using this service",
    }
    assert all(error.type is ErrorType.VALIDATION for error in result)


def test_pre_1992_appointment_uses_appointed_before(
    validator: TerminationValidator,
    valid_termination_submission: FilingSubmission,
    fake_gateway: FakeCompanyDataGateway,
    appointment_record: OfficerAppointmentSnapshot,
) -> None:
    fake_gateway.appointments[("01234567", "appt-1")] = replace(
        appointment_record,
        appointed_on=None,
        appointed_before=date(2023, 2, 1),
        is_pre_1992_appointment=True,
    )

    result = _validate(validator, valid_termination_submission)

    assert error_messages(result) == [_BEFORE_APPOINTMENT]


def test_removal_on_appointment_day_is_accepted(
    validator: TerminationValidator,
    valid_termination_submission: FilingSubmission,
    appointment_record: OfficerAppointmentSnapshot,
) -> None:
    submission = replace(valid_termination_submission, resigned_on=appointment_record.appointed_on)

    result = _validate(validator, submission)

    assert not result.has_errors()


@pytest.mark.parametrize(
    ("status", "cessation", "message"),
    [
        ("dissolved", None, "You cannot remove an officer from a company that has been dissolved"),
        (
            "dissolved",
            date(2023, 3, 1),
            "You cannot remove an officer from a company that has been dissolved",
        ),
        (
            "active",
            date(2023, 3, 1),
            "You cannot remove an officer from a company that is about to be dissolved",
        ),
    ],
)
def test_dissolved_company(
    validator: TerminationValidator,
    valid_termination_submission: FilingSubmission,
    fake_gateway: FakeCompanyDataGateway,
    company_profile: CompanyProfileSnapshot,
    status: str,
    cessation: date | None,
    message: str,
) -> None:
    fake_gateway.profiles[company_profile.company_number] = replace(
        company_profile, status=status, date_of_cessation=cessation
    )

    result = _validate(validator, valid_termination_submission)

    assert error_messages(result) == [message]
    assert result.errors[0].location is None


def test_officer_already_removed(
    validator: TerminationValidator,
    valid_termination_submission: FilingSubmission,
    fake_gateway: FakeCompanyDataGateway,
    appointment_record: OfficerAppointmentSnapshot,
) -> None:
    fake_gateway.appointments[("01234567", "appt-1")] = replace(
        appointment_record, resigned_on=date(2023, 1, 5)
    )

    result = _validate(validator, valid_termination_submission)

    assert error_messages(result) == [
        "An application to remove Jane Doe has already been submitted"
    ]
    assert result.errors[0].location == "$.reference_appointment_id"


class TestResignationFloor:
    """Removal dates before 1 October 2009 are too far in the past."""

    @pytest.fixture(autouse=True)
    def early_records(
        self,
        fake_gateway: FakeCompanyDataGateway,
        company_profile: CompanyProfileSnapshot,
        appointment_record: OfficerAppointmentSnapshot,
    ) -> None:
        fake_gateway.profiles[company_profile.company_number] = replace(
            company_profile, date_of_creation=date(2000, 1, 1)
        )
        fake_gateway.appointments[("01234567", "appt-1")] = replace(
            appointment_record, appointed_on=date(2001, 1, 1)
        )

    @pytest.mark.parametrize("resigned_on", [date(2005, 1, 1), date(2009, 9, 30)])
    def test_date_before_floor_is_the_only_error(
        self,
        validator: TerminationValidator,
        valid_termination_submission: FilingSubmission,
        resigned_on: date,
    ) -> None:
        submission = replace(valid_termination_submission, resigned_on=resigned_on)

        result = _validate(validator, submission)

        assert error_messages(result) == [_REMOVED_TOO_EARLY]
        assert result.errors[0].location == "$.resigned_on"

    def test_floor_date_is_accepted(
        self,
        validator: TerminationValidator,
        valid_termination_submission: FilingSubmission,
    ) -> None:
        submission = replace(valid_termination_submission, resigned_on=date(2009, 10, 1))

        result = _validate(validator, submission)

        assert not result.has_errors()


def test_repeated_validation_gives_identical_results(
    validator: TerminationValidator, valid_termination_submission: FilingSubmission
) -> None:
    submission = replace(
        valid_termination_submission, reference_etag="stale-etag", resigned_on=date(2005, 1, 1)
    )

    first = _validate(validator, submission)
    second = _validate(validator, submission)

    assert first.has_errors()
    assert first == second
    assert first.to_list() == second.to_list()


def test_malformed_registry_record_keeps_other_errors(
    validation_config: ValidationConfig, valid_termination_submission: FilingSubmission
) -> None:
    http_client = FakeHttpClient(
        responses={
            "/transactions/123-456": {"company_number": "01234567"},
            "/appointments/appt-1/full_record": {"appointed_on": "yesterday"},
            "/company/01234567": {
                "company_status": "active",
                "type": "ltd",
                "date_of_creation": "2010-03-01",
            },
        }
    )
    gateway = CompaniesHouseGateway(
        http_client=http_client,
        api_url="https://api.example.com",
        private_api_url="https://api.example.com",
        passthrough_header="ERIC-Access-Token",
    )
    validator = TerminationValidator(
        gateway=gateway, config=validation_config, today_fn=lambda: TODAY
    )
    submission = replace(valid_termination_submission, reference_etag=" ")

    result = _validate(validator, submission)

    assert [error.type for error in result] == [ErrorType.VALIDATION, ErrorType.SERVICE]
    assert error_messages(result)[0] == "ETag must be completed"
    assert http_client.calls[-1][0] == "https://api.example.com/company/01234567"
