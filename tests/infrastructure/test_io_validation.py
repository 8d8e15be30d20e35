"""Tests for inbound payload validation and mapping."""

from datetime import date

import pytest

from officer_filing_validation.domain.filing import Address, DateOfBirth
from officer_filing_validation.infrastructure.io.validation import (
    IncomingDataError,
    parse_company_profile,
    parse_filing_submission,
    parse_officer_appointment,
    validate_json_as,
)


def test_parse_filing_submission_maps_nested_objects() -> None:
    submission = parse_filing_submission(
        {
            "first_name": "John",
            "date_of_birth": {"day": 12, "month": 5, "year": 1985},
            "appointed_on": "2023-05-01",
            "consent_to_act": True,
            "residential_address": {"premises": "9", "country": "Wales"},
            "reference_etag": "etag-1",
            "ignored_field": "value",
        }
    )

    assert submission.first_name == "John"
    assert submission.date_of_birth == DateOfBirth(day=12, month=5, year=1985)
    assert submission.appointed_on == date(2023, 5, 1)
    assert submission.consent_to_act is True
    assert submission.residential_address == Address(premises="9", country="Wales")
    assert submission.service_address is None
    assert submission.reference_etag == "etag-1"


def test_submission_date_of_birth_without_day_is_treated_as_missing() -> None:
    submission = parse_filing_submission({"date_of_birth": {"month": 5, "year": 1985}})

    assert submission.date_of_birth is None


def test_impossible_date_of_birth_is_rejected() -> None:
    with pytest.raises(IncomingDataError, match="day=31, month=2"):
        parse_filing_submission({"date_of_birth": {"day": 31, "month": 2, "year": 1985}})


@pytest.mark.parametrize(
    "payload",
    [
        {"appointed_on": "yesterday"},
        {"consent_to_act": "perhaps"},
        {"residential_address": "9 Crown Way"},
        ["not", "an", "object"],
    ],
)
def test_malformed_submission_raises(payload: object) -> None:
    with pytest.raises(IncomingDataError):
        parse_filing_submission(payload)


def test_parse_company_profile_falls_back_to_requested_number() -> None:
    profile = parse_company_profile(
        {"company_status": "dissolved", "date_of_cessation": "2022-01-31"},
        company_number="01234567",
    )

    assert profile.company_number == "01234567"
    assert profile.status == "dissolved"
    assert profile.date_of_cessation == date(2022, 1, 31)


def test_parse_officer_appointment_defaults() -> None:
    appointment = parse_officer_appointment({"appointed_on": "2015-04-01"})

    assert appointment.is_pre_1992_appointment is False
    assert appointment.effective_appointed_on == date(2015, 4, 1)
    assert appointment.director_name == "Director"


def test_validate_json_as_rejects_non_objects() -> None:
    with pytest.raises(IncomingDataError):
        validate_json_as(dict[str, object], "[1, 2, 3]")
