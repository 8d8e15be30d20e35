"""Pydantic-based validation helpers for inbound IO payloads.

Registry responses and filing submissions are validated against TypedDict
shapes before being mapped onto the frozen domain dataclasses.
"""

from __future__ import annotations

from datetime import date
from typing import TypedDict

from pydantic import TypeAdapter, ValidationError

from ...domain.filing import (
    Address,
    CompanyProfileSnapshot,
    DateOfBirth,
    FilingSubmission,
    OfficerAppointmentSnapshot,
    Transaction,
)
from ...exceptions import InvalidDateOfBirthError


class IncomingDataError(ValueError):
    """Raised when inbound data fails validation."""


class DateOfBirthInput(TypedDict, total=False):
    day: int | None
    month: int | None
    year: int | None


class AddressInput(TypedDict, total=False):
    premises: str | None
    address_line_1: str | None
    address_line_2: str | None
    locality: str | None
    region: str | None
    country: str | None
    postal_code: str | None


class FilingSubmissionInput(TypedDict, total=False):
    first_name: str | None
    middle_names: str | None
    last_name: str | None
    title: str | None
    former_names: str | None
    date_of_birth: DateOfBirthInput | None
    nationality1: str | None
    nationality2: str | None
    nationality3: str | None
    occupation: str | None
    appointed_on: date | None
    resigned_on: date | None
    protected_details: bool | None
    consent_to_act: bool | None
    residential_address: AddressInput | None
    service_address: AddressInput | None
    is_home_address_same_as_service_address: bool | None
    is_service_address_same_as_registered_office_address: bool | None
    reference_etag: str | None
    reference_appointment_id: str | None


class CompanyProfileInput(TypedDict, total=False):
    company_number: str | None
    company_name: str | None
    company_status: str | None
    type: str | None
    date_of_creation: date | None
    date_of_cessation: date | None


class AppointmentFullRecordInput(TypedDict, total=False):
    officer_role: str | None
    forename: str | None
    other_forenames: str | None
    surname: str | None
    date_of_birth: DateOfBirthInput | None
    appointed_on: date | None
    appointed_before: date | None
    is_pre_1992_appointment: bool | None
    etag: str | None
    resigned_on: date | None


class TransactionInput(TypedDict, total=False):
    id: str | None
    company_number: str | None
    status: str | None


def validate_as[SchemaT](schema: type[SchemaT], payload: object) -> SchemaT:
    try:
        return TypeAdapter(schema).validate_python(payload)
    except ValidationError as exc:
        message = f"Invalid payload for {schema}."
        raise IncomingDataError(message) from exc


def validate_json_as[SchemaT](schema: type[SchemaT], payload: str | bytes | bytearray) -> SchemaT:
    try:
        return TypeAdapter(schema).validate_json(payload)
    except ValidationError as exc:
        message = f"Invalid JSON payload for {schema}."
        raise IncomingDataError(message) from exc


def _date_of_birth(value: DateOfBirthInput | None, *, required_day: bool) -> DateOfBirth | None:
    if value is None:
        return None
    day = value.get("day")
    month = value.get("month")
    year = value.get("year")
    if month is None or year is None:
        return None
    if day is None:
        if required_day:
            return None
        # Registry records only disclose month and year.
        day = 1
    try:
        return DateOfBirth(day=day, month=month, year=year)
    except InvalidDateOfBirthError as exc:
        raise IncomingDataError(str(exc)) from exc


def _address(value: AddressInput | None) -> Address | None:
    if value is None:
        return None
    return Address(
        premises=value.get("premises"),
        address_line_1=value.get("address_line_1"),
        address_line_2=value.get("address_line_2"),
        locality=value.get("locality"),
        region=value.get("region"),
        country=value.get("country"),
        postal_code=value.get("postal_code"),
    )


def parse_filing_submission(payload: object) -> FilingSubmission:
    data = validate_as(FilingSubmissionInput, payload)
    return FilingSubmission(
        first_name=data.get("first_name"),
        middle_names=data.get("middle_names"),
        last_name=data.get("last_name"),
        title=data.get("title"),
        former_names=data.get("former_names"),
        date_of_birth=_date_of_birth(data.get("date_of_birth"), required_day=True),
        nationality1=data.get("nationality1"),
        nationality2=data.get("nationality2"),
        nationality3=data.get("nationality3"),
        occupation=data.get("occupation"),
        appointed_on=data.get("appointed_on"),
        resigned_on=data.get("resigned_on"),
        protected_details=data.get("protected_details"),
        consent_to_act=data.get("consent_to_act"),
        residential_address=_address(data.get("residential_address")),
        service_address=_address(data.get("service_address")),
        is_home_address_same_as_service_address=data.get(
            "is_home_address_same_as_service_address"
        ),
        is_service_address_same_as_registered_office_address=data.get(
            "is_service_address_same_as_registered_office_address"
        ),
        reference_etag=data.get("reference_etag"),
        reference_appointment_id=data.get("reference_appointment_id"),
    )


def parse_company_profile(payload: object, *, company_number: str) -> CompanyProfileSnapshot:
    data = validate_as(CompanyProfileInput, payload)
    return CompanyProfileSnapshot(
        company_number=data.get("company_number") or company_number,
        company_name=data.get("company_name"),
        status=data.get("company_status"),
        date_of_creation=data.get("date_of_creation"),
        date_of_cessation=data.get("date_of_cessation"),
        company_type=data.get("type"),
    )


def parse_officer_appointment(payload: object) -> OfficerAppointmentSnapshot:
    data = validate_as(AppointmentFullRecordInput, payload)
    return OfficerAppointmentSnapshot(
        officer_role=data.get("officer_role"),
        forename=data.get("forename"),
        other_forenames=data.get("other_forenames"),
        surname=data.get("surname"),
        date_of_birth=_date_of_birth(data.get("date_of_birth"), required_day=False),
        appointed_on=data.get("appointed_on"),
        appointed_before=data.get("appointed_before"),
        is_pre_1992_appointment=bool(data.get("is_pre_1992_appointment")),
        etag=data.get("etag"),
        resigned_on=data.get("resigned_on"),
    )


def parse_transaction(payload: object, *, transaction_id: str) -> Transaction:
    data = validate_as(TransactionInput, payload)
    return Transaction(
        id=data.get("id") or transaction_id,
        company_number=data.get("company_number"),
        status=data.get("status"),
    )
