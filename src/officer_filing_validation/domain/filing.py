"""Immutable filing submissions and registry snapshots.

Submissions arrive from the filing API; snapshots are read-only views of the
company profile, officer appointment and transaction records fetched for a
single validation pass.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..exceptions import InvalidDateOfBirthError


@dataclass(frozen=True)
class DateOfBirth:
    """Day/month/year tuple as submitted; always forms a real calendar date."""

    day: int
    month: int
    year: int

    def __post_init__(self) -> None:
        try:
            date(self.year, self.month, self.day)
        except ValueError as exc:
            raise InvalidDateOfBirthError(self.day, self.month, self.year) from exc

    def as_date(self) -> date:
        return date(self.year, self.month, self.day)


@dataclass(frozen=True)
class Address:
    premises: str | None = None
    address_line_1: str | None = None
    address_line_2: str | None = None
    locality: str | None = None
    region: str | None = None
    country: str | None = None
    postal_code: str | None = None


@dataclass(frozen=True)
class FilingSubmission:
    """One officer filing as submitted by the presenter."""

    first_name: str | None = None
    middle_names: str | None = None
    last_name: str | None = None
    title: str | None = None
    former_names: str | None = None
    date_of_birth: DateOfBirth | None = None
    nationality1: str | None = None
    nationality2: str | None = None
    nationality3: str | None = None
    occupation: str | None = None
    appointed_on: date | None = None
    resigned_on: date | None = None
    protected_details: bool | None = None
    consent_to_act: bool | None = None
    residential_address: Address | None = None
    service_address: Address | None = None
    is_home_address_same_as_service_address: bool | None = None
    is_service_address_same_as_registered_office_address: bool | None = None
    reference_etag: str | None = None
    reference_appointment_id: str | None = None

    @property
    def nationalities(self) -> tuple[str | None, str | None, str | None]:
        return (self.nationality1, self.nationality2, self.nationality3)


@dataclass(frozen=True)
class CompanyProfileSnapshot:
    company_number: str
    company_name: str | None = None
    status: str | None = None
    date_of_creation: date | None = None
    date_of_cessation: date | None = None
    company_type: str | None = None


@dataclass(frozen=True)
class OfficerAppointmentSnapshot:
    """Existing appointment record for the officer being removed.

    Appointments made before 1992 carry ``appointed_before`` instead of an
    exact ``appointed_on`` date. ``resigned_on`` is set once a removal has
    already been filed.
    """

    officer_role: str | None = None
    forename: str | None = None
    other_forenames: str | None = None
    surname: str | None = None
    date_of_birth: DateOfBirth | None = None
    appointed_on: date | None = None
    appointed_before: date | None = None
    is_pre_1992_appointment: bool = False
    etag: str | None = None
    resigned_on: date | None = None

    @property
    def effective_appointed_on(self) -> date | None:
        if self.is_pre_1992_appointment:
            return self.appointed_before
        return self.appointed_on

    @property
    def director_name(self) -> str:
        if self.forename and self.surname:
            return f"{self.forename} {self.surname}"
        return "Director"


@dataclass(frozen=True)
class Transaction:
    id: str
    company_number: str | None = None
    status: str | None = None
