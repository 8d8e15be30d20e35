"""Pytest fixtures shared across the suite.

All tests are network-isolated - socket connections are blocked by default.
"""

from __future__ import annotations

import socket
from collections.abc import Iterator
from datetime import date

import pytest

from officer_filing_validation.config import ValidationConfig
from officer_filing_validation.domain.errors import ValidationResult
from officer_filing_validation.domain.filing import (
    Address,
    CompanyProfileSnapshot,
    DateOfBirth,
    FilingSubmission,
    OfficerAppointmentSnapshot,
    Transaction,
)
from officer_filing_validation.domain.rules import RuleContext
from tests.fakes import FakeCompanyDataGateway
from tests.support.errors import NetworkIsolationError

# =============================================================================
# Network Isolation - Block all socket connections in tests
# =============================================================================


def _blocked_socket_connect(self: socket.socket, *args: object, **kwargs: object) -> None:
    """Raise an error if any test tries to make a real network connection."""
    _ = (self, kwargs)
    raise NetworkIsolationError(str(args))


@pytest.fixture(autouse=True)
def block_network_access(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Block all network access in tests.

    Tests that need HTTP should use FakeHttpClient or MagicMock(spec=requests.Session).
    """
    monkeypatch.setattr(socket.socket, "connect", _blocked_socket_connect)
    yield


# =============================================================================
# Reference data and records
# =============================================================================


@pytest.fixture
def validation_config() -> ValidationConfig:
    """Config with the reference data the rule tests are written against."""
    return ValidationConfig(
        allowed_countries=("England", "Wales", "Scotland", "Northern Ireland", "France"),
        uk_countries=("England", "Wales", "Scotland", "Northern Ireland"),
        allowed_nationalities=(
            "British",
            "French",
            "German",
            "X" * 51,
            "A" * 25,
            "B" * 25,
            "C" * 16,
            "D" * 16,
            "E" * 17,
        ),
    )


@pytest.fixture
def rule_context(validation_config: ValidationConfig) -> RuleContext:
    return RuleContext(errors=ValidationResult(), config=validation_config)


@pytest.fixture
def valid_address() -> Address:
    return Address(
        premises="9",
        address_line_1="Crown Way",
        locality="Cardiff",
        region="South Glamorgan",
        country="Wales",
        postal_code="CF14 3UZ",
    )


@pytest.fixture
def valid_appointment_submission(valid_address: Address) -> FilingSubmission:
    """An appointment filing that passes every rule on 2023-06-15."""
    return FilingSubmission(
        first_name="John",
        middle_names="Paul",
        last_name="Smith",
        title="Sir",
        former_names="Johnny Smythe",
        date_of_birth=DateOfBirth(day=12, month=5, year=1985),
        nationality1="British",
        occupation="Engineer",
        appointed_on=date(2023, 5, 1),
        protected_details=False,
        consent_to_act=True,
        residential_address=valid_address,
        service_address=valid_address,
        is_home_address_same_as_service_address=False,
        is_service_address_same_as_registered_office_address=False,
    )


@pytest.fixture
def valid_termination_submission() -> FilingSubmission:
    """A termination filing that matches the default fake records."""
    return FilingSubmission(
        resigned_on=date(2023, 1, 10),
        reference_etag="etag-1",
        reference_appointment_id="appt-1",
    )


@pytest.fixture
def transaction() -> Transaction:
    return Transaction(id="123-456", company_number="01234567")


@pytest.fixture
def company_profile() -> CompanyProfileSnapshot:
    return CompanyProfileSnapshot(
        company_number="01234567",
        company_name="ACME LIMITED",
        status="active",
        date_of_creation=date(2010, 3, 1),
        company_type="ltd",
    )


@pytest.fixture
def appointment_record() -> OfficerAppointmentSnapshot:
    return OfficerAppointmentSnapshot(
        officer_role="director",
        forename="Jane",
        surname="Doe",
        date_of_birth=DateOfBirth(day=1, month=7, year=1970),
        appointed_on=date(2015, 4, 1),
        etag="etag-1",
    )


@pytest.fixture
def fake_gateway(
    transaction: Transaction,
    company_profile: CompanyProfileSnapshot,
    appointment_record: OfficerAppointmentSnapshot,
) -> FakeCompanyDataGateway:
    return FakeCompanyDataGateway(
        transactions={transaction.id: transaction},
        profiles={company_profile.company_number: company_profile},
        appointments={(company_profile.company_number, "appt-1"): appointment_record},
    )
