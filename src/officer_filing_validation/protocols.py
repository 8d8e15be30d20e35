"""Protocol definitions for dependency injection.

These protocols define the abstract interfaces the validators depend on,
enabling isolated unit testing with fake implementations.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .domain.filing import CompanyProfileSnapshot, OfficerAppointmentSnapshot, Transaction


@runtime_checkable
class CompanyDataGateway(Protocol):
    """Read-only access to registry records needed during validation."""

    def get_company_profile(
        self, context_id: str, company_number: str, token: str
    ) -> CompanyProfileSnapshot:
        """Fetch the current company profile.

        Args:
            context_id: Transaction id used to correlate the lookup.
            company_number: Registered company number.
            token: Caller credential forwarded to the registry.

        Raises:
            ServiceUnavailableError: If the profile service is down, rejects our
                credentials or returns a malformed record.
            NotFoundError: If the company does not exist.
        """
        ...

    def get_officer_appointment(
        self, context_id: str, company_number: str, appointment_id: str, token: str
    ) -> OfficerAppointmentSnapshot:
        """Fetch the full appointment record for one officer.

        Raises:
            ServiceUnavailableError: If the appointments service is down, rejects our
                credentials or returns a malformed record.
            NotFoundError: If the appointment does not exist.
        """
        ...

    def get_transaction(self, transaction_id: str, token: str) -> Transaction:
        """Fetch the transaction envelope.

        Raises:
            TransactionServiceError: On any lookup failure.
        """
        ...


@runtime_checkable
class HttpClient(Protocol):
    """Abstract HTTP client for making JSON API requests."""

    def get_json(self, url: str, *, headers: Mapping[str, str] | None = None) -> dict[str, object]:
        """Fetch a JSON object from URL.

        Raises:
            NotFoundError: On 404.
            ServiceUnavailableError: On network failures and other error statuses.
            AuthenticationError: On 401/403.
        """
        ...


@runtime_checkable
class FileSystem(Protocol):
    """Abstract filesystem for reading submissions, fixtures and config."""

    def read_text(self, path: Path) -> str:
        """Read text content."""
        ...

    def read_json(self, path: Path) -> dict[str, object]:
        """Read a JSON object."""
        ...

    def exists(self, path: Path) -> bool:
        """Check if path exists."""
        ...
