"""Company data gateways backed by the registry REST API or a local JSON file.

Usage example:
    from officer_filing_validation.infrastructure.gateway import CompaniesHouseGateway
    from officer_filing_validation.infrastructure.io.http import build_registry_client

    gateway = CompaniesHouseGateway(
        http_client=build_registry_client(api_key=config.ch_api_key, timeout_seconds=30.0),
        api_url=config.ch_api_url,
        private_api_url=config.ch_private_api_url,
        passthrough_header=config.ch_passthrough_header,
    )
    profile = gateway.get_company_profile("123-456", "01234567", token)

The fixture file read by ``JsonFileGateway`` looks like:

    {
      "transactions": {"123-456": {"company_number": "01234567"}},
      "company_profiles": {"01234567": {"company_status": "active", "type": "ltd"}},
      "appointments": {"01234567/abc": {"officer_role": "director", "etag": "e1"}}
    }
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import override
from urllib.parse import quote

from ..domain.filing import CompanyProfileSnapshot, OfficerAppointmentSnapshot, Transaction
from ..exceptions import (
    AuthenticationError,
    BlankKeyError,
    FixtureFileError,
    GatewayError,
    JsonObjectExpectedError,
    NotFoundError,
    ServiceUnavailableError,
    TransactionServiceError,
)
from ..observability import get_logger
from ..protocols import CompanyDataGateway, FileSystem, HttpClient
from .io.validation import (
    IncomingDataError,
    parse_company_profile,
    parse_officer_appointment,
    parse_transaction,
    validate_as,
)

logger = get_logger("officer_filing_validation.infrastructure.gateway")

_PROFILE_SERVICE = "company profile"
_APPOINTMENT_SERVICE = "company appointment"


def _require(name: str, value: str) -> str:
    if not value or not value.strip():
        raise BlankKeyError(name)
    return value.strip()


class CompaniesHouseGateway(CompanyDataGateway):
    """Gateway that reads company, appointment and transaction records over HTTP."""

    def __init__(
        self,
        *,
        http_client: HttpClient,
        api_url: str,
        private_api_url: str,
        passthrough_header: str,
    ) -> None:
        self._http = http_client
        self._api_url = api_url.rstrip("/")
        self._private_api_url = private_api_url.rstrip("/")
        self._passthrough_header = passthrough_header

    def _headers(self, token: str) -> dict[str, str]:
        if not token:
            return {}
        return {self._passthrough_header: token}

    def _get_record(self, url: str, token: str, *, service: str) -> dict[str, object]:
        try:
            return self._http.get_json(url, headers=self._headers(token))
        except (AuthenticationError, JsonObjectExpectedError) as exc:
            logger.warning("Treating %s failure as unavailable: %s", service, exc)
            raise ServiceUnavailableError(service, str(exc)) from exc

    @override
    def get_company_profile(
        self, context_id: str, company_number: str, token: str
    ) -> CompanyProfileSnapshot:
        number = _require("company_number", company_number)
        url = f"{self._api_url}/company/{quote(number)}"
        logger.info("Fetching company profile %s for transaction %s", number, context_id)
        payload = self._get_record(url, token, service=_PROFILE_SERVICE)
        return _parse_or_unavailable(
            lambda: parse_company_profile(payload, company_number=number), _PROFILE_SERVICE
        )

    @override
    def get_officer_appointment(
        self, context_id: str, company_number: str, appointment_id: str, token: str
    ) -> OfficerAppointmentSnapshot:
        number = _require("company_number", company_number)
        appointment = _require("appointment_id", appointment_id)
        url = (
            f"{self._private_api_url}/company/{quote(number)}"
            f"/appointments/{quote(appointment)}/full_record"
        )
        logger.info(
            "Fetching appointment %s for company %s (transaction %s)",
            appointment,
            number,
            context_id,
        )
        payload = self._get_record(url, token, service=_APPOINTMENT_SERVICE)
        return _parse_or_unavailable(
            lambda: parse_officer_appointment(payload), _APPOINTMENT_SERVICE
        )

    @override
    def get_transaction(self, transaction_id: str, token: str) -> Transaction:
        identifier = _require("transaction_id", transaction_id)
        url = f"{self._api_url}/transactions/{quote(identifier)}"
        try:
            payload = self._http.get_json(url, headers=self._headers(token))
            return parse_transaction(payload, transaction_id=identifier)
        except (
            GatewayError, AuthenticationError, JsonObjectExpectedError, IncomingDataError
        ) as exc:
            raise TransactionServiceError(identifier, str(exc)) from exc


class JsonFileGateway(CompanyDataGateway):
    """Gateway serving records from a local JSON fixture document."""

    def __init__(self, *, path: Path, fs: FileSystem) -> None:
        if not fs.exists(path):
            raise FixtureFileError(str(path), "file not found")
        try:
            document = fs.read_json(path)
            self._transactions = _section(document, "transactions")
            self._profiles = _section(document, "company_profiles")
            self._appointments = _section(document, "appointments")
        except IncomingDataError as exc:
            raise FixtureFileError(str(path), str(exc)) from exc

    @override
    def get_company_profile(
        self, context_id: str, company_number: str, token: str
    ) -> CompanyProfileSnapshot:
        number = _require("company_number", company_number)
        payload = self._profiles.get(number)
        if payload is None:
            raise NotFoundError("Company profile", number)
        return _parse_or_unavailable(
            lambda: parse_company_profile(payload, company_number=number), _PROFILE_SERVICE
        )

    @override
    def get_officer_appointment(
        self, context_id: str, company_number: str, appointment_id: str, token: str
    ) -> OfficerAppointmentSnapshot:
        number = _require("company_number", company_number)
        key = f"{number}/{_require('appointment_id', appointment_id)}"
        payload = self._appointments.get(key)
        if payload is None:
            raise NotFoundError("Officer appointment", key)
        return _parse_or_unavailable(
            lambda: parse_officer_appointment(payload), _APPOINTMENT_SERVICE
        )

    @override
    def get_transaction(self, transaction_id: str, token: str) -> Transaction:
        identifier = _require("transaction_id", transaction_id)
        payload = self._transactions.get(identifier)
        if payload is None:
            raise TransactionServiceError(identifier, "not present in fixture file")
        try:
            return parse_transaction(payload, transaction_id=identifier)
        except IncomingDataError as exc:
            raise TransactionServiceError(identifier, str(exc)) from exc


def _parse_or_unavailable[SnapshotT](parse: Callable[[], SnapshotT], service: str) -> SnapshotT:
    try:
        return parse()
    except IncomingDataError as exc:
        logger.warning("Malformed %s record: %s", service, exc)
        raise ServiceUnavailableError(service, str(exc)) from exc


def _section(document: Mapping[str, object], name: str) -> dict[str, dict[str, object]]:
    raw = document.get(name)
    if raw is None:
        return {}
    return validate_as(dict[str, dict[str, object]], raw)
