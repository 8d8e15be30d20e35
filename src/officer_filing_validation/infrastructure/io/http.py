"""HTTP client implementation for registry lookups.

Usage example:
    import requests

    from officer_filing_validation.infrastructure.io.http import build_registry_client

    client = build_registry_client(api_key="...", timeout_seconds=30.0)
    profile = client.get_json("https://api.company-information.service.gov.uk/company/01234567")

Status handling:
- 404 raises NotFoundError
- 401/403 raise AuthenticationError (fatal)
- Other error statuses and network failures raise ServiceUnavailableError

No retries are attempted; validators translate failures into errors.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import override

import requests
from requests.auth import HTTPBasicAuth

from ...exceptions import (
    AuthenticationError,
    JsonObjectExpectedError,
    NotFoundError,
    ServiceUnavailableError,
)
from ...observability import get_logger
from ...protocols import HttpClient
from .validation import IncomingDataError, validate_json_as

logger = get_logger("officer_filing_validation.infrastructure.http")

_REGISTRY_SERVICE = "Companies House API"


def build_registry_client(*, api_key: str, timeout_seconds: float) -> RequestsJsonClient:
    session = requests.Session()
    if api_key:
        session.auth = HTTPBasicAuth(api_key, "")
    return RequestsJsonClient(session=session, timeout_seconds=timeout_seconds)


def _response_details(response: requests.Response) -> str:
    """Return a compact status/body summary for error reporting."""
    try:
        body = response.text
    except (UnicodeDecodeError, ValueError, requests.RequestException):
        body = "<unreadable>"
    body = " ".join(body.split())
    if len(body) > 300:
        body = body[:300] + "..."
    return f"status={response.status_code}, body={body}"


class RequestsJsonClient(HttpClient):
    """Requests-backed JSON client that maps failures onto gateway exceptions."""

    def __init__(self, *, session: requests.Session, timeout_seconds: float = 30.0) -> None:
        self.session = session
        self.timeout_seconds = timeout_seconds

    @override
    def get_json(self, url: str, *, headers: Mapping[str, str] | None = None) -> dict[str, object]:
        """Fetch a JSON object from URL.

        Raises:
            AuthenticationError: If the API returns 401/403
            NotFoundError: If the API returns 404
            ServiceUnavailableError: For connection errors and other error statuses
            JsonObjectExpectedError: If the body is not a JSON object
        """
        try:
            r = self.session.get(url, headers=dict(headers or {}), timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            raise ServiceUnavailableError(_REGISTRY_SERVICE, str(exc)) from exc

        if r.status_code in (401, 403):
            raise AuthenticationError.for_status(r.status_code, _response_details(r))

        if r.status_code == 404:
            raise NotFoundError("Resource", url)

        if not 200 <= r.status_code < 300:
            details = _response_details(r)
            logger.warning("Unexpected response from %s: %s", url, details)
            raise ServiceUnavailableError(_REGISTRY_SERVICE, details)

        try:
            return validate_json_as(dict[str, object], r.text)
        except IncomingDataError as exc:
            raise JsonObjectExpectedError(url) from exc
