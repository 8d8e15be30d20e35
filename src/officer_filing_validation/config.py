"""Centralised, injectable configuration for officer filing validation."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Self

from dotenv import load_dotenv

from .config_file import ValidationConfigFile
from .domain import reference_data
from .domain.messages import DEFAULT_CATALOGUE, MessageCatalogue

_DEFAULT_API_URL = "https://api.company-information.service.gov.uk"
_SOURCE_TYPES = frozenset({"api", "file"})


class PositiveNumberEnvVarError(ValueError):
    """Raised when an environment variable must be a positive number."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a positive number.")


class SourceTypeEnvVarError(ValueError):
    """Raised when the gateway source type is not supported."""

    def __init__(self, env_name: str, value: str) -> None:
        super().__init__(f"{env_name} must be one of: api, file (got {value!r}).")


def _default_catalogue() -> MessageCatalogue:
    return DEFAULT_CATALOGUE


@dataclass(frozen=True)
class ValidationConfig:
    """Immutable reference data and gateway settings shared by all validators.

    Load from environment with `ValidationConfig.from_env()` or construct directly for testing.
    """

    # Reference data
    allowed_countries: tuple[str, ...] = reference_data.ALLOWED_COUNTRIES
    uk_countries: tuple[str, ...] = reference_data.UK_COUNTRIES
    allowed_nationalities: tuple[str, ...] = reference_data.ALLOWED_NATIONALITIES
    allowed_company_types: tuple[str, ...] = reference_data.ALLOWED_COMPANY_TYPES
    allowed_officer_roles: tuple[str, ...] = reference_data.ALLOWED_OFFICER_ROLES
    messages: MessageCatalogue = field(default_factory=_default_catalogue)

    # Companies House API
    ch_api_key: str = ""
    ch_api_url: str = _DEFAULT_API_URL
    ch_private_api_url: str = _DEFAULT_API_URL
    ch_timeout_seconds: float = 30.0
    ch_passthrough_header: str = "ERIC-Access-Token"

    # Gateway source
    gateway_source_type: str = "api"
    gateway_fixtures_path: str = ""

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> Self:
        """Load configuration from environment variables.

        Args:
            dotenv_path: Optional path to .env file. If None, uses default .env discovery.

        Returns:
            ValidationConfig instance populated from environment.
        """
        load_dotenv(dotenv_path)

        api_url = os.getenv("CH_API_URL", "").strip().rstrip("/") or _DEFAULT_API_URL
        return cls(
            allowed_countries=_parse_list(os.getenv("ALLOWED_COUNTRIES", ""))
            or reference_data.ALLOWED_COUNTRIES,
            uk_countries=_parse_list(os.getenv("UK_COUNTRIES", "")) or reference_data.UK_COUNTRIES,
            allowed_nationalities=_parse_list(os.getenv("ALLOWED_NATIONALITIES", ""))
            or reference_data.ALLOWED_NATIONALITIES,
            allowed_company_types=_parse_list(os.getenv("ALLOWED_COMPANY_TYPES", ""))
            or reference_data.ALLOWED_COMPANY_TYPES,
            allowed_officer_roles=_parse_list(os.getenv("ALLOWED_OFFICER_ROLES", ""))
            or reference_data.ALLOWED_OFFICER_ROLES,
            ch_api_key=os.getenv("CH_API_KEY", "").strip(),
            ch_api_url=api_url,
            ch_private_api_url=os.getenv("CH_PRIVATE_API_URL", "").strip().rstrip("/") or api_url,
            ch_timeout_seconds=_parse_positive_float(
                os.getenv("CH_TIMEOUT_SECONDS", "30"), env_name="CH_TIMEOUT_SECONDS"
            ),
            ch_passthrough_header=os.getenv("CH_PASSTHROUGH_HEADER", "").strip()
            or "ERIC-Access-Token",
            gateway_source_type=_parse_source_type(
                os.getenv("GATEWAY_SOURCE_TYPE", "api"), env_name="GATEWAY_SOURCE_TYPE"
            ),
            gateway_fixtures_path=os.getenv("GATEWAY_FIXTURES_PATH", "").strip(),
        )

    def with_overrides(
        self,
        *,
        gateway_source_type: str | None = None,
        gateway_fixtures_path: str | None = None,
    ) -> Self:
        """Return a new config with specified overrides (for CLI options)."""
        return replace(
            self,
            gateway_source_type=self.gateway_source_type
            if gateway_source_type is None
            else _parse_source_type(gateway_source_type, env_name="--source"),
            gateway_fixtures_path=self.gateway_fixtures_path
            if gateway_fixtures_path is None
            else gateway_fixtures_path.strip(),
        )

    def with_file_overrides(self, file_config: ValidationConfigFile) -> Self:
        """Return a new config with config-file values overriding env/default values."""
        messages = self.messages
        if file_config.messages:
            messages = messages.with_overrides(file_config.messages)
        return replace(
            self,
            allowed_countries=self.allowed_countries
            if file_config.allowed_countries is None
            else file_config.allowed_countries,
            uk_countries=self.uk_countries
            if file_config.uk_countries is None
            else file_config.uk_countries,
            allowed_nationalities=self.allowed_nationalities
            if file_config.allowed_nationalities is None
            else file_config.allowed_nationalities,
            allowed_company_types=self.allowed_company_types
            if file_config.allowed_company_types is None
            else file_config.allowed_company_types,
            allowed_officer_roles=self.allowed_officer_roles
            if file_config.allowed_officer_roles is None
            else file_config.allowed_officer_roles,
            ch_api_url=self.ch_api_url
            if file_config.ch_api_url is None
            else file_config.ch_api_url,
            ch_private_api_url=self.ch_private_api_url
            if file_config.ch_private_api_url is None
            else file_config.ch_private_api_url,
            ch_timeout_seconds=self.ch_timeout_seconds
            if file_config.ch_timeout_seconds is None
            else file_config.ch_timeout_seconds,
            gateway_source_type=self.gateway_source_type
            if file_config.gateway_source_type is None
            else file_config.gateway_source_type,
            gateway_fixtures_path=self.gateway_fixtures_path
            if file_config.gateway_fixtures_path is None
            else file_config.gateway_fixtures_path,
            messages=messages,
        )


def _parse_list(s: str) -> tuple[str, ...]:
    """Parse comma-separated string into tuple of stripped values."""
    items = [item.strip() for item in s.split(",") if item.strip()]
    return tuple(items)


def _parse_positive_float(value: str, *, env_name: str) -> float:
    try:
        parsed = float(value.strip())
    except ValueError as exc:
        raise PositiveNumberEnvVarError(env_name) from exc
    if parsed <= 0:
        raise PositiveNumberEnvVarError(env_name)
    return parsed


def _parse_source_type(value: str, *, env_name: str) -> str:
    source = value.strip().lower() or "api"
    if source not in _SOURCE_TYPES:
        raise SourceTypeEnvVarError(env_name, value)
    return source
