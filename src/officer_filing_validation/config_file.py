"""Typed parsing and validation for validation config files.

Example file:

    schema_version = 1

    [reference_data]
    uk_countries = ["England", "Wales", "Scotland", "Northern Ireland"]

    [gateway]
    source_type = "file"
    fixtures_path = "fixtures/registry.json"

    [messages]
    "first-name-blank" = "Enter the first name"
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .domain.messages import KNOWN_MESSAGE_KEYS
from .exceptions import ConfigFileNotFoundError, ConfigFileParseError, ConfigFileValidationError
from .protocols import FileSystem

_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class ValidationConfigFile:
    """Validated config values loaded from a TOML file."""

    allowed_countries: tuple[str, ...] | None = None
    uk_countries: tuple[str, ...] | None = None
    allowed_nationalities: tuple[str, ...] | None = None
    allowed_company_types: tuple[str, ...] | None = None
    allowed_officer_roles: tuple[str, ...] | None = None
    ch_api_url: str | None = None
    ch_private_api_url: str | None = None
    ch_timeout_seconds: float | None = None
    gateway_source_type: str | None = None
    gateway_fixtures_path: str | None = None
    messages: Mapping[str, str] | None = None


class _ReferenceDataSectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    allowed_countries: tuple[str, ...] | None = None
    uk_countries: tuple[str, ...] | None = None
    allowed_nationalities: tuple[str, ...] | None = None
    allowed_company_types: tuple[str, ...] | None = None
    allowed_officer_roles: tuple[str, ...] | None = None

    @field_validator(
        "allowed_countries",
        "uk_countries",
        "allowed_nationalities",
        "allowed_company_types",
        "allowed_officer_roles",
    )
    @classmethod
    def _validate_non_empty_list(cls, value: tuple[str, ...] | None) -> tuple[str, ...] | None:
        if value is None:
            return None
        cleaned = tuple(item.strip() for item in value if item.strip())
        if not cleaned:
            raise ValueError
        return cleaned


class _GatewaySectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    source_type: str | None = None
    fixtures_path: str | None = None
    api_url: str | None = None
    private_api_url: str | None = None
    timeout_seconds: float | None = None

    @field_validator("source_type")
    @classmethod
    def _validate_source_type(cls, value: str | None) -> str | None:
        if value is None:
            return None
        source = value.strip().lower()
        if source not in {"api", "file"}:
            raise ValueError
        return source

    @field_validator("fixtures_path", "api_url", "private_api_url")
    @classmethod
    def _validate_non_empty_text(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip().rstrip("/")
        if not text:
            raise ValueError
        return text

    @field_validator("timeout_seconds")
    @classmethod
    def _validate_positive(cls, value: float | None) -> float | None:
        if value is None:
            return None
        if value <= 0:
            raise ValueError
        return value


class _ConfigFileModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: int
    reference_data: _ReferenceDataSectionModel = _ReferenceDataSectionModel()
    gateway: _GatewaySectionModel = _GatewaySectionModel()
    messages: dict[str, str] | None = None

    @field_validator("schema_version")
    @classmethod
    def _validate_schema_version(cls, value: int) -> int:
        if value != _SCHEMA_VERSION:
            raise ValueError
        return value

    @field_validator("messages")
    @classmethod
    def _validate_message_keys(cls, value: dict[str, str] | None) -> dict[str, str] | None:
        if value is None:
            return None
        unknown = sorted(key for key in value if key not in KNOWN_MESSAGE_KEYS)
        if unknown:
            raise ValueError(f"unknown message keys: {', '.join(unknown)}")
        if any(not text.strip() for text in value.values()):
            raise ValueError("message text must not be blank")
        return value


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ("<root>",)))
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}"


def load_validation_config_file(*, path: Path, fs: FileSystem) -> ValidationConfigFile:
    """Load and validate a TOML config file."""
    if not fs.exists(path):
        raise ConfigFileNotFoundError(str(path))

    raw_payload = fs.read_text(path)
    try:
        payload: object = tomllib.loads(raw_payload)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileParseError(str(path), str(exc)) from exc

    try:
        model = _ConfigFileModel.model_validate(payload)
    except ValidationError as exc:
        raise ConfigFileValidationError(str(path), _format_validation_error(exc)) from exc

    reference = model.reference_data
    gateway = model.gateway
    return ValidationConfigFile(
        allowed_countries=reference.allowed_countries,
        uk_countries=reference.uk_countries,
        allowed_nationalities=reference.allowed_nationalities,
        allowed_company_types=reference.allowed_company_types,
        allowed_officer_roles=reference.allowed_officer_roles,
        ch_api_url=gateway.api_url,
        ch_private_api_url=gateway.private_api_url,
        ch_timeout_seconds=gateway.timeout_seconds,
        gateway_source_type=gateway.source_type,
        gateway_fixtures_path=gateway.fixtures_path,
        messages=None if model.messages is None else MappingProxyType(dict(model.messages)),
    )
