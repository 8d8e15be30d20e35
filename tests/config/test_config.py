"""Tests for ValidationConfig behaviour."""

import pytest

import officer_filing_validation.config as config_module
from officer_filing_validation.config import (
    PositiveNumberEnvVarError,
    SourceTypeEnvVarError,
    ValidationConfig,
)
from officer_filing_validation.domain import reference_data


def _patch_env(monkeypatch: pytest.MonkeyPatch, env: dict[str, str]) -> None:
    def fake_getenv(key: str, default: str = "") -> str:
        return env.get(key, default)

    def fake_load_dotenv(dotenv_path: str | None = None) -> bool:
        _ = dotenv_path
        return True

    monkeypatch.setattr(config_module.os, "getenv", fake_getenv)
    monkeypatch.setattr(config_module, "load_dotenv", fake_load_dotenv)


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_env(monkeypatch, {})

    config = ValidationConfig.from_env()

    assert config.allowed_countries == reference_data.ALLOWED_COUNTRIES
    assert config.uk_countries == (
        "England",
        "Wales",
        "Scotland",
        "Northern Ireland",
        "United Kingdom",
    )
    assert config.allowed_company_types == reference_data.ALLOWED_COMPANY_TYPES
    assert config.allowed_officer_roles == reference_data.ALLOWED_OFFICER_ROLES
    assert config.ch_api_key == ""
    assert config.ch_api_url == "https://api.company-information.service.gov.uk"
    assert config.ch_private_api_url == config.ch_api_url
    assert config.ch_timeout_seconds == 30.0
    assert config.ch_passthrough_header == "ERIC-Access-Token"
    assert config.gateway_source_type == "api"
    assert config.gateway_fixtures_path == ""


def test_from_env_reads_reference_data_and_gateway_variables(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _patch_env(
        monkeypatch,
        {
            "ALLOWED_NATIONALITIES": "British, Irish,,",
            "ALLOWED_OFFICER_ROLES": "director",
            "CH_API_KEY": " secret ",
            "CH_API_URL": "http://localhost:8080/",
            "CH_TIMEOUT_SECONDS": "2.5",
            "CH_PASSTHROUGH_HEADER": "X-Token",
            "GATEWAY_SOURCE_TYPE": "File",
            "GATEWAY_FIXTURES_PATH": "fixtures/registry.json",
        },
    )

    config = ValidationConfig.from_env()

    assert config.allowed_nationalities == ("British", "Irish")
    assert config.allowed_officer_roles == ("director",)
    assert config.ch_api_key == "secret"
    assert config.ch_api_url == "http://localhost:8080"
    assert config.ch_private_api_url == "http://localhost:8080"
    assert config.ch_timeout_seconds == 2.5
    assert config.ch_passthrough_header == "X-Token"
    assert config.gateway_source_type == "file"
    assert config.gateway_fixtures_path == "fixtures/registry.json"


@pytest.mark.parametrize("value", ["0", "-1", "soon"])
def test_from_env_rejects_non_positive_timeout(
    monkeypatch: pytest.MonkeyPatch, value: str
) -> None:
    _patch_env(monkeypatch, {"CH_TIMEOUT_SECONDS": value})

    with pytest.raises(PositiveNumberEnvVarError, match="CH_TIMEOUT_SECONDS"):
        ValidationConfig.from_env()


def test_from_env_rejects_unknown_source_type(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_env(monkeypatch, {"GATEWAY_SOURCE_TYPE": "ftp"})

    with pytest.raises(SourceTypeEnvVarError):
        ValidationConfig.from_env()


def test_with_overrides_preserves_fields() -> None:
    base = ValidationConfig(
        uk_countries=("England",),
        ch_api_key="key",
        ch_timeout_seconds=12.0,
        gateway_fixtures_path="a.json",
    )

    updated = base.with_overrides(gateway_source_type="file")

    assert updated.gateway_source_type == "file"
    assert updated.gateway_fixtures_path == "a.json"
    assert updated.uk_countries == base.uk_countries
    assert updated.ch_api_key == base.ch_api_key
    assert updated.ch_timeout_seconds == base.ch_timeout_seconds
    assert updated.messages is base.messages


def test_with_overrides_validates_source_type() -> None:
    with pytest.raises(SourceTypeEnvVarError, match="--source"):
        ValidationConfig().with_overrides(gateway_source_type="ftp")
