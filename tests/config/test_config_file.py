"""Tests for config-file schema parsing and fail-fast validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from officer_filing_validation.config import ValidationConfig
from officer_filing_validation.config_file import load_validation_config_file
from officer_filing_validation.domain.messages import MessageKey
from officer_filing_validation.exceptions import (
    ConfigFileNotFoundError,
    ConfigFileParseError,
    ConfigFileValidationError,
)
from tests.fakes import InMemoryFileSystem

_PATH = Path("config/validation.toml")


def _fs_with(content: str) -> InMemoryFileSystem:
    fs = InMemoryFileSystem()
    fs.add(_PATH, content.strip())
    return fs


def test_load_validation_config_file_parses_valid_toml() -> None:
    fs = _fs_with(
        """
schema_version = 1

[reference_data]
uk_countries = ["England", " Wales ", ""]
allowed_officer_roles = ["director"]

[gateway]
source_type = "FILE"
fixtures_path = "fixtures/registry.json"
api_url = "https://registry.example/"
timeout_seconds = 5

[messages]
"first-name-blank" = "First name please"
"""
    )

    parsed = load_validation_config_file(path=_PATH, fs=fs)

    assert parsed.uk_countries == ("England", "Wales")
    assert parsed.allowed_officer_roles == ("director",)
    assert parsed.allowed_countries is None
    assert parsed.gateway_source_type == "file"
    assert parsed.gateway_fixtures_path == "fixtures/registry.json"
    assert parsed.ch_api_url == "https://registry.example"
    assert parsed.ch_timeout_seconds == 5.0
    assert parsed.messages is not None
    assert parsed.messages["first-name-blank"] == "First name please"


def test_minimal_file_overrides_nothing() -> None:
    parsed = load_validation_config_file(path=_PATH, fs=_fs_with("schema_version = 1"))
    base = ValidationConfig(ch_api_key="key")

    assert base.with_file_overrides(parsed) == base


def test_file_overrides_apply_on_top_of_env_config() -> None:
    fs = _fs_with(
        """
schema_version = 1

[reference_data]
allowed_company_types = ["ltd"]

[messages]
"officer-role" = "Only directors can be removed here"
"""
    )
    base = ValidationConfig(ch_api_key="key")

    config = base.with_file_overrides(load_validation_config_file(path=_PATH, fs=fs))

    assert config.allowed_company_types == ("ltd",)
    assert config.ch_api_key == "key"
    assert config.messages.get(MessageKey.OFFICER_ROLE) == "Only directors can be removed here"
    assert config.messages.get(MessageKey.ETAG_BLANK) == "ETag must be completed"


def test_missing_file_raises() -> None:
    with pytest.raises(ConfigFileNotFoundError):
        load_validation_config_file(path=_PATH, fs=InMemoryFileSystem())


def test_invalid_toml_raises_parse_error() -> None:
    with pytest.raises(ConfigFileParseError):
        load_validation_config_file(path=_PATH, fs=_fs_with("schema_version = = 1"))


@pytest.mark.parametrize(
    ("content", "location"),
    [
        ("schema_version = 2", "schema_version"),
        ('schema_version = 1\n[gateway]\nsource_type = "ftp"', "gateway.source_type"),
        ("schema_version = 1\n[gateway]\ntimeout_seconds = 0", "gateway.timeout_seconds"),
        ('schema_version = 1\n[reference_data]\nuk_countries = [" "]', "reference_data"),
        ('schema_version = 1\n[surprise]\nkey = "value"', "surprise"),
        ('schema_version = 1\n[messages]\n"no-such-key" = "text"', "messages"),
        ('schema_version = 1\n[messages]\n"etag-blank" = "  "', "messages"),
    ],
)
def test_schema_violations_raise_validation_error(content: str, location: str) -> None:
    with pytest.raises(ConfigFileValidationError) as exc_info:
        load_validation_config_file(path=_PATH, fs=_fs_with(content))

    assert location in str(exc_info.value)
