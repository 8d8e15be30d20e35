"""Composition root for wiring CLI dependencies."""

from __future__ import annotations

from pathlib import Path

from .cli import CliDependencies, create_app
from .config import ValidationConfig
from .exceptions import FixtureFileError
from .infrastructure import (
    CompaniesHouseGateway,
    JsonFileGateway,
    LocalFileSystem,
    build_registry_client,
)
from .protocols import CompanyDataGateway, FileSystem


def build_company_data_gateway(*, config: ValidationConfig, fs: FileSystem) -> CompanyDataGateway:
    """Build the company data gateway selected by `gateway_source_type`."""
    if config.gateway_source_type == "file":
        if not config.gateway_fixtures_path:
            raise FixtureFileError("<unset>", "set GATEWAY_FIXTURES_PATH or pass --fixtures")
        return JsonFileGateway(path=Path(config.gateway_fixtures_path), fs=fs)
    return CompaniesHouseGateway(
        http_client=build_registry_client(
            api_key=config.ch_api_key,
            timeout_seconds=config.ch_timeout_seconds,
        ),
        api_url=config.ch_api_url,
        private_api_url=config.ch_private_api_url,
        passthrough_header=config.ch_passthrough_header,
    )


def build_cli_dependencies(*, config: ValidationConfig, build_gateway: bool) -> CliDependencies:
    """Build concrete dependencies for CLI commands.

    Args:
        config: Validation configuration (used for gateway wiring).
        build_gateway: Whether to construct the company data gateway.
    """
    fs = LocalFileSystem()
    gateway: CompanyDataGateway | None = None
    if build_gateway:
        gateway = build_company_data_gateway(config=config, fs=fs)
    return CliDependencies(fs=fs, gateway=gateway)


app = create_app(build_cli_dependencies)
