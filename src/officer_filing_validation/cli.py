"""CLI for officer filing validation.

Commands:
- validate: Validate one filing submission (appointment, termination or update)
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Annotated, Protocol

import typer
from rich import print as rprint
from rich.console import Console
from rich.table import Table

from .application import AppointmentValidator, TerminationValidator, UpdateValidator
from .config import SourceTypeEnvVarError, ValidationConfig
from .config_file import load_validation_config_file
from .domain.errors import ValidationResult
from .domain.filing import FilingSubmission
from .exceptions import OfficerFilingError
from .infrastructure.io.validation import IncomingDataError, parse_filing_submission
from .protocols import CompanyDataGateway, FileSystem


class DependenciesBuilder(Protocol):
    """Protocol for constructing CLI dependencies."""

    def __call__(self, *, config: ValidationConfig, build_gateway: bool) -> CliDependencies:
        """Build dependencies for CLI commands."""
        ...


@dataclass(frozen=True)
class CliDependencies:
    """Concrete dependencies required by the CLI."""

    fs: FileSystem
    gateway: CompanyDataGateway | None


@dataclass(frozen=True)
class CliContext:
    """Runtime CLI context for a single command invocation."""

    config: ValidationConfig
    deps_builder: DependenciesBuilder

    def build_dependencies(
        self, *, build_gateway: bool, config: ValidationConfig | None = None
    ) -> CliDependencies:
        """Return dependencies using the configured builder."""
        config_value = config or self.config
        return self.deps_builder(config=config_value, build_gateway=build_gateway)


class FilingKind(StrEnum):
    APPOINTMENT = "appointment"
    TERMINATION = "termination"
    UPDATE = "update"


class CliContextNotInitialisedError(typer.BadParameter):
    """Raised when CLI context is missing."""

    def __init__(self) -> None:
        super().__init__("CLI context is not initialised. Use the officer-filing entry point.")


class SubmissionFileNotFoundError(typer.BadParameter):
    """Raised when the submission JSON file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Submission file not found: {path}")


class GatewayNotConfiguredError(OfficerFilingError):
    """Raised when the dependencies builder returns no gateway."""

    def __init__(self) -> None:
        super().__init__("No company data gateway is configured.")


def _get_context(ctx: typer.Context) -> CliContext:
    if not isinstance(ctx.obj, CliContext):
        raise CliContextNotInitialisedError()
    return ctx.obj


def _run_validation(
    kind: FilingKind,
    submission: FilingSubmission,
    *,
    gateway: CompanyDataGateway,
    config: ValidationConfig,
    transaction_id: str,
    token: str,
) -> ValidationResult:
    if kind is FilingKind.TERMINATION:
        return TerminationValidator(gateway=gateway, config=config).validate(
            submission, transaction_id=transaction_id, token=token
        )
    transaction = gateway.get_transaction(transaction_id, token)
    if kind is FilingKind.APPOINTMENT:
        return AppointmentValidator(gateway=gateway, config=config).validate(
            submission, transaction=transaction, token=token
        )
    return UpdateValidator(gateway=gateway, config=config).validate(
        submission, transaction=transaction, token=token
    )


def _print_table(result: ValidationResult) -> None:
    if not result.has_errors():
        rprint("[green]✓ No validation errors[/green]")
        return
    table = Table(title=f"{result.error_count} validation error(s)")
    table.add_column("Type")
    table.add_column("Location")
    table.add_column("Message")
    for error in result:
        table.add_row(str(error.type), error.location or "-", error.error)
    Console().print(table)


def create_app(deps_builder: DependenciesBuilder) -> typer.Typer:
    """Create a Typer app wired with the provided dependencies builder."""
    app = typer.Typer(
        add_completion=False,
        help="Officer filing validation: check director filings against registry records",
    )

    @app.callback()
    def main(ctx: typer.Context) -> None:
        """Initialise CLI context."""
        ctx.obj = CliContext(config=ValidationConfig.from_env(), deps_builder=deps_builder)

    @app.command()
    def validate(
        ctx: typer.Context,
        kind: Annotated[FilingKind, typer.Argument(help="Filing kind to validate")],
        submission_path: Annotated[
            Path,
            typer.Argument(help="Path to the filing submission JSON"),
        ],
        transaction_id: Annotated[
            str,
            typer.Option(
                "--transaction-id",
                help="Transaction the filing belongs to",
            ),
        ],
        token: Annotated[
            str,
            typer.Option(
                "--token",
                help="Caller credential forwarded to the registry",
            ),
        ] = "",
        config_path: Annotated[
            Path | None,
            typer.Option(
                "--config",
                "-c",
                help="TOML config file overriding environment settings",
            ),
        ] = None,
        source: Annotated[
            str | None,
            typer.Option(
                "--source",
                help="Gateway source: api or file (default: GATEWAY_SOURCE_TYPE)",
            ),
        ] = None,
        fixtures: Annotated[
            Path | None,
            typer.Option(
                "--fixtures",
                help="JSON fixture file for the file gateway",
            ),
        ] = None,
        as_json: Annotated[
            bool,
            typer.Option(
                "--json",
                help="Print errors as JSON instead of a table",
            ),
        ] = False,
    ) -> None:
        """Validate a filing submission and report every rule it breaks.

        Exit codes: 0 when valid, 1 when errors were found, 2 on usage or setup failures.
        """
        state = _get_context(ctx)
        try:
            config = state.config
            base = state.build_dependencies(build_gateway=False, config=config)
            if config_path is not None:
                file_config = load_validation_config_file(path=config_path, fs=base.fs)
                config = config.with_file_overrides(file_config)
            config = config.with_overrides(
                gateway_source_type=source,
                gateway_fixtures_path=None if fixtures is None else str(fixtures),
            )

            if not base.fs.exists(submission_path):
                raise SubmissionFileNotFoundError(submission_path)
            submission = parse_filing_submission(base.fs.read_json(submission_path))

            deps = state.build_dependencies(build_gateway=True, config=config)
            if deps.gateway is None:
                raise GatewayNotConfiguredError()
            result = _run_validation(
                kind,
                submission,
                gateway=deps.gateway,
                config=config,
                transaction_id=transaction_id,
                token=token,
            )
        except (OfficerFilingError, IncomingDataError, SourceTypeEnvVarError) as exc:
            rprint(f"[red]✗ {exc}[/red]")
            raise typer.Exit(code=2) from exc

        if as_json:
            typer.echo(json.dumps(result.to_list(), indent=2))
        else:
            _print_table(result)
        if result.has_errors():
            raise typer.Exit(code=1)

    _ = (main, validate)

    return app
