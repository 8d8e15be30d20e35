"""Custom exceptions for officer filing validation.

Gateway failures are translated into validation errors by the validators;
everything else here signals a broken precondition and should propagate.
"""

from __future__ import annotations


class OfficerFilingError(Exception):
    """Base exception for all officer filing errors."""

    pass


class GatewayError(OfficerFilingError):
    """Base exception for company data lookup failures."""

    pass


class ServiceUnavailableError(GatewayError):
    """Raised when a registry service cannot be reached or is failing."""

    def __init__(self, service: str, detail: str = "") -> None:
        self.service = service
        self.detail = detail
        message = f"The {service} service is unavailable."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)


class NotFoundError(GatewayError):
    """Raised when a registry record does not exist."""

    def __init__(self, resource: str, identifier: str) -> None:
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class TransactionServiceError(GatewayError):
    """Raised when a transaction cannot be retrieved."""

    def __init__(self, transaction_id: str, detail: str = "") -> None:
        self.transaction_id = transaction_id
        message = f"Error retrieving transaction {transaction_id}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class AuthenticationError(OfficerFilingError):
    """Raised when the registry API rejects our credentials (401/403).

    Gateways report this to validators as the service being unavailable.
    """

    def __init__(self, message: str = "API authentication failed") -> None:
        super().__init__(
            f"{message}\nPlease check your CH_API_KEY in .env is correct and not expired."
        )

    @classmethod
    def for_status(cls, status_code: int, details: str) -> AuthenticationError:
        return cls(f"Registry API returned {status_code} ({details})")


class JsonObjectExpectedError(OfficerFilingError):
    """Raised when a registry response is not a JSON object."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Expected a JSON object from {url}.")


class ConfigFileNotFoundError(OfficerFilingError):
    """Raised when a config file path does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Config file not found: {path}")


class ConfigFileParseError(OfficerFilingError):
    """Raised when a config file is not valid TOML."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Config file {path} could not be parsed: {detail}")


class ConfigFileValidationError(OfficerFilingError):
    """Raised when a config file fails schema validation."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Config file {path} is invalid: {detail}")


class FixtureFileError(OfficerFilingError):
    """Raised when a gateway fixture file is missing or malformed."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Gateway fixture file {path}: {detail}")


class BlankKeyError(ValueError):
    """Raised when a lookup key required by a gateway call is blank."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} must not be blank.")


class MissingValidationErrorError(TypeError):
    """Raised when None is added to a validation result."""

    def __init__(self) -> None:
        super().__init__("'error' cannot be None.")


class ValidationResultSealedError(RuntimeError):
    """Raised when a returned validation result is mutated."""

    def __init__(self) -> None:
        super().__init__("Validation result has been returned and can no longer change.")


class InvalidDateOfBirthError(ValueError):
    """Raised when a date-of-birth tuple does not form a calendar date."""

    def __init__(self, day: int, month: int, year: int) -> None:
        super().__init__(f"Invalid date of birth: day={day}, month={month}, year={year}")


class UnknownMessageKeyError(KeyError):
    """Raised when a message key is missing from the catalogue."""

    def __init__(self, key: str) -> None:
        super().__init__(f"No validation message registered for '{key}'.")
