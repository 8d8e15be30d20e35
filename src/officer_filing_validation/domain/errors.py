"""Validation error values and the de-duplicating result collector.

Usage example:
    from officer_filing_validation.domain.errors import ValidationError, ValidationResult

    result = ValidationResult()
    result.add(ValidationError.validation("Enter a city or town", "$.locality"))
    result.add(ValidationError.validation("Enter a city or town", "$.locality"))
    assert result.error_count == 1
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum

from ..exceptions import MissingValidationErrorError, ValidationResultSealedError


class ErrorType(StrEnum):
    VALIDATION = "ch:validation"
    SERVICE = "ch:service"


class LocationType(StrEnum):
    JSON_PATH = "json-path"


@dataclass(frozen=True)
class ValidationError:
    """A single reported problem with a filing.

    Equality and hashing cover every field, so two errors built from the same
    rule and input collapse inside a ValidationResult.
    """

    error: str
    location: str | None = None
    location_type: LocationType = LocationType.JSON_PATH
    type: ErrorType = ErrorType.VALIDATION
    error_values: tuple[tuple[str, str], ...] = ()

    @classmethod
    def validation(
        cls,
        message: str,
        location: str | None = None,
        *,
        values: Mapping[str, str] | None = None,
    ) -> ValidationError:
        return cls(
            error=message,
            location=location,
            type=ErrorType.VALIDATION,
            error_values=_freeze_values(values),
        )

    @classmethod
    def service(
        cls,
        message: str,
        location: str | None = None,
        *,
        values: Mapping[str, str] | None = None,
    ) -> ValidationError:
        return cls(
            error=message,
            location=location,
            type=ErrorType.SERVICE,
            error_values=_freeze_values(values),
        )

    def to_dict(self) -> dict[str, object]:
        """Return the wire shape consumed by filing API clients."""
        payload: dict[str, object] = {
            "error": self.error,
            "location": self.location,
            "location_type": str(self.location_type),
            "type": str(self.type),
        }
        if self.error_values:
            payload["error_values"] = dict(self.error_values)
        return payload


def _freeze_values(values: Mapping[str, str] | None) -> tuple[tuple[str, str], ...]:
    if not values:
        return ()
    return tuple(sorted((str(key), str(value)) for key, value in values.items()))


class ValidationResult:
    """Insertion-ordered, de-duplicated set of validation errors.

    An empty result means the filing is acceptable. Validators seal the
    result before returning it; further additions raise.
    """

    def __init__(self, errors: Iterable[ValidationError] = ()) -> None:
        self._errors: dict[ValidationError, None] = {}
        self._sealed = False
        for error in errors:
            self.add(error)

    def add(self, error: ValidationError | None) -> None:
        if error is None:
            raise MissingValidationErrorError()
        if self._sealed:
            raise ValidationResultSealedError()
        self._errors.setdefault(error, None)

    def seal(self) -> ValidationResult:
        self._sealed = True
        return self

    @property
    def sealed(self) -> bool:
        return self._sealed

    def has_errors(self) -> bool:
        return bool(self._errors)

    def contains(self, error: ValidationError) -> bool:
        return error in self._errors

    @property
    def errors(self) -> tuple[ValidationError, ...]:
        return tuple(self._errors)

    @property
    def error_count(self) -> int:
        return len(self._errors)

    def to_list(self) -> list[dict[str, object]]:
        return [error.to_dict() for error in self._errors]

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(tuple(self._errors))

    def __len__(self) -> int:
        return len(self._errors)

    def __contains__(self, error: object) -> bool:
        return error in self._errors

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationResult):
            return NotImplemented
        return self.errors == other.errors

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ValidationResult({list(self._errors)!r})"
