"""Validation for residential and service address sub-objects.

Every field rule runs independently, so one address can report several
problems at once. The ``provider`` only changes message wording.

Usage example:
    from officer_filing_validation.domain.address import validate_address
    from officer_filing_validation.domain.messages import AddressContext

    validate_address(
        AddressContext.RESIDENTIAL,
        ctx,
        submission.residential_address,
        path="$.residential_address",
    )
"""

from __future__ import annotations

from . import field_rules
from .filing import Address
from .messages import ADDRESS_MESSAGE_KEYS, AddressCondition, AddressContext, AddressField
from .rules import RuleContext

PREMISES_MAX_LENGTH = 200
LINE_MAX_LENGTH = 50
POSTAL_CODE_MAX_LENGTH = 20

_MANDATORY_FIELDS: tuple[tuple[AddressField, str], ...] = (
    (AddressField.PREMISES, "premises"),
    (AddressField.ADDRESS_LINE_1, "address_line_1"),
    (AddressField.LOCALITY, "locality"),
    (AddressField.POSTAL_CODE, "postal_code"),
    (AddressField.COUNTRY, "country"),
)


class _AddressReporter:
    def __init__(self, provider: AddressContext, ctx: RuleContext, path: str) -> None:
        self._provider = provider
        self._ctx = ctx
        self._path = path

    def __call__(
        self,
        address_field: AddressField,
        attribute: str,
        condition: AddressCondition,
        rejected: str | None = None,
    ) -> None:
        key = ADDRESS_MESSAGE_KEYS[(self._provider, address_field, condition)]
        self._ctx.report(key, f"{self._path}.{attribute}", rejected=rejected)


def validate_address(
    provider: AddressContext,
    ctx: RuleContext,
    address: Address | None,
    *,
    path: str,
) -> None:
    """Append every address problem found; a missing address reports each mandatory field."""
    report = _AddressReporter(provider, ctx, path)
    if address is None:
        for address_field, attribute in _MANDATORY_FIELDS:
            report(address_field, attribute, AddressCondition.BLANK)
        return

    _required_line(
        report, AddressField.PREMISES, "premises", address.premises, PREMISES_MAX_LENGTH
    )
    _required_line(
        report,
        AddressField.ADDRESS_LINE_1,
        "address_line_1",
        address.address_line_1,
        LINE_MAX_LENGTH,
    )
    _optional_line(report, AddressField.ADDRESS_LINE_2, "address_line_2", address.address_line_2)
    _required_line(report, AddressField.LOCALITY, "locality", address.locality, LINE_MAX_LENGTH)
    _optional_line(report, AddressField.REGION, "region", address.region)
    _country(report, address.country, ctx.config.allowed_countries)
    _postal_code(report, address.postal_code, address.country, ctx.config.uk_countries)


def _required_line(
    report: _AddressReporter,
    address_field: AddressField,
    attribute: str,
    value: str | None,
    max_length: int,
) -> None:
    if value is None or field_rules.is_blank(value):
        report(address_field, attribute, AddressCondition.BLANK)
        return
    _length_and_characters(report, address_field, attribute, value, max_length)


def _optional_line(
    report: _AddressReporter, address_field: AddressField, attribute: str, value: str | None
) -> None:
    if value is None or field_rules.is_blank(value):
        return
    _length_and_characters(report, address_field, attribute, value, LINE_MAX_LENGTH)


def _length_and_characters(
    report: _AddressReporter,
    address_field: AddressField,
    attribute: str,
    value: str,
    max_length: int,
) -> None:
    if not field_rules.within_length(value, max_length):
        report(address_field, attribute, AddressCondition.LENGTH, value)
    if not field_rules.matches_allowed_character_set(value):
        report(address_field, attribute, AddressCondition.CHARACTERS, value)


def _country(report: _AddressReporter, country: str | None, allowed: tuple[str, ...]) -> None:
    if country is None or field_rules.is_blank(country):
        report(AddressField.COUNTRY, "country", AddressCondition.BLANK)
        return
    if not field_rules.contains_ignore_case(allowed, country):
        report(AddressField.COUNTRY, "country", AddressCondition.INVALID, country)
    _length_and_characters(report, AddressField.COUNTRY, "country", country, LINE_MAX_LENGTH)


def _postal_code(
    report: _AddressReporter,
    postal_code: str | None,
    country: str | None,
    uk_countries: tuple[str, ...],
) -> None:
    is_uk = country is not None and field_rules.contains_ignore_case(uk_countries, country)
    if postal_code is None or field_rules.is_blank(postal_code):
        if is_uk or country is None or field_rules.is_blank(country):
            report(AddressField.POSTAL_CODE, "postal_code", AddressCondition.BLANK)
        return
    if not field_rules.matches_allowed_character_set(postal_code):
        report(AddressField.POSTAL_CODE, "postal_code", AddressCondition.CHARACTERS, postal_code)
    if not field_rules.within_length(postal_code, POSTAL_CODE_MAX_LENGTH):
        report(AddressField.POSTAL_CODE, "postal_code", AddressCondition.LENGTH, postal_code)
    if is_uk and not field_rules.matches_uk_postcode(postal_code):
        report(AddressField.POSTAL_CODE, "postal_code", AddressCondition.UK_INVALID, postal_code)
