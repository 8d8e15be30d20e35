"""User-facing validation messages keyed by stable kebab-case identifiers.

Messages may contain ``<placeholder>`` markers which are filled, in order,
from the replacements passed to ``MessageCatalogue.get``.

Usage example:
    from officer_filing_validation.domain.messages import DEFAULT_CATALOGUE, MessageKey

    DEFAULT_CATALOGUE.get(MessageKey.COMPANY_TYPE_NOT_PERMITTED, "Limited partnership")
    # 'Limited partnership not permitted'
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

from ..exceptions import UnknownMessageKeyError

_PLACEHOLDER = re.compile(r"<[\w-]*>")
_CHARACTERS_SUFFIX = (
    "must only include letters a to z, and common special characters such as hyphens, "
    "spaces and apostrophes"
)


class MessageKey(StrEnum):
    COMPANY_NUMBER_BLANK = "company-number-blank"
    CANNOT_FIND_COMPANY = "cannot-find-company"
    SERVICE_UNAVAILABLE = "service-unavailable"
    COMPANY_DISSOLVED = "company-dissolved"
    COMPANY_DISSOLVED_TERMINATION = "company-dissolved-termination"
    COMPANY_ABOUT_TO_BE_DISSOLVED = "company-about-to-be-dissolved"
    COMPANY_TYPE_NOT_PERMITTED = "company-type-not-permitted"
    COMPANY_TYPE_NOT_PERMITTED_TERMINATION = "company-type-not-permitted-termination"
    OFFICER_ROLE = "officer-role"
    DIRECTOR_NOT_FOUND = "director-not-found"
    DIRECTOR_ALREADY_REMOVED = "director-already-removed"
    ETAG_BLANK = "etag-blank"
    ETAG_INVALID = "etag-invalid"
    OFFICER_ID_BLANK = "officer-id-blank"
    REMOVAL_DATE_MISSING = "removal-date-missing"
    REMOVAL_DATE_IN_PAST = "removal-date-in-past"
    REMOVAL_DATE_AFTER_2009 = "removal-date-after-2009"
    REMOVAL_DATE_AFTER_INCORPORATION_DATE = "removal-date-after-incorporation-date"
    REMOVAL_DATE_AFTER_APPOINTMENT_DATE = "removal-date-after-appointment-date"
    APPOINTMENT_DATE_AFTER_INCORPORATION_DATE = "appointment-date-after-incorporation-date"
    APPOINTMENT_DATE_IN_PAST = "appointment-date-in-past"
    APPOINTMENT_DATE_MISSING = "appointment-date-missing"
    APPOINTMENT_DATE_UNDERAGE = "appointment-date-underage"
    CONSENT_TO_ACT_FALSE = "consent-to-act-false"
    CONSENT_TO_ACT_MISSING = "consent-to-act-missing"
    PROTECTED_DETAILS_MISSING = "protected-details-missing"
    ADDRESS_LINKS_MULTIPLE_FLAGS = "address-links-multiple-flags"
    DATE_OF_BIRTH_BLANK = "date-of-birth-blank"
    DATE_OF_BIRTH_OVERAGE = "date-of-birth-overage"
    DATE_OF_BIRTH_UNDERAGE = "date-of-birth-underage"
    FIRST_NAME_BLANK = "first-name-blank"
    FIRST_NAME_CHARACTERS = "first-name-characters"
    FIRST_NAME_LENGTH = "first-name-length"
    LAST_NAME_BLANK = "last-name-blank"
    LAST_NAME_CHARACTERS = "last-name-characters"
    LAST_NAME_LENGTH = "last-name-length"
    MIDDLE_NAME_CHARACTERS = "middle-name-characters"
    MIDDLE_NAME_LENGTH = "middle-name-length"
    TITLE_CHARACTERS = "title-characters"
    TITLE_LENGTH = "title-length"
    FORMER_NAMES_CHARACTERS = "former-names-characters"
    FORMER_NAMES_LENGTH = "former-names-length"
    INVALID_NATIONALITY = "invalid-nationality"
    NATIONALITY_BLANK = "nationality-blank"
    NATIONALITY_CHARACTERS = "nationality-characters"
    NATIONALITY_LENGTH = "nationality-length"
    NATIONALITY_LENGTH48 = "nationality-length48"
    NATIONALITY_LENGTH49 = "nationality-length49"
    DUPLICATE_NATIONALITY2 = "duplicate-nationality2"
    DUPLICATE_NATIONALITY3 = "duplicate-nationality3"
    OCCUPATION_CHARACTERS = "occupation-characters"
    OCCUPATION_LENGTH = "occupation-length"


class AddressContext(StrEnum):
    RESIDENTIAL = "residential"
    CORRESPONDENCE = "correspondence"


class AddressField(StrEnum):
    PREMISES = "premises"
    ADDRESS_LINE_1 = "address-line-one"
    ADDRESS_LINE_2 = "address-line-two"
    LOCALITY = "locality"
    REGION = "region"
    COUNTRY = "country"
    POSTAL_CODE = "postal-code"


class AddressCondition(StrEnum):
    BLANK = "blank"
    LENGTH = "length"
    CHARACTERS = "characters"
    INVALID = "invalid"
    UK_INVALID = "uk-invalid"


def address_message_key(
    context: AddressContext, address_field: AddressField, condition: AddressCondition
) -> str:
    return f"{context}-{address_field}-{condition}"


_ADDRESS_TEXT: Mapping[tuple[AddressField, AddressCondition], str] = {
    (AddressField.PREMISES, AddressCondition.BLANK): "Enter a property name or number",
    (AddressField.PREMISES, AddressCondition.LENGTH): (
        "Property name or number must be 200 characters or less"
    ),
    (AddressField.PREMISES, AddressCondition.CHARACTERS): (
        f"Property name or number {_CHARACTERS_SUFFIX}"
    ),
    (AddressField.ADDRESS_LINE_1, AddressCondition.BLANK): "Enter an address",
    (AddressField.ADDRESS_LINE_1, AddressCondition.LENGTH): (
        "Address line 1 must be 50 characters or less"
    ),
    (AddressField.ADDRESS_LINE_1, AddressCondition.CHARACTERS): (
        f"Address line 1 {_CHARACTERS_SUFFIX}"
    ),
    (AddressField.ADDRESS_LINE_2, AddressCondition.LENGTH): (
        "Address line 2 must be 50 characters or less"
    ),
    (AddressField.ADDRESS_LINE_2, AddressCondition.CHARACTERS): (
        f"Address line 2 {_CHARACTERS_SUFFIX}"
    ),
    (AddressField.LOCALITY, AddressCondition.BLANK): "Enter a city or town",
    (AddressField.LOCALITY, AddressCondition.LENGTH): "City or town must be 50 characters or less",
    (AddressField.LOCALITY, AddressCondition.CHARACTERS): f"City or town {_CHARACTERS_SUFFIX}",
    (AddressField.REGION, AddressCondition.LENGTH): (
        "County, state, province or region must be 50 characters or less"
    ),
    (AddressField.REGION, AddressCondition.CHARACTERS): (
        f"County, state, province or region {_CHARACTERS_SUFFIX}"
    ),
    (AddressField.COUNTRY, AddressCondition.BLANK): "Enter a country",
    (AddressField.COUNTRY, AddressCondition.INVALID): "Select a country from the list",
    (AddressField.COUNTRY, AddressCondition.LENGTH): "Country must be 50 characters or less",
    (AddressField.COUNTRY, AddressCondition.CHARACTERS): f"Country {_CHARACTERS_SUFFIX}",
    (AddressField.POSTAL_CODE, AddressCondition.BLANK): "Enter a postcode or ZIP",
    (AddressField.POSTAL_CODE, AddressCondition.LENGTH): (
        "Postal code must be 20 characters or less"
    ),
    (AddressField.POSTAL_CODE, AddressCondition.CHARACTERS): f"Postal code {_CHARACTERS_SUFFIX}",
    (AddressField.POSTAL_CODE, AddressCondition.UK_INVALID): (
        "Enter a UK postcode. If the address is outside the UK, enter the address manually"
    ),
}

# Service address wording for the fields labelled differently on that page.
_CORRESPONDENCE_TEXT: Mapping[tuple[AddressField, AddressCondition], str] = {
    (AddressField.LOCALITY, AddressCondition.CHARACTERS): f"Locality {_CHARACTERS_SUFFIX}",
    (AddressField.REGION, AddressCondition.CHARACTERS): f"Region {_CHARACTERS_SUFFIX}",
}

ADDRESS_MESSAGE_KEYS: Mapping[tuple[AddressContext, AddressField, AddressCondition], str] = (
    MappingProxyType(
        {
            (context, address_field, condition): address_message_key(
                context, address_field, condition
            )
            for context in AddressContext
            for address_field, condition in _ADDRESS_TEXT
        }
    )
)


def _address_defaults() -> dict[str, str]:
    messages: dict[str, str] = {}
    for (context, address_field, condition), key in ADDRESS_MESSAGE_KEYS.items():
        text = _ADDRESS_TEXT[(address_field, condition)]
        if context is AddressContext.CORRESPONDENCE:
            text = _CORRESPONDENCE_TEXT.get((address_field, condition), text)
        messages[key] = text
    return messages


_DEFAULT_MESSAGES: dict[str, str] = {
    MessageKey.COMPANY_NUMBER_BLANK: "The company number cannot be null or blank",
    MessageKey.CANNOT_FIND_COMPANY: "We cannot find the company",
    MessageKey.SERVICE_UNAVAILABLE: (
        "Sorry, this service is unavailable. You will be able to use the service later"
    ),
    MessageKey.COMPANY_DISSOLVED: (
        "You cannot add or remove a director from a company that has been dissolved "
        "or is in the process of being dissolved"
    ),
    MessageKey.COMPANY_DISSOLVED_TERMINATION: (
        "You cannot remove an officer from a company that has been dissolved"
    ),
    MessageKey.COMPANY_ABOUT_TO_BE_DISSOLVED: (
        "You cannot remove an officer from a company that is about to be dissolved"
    ),
    MessageKey.COMPANY_TYPE_NOT_PERMITTED: "<company-type> not permitted",
    MessageKey.COMPANY_TYPE_NOT_PERMITTED_TERMINATION: (
        "You cannot remove an officer from a <company-type> using this service"
    ),
    MessageKey.OFFICER_ROLE: "You can only remove directors",
    MessageKey.DIRECTOR_NOT_FOUND: "Officer not found. Please confirm the details and resubmit",
    MessageKey.DIRECTOR_ALREADY_REMOVED: (
        "An application to remove <director-name> has already been submitted"
    ),
    MessageKey.ETAG_BLANK: "ETag must be completed",
    MessageKey.ETAG_INVALID: (
        "The Officers information is out of date. Please start the process again "
        "and make a new submission"
    ),
    MessageKey.OFFICER_ID_BLANK: "Officer ID must be completed",
    MessageKey.REMOVAL_DATE_MISSING: "Enter the date the director was removed",
    MessageKey.REMOVAL_DATE_IN_PAST: "Enter a date that is today or in the past",
    MessageKey.REMOVAL_DATE_AFTER_2009: (
        "You have entered a date too far in the past. Please check the date and resubmit"
    ),
    MessageKey.REMOVAL_DATE_AFTER_INCORPORATION_DATE: (
        "Date director was removed must be on or after the date the company was incorporated"
    ),
    MessageKey.REMOVAL_DATE_AFTER_APPOINTMENT_DATE: (
        "Date director was removed must be on or after the date the director was appointed"
    ),
    MessageKey.APPOINTMENT_DATE_AFTER_INCORPORATION_DATE: (
        "The date you enter must be after the company's incorporation date"
    ),
    MessageKey.APPOINTMENT_DATE_IN_PAST: "Enter a date that is today or in the past",
    MessageKey.APPOINTMENT_DATE_MISSING: "Enter the date the director was appointed",
    MessageKey.APPOINTMENT_DATE_UNDERAGE: (
        "You can only appoint a person as a director if they are at least 16 years old "
        "on their appointment date"
    ),
    MessageKey.CONSENT_TO_ACT_FALSE: (
        "You will not be able to continue if the person named has not consented to act "
        "as director. Confirm consent to continue."
    ),
    MessageKey.CONSENT_TO_ACT_MISSING: (
        "Confirm that by submitting this information, the person named has consented "
        "to act as director"
    ),
    MessageKey.PROTECTED_DETAILS_MISSING: (
        "Confirm if the director has ever applied to protect their details at Companies House"
    ),
    MessageKey.ADDRESS_LINKS_MULTIPLE_FLAGS: (
        "The maximum number of address links that can be established is one"
    ),
    MessageKey.DATE_OF_BIRTH_BLANK: "Enter the director’s date of birth",
    MessageKey.DATE_OF_BIRTH_OVERAGE: (
        "You can only appoint a person as a director if they are under 110 years old"
    ),
    MessageKey.DATE_OF_BIRTH_UNDERAGE: (
        "You can only appoint a person as a director if they are at least 16 years old"
    ),
    MessageKey.FIRST_NAME_BLANK: "Enter the director’s full first name",
    MessageKey.FIRST_NAME_CHARACTERS: f"First name {_CHARACTERS_SUFFIX}",
    MessageKey.FIRST_NAME_LENGTH: "First name can be no longer than 50 characters",
    MessageKey.LAST_NAME_BLANK: "Enter the director’s full last name",
    MessageKey.LAST_NAME_CHARACTERS: f"Last name {_CHARACTERS_SUFFIX}",
    MessageKey.LAST_NAME_LENGTH: "Last name can be no longer than 160 characters",
    MessageKey.MIDDLE_NAME_CHARACTERS: f"Middle name or names {_CHARACTERS_SUFFIX}",
    MessageKey.MIDDLE_NAME_LENGTH: "Middle name or names can be no longer than 50 characters",
    MessageKey.TITLE_CHARACTERS: f"Title {_CHARACTERS_SUFFIX}",
    MessageKey.TITLE_LENGTH: "Title can be no longer than 50 characters",
    MessageKey.FORMER_NAMES_CHARACTERS: f"Previous name {_CHARACTERS_SUFFIX}",
    MessageKey.FORMER_NAMES_LENGTH: "Previous names can be no longer than 160 characters",
    MessageKey.INVALID_NATIONALITY: "Select a nationality from the list",
    MessageKey.NATIONALITY_BLANK: "Enter the director’s nationality",
    MessageKey.NATIONALITY_CHARACTERS: f"Nationality {_CHARACTERS_SUFFIX}",
    MessageKey.NATIONALITY_LENGTH: "Nationality must be 50 characters or less",
    MessageKey.NATIONALITY_LENGTH48: (
        "For technical reasons, we are currently unable to accept multiple nationalities "
        "with a total of more than 48 characters"
    ),
    MessageKey.NATIONALITY_LENGTH49: (
        "For technical reasons, we are currently unable to accept dual nationalities "
        "with a total of more than 49 characters"
    ),
    MessageKey.DUPLICATE_NATIONALITY2: "Enter a different second nationality",
    MessageKey.DUPLICATE_NATIONALITY3: "Enter a different third nationality",
    MessageKey.OCCUPATION_CHARACTERS: f"Occupation {_CHARACTERS_SUFFIX}",
    MessageKey.OCCUPATION_LENGTH: "Occupation must be 100 characters or less",
    **_address_defaults(),
}

KNOWN_MESSAGE_KEYS: frozenset[str] = frozenset(str(key) for key in _DEFAULT_MESSAGES)


def _default_messages() -> Mapping[str, str]:
    return MappingProxyType({str(key): text for key, text in _DEFAULT_MESSAGES.items()})


@dataclass(frozen=True)
class MessageCatalogue:
    """Read-only lookup from message key to display text."""

    messages: Mapping[str, str] = field(default_factory=_default_messages)

    def get(self, key: str, *replacements: str) -> str:
        try:
            text = self.messages[str(key)]
        except KeyError as exc:
            raise UnknownMessageKeyError(str(key)) from exc
        for replacement in replacements:
            text = _PLACEHOLDER.sub(lambda _: replacement, text, count=1)
        return text

    def with_overrides(self, overrides: Mapping[str, str]) -> MessageCatalogue:
        unknown = sorted(key for key in overrides if key not in self.messages)
        if unknown:
            raise UnknownMessageKeyError(unknown[0])
        merged = {**self.messages, **overrides}
        return MessageCatalogue(messages=MappingProxyType(merged))


DEFAULT_CATALOGUE = MessageCatalogue()
