"""Pure field predicates shared by every filing validator.

None of these raise. Apart from ``matches_uk_postcode`` they assume the
caller has already ruled out blank input.
"""

from __future__ import annotations

import re

_ACCENTED_UPPER = (
    "ÀÁÂÃÄÅĀĂĄÆǼÇĆĈĊČÞĎÐÈÉÊËĒĔĖĘĚĜĞĠĢĤĦÌÍÎÏĨĪĬĮİĴĶĹĻĽĿŁÑŃŅŇŊÒÓÔÕÖØŌŎŐǾŒ"
    "ŔŖŘŚŜŞŠŢŤŦÙÚÛÜŨŪŬŮŰŲŴẀẂẄỲÝŶŸŹŻŽ"
)
_ACCENTED_LOWER = (
    "ſƒǺàáâãäåāăąæǽçćĉċčþďðèéêëēĕėęěĝģğġĥħìíîïĩīĭįĵķĺļľŀłñńņňŋòóôõöøōŏőǿœ"
    "ŕŗřśŝşšţťŧùúûüũūŭůűųŵẁẃẅỳýŷÿźżž"
)

_ALLOWED_CHARACTERS = re.compile(
    r"[-,.:; 0-9A-Z&@$£¥€'\"«»?!/\\()\[\]{}<>*=#%+"
    + _ACCENTED_UPPER
    + "a-z"
    + _ACCENTED_LOWER
    + "]*"
)
_NAME_CHARACTERS = re.compile(r"[-,.' A-Za-z" + _ACCENTED_UPPER + _ACCENTED_LOWER + "]*")
_UK_POSTCODE = re.compile(r"[A-Z]{1,2}[0-9][A-Z0-9]?[0-9][A-Z]{2}")


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def within_length(value: str, max_length: int) -> bool:
    return len(value) <= max_length


def matches_allowed_character_set(value: str) -> bool:
    """Letters, digits, common punctuation and currency symbols."""
    return _ALLOWED_CHARACTERS.fullmatch(value) is not None


def matches_name_character_set(value: str) -> bool:
    """Letters plus hyphens, apostrophes, spaces, full stops and commas."""
    return _NAME_CHARACTERS.fullmatch(value) is not None


def matches_uk_postcode(value: str | None) -> bool:
    """Check a UK postcode ignoring case and whitespace."""
    if value is None:
        return False
    compact = "".join(value.split()).upper()
    return _UK_POSTCODE.fullmatch(compact) is not None


def equals_ignore_case(left: str, right: str) -> bool:
    return left.casefold() == right.casefold()


def contains_ignore_case(options: tuple[str, ...], value: str) -> bool:
    return any(equals_ignore_case(option, value) for option in options)
