"""Enumerations for LingoEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so PluralCategory.ONE == "one"
and CLDR tags returned by Babel compare equal to enum members.

Python 3.13+.
"""

from enum import StrEnum

__all__ = ["PluralCategory"]


class PluralCategory(StrEnum):
    """CLDR plural category.

    Closed set: every pluralization rule maps a quantity to one of these six
    members. StrEnum provides automatic string conversion:
    str(PluralCategory.FEW) == "few"

    Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
    """

    ZERO = "zero"
    """Arabic 0, Latvian 0, 10-20, ..."""

    ONE = "one"
    """English 1, Russian 1, 21, 31, ..."""

    TWO = "two"
    """Arabic 2, Welsh 2, Slovenian 2, 102, ..."""

    FEW = "few"
    """Polish 2-4, 22-24, ...; Arabic 3-10"""

    MANY = "many"
    """Polish 5-21, ...; Russian 0, 5-20, ..."""

    OTHER = "other"
    """Required default; the only category in Japanese or Chinese"""
