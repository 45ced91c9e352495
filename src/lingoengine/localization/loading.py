"""Conversion of raw catalog data into Localization values.

Catalog data uses the JSON-shaped layout common to translation files:

    {
        "greeting": "Hello {name}!",
        "inbox.unread": {"one": "{count} unread message",
                         "other": "{count} unread messages"}
    }

A string becomes Universal; a mapping of plural category tags becomes
Pluralized. Reading files is left to the caller.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping

from lingoengine.diagnostics import ErrorTemplate, InvalidLocalizationError
from lingoengine.enums import PluralCategory
from lingoengine.runtime.value_types import Localization, Pluralized, Universal

from .types import LocalizationKey, RawLocalization

__all__ = [
    "parse_localization",
    "parse_localizations",
]


def _is_category(tag: object) -> bool:
    try:
        PluralCategory(tag)
    except ValueError:
        return False
    return True


def parse_localization(
    value: RawLocalization | Localization,
    *,
    key: LocalizationKey | None = None,
) -> Localization:
    """Convert one catalog value into a Localization.

    Args:
        value: Template string, plural mapping, or an existing Localization
            (returned unchanged)
        key: Catalog key, used in error messages

    Returns:
        Universal or Pluralized

    Raises:
        InvalidLocalizationError: If value is not a string or a non-empty
            mapping of plural category tags to strings

    Examples:
        >>> parse_localization("Hi {name}")
        Universal(template='Hi {name}')
        >>> parse_localization({"one": "1 file", "other": "{n} files"}).categories
        frozenset({<PluralCategory.ONE: 'one'>, <PluralCategory.OTHER: 'other'>})
    """
    match value:
        case Universal() | Pluralized():
            return value
        case str():
            return Universal(value)
        case Mapping() if not value:
            raise InvalidLocalizationError(
                ErrorTemplate.invalid_localization(key, "plural mapping is empty")
            )
        case Mapping():
            unknown = sorted(str(tag) for tag in value if not _is_category(tag))
            if unknown:
                raise InvalidLocalizationError(
                    ErrorTemplate.invalid_localization(
                        key, f"unknown plural categories {', '.join(unknown)}"
                    )
                )
            not_text = sorted(
                str(tag) for tag, template in value.items() if not isinstance(template, str)
            )
            if not_text:
                raise InvalidLocalizationError(
                    ErrorTemplate.invalid_localization(
                        key, f"non-string templates for {', '.join(not_text)}"
                    )
                )
            return Pluralized(value)
        case _:
            raise InvalidLocalizationError(
                ErrorTemplate.invalid_localization(
                    key, f"unsupported type {type(value).__name__}"
                )
            )


def parse_localizations(
    data: Mapping[LocalizationKey, RawLocalization | Localization],
) -> dict[LocalizationKey, Localization]:
    """Convert a key -> value catalog mapping into Localizations.

    Raises:
        InvalidLocalizationError: On the first malformed value
    """
    return {key: parse_localization(value, key=key) for key, value in data.items()}
