"""Locale code handling shared by the rule store and the catalog.

Catalog authors write "pt-BR", Babel expects "pt_BR", users type "PT_br".
Everything is reduced to one lowercase underscore form before lookup so
that all three address the same rule and the same catalog entries.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from lingoengine.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "base_language",
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]

_FALLBACK_SYSTEM_LOCALE = "en_us"
_PSEUDO_LOCALES = frozenset({"C", "POSIX"})


def normalize_locale(locale_code: str) -> str:
    """Return the canonical lookup key for a locale code.

    Surrounding whitespace is dropped, hyphens become underscores and the
    result is lowercased.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_br'
        >>> normalize_locale(" zh-Hans-CN ")
        'zh_hans_cn'
    """
    return locale_code.strip().replace("-", "_").lower()


def base_language(locale_code: str) -> str:
    """Return the normalized language subtag ("en-US" -> "en").

    Example:
        >>> base_language("zh-Hans-CN")
        'zh'
    """
    return normalize_locale(locale_code).split("_", 1)[0]


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse a locale code into a babel.Locale, memoized per code.

    Args:
        locale_code: Any spelling accepted by normalize_locale()

    Raises:
        babel.core.UnknownLocaleError: CLDR has no data for the locale
        ValueError: The code is not a well-formed locale identifier
    """
    from babel import Locale  # noqa: PLC0415 - CLDR data is loaded on first use

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Drop memoized babel.Locale objects."""
    get_babel_locale.cache_clear()


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Guess the user's locale from the process and its environment.

    Candidates, first usable one wins:
        locale.getlocale(), then $LC_ALL, $LC_MESSAGES, $LANG

    Encoding suffixes (".UTF-8") are stripped; "C" and "POSIX" are skipped.

    Args:
        raise_on_failure: Raise instead of returning "en_us" when nothing
            usable is found

    Returns:
        Normalized locale code

    Raises:
        RuntimeError: No candidate found and raise_on_failure is set
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        process_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        process_locale = None

    environment = (os.environ.get(name) for name in ("LC_ALL", "LC_MESSAGES", "LANG"))
    for candidate in (process_locale, *environment):
        code = candidate.split(".", 1)[0] if candidate else ""
        if code and code not in _PSEUDO_LOCALES:
            return normalize_locale(code)

    if raise_on_failure:
        msg = "Could not determine system locale from getlocale(), LC_ALL, LC_MESSAGES or LANG"
        raise RuntimeError(msg)
    return _FALLBACK_SYSTEM_LOCALE
