"""In-memory localization catalog with locale fallback.

LocalizationCatalog maps (locale, key) to Localization values and resolves
them. Lookup for a key tries, in order:

    1. The requested locale ("pt_br")
    2. Its base language ("pt")
    3. The default locale (and its base language)

The plural rule applied is that of the locale that served the entry, since
that is the language the template is written in.

Thread Safety:
    add_localizations() is serialized by a lock and publishes a new
    read-only snapshot; localize() reads the current snapshot without
    locking. Complete initialization before sharing for predictable results.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from lingoengine.constants import DEFAULT_LOCALE
from lingoengine.diagnostics import (
    Diagnostic,
    DiagnosticReporter,
    ErrorTemplate,
    log_diagnostic,
    raise_diagnostic,
)
from lingoengine.locale_utils import base_language, get_system_locale, normalize_locale
from lingoengine.runtime.interpolator import DEFAULT_INTERPOLATOR, StringInterpolator
from lingoengine.runtime.resolver import resolve
from lingoengine.runtime.rule_store import PluralRuleStore, default_rule_store
from lingoengine.runtime.value_types import Interpolations, Localization

from .loading import parse_localizations
from .types import LocaleCode, LocalizationKey, RawLocalization

__all__ = [
    "FallbackInfo",
    "LocalizationCatalog",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """A key was served by a locale other than the requested one.

    Attributes:
        requested_locale: Locale passed to localize()
        resolved_locale: Normalized locale whose entry was used
        key: Catalog key
    """

    requested_locale: LocaleCode
    resolved_locale: LocaleCode
    key: LocalizationKey


class LocalizationCatalog:
    """Catalog of localized strings keyed by locale and key.

    Example:
        >>> catalog = LocalizationCatalog("en")
        >>> catalog.add_localizations("en", {
        ...     "greeting": "Hello {name}!",
        ...     "inbox.unread": {"one": "{count} unread message",
        ...                      "other": "{count} unread messages"},
        ... })
        >>> catalog.add_localizations("ru", {
        ...     "inbox.unread": {"one": "{count} непрочитанное сообщение",
        ...                      "few": "{count} непрочитанных сообщения",
        ...                      "many": "{count} непрочитанных сообщений",
        ...                      "other": "{count} непрочитанного сообщения"},
        ... })
        >>> catalog.localize("inbox.unread", "ru-RU", {"count": 3})
        '3 непрочитанных сообщения'
        >>> catalog.localize("greeting", "ru", {"name": "Anna"})  # falls back to en
        'Hello Anna!'
    """

    __slots__ = (
        "_default_locale",
        "_entries",
        "_interpolator",
        "_lock",
        "_on_fallback",
        "_reporter",
        "_rule_store",
        "_strict",
    )

    def __init__(
        self,
        default_locale: LocaleCode = DEFAULT_LOCALE,
        *,
        rule_store: PluralRuleStore | None = None,
        reporter: DiagnosticReporter | None = None,
        strict: bool = False,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
        interpolator: StringInterpolator | None = None,
    ) -> None:
        """Initialize an empty catalog.

        Args:
            default_locale: Last locale tried for every key
            rule_store: Plural rules (default: default_rule_store())
            reporter: Degradation hook (default: log_diagnostic)
            strict: Raise LocalizationIntegrityError on any degradation
                instead of falling back. Overrides reporter.
            on_fallback: Called when a key is served by another locale
            interpolator: Placeholder syntax (default: {name})

        Raises:
            ValueError: If default_locale is empty
        """
        if not default_locale or not default_locale.strip():
            msg = "Default locale cannot be empty"
            raise ValueError(msg)

        self._default_locale = normalize_locale(default_locale)
        self._rule_store = rule_store if rule_store is not None else default_rule_store()
        self._strict = strict
        if strict:
            self._reporter: DiagnosticReporter = raise_diagnostic
        else:
            self._reporter = reporter if reporter is not None else log_diagnostic
        self._on_fallback = on_fallback
        self._interpolator = interpolator if interpolator is not None else DEFAULT_INTERPOLATOR
        self._entries: Mapping[LocaleCode, Mapping[LocalizationKey, Localization]] = (
            MappingProxyType({})
        )
        self._lock = threading.Lock()

    @classmethod
    def for_system_locale(cls, **kwargs: Any) -> LocalizationCatalog:
        """Create a catalog whose default locale is the detected system locale."""
        return cls(get_system_locale(), **kwargs)

    @property
    def default_locale(self) -> LocaleCode:
        """Normalized default locale."""
        return self._default_locale

    @property
    def strict(self) -> bool:
        """Whether degradations raise instead of falling back."""
        return self._strict

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Normalized locales that have at least one entry, sorted."""
        return tuple(sorted(self._entries))

    def __repr__(self) -> str:
        return (
            f"LocalizationCatalog(default_locale={self._default_locale!r}, "
            f"locales={list(self.locales)!r}, strict={self._strict})"
        )

    def keys(self, locale: LocaleCode) -> frozenset[LocalizationKey]:
        """Keys defined for exactly this locale (no fallback)."""
        return frozenset(self._entries.get(normalize_locale(locale), {}))

    def add_localizations(
        self,
        locale: LocaleCode,
        entries: Mapping[LocalizationKey, RawLocalization | Localization],
    ) -> None:
        """Add or replace entries for a locale.

        Args:
            locale: Locale the entries are written in
            entries: Key -> template string, plural mapping, or Localization

        Raises:
            InvalidLocalizationError: If any value is malformed (nothing is added)
        """
        parsed = parse_localizations(entries)
        normalized = normalize_locale(locale)
        with self._lock:
            snapshot = dict(self._entries)
            snapshot[normalized] = MappingProxyType({**snapshot.get(normalized, {}), **parsed})
            self._entries = MappingProxyType(snapshot)
        logger.info("Added %d localization(s) for locale '%s'", len(parsed), normalized)

    def _lookup_chain(self, locale: LocaleCode) -> tuple[LocaleCode, ...]:
        requested = normalize_locale(locale)
        # dict.fromkeys() removes duplicates while maintaining order
        return tuple(
            dict.fromkeys(
                (
                    requested,
                    base_language(requested),
                    self._default_locale,
                    base_language(self._default_locale),
                )
            )
        )

    def lookup(
        self, key: LocalizationKey, locale: LocaleCode
    ) -> tuple[LocaleCode, Localization] | None:
        """Find the entry for a key along the locale fallback chain.

        Returns:
            (serving locale, Localization), or None if no locale has the key
        """
        entries = self._entries
        for candidate in self._lookup_chain(locale):
            localization = entries.get(candidate, {}).get(key)
            if localization is not None:
                return (candidate, localization)
        return None

    def has_localization(self, key: LocalizationKey, locale: LocaleCode) -> bool:
        """Whether localize() would find an entry for the key."""
        return self.lookup(key, locale) is not None

    def localize(
        self,
        key: LocalizationKey,
        locale: LocaleCode,
        interpolations: Interpolations | None = None,
    ) -> str:
        """Resolve a key for a locale.

        Args:
            key: Catalog key
            locale: Requested locale
            interpolations: Placeholder values

        Returns:
            Resolved text, or the key itself if no locale defines it

        Raises:
            LocalizationIntegrityError: In strict mode, on any degradation
        """
        reporter = self._reporter_for(key)
        found = self.lookup(key, locale)
        if found is None:
            reporter(ErrorTemplate.localization_not_found(key, locale))
            return key

        resolved_locale, localization = found
        if resolved_locale != normalize_locale(locale):
            logger.debug("Localization '%s' for '%s' served by '%s'", key, locale, resolved_locale)
            if self._on_fallback is not None:
                self._on_fallback(
                    FallbackInfo(
                        requested_locale=locale,
                        resolved_locale=resolved_locale,
                        key=key,
                    )
                )

        return resolve(
            localization,
            resolved_locale,
            interpolations,
            rule_store=self._rule_store,
            reporter=reporter,
            interpolator=self._interpolator,
        )

    def _reporter_for(self, key: LocalizationKey) -> DiagnosticReporter:
        """Wrap the reporter so every diagnostic carries the catalog key."""
        reporter = self._reporter

        def report(diagnostic: Diagnostic) -> None:
            reporter(dataclasses.replace(diagnostic, key=key))

        return report
