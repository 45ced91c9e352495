"""Pluralization rule store with locale fallback.

Maps locale codes to PluralizationRule instances. A store is an immutable
value: build it once, pass it to resolution calls, and share it freely
between threads. Tests substitute their own stores instead of patching
process-wide state.

Lookup order for a locale such as "en-US":
    1. Explicit table, exact key ("en_us")
    2. Explicit table, base language ("en")
    3. CLDR data via Babel, exact then base language (CLDR-backed stores only)
    4. None - callers degrade to the 'other' category

Python 3.13+. Depends on Babel for CLDR data.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from babel.core import UnknownLocaleError

from lingoengine.constants import MAX_LOCALE_CACHE_SIZE
from lingoengine.locale_utils import base_language, normalize_locale
from lingoengine.runtime.plural_rules import PluralizationRule

__all__ = [
    "PluralRuleStore",
    "default_rule_store",
    "lookup_rule",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PluralRuleStore:
    """Read-only table of locale -> PluralizationRule.

    Table keys are normalized at construction, so "en-US", "en_US" and
    "EN_us" address the same entry.

    Attributes:
        rules: Explicit rule table (read-only view)
        use_cldr: Consult Babel's CLDR data after the explicit table misses

    Examples:
        >>> store = PluralRuleStore({"en": PluralizationRule.from_cldr("en")})
        >>> store.lookup_rule("en-US") is store.rules["en"]
        True
        >>> store.lookup_rule("de") is None
        True

        >>> PluralRuleStore.from_cldr().lookup_rule("pl").categorize(3)
        <PluralCategory.FEW: 'few'>
    """

    rules: Mapping[str, PluralizationRule] = field(
        default_factory=lambda: MappingProxyType({})
    )
    use_cldr: bool = False

    def __post_init__(self) -> None:
        normalized = {normalize_locale(locale): rule for locale, rule in self.rules.items()}
        object.__setattr__(self, "rules", MappingProxyType(normalized))

    @classmethod
    def from_cldr(cls, rules: Mapping[str, PluralizationRule] | None = None) -> PluralRuleStore:
        """Create a store backed by Babel's CLDR data.

        Args:
            rules: Explicit rules that take precedence over CLDR (optional)
        """
        return cls(rules or {}, use_cldr=True)

    @property
    def locales(self) -> frozenset[str]:
        """Normalized locale codes in the explicit table."""
        return frozenset(self.rules)

    def with_rules(self, rules: Mapping[str, PluralizationRule]) -> PluralRuleStore:
        """Return a new store with additional or replaced explicit rules.

        The receiver is not modified.
        """
        return PluralRuleStore({**self.rules, **rules}, use_cldr=self.use_cldr)

    def lookup_rule(self, locale: str) -> PluralizationRule | None:
        """Find the rule for a locale, falling back to its base language.

        Args:
            locale: Locale code (BCP-47 or POSIX format accepted)

        Returns:
            PluralizationRule, or None if neither the locale nor its base
            language has a rule. Never raises for unknown locales.
        """
        exact = normalize_locale(locale)
        # dict.fromkeys() removes the duplicate when the locale has no region
        candidates = tuple(dict.fromkeys((exact, base_language(exact))))

        for candidate in candidates:
            rule = self.rules.get(candidate)
            if rule is not None:
                if candidate != exact:
                    logger.debug("Plural rule for '%s' resolved via '%s'", locale, candidate)
                return rule

        if self.use_cldr:
            for candidate in candidates:
                rule = _cldr_rule(candidate)
                if rule is not None:
                    return rule

        logger.debug("No plural rule for locale '%s'", locale)
        return None


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _cldr_rule(locale: str) -> PluralizationRule | None:
    """Build and memoize the CLDR rule for a normalized locale code."""
    if not locale:
        return None
    try:
        return PluralizationRule.from_cldr(locale)
    except (UnknownLocaleError, ValueError):
        return None


@functools.cache
def default_rule_store() -> PluralRuleStore:
    """Return the process-wide CLDR-backed store.

    Created on first access and never mutated afterwards.
    """
    return PluralRuleStore.from_cldr()


def lookup_rule(locale: str, store: PluralRuleStore | None = None) -> PluralizationRule | None:
    """Find the rule for a locale in a store (default: default_rule_store())."""
    if store is None:
        store = default_rule_store()
    return store.lookup_rule(locale)
