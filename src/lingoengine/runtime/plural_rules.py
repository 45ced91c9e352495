"""CLDR plural rules implementation using Babel.

A PluralizationRule maps a non-negative integer quantity to a PluralCategory
for one language. Rule bodies are never written by hand here: they come from
Babel's CLDR data (from_cldr) or from CLDR rule expressions compiled by
Babel's rule parser (from_expressions).

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from lingoengine.enums import PluralCategory
from lingoengine.locale_utils import get_babel_locale, normalize_locale

if TYPE_CHECKING:
    from babel.plural import PluralRule

__all__ = ["PluralizationRule"]


@dataclass(frozen=True, slots=True)
class PluralizationRule:
    """Pure mapping from quantity to plural category for one language.

    Immutable after construction and safe to share between threads.

    Attributes:
        locale: Normalized locale code the rule was built for
        function: Callable returning a CLDR tag ("one", "few", ...) for a quantity
        categories: Categories the rule can produce (always includes OTHER)

    Examples:
        >>> rule = PluralizationRule.from_cldr("ru")
        >>> rule.categorize(1), rule.categorize(3), rule.categorize(5)
        (<PluralCategory.ONE: 'one'>, <PluralCategory.FEW: 'few'>, <PluralCategory.MANY: 'many'>)

        >>> rule = PluralizationRule.from_expressions("xx", {"one": "n is 1"})
        >>> rule.categorize(2)
        <PluralCategory.OTHER: 'other'>
    """

    locale: str
    function: Callable[[int], str] = field(compare=False)
    categories: frozenset[PluralCategory] = frozenset({PluralCategory.OTHER})

    def categorize(self, quantity: int) -> PluralCategory:
        """Return the plural category for a non-negative integer quantity.

        Args:
            quantity: Magnitude to categorize; callers strip the sign first

        Returns:
            PluralCategory selected by the rule

        Raises:
            ValueError: If quantity is negative
        """
        if quantity < 0:
            msg = f"Plural quantity must be non-negative, got {quantity}"
            raise ValueError(msg)
        return PluralCategory(self.function(quantity))

    @classmethod
    def from_cldr(cls, locale: str) -> PluralizationRule:
        """Build the rule for a locale from Babel's CLDR data.

        Args:
            locale: Locale code (BCP-47 or POSIX format accepted)

        Raises:
            babel.core.UnknownLocaleError: If CLDR has no data for the locale
            ValueError: If locale format is invalid
        """
        return cls._from_babel(locale, get_babel_locale(locale).plural_form)

    @classmethod
    def from_expressions(cls, locale: str, expressions: Mapping[str, str]) -> PluralizationRule:
        """Compile a rule from CLDR plural rule expressions.

        This is the table format for rules that CLDR lacks or that an
        application overrides. Quantities matching no expression are 'other'.

        Args:
            locale: Locale label for the rule
            expressions: Category tag -> CLDR condition
                (e.g. {"one": "n is 1", "few": "n in 2..4"})

        Raises:
            ValueError: If a tag is not a plural category or is repeated
            babel.plural.RuleError: If an expression is malformed
        """
        from babel.plural import PluralRule  # noqa: PLC0415 - Babel loads lazily

        return cls._from_babel(locale, PluralRule(expressions))

    @classmethod
    def from_function(
        cls,
        locale: str,
        function: Callable[[int], str],
        categories: Iterable[str] = (),
    ) -> PluralizationRule:
        """Wrap an arbitrary quantity -> tag callable.

        Args:
            locale: Locale label for the rule
            function: Callable returning a plural category tag
            categories: Tags the callable can return besides 'other'
        """
        return cls(
            locale=normalize_locale(locale),
            function=function,
            categories=_category_set(categories),
        )

    @classmethod
    def _from_babel(cls, locale: str, plural_rule: PluralRule) -> PluralizationRule:
        return cls(
            locale=normalize_locale(locale),
            function=plural_rule,
            categories=_category_set(plural_rule.tags),
        )


def _category_set(tags: Iterable[str]) -> frozenset[PluralCategory]:
    return frozenset(PluralCategory(tag) for tag in tags) | {PluralCategory.OTHER}
