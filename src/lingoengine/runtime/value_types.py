"""Core value types for the LingoEngine runtime.

Defines the fundamental types used throughout resolution:
    - InterpolationValue: Closed union of values accepted by placeholders
    - Interpolations: Mapping of placeholder name -> value
    - Universal: Single template independent of quantity
    - Pluralized: Templates keyed by plural category
    - Localization: Universal | Pluralized

Resolution entry points live on the variants (Universal.resolve,
Pluralized.resolve) and in lingoengine.runtime.resolver.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import TYPE_CHECKING, TypeAlias

from lingoengine.enums import PluralCategory

if TYPE_CHECKING:
    from lingoengine.diagnostics import DiagnosticReporter
    from lingoengine.runtime.interpolator import StringInterpolator
    from lingoengine.runtime.rule_store import PluralRuleStore

__all__ = [
    "InterpolationValue",
    "Interpolations",
    "Localization",
    "Pluralized",
    "Universal",
]

InterpolationValue: TypeAlias = int | float | Decimal | str
"""Value substituted into a placeholder.

Only int values drive plural selection. bool, float and Decimal render
via format_value() and never select a plural category.
"""

Interpolations: TypeAlias = Mapping[str, InterpolationValue]
"""Placeholder name -> value. Iteration order is the mapping's insertion order."""


@dataclass(frozen=True, slots=True)
class Universal:
    """Localization with one template for every quantity.

    Example:
        >>> Universal("Hello {name}").resolve("en", {"name": "Ann"})
        'Hello Ann'
    """

    template: str

    def resolve(
        self,
        locale: str,
        interpolations: Interpolations | None = None,
        *,
        rule_store: PluralRuleStore | None = None,
        reporter: DiagnosticReporter | None = None,
        interpolator: StringInterpolator | None = None,
    ) -> str:
        """Resolve to a string; see lingoengine.runtime.resolver.resolve."""
        from lingoengine.runtime.resolver import resolve  # noqa: PLC0415 - circular

        return resolve(
            self,
            locale,
            interpolations,
            rule_store=rule_store,
            reporter=reporter,
            interpolator=interpolator,
        )


@dataclass(frozen=True, slots=True)
class Pluralized:
    """Localization with one template per plural category.

    Keys need not cover every category; resolving to a category with no
    template degrades to an empty string and reports MISSING_PLURAL_FORM.

    Attributes:
        templates: Read-only mapping of PluralCategory -> template. Plain
            CLDR tags ("one", "other") are accepted at construction.
        quantity_key: Interpolation entry that drives plural selection. When
            None, the first int value in insertion order is used.

    Raises:
        ValueError: If a template key is not a plural category

    Example:
        >>> items = Pluralized({"one": "{n} item", "other": "{n} items"})
        >>> items.resolve("en", {"n": 5})
        '5 items'
    """

    templates: Mapping[PluralCategory, str]
    quantity_key: str | None = field(default=None, kw_only=True)

    def __post_init__(self) -> None:
        normalized = {PluralCategory(tag): template for tag, template in self.templates.items()}
        object.__setattr__(self, "templates", MappingProxyType(normalized))

    def __hash__(self) -> int:
        return hash((frozenset(self.templates.items()), self.quantity_key))

    @property
    def categories(self) -> frozenset[PluralCategory]:
        """Categories that have a template."""
        return frozenset(self.templates)

    def resolve(
        self,
        locale: str,
        interpolations: Interpolations | None = None,
        *,
        rule_store: PluralRuleStore | None = None,
        reporter: DiagnosticReporter | None = None,
        interpolator: StringInterpolator | None = None,
    ) -> str:
        """Resolve to a string; see lingoengine.runtime.resolver.resolve."""
        from lingoengine.runtime.resolver import resolve  # noqa: PLC0415 - circular

        return resolve(
            self,
            locale,
            interpolations,
            rule_store=rule_store,
            reporter=reporter,
            interpolator=interpolator,
        )


Localization: TypeAlias = Universal | Pluralized
"""Tagged union of the two localization shapes."""
