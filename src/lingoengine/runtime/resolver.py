"""Localization resolution.

Turns a Localization plus a locale and interpolation values into text:

    Universal  -> interpolate(template)
    Pluralized -> quantity from interpolations
               -> rule store lookup -> plural category
               -> template for the category -> interpolate

Degradations (missing rule, missing plural form, unresolved placeholder) go
to the reporter and never interrupt resolution, unless the reporter itself
raises (strict mode).

Quantity selection:
    With Pluralized.quantity_key set, only that entry is considered.
    Otherwise the first int value in the mapping's iteration order wins.
    Floats and Decimals never select: CLDR counts their visible fraction
    digits, so "1.0" is not singular in English. Python mappings iterate
    in insertion order, so the choice is deterministic for a given call.
    Negative quantities are categorized by magnitude, and the selecting
    entry is rendered by magnitude too:
    {"n": -1} with "{n} item" resolves to "1 item".

Python 3.13+.
"""

from __future__ import annotations

from lingoengine.constants import FALLBACK_MISSING_PLURAL_FORM
from lingoengine.diagnostics import DiagnosticReporter, ErrorTemplate, log_diagnostic
from lingoengine.enums import PluralCategory
from lingoengine.runtime.interpolator import DEFAULT_INTERPOLATOR, StringInterpolator
from lingoengine.runtime.rule_store import PluralRuleStore, default_rule_store
from lingoengine.runtime.value_types import (
    InterpolationValue,
    Interpolations,
    Localization,
    Pluralized,
    Universal,
)

__all__ = [
    "extract_quantity",
    "resolve",
    "select_plural_category",
]


def _as_integer(value: InterpolationValue | object) -> int | None:
    """Return value if it is an int (bool excluded), else None."""
    match value:
        case bool():
            return None
        case int():
            return value
        case _:
            return None


def _quantity_entry(
    interpolations: Interpolations | None,
    quantity_key: str | None,
) -> tuple[str, int] | None:
    """Find the (name, signed integer) entry that drives plural selection."""
    if interpolations is None:
        return None
    if quantity_key is not None:
        if quantity_key not in interpolations:
            return None
        integer = _as_integer(interpolations[quantity_key])
        return None if integer is None else (quantity_key, integer)
    for name, value in interpolations.items():
        integer = _as_integer(value)
        if integer is not None:
            return (name, integer)
    return None


def extract_quantity(
    interpolations: Interpolations | None,
    quantity_key: str | None = None,
) -> int | None:
    """Return the non-negative quantity used for plural selection.

    Args:
        interpolations: Placeholder values (may be None)
        quantity_key: Only consider this entry (optional)

    Returns:
        Absolute value of the first int entry (or of quantity_key's
        entry), or None if there is none.

    Examples:
        >>> extract_quantity({"name": "Ann", "count": -3, "total": 9})
        3
        >>> extract_quantity({"count": -3, "total": 9}, quantity_key="total")
        9
        >>> extract_quantity({"ratio": 0.5, "total": 1.0}) is None
        True
    """
    entry = _quantity_entry(interpolations, quantity_key)
    return None if entry is None else abs(entry[1])


def select_plural_category(
    locale: str,
    quantity: int | None,
    *,
    rule_store: PluralRuleStore | None = None,
    reporter: DiagnosticReporter | None = None,
) -> PluralCategory:
    """Select the plural category for a quantity in a locale.

    Args:
        locale: Locale code whose rule applies
        quantity: Non-negative quantity, or None when no quantity was found
        rule_store: Store to consult (default: default_rule_store())
        reporter: Receives MISSING_PLURALIZATION_RULE (default: log_diagnostic)

    Returns:
        The rule's category, or OTHER when the locale has no rule or there
        is no quantity.
    """
    if rule_store is None:
        rule_store = default_rule_store()
    if reporter is None:
        reporter = log_diagnostic

    rule = rule_store.lookup_rule(locale)
    if rule is None:
        reporter(ErrorTemplate.missing_pluralization_rule(locale))
        return PluralCategory.OTHER
    if quantity is None:
        return PluralCategory.OTHER
    return rule.categorize(quantity)


def resolve(
    localization: Localization,
    locale: str,
    interpolations: Interpolations | None = None,
    *,
    rule_store: PluralRuleStore | None = None,
    reporter: DiagnosticReporter | None = None,
    interpolator: StringInterpolator | None = None,
) -> str:
    """Resolve a localization to text for a locale.

    Never raises for degraded catalogs: a missing plural form resolves to
    an empty string, a missing rule to the 'other' form, an unknown
    placeholder stays literal. Each case is passed to the reporter.

    Args:
        localization: Universal or Pluralized value
        locale: Locale code (BCP-47 or POSIX format accepted)
        interpolations: Placeholder values (None skips interpolation)
        rule_store: Plural rules (default: default_rule_store())
        reporter: Degradation hook (default: log_diagnostic)
        interpolator: Placeholder syntax (default: {name})

    Returns:
        Resolved text

    Raises:
        TypeError: If localization is not Universal or Pluralized

    Examples:
        >>> resolve(Universal("Hello {name}"), "en", {"name": "Ann"})
        'Hello Ann'
        >>> items = Pluralized({"one": "{n} item", "other": "{n} items"})
        >>> resolve(items, "en", {"n": 1}), resolve(items, "en", {"n": -1})
        ('1 item', '1 item')
    """
    if reporter is None:
        reporter = log_diagnostic
    if interpolator is None:
        interpolator = DEFAULT_INTERPOLATOR

    match localization:
        case Universal(template=template):
            return interpolator.interpolate(template, interpolations, reporter=reporter)

        case Pluralized(templates=templates, quantity_key=quantity_key):
            entry = _quantity_entry(interpolations, quantity_key)
            category = select_plural_category(
                locale,
                None if entry is None else abs(entry[1]),
                rule_store=rule_store,
                reporter=reporter,
            )

            template = templates.get(category)
            if template is None:
                reporter(ErrorTemplate.missing_plural_form(category, locale))
                return FALLBACK_MISSING_PLURAL_FORM

            if interpolations is not None and entry is not None and entry[1] < 0:
                name = entry[0]
                interpolations = {**interpolations, name: abs(interpolations[name])}
            return interpolator.interpolate(template, interpolations, reporter=reporter)

        case _:
            msg = f"Expected Universal or Pluralized, got {type(localization).__name__}"
            raise TypeError(msg)
