"""LingoEngine runtime package.

Provides plural rules, the rule store, placeholder interpolation, and
localization resolution. Every object here is immutable and safe for
concurrent use without locking.

Python 3.13+.
"""

from .interpolator import DEFAULT_INTERPOLATOR, StringInterpolator, format_value, interpolate
from .plural_rules import PluralizationRule
from .resolver import extract_quantity, resolve, select_plural_category
from .rule_store import PluralRuleStore, default_rule_store, lookup_rule
from .value_types import InterpolationValue, Interpolations, Localization, Pluralized, Universal

__all__ = [
    "DEFAULT_INTERPOLATOR",
    "InterpolationValue",
    "Interpolations",
    "Localization",
    "PluralRuleStore",
    "PluralizationRule",
    "Pluralized",
    "StringInterpolator",
    "Universal",
    "default_rule_store",
    "extract_quantity",
    "format_value",
    "interpolate",
    "lookup_rule",
    "resolve",
    "select_plural_category",
]
