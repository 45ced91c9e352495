"""LingoEngine - plural-aware string localization on CLDR rules.

Resolves localized templates for a locale: picks the plural form a
language requires for a quantity, then substitutes {name} placeholders.

Public API:
    resolve - Resolve a Universal or Pluralized localization
    interpolate - Substitute {name} placeholders in a template
    lookup_rule - Find the plural rule for a locale (with region fallback)
    Universal, Pluralized - Localization variants
    PluralCategory - zero / one / two / few / many / other
    PluralizationRule, PluralRuleStore - CLDR plural rules and their table
    LocalizationCatalog - Keyed localizations with locale fallback

Diagnostics:
    Degraded resolution (missing plural form, missing rule, unresolved
    placeholder, missing key) never raises; it is passed to a reporter.
    CollectingReporter records diagnostics; raise_diagnostic (or
    strict=True on a catalog) turns them into LocalizationIntegrityError.

Submodules:
    lingoengine.runtime - Rules, rule store, interpolator, resolver
    lingoengine.localization - Catalog and raw data conversion
    lingoengine.diagnostics - Diagnostic codes, formatter, reporters, errors
"""

from .diagnostics import (
    CollectingReporter,
    Diagnostic,
    DiagnosticCode,
    InvalidLocalizationError,
    LingoError,
    LocalizationIntegrityError,
    log_diagnostic,
    raise_diagnostic,
)
from .enums import PluralCategory
from .localization import LocalizationCatalog
from .runtime import (
    Localization,
    PluralizationRule,
    Pluralized,
    PluralRuleStore,
    StringInterpolator,
    Universal,
    default_rule_store,
    interpolate,
    lookup_rule,
    resolve,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("lingoengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CollectingReporter",
    "Diagnostic",
    "DiagnosticCode",
    "InvalidLocalizationError",
    "LingoError",
    "Localization",
    "LocalizationCatalog",
    "LocalizationIntegrityError",
    "PluralCategory",
    "PluralRuleStore",
    "PluralizationRule",
    "Pluralized",
    "StringInterpolator",
    "Universal",
    "__version__",
    "default_rule_store",
    "interpolate",
    "log_diagnostic",
    "lookup_rule",
    "raise_diagnostic",
    "resolve",
]
