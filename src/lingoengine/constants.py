"""Shared constants for LingoEngine.

Centralized configuration constants used across the runtime and
localization packages. Placing constants here avoids circular imports
and provides a single source of truth.

Constants are grouped by domain:
- Placeholder syntax: Token delimiters shared by catalog authors and the interpolator
- Locale defaults: Fallback locale for catalogs
- Cache limits: Memory bounds for CLDR rule caching
- Fallback strings: Output for entries that cannot be resolved

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Placeholder syntax
    "PLACEHOLDER_OPEN",
    "PLACEHOLDER_CLOSE",
    # Locale defaults
    "DEFAULT_LOCALE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Fallback strings
    "FALLBACK_MISSING_PLURAL_FORM",
]

# ============================================================================
# PLACEHOLDER SYNTAX
# ============================================================================
#
# Templates reference interpolation values as {name}. Every authored catalog
# depends on this format; changing the defaults breaks existing templates.
# Alternate syntaxes (e.g. %{name}) are configured per StringInterpolator.

PLACEHOLDER_OPEN: str = "{"
PLACEHOLDER_CLOSE: str = "}"

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used by LocalizationCatalog when no default is given.
DEFAULT_LOCALE: str = "en"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale objects and CLDR plural rules.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Output of a pluralized entry that lacks the selected category.
FALLBACK_MISSING_PLURAL_FORM: str = ""
