"""Catalog layer: keyed localizations with locale fallback.

Submodules:
    types    - PEP 695 type aliases (LocaleCode, LocalizationKey, RawLocalization)
    loading  - parse_localization, parse_localizations (raw data -> Localization)
    catalog  - LocalizationCatalog, FallbackInfo

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from lingoengine.localization.catalog import FallbackInfo, LocalizationCatalog
from lingoengine.localization.loading import parse_localization, parse_localizations
from lingoengine.localization.types import LocaleCode, LocalizationKey, RawLocalization

__all__ = [
    # Catalog
    "LocalizationCatalog",
    "FallbackInfo",
    # Raw data conversion
    "parse_localization",
    "parse_localizations",
    # Type aliases for user code type annotations
    "LocaleCode",
    "LocalizationKey",
    "RawLocalization",
]
