"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating LocalizationCatalog call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from typing import TypeAlias

__all__ = [
    "LocaleCode",
    "LocalizationKey",
    "RawLocalization",
]

LocaleCode: TypeAlias = str
"""BCP-47 or POSIX locale code (e.g., 'en', 'pt-BR', 'zh_Hans_CN')."""

LocalizationKey: TypeAlias = str
"""Catalog key for a localized string (e.g., 'inbox.unread')."""

RawLocalization: TypeAlias = str | Mapping[str, str]
"""Catalog value before parsing: a template, or plural tag -> template."""
