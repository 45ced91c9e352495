"""Diagnostic codes and the Diagnostic record passed to reporters.

Python 3.13+.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Stable numeric identifiers for every degradation.

    Organized by category:
        1000-1999: Reference errors (missing catalog entries, placeholders)
        2000-2999: Resolution errors (plural rule and plural form gaps)
        3000-3999: Catalog data errors (malformed localization values)
    """

    # Reference errors (1000-1999)
    LOCALIZATION_NOT_FOUND = 1001
    UNRESOLVED_PLACEHOLDER = 1002

    # Resolution errors (2000-2999)
    MISSING_PLURAL_FORM = 2001
    MISSING_PLURALIZATION_RULE = 2002

    # Catalog data errors (3000-3999)
    INVALID_LOCALIZATION = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context for a
    reporter to log, count, or assert on a degradation without parsing
    the message text.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        locale: Locale being resolved (None if not applicable)
        key: Catalog key being resolved (None if not applicable)
        category: Plural category involved (None if not applicable)
        placeholder: Placeholder name left unresolved (None if not applicable)
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    locale: str | None = None
    key: str | None = None
    category: str | None = None
    placeholder: str | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[MISSING_PLURAL_FORM]: Missing plural form 'one' for locale 'en'
              = locale: en
              = category: one
              = help: Add a 'one' template to the pluralized entry

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
