"""LingoEngine exception hierarchy with structured diagnostics.

Resolution never raises for degraded catalogs; these exceptions surface
only through strict reporting or when catalog data is malformed.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "InvalidLocalizationError",
    "LingoError",
    "LocalizationIntegrityError",
]


class LingoError(Exception):
    """Base exception for all LingoEngine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LingoError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class LocalizationIntegrityError(LingoError):
    """Degraded resolution escalated to an error by strict reporting.

    Raised by raise_diagnostic (and catalogs created with strict=True) in
    place of the silent fallback: missing plural forms, missing rules,
    unresolved placeholders, and missing catalog keys.
    """


class InvalidLocalizationError(LingoError, ValueError):
    """Catalog value cannot be converted to a Localization.

    Examples:
    - A plural mapping with an unknown category tag ("several")
    - A template that is neither a string nor a mapping
    """
