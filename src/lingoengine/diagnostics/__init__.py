"""Diagnostic system for LingoEngine.

Provides structured diagnostics for degraded resolution, the exception
hierarchy, and the reporting hooks that decide how degradations surface.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import InvalidLocalizationError, LingoError, LocalizationIntegrityError
from .formatter import DiagnosticFormatter, OutputFormat
from .reporting import (
    CollectingReporter,
    DiagnosticReporter,
    log_diagnostic,
    raise_diagnostic,
)
from .templates import ErrorTemplate

__all__ = [
    "CollectingReporter",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DiagnosticReporter",
    "ErrorTemplate",
    "InvalidLocalizationError",
    "LingoError",
    "LocalizationIntegrityError",
    "OutputFormat",
    "log_diagnostic",
    "raise_diagnostic",
]
