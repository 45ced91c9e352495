"""Reporting hooks for degraded resolution.

Resolution never raises on malformed catalogs: it falls back (empty string,
'other' category, literal placeholder) and hands a Diagnostic to a reporter.
The reporter decides what visibility the degradation gets.

Built-in reporters:
    log_diagnostic     - log through the 'lingoengine' logger (default)
    CollectingReporter - record diagnostics for later inspection
    raise_diagnostic   - strict mode: raise LocalizationIntegrityError

Any callable accepting a Diagnostic is a valid reporter.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from typing import TypeAlias

from .codes import Diagnostic, DiagnosticCode
from .errors import LocalizationIntegrityError

__all__ = [
    "CollectingReporter",
    "DiagnosticReporter",
    "log_diagnostic",
    "raise_diagnostic",
]

logger = logging.getLogger(__name__)

DiagnosticReporter: TypeAlias = Callable[[Diagnostic], None]
"""Callable invoked once per degradation during resolution."""


def log_diagnostic(diagnostic: Diagnostic) -> None:
    """Log a diagnostic as a warning (default reporter)."""
    logger.warning("%s: %s", diagnostic.code.name, diagnostic.message)


def raise_diagnostic(diagnostic: Diagnostic) -> None:
    """Escalate a diagnostic to LocalizationIntegrityError (strict reporter).

    Raises:
        LocalizationIntegrityError: Always
    """
    raise LocalizationIntegrityError(diagnostic)


class CollectingReporter:
    """Reporter that records every diagnostic it receives.

    Thread-safe: a single instance may be shared by concurrent resolutions.

    Example:
        >>> from lingoengine import Pluralized, resolve
        >>> reporter = CollectingReporter()
        >>> resolve(Pluralized({"other": "x"}), "en", {"n": 1}, reporter=reporter)
        ''
        >>> [d.code.name for d in reporter]
        ['MISSING_PLURAL_FORM']
    """

    __slots__ = ("_diagnostics", "_lock")

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []
        self._lock = threading.Lock()

    def __call__(self, diagnostic: Diagnostic) -> None:
        with self._lock:
            self._diagnostics.append(diagnostic)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Snapshot of recorded diagnostics in report order."""
        with self._lock:
            return tuple(self._diagnostics)

    @property
    def codes(self) -> tuple[DiagnosticCode, ...]:
        """Codes of recorded diagnostics in report order."""
        return tuple(d.code for d in self.diagnostics)

    def clear(self) -> None:
        """Forget all recorded diagnostics."""
        with self._lock:
            self._diagnostics.clear()
