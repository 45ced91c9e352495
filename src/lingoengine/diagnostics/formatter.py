"""Rendering of Diagnostic objects for logs, terminals and tooling.

Python 3.13+.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Rendering styles supported by DiagnosticFormatter."""

    RUST = "rust"  # multi-line, with context and help lines
    SIMPLE = "simple"  # CODE: message
    JSON = "json"  # one object per diagnostic, None fields omitted


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)

    Example:
        >>> from lingoengine.diagnostics import ErrorTemplate
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.unresolved_placeholder("name")
        >>> print(formatter.format(diagnostic))
        warning[UNRESOLVED_PLACEHOLDER]: No interpolation value for placeholder 'name'
          = placeholder: name
          = help: Pass a value for 'name' in the interpolations

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        UNRESOLVED_PLACEHOLDER: No interpolation value for placeholder 'name'
    """

    output_format: OutputFormat = OutputFormat.RUST

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    @staticmethod
    def _escape(text: str) -> str:
        # Keep each diagnostic on its own lines in log output
        return text.replace("\r", "\\r").replace("\n", "\\n")

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        lines = [
            f"{diagnostic.severity}[{diagnostic.code.name}]: "
            f"{self._escape(diagnostic.message)}"
        ]
        context = (
            ("locale", diagnostic.locale),
            ("key", diagnostic.key),
            ("category", diagnostic.category),
            ("placeholder", diagnostic.placeholder),
        )
        lines.extend(
            f"  = {label}: {self._escape(value)}" for label, value in context if value
        )
        if diagnostic.hint:
            lines.append(f"  = help: {self._escape(diagnostic.hint)}")
        return "\n".join(lines)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        return f"{diagnostic.code.name}: {self._escape(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data = {
            "code": diagnostic.code.name,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
            "locale": diagnostic.locale,
            "key": diagnostic.key,
            "category": diagnostic.category,
            "placeholder": diagnostic.placeholder,
            "hint": diagnostic.hint,
        }
        return json.dumps({k: v for k, v in data.items() if v is not None})
