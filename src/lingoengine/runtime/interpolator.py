"""Placeholder interpolation for localization templates.

Substitutes {name} tokens with caller-supplied values in a single
left-to-right pass. Substituted text is never rescanned, so a value that
itself contains "{other}" is inserted literally.

Token grammar (with the default delimiters):
    placeholder := "{" name "}"
    name        := one or more characters, excluding "{" and "}"

Anything that does not match (lone "{", "{}", unterminated "{name", stray
"}") is literal text. A placeholder whose name has no value stays in the
output verbatim and is reported as UNRESOLVED_PLACEHOLDER.

Python 3.13+.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

from lingoengine.constants import PLACEHOLDER_CLOSE, PLACEHOLDER_OPEN
from lingoengine.diagnostics import DiagnosticReporter, ErrorTemplate, log_diagnostic
from lingoengine.runtime.value_types import InterpolationValue, Interpolations

__all__ = [
    "DEFAULT_INTERPOLATOR",
    "StringInterpolator",
    "format_value",
    "interpolate",
]


def format_value(value: InterpolationValue | object) -> str:
    """Render an interpolation value as text.

    - str: verbatim
    - int: decimal digits, sign preserved
    - float, Decimal: positional decimal notation, never an exponent
      (1e20 -> "100000000000000000000", 2.5 -> "2.5"); non-finite values
      render as str() ("nan", "inf")
    - bool and anything else: str()

    Example:
        >>> format_value(-3), format_value(0.1), format_value(Decimal("1E+3"))
        ('-3', '0.1', '1000')
    """
    match value:
        case str():
            return value
        case bool():
            return str(value)
        case int():
            return str(value)
        case float() if not math.isfinite(value):
            return str(value)
        case float():
            # repr() gives the shortest round-tripping digits
            return format(Decimal(repr(value)), "f")
        case Decimal() if not value.is_finite():
            return str(value)
        case Decimal():
            return format(value, "f")
        case _:
            return str(value)


@dataclass(frozen=True, slots=True)
class StringInterpolator:
    """Scans templates for placeholders and substitutes values.

    Stateless and immutable; one instance may serve any number of threads.

    Attributes:
        open_delimiter: Token opening marker (default "{")
        close_delimiter: Token closing marker (default "}")

    Examples:
        >>> StringInterpolator().interpolate("Hello {name}", {"name": "Ann"})
        'Hello Ann'
        >>> StringInterpolator("%{", "}").interpolate("Hi %{name}", {"name": "Bo"})
        'Hi Bo'

    Raises:
        ValueError: If a delimiter is empty
    """

    open_delimiter: str = PLACEHOLDER_OPEN
    close_delimiter: str = PLACEHOLDER_CLOSE

    def __post_init__(self) -> None:
        if not self.open_delimiter or not self.close_delimiter:
            msg = "Placeholder delimiters cannot be empty"
            raise ValueError(msg)

    def placeholders(self, template: str) -> tuple[str, ...]:
        """Return placeholder names in order of appearance (with repeats)."""
        return tuple(name for _, _, name in self._scan(template))

    def interpolate(
        self,
        template: str,
        interpolations: Interpolations | None = None,
        *,
        reporter: DiagnosticReporter | None = None,
    ) -> str:
        """Substitute placeholders in a template.

        Args:
            template: Template text
            interpolations: Placeholder name -> value. None returns the
                template unchanged without scanning.
            reporter: Receives UNRESOLVED_PLACEHOLDER diagnostics
                (default: log_diagnostic)

        Returns:
            Template with every known placeholder replaced
        """
        if interpolations is None:
            return template
        if reporter is None:
            reporter = log_diagnostic

        parts: list[str] = []
        position = 0
        for start, end, name in self._scan(template):
            parts.append(template[position:start])
            if name in interpolations:
                parts.append(format_value(interpolations[name]))
            else:
                parts.append(template[start:end])
                reporter(ErrorTemplate.unresolved_placeholder(name))
            position = end
        parts.append(template[position:])
        return "".join(parts)

    def _scan(self, template: str) -> list[tuple[int, int, str]]:
        """Locate well-formed placeholders as (start, end, name) spans."""
        opener = self.open_delimiter
        closer = self.close_delimiter
        spans: list[tuple[int, int, str]] = []
        position = 0
        while True:
            start = template.find(opener, position)
            if start < 0:
                break
            close = template.find(closer, start + len(opener))
            if close < 0:
                # Unterminated: the rest of the template is literal
                break
            # Innermost opener before the closer: "{{name}" is "{" + "{name}"
            start = template.rfind(opener, start, close)
            name = template[start + len(opener) : close]
            end = close + len(closer)
            if name:
                spans.append((start, end, name))
            position = end
        return spans


DEFAULT_INTERPOLATOR = StringInterpolator()


def interpolate(
    template: str,
    interpolations: Interpolations | None = None,
    *,
    reporter: DiagnosticReporter | None = None,
) -> str:
    """Substitute {name} placeholders using the default interpolator.

    Example:
        >>> interpolate("Hello {name}", {"other": "x"})
        'Hello {name}'
    """
    return DEFAULT_INTERPOLATOR.interpolate(template, interpolations, reporter=reporter)
