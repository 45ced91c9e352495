"""Tests for the diagnostics package - codes, templates, formatter, reporters, errors."""

from __future__ import annotations

import doctest
import json
import logging
import threading
from types import ModuleType

import pytest

from lingoengine.diagnostics import (
    CollectingReporter,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    InvalidLocalizationError,
    LingoError,
    LocalizationIntegrityError,
    OutputFormat,
    log_diagnostic,
    raise_diagnostic,
)
from lingoengine.diagnostics import formatter, reporting


class TestDiagnosticCode:
    """Code numbering."""

    def test_codes_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]

        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "lower", "upper"),
        [
            (DiagnosticCode.LOCALIZATION_NOT_FOUND, 1000, 1999),
            (DiagnosticCode.UNRESOLVED_PLACEHOLDER, 1000, 1999),
            (DiagnosticCode.MISSING_PLURAL_FORM, 2000, 2999),
            (DiagnosticCode.MISSING_PLURALIZATION_RULE, 2000, 2999),
            (DiagnosticCode.INVALID_LOCALIZATION, 3000, 3999),
        ],
    )
    def test_ranges(self, code: DiagnosticCode, lower: int, upper: int) -> None:
        assert lower <= code.value <= upper


class TestErrorTemplate:
    """Diagnostic construction."""

    def test_missing_plural_form(self) -> None:
        diagnostic = ErrorTemplate.missing_plural_form("few", "ru")

        assert diagnostic.code is DiagnosticCode.MISSING_PLURAL_FORM
        assert diagnostic.message == "Missing plural form 'few' for locale 'ru'"
        assert diagnostic.category == "few"
        assert diagnostic.locale == "ru"
        assert diagnostic.severity == "error"

    def test_missing_pluralization_rule(self) -> None:
        diagnostic = ErrorTemplate.missing_pluralization_rule("tlh")

        assert diagnostic.code is DiagnosticCode.MISSING_PLURALIZATION_RULE
        assert "'tlh'" in diagnostic.message
        assert diagnostic.category == "other"
        assert diagnostic.severity == "warning"

    def test_unresolved_placeholder(self) -> None:
        diagnostic = ErrorTemplate.unresolved_placeholder("count")

        assert diagnostic.placeholder == "count"
        assert diagnostic.message == "No interpolation value for placeholder 'count'"

    def test_localization_not_found(self) -> None:
        diagnostic = ErrorTemplate.localization_not_found("menu.open", "de")

        assert diagnostic.key == "menu.open"
        assert diagnostic.message == "Localization 'menu.open' not found for locale 'de'"

    def test_invalid_localization_with_key(self) -> None:
        diagnostic = ErrorTemplate.invalid_localization("files", "plural mapping is empty")

        assert diagnostic.message == "Invalid localization 'files': plural mapping is empty"

    def test_invalid_localization_without_key(self) -> None:
        diagnostic = ErrorTemplate.invalid_localization(None, "unsupported type int")

        assert diagnostic.message == "Invalid localization value: unsupported type int"
        assert diagnostic.key is None

    def test_str_is_message(self) -> None:
        diagnostic = ErrorTemplate.unresolved_placeholder("x")

        assert str(diagnostic) == diagnostic.message


class TestDiagnosticFormatter:
    """Output styles."""

    def test_rust_style(self) -> None:
        diagnostic = ErrorTemplate.missing_plural_form("one", "en")

        assert DiagnosticFormatter().format(diagnostic) == (
            "error[MISSING_PLURAL_FORM]: Missing plural form 'one' for locale 'en'\n"
            "  = locale: en\n"
            "  = category: one\n"
            "  = help: Add a 'one' template to the pluralized entry"
        )

    def test_rust_style_matches_format_error(self) -> None:
        diagnostic = ErrorTemplate.localization_not_found("k", "fr")

        assert diagnostic.format_error() == DiagnosticFormatter().format(diagnostic)

    def test_simple_style(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostic = ErrorTemplate.unresolved_placeholder("name")

        assert formatter.format(diagnostic) == (
            "UNRESOLVED_PLACEHOLDER: No interpolation value for placeholder 'name'"
        )

    def test_json_style_omits_empty_fields(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        diagnostic = Diagnostic(code=DiagnosticCode.MISSING_PLURAL_FORM, message="m", locale="en")

        data = json.loads(formatter.format(diagnostic))

        assert data == {
            "code": "MISSING_PLURAL_FORM",
            "message": "m",
            "severity": "error",
            "locale": "en",
        }

    def test_newlines_escaped(self) -> None:
        diagnostic = ErrorTemplate.unresolved_placeholder("a\nb")

        first_line = DiagnosticFormatter().format(diagnostic).splitlines()[0]

        assert first_line.endswith("'a\\nb'")

    def test_format_all(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostics = [
            ErrorTemplate.unresolved_placeholder("a"),
            ErrorTemplate.unresolved_placeholder("b"),
        ]

        assert formatter.format_all(diagnostics).split("\n\n") == [
            formatter.format(d) for d in diagnostics
        ]


class TestReporters:
    """Built-in reporting hooks."""

    def test_log_diagnostic(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="lingoengine"):
            log_diagnostic(ErrorTemplate.missing_pluralization_rule("xx"))

        (record,) = caplog.records
        assert record.levelno == logging.WARNING
        assert record.name.startswith("lingoengine.")
        assert "MISSING_PLURALIZATION_RULE" in record.getMessage()

    def test_raise_diagnostic(self) -> None:
        diagnostic = ErrorTemplate.missing_plural_form("two", "ar")

        with pytest.raises(LocalizationIntegrityError) as exc_info:
            raise_diagnostic(diagnostic)

        assert exc_info.value.diagnostic is diagnostic
        assert str(exc_info.value) == diagnostic.format_error()

    def test_collecting_reporter(self, reporter: CollectingReporter) -> None:
        first = ErrorTemplate.unresolved_placeholder("a")
        second = ErrorTemplate.missing_plural_form("one", "en")

        reporter(first)
        reporter(second)

        assert reporter.diagnostics == (first, second)
        assert list(reporter) == [first, second]
        assert reporter.codes == (
            DiagnosticCode.UNRESOLVED_PLACEHOLDER,
            DiagnosticCode.MISSING_PLURAL_FORM,
        )
        assert len(reporter) == 2

    def test_collecting_reporter_clear(self, reporter: CollectingReporter) -> None:
        reporter(ErrorTemplate.unresolved_placeholder("a"))
        reporter.clear()

        assert reporter.diagnostics == ()

    def test_collecting_reporter_threads(self, reporter: CollectingReporter) -> None:
        diagnostic = ErrorTemplate.unresolved_placeholder("a")

        def work() -> None:
            for _ in range(200):
                reporter(diagnostic)

        threads = [threading.Thread(target=work) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(reporter) == 1600


class TestErrors:
    """Exception hierarchy."""

    def test_plain_message(self) -> None:
        error = LingoError("boom")

        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_hierarchy(self) -> None:
        assert issubclass(LocalizationIntegrityError, LingoError)
        assert issubclass(InvalidLocalizationError, LingoError)
        assert issubclass(InvalidLocalizationError, ValueError)

    def test_invalid_localization_caught_as_value_error(self) -> None:
        diagnostic = ErrorTemplate.invalid_localization("k", "bad")

        with pytest.raises(ValueError, match="INVALID_LOCALIZATION"):
            raise InvalidLocalizationError(diagnostic)


class TestDocstringExamples:
    """Examples in module docstrings run as written."""

    @pytest.mark.parametrize("module", [formatter, reporting], ids=lambda m: m.__name__)
    def test_examples_pass(self, module: ModuleType) -> None:
        failed, attempted = doctest.testmod(module, verbose=False)

        assert attempted > 0
        assert failed == 0
