"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every degradation case.
    """

    @staticmethod
    def missing_plural_form(category: str, locale: str) -> Diagnostic:
        """Pluralized entry has no template for the selected category.

        Args:
            category: Plural category selected by the rule
            locale: Locale whose rule selected the category

        Returns:
            Diagnostic for MISSING_PLURAL_FORM
        """
        msg = f"Missing plural form '{category}' for locale '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.MISSING_PLURAL_FORM,
            message=msg,
            locale=locale,
            category=category,
            hint=f"Add a '{category}' template to the pluralized entry",
        )

    @staticmethod
    def missing_pluralization_rule(locale: str) -> Diagnostic:
        """No plural rule registered for a locale, even after fallback.

        Args:
            locale: Locale that has no rule

        Returns:
            Diagnostic for MISSING_PLURALIZATION_RULE
        """
        msg = f"Missing pluralization rule for locale '{locale}'; using 'other'"
        return Diagnostic(
            code=DiagnosticCode.MISSING_PLURALIZATION_RULE,
            message=msg,
            locale=locale,
            category="other",
            hint="Register a rule for the locale or its base language",
            severity="warning",
        )

    @staticmethod
    def unresolved_placeholder(name: str) -> Diagnostic:
        """Placeholder has no matching interpolation value.

        Args:
            name: Placeholder name

        Returns:
            Diagnostic for UNRESOLVED_PLACEHOLDER
        """
        msg = f"No interpolation value for placeholder '{name}'"
        return Diagnostic(
            code=DiagnosticCode.UNRESOLVED_PLACEHOLDER,
            message=msg,
            placeholder=name,
            hint=f"Pass a value for '{name}' in the interpolations",
            severity="warning",
        )

    @staticmethod
    def localization_not_found(key: str, locale: str) -> Diagnostic:
        """Catalog has no entry for a key in any locale of the lookup chain.

        Args:
            key: Catalog key
            locale: Requested locale

        Returns:
            Diagnostic for LOCALIZATION_NOT_FOUND
        """
        msg = f"Localization '{key}' not found for locale '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALIZATION_NOT_FOUND,
            message=msg,
            locale=locale,
            key=key,
            hint="Check that the key is defined for the locale or the default locale",
        )

    @staticmethod
    def invalid_localization(key: str | None, reason: str) -> Diagnostic:
        """Catalog value cannot be turned into a Localization.

        Args:
            key: Catalog key of the malformed value (None for a bare value)
            reason: Description of the problem

        Returns:
            Diagnostic for INVALID_LOCALIZATION
        """
        where = f"'{key}'" if key else "value"
        msg = f"Invalid localization {where}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALIZATION,
            message=msg,
            key=key,
            hint="Use a string, or a mapping of plural categories to strings",
        )
