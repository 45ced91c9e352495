"""Quickstart example for lingoengine.

This example demonstrates plural-aware localization: plural category
selection from CLDR rules, {placeholder} interpolation, catalog fallback,
and the diagnostic reporters.

Note: Examples use the default reporter (log warnings) unless a scenario
shows another one. In production, route diagnostics to your logging or
monitoring stack, or use strict=True in tests.
"""

import logging
from decimal import Decimal

from lingoengine import (
    CollectingReporter,
    LocalizationCatalog,
    LocalizationIntegrityError,
    Pluralized,
    PluralizationRule,
    PluralRuleStore,
    Universal,
    resolve,
)
from lingoengine.diagnostics import DiagnosticFormatter, OutputFormat

logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

# Example 1: Universal template
print("=" * 50)
print("Example 1: Universal Template")
print("=" * 50)

print(resolve(Universal("Hello, {name}!"), "en", {"name": "Alice"}))
# Output: Hello, Alice!

print(resolve(Universal("Total: {amount} EUR"), "en", {"amount": Decimal("19.90")}))
# Output: Total: 19.90 EUR

# Example 2: Plurals (English)
print("\n" + "=" * 50)
print("Example 2: Plural Forms (English)")
print("=" * 50)

emails = Pluralized({"one": "You have one email.", "other": "You have {count} emails."})
for count in (0, 1, 5):
    print(resolve(emails, "en", {"count": count}))
# Output:
# You have 0 emails.
# You have one email.
# You have 5 emails.

# Example 3: Plurals (Russian, Arabic)
print("\n" + "=" * 50)
print("Example 3: Plural Forms (Russian, Arabic)")
print("=" * 50)

files = Pluralized(
    {
        "one": "{n} файл",
        "few": "{n} файла",
        "many": "{n} файлов",
        "other": "{n} файла",
    }
)
for n in (1, 3, 5, 21):
    print(resolve(files, "ru-RU", {"n": n}))
# Output: 1 файл / 3 файла / 5 файлов / 21 файл

books = Pluralized(
    {
        "zero": "لا كتب",
        "one": "كتاب واحد",
        "two": "كتابان",
        "few": "{n} كتب",
        "many": "{n} كتابًا",
        "other": "{n} كتاب",
    }
)
for n in (0, 2, 3, 11, 100):
    print(resolve(books, "ar", {"n": n}))

# Example 4: Negative quantities and quantity_key
print("\n" + "=" * 50)
print("Example 4: Negative Quantities and quantity_key")
print("=" * 50)

items = Pluralized({"one": "{n} item", "other": "{n} items"})
print(resolve(items, "en", {"n": -1}))
# Output: 1 item

progress = Pluralized(
    {"one": "{done} of {total} file", "other": "{done} of {total} files"},
    quantity_key="total",
)
print(resolve(progress, "en", {"done": 1, "total": 3}))
# Output: 1 of 3 files

# Example 5: Catalog with locale fallback
print("\n" + "=" * 50)
print("Example 5: Catalog with Locale Fallback")
print("=" * 50)

catalog = LocalizationCatalog(
    "en",
    on_fallback=lambda info: print(
        f"  [fallback] {info.key}: {info.requested_locale} -> {info.resolved_locale}"
    ),
)
catalog.add_localizations(
    "en",
    {
        "greeting": "Hello, {name}!",
        "cart": {"one": "{count} item in cart", "other": "{count} items in cart"},
    },
)
catalog.add_localizations(
    "lv",
    {
        "cart": {
            "zero": "{count} preču grozā",
            "one": "{count} prece grozā",
            "other": "{count} preces grozā",
        },
    },
)

print(catalog.localize("cart", "lv-LV", {"count": 21}))
# Output: 21 prece grozā
print(catalog.localize("greeting", "lv", {"name": "Anna"}))
# Output: Hello, Anna! (served by 'en')

# Example 6: Diagnostics
print("\n" + "=" * 50)
print("Example 6: Collecting Diagnostics")
print("=" * 50)

reporter = CollectingReporter()
partial = Pluralized({"other": "{n} things {unknown}"})
print(repr(resolve(partial, "en", {"n": 1}, reporter=reporter)))
print(repr(resolve(partial, "en", {"n": 2}, reporter=reporter)))
print(DiagnosticFormatter(output_format=OutputFormat.RUST).format_all(reporter))

# Example 7: Strict mode
print("\n" + "=" * 50)
print("Example 7: Strict Mode")
print("=" * 50)

strict = LocalizationCatalog("en", strict=True)
strict.add_localizations("en", {"items": {"other": "{n} items"}})
try:
    strict.localize("items", "en", {"n": 1})
except LocalizationIntegrityError as error:
    print(f"Raised: {error.diagnostic}")

# Example 8: Custom plural rules
print("\n" + "=" * 50)
print("Example 8: Custom Plural Rules")
print("=" * 50)

store = PluralRuleStore.from_cldr(
    {"x-pairs": PluralizationRule.from_expressions("x-pairs", {"two": "n is 2"})}
)
shoes = Pluralized({"two": "a pair of shoes", "other": "{n} shoes"})
print(resolve(shoes, "x-pairs", {"n": 2}, rule_store=store))
# Output: a pair of shoes
print(resolve(shoes, "x-pairs", {"n": 3}, rule_store=store))
# Output: 3 shoes
