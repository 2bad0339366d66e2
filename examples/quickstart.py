"""Quickstart example for dictl10n.

This example demonstrates basic usage of dictl10n for localization.

Note: Diagnostics are printed through a listener for visibility. In
production, attach a logging handler to the "dictl10n" logger instead or
forward diagnostics to your telemetry.
"""

import logging

from dictl10n import Diagnostic, LocaleChange, LocaleMemory, Localization
from dictl10n.diagnostics import DiagnosticFormatter, OutputFormat

logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)


def show_diagnostic(diagnostic: Diagnostic) -> None:
    print(f"  [diagnostic] {formatter.format(diagnostic)}")


DICTIONARY = {
    "hello": {"en": "Hello, World!", "es": "¡Hola, Mundo!"},
    "user": {
        "greeting": {"en": "Welcome back, {{name}}!", "es": "¡Bienvenido, {{name}}!"},
        "cart": {"en": "{{count}} items in your cart"},
    },
}

# Example 1: Simple lookup
print("=" * 50)
print("Example 1: Simple Lookup")
print("=" * 50)

l10n = Localization(DICTIONARY, on_diagnostic=show_diagnostic)
print(l10n.translate("hello"))
# Output: Hello, World!

# Example 2: Variables
print("\n" + "=" * 50)
print("Example 2: Variable Substitution")
print("=" * 50)

print(l10n.translate("user.greeting", {"name": "Alice"}))
# Output: Welcome back, Alice!

print(l10n.accessor.user.cart(count=3))
# Output: 3 items in your cart

# Example 3: Switching locale
print("\n" + "=" * 50)
print("Example 3: Switching Locale")
print("=" * 50)


def on_change(change: LocaleChange) -> None:
    print(f"  [locale] {change.previous_locale} -> {change.locale} ({change.kind})")


l10n.add_locale_listener(on_change)
l10n.set_locale("es-MX")
# es-MX is not in the dictionary; the base language "es" is used
print(l10n.translate("user.greeting", {"name": "Alice"}))
# Output: ¡Bienvenido, Alice!

# "user.cart" has no Spanish entry; that key alone falls back to English
print(l10n.accessor.user.cart(count=3))
# Output: 3 items in your cart

# Example 4: Missing keys
print("\n" + "=" * 50)
print("Example 4: Missing Keys")
print("=" * 50)

print(l10n.translate("user.settings"))
# Output: missing user.settings
print(l10n.accessor.user.settings())
# Output: [invalid key: user.settings]

# Example 5: Remembering the locale across re-creation
print("\n" + "=" * 50)
print("Example 5: Locale Memory")
print("=" * 50)

memory = LocaleMemory()
Localization(DICTIONARY, memory=memory).set_locale("es")
print(Localization(DICTIONARY, memory=memory).locale)
# Output: es

print("\n" + "=" * 50)
print("Quickstart complete!")
print("=" * 50)
