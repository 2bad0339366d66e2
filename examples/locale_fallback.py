"""Locale Fallback Example - Partial Translations.

Demonstrates real-world usage of Localization for handling incomplete
translations and regional locale requests.

Scenarios covered:
1. E-commerce site with partial Latvian translations
2. Regional requests resolving to base languages and variants
3. Progressive translation through merge_dictionary
4. Locale-keyed input and coverage reports

Python 3.13+.
"""

from __future__ import annotations

from dictl10n import Localization
from dictl10n.diagnostics import DiagnosticFormatter


def example_1_partial_translations() -> None:
    """Example 1: Keys missing Latvian fall back to English one by one."""
    print("=" * 60)
    print("Example 1: Partial Translations (lv, en)")
    print("=" * 60)

    l10n = Localization(
        {
            "welcome": {"lv": "Sveiki, {{name}}!", "en": "Hello, {{name}}!"},
            "cart": {"lv": "Grozs", "en": "Cart"},
            "payment": {
                "success": {"en": "Payment successful!"},
                "error": {"en": "Payment failed: {{reason}}"},
            },
        },
        default_locale="lv",
        audit=False,
    )

    print("\nMessages in Latvian:")
    print(f"  welcome: {l10n.translate('welcome', {'name': 'Anna'})}")
    print(f"  cart: {l10n.translate('cart')}")

    print("\nMessages falling back to English:")
    print(f"  payment.success: {l10n.translate('payment.success')}")
    print(f"  payment.error: {l10n.translate('payment.error', {'reason': 'card declined'})}")


def example_2_regional_requests() -> None:
    """Example 2: How regional and bare requests resolve."""
    print("\n" + "=" * 60)
    print("Example 2: Regional Requests")
    print("=" * 60)

    l10n = Localization(
        {"title": {"en": "Shop", "fr-CA": "Boutique", "pt-BR": "Loja"}},
    )

    for requested in ("en-GB", "fr", "fr-BE", "pt", "ja"):
        resolution = l10n.set_locale(requested)
        print(f"  {requested:6} -> {resolution.resolved:6} ({resolution.kind})")


def example_3_progressive_translation() -> None:
    """Example 3: Adding a translation batch at runtime."""
    print("\n" + "=" * 60)
    print("Example 3: Progressive Translation")
    print("=" * 60)

    formatter = DiagnosticFormatter()
    l10n = Localization(
        {"cart": {"en": "Cart", "de": "Warenkorb"}, "checkout": {"en": "Checkout"}},
        on_diagnostic=lambda d: print(formatter.format(d)),
    )

    l10n.merge_dictionary({"checkout": {"de": "Kasse"}, "help": {"en": "Help"}})
    l10n.set_locale("de-AT")
    print(f"\n  checkout: {l10n.translate('checkout')}")


def example_4_locale_keyed_input() -> None:
    """Example 4: Locale-keyed data and coverage reporting."""
    print("\n" + "=" * 60)
    print("Example 4: Locale-Keyed Input")
    print("=" * 60)

    l10n = Localization.from_locale_keyed(
        {
            "en": {"nav": {"home": "Home", "about": "About", "blog": "Blog"}},
            "es": {"nav": {"home": "Inicio", "about": "Acerca de"}},
        },
        audit=False,
    )

    report = l10n.audit()
    for locale in report.available_locales:
        print(f"  {locale}: {report.coverage(locale):.0%} covered")
    print(f"  es view: {l10n.view('es')}")


if __name__ == "__main__":
    example_1_partial_translations()
    example_2_regional_requests()
    example_3_progressive_translation()
    example_4_locale_keyed_input()
