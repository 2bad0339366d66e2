"""Diagnostic message templates.

Centralized diagnostic templates for testable, consistent messages.
Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dictl10n.core.resolver import base_language
from dictl10n.enums import MatchKind

from .codes import Diagnostic, DiagnosticCode

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dictl10n.core.resolver import LocaleResolution

__all__ = ["DiagnosticTemplate"]


class DiagnosticTemplate:
    """Centralized diagnostic message templates.

    All diagnostics are created here, so messages stay consistent between
    the engine, the accessor and the audit, and tests can match on them.
    """

    # ------------------------------------------------------------------
    # Locale resolution
    # ------------------------------------------------------------------

    @staticmethod
    def base_language_fallback(requested: str, base: str) -> Diagnostic:
        """Requested locale unavailable; base language used instead."""
        return Diagnostic(
            code=DiagnosticCode.LOCALE_BASE_FALLBACK,
            message=f'Locale "{requested}" not found, falling back to base language "{base}"',
            requested_locale=requested,
            resolved_locale=base,
            hint=f'Add "{requested}" translations or request "{base}" directly',
        )

    @staticmethod
    def variant_fallback(requested: str, base: str, variant: str) -> Diagnostic:
        """Neither requested locale nor base language available; variant used."""
        return Diagnostic(
            code=DiagnosticCode.LOCALE_VARIANT_FALLBACK,
            message=f'Base language "{base}" not found, falling back to variant "{variant}"',
            requested_locale=requested,
            resolved_locale=variant,
            hint=f'Add "{base}" translations to serve every "{base}-*" request',
        )

    @staticmethod
    def any_available_fallback(requested: str, base: str, fallback: str) -> Diagnostic:
        """No related locale available; first available locale used."""
        return Diagnostic(
            code=DiagnosticCode.LOCALE_ANY_FALLBACK,
            message=f'No "{base}" or variants found, falling back to "{fallback}"',
            requested_locale=requested,
            resolved_locale=fallback,
            hint=f'Add "{base}" translations or pick one of the available locales',
        )

    @staticmethod
    def no_locales_available(requested: str) -> Diagnostic:
        """Dictionary has no Locale Leaves at all."""
        return Diagnostic(
            code=DiagnosticCode.NO_LOCALES_AVAILABLE,
            message="No localizations found in dictionary",
            severity="error",
            requested_locale=requested,
            resolved_locale=requested,
            hint="Provide at least one key mapping a locale code to a string",
        )

    @staticmethod
    def for_resolution(resolution: LocaleResolution) -> Diagnostic | None:
        """Diagnostic for an engine-wide resolution, None for exact matches."""
        base = base_language(resolution.requested)
        match resolution.kind:
            case MatchKind.EXACT:
                return None
            case MatchKind.BASE_LANGUAGE:
                return DiagnosticTemplate.base_language_fallback(
                    resolution.requested, resolution.resolved
                )
            case MatchKind.VARIANT:
                return DiagnosticTemplate.variant_fallback(
                    resolution.requested, base, resolution.resolved
                )
            case MatchKind.ANY_AVAILABLE:
                return DiagnosticTemplate.any_available_fallback(
                    resolution.requested, base, resolution.resolved
                )
            case MatchKind.UNRESOLVED:
                return DiagnosticTemplate.no_locales_available(resolution.requested)

    # ------------------------------------------------------------------
    # Translation lookup
    # ------------------------------------------------------------------

    @staticmethod
    def key_not_found(path: str) -> Diagnostic:
        """Accessor chain names a path that does not exist."""
        return Diagnostic(
            code=DiagnosticCode.KEY_NOT_FOUND,
            message=f'Translation key "{path}" not found in dictionary',
            path=path,
            hint="Check the key path against the dictionary structure",
        )

    @staticmethod
    def translation_locale_fallback(path: str, resolution: LocaleResolution) -> Diagnostic:
        """Key exists but lacks the current locale; another of its locales used."""
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_LOCALE_FALLBACK,
            message=(
                f'Translation key "{path}" has no "{resolution.requested}" entry, '
                f'using "{resolution.resolved}" ({resolution.kind})'
            ),
            path=path,
            requested_locale=resolution.requested,
            resolved_locale=resolution.resolved,
            hint=f'Add a "{resolution.requested}" entry to "{path}"',
        )

    @staticmethod
    def translation_unavailable(path: str, locale: str) -> Diagnostic:
        """Key exists but has no usable translation for any locale."""
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_UNAVAILABLE,
            message=f'Translation key "{path}" has no usable translation for locale "{locale}"',
            severity="error",
            path=path,
            requested_locale=locale,
            hint="The key must address a mapping of locale codes to strings",
        )

    # ------------------------------------------------------------------
    # Coverage
    # ------------------------------------------------------------------

    @staticmethod
    def incomplete_translation(path: str, missing: Iterable[str]) -> Diagnostic:
        """Key lacks some of the locales available elsewhere in the dictionary."""
        missing_locales = tuple(missing)
        return Diagnostic(
            code=DiagnosticCode.INCOMPLETE_TRANSLATION,
            message=(
                f'Translation key "{path}" is missing translations for locales: '
                f"{', '.join(missing_locales)}"
            ),
            path=path,
            missing_locales=missing_locales,
            hint="Lookups for these locales will fall back per key",
        )
