"""Caller-owned locale memory.

The host application owns a LocaleMemory and hands it to every engine it
creates. The engine seeds its initial locale from the remembered value and
writes each explicit set_locale() request back, so the selected locale
survives re-creating the engine (for example when a UI tree is rebuilt)
without process-wide state.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["LocaleMemory"]


@dataclass(slots=True)
class LocaleMemory:
    """Mutable slot holding the last requested locale.

    In-memory only; persisting across process restarts is up to the host.

    Attributes:
        locale: Last remembered locale request, or None

    Example:
        >>> memory = LocaleMemory()
        >>> first = Localization(dictionary, memory=memory)
        >>> first.set_locale("es")
        >>> second = Localization(dictionary, memory=memory)
        >>> second.locale
        'es'
    """

    locale: str | None = None

    def remember(self, locale: str) -> None:
        """Store a locale request."""
        self.locale = locale

    def recall(self, default: str) -> str:
        """Get the remembered locale, or ``default`` when nothing is stored."""
        return self.locale if self.locale is not None else default

    def clear(self) -> None:
        """Forget the remembered locale."""
        self.locale = None
