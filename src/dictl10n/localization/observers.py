"""Observer registration and change events.

Replaces an event emitter with an explicit registry: callbacks are
registered and unregistered by identity and receive events synchronously,
in registration order.

Components:
    Observers    - Ordered callback registry with snapshot fan-out
    LocaleChange - Immutable record delivered after every locale (re)resolution

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from dictl10n.enums import MatchKind

__all__ = [
    "LocaleChange",
    "Observers",
]


class Observers[T]:
    """Ordered registry of callbacks taking one event argument.

    Notification iterates over a snapshot, so a callback may unsubscribe
    itself (or others) while an event is being delivered. The same callback
    registered twice is called twice.

    Example:
        >>> observers: Observers[str] = Observers()
        >>> unsubscribe = observers.add(print)
        >>> observers.notify("hello")
        hello
        >>> unsubscribe()
        >>> len(observers)
        0
    """

    __slots__ = ("_callbacks",)

    def __init__(self) -> None:
        self._callbacks: list[Callable[[T], object]] = []

    def add(self, callback: Callable[[T], object]) -> Callable[[], None]:
        """Register a callback.

        Args:
            callback: Called with each event

        Returns:
            Zero-argument function that removes this registration
        """
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            self.remove(callback)

        return unsubscribe

    def remove(self, callback: Callable[[T], object]) -> bool:
        """Remove the earliest registration of a callback.

        Returns:
            True if a registration was removed, False if none existed
        """
        try:
            self._callbacks.remove(callback)
        except ValueError:
            return False
        return True

    def notify(self, event: T) -> None:
        """Deliver an event to every registered callback in order.

        Exceptions raised by a callback propagate to the caller and stop
        delivery to the remaining callbacks.
        """
        for callback in tuple(self._callbacks):
            callback(event)

    def clear(self) -> None:
        """Remove every registration."""
        self._callbacks.clear()

    def __len__(self) -> int:
        return len(self._callbacks)

    def __bool__(self) -> bool:
        return bool(self._callbacks)


@dataclass(frozen=True, slots=True)
class LocaleChange:
    """Information about a locale (re)resolution.

    Delivered to locale listeners after every set_locale() call and after
    every merge_dictionary(), even when the resolved locale did not change.

    Attributes:
        locale: Newly resolved current locale
        previous_locale: Current locale before the change
        requested_locale: Locale that was asked for
        kind: How the request was resolved

    Example:
        >>> def on_change(change: LocaleChange) -> None:
        ...     print(f"{change.previous_locale} -> {change.locale}")
        >>> l10n = Localization(dictionary, on_locale_change=on_change)
    """

    locale: str
    previous_locale: str
    requested_locale: str
    kind: MatchKind

    @property
    def changed(self) -> bool:
        """True when the resolved locale differs from the previous one."""
        return self.locale != self.previous_locale
