"""Tests for the observer registry and LocaleChange events.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from dictl10n.enums import MatchKind
from dictl10n.localization.observers import LocaleChange, Observers


class TestObservers:
    """Test Observers registry."""

    def test_registration_order(self) -> None:
        """Callbacks run in registration order."""
        calls: list[str] = []
        observers: Observers[int] = Observers()
        observers.add(lambda event: calls.append(f"first:{event}"))
        observers.add(lambda event: calls.append(f"second:{event}"))

        observers.notify(1)

        assert calls == ["first:1", "second:1"]

    def test_unsubscribe_callable(self) -> None:
        """add returns a function removing the registration."""
        calls: list[int] = []
        observers: Observers[int] = Observers()
        unsubscribe = observers.add(calls.append)

        unsubscribe()
        observers.notify(1)

        assert calls == []
        assert len(observers) == 0

    def test_unsubscribe_twice_is_harmless(self) -> None:
        """Calling the unsubscribe function again does nothing."""
        observers: Observers[int] = Observers()
        unsubscribe = observers.add(print)
        unsubscribe()
        unsubscribe()
        assert not observers

    def test_remove(self) -> None:
        """remove reports whether the callback was registered."""
        calls: list[int] = []
        observers: Observers[int] = Observers()
        observers.add(calls.append)

        assert observers.remove(calls.append) is True
        assert observers.remove(calls.append) is False

    def test_duplicate_registration(self) -> None:
        """A callback registered twice is called twice."""
        calls: list[int] = []
        observers: Observers[int] = Observers()
        observers.add(calls.append)
        observers.add(calls.append)

        observers.notify(7)

        assert calls == [7, 7]

    def test_unsubscribe_during_notify(self) -> None:
        """A callback may detach itself while an event is delivered."""
        calls: list[str] = []
        observers: Observers[int] = Observers()

        def once(event: int) -> None:
            calls.append("once")
            unsubscribe()

        unsubscribe = observers.add(once)
        observers.add(lambda event: calls.append("always"))

        observers.notify(1)
        observers.notify(2)

        assert calls == ["once", "always", "always"]

    def test_exception_propagates(self) -> None:
        """Callback errors stop delivery and reach the caller."""
        calls: list[int] = []
        observers: Observers[int] = Observers()

        def broken(event: int) -> None:
            msg = "boom"
            raise ValueError(msg)

        observers.add(broken)
        observers.add(calls.append)

        with pytest.raises(ValueError, match="boom"):
            observers.notify(1)
        assert calls == []

    def test_clear(self) -> None:
        """clear removes every registration."""
        observers: Observers[int] = Observers()
        observers.add(print)
        observers.add(print)
        assert len(observers) == 2

        observers.clear()

        assert len(observers) == 0
        assert not observers


class TestLocaleChange:
    """Test LocaleChange."""

    def test_changed(self) -> None:
        """changed compares the new and previous locales."""
        change = LocaleChange("es", "en", "es", MatchKind.EXACT)
        assert change.changed

    def test_unchanged(self) -> None:
        """Re-announcing the same locale is not a change."""
        change = LocaleChange("en", "en", "en-GB", MatchKind.BASE_LANGUAGE)
        assert not change.changed
