"""Push-based observable values for binding order state to a view."""

from __future__ import annotations

from functools import partial
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class LiveValue(Generic[T]):
    """
    Read-only holder of the latest value plus its subscribers.

    Subscribers are called synchronously, in subscription order, whenever the
    value changes. A new subscriber receives the current value immediately.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._listeners: list[Callable[[T], None]] = []
        self._derived: list[tuple[MutableLiveValue, Callable[[T], object]]] = []
        self._pending_derived: list[MutableLiveValue] = []

    @property
    def value(self) -> T:
        return self._value

    def subscribe(self, listener: Callable[[T], None]) -> Callable[[], None]:
        """Attach a listener, replay the current value, return an unsubscribe callable."""
        self._listeners.append(listener)
        listener(self._value)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def map(self, transform: Callable[[T], R]) -> LiveValue[R]:
        """
        Derived value that tracks this one through ``transform``.

        The derived value is stored together with its source, so a listener on
        either one already reads the new value of both.
        """
        derived: MutableLiveValue[R] = MutableLiveValue(transform(self._value))
        self._derived.append((derived, transform))
        return derived

    def _store(self, value: T) -> bool:
        if value == self._value:
            return False
        self._value = value
        for derived, transform in self._derived:
            if derived._store(transform(value)) and derived not in self._pending_derived:
                self._pending_derived.append(derived)
        return True

    def _dispatch(self) -> None:
        value = self._value
        pending, self._pending_derived = self._pending_derived, []
        # Copy so listeners may unsubscribe while being notified.
        calls: list[Callable[[], None]] = [partial(listener, value) for listener in list(self._listeners)]
        calls.extend(derived._dispatch for derived in pending)
        _call_all(calls)


class MutableLiveValue(LiveValue[T]):
    """A LiveValue its owner can write to."""

    def set(self, value: T) -> None:
        if self._store(value):
            self._dispatch()

    def stage(self, value: T) -> bool:
        """Store without notifying; pair with ``publish_all`` to commit several values at once."""
        return self._store(value)

    def publish(self) -> None:
        self._dispatch()


def publish_all(values: Iterable[MutableLiveValue]) -> None:
    """Publish staged values; a failing listener does not stop the rest."""
    _call_all([live.publish for live in values])


def _call_all(calls: Iterable[Callable[[], None]]) -> None:
    first_error: Exception | None = None
    for call in calls:
        try:
            call()
        except Exception as exc:
            if first_error is None:
                first_error = exc
    if first_error is not None:
        raise first_error
