"""Observable state containers shared between the rewriter and its front-end."""

from typing import Any, Callable, Generic, List, TypeVar

from clearwrite.context import WritingContext

T = TypeVar("T")


class Store(Generic[T]):
    """A value holder that notifies subscribers whenever it changes."""

    def __init__(self, value: T):
        self._value = value
        self._subscribers: List[Callable[[T], Any]] = []

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        for callback in list(self._subscribers):
            callback(value)

    def update(self, fn: Callable[[T], T]) -> None:
        self.set(fn(self._value))

    def subscribe(self, callback: Callable[[T], Any]) -> Callable[[], None]:
        """Register a callback, call it with the current value, return an unsubscribe function."""
        self._subscribers.append(callback)
        callback(self._value)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe


class AppState:
    """Loading flag, key-presence flag and writing context for one session."""

    def __init__(self):
        # Display only, a second concurrent rewrite may clear it early
        self.is_loading: Store[bool] = Store(False)
        self.has_api_key: Store[bool] = Store(False)
        self.writing_context: Store[WritingContext] = Store(WritingContext())
