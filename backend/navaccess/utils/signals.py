"""
Minimal synchronous change-notification helper used by the role and route
stores.
"""
from typing import Callable, List

Listener = Callable[[], None]
Unsubscribe = Callable[[], None]


class Signal:
    """Ordered list of no-argument listeners, fired synchronously."""

    def __init__(self):
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Unsubscribe:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self) -> None:
        # Copy so listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener()
