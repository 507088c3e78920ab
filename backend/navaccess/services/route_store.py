"""
Router
Tracks the current route. ``navigate`` is called by the rendering layer; the
navigation engine only reads the path and listens for changes.
"""
import logging
from typing import Protocol

from navaccess.utils.signals import Signal, Listener, Unsubscribe

logger = logging.getLogger(__name__)


class Router(Protocol):
    def current_path(self) -> str: ...

    def subscribe(self, listener: Listener) -> Unsubscribe: ...


class InMemoryRouter:
    """Router holding a single current path"""

    def __init__(self, initial_path: str = "/"):
        self._path = initial_path
        self._changed = Signal()

    def current_path(self) -> str:
        return self._path

    def navigate(self, path: str) -> None:
        """Move to a path; subscribers are notified only when it differs."""
        if path == self._path:
            return

        logger.debug(f"Navigating from {self._path} to {path}")
        self._path = path
        self._changed.emit()

    def subscribe(self, listener: Listener) -> Unsubscribe:
        return self._changed.subscribe(listener)
