"""
Minimal synchronous event hook used for view, window and button notifications.
"""

from typing import Any, Callable, List

from loguru import logger

logger = logger.bind(module="events")


class EventHook:
    """A list of callbacks fired in subscription order."""

    def __init__(self, name: str = ""):
        self.name = name
        self._handlers: List[Callable[..., Any]] = []

    def connect(self, handler: Callable[..., Any]) -> None:
        """Subscribe ``handler``; subscribing the same handler twice is a no-op."""
        if handler not in self._handlers:
            self._handlers.append(handler)

    def disconnect(self, handler: Callable[..., Any]) -> bool:
        """Unsubscribe ``handler``. Returns False if it was not subscribed."""
        try:
            self._handlers.remove(handler)
        except ValueError:
            return False
        return True

    def fire(self, *args: Any) -> None:
        """
        Call every handler with ``args``.

        A failing handler is logged and does not prevent the remaining ones
        from running.
        """
        for handler in list(self._handlers):
            try:
                handler(*args)
            except Exception:
                logger.exception(f"Handler {handler!r} for event '{self.name}' failed")

    def clear(self) -> None:
        self._handlers.clear()

    def __len__(self) -> int:
        return len(self._handlers)
