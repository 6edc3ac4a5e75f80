"""
Windows: views tracked by the window registry.
"""

from loguru import logger

from ..Utils.events import EventHook
from .view import UiView

logger = logger.bind(module="UiWindow")


class UiWindow(UiView):
    """
    A view with shown/hidden/destroyed notifications.

    Windows start closed. ``destroy()`` is the end of their life: the registry
    listens to ``on_destroyed`` to drop its cache entry and release the
    loaded asset.
    """

    def __init__(self, **kwargs):
        # Hooks exist before the base class attaches the window to a parent.
        label = kwargs.get("name") or type(self).__name__
        self.on_shown = EventHook(f"{label}.on_shown")
        self.on_hidden = EventHook(f"{label}.on_hidden")
        self.on_destroyed = EventHook(f"{label}.on_destroyed")
        self._destroyed = False
        super().__init__(**kwargs)
        self.close_without_animation()

    @property
    def is_alive(self) -> bool:
        return not self._destroyed

    async def show_async(self) -> bool:
        shown = await super().show_async()
        if shown:
            self.on_shown.fire(self)
        return shown

    async def close_async(self) -> bool:
        hidden = await super().close_async()
        if hidden:
            self.on_hidden.fire(self)
        return hidden

    def destroy(self) -> None:
        """Tear the window down and notify listeners. Repeated calls are ignored."""
        if self._destroyed:
            return
        self._destroyed = True
        if self.animation is not None:
            self.animation.hide_immediate(self)
        if self.parent is not None:
            self.parent.detach(self)
        logger.debug(f"Window {self.name} destroyed")
        self.on_destroyed.fire(self)
