"""
Base view with the show/hide lifecycle.

``show_async``, ``close_async``, ``show_without_animation`` and
``close_without_animation`` are the only operations that change a view's
``ViewState``. Overlapping requests on the same view are resolved by "last
request wins": starting a transition abandons the one in flight, and an
abandoned transition never applies its resting state.
"""

from typing import TYPE_CHECKING, Any, Iterable, Optional

from loguru import logger

from ..state.view_state import ViewState
from ..Utils.tasks import fire_and_forget
from .transforms import CanvasGroup, RectTransform, Vector2

if TYPE_CHECKING:
    from ..Animation.base import ViewAnimation

logger = logger.bind(module="UiView")


class UiView:
    """
    A presentable surface with visibility state and an optional animation.

    Args:
        name: Display/debug name, defaults to the class name.
        interactable: Whether the view accepts input once shown.
        animation: Strategy used by the animated show/close.
        parent: Context owner the view is attached to. A view without a
            parent is detached and never animates.
        active: Whether the view itself is enabled.
        size: Initial geometric size, normally maintained by the host.
    """

    def __init__(self, *, name: Optional[str] = None, interactable: bool = True,
                 animation: Optional["ViewAnimation"] = None, parent: Any = None,
                 active: bool = True, size: Vector2 = (0.0, 0.0)):
        self.name = name or type(self).__name__
        self.interactable_when_shown = interactable
        self.animation = animation
        self.active = active
        self.canvas_group = CanvasGroup()
        self.rect_transform = RectTransform(size=size)
        self.parent = None
        self._state = ViewState.HIDDEN
        self._transition = 0
        if parent is not None:
            parent.attach(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r} state={self._state.value}>"

    # --- Properties ---

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def is_visible(self) -> bool:
        return self._state.is_visible

    @property
    def is_interactable(self) -> bool:
        return self.canvas_group.interactable

    @is_interactable.setter
    def is_interactable(self, value: bool) -> None:
        self.canvas_group.interactable = value
        self.canvas_group.blocks_input = value

    @property
    def size(self) -> Vector2:
        return self.rect_transform.size

    @property
    def is_active_in_hierarchy(self) -> bool:
        """True when the view is enabled and attached to an active surface."""
        if not self.active or self.parent is None:
            return False
        return bool(self.parent.is_active_in_hierarchy)

    def compose_content(self) -> Iterable[Any]:
        """Override to provide widgets for a rendering host."""
        return ()

    # --- Lifecycle ---

    def _begin_transition(self) -> int:
        self._transition += 1
        return self._transition

    def show_without_animation(self) -> None:
        """Apply the visible resting state at once, abandoning any transition."""
        self._begin_transition()
        if self.animation is not None:
            self.animation.show_immediate(self)
        self.is_interactable = self.interactable_when_shown
        self._state = ViewState.VISIBLE

    def close_without_animation(self) -> None:
        """Apply the hidden resting state at once, abandoning any transition."""
        self._begin_transition()
        if self.animation is not None:
            self.animation.hide_immediate(self)
        self.is_interactable = False
        self._state = ViewState.HIDDEN

    async def show_async(self) -> bool:
        """
        Show the view, animated when possible.

        Returns:
            True if this call brought the view to rest as visible, False if it
            was a no-op or its transition was abandoned for a newer one.
        """
        if self.is_visible:
            return False

        if self.animation is None or not self.is_active_in_hierarchy:
            self.show_without_animation()
            return True

        transition = self._begin_transition()
        self._state = ViewState.SHOWING
        arrived = await self.animation.show_async(self)
        if not arrived or transition != self._transition:
            logger.debug(f"Show transition of {self.name} abandoned")
            return False

        self.is_interactable = self.interactable_when_shown
        self._state = ViewState.VISIBLE
        return True

    async def close_async(self) -> bool:
        """
        Close the view, animated when possible.

        Input is disabled before the hide transition starts.

        Returns:
            True if this call brought the view to rest as hidden.
        """
        if self._state in (ViewState.HIDDEN, ViewState.HIDING):
            return False

        if not self.is_active_in_hierarchy:
            self.close_without_animation()
            return True

        transition = self._begin_transition()
        self.is_interactable = False
        self._state = ViewState.HIDING
        if self.animation is not None:
            arrived = await self.animation.hide_async(self)
            if not arrived or transition != self._transition:
                logger.debug(f"Hide transition of {self.name} abandoned")
                return False

        self._state = ViewState.HIDDEN
        return True

    def show(self):
        """Start ``show_async`` without waiting for it."""
        return fire_and_forget(self.show_async(), name=f"{self.name}.show")

    def close(self):
        """Start ``close_async`` without waiting for it."""
        return fire_and_forget(self.close_async(), name=f"{self.name}.close")
