"""
Context owners: the named surfaces new windows are instantiated under.
"""

from typing import TYPE_CHECKING, Iterable, List, Tuple

from loguru import logger

from ..Utils.events import EventHook
from ..views.view import UiView
from ..views.window import UiWindow

if TYPE_CHECKING:
    from ..runtime import UiRuntime

logger = logger.bind(module="ContextOwner")


class ContextOwner:
    """
    A presentation surface registered under a context id.

    On creation the owner registers itself with the runtime (an empty id is
    never registered) and hands the windows it was built with to the window
    registry. ``destroy()`` deregisters it and destroys its windows.
    """

    def __init__(self, runtime: "UiRuntime", context_id: str = "", *, active: bool = True,
                 children: Iterable[UiView] = ()):
        self.runtime = runtime
        self.context_id = context_id
        self.active = active
        self.on_child_attached = EventHook(f"{context_id}.on_child_attached")
        self.on_child_detached = EventHook(f"{context_id}.on_child_detached")
        self._children: List[UiView] = []
        self._destroyed = False

        if context_id:
            runtime.register_owner(self)

        for child in children:
            self.attach(child)
        for window in self.windows:
            runtime.windows.register_window(window)

    def __repr__(self) -> str:
        return f"<ContextOwner context_id={self.context_id!r} children={len(self._children)}>"

    @property
    def is_active_in_hierarchy(self) -> bool:
        return self.active and not self._destroyed

    @property
    def children(self) -> Tuple[UiView, ...]:
        return tuple(self._children)

    @property
    def windows(self) -> List[UiWindow]:
        return [child for child in self._children if isinstance(child, UiWindow)]

    def attach(self, view: UiView) -> None:
        """Make this owner the parent of ``view``, detaching it from any previous one."""
        if view.parent is self:
            return
        if view.parent is not None:
            view.parent.detach(view)
        self._children.append(view)
        view.parent = self
        self.on_child_attached.fire(view)

    def detach(self, view: UiView) -> None:
        if view.parent is not self:
            return
        self._children.remove(view)
        view.parent = None
        self.on_child_detached.fire(view)

    def destroy(self) -> None:
        """Deregister from the runtime and destroy every owned window."""
        if self._destroyed:
            return
        for window in self.windows:
            window.destroy()
        self._destroyed = True
        self.runtime.unregister_owner(self)
        logger.debug(f"Context owner '{self.context_id}' destroyed")
