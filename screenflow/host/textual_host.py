"""
Textual presentation layer for screenflow views.

``ViewHost`` mounts a ``ViewWidget`` for every view attached to a
``ContextOwner``; each ``ViewWidget`` copies its view's visual state (opacity,
input flags, slide offset, visibility) into Textual styles on a fixed
interval and reports its measured size back to the view.
"""

from typing import Dict, Optional

from loguru import logger

from textual.app import ComposeResult
from textual.containers import Container

from ..config import get_runtime_setting
from ..navigation.context_owner import ContextOwner
from ..state.view_state import ViewState
from ..views.view import UiView

logger = logger.bind(module="textual_host")


class ViewWidget(Container):
    """Renders one ``UiView`` and keeps Textual styles in sync with it."""

    DEFAULT_CSS = """
    ViewWidget {
        width: 100%;
        height: 100%;
    }
    """

    def __init__(self, view: UiView, *, sync_interval: Optional[float] = None, **kwargs):
        super().__init__(**kwargs)
        self.view = view
        if sync_interval is None:
            sync_interval = float(get_runtime_setting("runtime", "frame_interval", 0.016))
        self.sync_interval = sync_interval

    def compose(self) -> ComposeResult:
        yield from self.view.compose_content()

    def on_mount(self) -> None:
        self.sync_from_view()
        self.set_interval(self.sync_interval, self.sync_from_view)
        logger.debug(f"Mounted widget for view {self.view.name}")

    def sync_from_view(self) -> None:
        """Copy the view's visual properties into this widget."""
        view = self.view
        self.display = view.state is not ViewState.HIDDEN
        self.styles.opacity = max(0.0, min(1.0, view.canvas_group.alpha))
        self.disabled = not view.canvas_group.interactable
        x, y = view.rect_transform.anchored_position
        self.styles.offset = (int(round(x)), int(round(-y)))
        if self.size.width or self.size.height:
            view.rect_transform.size = (float(self.size.width), float(self.size.height))


class ViewHost(Container):
    """Textual container presenting every view attached to a context owner."""

    DEFAULT_CSS = """
    ViewHost {
        width: 100%;
        height: 100%;
    }
    """

    def __init__(self, owner: ContextOwner, **kwargs):
        super().__init__(**kwargs)
        self.owner = owner
        self._view_widgets: Dict[int, ViewWidget] = {}

    def compose(self) -> ComposeResult:
        for view in self.owner.children:
            yield self._make_widget(view)

    def on_mount(self) -> None:
        self.owner.on_child_attached.connect(self._on_child_attached)
        self.owner.on_child_detached.connect(self._on_child_detached)

    def on_unmount(self) -> None:
        self.owner.on_child_attached.disconnect(self._on_child_attached)
        self.owner.on_child_detached.disconnect(self._on_child_detached)

    def widget_for(self, view: UiView) -> Optional[ViewWidget]:
        return self._view_widgets.get(id(view))

    def _make_widget(self, view: UiView) -> ViewWidget:
        widget = ViewWidget(view)
        self._view_widgets[id(view)] = widget
        return widget

    def _on_child_attached(self, view: UiView) -> None:
        if id(view) in self._view_widgets:
            return
        self.mount(self._make_widget(view))

    def _on_child_detached(self, view: UiView) -> None:
        widget = self._view_widgets.pop(id(view), None)
        if widget is not None:
            widget.remove()
