"""
Visibility states of a view.
"""

from enum import Enum


class ViewState(Enum):
    """Lifecycle state of a ``UiView``."""

    HIDDEN = "hidden"
    SHOWING = "showing"
    VISIBLE = "visible"
    HIDING = "hiding"

    @property
    def is_transient(self) -> bool:
        return self in (ViewState.SHOWING, ViewState.HIDING)

    @property
    def is_visible(self) -> bool:
        """True once a show has been requested and until a close is requested."""
        return self in (ViewState.SHOWING, ViewState.VISIBLE)
