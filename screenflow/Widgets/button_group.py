"""
Single-selection group of selectable buttons.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .button_behaviours import ButtonSelectableBehaviour


class UiButtonGroup:
    """Keeps at most one ``ButtonSelectableBehaviour`` selected."""

    def __init__(self, name: str = ""):
        self.name = name
        self._active: Optional["ButtonSelectableBehaviour"] = None

    @property
    def selected_button(self) -> Optional["ButtonSelectableBehaviour"]:
        return self._active

    @selected_button.setter
    def selected_button(self, value: Optional["ButtonSelectableBehaviour"]) -> None:
        if value is None or value is self._active:
            return
        previous = self._active
        self._active = value
        if previous is not None:
            previous.set_selected(False)
        value.set_selected(True)
