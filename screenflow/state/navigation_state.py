"""
Navigation state management.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

if TYPE_CHECKING:
    from ..views.view import UiView


@dataclass
class RegisteredView:
    """A view bound to a type key inside a coordinator."""
    view: "UiView"
    setup: Optional[Callable[[Any], None]] = None


@dataclass
class NavigationState:
    """Current screen, registered views and back history of one coordinator."""

    # Current navigation
    current_screen: Optional["UiView"] = None
    registered: Dict[type, RegisteredView] = field(default_factory=dict)

    # Back history; allocated the first time back navigation is enabled
    back_stack: Optional[List["UiView"]] = None
    back_navigation_enabled: bool = False
    max_history: int = 0

    def enable_back_navigation(self) -> None:
        if self.back_stack is None:
            self.back_stack = []
        self.back_navigation_enabled = True

    def disable_back_navigation(self) -> None:
        """Stop recording history. Existing entries are kept."""
        self.back_navigation_enabled = False

    def push(self, screen: "UiView") -> None:
        """Record ``screen`` on top of the back stack."""
        if self.back_stack is None:
            return
        self.back_stack.append(screen)
        if self.max_history and len(self.back_stack) > self.max_history:
            self.back_stack.pop(0)

    def pop(self) -> Optional["UiView"]:
        """Remove and return the most recent entry, or None when there is none."""
        if not self.back_stack:
            return None
        return self.back_stack.pop()

    def has_history(self) -> bool:
        return bool(self.back_stack)

    def history(self) -> List["UiView"]:
        """Copy of the back stack, oldest entry first."""
        return list(self.back_stack or [])

    def clear_history(self) -> None:
        if self.back_stack is not None:
            self.back_stack.clear()
