"""
Flow coordinator for screen navigation, overlays and back history.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Type, TypeVar

from loguru import logger

from ..config import get_runtime_setting
from ..state.navigation_state import NavigationState, RegisteredView
from ..Utils.tasks import fire_and_forget
from ..views.view import UiView

logger = logger.bind(module="Coordinator")

V = TypeVar("V", bound=UiView)


class Coordinator(ABC):
    """
    Routes between the views of one flow.

    Views are registered under a type key. Navigation closes the current
    screen and shows the target; overlays are shown and closed without
    touching the current screen or the back stack. Operations on types that
    were never registered log a warning and do nothing.
    """

    def __init__(self, name: Optional[str] = None, *, max_history: Optional[int] = None):
        self.name = name or type(self).__name__
        if max_history is None:
            max_history = int(get_runtime_setting("navigation", "max_back_stack", 0))
        self.state = NavigationState(max_history=max_history)

    @abstractmethod
    async def run(self) -> None:
        """Entry point of the flow: register views and navigate to the first screen."""

    # --- Queries ---

    @property
    def current_screen(self) -> Optional[UiView]:
        return self.state.current_screen

    @property
    def back_stack(self) -> List[UiView]:
        """Copy of the back stack, oldest entry first."""
        return self.state.history()

    @property
    def back_navigation_enabled(self) -> bool:
        return self.state.back_navigation_enabled

    def can_go_back(self) -> bool:
        return self.state.has_history()

    def is_registered(self, view_type: type) -> bool:
        return view_type in self.state.registered

    def get_view(self, view_type: Type[V]) -> Optional[V]:
        registered = self.state.registered.get(view_type)
        return registered.view if registered is not None else None

    # --- Registration ---

    def register(self, view: Optional[V], setup: Optional[Callable[[V], None]] = None,
                 view_type: Optional[type] = None) -> bool:
        """
        Register ``view`` under ``view_type`` (its own class by default).

        A second registration for the same type is ignored. ``setup`` runs
        once, only when the view is actually registered.

        Returns:
            True if the view was registered.
        """
        if view is None:
            return False
        key = view_type or type(view)
        if key in self.state.registered:
            return False

        self.state.registered[key] = RegisteredView(view, setup)
        if setup is not None:
            setup(view)
        logger.debug(f"{self.name}: registered {key.__name__}")
        return True

    def unregister(self, view_type: type) -> bool:
        if self._resolve(view_type) is None:
            return False
        del self.state.registered[view_type]
        logger.debug(f"{self.name}: unregistered {view_type.__name__}")
        return True

    def _resolve(self, view_type: type) -> Optional[RegisteredView]:
        registered = self.state.registered.get(view_type)
        if registered is None:
            logger.warning(f"Window {view_type.__name__} is not registered in coordinator {self.name}")
        return registered

    # --- Back navigation ---

    def enable_back_navigation(self) -> None:
        self.state.enable_back_navigation()

    def disable_back_navigation(self) -> None:
        """Stop recording history; entries already on the stack are kept."""
        self.state.disable_back_navigation()

    # --- Navigation ---

    async def navigate_to(self, view_type: type, wait_for_close: bool = False) -> bool:
        """
        Close the current screen and show the view registered for ``view_type``.

        Args:
            view_type: Registered type key of the target.
            wait_for_close: Await the close transition before showing the
                target. When False the close runs detached and both
                transitions overlap.

        Returns:
            True if a navigation happened.
        """
        registered = self._resolve(view_type)
        if registered is None:
            return False
        return await self._navigate(registered.view, self.state.back_navigation_enabled, wait_for_close)

    async def navigate_back(self, wait_for_close: bool = True) -> bool:
        """Return to the most recent screen on the back stack."""
        previous = self.state.pop()
        while previous is not None and previous is self.state.current_screen:
            logger.warning(f"{self.name}: dropping back stack entry {previous.name}, it is the current screen")
            previous = self.state.pop()
        if previous is None:
            logger.warning(f"{self.name}: navigation stack is empty or back navigation is not enabled")
            return False
        return await self._navigate(previous, False, wait_for_close)

    async def show_overlay(self, view_type: type) -> bool:
        registered = self._resolve(view_type)
        if registered is None:
            return False
        return await registered.view.show_async()

    async def close_overlay(self, view_type: type) -> bool:
        registered = self._resolve(view_type)
        if registered is None:
            return False
        return await registered.view.close_async()

    def set_current(self, view_type: type) -> bool:
        """Declare the registered view as current without any transition."""
        registered = self._resolve(view_type)
        if registered is None:
            return False
        self.state.current_screen = registered.view
        return True

    async def _navigate(self, next_screen: UiView, save_in_stack: bool, wait_for_close: bool) -> bool:
        current = self.state.current_screen
        if current is next_screen:
            if next_screen.is_visible:
                logger.debug(f"{self.name}: already on screen {next_screen.name}")
                return False
            # Current but hidden (set_current, or closed as an overlay): show it, nothing to push.
            await next_screen.show_async()
            logger.info(f"{self.name}: re-showed current screen {next_screen.name}")
            return True

        if current is not None:
            if save_in_stack:
                self.state.push(current)
            if wait_for_close:
                await current.close_async()
            else:
                fire_and_forget(current.close_async(), name=f"{self.name}:close:{current.name}")
                # Let the detached close run up to its first suspension point.
                await asyncio.sleep(0)

        self.state.current_screen = next_screen
        await next_screen.show_async()
        logger.info(f"{self.name}: navigated to {next_screen.name}")
        return True
