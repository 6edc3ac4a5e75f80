# ui_button.py
# Description: Button model that fans pointer events out to its behaviours.
#
# Imports
import time
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Type, TypeVar
#
# Third-Party Imports
from loguru import logger
#
# Local Imports
from ..config import get_runtime_setting
from ..Utils.events import EventHook
from ..Utils.tasks import fire_and_forget
from ..views.transforms import RectTransform
from .button_behaviours import ButtonBehaviour
#
########################################################################################################################
#
logger = logger.bind(module="UiButton")

B = TypeVar("B", bound=ButtonBehaviour)


@dataclass(eq=False)
class Graphic:
    """A coloured element of a button, tinted by colour behaviours."""
    name: str = ""
    color: Tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)


class UiButton:
    """
    A button whose reactions are delegated to ``ButtonBehaviour`` objects.

    Behaviours for one event are started detached and in parallel, so a slow
    behaviour (a long colour tween, a sound) never delays the others. ``None``
    entries in the behaviour list are skipped.
    """

    def __init__(self, name: str = "", *, interactable: bool = True,
                 behaviours: Iterable[Optional[ButtonBehaviour]] = (),
                 graphics: Optional[Sequence[Graphic]] = None, text: str = "",
                 min_click_interval: Optional[float] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.name = name or type(self).__name__
        self.graphics: List[Graphic] = list(graphics) if graphics else [Graphic(name=f"{self.name}.background")]
        self.text = text
        self.rect_transform = RectTransform()
        if min_click_interval is None:
            min_click_interval = float(get_runtime_setting("buttons", "min_click_interval", 0.7))
        self.min_click_interval = max(0.0, min_click_interval)
        self.on_click = EventHook(f"{self.name}.on_click")
        self.is_hovered = False
        self._clock = clock
        self._last_click_time: Optional[float] = None
        self._behaviours: List[Optional[ButtonBehaviour]] = list(behaviours)
        self._interactable = interactable

        for behaviour in self._behaviours:
            if behaviour is not None:
                behaviour.initialize(self)
        self.is_interactable = self._interactable

    def __repr__(self) -> str:
        return f"<UiButton name={self.name!r} interactable={self._interactable}>"

    @property
    def behaviours(self) -> List[Optional[ButtonBehaviour]]:
        return list(self._behaviours)

    @property
    def is_interactable(self) -> bool:
        return self._interactable

    @is_interactable.setter
    def is_interactable(self, value: bool) -> None:
        """Set the flag and notify every behaviour of the enabled/disabled state."""
        self._interactable = value
        for behaviour in self._behaviours:
            if behaviour is None:
                continue
            if value:
                behaviour.on_enabled(self)
            else:
                behaviour.on_disabled(self)

    def set_interactable(self, active: bool) -> None:
        self.is_interactable = active

    def set_text(self, text: str) -> None:
        self.text = text

    def get_behaviour(self, behaviour_type: Type[B]) -> Optional[B]:
        """Return the first behaviour that is an instance of ``behaviour_type``."""
        for behaviour in self._behaviours:
            if isinstance(behaviour, behaviour_type):
                return behaviour
        return None

    # --- Pointer events ---

    def pointer_enter(self) -> list:
        if self.is_hovered:
            return []
        self.is_hovered = True
        return self._run_behaviours("on_hover")

    def pointer_exit(self) -> list:
        if not self.is_hovered:
            return []
        self.is_hovered = False
        return self._run_behaviours("on_leave")

    def pointer_click(self) -> list:
        """Handle a pointer click, dropping clicks inside the debounce interval."""
        now = self._clock()
        if self._last_click_time is not None and now - self._last_click_time < self.min_click_interval:
            logger.trace(f"{self.name}: click ignored by debounce")
            return []
        self._last_click_time = now
        return self.perform_click()

    def perform_click(self) -> list:
        """
        Click programmatically, bypassing the debounce interval.

        Returns:
            The detached behaviour tasks that were started.
        """
        if not self._interactable:
            return []
        tasks = self._run_behaviours("on_click")
        self.on_click.fire(self)
        return tasks

    def _run_behaviours(self, hook: str) -> list:
        tasks = []
        for behaviour in self._behaviours:
            if behaviour is None:
                continue
            if not self._interactable and not behaviour.execute_when_disabled:
                continue
            tasks.append(fire_and_forget(getattr(behaviour, hook)(self), name=f"{self.name}.{hook}"))
        return tasks

#
# End of ui_button.py
########################################################################################################################
