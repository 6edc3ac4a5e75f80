# button_behaviours.py
# Description: Pluggable reactions attached to a UiButton.
#
# Imports
import asyncio
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple
#
# Third-Party Imports
from loguru import logger
#
# Local Imports
from ..Animation.button_animations import ButtonAnimation, ButtonSelectAnimation
from ..Animation.tween import Tweener, get_default_tweener
from ..config import get_runtime_section
from ..Utils.events import EventHook
from ..Utils.tasks import fire_and_forget
#
if TYPE_CHECKING:
    from .button_group import UiButtonGroup
    from .ui_button import UiButton
#
########################################################################################################################
#
logger = logger.bind(module="button_behaviours")

Color = Tuple[float, float, float, float]


def _color(value: Any, fallback: Color) -> Color:
    if value is None:
        return fallback
    return tuple(float(c) for c in value)


class ButtonBehaviour:
    """
    Base class for button behaviours. Every hook is optional.

    ``on_hover``, ``on_leave`` and ``on_click`` are coroutines; the button
    starts them detached and never waits for them.
    """

    #: Whether the behaviour still fires while its button is not interactable.
    execute_when_disabled: bool = False

    def initialize(self, button: "UiButton") -> None:
        pass

    def on_enabled(self, button: "UiButton") -> None:
        pass

    def on_disabled(self, button: "UiButton") -> None:
        pass

    async def on_hover(self, button: "UiButton") -> None:
        pass

    async def on_leave(self, button: "UiButton") -> None:
        pass

    async def on_click(self, button: "UiButton") -> None:
        pass


@dataclass(frozen=True)
class ColorConfig:
    default_color: Color = (1.0, 1.0, 1.0, 1.0)
    hover_color: Color = (1.0, 1.0, 1.0, 1.0)
    inactive_color: Color = (0.5, 0.5, 0.5, 1.0)
    color_change_duration: float = 0.2

    @classmethod
    def from_settings(cls, settings: Optional[Dict[str, Any]] = None) -> "ColorConfig":
        if settings is None:
            settings = get_runtime_section("buttons")
        defaults = cls()
        return cls(
            default_color=_color(settings.get("default_color"), defaults.default_color),
            hover_color=_color(settings.get("hover_color"), defaults.hover_color),
            inactive_color=_color(settings.get("inactive_color"), defaults.inactive_color),
            color_change_duration=float(settings.get("color_change_duration", defaults.color_change_duration)),
        )


class ButtonColorBehaviour(ButtonBehaviour):
    """Tweens the button graphics between default, hover and inactive colours."""

    def __init__(self, config: Optional[ColorConfig] = None, tweener: Optional[Tweener] = None):
        config = config or ColorConfig.from_settings()
        self.default_color = config.default_color
        self.hover_color = config.hover_color
        self.inactive_color = config.inactive_color
        self.color_change_duration = config.color_change_duration
        self._tweener = tweener
        self._button: Optional["UiButton"] = None

    @property
    def tweener(self) -> Tweener:
        return self._tweener or get_default_tweener()

    def initialize(self, button: "UiButton") -> None:
        self._button = button

    def set_colors(self, default: Color, hover: Color, inactive: Color) -> None:
        """Replace the palette and re-apply the colour matching the button state."""
        self.default_color = default
        self.hover_color = hover
        self.inactive_color = inactive
        if self._button is None:
            return
        self._start_color_tweens(self._resting_color(self._button))

    def on_enabled(self, button: "UiButton") -> None:
        self._start_color_tweens(self.hover_color if button.is_hovered else self.default_color)

    def on_disabled(self, button: "UiButton") -> None:
        self._start_color_tweens(self.inactive_color)

    async def on_hover(self, button: "UiButton") -> None:
        await self._tween_to(self.hover_color)

    async def on_leave(self, button: "UiButton") -> None:
        await self._tween_to(self.default_color)

    def _resting_color(self, button: "UiButton") -> Color:
        if not button.is_interactable:
            return self.inactive_color
        return self.hover_color if button.is_hovered else self.default_color

    def _start_color_tweens(self, color: Color):
        if self._button is None:
            return []
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            # No event loop yet (e.g. building the UI): apply at once.
            for graphic in self._button.graphics:
                graphic.color = color
            return []
        tweens = []
        for graphic in self._button.graphics:
            self.tweener.kill(graphic)
            tweens.append(self.tweener.to(graphic, "color", color, self.color_change_duration))
        return tweens

    async def _tween_to(self, color: Color) -> None:
        tweens = self._start_color_tweens(color)
        if tweens:
            await asyncio.gather(*(tween.wait_for_completion() for tween in tweens))


class ButtonAnimationBehaviour(ButtonBehaviour):
    """Plays a ``ButtonAnimation`` on click, hover and leave. Any slot may be None."""

    def __init__(self, click_animation: Optional[ButtonAnimation] = None,
                 hover_animation: Optional[ButtonAnimation] = None,
                 leave_animation: Optional[ButtonAnimation] = None):
        self.click_animation = click_animation
        self.hover_animation = hover_animation
        self.leave_animation = leave_animation

    @classmethod
    def using(cls, animation: ButtonAnimation) -> "ButtonAnimationBehaviour":
        """Use one animation for all three events."""
        return cls(animation, animation, animation)

    async def on_hover(self, button: "UiButton") -> None:
        if self.hover_animation is not None:
            await self.hover_animation.enter(button)

    async def on_leave(self, button: "UiButton") -> None:
        if self.leave_animation is not None:
            await self.leave_animation.leave(button)

    async def on_click(self, button: "UiButton") -> None:
        if self.click_animation is not None:
            await self.click_animation.click(button)


class ButtonSelectableBehaviour(ButtonBehaviour):
    """
    Makes a button selectable, optionally as part of a ``UiButtonGroup``.

    While selected the button can be disabled and painted with the selection
    colour through the button's ``ButtonColorBehaviour``, if it has one. A
    ``select_animation`` is started on every selection change once an event
    loop is running.
    """

    def __init__(self, group: Optional["UiButtonGroup"] = None, *, select_on_click: bool = True,
                 select_on_start: bool = False, disable_when_selected: bool = True,
                 selection_color: Optional[Color] = None,
                 select_animation: Optional[ButtonSelectAnimation] = None):
        self.group = group
        self.select_animation = select_animation
        self.select_on_click = select_on_click
        self.select_on_start = select_on_start
        self.disable_when_selected = disable_when_selected
        if selection_color is None:
            selection_color = _color(get_runtime_section("buttons").get("selection_color"), (1.0, 0.92, 0.016, 1.0))
        self.selection_color = selection_color
        self.on_selected = EventHook("on_selected")
        self.on_deselected = EventHook("on_deselected")
        self._selected = False
        self._button: Optional["UiButton"] = None
        self._color_behaviour: Optional[ButtonColorBehaviour] = None
        self._palette: Optional[Tuple[Color, Color, Color]] = None

    @property
    def is_selected(self) -> bool:
        return self._selected

    @property
    def button(self) -> Optional["UiButton"]:
        return self._button

    def initialize(self, button: "UiButton") -> None:
        self._button = button
        self._color_behaviour = button.get_behaviour(ButtonColorBehaviour)
        if self._color_behaviour is not None:
            cb = self._color_behaviour
            self._palette = (cb.default_color, cb.hover_color, cb.inactive_color)
        if self.select_on_start:
            self.set_selected(True)

    def set_selected(self, selected: bool) -> None:
        if self._selected == selected:
            return
        self._selected = selected

        if self.disable_when_selected and self._button is not None:
            self._button.is_interactable = not selected

        if selected and self.group is not None:
            self.group.selected_button = self

        self._apply_visuals()
        self._start_select_animation(selected)

        if selected:
            self.on_selected.fire()
        else:
            self.on_deselected.fire()

    async def on_click(self, button: "UiButton") -> None:
        if self.select_on_click:
            self.set_selected(True)

    def _start_select_animation(self, selected: bool) -> None:
        if self.select_animation is None or self._button is None:
            return
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return
        play = self.select_animation.select if selected else self.select_animation.deselect
        fire_and_forget(play(self._button), name=f"{self._button.name}.select_animation")

    def _apply_visuals(self) -> None:
        if self._color_behaviour is None or self._palette is None:
            return
        if self._selected:
            self._color_behaviour.set_colors(self.selection_color, self.selection_color, self.selection_color)
        else:
            self._color_behaviour.set_colors(*self._palette)

#
# End of button_behaviours.py
########################################################################################################################
