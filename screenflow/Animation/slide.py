"""
Horizontal slide animation combined with a fade.

The slide moves the view's anchored position; the fade is delegated to an
owned ``FadeAnimation`` running alongside it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

from .base import ViewAnimation, register_animation
from .easing import Ease
from .fade import FadeAnimation, FadeConfig
from .tween import Tweener

if TYPE_CHECKING:
    from ..views.view import UiView


class SlideDirection(Enum):
    LEFT_TO_RIGHT = "left_to_right"
    RIGHT_TO_LEFT = "right_to_left"
    NONE = "none"


@dataclass(frozen=True)
class SlideConfig:
    slide_duration: float = 0.35
    slide_ease: Ease = Ease.OUT_CIRC
    direction: SlideDirection = SlideDirection.RIGHT_TO_LEFT
    fade: FadeConfig = field(default_factory=FadeConfig)

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> "SlideConfig":
        defaults = cls()
        return cls(
            slide_duration=float(settings.get("slide_duration", defaults.slide_duration)),
            slide_ease=Ease.parse(settings.get("slide_ease", defaults.slide_ease)),
            direction=SlideDirection(str(settings.get("direction", defaults.direction.value)).lower()),
            fade=FadeConfig.from_settings(settings.get("fade", {})),
        )


@register_animation("slide")
class SlideAnimation(ViewAnimation):
    config_class = SlideConfig

    def __init__(self, config: Optional[SlideConfig] = None, tweener: Optional[Tweener] = None):
        super().__init__(tweener)
        self.config = config or SlideConfig()
        self.fade = FadeAnimation(self.config.fade, tweener)

    def _entry_offset(self, view: "UiView") -> float:
        width = view.size[0]
        if self.config.direction is SlideDirection.LEFT_TO_RIGHT:
            return -width
        if self.config.direction is SlideDirection.RIGHT_TO_LEFT:
            return width
        return 0.0

    async def show_async(self, view: "UiView") -> bool:
        rect = view.rect_transform
        self.tweener.kill(rect)
        rect.anchored_position = (self._entry_offset(view), 0.0)
        self.fade.fade_in(view)
        slide = self.tweener.to(rect, "anchored_position", (0.0, 0.0),
                                self.config.slide_duration, self.config.slide_ease)
        return await slide.wait_for_completion()

    async def hide_async(self, view: "UiView") -> bool:
        rect = view.rect_transform
        self.tweener.kill(rect)
        # Leave towards the side opposite to the entry side.
        target = (-self._entry_offset(view), rect.anchored_position[1])
        slide = self.tweener.to(rect, "anchored_position", target,
                                self.config.slide_duration, self.config.slide_ease)
        arrived = await slide.wait_for_completion()
        if arrived:
            self.fade.fade_out(view)
        return arrived

    def show_immediate(self, view: "UiView") -> None:
        self.fade.show_immediate(view)
        self.tweener.kill(view.rect_transform)
        view.rect_transform.anchored_position = (0.0, 0.0)

    def hide_immediate(self, view: "UiView") -> None:
        self.fade.hide_immediate(view)
        self.tweener.kill(view.rect_transform)
