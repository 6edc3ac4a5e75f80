"""
Fade in/out animation driven by the view's canvas group alpha.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

from .base import ViewAnimation, register_animation
from .easing import Ease
from .tween import Tween, Tweener

if TYPE_CHECKING:
    from ..views.view import UiView


@dataclass(frozen=True)
class FadeConfig:
    """Durations are in seconds."""
    show_duration: float = 0.25
    show_ease: Ease = Ease.LINEAR
    hide_duration: float = 0.25
    hide_ease: Ease = Ease.LINEAR

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> "FadeConfig":
        defaults = cls()
        return cls(
            show_duration=float(settings.get("show_duration", defaults.show_duration)),
            show_ease=Ease.parse(settings.get("show_ease", defaults.show_ease)),
            hide_duration=float(settings.get("hide_duration", defaults.hide_duration)),
            hide_ease=Ease.parse(settings.get("hide_ease", defaults.hide_ease)),
        )


@register_animation("fade")
class FadeAnimation(ViewAnimation):
    config_class = FadeConfig

    def __init__(self, config: Optional[FadeConfig] = None, tweener: Optional[Tweener] = None):
        super().__init__(tweener)
        self.config = config or FadeConfig()

    def fade_in(self, view: "UiView") -> Tween:
        """Start fading ``view`` to fully opaque without waiting for it."""
        self.tweener.kill(view.canvas_group)
        return self.tweener.to(view.canvas_group, "alpha", 1.0, self.config.show_duration, self.config.show_ease)

    def fade_out(self, view: "UiView") -> Tween:
        """Start fading ``view`` to fully transparent without waiting for it."""
        self.tweener.kill(view.canvas_group)
        return self.tweener.to(view.canvas_group, "alpha", 0.0, self.config.hide_duration, self.config.hide_ease)

    async def show_async(self, view: "UiView") -> bool:
        return await self.fade_in(view).wait_for_completion()

    async def hide_async(self, view: "UiView") -> bool:
        return await self.fade_out(view).wait_for_completion()

    def show_immediate(self, view: "UiView") -> None:
        self.tweener.kill(view.canvas_group)
        view.canvas_group.alpha = 1.0

    def hide_immediate(self, view: "UiView") -> None:
        self.tweener.kill(view.canvas_group)
        view.canvas_group.alpha = 0.0
