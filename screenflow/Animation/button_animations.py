"""
Button animation strategies: scale punches on click and hover, and a jump up
while a button is selected.

Every strategy kills the tweens already running on the button's transform
before starting its own, so the latest pointer event decides the motion.
"""

import weakref
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

from ..config import get_runtime_section
from .easing import Ease
from .tween import Tween, Tweener, get_default_tweener

if TYPE_CHECKING:
    from ..views.transforms import RectTransform
    from ..Widgets.ui_button import UiButton


class _TweenerOwner:
    def __init__(self, tweener: Optional[Tweener] = None):
        self._tweener = tweener

    @property
    def tweener(self) -> Tweener:
        return self._tweener or get_default_tweener()


class ButtonAnimation(_TweenerOwner, ABC):
    """Pointer-driven animation played by ``ButtonAnimationBehaviour``."""

    @abstractmethod
    async def click(self, button: "UiButton") -> None:
        ...

    @abstractmethod
    async def enter(self, button: "UiButton") -> None:
        ...

    @abstractmethod
    async def leave(self, button: "UiButton") -> None:
        ...


class ButtonSelectAnimation(_TweenerOwner, ABC):
    """Animation played when a selectable button is selected or deselected."""

    @abstractmethod
    async def select(self, button: "UiButton") -> None:
        ...

    @abstractmethod
    async def deselect(self, button: "UiButton") -> None:
        ...


@dataclass(frozen=True)
class PunchConfig:
    click_scale: float = 1.05
    hover_scale: float = 1.02
    default_scale: float = 1.0
    click_duration: float = 0.2
    click_ease: Ease = Ease.IN_OUT_QUAD
    hover_duration: float = 1.0
    hover_ease: Ease = Ease.IN_OUT_BOUNCE

    @classmethod
    def from_settings(cls, settings: Optional[Dict[str, Any]] = None) -> "PunchConfig":
        if settings is None:
            settings = get_runtime_section("buttons.punch")
        defaults = cls()
        return cls(
            click_scale=float(settings.get("click_scale", defaults.click_scale)),
            hover_scale=float(settings.get("hover_scale", defaults.hover_scale)),
            default_scale=float(settings.get("default_scale", defaults.default_scale)),
            click_duration=float(settings.get("click_duration", defaults.click_duration)),
            click_ease=Ease.parse(settings.get("click_ease", defaults.click_ease)),
            hover_duration=float(settings.get("hover_duration", defaults.hover_duration)),
            hover_ease=Ease.parse(settings.get("hover_ease", defaults.hover_ease)),
        )


def _uniform(scale: float):
    return (scale, scale, scale)


class ButtonPunchAnimation(ButtonAnimation):
    """
    Scales the button up on click and back down, and grows it slightly while
    hovered.

    A click awaits the first half of the punch; the return to the default
    scale is started but not awaited. If the first half is killed by a newer
    pointer event the return is skipped.
    """

    def __init__(self, config: Optional[PunchConfig] = None, tweener: Optional[Tweener] = None):
        super().__init__(tweener)
        self.config = config or PunchConfig.from_settings()

    def _scale_to(self, transform: "RectTransform", scale: float, duration: float, ease: Ease) -> Tween:
        self.tweener.kill(transform)
        return self.tweener.to(transform, "local_scale", _uniform(scale), duration, ease)

    async def click(self, button: "UiButton") -> None:
        half = self.config.click_duration * 0.5
        transform = button.rect_transform
        arrived = await self._scale_to(transform, self.config.click_scale, half,
                                       self.config.click_ease).wait_for_completion()
        if arrived:
            self._scale_to(transform, self.config.default_scale, half, self.config.click_ease)

    async def enter(self, button: "UiButton") -> None:
        self._scale_to(button.rect_transform, self.config.hover_scale, self.config.hover_duration,
                       self.config.hover_ease)

    async def leave(self, button: "UiButton") -> None:
        self._scale_to(button.rect_transform, self.config.default_scale, self.config.hover_duration,
                       Ease.OUT_QUAD)


@dataclass(frozen=True)
class JumpUpConfig:
    jump_height: float = 20.0
    jump_duration: float = 0.5
    jump_ease: Ease = Ease.OUT_BOUNCE
    return_duration: float = 0.3
    return_ease: Ease = Ease.IN_OUT_QUAD

    @classmethod
    def from_settings(cls, settings: Optional[Dict[str, Any]] = None) -> "JumpUpConfig":
        if settings is None:
            settings = get_runtime_section("buttons.jump_up")
        defaults = cls()
        return cls(
            jump_height=float(settings.get("jump_height", defaults.jump_height)),
            jump_duration=float(settings.get("jump_duration", defaults.jump_duration)),
            jump_ease=Ease.parse(settings.get("jump_ease", defaults.jump_ease)),
            return_duration=float(settings.get("return_duration", defaults.return_duration)),
            return_ease=Ease.parse(settings.get("return_ease", defaults.return_ease)),
        )


class ButtonJumpUpAnimation(ButtonSelectAnimation):
    """
    Lifts a selected button by ``jump_height`` and drops it back when it is
    deselected.

    The resting position is recorded when the jump starts, so a deselect that
    interrupts the jump still lands where the button began.
    """

    def __init__(self, config: Optional[JumpUpConfig] = None, tweener: Optional[Tweener] = None):
        super().__init__(tweener)
        self.config = config or JumpUpConfig.from_settings()
        self._resting: "weakref.WeakKeyDictionary[RectTransform, tuple]" = weakref.WeakKeyDictionary()

    async def select(self, button: "UiButton") -> None:
        transform = button.rect_transform
        self.tweener.kill(transform)
        rest = self._resting.setdefault(transform, tuple(transform.anchored_position))
        target = (rest[0], rest[1] + self.config.jump_height)
        self.tweener.to(transform, "anchored_position", target, self.config.jump_duration, self.config.jump_ease)

    async def deselect(self, button: "UiButton") -> None:
        transform = button.rect_transform
        self.tweener.kill(transform)
        rest = self._resting.pop(transform, None)
        if rest is None:
            x, y = transform.anchored_position
            rest = (x, y - self.config.jump_height)
        self.tweener.to(transform, "anchored_position", rest, self.config.return_duration, self.config.return_ease)
