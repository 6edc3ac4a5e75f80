"""
Base class and registry for view animation strategies.

An animation strategy owns every visual change of a show/hide transition on
one view. Before starting a transition it must kill whatever transition is
already running on the same target, so the most recent request always wins.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Type

from loguru import logger

from ..config import get_runtime_section
from .tween import Tweener, get_default_tweener

if TYPE_CHECKING:
    from ..views.view import UiView

logger = logger.bind(module="animation")


class ViewAnimation(ABC):
    """Show/hide transition contract consumed by ``UiView``."""

    #: Frozen dataclass holding the tunables; must provide ``from_settings(dict)``.
    config_class: Optional[type] = None

    def __init__(self, tweener: Optional[Tweener] = None):
        self._tweener = tweener

    @property
    def tweener(self) -> Tweener:
        return self._tweener or get_default_tweener()

    @abstractmethod
    async def show_async(self, view: "UiView") -> bool:
        """Play the show transition. Returns False if it was abandoned."""

    @abstractmethod
    async def hide_async(self, view: "UiView") -> bool:
        """Play the hide transition. Returns False if it was abandoned."""

    @abstractmethod
    def show_immediate(self, view: "UiView") -> None:
        """Apply the shown visuals at once."""

    @abstractmethod
    def hide_immediate(self, view: "UiView") -> None:
        """Apply the hidden visuals at once."""


# --- Animation Registry ---
ANIMATION_REGISTRY: Dict[str, Type[ViewAnimation]] = {}


def register_animation(name: str):
    """
    Decorator to register an animation class under ``name``.

    Usage:
        @register_animation("fade")
        class FadeAnimation(ViewAnimation):
            ...
    """
    def decorator(cls):
        if name in ANIMATION_REGISTRY:
            logger.warning(f"Animation '{name}' is already registered, overwriting...")
        ANIMATION_REGISTRY[name] = cls
        return cls
    return decorator


def get_animation_class(name: str) -> Optional[Type[ViewAnimation]]:
    """Get an animation class by its registered name."""
    return ANIMATION_REGISTRY.get(name)


def list_available_animations() -> List[str]:
    """Get a sorted list of all registered animation names."""
    return sorted(ANIMATION_REGISTRY.keys())


def create_animation(name: str, settings: Optional[Dict[str, Any]] = None,
                     tweener: Optional[Tweener] = None) -> ViewAnimation:
    """
    Build a registered animation with its configuration.

    Args:
        name: Registered animation name.
        settings: Values for the animation's config; defaults to the
            ``[animation.<name>]`` config section.
        tweener: Tweener to drive the animation with.

    Raises:
        KeyError: If no animation is registered under ``name``.
    """
    cls = get_animation_class(name)
    if cls is None:
        raise KeyError(f"Animation '{name}' is not registered. Available: {list_available_animations()}")
    if settings is None:
        settings = get_runtime_section(f"animation.{name}")
    config = cls.config_class.from_settings(settings) if cls.config_class is not None else None
    return cls(config=config, tweener=tweener)
