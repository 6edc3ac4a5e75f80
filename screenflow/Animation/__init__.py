"""
View animation strategies and the tween engine behind them.

Importing this package registers the built-in ``fade`` and ``slide``
animations. Button animations (punch, jump up) live beside them.
"""

from .base import (
    ANIMATION_REGISTRY,
    ViewAnimation,
    create_animation,
    get_animation_class,
    list_available_animations,
    register_animation,
)
from .button_animations import (
    ButtonAnimation,
    ButtonJumpUpAnimation,
    ButtonPunchAnimation,
    ButtonSelectAnimation,
    JumpUpConfig,
    PunchConfig,
)
from .easing import Ease
from .fade import FadeAnimation, FadeConfig
from .slide import SlideAnimation, SlideConfig, SlideDirection
from .tween import Tween, Tweener, get_default_tweener

__all__ = [
    'ANIMATION_REGISTRY',
    'ButtonAnimation',
    'ButtonJumpUpAnimation',
    'ButtonPunchAnimation',
    'ButtonSelectAnimation',
    'Ease',
    'FadeAnimation',
    'FadeConfig',
    'JumpUpConfig',
    'PunchConfig',
    'SlideAnimation',
    'SlideConfig',
    'SlideDirection',
    'Tween',
    'Tweener',
    'ViewAnimation',
    'create_animation',
    'get_animation_class',
    'get_default_tweener',
    'list_available_animations',
    'register_animation',
]
