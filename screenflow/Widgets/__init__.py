"""
Button layer: buttons, behaviours and selection groups.
"""

from .button_behaviours import (
    ButtonAnimationBehaviour,
    ButtonBehaviour,
    ButtonColorBehaviour,
    ButtonSelectableBehaviour,
    ColorConfig,
)
from .button_group import UiButtonGroup
from .ui_button import Graphic, UiButton

__all__ = [
    'ButtonAnimationBehaviour',
    'ButtonBehaviour',
    'ButtonColorBehaviour',
    'ButtonSelectableBehaviour',
    'ColorConfig',
    'Graphic',
    'UiButton',
    'UiButtonGroup',
]
