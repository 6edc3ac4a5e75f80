"""
Views, windows and their visual property holders.
"""

from .transforms import CanvasGroup, RectTransform
from .view import UiView
from .window import UiWindow

__all__ = [
    'CanvasGroup',
    'RectTransform',
    'UiView',
    'UiWindow',
]
