"""
State containers for views and navigation.
"""

from .navigation_state import NavigationState, RegisteredView
from .view_state import ViewState

__all__ = [
    'NavigationState',
    'RegisteredView',
    'ViewState',
]
