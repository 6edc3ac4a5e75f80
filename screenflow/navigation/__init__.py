"""
Navigation management module.
"""

from .context_owner import ContextOwner
from .coordinator import Coordinator
from .window_registry import WindowRegistry

__all__ = [
    'ContextOwner',
    'Coordinator',
    'WindowRegistry',
]
