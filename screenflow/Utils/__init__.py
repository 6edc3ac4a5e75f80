"""
Shared helpers for the screenflow runtime.
"""

from .events import EventHook
from .tasks import fire_and_forget, drain_background_tasks, pending_background_tasks

__all__ = [
    'EventHook',
    'fire_and_forget',
    'drain_background_tasks',
    'pending_background_tasks',
]
