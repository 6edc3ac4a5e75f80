"""
Rendering hosts for screenflow views.
"""

from .textual_host import ViewHost, ViewWidget

__all__ = [
    'ViewHost',
    'ViewWidget',
]
