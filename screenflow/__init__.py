"""
screenflow - UI navigation runtime

Presents, hides and routes between screens: a per-view show/hide lifecycle
with pluggable animations, a type-keyed window registry that lazily loads and
caches windows per context, and stack-based flow coordinators with overlays
and back navigation. Ships a Textual host for rendering views in a terminal.
"""

__version__ = "0.1.0"

# Version tuple for programmatic comparison
VERSION_TUPLE = (0, 1, 0)

from .Animation import FadeAnimation, SlideAnimation, ViewAnimation, create_animation
from .assets import AssetCatalog, AssetHandle, AssetLoader
from .exceptions import AssetLoadError, ConfigurationError, ScreenflowError
from .navigation import ContextOwner, Coordinator, WindowRegistry
from .runtime import UiRuntime
from .state import NavigationState, ViewState
from .views import UiView, UiWindow

__all__ = [
    "__version__",
    "AssetCatalog",
    "AssetHandle",
    "AssetLoadError",
    "AssetLoader",
    "ConfigurationError",
    "ContextOwner",
    "Coordinator",
    "FadeAnimation",
    "NavigationState",
    "ScreenflowError",
    "SlideAnimation",
    "UiRuntime",
    "UiView",
    "UiWindow",
    "ViewAnimation",
    "ViewState",
    "WindowRegistry",
    "create_animation",
]
