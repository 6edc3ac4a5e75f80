# loader.py
# Description: Asset loading contract and the in-process asset catalog.
#
# Imports
import asyncio
from abc import ABC, abstractmethod
from collections import Counter
from typing import Any, Callable, Dict, List, Optional
#
# Third-Party Imports
from loguru import logger
#
# Local Imports
from ..exceptions import AssetLoadError, AssetReleasedError
#
########################################################################################################################
#
logger = logger.bind(module="asset_loader")

Template = Callable[[], Any]


def asset_key(type_name: str, context: str = "") -> str:
    """Conventional key: ``UI/{context}/{TypeName}`` or ``UI/{TypeName}``."""
    if context and context.strip():
        return f"UI/{context}/{type_name}"
    return f"UI/{type_name}"


class AssetHandle:
    """Reference to a loaded template. Invalid once released."""

    def __init__(self, key: str, template: Template):
        self.key = key
        self._template: Optional[Template] = template

    def is_valid(self) -> bool:
        return self._template is not None

    @property
    def result(self) -> Template:
        if self._template is None:
            raise AssetReleasedError(f"Asset handle for '{self.key}' has been released")
        return self._template

    def invalidate(self) -> None:
        self._template = None

    def __repr__(self) -> str:
        return f"<AssetHandle key={self.key!r} valid={self.is_valid()}>"


class AssetLoader(ABC):
    """Load-by-key contract consumed by the window registry."""

    @abstractmethod
    async def load(self, key: str) -> AssetHandle:
        """Resolve ``key`` to a handle. Raises ``AssetLoadError`` for unknown keys."""

    @abstractmethod
    def release(self, handle: AssetHandle) -> None:
        """Release a handle obtained from ``load``."""


class AssetCatalog(AssetLoader):
    """
    Loader backed by an in-memory mapping of keys to templates.

    A template is any zero-argument callable returning a new instance, most
    commonly a ``UiWindow`` subclass.

    Args:
        load_delay: Seconds every load waits before resolving, to emulate
            slow storage.
    """

    def __init__(self, load_delay: float = 0.0):
        self.load_delay = load_delay
        self._templates: Dict[str, Template] = {}
        self.load_counts: Counter = Counter()
        self._live_handles: List[AssetHandle] = []

    def register(self, key: str, template: Optional[Template] = None):
        """
        Register ``template`` under ``key``. Usable as a decorator.

        Usage:
            @catalog.register("UI/MainMenu/SettingsWindow")
            class SettingsWindow(UiWindow):
                ...
        """
        def decorator(obj):
            if key in self._templates:
                logger.warning(f"Asset '{key}' is already registered, overwriting...")
            self._templates[key] = obj
            return obj
        if template is not None:
            return decorator(template)
        return decorator

    def register_window(self, window_type: type, context: str = "", template: Optional[Template] = None) -> str:
        """Register a window type under its conventional key and return the key."""
        key = asset_key(window_type.__name__, context)
        self.register(key, template or window_type)
        return key

    def keys(self) -> List[str]:
        return sorted(self._templates)

    def live_handles(self) -> List[AssetHandle]:
        return [handle for handle in self._live_handles if handle.is_valid()]

    async def load(self, key: str) -> AssetHandle:
        logger.debug(f"Loading asset '{key}'")
        await asyncio.sleep(self.load_delay)
        template = self._templates.get(key)
        if template is None:
            raise AssetLoadError(key)
        self.load_counts[key] += 1
        handle = AssetHandle(key, template)
        self._live_handles.append(handle)
        return handle

    def release(self, handle: AssetHandle) -> None:
        if not handle.is_valid():
            return
        handle.invalidate()
        if handle in self._live_handles:
            self._live_handles.remove(handle)
        logger.debug(f"Released asset '{handle.key}'")

#
# End of loader.py
########################################################################################################################
