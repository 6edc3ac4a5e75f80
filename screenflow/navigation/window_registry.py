"""
Type-keyed window factory and cache.

The registry keeps at most one live window per type. Creating a window loads
(or reuses) the template for its type, instantiates it under a context owner
and registers it; destroying the window is the only way its entry and asset
handle are released.
"""

import asyncio
from typing import TYPE_CHECKING, Dict, List, Optional, Set, Type, TypeVar

from loguru import logger

from ..assets.loader import AssetHandle, AssetLoader, asset_key
from ..exceptions import ConfigurationError
from ..views.window import UiWindow

if TYPE_CHECKING:
    from ..runtime import UiRuntime
    from .context_owner import ContextOwner

logger = logger.bind(module="WindowRegistry")

W = TypeVar("W", bound=UiWindow)


class WindowRegistry:
    """Lazily creates and caches windows for one ``UiRuntime``."""

    def __init__(self, runtime: "UiRuntime", loader: AssetLoader):
        self.runtime = runtime
        self.loader = loader
        self._all_windows: Set[UiWindow] = set()
        self._windows_by_type: Dict[type, UiWindow] = {}
        self._loaded: Dict[type, AssetHandle] = {}
        self._loading: Dict[type, asyncio.Task] = {}
        self._creating: Dict[type, asyncio.Task] = {}

    # --- Lookup ---

    def get_window(self, window_type: Type[W]) -> Optional[W]:
        """Return the live window registered for ``window_type``, or None."""
        window = self._windows_by_type.get(window_type)
        if window is not None and window.is_alive:
            return window
        return None

    def all_windows(self) -> List[UiWindow]:
        return list(self._all_windows)

    def loaded_types(self) -> List[type]:
        return [t for t, handle in self._loaded.items() if handle.is_valid()]

    # --- Creation ---

    async def get_or_create_window(self, window_type: Type[W], context: str = "") -> Optional[W]:
        """
        Return the cached window for ``window_type`` or create it.

        Concurrent calls for the same type share a single creation. Windows
        are one per type, so a call that joins a creation already in flight
        receives that window even if it asked for a different ``context``.
        """
        window = self.get_window(window_type)
        if window is not None:
            return window

        task = self._creating.get(window_type)
        if task is None:
            task = asyncio.get_running_loop().create_task(
                self.create_window(window_type, context), name=f"create:{window_type.__name__}"
            )
            self._creating[window_type] = task
            task.add_done_callback(lambda t: self._forget_pending(self._creating, window_type, t))
        return await asyncio.shield(task)

    async def create_window(self, window_type: Type[W], context: str = "") -> Optional[W]:
        """
        Create a new window of ``window_type``.

        An empty ``context`` falls back to the runtime's current context.

        Raises:
            ConfigurationError: If no context owner is registered for the
                resolved context.
        """
        ui_context = context if context and context.strip() else self.runtime.current_context
        owner = self.runtime.get_owner(ui_context)
        if owner is None:
            raise ConfigurationError(ui_context)
        return await self._create_internal(window_type, ui_context, owner)

    async def create_window_in(self, window_type: Type[W], owner_context: str, window_context: str) -> Optional[W]:
        """
        Create a window under the owner of ``owner_context`` using the asset
        stored for ``window_context``.

        Raises:
            ConfigurationError: If no context owner is registered for
                ``owner_context``.
        """
        owner = self.runtime.get_owner(owner_context)
        if owner is None:
            raise ConfigurationError(owner_context)
        return await self._create_internal(window_type, window_context, owner)

    async def _create_internal(self, window_type: Type[W], context: str, owner: "ContextOwner") -> Optional[W]:
        key = asset_key(window_type.__name__, context)
        handle = await self._load_template(window_type, key)
        return self._instantiate(window_type, handle, owner)

    async def _load_template(self, window_type: type, key: str) -> AssetHandle:
        handle = self._loaded.get(window_type)
        if handle is not None and handle.is_valid():
            return handle

        task = self._loading.get(window_type)
        if task is None:
            task = asyncio.get_running_loop().create_task(self.loader.load(key), name=f"load:{key}")
            self._loading[window_type] = task
            task.add_done_callback(lambda t: self._forget_pending(self._loading, window_type, t))
        handle = await asyncio.shield(task)
        self._loaded[window_type] = handle
        return handle

    def _instantiate(self, window_type: Type[W], handle: AssetHandle, owner: "ContextOwner") -> Optional[W]:
        template = handle.result
        instance = template()
        if not isinstance(instance, window_type):
            logger.error(f"Failed to instantiate {window_type.__name__} window. "
                         f"Asset '{handle.key}' produced {type(instance).__name__}, not a {window_type.__name__}.")
            return None

        owner.attach(instance)
        instance.rect_transform.reset_to_full_rect()
        self.register_window(instance)
        logger.info(f"Created window {window_type.__name__} under context '{owner.context_id}'")
        return instance

    @staticmethod
    def _forget_pending(pending: Dict[type, asyncio.Task], window_type: type, task: asyncio.Task) -> None:
        if pending.get(window_type) is task:
            del pending[window_type]

    # --- Registration ---

    def register_window(self, window: UiWindow) -> bool:
        """
        Track ``window`` under its type and release it when it is destroyed.

        Returns:
            False if the window was already registered.
        """
        if window in self._all_windows:
            return False
        self._all_windows.add(window)
        self._windows_by_type[type(window)] = window
        window.on_destroyed.connect(self._unregister_window)
        logger.debug(f"Registered window {window.name}")
        return True

    def _unregister_window(self, window: UiWindow) -> None:
        self._all_windows.discard(window)
        window_type = type(window)
        if self._windows_by_type.get(window_type) is window:
            del self._windows_by_type[window_type]

        # The template stays loaded while another window of the type is alive.
        if any(type(other) is window_type for other in self._all_windows):
            return
        handle = self._loaded.pop(window_type, None)
        if handle is not None and handle.is_valid():
            self.loader.release(handle)
        logger.debug(f"Unregistered window {window.name}")

    def destroy_all(self) -> None:
        """Destroy every registered window."""
        for window in list(self._all_windows):
            window.destroy()
