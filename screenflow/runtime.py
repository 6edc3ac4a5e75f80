"""
The UI runtime context.

One ``UiRuntime`` replaces process-wide registries: it holds the current
context id, the context owners by id and the window registry. The application
entry point creates it and passes it to whatever needs windows.
"""

from typing import Dict, Optional

from loguru import logger

from .assets.loader import AssetLoader
from .config import get_runtime_setting
from .navigation.context_owner import ContextOwner
from .navigation.window_registry import WindowRegistry
from .Utils.tasks import drain_background_tasks

logger = logger.bind(module="UiRuntime")


class UiRuntime:
    """
    Owns context resolution and the window registry.

    Args:
        loader: Asset loader used to resolve window templates.
        current_context: Initial current context; defaults to
            ``[runtime] default_context`` from the configuration.
    """

    def __init__(self, loader: AssetLoader, current_context: Optional[str] = None):
        if current_context is None:
            current_context = str(get_runtime_setting("runtime", "default_context", ""))
        self.current_context = current_context
        self._owners: Dict[str, ContextOwner] = {}
        self.windows = WindowRegistry(self, loader)

    def set_context(self, context_id: str) -> None:
        """Set the context used by creation calls that omit one."""
        self.current_context = context_id
        logger.debug(f"Current UI context set to '{context_id}'")

    # --- Context owners ---

    def register_owner(self, owner: ContextOwner) -> None:
        if owner.context_id in self._owners and self._owners[owner.context_id] is not owner:
            logger.warning(f"Context owner with context id '{owner.context_id}' already exists. Overwriting.")
        self._owners[owner.context_id] = owner

    def unregister_owner(self, owner: ContextOwner) -> None:
        if self._owners.get(owner.context_id) is owner:
            del self._owners[owner.context_id]

    def get_owner(self, context_id: str) -> Optional[ContextOwner]:
        return self._owners.get(context_id)

    def create_owner(self, context_id: str, **kwargs) -> ContextOwner:
        """Create and register a context owner for ``context_id``."""
        return ContextOwner(self, context_id, **kwargs)

    @property
    def context_ids(self):
        return sorted(self._owners)

    async def shutdown(self, timeout: Optional[float] = 5.0) -> None:
        """Destroy all windows and owners, then wait for detached transitions."""
        self.windows.destroy_all()
        for owner in list(self._owners.values()):
            owner.destroy()
        await drain_background_tasks(timeout)
        logger.info("UI runtime shut down")
