"""
Exception types raised by the screenflow runtime.

Recoverable conditions (unregistered views, empty back stack, missing window
component) are logged and never raised; only the failures below propagate.
"""


class ScreenflowError(Exception):
    """Base class for all screenflow errors."""


class ConfigurationError(ScreenflowError):
    """Raised when no context owner is registered for the requested context id."""

    def __init__(self, context_id: str):
        self.context_id = context_id
        super().__init__(f'There is no context owner registered with context "{context_id}".')


class AssetLoadError(ScreenflowError):
    """Raised when an asset key cannot be resolved by the loader."""

    def __init__(self, key: str, message: str = ""):
        self.key = key
        super().__init__(message or f"No asset registered under key '{key}'")


class AssetReleasedError(ScreenflowError):
    """Raised when the template of an already released handle is accessed."""
