"""
Asset loading for window templates.
"""

from .loader import AssetCatalog, AssetHandle, AssetLoader, asset_key

__all__ = [
    'AssetCatalog',
    'AssetHandle',
    'AssetLoader',
    'asset_key',
]
