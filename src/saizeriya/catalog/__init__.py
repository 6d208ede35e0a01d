"""Catalog loading, filtering, and random selection."""

from __future__ import annotations

from .cache import CatalogCache, CatalogState
from .filters import filter_menus, get_categories, get_genres
from .provider import (
    BundledCatalogProvider,
    CatalogProvider,
    FileCatalogProvider,
    RemoteCatalogProvider,
    provider_from_settings,
)
from .selection import RandomSource, select_random_menus

__all__ = [
    "BundledCatalogProvider",
    "CatalogCache",
    "CatalogProvider",
    "CatalogState",
    "FileCatalogProvider",
    "RandomSource",
    "RemoteCatalogProvider",
    "filter_menus",
    "get_categories",
    "get_genres",
    "provider_from_settings",
    "select_random_menus",
]
