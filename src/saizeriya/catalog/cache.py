"""Lazily loaded, process-lifetime menu snapshot."""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Tuple

from saizeriya.metrics import CATALOG_LOAD_LATENCY, CATALOG_LOADS
from saizeriya.models.menu import Menu

from .provider import CatalogProvider

logger = logging.getLogger(__name__)


class CatalogState(str, Enum):
    EMPTY = "empty"
    LOADED = "loaded"


class CatalogCache:
    """Hold the menus returned by a provider once they have been loaded.

    There is no invalidation: once populated the snapshot lives as long as the
    cache. Loads are not deduplicated, so callers racing on an empty cache may
    each hit the provider and the last result wins. Failures are never cached.
    """

    def __init__(self, provider: CatalogProvider) -> None:
        self._provider = provider
        self._menus: Tuple[Menu, ...] = ()

    @property
    def state(self) -> CatalogState:
        return CatalogState.LOADED if self._menus else CatalogState.EMPTY

    @property
    def snapshot(self) -> Tuple[Menu, ...]:
        return self._menus

    async def ensure_loaded(self) -> Tuple[Menu, ...]:
        """Load the catalog if the snapshot is empty and return it."""

        if self._menus:
            return self._menus

        started = time.perf_counter()
        try:
            menus = await self._provider.load()
        except Exception:
            CATALOG_LOADS.labels(status="failed").inc()
            logger.warning("Catalog load failed; will retry on next access", exc_info=True)
            raise
        finally:
            CATALOG_LOAD_LATENCY.observe(time.perf_counter() - started)

        self._menus = tuple(menus)
        CATALOG_LOADS.labels(status="succeeded" if self._menus else "empty").inc()
        logger.info(
            "Loaded %d menu(s) from %s", len(self._menus), type(self._provider).__name__
        )
        return self._menus


__all__ = ["CatalogCache", "CatalogState"]
