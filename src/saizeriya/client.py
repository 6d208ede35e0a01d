"""High-level async access to the menu catalog."""

from __future__ import annotations

import logging
from typing import List, Optional

from saizeriya.catalog.cache import CatalogCache
from saizeriya.catalog.filters import filter_menus, get_categories, get_genres
from saizeriya.catalog.provider import CatalogProvider, provider_from_settings
from saizeriya.catalog.selection import RandomSource, select_random_menus
from saizeriya.config import Settings, get_settings
from saizeriya.models.menu import Menu, MenuFilter, RandomMenus

logger = logging.getLogger(__name__)


class Saizeriya:
    """Catalog facade that loads menus on first use.

    Every read goes through :meth:`CatalogCache.ensure_loaded`, so a failed
    load surfaces as :class:`~saizeriya.errors.CatalogLoadError` and the next
    call simply tries again.

    Note that ``random`` allows duplicates by default, so a single very cheap
    menu can make up most of a combination.
    """

    def __init__(
        self,
        provider: Optional[CatalogProvider] = None,
        *,
        cache: Optional[CatalogCache] = None,
        rng: Optional[RandomSource] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or get_settings()
        if cache is None:
            cache = CatalogCache(provider or provider_from_settings(self._settings))
        self._cache = cache
        self._rng = rng

    @property
    def cache(self) -> CatalogCache:
        return self._cache

    async def __aenter__(self) -> "Saizeriya":
        await self.preload()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def preload(self) -> None:
        """Load the catalog now instead of on the first read."""
        await self._cache.ensure_loaded()

    async def all(self, params: Optional[MenuFilter] = None) -> List[Menu]:
        """Return every menu matching ``params``."""
        menus = await self._cache.ensure_loaded()
        return filter_menus(menus, params)

    async def categories(self) -> List[str]:
        menus = await self._cache.ensure_loaded()
        return get_categories(menus)

    async def genres(self) -> List[str]:
        menus = await self._cache.ensure_loaded()
        return get_genres(menus)

    async def get_by_id(self, menu_id: int) -> Optional[Menu]:
        """Return the menu with ``menu_id``, or None when it is not in the catalog."""
        menus = await self._cache.ensure_loaded()
        return next((menu for menu in menus if menu.id == menu_id), None)

    async def random(
        self,
        params: Optional[MenuFilter] = None,
        max_sum: Optional[int] = None,
        allow_duplicates: Optional[bool] = None,
    ) -> RandomMenus:
        """Pick a random combination of matching menus costing at most ``max_sum``.

        ``max_sum`` and ``allow_duplicates`` fall back to the configured
        defaults (1000 yen, duplicates allowed).
        """
        budget = self._settings.default_budget if max_sum is None else max_sum
        duplicates = self._settings.allow_duplicates if allow_duplicates is None else allow_duplicates
        candidates = await self.all(params)
        logger.debug(
            "Random selection over %d candidate(s) budget=%d", len(candidates), budget
        )
        return select_random_menus(candidates, budget, duplicates, rng=self._rng)


__all__ = ["Saizeriya"]
