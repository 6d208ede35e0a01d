"""Menu filtering and aggregation helpers."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from saizeriya.models.menu import Menu, MenuFilter


def matches(menu: Menu, params: MenuFilter) -> bool:
    """Return True when ``menu`` satisfies every criterion set on ``params``."""
    if params.category is not None and menu.category != params.category:
        return False
    if params.genre is not None and menu.genre != params.genre:
        return False
    if params.min_price is not None and menu.price < params.min_price:
        return False
    if params.max_price is not None and menu.price > params.max_price:
        return False
    if params.keyword is not None and params.keyword not in menu.name:
        return False
    return True


def filter_menus(menus: Sequence[Menu], params: Optional[MenuFilter] = None) -> List[Menu]:
    """Return the menus matching ``params`` in their original order.

    Without ``params`` every menu is returned.
    """
    if params is None:
        return list(menus)
    return [menu for menu in menus if matches(menu, params)]


def _distinct(values: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(values))


def get_categories(menus: Iterable[Menu]) -> List[str]:
    """Distinct categories in first-seen order."""
    return _distinct(menu.category for menu in menus)


def get_genres(menus: Iterable[Menu]) -> List[str]:
    """Distinct genres in first-seen order."""
    return _distinct(menu.genre for menu in menus)


__all__ = ["filter_menus", "get_categories", "get_genres", "matches"]
