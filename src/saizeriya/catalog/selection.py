"""Budget-bounded random menu combinations."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Protocol, Sequence, TypeVar

from saizeriya.metrics import RANDOM_SELECTION_ITEMS, RANDOM_SELECTIONS
from saizeriya.models.menu import Menu, RandomMenus

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that can pick one element uniformly, e.g. ``random.Random``."""

    def choice(self, seq: Sequence[T]) -> T:
        ...


def select_random_menus(
    candidates: Sequence[Menu],
    max_sum: int,
    allow_duplicates: bool = True,
    rng: Optional[RandomSource] = None,
) -> RandomMenus:
    """Greedily draw random menus until nothing else fits in ``max_sum``.

    Each draw is uniform over the pool entries still affordable with the
    remaining budget. With ``allow_duplicates`` the pool is never depleted, so
    a cheap menu can be drawn repeatedly; otherwise each menu is drawn at most
    once. The result is neither optimal nor reproducible without a seeded
    ``rng``.
    """
    if max_sum < 0:
        raise ValueError("max_sum must be non-negative")

    source = rng if rng is not None else random.Random()
    pool: List[Menu] = list(candidates)
    items: List[Menu] = []
    total = 0

    while pool:
        affordable = [menu for menu in pool if menu.price <= max_sum - total]
        if not affordable:
            break
        picked = source.choice(affordable)
        items.append(picked)
        total += picked.price
        # Free menus never raise the total, so they can only be drawn once.
        if not allow_duplicates or picked.price == 0:
            pool = [menu for menu in pool if menu.id != picked.id]

    RANDOM_SELECTIONS.labels(allow_duplicates=str(allow_duplicates).lower()).inc()
    RANDOM_SELECTION_ITEMS.observe(len(items))
    logger.debug(
        "Selected %d menu(s) total=%d budget=%d allow_duplicates=%s",
        len(items),
        total,
        max_sum,
        allow_duplicates,
    )
    return RandomMenus(items=items, total=total, remaining=max_sum - total)


__all__ = ["RandomSource", "select_random_menus"]
