"""Random combination selector tests."""

from __future__ import annotations

import random

import pytest

from saizeriya.catalog.selection import select_random_menus


def test_empty_candidates_return_empty_result():
    result = select_random_menus([], 1000)
    assert result.items == []
    assert result.total == 0
    assert result.remaining == 1000


def test_everything_over_budget_terminates_empty(menu_factory):
    candidates = [menu_factory(1, 1500), menu_factory(2, 2000)]
    for allow_duplicates in (True, False):
        result = select_random_menus(candidates, 1000, allow_duplicates)
        assert result.items == []
        assert result.total == 0
        assert result.remaining == 1000


def test_single_item_priced_at_budget_is_selected(menu_factory):
    menu = menu_factory(1, 1000)
    result = select_random_menus([menu], 1000)
    assert result.items == [menu]
    assert result.total == 1000
    assert result.remaining == 0


def test_zero_budget_without_free_items(menu_factory):
    result = select_random_menus([menu_factory(1, 100), menu_factory(2, 200)], 0)
    assert result.items == []
    assert result.total == 0
    assert result.remaining == 0


def test_negative_budget_is_rejected(menu_factory):
    with pytest.raises(ValueError):
        select_random_menus([menu_factory(1, 100)], -1)


@pytest.mark.parametrize("seed", range(20))
@pytest.mark.parametrize("allow_duplicates", [True, False])
def test_total_never_exceeds_budget(sample_menus, seed, allow_duplicates):
    result = select_random_menus(sample_menus, 1000, allow_duplicates, rng=random.Random(seed))

    assert result.total <= 1000
    assert result.total == sum(menu.price for menu in result.items)
    assert result.remaining == 1000 - result.total
    cheapest_left = min(menu.price for menu in sample_menus)
    if allow_duplicates:
        # Nothing affordable may be left over once the draw stops.
        assert result.remaining < cheapest_left


@pytest.mark.parametrize("seed", range(20))
def test_no_duplicates_mode_returns_distinct_ids(sample_menus, seed):
    result = select_random_menus(sample_menus, 5000, False, rng=random.Random(seed))
    ids = [menu.id for menu in result.items]
    assert len(ids) == len(set(ids))


def test_no_duplicates_mode_exhausts_pool(menu_factory):
    candidates = [menu_factory(1, 100), menu_factory(2, 200)]
    result = select_random_menus(candidates, 10_000, False, rng=random.Random(1))
    assert sorted(menu.id for menu in result.items) == [1, 2]
    assert result.remaining == 10_000 - 300


def test_duplicates_mode_repeats_cheap_item(menu_factory):
    cheap = menu_factory(1, 100)
    result = select_random_menus([cheap], 1000, True)
    assert result.items == [cheap] * 10
    assert result.remaining == 0


def test_draws_only_from_affordable_pool(menu_factory, scripted_random):
    a, b, c = menu_factory(1, 600), menu_factory(2, 300), menu_factory(3, 500)
    rng = scripted_random([0, 0])

    result = select_random_menus([a, b, c], 1000, False, rng=rng)

    assert result.items == [a, b]
    assert result.total == 900
    assert rng.seen == [[a, b, c], [b]]


def test_scripted_duplicates_order(menu_factory, scripted_random):
    a, b = menu_factory(1, 300), menu_factory(2, 400)
    rng = scripted_random([1, 1])

    result = select_random_menus([a, b], 1000, True, rng=rng)

    assert result.items == [b, b]
    assert result.total == 800
    assert result.remaining == 200
    assert rng.seen == [[a, b], [a, b]]


def test_free_item_is_drawn_once_when_duplicates_allowed(menu_factory, scripted_random):
    free, paid = menu_factory(1, 0), menu_factory(2, 500)
    rng = scripted_random([0, 0, 0])

    result = select_random_menus([free, paid], 1000, True, rng=rng)

    assert result.items == [free, paid, paid]
    assert result.total == 1000


def test_zero_budget_with_free_item(menu_factory):
    free = menu_factory(1, 0)
    result = select_random_menus([free, menu_factory(2, 100)], 0, True)
    assert result.items == [free]
    assert result.remaining == 0
