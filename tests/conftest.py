"""Shared pytest fixtures for the catalog test suite."""

from __future__ import annotations

from typing import Callable, List, Sequence

import pytest

from saizeriya.config import get_settings
from saizeriya.errors import CatalogLoadError
from saizeriya.models.menu import Menu


class FakeProvider:
    """In-memory provider counting how often it was asked to load."""

    def __init__(self, menus: Sequence[Menu], failures: int = 0) -> None:
        self._menus = list(menus)
        self._failures = failures
        self.calls = 0

    async def load(self) -> List[Menu]:
        self.calls += 1
        if self.calls <= self._failures:
            raise CatalogLoadError("upstream unavailable")
        return list(self._menus)


class ScriptedRandom:
    """Random source that picks the given indices in order."""

    def __init__(self, indices: Sequence[int]) -> None:
        self._indices = list(indices)
        self.seen: list[list] = []

    def choice(self, seq):
        self.seen.append(list(seq))
        return seq[self._indices.pop(0)]


def make_menu(menu_id: int, price: int, **kwargs) -> Menu:
    defaults = {
        "id": menu_id,
        "name": f"menu {menu_id}",
        "price": price,
        "category": "food",
        "genre": "パスタ",
    }
    defaults.update(kwargs)
    return Menu.model_validate(defaults)


@pytest.fixture()
def sample_menus() -> List[Menu]:
    """Small catalog covering several categories, genres and prices."""

    return [
        make_menu(1, 300, name="ミラノ風ドリア", genre="ドリア・グラタン"),
        make_menu(2, 350, name="小エビのサラダ", genre="サラダ"),
        make_menu(3, 400, name="マルゲリータピザ", genre="ピザ"),
        make_menu(4, 500, name="カルボナーラ", genre="パスタ"),
        make_menu(5, 300, name="ペペロンチーノ", genre="パスタ"),
        make_menu(6, 250, name="イタリアンプリン", category="dessert", genre="デザート"),
        make_menu(7, 100, name="グラスワイン（赤）", category="drink", genre="ワイン"),
        make_menu(8, 1100, name="マグナム 1500ml", category="drink", genre="ワイン"),
    ]


@pytest.fixture()
def provider_factory() -> Callable[..., FakeProvider]:
    def _factory(menus: Sequence[Menu], failures: int = 0) -> FakeProvider:
        return FakeProvider(menus, failures=failures)

    return _factory


@pytest.fixture()
def scripted_random() -> Callable[[Sequence[int]], ScriptedRandom]:
    return ScriptedRandom


@pytest.fixture()
def menu_factory() -> Callable[..., Menu]:
    return make_menu


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Ensure each test starts from default settings."""

    for key in (
        "SAIZERIYA_CATALOG_SOURCE",
        "SAIZERIYA_CATALOG_PATH",
        "SAIZERIYA_CATALOG_URL",
        "SAIZERIYA_HTTP_TIMEOUT",
        "SAIZERIYA_DEFAULT_BUDGET",
        "SAIZERIYA_ALLOW_DUPLICATES",
        "SAIZERIYA_LOG_LEVEL",
        "SAIZERIYA_LOG_FORMAT",
    ):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
