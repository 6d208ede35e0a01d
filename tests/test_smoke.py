"""Basic smoke tests for the package surface."""

import asyncio

import saizeriya
from saizeriya import Saizeriya


def test_version_is_exposed() -> None:
    assert saizeriya.__version__


def test_random_combination_from_bundled_catalog() -> None:
    result = asyncio.run(Saizeriya().random(max_sum=1000))

    assert result.total <= 1000
    assert result.total + result.remaining == 1000
