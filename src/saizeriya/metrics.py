"""Prometheus metrics definitions for the menu catalog."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

CATALOG_LOADS = Counter(
    "saizeriya_catalog_loads_total",
    "Number of catalog load attempts by outcome",
    ["status"],
)

CATALOG_LOAD_LATENCY = Histogram(
    "saizeriya_catalog_load_duration_seconds",
    "Time spent waiting on the catalog provider",
)

RANDOM_SELECTIONS = Counter(
    "saizeriya_random_selections_total",
    "Number of random menu combinations produced",
    ["allow_duplicates"],
)

RANDOM_SELECTION_ITEMS = Histogram(
    "saizeriya_random_selection_items",
    "Number of menus picked per random combination",
    buckets=(0, 1, 2, 3, 5, 8, 13, 21, 34),
)

__all__ = [
    "CATALOG_LOADS",
    "CATALOG_LOAD_LATENCY",
    "RANDOM_SELECTIONS",
    "RANDOM_SELECTION_ITEMS",
]
