"""Refresh a local catalog snapshot from the upstream JSON source."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from saizeriya.models.menu import Menu

from .provider import RemoteCatalogProvider, parse_catalog

logger = logging.getLogger(__name__)


async def sync_catalog(provider: RemoteCatalogProvider, output: Path) -> List[Menu]:
    """Download the catalog, validate it and write it to ``output``.

    The written document records the upstream URL so a reader can tell where
    the snapshot came from. Nothing is written if validation fails.
    """
    menus = parse_catalog(await provider.fetch_document())
    document = {
        "source": provider.url,
        "menus": [menu.model_dump(mode="json", exclude_none=True) for menu in menus],
    }
    output.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = output.with_suffix(output.suffix + ".tmp")
    tmp_path.write_text(json.dumps(document, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    tmp_path.replace(output)
    logger.info("Wrote %d menu(s) from %s to %s", len(menus), provider.url, output)
    return menus


__all__ = ["sync_catalog"]
