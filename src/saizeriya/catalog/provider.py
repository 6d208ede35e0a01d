"""Catalog providers returning the full menu list."""

from __future__ import annotations

import asyncio
import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any, List, Optional, Protocol

import httpx
from pydantic import TypeAdapter, ValidationError

from saizeriya.config import Settings
from saizeriya.errors import CatalogLoadError
from saizeriya.models.menu import Menu

logger = logging.getLogger(__name__)

BUNDLED_CATALOG = "menus.json"

_MENU_LIST = TypeAdapter(List[Menu])


class CatalogProvider(Protocol):
    """Source of the complete, ordered menu catalog."""

    async def load(self) -> List[Menu]:
        ...


def parse_catalog(payload: Any) -> List[Menu]:
    """Validate a decoded catalog document.

    Accepts either ``{"menus": [...]}`` or a bare list of records.
    """
    records = payload.get("menus") if isinstance(payload, dict) else payload
    if not isinstance(records, list):
        raise CatalogLoadError("Catalog document has no 'menus' list")
    try:
        return _MENU_LIST.validate_python(records)
    except ValidationError as exc:
        raise CatalogLoadError(f"Invalid catalog records: {exc}") from exc


def _decode(raw: str, origin: str) -> List[Menu]:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(f"Catalog at {origin} is not valid JSON: {exc}") from exc
    return parse_catalog(payload)


class FileCatalogProvider:
    """Read the catalog from a JSON file on disk."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    async def load(self) -> List[Menu]:
        return await asyncio.to_thread(self._read)

    def _read(self) -> List[Menu]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CatalogLoadError(f"Unable to read catalog {self.path}: {exc}") from exc
        return _decode(raw, str(self.path))


class BundledCatalogProvider:
    """Read the catalog snapshot shipped inside the package."""

    async def load(self) -> List[Menu]:
        return await asyncio.to_thread(self._read)

    def _read(self) -> List[Menu]:
        resource = resources.files("saizeriya.data").joinpath(BUNDLED_CATALOG)
        try:
            raw = resource.read_text(encoding="utf-8")
        except OSError as exc:
            raise CatalogLoadError(f"Bundled catalog is unavailable: {exc}") from exc
        return _decode(raw, BUNDLED_CATALOG)


class RemoteCatalogProvider:
    """Fetch the catalog JSON over HTTP. One request per load, no retries."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.url = url
        self._timeout = timeout
        self._client = client

    async def load(self) -> List[Menu]:
        return parse_catalog(await self.fetch_document())

    async def fetch_document(self) -> Any:
        """Return the decoded upstream document without validating records."""

        try:
            if self._client is not None:
                response = await self._client.get(self.url)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(self.url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("Catalog request to %s failed: %s", self.url, exc)
            raise CatalogLoadError(f"Failed to fetch catalog from {self.url}: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise CatalogLoadError(f"Catalog at {self.url} is not valid JSON: {exc}") from exc


def provider_from_settings(settings: Settings) -> CatalogProvider:
    """Build the provider selected by ``settings.catalog_source``."""

    source = (settings.catalog_source or "bundled").lower()
    if source == "remote":
        return RemoteCatalogProvider(settings.catalog_url, timeout=settings.http_timeout)
    if source == "file":
        if settings.catalog_path is None:
            raise ValueError("catalog_path must be set when catalog_source is 'file'")
        return FileCatalogProvider(settings.catalog_path)
    if source == "bundled":
        return BundledCatalogProvider()
    raise ValueError(f"Unknown catalog source: {settings.catalog_source!r}")


__all__ = [
    "BundledCatalogProvider",
    "CatalogProvider",
    "FileCatalogProvider",
    "RemoteCatalogProvider",
    "parse_catalog",
    "provider_from_settings",
]
