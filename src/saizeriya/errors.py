"""Exception types raised by the catalog layer."""

from __future__ import annotations


class SaizeriyaError(RuntimeError):
    """Base class for package errors."""


class CatalogLoadError(SaizeriyaError):
    """Raised when catalog data cannot be retrieved or parsed."""


__all__ = ["CatalogLoadError", "SaizeriyaError"]
