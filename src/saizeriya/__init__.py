"""
Saizeriya menu catalog toolkit.

The package loads the restaurant menu catalog, filters it by category, genre,
price, or name, and composes random menu combinations within a budget.
"""

from saizeriya.client import Saizeriya
from saizeriya.errors import CatalogLoadError, SaizeriyaError
from saizeriya.models import Menu, MenuFilter, RandomMenus

__all__ = [
    "__version__",
    "CatalogLoadError",
    "Menu",
    "MenuFilter",
    "RandomMenus",
    "Saizeriya",
    "SaizeriyaError",
]

__version__ = "0.1.0"
