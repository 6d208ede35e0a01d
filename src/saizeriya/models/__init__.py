"""Pydantic models defining the catalog data contracts."""

from saizeriya.models.menu import Menu, MenuFilter, RandomMenus

__all__ = ["Menu", "MenuFilter", "RandomMenus"]
