"""Menu catalog data models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Menu(BaseModel):
    """Single menu record as published in the catalog."""

    id: int = Field(ge=0)
    name: str
    price: int = Field(ge=0, description="Price in yen.")
    category: str
    genre: str
    image: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)

    model_config = ConfigDict(frozen=True, extra="ignore")


class MenuFilter(BaseModel):
    """Optional criteria narrowing a list of menus.

    Every unset field means "no constraint". Contradictory bounds such as
    ``min_price > max_price`` are accepted and simply match nothing.
    """

    category: Optional[str] = Field(default=None)
    genre: Optional[str] = Field(default=None)
    min_price: Optional[int] = Field(default=None, alias="minPrice")
    max_price: Optional[int] = Field(default=None, alias="maxPrice")
    keyword: Optional[str] = Field(default=None)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def is_empty(self) -> bool:
        return all(value is None for value in self.model_dump().values())


class RandomMenus(BaseModel):
    """Random combination of menus that fits within a budget."""

    items: list[Menu] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)
    remaining: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)
