"""Search, filter and sort options for item lists."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from grocer.models import GroceryItem


class SortOption(str, Enum):
    NONE = "none"
    NAME_ASC = "name_asc"
    NAME_DESC = "name_desc"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"


class BoughtFilter(str, Enum):
    ALL = "all"
    BOUGHT = "bought"
    NOT_BOUGHT = "not_bought"


class ItemQuery(BaseModel):
    """Criteria applied to a category view before display."""

    search: Optional[str] = Field(default=None, description="Substring matched against item names.")
    unit_search: Optional[str] = Field(default=None, description="Substring matched against units.")
    bought: BoughtFilter = Field(default=BoughtFilter.ALL)
    sort: SortOption = Field(default=SortOption.NONE)

    model_config = ConfigDict(frozen=True)


def _matches(item: GroceryItem, query: ItemQuery) -> bool:
    if query.unit_search and query.unit_search.lower() not in item.unit.lower():
        return False
    if query.search and query.search.casefold() not in item.name.casefold():
        return False
    if query.bought is BoughtFilter.BOUGHT:
        return item.is_bought
    if query.bought is BoughtFilter.NOT_BOUGHT:
        return not item.is_bought
    return True


def _sorted(items: List[GroceryItem], sort: SortOption) -> List[GroceryItem]:
    if sort is SortOption.NAME_ASC:
        return sorted(items, key=lambda item: item.name.lower())
    if sort is SortOption.NAME_DESC:
        return sorted(items, key=lambda item: item.name.lower(), reverse=True)
    if sort is SortOption.PRICE_ASC:
        return sorted(items, key=lambda item: item.total_price)
    if sort is SortOption.PRICE_DESC:
        return sorted(items, key=lambda item: item.total_price, reverse=True)
    return items


def query_items(items: Iterable[GroceryItem], query: Optional[ItemQuery] = None) -> List[GroceryItem]:
    """Filter ``items`` by ``query`` and order them; input order is kept on ties."""

    query = query or ItemQuery()
    matched = [item for item in items if _matches(item, query)]
    return _sorted(matched, query.sort)


__all__ = ["SortOption", "BoughtFilter", "ItemQuery", "query_items"]
