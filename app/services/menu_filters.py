"""Filtering and ordering of a restaurant's menu list"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional

from app.models.menu import MenuItem

SORT_OPTIONS = ("recent", "price_low", "price_high", "most_popular", "highest_rated")

POPULARITY_RANK = {"High": 3, "Medium": 2, "Low": 1}


@dataclass
class MenuFilter:
    name: Optional[str] = None
    category: Optional[str] = None
    availability: Optional[str] = None  # "available" | "not_available"
    dish_tag: Optional[str] = None
    min_price_cents: Optional[int] = None
    max_price_cents: Optional[int] = None

    def matches(self, item: MenuItem) -> bool:
        if self.name and self.name.lower() not in (item.name or "").lower():
            return False

        if self.category and self.category.lower() not in (item.category or "").lower():
            return False

        if self.availability == "available" and not item.is_available:
            return False
        if self.availability == "not_available" and item.is_available:
            return False

        if self.dish_tag:
            needle = self.dish_tag.lower()
            if not any(needle in tag.lower() for tag in item.dish_tags or []):
                return False

        if self.min_price_cents is not None and item.price_cents < self.min_price_cents:
            return False
        if self.max_price_cents is not None and item.price_cents > self.max_price_cents:
            return False

        return True


EPOCH = datetime(1970, 1, 1)


def _age_key(item: MenuItem) -> float:
    touched = item.updated_at or item.created_at or EPOCH
    return -(touched - EPOCH).total_seconds()


def sort_key(sort: str):
    """Key for `sorted`: available items first, then the chosen order"""
    def key(item: MenuItem):
        unavailable = 0 if item.is_available else 1
        if sort == "price_low":
            return (unavailable, item.price_cents)
        if sort == "price_high":
            return (unavailable, -item.price_cents)
        if sort == "most_popular":
            return (unavailable, -POPULARITY_RANK.get(item.popularity, 1))
        if sort == "highest_rated":
            return (unavailable, -(item.rating or 0))
        return (unavailable, _age_key(item))
    return key


def filter_and_sort(
    items: Iterable[MenuItem],
    menu_filter: MenuFilter,
    sort: str = "recent",
) -> List[MenuItem]:
    if sort not in SORT_OPTIONS:
        raise ValueError(f"Unknown sort option: {sort}")
    return sorted((item for item in items if menu_filter.matches(item)), key=sort_key(sort))
