"""Query criteria held by a catalog view"""

from dataclasses import dataclass, field
from typing import Optional, Union
from enum import Enum

from ..core.errors import InvalidCriteria

# Category label the UI uses for "no category filter"
ALL_CATEGORIES = "All"


class SortKey(str, Enum):
    NAME = "name"
    PRICE = "price"
    STOCK = "stock"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class SearchField(str, Enum):
    """Product text fields a search can match against"""
    NAME = "name"
    DESCRIPTION = "description"
    CATEGORY = "category"
    DISTRIBUTOR = "distributor"


# The product table matches names and distributors; the catalog grid
# matches names, descriptions and categories.
DASHBOARD_SEARCH_FIELDS = (SearchField.NAME, SearchField.DISTRIBUTOR)
CATALOG_SEARCH_FIELDS = (SearchField.NAME, SearchField.DESCRIPTION, SearchField.CATEGORY)


@dataclass(frozen=True)
class PriceRange:
    """Inclusive price bounds. None means unbounded on that side."""
    min_price: Optional[int] = None
    max_price: Optional[int] = None

    @property
    def is_unbounded(self) -> bool:
        return self.min_price is None and self.max_price is None

    def normalized(self) -> "PriceRange":
        """Swap inverted bounds"""
        if (
            self.min_price is not None
            and self.max_price is not None
            and self.min_price > self.max_price
        ):
            return PriceRange(self.max_price, self.min_price)
        return self

    def contains(self, price: int) -> bool:
        if self.min_price is not None and price < self.min_price:
            return False
        if self.max_price is not None and price > self.max_price:
            return False
        return True


@dataclass(frozen=True)
class PriceBracket:
    """Named price preset offered as a filter chip"""
    key: str
    label: str
    range: PriceRange


PRICE_BRACKETS: dict[str, PriceBracket] = {
    b.key: b
    for b in (
        PriceBracket("all", "All Prices", PriceRange()),
        PriceBracket("under-35k", "Under 35k", PriceRange(0, 35000)),
        PriceBracket("35k-50k", "35k – 50k", PriceRange(35000, 50000)),
        PriceBracket("50k-plus", "50k+", PriceRange(50000, None)),
    )
}


def _check_bound(name: str, value) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidCriteria("price_range", f"{name} must be a number")
    if value < 0:
        raise InvalidCriteria("price_range", f"{name} must be non-negative")
    return value


@dataclass
class CriteriaModel:
    """
    The user's current query for one view.

    Holds no reference into the product collection. Setters validate their
    input and raise InvalidCriteria without touching the current value.
    """
    search_text: str = ""
    category: Optional[str] = None
    price_range: PriceRange = field(default_factory=PriceRange)
    available_only: bool = False
    sort_key: SortKey = SortKey.NAME
    sort_direction: SortDirection = SortDirection.ASC
    search_fields: tuple[SearchField, ...] = DASHBOARD_SEARCH_FIELDS

    def set_search_text(self, text: str) -> None:
        if not isinstance(text, str):
            raise InvalidCriteria("search_text", "must be a string")
        self.search_text = text

    def set_category(self, category: Optional[str]) -> None:
        """Select a category. None or "All" clears the filter."""
        if category is not None and not isinstance(category, str):
            raise InvalidCriteria("category", "must be a string")
        self.category = None if category in (None, ALL_CATEGORIES) else category

    def set_price_range(
        self,
        min_price: Optional[int] = None,
        max_price: Optional[int] = None,
    ) -> None:
        min_price = _check_bound("min_price", min_price)
        max_price = _check_bound("max_price", max_price)
        if min_price is not None and max_price is not None and min_price > max_price:
            raise InvalidCriteria("price_range", "min_price must not exceed max_price")
        self.price_range = PriceRange(min_price, max_price)

    def set_price_bracket(self, key: str) -> None:
        bracket = PRICE_BRACKETS.get(key)
        if bracket is None:
            raise InvalidCriteria("price_range", f"unknown price bracket '{key}'")
        self.price_range = bracket.range

    def set_available_only(self, available_only: bool) -> None:
        if not isinstance(available_only, bool):
            raise InvalidCriteria("available_only", "must be a boolean")
        self.available_only = available_only

    def set_sort(
        self,
        key: Union[SortKey, str],
        direction: Optional[Union[SortDirection, str]] = None,
    ) -> None:
        """
        Select the sort column.

        With no explicit direction, picking the current column flips the
        direction and picking a different column resets it to ascending.
        """
        try:
            key = SortKey(key)
        except ValueError:
            raise InvalidCriteria("sort_key", f"unknown sort key '{key}'") from None

        if direction is not None:
            try:
                direction = SortDirection(direction)
            except ValueError:
                raise InvalidCriteria(
                    "sort_direction", f"unknown sort direction '{direction}'"
                ) from None
        elif key == self.sort_key:
            direction = self.sort_direction.toggled()
        else:
            direction = SortDirection.ASC

        self.sort_key = key
        self.sort_direction = direction

    def set_search_fields(self, fields) -> None:
        if not isinstance(fields, (list, tuple, set, frozenset)):
            raise InvalidCriteria("search_fields", "must be a list of field names")
        try:
            resolved = tuple(SearchField(f) for f in fields)
        except ValueError as e:
            raise InvalidCriteria("search_fields", str(e)) from None
        if not resolved:
            raise InvalidCriteria("search_fields", "at least one field is required")
        self.search_fields = resolved

    def reset(self) -> None:
        """Restore default filters and sort, keeping the search field set"""
        self.search_text = ""
        self.category = None
        self.price_range = PriceRange()
        self.available_only = False
        self.sort_key = SortKey.NAME
        self.sort_direction = SortDirection.ASC

    def to_dict(self) -> dict:
        return {
            "search_text": self.search_text,
            "category": self.category,
            "min_price": self.price_range.min_price,
            "max_price": self.price_range.max_price,
            "available_only": self.available_only,
            "sort_key": self.sort_key.value,
            "sort_direction": self.sort_direction.value,
            "search_fields": [f.value for f in self.search_fields],
        }
