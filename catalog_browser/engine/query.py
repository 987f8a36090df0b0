"""
Catalog query engine.

Pure functions over an already-loaded product collection: filtering and
sorting for the visible list, stock status tallies, and the lookups used by
the product detail page. Nothing here mutates its inputs or keeps state.
"""

import logging
import unicodedata
from dataclasses import dataclass
from typing import Optional, Sequence

from ..models.product import Product, StockStatus
from ..models.criteria import CriteriaModel, SearchField, SortKey, SortDirection

logger = logging.getLogger(__name__)

# Letters with no canonical decomposition that should still collate as their base letter
_COLLATION_FOLDS = str.maketrans({"đ": "d", "Đ": "D", "ø": "o", "Ø": "O", "ł": "l", "Ł": "L"})


def collation_key(text: str) -> tuple[str, str, str]:
    """
    Locale-style ordering key for product names.

    Compares on the accent- and case-folded text first, then on the
    case-folded text, then on the swapped-case string so lowercase sorts
    before uppercase and the order is total.
    """
    base = unicodedata.normalize("NFKD", text.translate(_COLLATION_FOLDS))
    base = "".join(ch for ch in base if not unicodedata.combining(ch))
    return base.casefold(), text.casefold(), text.swapcase()


def _matches_text(product: Product, needle: str, fields: Sequence[SearchField]) -> bool:
    if not needle:
        return True
    return any(needle in getattr(product, f.value).lower() for f in fields)


def _sort_value(product: Product, key: SortKey):
    if key == SortKey.PRICE:
        return product.price
    if key == SortKey.STOCK:
        return product.stock
    return collation_key(product.name)


def query(products: Sequence[Product], criteria: CriteriaModel) -> list[Product]:
    """
    Filter and sort the catalog for display.

    A product is kept when it matches the search text on any configured
    field, sits in the selected category, falls inside the price range and,
    with available_only set, is not out of stock. The sort is stable in both
    directions, so ties keep their catalog order.
    """
    needle = criteria.search_text.lower()
    price_range = criteria.price_range.normalized()

    results = [
        p for p in products
        if _matches_text(p, needle, criteria.search_fields)
        and (criteria.category is None or p.category == criteria.category)
        and price_range.contains(p.price)
        and not (criteria.available_only and p.status == StockStatus.OUT_OF_STOCK)
    ]

    results = sorted(
        results,
        key=lambda p: _sort_value(p, criteria.sort_key),
        reverse=criteria.sort_direction == SortDirection.DESC,
    )

    logger.debug(
        f"Query matched {len(results)}/{len(products)} products "
        f"(sort={criteria.sort_key.value} {criteria.sort_direction.value})"
    )
    return results


def count_by_status(products: Sequence[Product]) -> dict[StockStatus, int]:
    """Tally products per stock status. Every status is present, zero or not."""
    counts = {status: 0 for status in StockStatus}
    for product in products:
        counts[product.status] += 1
    return counts


def related_to(product: Product, products: Sequence[Product], limit: int = 4) -> list[Product]:
    """Other products in the same category, in catalog order"""
    if limit <= 0:
        return []
    related = []
    for p in products:
        if p.category == product.category and p.id != product.id:
            related.append(p)
            if len(related) == limit:
                break
    return related


def find_by_id(products: Sequence[Product], product_id: int) -> Optional[Product]:
    return next((p for p in products if p.id == product_id), None)


def list_categories(products: Sequence[Product]) -> list[str]:
    """Distinct categories in order of first appearance"""
    return list(dict.fromkeys(p.category for p in products))


@dataclass
class QuerySummary:
    """Visible products plus the figures shown alongside them"""
    products: list[Product]
    shown: int
    total: int
    counts: dict[StockStatus, int]


def summarize(products: Sequence[Product], criteria: CriteriaModel) -> QuerySummary:
    results = query(products, criteria)
    return QuerySummary(
        products=results,
        shown=len(results),
        total=len(products),
        counts=count_by_status(products),
    )
