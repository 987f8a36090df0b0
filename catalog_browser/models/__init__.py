# Catalog Browser Models

from .product import Product, StockStatus, StatusCounts, ProductSearchResponse, CatalogStats
from .criteria import (
    CriteriaModel,
    PriceRange,
    PriceBracket,
    PRICE_BRACKETS,
    SortKey,
    SortDirection,
    SearchField,
    ALL_CATEGORIES,
    CATALOG_SEARCH_FIELDS,
    DASHBOARD_SEARCH_FIELDS,
)

__all__ = [
    "Product",
    "StockStatus",
    "StatusCounts",
    "ProductSearchResponse",
    "CatalogStats",
    "CriteriaModel",
    "PriceRange",
    "PriceBracket",
    "PRICE_BRACKETS",
    "SortKey",
    "SortDirection",
    "SearchField",
    "ALL_CATEGORIES",
    "CATALOG_SEARCH_FIELDS",
    "DASHBOARD_SEARCH_FIELDS",
]
