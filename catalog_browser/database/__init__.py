# Database modules

from .products import product_db, ProductDatabase, ProductSource, validate_catalog

__all__ = [
    "product_db",
    "ProductDatabase",
    "ProductSource",
    "validate_catalog",
]
