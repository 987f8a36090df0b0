"""In-memory product catalog"""

import logging
from typing import Iterable, Optional, Protocol

from ..core.errors import CatalogValidationError
from ..models.product import Product, StockStatus
from ..engine.query import find_by_id

logger = logging.getLogger(__name__)

# Seed catalog, prices in đồng
PRODUCTS: list[Product] = [
    Product(
        id=1,
        name="Coca-Cola Original 330ml",
        description="Classic carbonated soft drink in a slim can. Best served chilled.",
        category="Drinks",
        distributor="Coca-Cola Beverages Vietnam",
        batch_number="CC-2410-001",
        price=15000,
        stock=120,
        status=StockStatus.IN_STOCK,
        image="/static/images/coca-cola.jpg",
    ),
    Product(
        id=2,
        name="Lay's Classic Potato Chips",
        description="Thin and crispy potato chips seasoned with sea salt.",
        category="Snacks",
        distributor="PepsiCo Foods Vietnam",
        batch_number="LY-2409-114",
        price=20000,
        stock=0,
        status=StockStatus.OUT_OF_STOCK,
        image="/static/images/lays-classic.jpg",
    ),
    Product(
        id=3,
        name="Vinamilk Fresh Milk 1L",
        description="Pasteurized fresh milk, no added sugar.",
        category="Dairy",
        distributor="Vinamilk",
        batch_number="VM-2410-032",
        price=38000,
        stock=45,
        status=StockStatus.IN_STOCK,
        image="/static/images/vinamilk-fresh.jpg",
    ),
    Product(
        id=4,
        name="Hảo Hảo Shrimp Noodles (Pack of 5)",
        description="Hot and sour shrimp flavoured instant noodles.",
        category="Instant Food",
        distributor="Acecook Vietnam",
        batch_number="AC-2408-771",
        price=22000,
        stock=8,
        status=StockStatus.LOW_STOCK,
        image="/static/images/hao-hao.jpg",
    ),
    Product(
        id=5,
        name="Trung Nguyên Premium Ground Coffee 500g",
        description="Robusta and arabica blend, roasted for phin brewing.",
        category="Drinks",
        distributor="Trung Nguyên Legend",
        batch_number="TN-2407-205",
        price=89000,
        stock=30,
        status=StockStatus.IN_STOCK,
        image="/static/images/trung-nguyen.jpg",
    ),
    Product(
        id=6,
        name="Oishi Prawn Crackers",
        description="Light prawn-flavoured crackers, family size bag.",
        category="Snacks",
        distributor="Liwayway Vietnam",
        batch_number="OI-2410-019",
        price=12000,
        stock=6,
        status=StockStatus.LOW_STOCK,
        image="/static/images/oishi-prawn.jpg",
    ),
    Product(
        id=7,
        name="TH True Yogurt Strawberry (4 cups)",
        description="Set yogurt made from fresh milk with strawberry pieces.",
        category="Dairy",
        distributor="TH Group",
        batch_number="TH-2410-088",
        price=32000,
        stock=0,
        status=StockStatus.OUT_OF_STOCK,
        image="/static/images/th-yogurt.jpg",
    ),
    Product(
        id=8,
        name="Orion Choco-Pie (12 pieces)",
        description="Soft sponge cake with marshmallow filling and chocolate coating.",
        category="Snacks",
        distributor="Orion Food Vina",
        batch_number="OR-2409-340",
        price=55000,
        stock=64,
        status=StockStatus.IN_STOCK,
        image="/static/images/chocopie.jpg",
    ),
    Product(
        id=9,
        name="Aquafina Mineral Water 1.5L",
        description="Purified drinking water.",
        category="Drinks",
        distributor="Suntory PepsiCo Vietnam",
        batch_number="AQ-2410-412",
        price=10000,
        stock=200,
        status=StockStatus.IN_STOCK,
        image="/static/images/aquafina.jpg",
    ),
    Product(
        id=10,
        name="Omachi Beef Noodles (Pack of 5)",
        description="Potato-based instant noodles with stewed beef broth.",
        category="Instant Food",
        distributor="Masan Consumer",
        batch_number="MS-2408-156",
        price=42000,
        stock=12,
        status=StockStatus.LOW_STOCK,
        image="/static/images/omachi.jpg",
    ),
]


class ProductSource(Protocol):
    """Anything that can supply the catalog's product records"""

    def list(self) -> list[Product]:
        ...


def validate_catalog(products: Iterable[Product]) -> tuple[Product, ...]:
    """
    Check a product collection once at load.

    Returns the collection as an immutable tuple. Prices, stock and status
    values are already checked by the Product model.
    """
    catalog = tuple(products)
    seen: set[int] = set()
    for product in catalog:
        if product.id in seen:
            raise CatalogValidationError(f"Duplicate product id: {product.id}")
        seen.add(product.id)
    return catalog


class ProductDatabase:
    """Read-only in-memory product database"""

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self.products = validate_catalog(PRODUCTS if products is None else products)
        logger.info(f"Loaded {len(self.products)} products")

    def list(self) -> list[Product]:
        """Get all products in catalog order"""
        return list(self.products)

    def get_product(self, product_id: int) -> Optional[Product]:
        """Get a product by ID"""
        return find_by_id(self.products, product_id)


# Singleton instance
product_db = ProductDatabase()
