# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from catalog_browser.main import app
from catalog_browser.models.product import Product, StockStatus
from catalog_browser.database.products import ProductDatabase
from catalog_browser.routes.products import get_product_db
from catalog_browser.core.views import view_manager


def make_product(id: int, name: str, category: str, price: int, stock: int, status: StockStatus, **extra) -> Product:
    """Build a product with filler text fields."""
    fields = {
        "description": f"{name} description",
        "distributor": "Default Distributor",
        "batch_number": f"B-{id:03d}",
        "image": f"/static/images/{id}.jpg",
    }
    fields.update(extra)
    return Product(id=id, name=name, category=category, price=price, stock=stock, status=status, **fields)


@pytest.fixture
def cola() -> Product:
    return make_product(1, "Cola", "Drinks", 15000, 5, StockStatus.IN_STOCK)


@pytest.fixture
def chips() -> Product:
    return make_product(2, "Chips", "Snacks", 20000, 0, StockStatus.OUT_OF_STOCK)


@pytest.fixture
def two_products(cola, chips) -> list[Product]:
    """The two-item collection used by the basic scenarios."""
    return [cola, chips]


@pytest.fixture
def catalog() -> list[Product]:
    """A larger collection with shared categories, tied prices and varied distributors."""
    return [
        make_product(1, "Orange Juice", "Drinks", 30000, 40, StockStatus.IN_STOCK, distributor="Fresh Co"),
        make_product(2, "Potato Chips", "Snacks", 20000, 0, StockStatus.OUT_OF_STOCK, distributor="Crunch Ltd"),
        make_product(3, "Green Tea", "Drinks", 12000, 8, StockStatus.LOW_STOCK, distributor="Leaf & Co"),
        make_product(4, "Éclair Biscuits", "Snacks", 20000, 25, StockStatus.IN_STOCK, distributor="Bakery One"),
        make_product(5, "apple Cider", "Drinks", 45000, 3, StockStatus.LOW_STOCK, distributor="Orchard Farm",
                     description="Sparkling cider from fresh apples"),
        make_product(6, "Rice Crackers", "snacks and drinks", 20000, 60, StockStatus.IN_STOCK, distributor="Crunch Ltd"),
        make_product(7, "Cheddar Cheese", "Dairy", 65000, 0, StockStatus.OUT_OF_STOCK, distributor="Dairy Best"),
        make_product(8, "Banana Chips", "Snacks", 35000, 25, StockStatus.IN_STOCK, distributor="Tropic Foods"),
    ]


@pytest.fixture
def catalog_db(catalog) -> ProductDatabase:
    return ProductDatabase(catalog)


@pytest.fixture
def client(catalog_db):
    """Test client serving the larger collection."""
    app.dependency_overrides[get_product_db] = lambda: catalog_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def clear_views():
    """Start every test with no open views."""
    view_manager.views.clear()
    yield
    view_manager.views.clear()
