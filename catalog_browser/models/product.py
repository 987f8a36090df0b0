"""Product models for the catalog browser"""

from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum


class StockStatus(str, Enum):
    """Stock status bucket, stored on each product by the data source"""
    IN_STOCK = "in-stock"
    LOW_STOCK = "low-stock"
    OUT_OF_STOCK = "out-of-stock"


class Product(BaseModel):
    """Product in the catalog"""
    id: int
    name: str
    description: str
    category: str
    distributor: str
    batch_number: str
    price: int = Field(ge=0)
    stock: int = Field(ge=0)
    status: StockStatus
    image: Optional[str] = None

    class Config:
        from_attributes = True
        frozen = True


class StatusCounts(BaseModel):
    """Product tallies per stock status over the whole catalog"""
    in_stock: int = 0
    low_stock: int = 0
    out_of_stock: int = 0

    @classmethod
    def from_mapping(cls, counts: dict[StockStatus, int]) -> "StatusCounts":
        return cls(
            in_stock=counts.get(StockStatus.IN_STOCK, 0),
            low_stock=counts.get(StockStatus.LOW_STOCK, 0),
            out_of_stock=counts.get(StockStatus.OUT_OF_STOCK, 0),
        )


class ProductSearchResponse(BaseModel):
    """Response from a catalog query"""
    products: list[Product]
    shown: int
    total: int
    counts: StatusCounts


class CatalogStats(BaseModel):
    """Summary statistics shown above the catalog"""
    total: int
    counts: StatusCounts
    categories: list[str]
