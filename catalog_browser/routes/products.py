"""Product API routes for the catalog browser"""

import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Query, Depends

from ..models.product import Product, ProductSearchResponse, StatusCounts, CatalogStats
from ..models.criteria import CriteriaModel, PriceBracket, PRICE_BRACKETS
from ..database.products import product_db, ProductDatabase
from ..core.config import settings
from ..core.errors import InvalidCriteria
from ..core.views import ViewKind
from ..engine import summarize, count_by_status, related_to, find_by_id, list_categories

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["Products"])


def get_product_db() -> ProductDatabase:
    """Product source for the request"""
    return product_db


def invalid_criteria(e: InvalidCriteria) -> HTTPException:
    logger.warning(f"Rejected criteria: {e}")
    return HTTPException(status_code=422, detail=str(e))


@router.get("", response_model=ProductSearchResponse)
async def search_products(
    query: str = Query("", description="Search text"),
    category: Optional[str] = Query(None, description="Exact category, or All"),
    bracket: Optional[str] = Query(None, description="Named price bracket"),
    min_price: Optional[int] = Query(None, description="Minimum price, inclusive"),
    max_price: Optional[int] = Query(None, description="Maximum price, inclusive"),
    available_only: bool = Query(False, description="Hide out-of-stock items"),
    sort: str = Query("name", description="Sort key: name, price or stock"),
    direction: str = Query("asc", description="Sort direction: asc or desc"),
    view: Optional[ViewKind] = Query(None, description="Which view's search fields to match"),
    fields: Optional[list[str]] = Query(None, description="Override the searched fields"),
    db: ProductDatabase = Depends(get_product_db),
):
    """
    Query the catalog.

    Builds a one-off criteria from the query string and returns the visible
    products along with whole-catalog status counts.
    """
    kind = view or ViewKind(settings.default_view_kind)
    criteria = CriteriaModel(search_fields=kind.search_fields)
    try:
        criteria.set_search_text(query)
        criteria.set_category(category)
        if bracket is not None:
            criteria.set_price_bracket(bracket)
        if min_price is not None or max_price is not None:
            criteria.set_price_range(min_price, max_price)
        criteria.set_available_only(available_only)
        criteria.set_sort(sort, direction)
        if fields:
            criteria.set_search_fields(fields)
    except InvalidCriteria as e:
        raise invalid_criteria(e)

    summary = summarize(db.list(), criteria)
    return ProductSearchResponse(
        products=summary.products,
        shown=summary.shown,
        total=summary.total,
        counts=StatusCounts.from_mapping(summary.counts),
    )


@router.get("/categories", response_model=list[str])
async def get_categories(db: ProductDatabase = Depends(get_product_db)):
    """List catalog categories in display order"""
    return list_categories(db.list())


@router.get("/price-brackets")
async def get_price_brackets():
    """List the named price brackets"""
    return [_bracket_to_dict(b) for b in PRICE_BRACKETS.values()]


@router.get("/stats", response_model=CatalogStats)
async def get_stats(db: ProductDatabase = Depends(get_product_db)):
    """Whole-catalog summary for the dashboard cards"""
    products = db.list()
    return CatalogStats(
        total=len(products),
        counts=StatusCounts.from_mapping(count_by_status(products)),
        categories=list_categories(products),
    )


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: int,
    db: ProductDatabase = Depends(get_product_db),
):
    """Get a product by ID"""
    product = find_by_id(db.list(), product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.get("/{product_id}/related", response_model=list[Product])
async def get_related_products(
    product_id: int,
    limit: Optional[int] = Query(None, ge=0, le=50, description="Max related items"),
    db: ProductDatabase = Depends(get_product_db),
):
    """Other products from the same category"""
    products = db.list()
    product = find_by_id(products, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return related_to(product, products, settings.related_limit if limit is None else limit)


def _bracket_to_dict(bracket: PriceBracket) -> dict:
    return {
        "key": bracket.key,
        "label": bracket.label,
        "min_price": bracket.range.min_price,
        "max_price": bracket.range.max_price,
    }
