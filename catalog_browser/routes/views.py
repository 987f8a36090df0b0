"""View state API routes for the catalog browser"""

import logging
from dataclasses import replace
from fastapi import APIRouter, HTTPException, Depends

from ..models.criteria import CriteriaModel
from ..models.product import StatusCounts
from ..models.view import (
    CreateViewRequest,
    CriteriaUpdateRequest,
    ViewResponse,
    ViewResultsResponse,
)
from ..core.config import settings
from ..core.errors import InvalidCriteria
from ..core.views import view_manager, ViewState, ViewKind
from ..database.products import ProductDatabase
from ..engine import summarize
from .products import get_product_db, invalid_criteria

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/views", tags=["Views"])


def _view_response(view: ViewState, message=None) -> ViewResponse:
    return ViewResponse(
        view_id=view.view_id,
        kind=view.kind.value,
        criteria=view.criteria.to_dict(),
        created_at=view.created_at,
        updated_at=view.updated_at,
        message=message,
    )


def _require_view(view_id: str) -> ViewState:
    view = view_manager.get_view(view_id)
    if not view:
        raise HTTPException(status_code=404, detail="View not found")
    return view


def apply_update(criteria: CriteriaModel, update: CriteriaUpdateRequest) -> CriteriaModel:
    """
    Apply the fields present in update to a copy of criteria.

    Raises InvalidCriteria on the first bad field; the original criteria is
    left untouched either way.
    """
    changes = update.model_dump(exclude_unset=True)
    updated = replace(criteria)

    if changes.get("search_fields") is not None:
        updated.set_search_fields(changes["search_fields"])
    if "search_text" in changes:
        updated.set_search_text(changes["search_text"] or "")
    if "category" in changes:
        updated.set_category(changes["category"])
    if changes.get("bracket") is not None:
        updated.set_price_bracket(changes["bracket"])
    if "min_price" in changes or "max_price" in changes:
        updated.set_price_range(
            changes.get("min_price", updated.price_range.min_price),
            changes.get("max_price", updated.price_range.max_price),
        )
    if changes.get("available_only") is not None:
        updated.set_available_only(changes["available_only"])
    if changes.get("sort_key") is not None:
        updated.set_sort(changes["sort_key"], changes.get("sort_direction"))
    elif changes.get("sort_direction") is not None:
        updated.set_sort(updated.sort_key, changes["sort_direction"])

    return updated


@router.post("", response_model=ViewResponse)
async def create_view(request: CreateViewRequest):
    """Open a new view with default criteria"""
    requested = request.kind or settings.default_view_kind
    try:
        kind = ViewKind(requested)
    except ValueError:
        raise HTTPException(status_code=422, detail=f"Unknown view kind '{requested}'")

    removed = view_manager.cleanup_stale_views(settings.view_max_age_hours)
    if removed:
        logger.info(f"Closed {removed} stale views")

    view = view_manager.create_view(kind)
    logger.info(f"Opened {kind.value} view {view.view_id}")
    return _view_response(view, message="View created")


@router.get("/{view_id}", response_model=ViewResponse)
async def get_view(view_id: str):
    """Get a view's current criteria"""
    return _view_response(_require_view(view_id))


@router.patch("/{view_id}/criteria", response_model=ViewResponse)
async def update_criteria(view_id: str, request: CriteriaUpdateRequest):
    """Update some of a view's criteria"""
    view = _require_view(view_id)
    try:
        view.criteria = apply_update(view.criteria, request)
    except InvalidCriteria as e:
        raise invalid_criteria(e)
    view.touch()
    return _view_response(view)


@router.post("/{view_id}/sort/{sort_key}", response_model=ViewResponse)
async def toggle_sort(view_id: str, sort_key: str):
    """
    Click a sort column.

    The same column flips the direction, a new column sorts ascending.
    """
    view = _require_view(view_id)
    try:
        view.criteria.set_sort(sort_key)
    except InvalidCriteria as e:
        raise invalid_criteria(e)
    view.touch()
    return _view_response(view)


@router.post("/{view_id}/reset", response_model=ViewResponse)
async def reset_criteria(view_id: str):
    """Clear all filters and restore the default sort"""
    view = _require_view(view_id)
    view.criteria.reset()
    view.touch()
    return _view_response(view, message="Criteria reset")


@router.get("/{view_id}/results", response_model=ViewResultsResponse)
async def get_results(
    view_id: str,
    db: ProductDatabase = Depends(get_product_db),
):
    """Run the view's criteria against the catalog"""
    view = _require_view(view_id)
    summary = summarize(db.list(), view.criteria)
    view.touch()
    return ViewResultsResponse(
        view_id=view.view_id,
        criteria=view.criteria.to_dict(),
        products=summary.products,
        shown=summary.shown,
        total=summary.total,
        counts=StatusCounts.from_mapping(summary.counts),
    )


@router.delete("/{view_id}")
async def close_view(view_id: str):
    """Close a view and discard its criteria"""
    if not view_manager.close_view(view_id):
        raise HTTPException(status_code=404, detail="View not found")
    return {"message": "View closed"}
