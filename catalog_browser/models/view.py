"""View state request/response models"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from .product import ProductSearchResponse


class CreateViewRequest(BaseModel):
    """Request to open a view"""
    kind: Optional[str] = None


class CriteriaUpdateRequest(BaseModel):
    """Partial criteria update. Only fields that are sent are applied."""
    search_text: Optional[str] = None
    category: Optional[str] = None
    bracket: Optional[str] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    available_only: Optional[bool] = None
    sort_key: Optional[str] = None
    sort_direction: Optional[str] = None
    search_fields: Optional[list[str]] = Field(default=None, min_length=1)


class ViewResponse(BaseModel):
    """View state API response"""
    view_id: str
    kind: str
    criteria: dict
    created_at: datetime
    updated_at: datetime
    message: Optional[str] = None


class ViewResultsResponse(ProductSearchResponse):
    """Query results for a view, with the criteria that produced them"""
    view_id: str
    criteria: dict
