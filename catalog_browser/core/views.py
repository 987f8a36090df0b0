"""Per-view criteria state"""

import uuid
from datetime import datetime
from typing import Optional
from dataclasses import dataclass, field
from enum import Enum

from ..models.criteria import CriteriaModel, CATALOG_SEARCH_FIELDS, DASHBOARD_SEARCH_FIELDS


class ViewKind(str, Enum):
    """Which page a view belongs to. Decides the fields a search matches."""
    CATALOG = "catalog"
    DASHBOARD = "dashboard"

    @property
    def search_fields(self):
        if self is ViewKind.DASHBOARD:
            return DASHBOARD_SEARCH_FIELDS
        return CATALOG_SEARCH_FIELDS


@dataclass
class ViewState:
    """One open browsing view and the criteria it owns"""
    view_id: str
    kind: ViewKind
    created_at: datetime
    updated_at: datetime
    criteria: CriteriaModel = field(default_factory=CriteriaModel)

    def touch(self) -> None:
        """Mark the view as recently used"""
        self.updated_at = datetime.utcnow()


class ViewStateManager:
    """Manages open views. Each view holds an independent CriteriaModel."""

    def __init__(self):
        self.views: dict[str, ViewState] = {}

    def create_view(self, kind: ViewKind = ViewKind.CATALOG) -> ViewState:
        """Open a new view with default criteria"""
        kind = ViewKind(kind)
        now = datetime.utcnow()
        view = ViewState(
            view_id=str(uuid.uuid4()),
            kind=kind,
            created_at=now,
            updated_at=now,
            criteria=CriteriaModel(search_fields=kind.search_fields),
        )
        self.views[view.view_id] = view
        return view

    def get_view(self, view_id: str) -> Optional[ViewState]:
        return self.views.get(view_id)

    def get_or_create_view(
        self,
        view_id: Optional[str] = None,
        kind: ViewKind = ViewKind.CATALOG,
    ) -> ViewState:
        """Get existing view or open a new one"""
        if view_id and view_id in self.views:
            return self.views[view_id]
        return self.create_view(kind)

    def close_view(self, view_id: str) -> bool:
        """Discard a view and its criteria"""
        if view_id in self.views:
            del self.views[view_id]
            return True
        return False

    def cleanup_stale_views(self, max_age_hours: int = 24) -> int:
        """Remove views idle for longer than max_age_hours"""
        now = datetime.utcnow()
        stale = [
            vid for vid, view in self.views.items()
            if (now - view.updated_at).total_seconds() > max_age_hours * 3600
        ]
        for vid in stale:
            del self.views[vid]
        return len(stale)


# Singleton instance
view_manager = ViewStateManager()
