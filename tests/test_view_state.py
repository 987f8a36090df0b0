"""Tests for per-view criteria state."""

from datetime import datetime, timedelta

from catalog_browser.core.views import ViewStateManager, ViewKind
from catalog_browser.models.criteria import (
    SortKey,
    SortDirection,
    CATALOG_SEARCH_FIELDS,
    DASHBOARD_SEARCH_FIELDS,
)


def test_view_kind_selects_search_fields():
    manager = ViewStateManager()
    assert manager.create_view(ViewKind.CATALOG).criteria.search_fields == CATALOG_SEARCH_FIELDS
    assert manager.create_view("dashboard").criteria.search_fields == DASHBOARD_SEARCH_FIELDS


def test_views_hold_independent_criteria():
    manager = ViewStateManager()
    first = manager.create_view()
    second = manager.create_view()

    first.criteria.set_sort("price")
    first.criteria.set_search_text("tea")

    assert second.criteria.sort_key is SortKey.NAME
    assert second.criteria.sort_direction is SortDirection.ASC
    assert second.criteria.search_text == ""


def test_get_or_create_view():
    manager = ViewStateManager()
    view = manager.create_view()
    assert manager.get_or_create_view(view.view_id) is view
    other = manager.get_or_create_view("missing", ViewKind.DASHBOARD)
    assert other.view_id != view.view_id
    assert other.kind is ViewKind.DASHBOARD


def test_close_view():
    manager = ViewStateManager()
    view = manager.create_view()
    assert manager.close_view(view.view_id) is True
    assert manager.get_view(view.view_id) is None
    assert manager.close_view(view.view_id) is False


def test_cleanup_stale_views():
    manager = ViewStateManager()
    stale = manager.create_view()
    fresh = manager.create_view()
    stale.updated_at = datetime.utcnow() - timedelta(hours=30)

    assert manager.cleanup_stale_views(max_age_hours=24) == 1
    assert manager.get_view(stale.view_id) is None
    assert manager.get_view(fresh.view_id) is fresh


def test_touch_updates_timestamp():
    manager = ViewStateManager()
    view = manager.create_view()
    view.updated_at = datetime.utcnow() - timedelta(hours=1)
    view.touch()
    assert datetime.utcnow() - view.updated_at < timedelta(minutes=1)
