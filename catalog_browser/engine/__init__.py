# Catalog query engine

from .query import (
    query,
    count_by_status,
    related_to,
    find_by_id,
    list_categories,
    summarize,
    collation_key,
    QuerySummary,
)

__all__ = [
    "query",
    "count_by_status",
    "related_to",
    "find_by_id",
    "list_categories",
    "summarize",
    "collation_key",
    "QuerySummary",
]
