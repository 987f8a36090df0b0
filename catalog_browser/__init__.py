"""Catalog browser: an in-memory product catalog with search, filters and sorting."""

__version__ = "1.0.0"
