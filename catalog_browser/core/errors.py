"""Catalog browser exceptions"""


class CatalogError(Exception):
    """Base class for catalog browser errors"""


class InvalidCriteria(CatalogError, ValueError):
    """Raised when a criteria update is malformed. The prior value is kept."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class CatalogValidationError(CatalogError):
    """Raised when the supplied product collection fails the load-time checks"""
