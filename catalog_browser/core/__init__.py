# Core modules
# View state lives in .views and is imported from there, since it depends on the models package.

from .config import settings, get_settings, Settings
from .errors import CatalogError, InvalidCriteria, CatalogValidationError

__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "CatalogError",
    "InvalidCriteria",
    "CatalogValidationError",
]
