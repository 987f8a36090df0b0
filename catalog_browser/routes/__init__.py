# API Routes

from .products import router as products_router
from .views import router as views_router

__all__ = ["products_router", "views_router"]
