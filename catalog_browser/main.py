"""
Catalog Browser Application

Serves a single merchant's in-memory product catalog with search,
category and price filters, sorting and product detail lookups.
"""

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from .core.config import settings
from .database.products import product_db
from .engine import count_by_status
from .routes import products_router, views_router

# Load environment variables
load_dotenv(os.path.join(os.path.dirname(__file__), "..", "config", ".env"))

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"{settings.app_name} starting up...")
    counts = count_by_status(product_db.list())
    logger.info(
        "Catalog: "
        + ", ".join(f"{status.value}={count}" for status, count in counts.items())
    )
    yield
    logger.info(f"{settings.app_name} shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Search, filter and browse the merchant product catalog",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(products_router)
app.include_router(views_router)


@app.get("/")
async def home():
    """API index"""
    return {
        "message": "Catalog Browser API",
        "docs": "/docs",
        "endpoints": {
            "products": "/api/products",
            "categories": "/api/products/categories",
            "price_brackets": "/api/products/price-brackets",
            "stats": "/api/products/stats",
            "views": "/api/views",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "catalog-browser"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog_browser.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
