"""Main FastAPI application."""
import logging
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from stockdash.config import settings
from stockdash.logger import setup_logger
from stockdash.routes.analysis import router as analysis_router
from stockdash.routes.dashboard import router as dashboard_router
from stockdash.routes.products import router as products_router
from stockdash.state import InventoryState

logger = logging.getLogger(__name__)


def create_app(state: Optional[InventoryState] = None) -> FastAPI:
    """
    Build the application with a fresh (seeded) inventory.
    
    Args:
        state: Optional pre-built state, e.g. with a test analyst
        
    Returns:
        Configured FastAPI application
    """
    setup_logger("stockdash")
    
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description="Inventory dashboard with AI-assisted stock analysis"
    )
    
    # The inventory lives for the lifetime of the process only
    app.state.inventory = state or InventoryState()
    logger.info("Inventory loaded with %d products", len(app.state.inventory.store))
    
    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    # Include routers
    app.include_router(products_router)
    app.include_router(dashboard_router)
    app.include_router(analysis_router)
    
    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": settings.project_name,
            "version": settings.api_version,
            "docs": "/docs"
        }
    
    @app.api_route("/health", methods=["GET", "HEAD"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}
    
    return app


app = create_app()
