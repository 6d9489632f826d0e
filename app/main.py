"""
Fuel Price Finder API - FastAPI Application
Main application entry point
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from app.config import settings
from app.api import fuel
from app.core.exceptions import MissingQueryError
from app.sources.registry import FUEL_SOURCES, get_sources

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler
    Runs on startup and shutdown
    """
    # Startup
    logger.info("Starting Fuel Price Finder API...")
    logger.info(
        f"{len(get_sources())} of {len(FUEL_SOURCES)} fuel sources enabled; "
        f"fetch timeout {settings.FETCH_TIMEOUT_MS}ms"
    )
    if settings.ENABLE_FEED_CACHE:
        logger.info(f"Feed cache enabled (ttl {settings.FEED_CACHE_TTL_SECONDS}s)")
    else:
        logger.info("Feed cache disabled")

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down Fuel Price Finder API...")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Search UK retailer fuel prices by town or street",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.exception_handler(MissingQueryError)
async def missing_query_handler(request: Request, exc: MissingQueryError):
    """Reject searches without a usable `q` parameter"""
    logger.info(f"Rejected search without query: {request.url}")
    return JSONResponse(
        status_code=400,
        content={"error": exc.message}
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle uncaught exceptions"""
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )


# Include routers
app.include_router(fuel.router, prefix=settings.API_PREFIX)


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint - API information"""
    return {
        "name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "running",
        "docs": "/docs",
        "search": f"{settings.API_PREFIX}/fuel?q=<town>"
    }


# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "fuel-price-finder"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
