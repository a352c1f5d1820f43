"""Game Catalog Service - FastAPI Application."""
import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.database import init_db
from app.catalog.errors import NotFoundError, StorageError
from app.api import games_router

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Game Catalog Service")
    if settings.use_memory_store:
        logger.info("Using in-memory game store")
    else:
        await init_db()

    yield

    # Shutdown
    logger.info("Shutting down Game Catalog Service")


# Create application
app = FastAPI(
    title="Game Catalog Service",
    description="Game catalog with search, price-range and review statistics",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict this
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Health check (no auth required)
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "timestamp": datetime.utcnow().isoformat(), "service": "game-catalog"}


# Root info
@app.get("/")
async def root():
    """API information."""
    return {
        "service": "Game Catalog Service",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }


# Include routers
app.include_router(games_router, prefix="/api")


# Error handlers
@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    """Unknown game id on an operation that requires one."""
    logger.info(f"Not found: {exc}")
    return JSONResponse(
        status_code=404,
        content={"detail": str(exc)},
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    """Failures of the game store."""
    logger.error(f"{exc}: {exc.__cause__}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"detail": f"Error accessing game storage: {exc}"},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report a missing required query parameter as 400, other validation errors as 422."""
    for error in exc.errors():
        location = error.get("loc", ())
        if error.get("type") == "missing" and len(location) == 2 and location[0] == "query":
            return JSONResponse(
                status_code=400,
                content={"detail": f"The required parameter {location[1]} is missing."},
            )

    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
