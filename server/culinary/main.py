"""Culinary Haven recipe service - FastAPI application."""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from culinary import __version__
from culinary.api import favorites, recipes, shopping_list
from culinary.config import Settings, get_settings
from culinary.models.schemas import ServerStatus
from culinary.services.catalog import get_catalog
from culinary.services.shopping import get_shopping_lists


def configure_logging(settings: Settings) -> None:
    """Structured logs through stdlib logging; pretty in debug, JSON otherwise."""
    logging.basicConfig(format="%(message)s", level=settings.log_level)

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if settings.debug
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging(get_settings())
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load the catalog before serving the first request."""
    catalog = get_catalog()
    logger.info("Recipe service starting", version=__version__, recipes=len(catalog))
    yield
    logger.info("Recipe service stopped")


app = FastAPI(
    title="Culinary Haven",
    description="Recipe listing, autocomplete suggestions and shopping lists",
    version=__version__,
    lifespan=lifespan,
)

# The terminal client and any browser front end call from other origins.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

    logger.info(
        "HTTP request",
        method=request.method,
        path=request.url.path,
        query=str(request.url.query) or None,
        status_code=response.status_code,
        duration_ms=elapsed_ms,
    )
    response.headers["X-Response-Time-Ms"] = str(elapsed_ms)
    return response


@app.exception_handler(Exception)
async def unhandled_exception(request: Request, exc: Exception):
    """Log and hide unexpected failures behind a plain 500."""
    logger.error("Unhandled exception", path=request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/health", tags=["Health"])
async def health() -> dict:
    """Liveness probe."""
    return {"status": "healthy"}


@app.get("/api/v1/status", response_model=ServerStatus, tags=["Status"])
async def get_status() -> ServerStatus:
    return ServerStatus(
        online=True,
        version=__version__,
        total_recipes=len(get_catalog()),
        shopping_lists=len(get_shopping_lists()),
    )


for router in (recipes.router, shopping_list.router, favorites.router):
    app.include_router(router, prefix="/api/v1")
