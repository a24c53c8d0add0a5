"""Equilíbrio Vida & Trabalho API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map EquilibrioError → {"erro": ...} JSON responses
    - CORS configured from settings (not hardcoded)
    - In-memory stores initialized on startup via lifespan context manager
    - OpenAPI schema and Swagger UI served by FastAPI at /openapi.json and /docs

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py: keeps this module to wiring only
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.infrastructure.observability import setup_logging
from app.infrastructure.stores import init_stores
from app.config import get_settings
from app.api.routes import activities, health, participation

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_stores()
    logger.info("Equilibrio API started")
    yield
    logger.info("Equilibrio API shutting down")


settings = get_settings()
app = FastAPI(
    title=settings.app_title,
    version=settings.app_version,
    description="API para atividades de bem-estar e produtividade",
    lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(activities.router)
app.include_router(participation.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
