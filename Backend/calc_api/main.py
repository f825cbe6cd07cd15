"""Entry point for the FastAPI calculator backend."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .middleware.access_log import AccessLogMiddleware
from .routers import calc, health
from .services.calculators.engine import CalculatorEngine
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def with_prefix(settings: Settings, path: str) -> str:
    prefix = settings.api_prefix.rstrip("/")
    if not prefix:
        return path
    return f"{prefix}{path}"


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.effective_log_level)
        logger.info("Starting %s in %s mode", settings.project_name, settings.environment)
        yield
        logger.info("Shutting down %s", settings.project_name)

    app = FastAPI(
        title=settings.project_name,
        lifespan=lifespan,
        debug=settings.debug,
        docs_url=with_prefix(settings, "/docs"),
        redoc_url=with_prefix(settings, "/redoc"),
        openapi_url=with_prefix(settings, "/openapi.json"),
    )
    app.state.settings = settings
    app.state.calculator_engine = CalculatorEngine()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if settings.enable_access_log:
        app.add_middleware(AccessLogMiddleware)

    api_router = APIRouter()
    api_router.include_router(health.router)
    api_router.include_router(calc.router)
    app.include_router(api_router, prefix=settings.api_prefix.rstrip("/"))

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"message": settings.project_name, "api": settings.api_prefix}

    return app


app = create_app()
