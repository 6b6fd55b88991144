"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.kofi import router as kofi_router
from api.routes.summary import router as summary_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Health checks na raiz
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(kofi_router, prefix="/api/kofi", tags=["kofi"])
    api_router.include_router(summary_router, prefix="/api/summary", tags=["summary"])

    return api_router
