"""Rotas do resumo periódico."""

from api.routes.summary.endpoint import router

__all__ = ["router"]
