"""Rotas do canal Ko-fi."""

from api.routes.kofi.webhook import router

__all__ = ["router"]
