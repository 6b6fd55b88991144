"""Respostas JSON padronizadas ({"success": ..., "error": ...})."""

from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def error_response(status_code: int, message: str) -> JSONResponse:
    """Resposta de falha com código HTTP distinto por classe de erro."""
    return JSONResponse(
        content={"success": False, "error": message},
        status_code=status_code,
    )


def success_response(**fields: Any) -> JSONResponse:
    """Resposta 200 com `success: true` e campos extras."""
    return JSONResponse(content={"success": True, **fields}, status_code=200)
