"""
Gestionnaires d'erreurs de l'application web.

Toute erreur devient une enveloppe JSON {"success": false, "error": {code, message}}.
Le statut HTTP d'une AppError vient de son kind.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.errors import AppError, ErrorKind, status_for
from src.utils.constants import BAD_REQUEST, INTERNAL_SERVER_ERROR


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": {"code": code, "message": message}},
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Traduit une AppError en réponse JSON."""
    if exc.kind in (ErrorKind.NOT_FOUND, ErrorKind.VALIDATION):
        logger.warning(
            "Erreur client",
            method=request.method,
            path=request.url.path,
            code=exc.code,
            error=exc.message,
            **exc.context,
        )
        return _error_response(exc.status_code, exc.code, exc.message)

    logger.error(
        "Erreur serveur",
        method=request.method,
        path=request.url.path,
        code=exc.code,
        error=exc.message,
        **exc.context,
    )
    if exc.kind is ErrorKind.STORAGE_UNAVAILABLE:
        return _error_response(exc.status_code, exc.code, exc.message)
    # Les échecs de sources de notes ne doivent jamais atteindre le client
    internal = AppError.internal(INTERNAL_SERVER_ERROR)
    return _error_response(internal.status_code, internal.code, internal.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Paramètres invalides détectés par FastAPI."""
    logger.warning(
        "Requête invalide", method=request.method, path=request.url.path, errors=exc.errors()
    )
    error = AppError.validation(BAD_REQUEST)
    return _error_response(error.status_code, error.code, error.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routes inconnues et méthodes non autorisées."""
    if exc.status_code == status_for(ErrorKind.NOT_FOUND):
        logger.warning("Route introuvable", method=request.method, path=request.url.path)
        return _error_response(
            exc.status_code, "NOT_FOUND", f"Route {request.method} {request.url.path} not found"
        )
    return _error_response(exc.status_code, "HTTP_ERROR", str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Dernier recours : erreur inattendue."""
    logger.opt(exception=exc).error(
        "Erreur inattendue", method=request.method, path=request.url.path
    )
    error = AppError.internal(INTERNAL_SERVER_ERROR)
    return _error_response(error.status_code, error.code, error.message)


def register_error_handlers(app: FastAPI) -> None:
    """Installe les gestionnaires d'erreurs sur l'application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
