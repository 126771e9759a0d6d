"""
Middleware de journalisation des requêtes HTTP.

Chaque requête reçoit un identifiant de transaction, renvoyé dans l'en-tête
X-Transaction-ID et présent dans les logs de début et de fin de requête.
"""

import time
import uuid

from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

TRANSACTION_HEADER = "X-Transaction-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Journalise méthode, chemin, statut et durée de chaque requête."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        transaction_id = f"txn_{uuid.uuid4().hex[:12]}"
        start = time.perf_counter()

        with logger.contextualize(transaction_id=transaction_id):
            logger.info(
                "Requête reçue",
                method=request.method,
                path=request.url.path,
                query=dict(request.query_params),
                user_agent=request.headers.get("user-agent"),
            )
            response = await call_next(request)
            duration_ms = round((time.perf_counter() - start) * 1000, 1)
            logger.info(
                "Réponse envoyée",
                method=request.method,
                path=request.url.path,
                status=response.status_code,
                duration_ms=duration_ms,
            )

        response.headers[TRANSACTION_HEADER] = transaction_id
        return response
