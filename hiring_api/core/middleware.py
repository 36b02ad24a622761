"""HTTP middleware: CORS and per-request access logging."""

import logging
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from hiring_api.core.config import settings

logger = logging.getLogger("hiring_api.http")

REQUEST_ID_HEADER = "X-Request-Id"
RESPONSE_TIME_HEADER = "X-Response-Time-Ms"


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Tag each response with a request id and its handling time, then log it.

    A caller-supplied X-Request-Id is echoed back so requests can be
    correlated across services.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        started = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[RESPONSE_TIME_HEADER] = f"{elapsed_ms:.2f}"

        # Liveness checks log at DEBUG.
        level = logging.DEBUG if request.url.path == "/healthz" else logging.INFO
        logger.log(
            level,
            "%s %s -> %s in %.2fms [%s]",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request_id,
        )
        return response


def setup_middleware(app: FastAPI) -> None:
    """Install CORS, configured from settings, and access logging."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER, RESPONSE_TIME_HEADER, "Location"],
    )
    app.add_middleware(AccessLogMiddleware)
