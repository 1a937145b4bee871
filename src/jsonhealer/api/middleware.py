"""Middleware: response timing, security headers, request body limits."""

from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

logger = logging.getLogger("jsonhealer.api")

DOCUMENT_PATHS = ("/diagnose", "/repair", "/validate")
_MB = 1024 * 1024


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Report handler time in ``X-Request-Duration-Ms``."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers["X-Request-Duration-Ms"] = f"{elapsed_ms:.1f}"
        logger.debug(
            "%s %s -> %d in %.1f ms",
            request.method, request.url.path, response.status_code, elapsed_ms,
        )
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Stamp a fixed set of security headers on every response.

    The API serves JSON only, so a single strict CSP covers all paths.
    """

    HEADERS = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
        "Content-Security-Policy": "default-src 'self'; frame-ancestors 'none'",
    }

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        response.headers.update(self.HEADERS)
        return response


class RequestBodyLimitMiddleware(BaseHTTPMiddleware):
    """Reject oversized request bodies with 413 before they reach a handler.

    Document endpoints (``/diagnose``, ``/repair``, ``/validate``) get
    *document_limit_mb*; every other path gets *default_limit_mb*.

    A declared Content-Length above the limit is refused immediately.  A
    missing or unparsable header is not trusted: for POST/PUT/PATCH the body
    stream is counted and reading stops at the first chunk past the limit.
    The bytes read are stored on ``request._body`` so the handler can still
    parse them.
    """

    def __init__(
        self,
        app: ASGIApp,
        document_limit_mb: int = 5,
        default_limit_mb: int = 1,
    ) -> None:
        super().__init__(app)
        self.document_limit_mb = document_limit_mb
        self.default_limit_mb = default_limit_mb

    def _limit_mb(self, path: str) -> int:
        if path.endswith(DOCUMENT_PATHS):
            return self.document_limit_mb
        return self.default_limit_mb

    @staticmethod
    def _reject(limit_mb: int) -> JSONResponse:
        return JSONResponse(
            status_code=413,
            content={"detail": f"Request body too large (max {limit_mb} MB)"},
        )

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        limit_mb = self._limit_mb(request.url.path)
        limit = limit_mb * _MB

        declared = request.headers.get("content-length", "")
        if declared.isdigit() and int(declared) > limit:
            logger.warning("rejected %s: declared body of %s bytes", request.url.path, declared)
            return self._reject(limit_mb)

        if request.method not in ("POST", "PUT", "PATCH"):
            return await call_next(request)

        received = bytearray()
        async for chunk in request.stream():
            received.extend(chunk)
            if len(received) > limit:
                logger.warning("rejected %s: body exceeds %d MB", request.url.path, limit_mb)
                return self._reject(limit_mb)
        request._body = bytes(received)  # noqa: SLF001

        return await call_next(request)
