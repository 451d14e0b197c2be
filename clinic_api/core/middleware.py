"""
HTTP middleware shared by every route: access logging, per-client rate
limiting and security response headers.
"""
import logging
import math
import time
import uuid
from collections import deque
from threading import Lock

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from clinic_api.core.config import AppConfig
from clinic_api.core.errors import GENERIC_SERVER_ERROR, error_body

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("clinic_api.access")

RATE_LIMIT_MESSAGE = "Too many requests, please try again later."

SECURITY_HEADERS = {
    "Content-Security-Policy": (
        "default-src 'self'; "
        "base-uri 'self'; "
        "font-src 'self' https: data:; "
        "form-action 'self'; "
        "frame-ancestors 'self'; "
        "img-src 'self' data:; "
        "object-src 'none'; "
        "script-src 'self'; "
        "script-src-attr 'none'; "
        "style-src 'self' https: 'unsafe-inline'; "
        "upgrade-insecure-requests"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}


def client_address(request: Request) -> str:
    return request.client.host if request.client else "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Writes one access line per request and tags the response with
    ``X-Request-ID`` and ``X-Process-Time``. Unhandled errors become the
    generic 500 here so the outer middleware still decorates the response.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s (request %s)", request.method, request.url.path, request_id)
            response = JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=error_body(GENERIC_SERVER_ERROR),
            )

        process_time = time.perf_counter() - start_time
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        response.headers["X-Request-ID"] = request_id
        access_logger.info(
            '%s "%s %s" %s %.4fs',
            client_address(request),
            request.method,
            request.url.path,
            response.status_code,
            process_time,
        )
        return response


class RateLimiter:
    """Sliding-window request counter keyed by client address."""

    def __init__(self, max_requests: int, window_seconds: int, clock=time.monotonic):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._hits: dict[str, deque[float]] = {}
        self._lock = Lock()
        self._last_prune = clock()

    def hit(self, key: str) -> float | None:
        """Record a request for ``key``.

        Returns ``None`` when the request is allowed, otherwise the number of
        seconds until the oldest request in the window expires.
        """
        now = self._clock()
        cutoff = now - self.window_seconds

        with self._lock:
            hits = self._hits.setdefault(key, deque())
            while hits and hits[0] <= cutoff:
                hits.popleft()

            if len(hits) >= self.max_requests:
                return hits[0] + self.window_seconds - now

            hits.append(now)
            if now - self._last_prune >= self.window_seconds:
                self._prune(cutoff)
                self._last_prune = now
            return None

    def _prune(self, cutoff: float) -> None:
        stale = [key for key, hits in self._hits.items() if not hits or hits[-1] <= cutoff]
        for key in stale:
            del self._hits[key]


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, max_requests: int = 100, window_seconds: int = 15 * 60):
        super().__init__(app)
        self.limiter = RateLimiter(max_requests, window_seconds)

    async def dispatch(self, request: Request, call_next):
        client_ip = client_address(request)
        retry_after = self.limiter.hit(client_ip)
        if retry_after is not None:
            logger.warning("Rate limit exceeded for %s", client_ip)
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content=error_body(RATE_LIMIT_MESSAGE),
                headers={"Retry-After": str(max(1, math.ceil(retry_after)))},
            )

        return await call_next(request)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response


def setup_middlewares(app: FastAPI, config: AppConfig) -> None:
    # The last middleware added runs first.
    app.add_middleware(
        RateLimitMiddleware,
        max_requests=config.rate_limit_max,
        window_seconds=config.rate_limit_window_seconds,
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )
