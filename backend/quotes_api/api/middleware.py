"""Request Logging Middleware: one structured log line per HTTP request.

Invariants:
    - Every request logged with client IP, method, path, status and duration
    - Behind a proxy (trust_proxy), the first X-Forwarded-For hop is the client IP

Design Decisions:
    - Function-based @app.middleware("http") over BaseHTTPMiddleware subclass:
      no state, nothing to configure beyond trust_proxy
"""

import logging
import time

from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


def client_ip(request: Request, trust_proxy: bool) -> str | None:
    """Resolve the caller's IP, honouring X-Forwarded-For when trusted."""
    if trust_proxy:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None


def register_request_logging(app: FastAPI, trust_proxy: bool) -> None:
    """Attach the request logging middleware to the app."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        ip = client_ip(request, trust_proxy)
        logger.info(
            f"Request from IP: {ip}",
            extra={
                "client_ip": ip,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response
