"""HTTP middleware: fault envelope, access logging and response hardening headers."""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from clinic_api.api.exception_handlers import global_exception_handler

logger = logging.getLogger("clinic_api.access")

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-DNS-Prefetch-Control": "off",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "Cross-Origin-Resource-Policy": "same-origin",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response


class AccessLogMiddleware(BaseHTTPMiddleware):
    """One line per request: client, method, path, status and duration."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        client = request.client.host if request.client else "-"
        logger.info(
            '%s "%s %s" %d %.2fms "%s"',
            client,
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            request.headers.get("user-agent", "-"),
        )
        return response


class InternalFaultMiddleware(BaseHTTPMiddleware):
    """Turns unhandled faults into the 500 envelope inside the middleware stack.

    Responses produced here still pass through the header and CORS
    middleware, unlike Starlette's outermost server-error handler.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return await global_exception_handler(request, exc)
