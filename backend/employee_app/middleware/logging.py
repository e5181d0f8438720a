"""
Employee Service: Request Logging Middleware
=============================================

What:  One access log line per HTTP request.
How:   Measures wall time around call_next and logs method, path, status,
       duration, request ID and client IP through the `employee_app.access`
       logger. Structured fields are also attached via `extra` for JSON
       formatters.

Level by status:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Probe paths (/health, /ready) are polled every few seconds by the
orchestrator and are not logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from employee_app.middleware.request_id import request_id_var

logger = logging.getLogger("employee_app.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs structured information about each HTTP request and response."""

    PROBE_PATHS = {"/health", "/ready"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in self.PROBE_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
