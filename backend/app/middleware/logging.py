"""
Project Backend — Request Logging Middleware
==============================================

What:  One access log line per HTTP request.
How:   Measures the duration around call_next and logs method, path, status,
       duration, request ID and client IP.
When:  Runs after RequestIDMiddleware (uses request ID for correlation).

What we log vs what we DON'T log (privacy):
    ✅ Log: method, path, status, duration, IP, request ID
    ❌ Don't log: request body (user passwords, emails), query strings

Note that in-band user errors (statusCode 401/404/409 inside the body) are
logged at INFO here, since the HTTP status is 200; the user service logs
the rejection reason itself.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var
from app.routes.paths import HEALTH

logger = logging.getLogger("project.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status code and duration of each request.

    Log level follows the status class:
        5xx → ERROR, 4xx → WARNING, everything else → INFO
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # Health checks run every few seconds; logging them clutters the log
        if request.url.path == HEALTH:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        path = request.url.path

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        rid = request_id_var.get("")

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
