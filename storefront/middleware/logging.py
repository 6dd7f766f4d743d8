"""
Access logging

One record per storefront request carrying the request id, timing, and
what the metadata cascade resolved for it: the page, the locale and
whether the identity service recognised the visitor. Page routes leave
that outcome on ``request.state.page_outcome``; other requests only
report the language hint.
"""

import json
import logging
import time
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# Probes and crawler documents
QUIET_PATHS = frozenset({"/health", "/robots.txt", "/sitemap.xml"})

ACCESS_FIELDS = (
    "method",
    "path",
    "status_code",
    "duration_ms",
    "client_ip",
    "page",
    "locale",
    "session",
    "upstream_status",
)


class RequestIdFilter(logging.Filter):
    """Stamp records with the id of the request being served."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


class StructuredFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", ""),
        }
        entry.update({key: getattr(record, key) for key in ACCESS_FIELDS if hasattr(record, key)})
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def client_ip(request: Request) -> str | None:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """Access log for the storefront; echoes ``X-Request-ID`` on every response."""

    def __init__(self, app: ASGIApp, logger_name: str = "storefront.access"):
        super().__init__(app)
        self.logger = logging.getLogger(logger_name)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request_id_var.set(request_id)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            self._log_access(request, request_id, 500, started)
            raise

        response.headers["X-Request-ID"] = request_id
        self._log_access(request, request_id, response.status_code, started)
        return response

    def _log_access(self, request: Request, request_id: str, status_code: int, started: float) -> None:
        if request.url.path in QUIET_PATHS:
            return

        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        extra = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": duration_ms,
            "client_ip": client_ip(request),
        }

        outcome = getattr(request.state, "page_outcome", None)
        if outcome:
            extra.update(outcome)
            summary = f" [{outcome['page']} {outcome['locale']} {outcome['session']}]"
        else:
            hint = getattr(request.state, "locale_hint", None)
            if hint:
                extra["locale"] = hint
            summary = ""

        if status_code >= 500:
            level = logging.ERROR
        elif status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        self.logger.log(
            level, f"{request.method} {request.url.path} {status_code}{summary} ({duration_ms}ms)", extra=extra
        )


def setup_structured_logging(log_level: str = "INFO", json_format: bool = True) -> None:
    """
    Configure root logging for the storefront.

    Args:
        log_level: Level for the storefront loggers
        json_format: One JSON object per line instead of plain text
    """
    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s [%(request_id)s] %(message)s"))
    handler.addFilter(RequestIdFilter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level.upper())

    logging.getLogger("storefront").setLevel(log_level.upper())
    # Identity-service calls are logged by the session service itself
    for noisy in ("httpx", "uvicorn", "uvicorn.access"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
