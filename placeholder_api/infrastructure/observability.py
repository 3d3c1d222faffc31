"""Structured Logging — JSON formatter, setup and per-request access log.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (resource, resource_id, error_code, path, method, status_code,
      duration_ms) surfaced when present
    - JSON format in production, human-readable in development
    - One access line per completed request, after the response is produced

Design Decisions:
    - setup_logging called once on startup via lifespan
    - Handler tagged and reused: repeated setup (tests, reload) does not duplicate lines
    - Access log as Starlette middleware: routes stay free of logging boilerplate
"""

import json
import logging
import time
from datetime import datetime, timezone

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)

_EXTRA_KEYS = (
    "resource", "resource_id", "error_code",
    "path", "method", "status_code", "duration_ms",
)


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update({
            key: record.__dict__[key]
            for key in _EXTRA_KEYS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def _text_formatter() -> logging.Formatter:
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install (or reconfigure) the application's root handler."""
    handler = next(
        (h for h in logging.root.handlers if getattr(h, "_placeholder_api", False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler._placeholder_api = True
        logging.root.addHandler(handler)
    handler.setFormatter(JSONFormatter() if fmt == "json" else _text_formatter())
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency for every request."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response
