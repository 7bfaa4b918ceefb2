"""Request-Scoped Logging - log records carry the id of the request that emitted them.

Invariants:
    - request_id_var holds the current request's id, "" outside a request
    - Every record passing RequestContextFilter has a request_id attribute,
      so DAL and session logs correlate with the middleware's access line
    - JSON lines: timestamp, level, logger, message, then known store fields
    - Text lines: same fields in one human-readable line, request id in brackets

Design Decisions:
    - A ContextVar instead of threading the id through every call: the
      middleware sets it once and each asyncio task spawned for the request
      inherits it
    - A logging.Filter on the handler injects the id, so loggers stay plain
      logging.getLogger(__name__)
"""

import json
import logging
from contextvars import ContextVar
from datetime import datetime, timezone

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

STORE_FIELDS = (
    "request_id", "method", "path", "status_code", "duration_ms",
    "collection", "operation", "document_id", "matched", "error_code",
    "attempt",
)

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s - %(message)s"


class RequestContextFilter(logging.Filter):
    """Stamp records with the current request id unless one was passed explicitly."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = request_id_var.get() or "-"
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        line = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        line.update(
            (field, record.__dict__[field])
            for field in STORE_FIELDS
            if record.__dict__.get(field) not in (None, "", "-")
        )
        if record.exc_info:
            line["exception"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Attach a request-aware stream handler to the root logger and return it."""
    handler = logging.StreamHandler()
    handler.addFilter(RequestContextFilter())
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
