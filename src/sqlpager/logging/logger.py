"""JSON log output for sqlpager.

Records are rendered as one JSON object per line. Structured ``extra``
fields (``db.statement``, ``query.parameter_count``, ``error_code``, ...)
become top-level keys, and the active OpenTelemetry span is attached so
query logs can be joined with traces.
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from opentelemetry import trace

# Attributes every LogRecord carries; anything else arrived through ``extra``
_STANDARD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"asctime", "message"}


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _span_ids() -> Dict[str, str]:
    context = trace.get_current_span().get_span_context()
    if not context.is_valid:
        return {}
    return {
        "trace_id": trace.format_trace_id(context.trace_id),
        "span_id": trace.format_span_id(context.span_id),
    }


class JsonFormatter(logging.Formatter):
    """Render a record and its structured extras as a JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, value) for key, value in vars(record).items()
            if key not in _STANDARD_ATTRIBUTES
        )
        payload.update(_span_ids())

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def setup_logging(level: Optional[str] = None) -> None:
    """Send JSON logs to stdout through ``logging.config.dictConfig``.

    The deployment environment from settings is attached to every record.

    Args:
        level: Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to ``get_settings().log_level``.
    """
    from sqlpager.logging.filters import set_logging_context
    from sqlpager.settings import get_settings

    settings = get_settings()
    level = (level or settings.log_level).upper()
    set_logging_context(environment=settings.environment)

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"sqlpager_json": {"()": JsonFormatter}},
        "filters": {"sqlpager_context": {"()": "sqlpager.logging.filters.ContextFilter"}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "sqlpager_json",
                "filters": ["sqlpager_context"],
                "stream": "ext://sys.stdout",
            }
        },
        "root": {"level": level, "handlers": ["console"]},
    })
