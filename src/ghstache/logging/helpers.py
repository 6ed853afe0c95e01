from __future__ import annotations

"""Logger naming, one-shot base configuration and render tracing for ghstache.

This module provides:
    - JsonLogFormatter: one JSON object per record, stable key set.
    - setup_base_logger: attach a single handler to the 'ghstache' logger.
    - get_logger: map short names ('parse', 'render') onto 'ghstache.*'.
    - trace_render: partial/lambda expansion traces gated by GHSTACHE_TRACE_RENDER.

Design notes:
    - Importing ghstache never installs handlers; applications opt in through
      setup_base_logger or DefaultLoggerFactory.
    - Trace context travels on the record as ``record.context`` so the JSON
      formatter can emit it as a nested object.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

from ghstache.constants import ENV_TRACE_RENDER, ENV_VERSION
from ghstache.core.interfaces.logging import LoggerLikeProtocol

BASE_LOGGER = "ghstache"
PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


class JsonLogFormatter(logging.Formatter):
    """Render a LogRecord as compact JSON.

    Keys:
        - ts: UTC timestamp, millisecond precision, 'Z' suffix.
        - level / logger / msg: record level name, logger name, final message.
        - version: ghstache.__version__, looked up once per formatter.
        - ctx: trace context, only when the record carries a non-empty one.
        - exc: formatted traceback, only when the record has exc_info.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = _package_version()

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "ts": stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=repr)


def _package_version() -> str:
    # Deferred: ghstache/__init__ imports this module.
    try:
        from ghstache import __version__
    except ImportError:
        return os.getenv(ENV_VERSION, "unknown")
    return str(__version__)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Attach one stream handler to the 'ghstache' logger and return it.

    Later calls only adjust the level; the first call's handler and format
    stay in place.

    Args:
        json_logs: Use JsonLogFormatter instead of the plain one-line format.
        level: Level for the base logger.
        stream: Output stream, stderr when omitted.
    """
    base = logging.getLogger(BASE_LOGGER)
    base.setLevel(level)
    if base.handlers:
        return base

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonLogFormatter() if json_logs else logging.Formatter(PLAIN_FORMAT))
    base.addHandler(handler)
    base.propagate = False
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return *name* under the 'ghstache' namespace (the base logger if empty)."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def is_trace_render_enabled() -> bool:
    return os.getenv(ENV_TRACE_RENDER) == "1"


def trace_render(logger: LoggerLikeProtocol, message: str, **ctx: Any) -> None:
    """Log a debug trace for a partial or lambda expansion.

    Nothing is emitted unless GHSTACHE_TRACE_RENDER=1 and *logger* is
    enabled for DEBUG.
    """
    if not is_trace_render_enabled() or not logger.isEnabledFor(logging.DEBUG):
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
