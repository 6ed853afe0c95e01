from __future__ import annotations

import logging
import os
from typing import Optional, TextIO

from ghstache.constants import ENV_JSON_LOGS, ENV_LOG_LEVEL
from ghstache.logging.helpers import get_logger, setup_base_logger

_TRUTHY = {"1", "true", "yes", "on"}


class DefaultLoggerFactory:
    """Hands out 'ghstache.*' loggers, configuring the base logger lazily.

    The handler is attached on the first ``get_logger`` call, so building a
    factory (for instance from the environment at import time) has no side
    effects until something actually logs.
    """

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self.json_logs = json_logs
        self.level = level
        self.stream = stream
        self._base: Optional[logging.Logger] = None

    @classmethod
    def from_env(cls, *, stream: Optional[TextIO] = None) -> "DefaultLoggerFactory":
        """Read GHSTACHE_JSON_LOGS and GHSTACHE_LOG_LEVEL (a level name such as 'debug')."""
        json_logs = (os.getenv(ENV_JSON_LOGS) or "").strip().lower() in _TRUTHY
        level_name = (os.getenv(ENV_LOG_LEVEL) or "INFO").strip().upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"{ENV_LOG_LEVEL} must name a logging level (got {level_name!r})")
        return cls(json_logs=json_logs, level=level, stream=stream)

    def get_logger(self, name: str) -> logging.Logger:
        if self._base is None:
            self._base = setup_base_logger(json_logs=self.json_logs, level=self.level, stream=self.stream)
        return get_logger(name)
