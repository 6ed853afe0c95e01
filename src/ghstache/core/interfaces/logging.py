from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """The slice of :class:`logging.Logger` that ghstache calls.

    Parse and render failures go to ``debug``, the engine facade reports
    swallowed failures through ``error``, and render tracing checks
    ``isEnabledFor`` before building its context.
    """

    def isEnabledFor(self, level: int) -> bool: ...

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Hands out configured loggers by short name ('parse', 'render', ...)."""

    def get_logger(self, name: str) -> LoggerLikeProtocol: ...
