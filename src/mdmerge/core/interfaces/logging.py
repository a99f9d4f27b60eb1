from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Logging calls the collector, merger and estimator rely on.

    A plain `logging.Logger` satisfies it; tests may pass any recorder with
    the same methods.
    """

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def info(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...

    def isEnabledFor(self, level: int) -> bool: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Hands out loggers under the mdmerge namespace."""

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        ...
