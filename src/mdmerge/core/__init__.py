from __future__ import annotations

"""Public surface for mdmerge.core.

Protocol types and the plain data carriers shared by the collector, the
merger and the token estimator:

    from mdmerge.core import MergeResult, CollectorProtocol, ...
"""

from mdmerge.core.interfaces import (
    CollectorProtocol,
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    ReaderProtocol,
    TokenEstimatorProtocol,
)
from mdmerge.core.models import MergeResult, TokenCount
from mdmerge.core.report import ExecutionReport, StageTimer

__all__ = [
    # Protocols
    "CollectorProtocol",
    "LoggerFactoryProtocol",
    "LoggerLikeProtocol",
    "ReaderProtocol",
    "TokenEstimatorProtocol",
    # Models
    "MergeResult",
    "TokenCount",
    "ExecutionReport",
    "StageTimer",
]
