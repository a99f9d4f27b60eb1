from .collector import CollectorProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .readers import ReaderProtocol
from .tokens import TokenEstimatorProtocol

__all__ = [
    'CollectorProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'ReaderProtocol',
    'TokenEstimatorProtocol',
]
