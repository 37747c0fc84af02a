from .classifier import ValueClassifierProtocol
from .engine import ConcatEngineProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .options import OptionResolverProtocol
from .templating import TemplateEngineProtocol

__all__ = [
    'ValueClassifierProtocol',
    'ConcatEngineProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'OptionResolverProtocol',
    'TemplateEngineProtocol',
]
