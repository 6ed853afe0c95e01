from .context import ContextProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .render import RendererProtocol
from .templating import TemplateEngineProtocol
from .text import EscaperProtocol

__all__ = [
    'ContextProtocol',
    'EscaperProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'RendererProtocol',
    'TemplateEngineProtocol',
]
