from __future__ import annotations

import logging
from typing import Optional

from ghstache.constants import DEFAULT_BEGIN, DEFAULT_END
from ghstache.core import (
    ContextProtocol,
    Data,
    DataType,
    DelimiterSet,
    Lambda,
    Lambda2,
    Partial,
    RendererProtocol,
    TemplateEngineProtocol,
    TemplateError,
)
from ghstache.logging.helpers import get_logger
from ghstache.processing.text_ops import html_escape
from ghstache.rendering.context import Context
from ghstache.rendering.template_engine import MustacheTemplateEngine
from ghstache.runtime.container import EngineBuilder, EngineConfig
from ghstache.template import EscapeHandler, Template

__version__ = '1.0.0'


def engine_factory(
    *,
    escape: Optional[EscapeHandler] = None,
    strict: bool = False,
    logger: Optional[logging.Logger] = None,
) -> MustacheTemplateEngine:
    """Factory helper that returns a configured MustacheTemplateEngine.

    Falls back to HTML escaping when no escape function is provided.
    """
    cfg = EngineConfig(escape=escape or html_escape, strict=strict, logger=logger or get_logger('templates'))
    return EngineBuilder.from_config(cfg).build()


def render(template: str, data=None, *, escape: Optional[EscapeHandler] = None) -> str:
    """Parse and render *template* in one call; invalid templates yield ""."""
    return Template(template, escape=escape).render(data)


__all__ = [
    'DEFAULT_BEGIN',
    'DEFAULT_END',
    'Context',
    'ContextProtocol',
    'Data',
    'DataType',
    'DelimiterSet',
    'EngineBuilder',
    'EngineConfig',
    'Lambda',
    'Lambda2',
    'MustacheTemplateEngine',
    'Partial',
    'RendererProtocol',
    'Template',
    'TemplateEngineProtocol',
    'TemplateError',
    'engine_factory',
    'html_escape',
    'render',
]
