"""
template – Parsed Mustache template and its render entry points.

A :class:`Template` is parsed once at construction. Parse and render
failures never raise: the first error message is latched, ``is_valid``
turns false, and further renders produce no output. Call
:meth:`Template.raise_for_error` to turn a latched error into a
:class:`~ghstache.core.errors.TemplateError`.

Entry points:
  • render(data)            → str
  • render_to(data, sink)   → sink (callable or object with ``write``)
  • render_context(ctx)     → str, for a caller-supplied ContextProtocol
"""

import logging
from typing import Any, Callable, List, Optional, TypeVar, Union

from ghstache.core.data import Data
from ghstache.core.errors import TemplateError
from ghstache.core.interfaces.context import ContextProtocol
from ghstache.core.interfaces.text import EscaperProtocol
from ghstache.core.models import Component, DelimiterSet
from ghstache.logging.helpers import get_logger
from ghstache.parsing.parser import TemplateParser
from ghstache.processing.text_ops import html_escape
from ghstache.rendering.context import Context
from ghstache.rendering.renderer import ComponentRenderer, RenderHandler

Sink = TypeVar('Sink')
EscapeHandler = Union[EscaperProtocol, Callable[[str], str]]


class Template:
    """A parsed template bound to an escape function and starting delimiters."""

    def __init__(
        self,
        text: str,
        *,
        delimiters: Optional[DelimiterSet] = None,
        escape: Optional[EscapeHandler] = None,
        logger: Optional[logging.Logger] = None,
        parser: Optional[TemplateParser] = None,
    ) -> None:
        self._delimiters = delimiters or DelimiterSet()
        self._escape: EscapeHandler = escape or html_escape
        self._log = logger or get_logger('template')
        self._parser = parser or TemplateParser()
        result = self._parser.parse(text, self._delimiters)
        self._root: Component = result.root
        self._error: Optional[str] = result.error

    # ------------------------------------------------------------------ #
    # State
    # ------------------------------------------------------------------ #
    @property
    def is_valid(self) -> bool:
        return self._error is None

    @property
    def error_message(self) -> str:
        return self._error or ''

    @property
    def root(self) -> Component:
        return self._root

    @property
    def delimiters(self) -> DelimiterSet:
        return self._delimiters

    @property
    def escape(self) -> EscapeHandler:
        return self._escape

    def set_custom_escape(self, escape: EscapeHandler) -> None:
        self._escape = escape

    def fail(self, message: str) -> None:
        """Latch *message* unless an earlier error is already recorded."""
        if self._error is None:
            self._error = message
            self._log.debug('render failed: %s', message)

    def raise_for_error(self) -> None:
        if self._error is not None:
            raise TemplateError(self._error)

    def spawn(self, text: str, delimiters: DelimiterSet) -> 'Template':
        """Parse *text* as an independent sub-template sharing our escape."""
        return Template(
            text,
            delimiters=delimiters,
            escape=self._escape,
            logger=self._log,
            parser=self._parser,
        )

    # ------------------------------------------------------------------ #
    # Rendering
    # ------------------------------------------------------------------ #
    def render(self, data: Any = None) -> str:
        parts: List[str] = []
        self.render_to(data, parts.append)
        return ''.join(parts)

    def render_to(self, data: Any, sink: Sink) -> Sink:
        """Render against *data*, writing each piece of output to *sink*.

        *sink* is either a callable taking text or any object with a
        ``write(text)`` method (an open file, ``io.StringIO``, ...).
        """
        handler: RenderHandler = sink.write if hasattr(sink, 'write') else sink  # type: ignore[assignment]
        if not self.is_valid:
            return sink
        self.render_into(handler, Context(_as_data(data)))
        return sink

    def render_context(self, ctx: ContextProtocol) -> str:
        parts: List[str] = []
        self.render_into(parts.append, ctx)
        return ''.join(parts)

    def render_into(self, handler: RenderHandler, ctx: ContextProtocol) -> None:
        if not self.is_valid:
            return
        ComponentRenderer(self, handler).render(ctx, self._delimiters)

    def __repr__(self) -> str:
        state = 'valid' if self.is_valid else f'invalid: {self._error}'
        return f'<Template {state}>'


def _as_data(data: Any) -> Data:
    if data is None:
        return Data()
    return data if isinstance(data, Data) else Data(data)
