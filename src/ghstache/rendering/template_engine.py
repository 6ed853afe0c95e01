"""
template_engine – Concrete TemplateEngineProtocol implementation for ghstache.

This module wraps :class:`~ghstache.template.Template` behind the one-call
``render(template, variables)`` surface so callers that only need "text in,
text out" can depend on the Protocol instead of the Template class.
"""

import logging
from typing import Any, Mapping, Optional

from ghstache.core.interfaces.templating import TemplateEngineProtocol
from ghstache.core.models import DelimiterSet
from ghstache.logging.helpers import get_logger
from ghstache.parsing.parser import TemplateParser
from ghstache.template import EscapeHandler, Template


class MustacheTemplateEngine(TemplateEngineProtocol):
    """Mustache engine with a fixed escape function and starting delimiters.

    Failure handling depends on *strict*:
      • strict=False → the error is logged and "" is returned
      • strict=True  → :class:`~ghstache.core.errors.TemplateError` is raised
    """

    def __init__(
        self,
        *,
        escape: Optional[EscapeHandler] = None,
        delimiters: Optional[DelimiterSet] = None,
        strict: bool = False,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._escape = escape
        self._delims = delimiters or DelimiterSet()
        self._strict = strict
        self._log = logger or get_logger('templates')
        self._parser = TemplateParser(logger=self._log)

    @property
    def strict(self) -> bool:
        return self._strict

    def compile(self, template: str) -> Template:
        """Parse *template* with this engine's settings."""
        return Template(
            template,
            delimiters=self._delims,
            escape=self._escape,
            logger=self._log,
            parser=self._parser,
        )

    def render(self, template: str, variables: Mapping[str, Any]) -> str:  # type: ignore[override]
        """Render *template* against *variables* (plain values or Data)."""
        tpl = self.compile(template)
        out = tpl.render(variables)
        if tpl.is_valid:
            return out
        if self._strict:
            tpl.raise_for_error()
        self._log.error('template rendering failed: %s', tpl.error_message)
        return ''
