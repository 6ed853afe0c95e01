from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from ghstache.constants import ENV_DELIMITERS, ENV_STRICT
from ghstache.core.models import DelimiterSet
from ghstache.logging.helpers import get_logger
from ghstache.parsing.tokenizer import TagTokenizer
from ghstache.processing.text_ops import html_escape
from ghstache.rendering.template_engine import MustacheTemplateEngine
from ghstache.template import EscapeHandler

_TRUTHY = {'1', 'true', 'yes', 'on'}


@dataclass(frozen=True)
class EngineConfig:
    """Immutable configuration blob used to seed the EngineBuilder."""
    escape: EscapeHandler = html_escape
    delimiters: DelimiterSet = field(default_factory=DelimiterSet)
    strict: bool = False
    logger: Optional[logging.Logger] = None

    @classmethod
    def from_env(cls, *, logger: Optional[logging.Logger] = None) -> EngineConfig:
        """Read GHSTACHE_STRICT and GHSTACHE_DELIMITERS from the environment.

        GHSTACHE_DELIMITERS holds a directive body such as ``"<% %>"`` and
        is validated with the same rules as an in-template ``{{=<% %>=}}``.
        """
        strict = (os.getenv(ENV_STRICT) or '').strip().lower() in _TRUTHY
        raw = (os.getenv(ENV_DELIMITERS) or '').strip()
        delimiters = DelimiterSet()
        if raw:
            parsed = TagTokenizer.parse_set_delimiter(f'={raw}=')
            if parsed is None:
                raise ValueError(f'{ENV_DELIMITERS} expects "<open> <close>" (got {raw!r})')
            delimiters = parsed
        return cls(delimiters=delimiters, strict=strict, logger=logger)


@dataclass
class EngineBuilder:
    """Composable builder that wires an EngineConfig into a template engine."""
    escape: EscapeHandler = html_escape
    delimiters: DelimiterSet = field(default_factory=DelimiterSet)
    strict: bool = False
    logger: Optional[logging.Logger] = None

    @classmethod
    def from_config(cls, cfg: EngineConfig) -> EngineBuilder:
        """Build a new EngineBuilder from a single EngineConfig."""
        return cls(
            escape=cfg.escape,
            delimiters=cfg.delimiters,
            strict=cfg.strict,
            logger=cfg.logger,
        )

    def build(self) -> MustacheTemplateEngine:
        """Materialize a MustacheTemplateEngine with the current settings."""
        return MustacheTemplateEngine(
            escape=self.escape,
            delimiters=self.delimiters,
            strict=self.strict,
            logger=self.logger or get_logger('templates'),
        )
