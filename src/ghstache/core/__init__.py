from __future__ import annotations

"""Public surface for ghstache.core.

This module exposes the value model, the parse-tree types and the protocol
types from a stable import location:

    from ghstache.core import Data, DelimiterSet, ContextProtocol, ...
"""

# Protocols re-export
from ghstache.core.interfaces import (
    ContextProtocol,
    EscaperProtocol,
    RendererProtocol,
    TemplateEngineProtocol,
)

# Value model and parse tree
from ghstache.core.data import Data, DataType, Lambda, Lambda2, Partial
from ghstache.core.errors import TemplateError
from ghstache.core.models import Component, DelimiterSet, Tag, TagType, WalkControl

__all__ = [
    # Protocols
    "ContextProtocol",
    "EscaperProtocol",
    "RendererProtocol",
    "TemplateEngineProtocol",
    # Value model
    "Data",
    "DataType",
    "Lambda",
    "Lambda2",
    "Partial",
    # Parse tree
    "Component",
    "DelimiterSet",
    "Tag",
    "TagType",
    "WalkControl",
    "TemplateError",
]
