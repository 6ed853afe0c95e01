from __future__ import annotations
from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class TemplateEngineProtocol(Protocol):
    """One-call template rendering: template text and variables in, text out.

    *variables* may hold plain Python values (str, numbers, bool, None,
    lists, nested mappings) or :class:`~ghstache.core.data.Data` instances.
    """

    def render(self, template: str, variables: Mapping[str, Any]) -> str: ...
