from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class RendererProtocol(Protocol):
    """Restricted render handle handed to two-argument lambdas.

    Calling it renders *text* as a template against the context and
    delimiter state active where the lambda was invoked.
    """

    def __call__(self, text: str, escaped: bool = False) -> str:
        ...
