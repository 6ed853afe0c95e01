from __future__ import annotations
"""Escaping protocol definitions."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class EscaperProtocol(Protocol):
    """Text → text function applied to escaped variable and lambda output."""

    def __call__(self, text: str) -> str:
        ...
