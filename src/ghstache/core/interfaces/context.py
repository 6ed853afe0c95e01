from __future__ import annotations

"""
Protocol describing the scope chain consulted during rendering.

NOTE:
    Implementations only borrow the Data they are given; the caller keeps
    the value tree alive for the whole render call. push/pop calls are
    strictly balanced by the renderer.
"""

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ghstache.core.data import Data


@runtime_checkable
class ContextProtocol(Protocol):
    def push(self, data: Data) -> None:
        """Make *data* the innermost scope."""
        ...

    def pop(self) -> None:
        """Drop the innermost scope."""
        ...

    def get(self, name: str) -> Optional[Data]:
        """Resolve a variable or section name ("." or a dotted path)."""
        ...

    def get_partial(self, name: str) -> Optional[Data]:
        """Resolve the name used by a partial tag."""
        ...
