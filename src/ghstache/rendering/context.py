"""
context – Default in-memory scope chain used while rendering.

Lookup walks the stack from the innermost scope outwards and returns the
first scope that resolves the whole name:

  • "."      → the innermost value itself
  • "a"      → member "a" of the nearest object that has it
  • "a.b.c"  → chained lookup; a failure at any segment falls through to
               the next outer scope
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional

from ghstache.core.data import Data
from ghstache.core.interfaces.context import ContextProtocol
from ghstache.processing.text_ops import split


class Context(ContextProtocol):
    """Stack of borrowed Data references; the innermost scope is last."""

    def __init__(self, data: Optional[Data] = None) -> None:
        self._items: List[Data] = []
        if data is not None:
            self.push(data)

    def push(self, data: Data) -> None:
        self._items.append(data)

    def pop(self) -> None:
        self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def get(self, name: str) -> Optional[Data]:
        if name == '.':
            return self._items[-1] if self._items else None
        if '.' not in name:
            return self.get_partial(name)
        names = split(name, '.')
        for item in reversed(self._items):
            var: Optional[Data] = item
            for part in names:
                var = var.get(part)
                if var is None:
                    break
            if var is not None:
                return var
        return None

    def get_partial(self, name: str) -> Optional[Data]:
        for item in reversed(self._items):
            var = item.get(name)
            if var is not None:
                return var
        return None


@contextmanager
def pushed(ctx: ContextProtocol, data: Data) -> Iterator[ContextProtocol]:
    """Push *data* for the duration of the block; always pops on exit."""
    ctx.push(data)
    try:
        yield ctx
    finally:
        ctx.pop()
