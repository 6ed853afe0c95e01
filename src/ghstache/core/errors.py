from __future__ import annotations

import re
from typing import Optional

_OFFSET_RX = re.compile(r' at (\d+)$')


class TemplateError(ValueError):
    """Raised on request for a template whose parse or render failed.

    ``offset`` is the source offset named by the message, or None for
    messages without one.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        m = _OFFSET_RX.search(message)
        self.offset: Optional[int] = int(m.group(1)) if m else None
