"""
text_ops – String helpers shared by the parser and the context stack.

  • trim(text)        → strip leading/trailing whitespace
  • split(text, ch)   → split on a single character, dropping one trailing
                        empty field ("a." → ["a"])
  • html_escape(text) → default escaping for {{name}} output
"""

from typing import List

_HTML_ENTITIES = {
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    "'": '&apos;',
}


def trim(text: str) -> str:
    return text.strip()


def split(text: str, delim: str) -> List[str]:
    """Split *text* on *delim* the way a line reader would.

    Empty inner fields are kept, a single trailing empty field is not, and an
    empty input yields no fields at all.
    """
    if not text:
        return []
    parts = text.split(delim)
    if parts[-1] == '':
        parts.pop()
    return parts


def html_escape(text: str) -> str:
    """Replace ``& < > " '`` with their HTML entities, one char at a time."""
    return ''.join(_HTML_ENTITIES.get(ch, ch) for ch in text)


def has_whitespace(text: str) -> bool:
    return any(ch.isspace() for ch in text)
