from __future__ import annotations

"""
TagTokenizer – classification of trimmed tag bodies.

This class centralizes:
    * Set-delimiter directive parsing ("=<open> <close>=").
    * Sigil dispatch for every other tag kind.
"""

from typing import Optional

from ghstache.constants import MIN_SET_DELIMITER_LEN
from ghstache.core.models import DelimiterSet, Tag, TagType
from ghstache.processing.text_ops import trim

_SIGILS = {
    '#': TagType.SECTION_BEGIN,
    '^': TagType.SECTION_BEGIN_INVERTED,
    '/': TagType.SECTION_END,
    '>': TagType.PARTIAL,
    '&': TagType.UNESCAPED_VARIABLE,
    '!': TagType.COMMENT,
}


class TagTokenizer:
    @staticmethod
    def is_delimiter_valid(delimiter: str) -> bool:
        """Custom delimiters may not contain whitespace or the equals sign."""
        return DelimiterSet.is_token_valid(delimiter)

    @staticmethod
    def parse_set_delimiter(contents: str) -> Optional[DelimiterSet]:
        """Parse a trimmed directive body into a new DelimiterSet.

        The algorithm:
            - Require at least "=X X=" and a closing '='.
            - Trim the text between the '=' markers and split it at the
              first space; the remainder after any run of spaces is the
              closing token.
            - Reject tokens that carry whitespace or '='.

        Returns:
            The new set, or None when the directive is malformed.
        """
        if len(contents) < MIN_SET_DELIMITER_LEN or not contents.endswith('='):
            return None
        inner = trim(contents[1:-1])
        space = inner.find(' ')
        if space == -1:
            return None
        begin = inner[:space]
        end = inner[space:].lstrip(' ')
        if not TagTokenizer.is_delimiter_valid(begin) or not TagTokenizer.is_delimiter_valid(end):
            return None
        return DelimiterSet(begin, end)

    @staticmethod
    def parse_tag_contents(contents: str, *, unescaped: bool = False) -> Tag:
        """Classify a trimmed tag body by its leading sigil.

        Plain variables keep the whole body as their name; every other kind
        drops the sigil and trims what is left. ``unescaped`` marks the
        triple-brace form, whose body is never inspected for a sigil.
        """
        if unescaped:
            return Tag(name=contents, type=TagType.UNESCAPED_VARIABLE)
        if not contents:
            return Tag(name='', type=TagType.VARIABLE)
        kind = _SIGILS.get(contents[0], TagType.VARIABLE)
        if kind is TagType.VARIABLE:
            return Tag(name=contents, type=kind)
        return Tag(name=trim(contents[1:]), type=kind)
