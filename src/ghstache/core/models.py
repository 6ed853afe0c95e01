from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ghstache.constants import DEFAULT_BEGIN, DEFAULT_END
from ghstache.processing.text_ops import has_whitespace


@dataclass(frozen=True)
class DelimiterSet:
    """Open/close tag tokens. Replaced, never mutated, on a set-delimiter tag."""
    begin: str = DEFAULT_BEGIN
    end: str = DEFAULT_END

    def __post_init__(self) -> None:
        for token in (self.begin, self.end):
            if not self.is_token_valid(token):
                raise ValueError(f"invalid delimiter {token!r}: must be non-empty, without whitespace or '='")

    @staticmethod
    def is_token_valid(token: str) -> bool:
        return bool(token) and '=' not in token and not has_whitespace(token)

    def is_default(self) -> bool:
        return self.begin == DEFAULT_BEGIN and self.end == DEFAULT_END


class TagType(Enum):
    INVALID = 'invalid'  # text leaf
    VARIABLE = 'variable'
    UNESCAPED_VARIABLE = 'unescaped_variable'
    SECTION_BEGIN = 'section_begin'
    SECTION_END = 'section_end'
    SECTION_BEGIN_INVERTED = 'section_begin_inverted'
    COMMENT = 'comment'
    PARTIAL = 'partial'
    SET_DELIMITER = 'set_delimiter'


@dataclass
class Tag:
    name: str = ''
    type: TagType = TagType.INVALID
    # Verbatim source between the begin tag and its end tag.
    section_text: Optional[str] = None
    delimiter_set: Optional[DelimiterSet] = None

    def is_section_begin(self) -> bool:
        return self.type in (TagType.SECTION_BEGIN, TagType.SECTION_BEGIN_INVERTED)

    def is_section_end(self) -> bool:
        return self.type is TagType.SECTION_END


@dataclass
class Component:
    """Parse-tree node: a text leaf, or a tag with optional section children."""
    text: str = ''
    tag: Tag = field(default_factory=Tag)
    children: List[Component] = field(default_factory=list)
    position: int = -1

    def is_text(self) -> bool:
        return self.tag.type is TagType.INVALID


class WalkControl(Enum):
    CONTINUE = 'continue'
    STOP = 'stop'
    SKIP = 'skip'
