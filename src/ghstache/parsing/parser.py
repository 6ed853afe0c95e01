"""
parser – Single-pass scanner turning template text into a Component tree.

Notes
-----
• The scan stops at the first error; the partially built tree is kept but
  a template carrying an error never renders.
• Offsets in error messages are indexes into the source string.
• Section end tags are appended as the last child of their section and
  checked/discarded by a final walk, so "{{#a}}{{/b}}" is reported as an
  unclosed "a" rather than a mismatched "b".
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ghstache.constants import (
    ERR_INVALID_SET_DELIMITER,
    ERR_UNCLOSED_SECTION,
    ERR_UNCLOSED_TAG,
    ERR_UNOPENED_SECTION,
    UNESCAPED_END,
)
from ghstache.core.models import Component, DelimiterSet, Tag, TagType, WalkControl
from ghstache.logging.helpers import get_logger
from ghstache.parsing.tokenizer import TagTokenizer
from ghstache.processing.text_ops import trim
from ghstache.rendering.walker import walk


@dataclass
class ParseResult:
    root: Component = field(default_factory=Component)
    error: Optional[str] = None
    # Delimiter set in effect when the scan ended.
    delimiters: DelimiterSet = field(default_factory=DelimiterSet)


class TemplateParser:
    """Parse template text starting from a given delimiter set."""

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('parse')

    def parse(self, text: str, delimiters: Optional[DelimiterSet] = None) -> ParseResult:
        result = ParseResult(delimiters=delimiters or DelimiterSet())
        result.error = self._scan(text, result)
        if result.error is None:
            result.error = self._close_sections(result.root)
        if result.error is not None:
            self._log.debug('parse failed: %s', result.error)
        return result

    def _scan(self, text: str, result: ParseResult) -> Optional[str]:
        delims = result.delimiters
        brace = delims.is_default()
        sections: List[Component] = [result.root]
        section_starts: List[int] = []
        size = len(text)
        pos = 0

        while pos != size:
            start = text.find(delims.begin, pos)
            if start == -1:
                sections[-1].children.append(Component(text=text[pos:], position=pos))
                break
            if start != pos:
                sections[-1].children.append(Component(text=text[pos:start], position=pos))

            contents_at = start + len(delims.begin)
            unescaped = brace and text.startswith(delims.begin[0], contents_at)
            closer = UNESCAPED_END if unescaped else delims.end
            if unescaped:
                contents_at += 1
            end = text.find(closer, contents_at)
            if end == -1:
                return ERR_UNCLOSED_TAG.format(offset=start)

            contents = trim(text[contents_at:end])
            if contents.startswith('='):
                new_delims = TagTokenizer.parse_set_delimiter(contents)
                if new_delims is None:
                    return ERR_INVALID_SET_DELIMITER.format(offset=start)
                delims = result.delimiters = new_delims
                brace = delims.is_default()
                tag = Tag(type=TagType.SET_DELIMITER, delimiter_set=new_delims)
            else:
                tag = TagTokenizer.parse_tag_contents(contents, unescaped=unescaped)
            comp = Component(tag=tag, position=start)
            sections[-1].children.append(comp)

            pos = end + len(closer)

            if tag.is_section_begin():
                sections.append(comp)
                section_starts.append(pos)
            elif tag.is_section_end():
                if len(sections) == 1:
                    return ERR_UNOPENED_SECTION.format(name=tag.name, offset=start)
                sections[-1].tag.section_text = text[section_starts[-1]:start]
                sections.pop()
                section_starts.pop()
        return None

    @staticmethod
    def _close_sections(root: Component) -> Optional[str]:
        errors: List[str] = []

        def _check(comp: Component) -> WalkControl:
            if not comp.tag.is_section_begin():
                return WalkControl.CONTINUE
            last = comp.children[-1] if comp.children else None
            if last is None or not last.tag.is_section_end() or last.tag.name != comp.tag.name:
                errors.append(ERR_UNCLOSED_SECTION.format(name=comp.tag.name, offset=comp.position))
                return WalkControl.STOP
            comp.children.pop()
            return WalkControl.CONTINUE

        walk(_check, root)
        return errors[0] if errors else None
