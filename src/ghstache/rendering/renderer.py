"""
Renderer component for ghstache.

This module provides:
  • RenderState       – context stack + delimiter set active during a walk.
  • LambdaRenderer    – the render handle given to two-argument lambdas.
  • ComponentRenderer – depth-first evaluation of a parsed Component tree.

Notes
-----
• Output goes to a caller-supplied handler, possibly many times per render.
• Partials and lambda output are parsed as independent sub-templates created
  through ``Template.spawn``; their first error is copied into the owning
  template and the walk stops. Output already emitted is not retracted.
• Every section push is paired with a pop through ``pushed`` so the stack
  stays balanced even when a callback raises.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

from ghstache.constants import ERR_LAMBDA2_VARIABLE
from ghstache.core.data import Data
from ghstache.core.interfaces.context import ContextProtocol
from ghstache.core.interfaces.render import RendererProtocol
from ghstache.core.models import Component, DelimiterSet, TagType, WalkControl
from ghstache.logging.helpers import get_logger, trace_render
from ghstache.rendering.context import pushed
from ghstache.rendering.walker import walk, walk_children

if TYPE_CHECKING:
    from ghstache.template import Template

RenderHandler = Callable[[str], None]


class RenderLambdaEscape(Enum):
    ESCAPE = 'escape'
    UNESCAPE = 'unescape'
    # Section position: the render handle's caller decides.
    OPTIONAL = 'optional'


@dataclass
class RenderState:
    context: ContextProtocol
    delimiters: DelimiterSet


class LambdaRenderer(RendererProtocol):
    """Render handle passed to :class:`~ghstache.core.data.Lambda2` callbacks."""

    def __init__(self, render: Callable[[str, bool], str]) -> None:
        self._render = render

    def __call__(self, text: str, escaped: bool = False) -> str:
        return self._render(text, escaped)


class ComponentRenderer:
    """Walk the tree of *template*, emitting text through *handler*."""

    def __init__(
        self,
        template: 'Template',
        handler: RenderHandler,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._tpl = template
        self._handler = handler
        self._log = logger or get_logger('render')

    def render(self, context: ContextProtocol, delimiters: DelimiterSet) -> None:
        state = RenderState(context=context, delimiters=delimiters)
        walk(lambda comp: self._render_component(comp, state), self._tpl.root)

    # ------------------------------------------------------------------ #
    # Dispatch
    # ------------------------------------------------------------------ #
    def _render_component(self, comp: Component, state: RenderState) -> WalkControl:
        if comp.is_text():
            self._handler(comp.text)
            return WalkControl.CONTINUE

        tag = comp.tag
        if tag.type in (TagType.VARIABLE, TagType.UNESCAPED_VARIABLE):
            var = state.context.get(tag.name)
            if var is not None and not self._render_variable(var, state, tag.type is TagType.VARIABLE):
                return WalkControl.STOP
        elif tag.type is TagType.SECTION_BEGIN:
            var = state.context.get(tag.name)
            control = WalkControl.CONTINUE
            if var is not None:
                if var.is_lambda() or var.is_lambda2():
                    if not self._render_lambda(
                        var, state, RenderLambdaEscape.OPTIONAL, tag.section_text or '', same_delimiters=True
                    ):
                        return WalkControl.STOP
                elif not var.is_false() and not var.is_empty_list():
                    control = self._render_section(comp, state, var)
            return WalkControl.STOP if control is WalkControl.STOP else WalkControl.SKIP
        elif tag.type is TagType.SECTION_BEGIN_INVERTED:
            var = state.context.get(tag.name)
            control = WalkControl.CONTINUE
            if var is None or var.is_false() or var.is_empty_list():
                control = self._render_section(comp, state, None)
            return WalkControl.STOP if control is WalkControl.STOP else WalkControl.SKIP
        elif tag.type is TagType.PARTIAL:
            if not self._render_partial(tag.name, state):
                return WalkControl.STOP
        elif tag.type is TagType.SET_DELIMITER and tag.delimiter_set is not None:
            state.delimiters = tag.delimiter_set
        return WalkControl.CONTINUE

    # ------------------------------------------------------------------ #
    # Tag kinds
    # ------------------------------------------------------------------ #
    def _render_variable(self, var: Data, state: RenderState, escaped: bool) -> bool:
        if var.is_string():
            text = var.string_value
            self._handler(self._tpl.escape(text) if escaped else text)
        elif var.is_lambda():
            mode = RenderLambdaEscape.ESCAPE if escaped else RenderLambdaEscape.UNESCAPE
            return self._render_lambda(var, state, mode, '', same_delimiters=False)
        elif var.is_lambda2():
            self._tpl.fail(ERR_LAMBDA2_VARIABLE)
            return False
        return True

    def _render_section(self, comp: Component, state: RenderState, var: Optional[Data]) -> WalkControl:
        def _callback(child: Component) -> WalkControl:
            return self._render_component(child, state)

        if var is None:
            return walk_children(_callback, comp)
        if var.is_non_empty_list():
            for item in var.list_value:
                with pushed(state.context, item):
                    if walk_children(_callback, comp) is WalkControl.STOP:
                        return WalkControl.STOP
            return WalkControl.CONTINUE
        with pushed(state.context, var):
            return walk_children(_callback, comp)

    def _render_lambda(
        self,
        var: Data,
        state: RenderState,
        escape: RenderLambdaEscape,
        text: str,
        *,
        same_delimiters: bool,
    ) -> bool:
        """Invoke a lambda and emit its result.

        One-argument lambdas get *text* and their return value is parsed
        and rendered as a template. Two-argument lambdas get *text* plus a
        render handle and their return value is emitted unchanged.
        ``same_delimiters`` selects whether re-parsed text starts from the
        delimiters active here (sections) or from the defaults (variables).
        """

        def _render2(fragment: str, escaped: bool = False) -> str:
            delims = state.delimiters if same_delimiters else DelimiterSet()
            sub = self._tpl.spawn(fragment, delims)
            if not sub.is_valid:
                self._tpl.fail(sub.error_message)
                return ''
            out = sub.render_context(state.context)
            if not sub.is_valid:
                self._tpl.fail(sub.error_message)
                return ''
            if escape is RenderLambdaEscape.ESCAPE or (escape is RenderLambdaEscape.OPTIONAL and escaped):
                return self._tpl.escape(out)
            return out

        if var.is_lambda2():
            trace_render(self._log, 'lambda2 invoked', chars=len(text))
            self._handler(var.lambda2_value(text, LambdaRenderer(_render2)))
        else:
            trace_render(self._log, 'lambda invoked', chars=len(text))
            self._handler(_render2(var.lambda_value(text)))
        return self._tpl.is_valid

    def _render_partial(self, name: str, state: RenderState) -> bool:
        var = state.context.get_partial(name)
        if var is None or not (var.is_partial() or var.is_string()):
            return True
        source = var.partial_value() if var.is_partial() else var.string_value
        trace_render(self._log, 'partial expanded', name=name, begin=state.delimiters.begin)
        sub = self._tpl.spawn(source, state.delimiters)
        if sub.is_valid:
            sub.render_into(self._handler, state.context)
        if not sub.is_valid:
            self._tpl.fail(sub.error_message)
            return False
        return True
