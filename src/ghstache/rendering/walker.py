"""
walker – Pre-order traversal of a Component tree.

The callback decides, per node, how the walk proceeds:

  • CONTINUE → descend into the node's children, then move on
  • SKIP     → move on without visiting the children (sections render
               their own children with a scoped context)
  • STOP     → abort the whole walk
"""

from typing import Callable

from ghstache.core.models import Component, WalkControl

WalkCallback = Callable[[Component], WalkControl]


def walk(callback: WalkCallback, root: Component) -> WalkControl:
    """Walk the children of *root*; *root* itself is not visited."""
    return walk_children(callback, root)


def walk_children(callback: WalkCallback, comp: Component) -> WalkControl:
    for child in comp.children:
        if walk_component(callback, child) is WalkControl.STOP:
            return WalkControl.STOP
    return WalkControl.CONTINUE


def walk_component(callback: WalkCallback, comp: Component) -> WalkControl:
    control = callback(comp)
    if control is WalkControl.STOP:
        return control
    if control is WalkControl.SKIP:
        return WalkControl.CONTINUE
    return walk_children(callback, comp)
