from __future__ import annotations

import pytest

from ghstache import Context, Data
from ghstache.rendering.context import pushed


@pytest.fixture
def ctx() -> Context:
    return Context(Data({"name": "root", "a": {"b": {"c": "deep"}}, "a.b": "literal"}))


def test_dot_returns_innermost(ctx: Context) -> None:
    inner = Data("item")
    ctx.push(inner)
    assert ctx.get(".") is inner
    ctx.pop()
    assert ctx.get(".").is_object()


def test_empty_context() -> None:
    empty = Context()
    assert len(empty) == 0
    assert empty.get(".") is None
    assert empty.get("name") is None
    assert empty.get_partial("name") is None


def test_nearest_scope_wins(ctx: Context) -> None:
    ctx.push(Data({"name": "inner"}))
    assert ctx.get("name").string_value == "inner"
    ctx.pop()
    assert ctx.get("name").string_value == "root"


def test_non_object_scopes_are_skipped(ctx: Context) -> None:
    ctx.push(Data("scalar"))
    ctx.push(Data(["x"]))
    assert ctx.get("name").string_value == "root"


def test_dotted_lookup(ctx: Context) -> None:
    assert ctx.get("a.b.c").string_value == "deep"
    assert ctx.get("a.b.missing") is None


def test_dotted_lookup_falls_through_on_any_failed_segment(ctx: Context) -> None:
    ctx.push(Data({"a": {"b": "shadow"}}))
    # a.b resolves in the inner scope but has no "c".
    assert ctx.get("a.b.c").string_value == "deep"
    assert ctx.get("a.b").string_value == "shadow"


def test_get_partial_does_not_split(ctx: Context) -> None:
    assert ctx.get("a.b").is_object()
    assert ctx.get_partial("a.b").string_value == "literal"


def test_pushed_pops_on_exit(ctx: Context) -> None:
    with pushed(ctx, Data({"k": "v"})) as inner:
        assert inner is ctx
        assert len(ctx) == 2
    assert len(ctx) == 1


def test_pushed_pops_when_block_raises(ctx: Context) -> None:
    with pytest.raises(RuntimeError):
        with pushed(ctx, Data({"k": "v"})):
            raise RuntimeError("boom")
    assert len(ctx) == 1
    assert ctx.get("k") is None


def test_context_borrows_data(ctx: Context) -> None:
    data = Data({"k": "v"})
    ctx.push(data)
    data.set("k", "changed")
    assert ctx.get("k").string_value == "changed"


def test_trailing_dot_is_ignored(ctx: Context) -> None:
    assert ctx.get("a.").is_object()
    assert ctx.get("a.b.c.").string_value == "deep"


def test_empty_segments_never_resolve(ctx: Context) -> None:
    assert ctx.get("a..b") is None
    assert ctx.get(".a") is None
