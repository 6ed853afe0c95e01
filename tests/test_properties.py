from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from ghstache import Template, html_escape, render

# Plain text that can never open a default tag.
plain_text = st.text().filter(lambda s: "{" not in s)
values = st.text(max_size=30)
names = st.from_regex(r"[a-z][a-z0-9_]{0,8}", fullmatch=True)


@given(text=plain_text)
def test_text_without_tags_is_identity(text: str) -> None:
    tpl = Template(text)
    assert tpl.is_valid
    assert tpl.render({}) == text


@given(value=values)
def test_escaped_variable_uses_html_table(value: str) -> None:
    expected = (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )
    assert html_escape(value) == expected
    assert render("{{v}}", {"v": value}) == expected


@given(value=values)
def test_unescaped_forms_emit_value_verbatim(value: str) -> None:
    assert render("{{{v}}}", {"v": value}) == value
    assert render("{{& v }}", {"v": value}) == value


@given(items=st.lists(values, max_size=8), name=names)
def test_list_section_concatenates_per_item(items, name: str) -> None:
    tpl = "{{#%s}}[{{{.}}}]{{/%s}}" % (name, name)
    assert render(tpl, {name: items}) == "".join(f"[{item}]" for item in items)


@given(flag=st.booleans(), items=st.lists(values, max_size=3))
def test_inverted_section_is_complement(flag: bool, items) -> None:
    data = {"flag": flag, "items": items}
    normal = render("{{#flag}}x{{/flag}}{{#items}}y{{/items}}", data)
    inverted = render("{{^flag}}x{{/flag}}{{^items}}y{{/items}}", data)
    assert normal == ("x" if flag else "") + "y" * len(items)
    assert inverted == ("" if flag else "x") + ("" if items else "y")


@given(prefix=plain_text, name=names)
def test_unclosed_section_offset_matches_prefix(prefix: str, name: str) -> None:
    tpl = Template(prefix + "{{#" + name + "}}")
    assert not tpl.is_valid
    assert tpl.error_message == f'Unclosed section "{name}" at {len(prefix)}'
