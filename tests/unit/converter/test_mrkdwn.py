"""Tests for converter/mrkdwn.py: plain and mrkdwn phrasing renderers."""

from __future__ import annotations

from slackify.converter.mrkdwn import (
    append_mrkdwn,
    escape_mrkdwn,
    fold_phrasing,
    render_cell_text,
    render_mrkdwn,
    render_mrkdwn_all,
    render_plain,
    render_plain_all,
)


def _text(raw):
    return {"type": "text", "raw": raw}


def _wrap(kind, *children):
    return {"type": kind, "children": list(children)}


def _link(url, *children):
    return {"type": "link", "attrs": {"url": url}, "children": list(children)}


def _image(url, alt="", title=None):
    attrs = {"url": url}
    if title:
        attrs["title"] = title
    return {"type": "image", "attrs": attrs, "alt": alt, "children": [_text(alt)]}


# =========================================================================
# Plain dialect
# =========================================================================

class TestRenderPlain:

    def test_text_unchanged(self):
        assert render_plain(_text("Hello world")) == "Hello world"

    def test_wrappers_contribute_inner_text(self):
        for kind in ("emphasis", "strong", "strikethrough"):
            assert render_plain(_wrap(kind, _text("inner"))) == "inner"

    def test_nested_wrappers(self):
        token = _wrap("strong", _text("a "), _wrap("emphasis", _text("b")))
        assert render_plain(token) == "a b"

    def test_link_text_then_url(self):
        token = _link("https://example.com", _text("site"))
        assert render_plain(token) == "site (https://example.com)"

    def test_image_prefers_title(self):
        assert render_plain(_image("https://x/a.png", "alt", "Title")) == "Title"

    def test_image_falls_back_to_url(self):
        assert render_plain(_image("https://x/a.png", "alt")) == "https://x/a.png"

    def test_linebreak_is_empty(self):
        assert render_plain({"type": "linebreak", "raw": "\n"}) == ""

    def test_leftover_markers_stripped(self):
        assert render_plain(_text("**odd* _mix_ ~x~ `y`")) == "odd mix x y"

    def test_codespan_markers_stripped(self):
        assert render_plain({"type": "codespan", "text": "x", "raw": "`x`"}) == "x"

    def test_unknown_token_is_empty(self):
        assert render_plain({"type": "inline_math", "raw": "x^2"}) == ""

    def test_render_plain_all_concatenates(self):
        children = [_text("Hi "), _wrap("strong", _text("there"))]
        assert render_plain_all(children) == "Hi there"


# =========================================================================
# Mrkdwn dialect
# =========================================================================

class TestRenderMrkdwn:

    def test_emphasis(self):
        assert render_mrkdwn(_wrap("emphasis", _text("it"))) == "_it_"

    def test_strong(self):
        assert render_mrkdwn(_wrap("strong", _text("bold"))) == "*bold*"

    def test_strikethrough(self):
        assert render_mrkdwn(_wrap("strikethrough", _text("gone"))) == "~gone~"

    def test_codespan_is_escaped(self):
        token = {"type": "codespan", "text": "a < b", "raw": "`a < b`"}
        assert render_mrkdwn(token) == "`a &lt; b`"

    def test_codespan_inside_link_is_escaped(self):
        code = {"type": "codespan", "text": "a<b&c>", "raw": "`a<b&c>`"}
        token = _link("https://e.com", code)
        assert render_mrkdwn(token) == "<https://e.com|`a&lt;b&amp;c&gt;`>"

    def test_link(self):
        token = _link("https://example.com", _text("site"))
        assert render_mrkdwn(token) == "<https://example.com|site>"

    def test_link_text_is_escaped(self):
        token = _link("https://example.com", _text("a<b>&c"))
        assert render_mrkdwn(token) == "<https://example.com|a&lt;b&gt;&amp;c>"

    def test_link_keeps_inner_formatting(self):
        token = _link("https://example.com", _wrap("strong", _text("hot")))
        assert render_mrkdwn(token) == "<https://example.com|*hot*>"

    def test_text_escaping_only_three_characters(self):
        assert render_mrkdwn(_text("Tom & Jerry <3> \"q\" 'a'")) == (
            "Tom &amp; Jerry &lt;3&gt; \"q\" 'a'"
        )

    def test_html_inline_escaped(self):
        assert render_mrkdwn({"type": "html_inline", "raw": "<br>"}) == "&lt;br&gt;"

    def test_image_renders_nothing(self):
        assert render_mrkdwn(_image("https://x/a.png", "alt")) == ""

    def test_breaks_render_newline(self):
        assert render_mrkdwn({"type": "softbreak", "raw": "\n"}) == "\n"
        assert render_mrkdwn({"type": "linebreak", "raw": "\n"}) == "\n"

    def test_unknown_token_is_empty(self):
        assert render_mrkdwn({"type": "footnote_ref"}) == ""

    def test_render_all_drops_images(self):
        children = [_text("see "), _image("https://x/a.png", "alt"), _text("here")]
        assert render_mrkdwn_all(children) == "see here"

    def test_escape_ampersand_first(self):
        assert escape_mrkdwn("&lt;") == "&amp;lt;"


class TestRenderCellText:

    def test_image_contributes_url(self):
        assert render_cell_text(_image("https://x/a.png", "alt", "T")) == "https://x/a.png"

    def test_image_without_url_uses_title(self):
        token = {"type": "image", "attrs": {"url": "", "title": "T"}, "alt": "a"}
        assert render_cell_text(token) == "T"

    def test_image_without_anything(self):
        assert render_cell_text({"type": "image", "attrs": {}}) == "image"

    def test_other_tokens_use_mrkdwn(self):
        assert render_cell_text(_wrap("strong", _text("x"))) == "*x*"


# =========================================================================
# Merge fold
# =========================================================================

class TestAppendMrkdwn:

    def test_opens_section_on_empty(self):
        blocks = append_mrkdwn([], "hi")
        assert blocks == [{"type": "section", "text": {"type": "mrkdwn", "text": "hi"}}]

    def test_merges_into_previous_section(self):
        blocks = append_mrkdwn(append_mrkdwn([], "a"), "b")
        assert len(blocks) == 1
        assert blocks[0]["text"]["text"] == "ab"

    def test_opens_new_section_after_image(self):
        image_block = {"type": "image", "image_url": "u", "alt_text": "u"}
        blocks = append_mrkdwn([image_block], "x")
        assert [b["type"] for b in blocks] == ["image", "section"]

    def test_input_accumulator_not_mutated(self):
        start = append_mrkdwn([], "a")
        append_mrkdwn(start, "b")
        assert start[0]["text"]["text"] == "a"


class TestFoldPhrasing:

    def test_inline_run_is_one_section(self):
        children = [
            _text("Hello "),
            _wrap("emphasis", _text("big")),
            _text(" "),
            _link("https://e.com", _text("world")),
        ]
        blocks = fold_phrasing(children)
        assert len(blocks) == 1
        assert blocks[0]["text"]["text"] == "Hello _big_ <https://e.com|world>"

    def test_image_splits_run(self):
        children = [_text("before"), _image("https://x/a.png", "pic", "Cap"), _text("after")]
        blocks = fold_phrasing(children)
        assert [b["type"] for b in blocks] == ["section", "image", "section"]
        assert blocks[1] == {
            "type": "image",
            "image_url": "https://x/a.png",
            "alt_text": "pic",
            "title": {"type": "plain_text", "text": "Cap"},
        }

    def test_image_alt_falls_back_to_url(self):
        blocks = fold_phrasing([_image("https://x/a.png")])
        assert blocks[0]["alt_text"] == "https://x/a.png"
        assert "title" not in blocks[0]

    def test_empty_children(self):
        assert fold_phrasing([]) == []
