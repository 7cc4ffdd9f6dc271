"""Parse Markdown and normalize to canonical AST tokens.

This module wraps mistune v3's AST renderer and normalises the raw token
stream into the token tree consumed by :mod:`slackify.converter.block_builder`.

Canonical block tokens:
    heading, paragraph, block_text, block_quote, list, list_item,
    task_list_item, block_code, table, thematic_break, html_block,
    blank_line

Canonical inline tokens:
    text, strong, emphasis, codespan, strikethrough, link, image,
    softbreak, linebreak, html_inline

Mistune does not keep source text for inline nodes, so every inline token
gets a reconstructed ``raw`` Markdown source, and paragraphs get the
concatenation of their children's ``raw``.  Wrapper tokens (emphasis,
strong, strikethrough, link) also carry ``text``, the raw source of their
children without the wrapper markers.

A paragraph made only of inline HTML (for example a standalone
``<img src="..." />`` line) becomes an ``html_block``.
"""

from __future__ import annotations

import re

import mistune

# ---------------------------------------------------------------------------
# Mistune-to-canonical type mapping
# ---------------------------------------------------------------------------

_BLOCK_TYPE_MAP: dict[str, str] = {
    "heading": "heading",
    "paragraph": "paragraph",
    "block_text": "block_text",
    "block_quote": "block_quote",
    "list": "list",
    "list_item": "list_item",
    "task_list_item": "task_list_item",
    "block_code": "block_code",
    "table": "table",
    "thematic_break": "thematic_break",
    "block_html": "html_block",
    "blank_line": "blank_line",
}

_INLINE_TYPE_MAP: dict[str, str] = {
    "text": "text",
    "strong": "strong",
    "emphasis": "emphasis",
    "codespan": "codespan",
    "strikethrough": "strikethrough",
    "link": "link",
    "image": "image",
    "softbreak": "softbreak",
    "linebreak": "linebreak",
    "inline_html": "html_inline",
}

_TABLE_PARTS: frozenset[str] = frozenset({
    "table_head", "table_body", "table_row", "table_cell",
})

# Source markers used to rebuild raw Markdown for wrapper tokens.
_WRAPPER_MARKERS: dict[str, str] = {
    "strong": "**",
    "emphasis": "*",
    "strikethrough": "~~",
}

_BACKTICK_RUN_RE = re.compile(r"`+")


class ASTNormalizer:
    """Parse Markdown and normalize to canonical AST tokens."""

    def __init__(self) -> None:
        self._parser = mistune.create_markdown(
            renderer="ast",
            plugins=[
                "strikethrough",
                "table",
                "task_lists",
                "url",
            ],
        )

    def parse(self, markdown: str) -> list[dict]:
        """Parse markdown and return the normalized token list."""
        raw_tokens = self._parser(markdown)
        if isinstance(raw_tokens, str):
            return []
        return self.normalize(raw_tokens)

    def normalize(self, tokens: list[dict]) -> list[dict]:
        """Normalize an already-parsed mistune token list."""
        result: list[dict] = []
        for token in tokens:
            normalized = self._normalize_token(token)
            if normalized is not None:
                result.append(normalized)
        return result

    def _normalize_token(self, token: dict) -> dict | None:
        """Normalize a single token, returning None if it should be dropped."""
        raw_type = token.get("type", "")

        if raw_type in _BLOCK_TYPE_MAP:
            return self._normalize_block(token, _BLOCK_TYPE_MAP[raw_type])

        if raw_type in _INLINE_TYPE_MAP:
            return self._normalize_inline(token, _INLINE_TYPE_MAP[raw_type])

        if raw_type in _TABLE_PARTS:
            return self._normalize_table_part(token)

        # mistune emits "raw" inside some inline containers
        if raw_type == "raw":
            return {"type": "text", "raw": token.get("raw", "")}

        return None

    def _normalize_block(self, token: dict, canonical_type: str) -> dict:
        result: dict = {"type": canonical_type}

        attrs = token.get("attrs")
        if attrs:
            result["attrs"] = dict(attrs)

        if canonical_type == "block_code":
            raw_code = token.get("raw", "")
            if raw_code.endswith("\n"):
                raw_code = raw_code[:-1]
            result["raw"] = raw_code
            return result

        if canonical_type == "html_block":
            result["raw"] = token.get("raw", "")
            return result

        if canonical_type in ("thematic_break", "blank_line"):
            return result

        children = self.normalize(token.get("children") or [])
        result["children"] = children

        if canonical_type in ("paragraph", "block_text", "heading"):
            result["raw"] = _join_raw(children)

        # mistune keeps a standalone `<img ... />` line as an inline-HTML paragraph
        if canonical_type == "paragraph" and _is_html_only(children):
            return {"type": "html_block", "raw": result["raw"]}

        return result

    def _normalize_inline(self, token: dict, canonical_type: str) -> dict:
        result: dict = {"type": canonical_type}

        if canonical_type == "text":
            result["raw"] = token.get("raw", "")
            return result

        if canonical_type in ("softbreak", "linebreak"):
            result["raw"] = "\n"
            return result

        if canonical_type == "html_inline":
            result["raw"] = token.get("raw", "")
            return result

        if canonical_type == "codespan":
            code = token.get("raw", "")
            result["text"] = code
            result["raw"] = _codespan_source(code)
            return result

        attrs = token.get("attrs")
        if attrs:
            result["attrs"] = dict(attrs)

        children = self.normalize(token.get("children") or [])
        result["children"] = children
        inner = _join_raw(children)

        if canonical_type in _WRAPPER_MARKERS:
            marker = _WRAPPER_MARKERS[canonical_type]
            result["text"] = inner
            result["raw"] = f"{marker}{inner}{marker}"
        elif canonical_type == "link":
            url = result.get("attrs", {}).get("url", "")
            result["text"] = inner
            result["raw"] = f"[{inner}]({url})"
        elif canonical_type == "image":
            image_attrs = result.get("attrs", {})
            url = image_attrs.get("url", "")
            title = image_attrs.get("title")
            result["alt"] = inner
            if title:
                result["raw"] = f'![{inner}]({url} "{title}")'
            else:
                result["raw"] = f"![{inner}]({url})"

        return result

    def _normalize_table_part(self, token: dict) -> dict:
        """Normalize table sub-structure tokens (head, body, row, cell)."""
        result: dict = {"type": token["type"]}

        attrs = token.get("attrs")
        if attrs:
            result["attrs"] = dict(attrs)

        result["children"] = self.normalize(token.get("children") or [])
        return result


def _join_raw(children: list[dict]) -> str:
    return "".join(child.get("raw", "") for child in children)


def _is_html_only(children: list[dict]) -> bool:
    """True when *children* hold inline HTML separated only by whitespace."""
    has_html = False
    for child in children:
        child_type = child.get("type")
        if child_type == "html_inline":
            has_html = True
        elif child_type in ("softbreak", "linebreak"):
            continue
        elif child_type == "text" and not child.get("raw", "").strip():
            continue
        else:
            return False
    return has_html


def _codespan_source(code: str) -> str:
    """Rebuild a code span, using a fence longer than any backtick run inside."""
    longest = max((len(run) for run in _BACKTICK_RUN_RE.findall(code)), default=0)
    fence = "`" * (longest + 1)
    if longest:
        return f"{fence} {code} {fence}"
    return f"{fence}{code}{fence}"
