"""Paragraph, code block and block quote converters.

These are the converters the list renderer reuses for item content, so
they live apart from the top-level dispatch in
:mod:`slackify.converter.block_builder`.
"""

from __future__ import annotations

import re

from slackify.blocks import block_text, divider, is_section, section
from slackify.config import SlackifyConfig
from slackify.converter.context import BuildContext
from slackify.converter.mrkdwn import fold_phrasing

# Emphasis and strikethrough markers removed from raw-mode paragraphs.
_PARAGRAPH_MARKERS_RE = re.compile(r"[*_~]+")


def is_sources_marker(token: dict | None, config: SlackifyConfig) -> bool:
    """Return True if *token* is a paragraph whose source is the sources marker."""
    return (
        token is not None
        and token.get("type") == "paragraph"
        and token.get("raw", "").strip() == config.sources_marker
    )


def build_paragraph(token: dict, ctx: BuildContext) -> list[dict]:
    """Convert a paragraph to zero or more blocks.

    In ``"raw"`` mode the result is at most one section; in ``"mrkdwn"``
    mode inline runs are folded into sections and images become image
    blocks.
    """
    config = ctx.config

    if config.sources_handling == "paragraph" and is_sources_marker(token, config):
        return [divider(), section(f"*{config.sources_label}:*")]

    children = token.get("children", [])

    if config.paragraph_mode == "mrkdwn":
        return fold_phrasing(children)

    parts: list[str] = []
    for child in children:
        if child.get("type") == "link":
            url = child.get("attrs", {}).get("url", "")
            parts.append(f"<{url}|{child.get('text', '')}>")
        else:
            parts.append(child.get("raw", ""))
    text = _PARAGRAPH_MARKERS_RE.sub("", "".join(parts))

    if not text:
        return []
    return [section(text)]


def build_code_block(token: dict, ctx: BuildContext) -> list[dict]:
    """Wrap a code block in a mrkdwn fence.  The info string is dropped."""
    return [section(f"```\n{token.get('raw', '')}\n```")]


def build_block_quote(token: dict, ctx: BuildContext) -> list[dict]:
    """Convert the paragraphs of a block quote.

    Multi-line sections get ``"> "`` in front of every line.  Non-paragraph
    children of the quote are not rendered.
    """
    blocks: list[dict] = []
    for child in token.get("children", []):
        if child.get("type") != "paragraph":
            continue
        for block in build_paragraph(child, ctx):
            text = block_text(block)
            if is_section(block) and "\n" in text:
                block = section("> " + text.replace("\n", "\n> "))
            blocks.append(block)
    return blocks
