"""Render inline (phrasing) tokens to text.

Two dialects are supported:

* **plain** -- for ``header`` blocks, which only accept plain text.  All
  formatting markers are dropped; links become ``"text (url)"`` and images
  contribute their title or URL.
* **mrkdwn** -- Slack's restricted markup for ``section`` blocks::

      emphasis       -> _text_
      strong         -> *text*
      strikethrough  -> ~text~
      codespan       -> `text`
      link           -> <url|text>

  Text leaves and code spans are escaped for ``&``, ``<`` and ``>`` only.
  Images are never inlined; :func:`fold_phrasing` turns them into ``image`` blocks.

Both renderers are total: an unknown token renders as ``""``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from slackify.blocks import block_text, image, is_section, section

# Leftover formatting markers removed from plain-text leaves.
_PLAIN_MARKERS_RE = re.compile(r"[*_~`]+")


def escape_mrkdwn(text: str) -> str:
    """Escape the three characters Slack treats as control sequences."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


# ---------------------------------------------------------------------------
# Plain dialect
# ---------------------------------------------------------------------------

def render_plain(token: dict) -> str:
    """Render a phrasing token as plain text with formatting removed."""
    token_type = token.get("type", "")

    if token_type == "link":
        inner = render_plain_all(token.get("children", []))
        return f"{inner} ({token.get('attrs', {}).get('url', '')})"

    if token_type in ("emphasis", "strong", "strikethrough"):
        return render_plain_all(token.get("children", []))

    if token_type == "linebreak":
        return ""

    if token_type == "softbreak":
        return " "

    if token_type == "image":
        attrs = token.get("attrs", {})
        return attrs.get("title") or attrs.get("url", "")

    if token_type in ("text", "codespan", "html_inline"):
        return _PLAIN_MARKERS_RE.sub("", token.get("raw", ""))

    return ""


def render_plain_all(children: Iterable[dict]) -> str:
    return "".join(render_plain(child) for child in children)


# ---------------------------------------------------------------------------
# Mrkdwn dialect
# ---------------------------------------------------------------------------

def render_mrkdwn(token: dict) -> str:
    """Render a phrasing token as Slack mrkdwn.  Images render as ``""``."""
    token_type = token.get("type", "")

    if token_type == "link":
        url = token.get("attrs", {}).get("url", "")
        return f"<{url}|{render_mrkdwn_all(token.get('children', []))}>"

    if token_type == "emphasis":
        return f"_{render_mrkdwn_all(token.get('children', []))}_"

    if token_type == "strong":
        return f"*{render_mrkdwn_all(token.get('children', []))}*"

    if token_type == "strikethrough":
        return f"~{render_mrkdwn_all(token.get('children', []))}~"

    if token_type == "codespan":
        return f"`{escape_mrkdwn(token.get('text', ''))}`"

    if token_type in ("text", "html_inline"):
        return escape_mrkdwn(token.get("raw", ""))

    if token_type in ("softbreak", "linebreak"):
        return "\n"

    return ""


def render_mrkdwn_all(children: Iterable[dict]) -> str:
    """Render a phrasing sequence as mrkdwn, dropping images."""
    return "".join(render_mrkdwn(child) for child in children)


def render_cell_text(token: dict) -> str:
    """Render a phrasing token for fixed-width output; images become a URL token."""
    if token.get("type") == "image":
        attrs = token.get("attrs", {})
        return attrs.get("url") or attrs.get("title") or token.get("alt") or "image"
    return render_mrkdwn(token)


# ---------------------------------------------------------------------------
# Block accumulation
# ---------------------------------------------------------------------------

def append_mrkdwn(accumulator: list[dict], text: str) -> list[dict]:
    """Fold *text* into *accumulator*.

    When the last block is a section its text is extended; otherwise a new
    section is opened.  Returns the new accumulator and leaves the input
    list untouched.
    """
    last = accumulator[-1] if accumulator else None
    if is_section(last):
        return [*accumulator[:-1], section(block_text(last) + text)]
    return [*accumulator, section(text)]


def fold_phrasing(children: Iterable[dict], accumulator: list[dict] | None = None) -> list[dict]:
    """Convert a phrasing sequence to blocks.

    Adjacent inline runs merge into one section; each image interrupts the
    run with its own ``image`` block.
    """
    blocks = list(accumulator or [])
    for child in children:
        if child.get("type") == "image":
            attrs = child.get("attrs", {})
            url = attrs.get("url", "")
            title = attrs.get("title")
            blocks.append(image(url, child.get("alt") or title or url, title))
        else:
            blocks = append_mrkdwn(blocks, render_mrkdwn(child))
    return blocks
