"""Heading conversion.

=====  ==========================================================
level  blocks
=====  ==========================================================
1      ``header`` (plain text, optionally decorated)
2      ``divider`` + ``header`` or bold ``section`` (``h2_style``)
3+     ``section`` ``"<glyph> *text*"``
=====  ==========================================================
"""

from __future__ import annotations

import re

from slackify.blocks import divider, header, section
from slackify.config import SlackifyConfig
from slackify.converter.mrkdwn import render_mrkdwn_all, render_plain_all

# Anything outside printable ASCII, Hangul syllables and Hangul jamo.
_NON_ASCII_OR_HANGUL_RE = re.compile(r"[^\u0020-\u007E\uAC00-\uD7AF\u3130-\u318F]")


def has_foreign_characters(text: str) -> bool:
    """Return True if *text* has a character that is neither ASCII nor Hangul.

    Headings that already carry an emoji or another script are left
    undecorated.
    """
    return _NON_ASCII_OR_HANGUL_RE.search(text) is not None


def strip_bold_outside_links(text: str) -> str:
    """Remove ``*...*`` pairs that do not start inside a ``<...>`` link payload.

    A pair is stripped only if its opening ``*`` is outside any ``<...>``
    and its closing ``*`` is not followed by a ``>`` before the next ``<``.
    Pairs never span a newline.
    """
    out: list[str] = []
    i = 0
    while i < len(text):
        if text[i] == "*" and not _inside_angle(text, i):
            end = _closing_star(text, i)
            if end is not None:
                out.append(text[i + 1:end])
                i = end + 1
                continue
        out.append(text[i])
        i += 1
    return "".join(out)


def _inside_angle(text: str, pos: int) -> bool:
    return text.rfind("<", 0, pos) > text.rfind(">", 0, pos)


def _closing_star(text: str, start: int) -> int | None:
    j = start + 1
    while j < len(text):
        char = text[j]
        if char == "\n":
            return None
        if char == "*" and not _closes_angle(text, j + 1):
            return j
        j += 1
    return None


def _closes_angle(text: str, pos: int) -> bool:
    close = text.find(">", pos)
    if close == -1:
        return False
    opening = text.find("<", pos)
    return opening == -1 or close < opening


def build_heading(token: dict, config: SlackifyConfig) -> list[dict]:
    """Convert a heading token to Block Kit blocks."""
    level = token.get("attrs", {}).get("level", 1)
    children = token.get("children", [])

    if level <= 1:
        text = render_plain_all(children)
        if config.h1_prefix and not has_foreign_characters(text):
            text = config.h1_prefix + text
        return [header(text)]

    # images are dropped by the mrkdwn renderer
    text = render_mrkdwn_all(children)

    if level == 2:
        if config.h2_style == "section":
            return [divider(), section(f"*{strip_bold_outside_links(text)}*")]
        return [divider(), header(text)]

    text = strip_bold_outside_links(text)
    return [section(f"{config.heading_glyph} *{text}*")]
