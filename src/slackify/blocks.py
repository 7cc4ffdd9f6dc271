"""Thin constructors for Slack Block Kit block dicts.

Shapes::

    {"type": "header", "text": {"type": "plain_text", "text": "..."}}
    {"type": "section", "text": {"type": "mrkdwn", "text": "..."}}
    {"type": "divider"}
    {"type": "image", "image_url": "...", "alt_text": "...",
     "title": {"type": "plain_text", "text": "..."}}

Size limits of the Slack platform are not enforced here.
"""

from __future__ import annotations

from slackify.models import BlockType


def header(text: str) -> dict:
    """Build a ``header`` block with plain text."""
    return {
        "type": BlockType.HEADER.value,
        "text": {"type": "plain_text", "text": text},
    }


def section(text: str) -> dict:
    """Build a ``section`` block with a mrkdwn text field."""
    return {
        "type": BlockType.SECTION.value,
        "text": {"type": "mrkdwn", "text": text},
    }


def divider() -> dict:
    return {"type": BlockType.DIVIDER.value}


def image(url: str, alt_text: str, title: str | None = None) -> dict:
    """Build an ``image`` block; ``title`` is omitted when empty."""
    block: dict = {
        "type": BlockType.IMAGE.value,
        "image_url": url,
        "alt_text": alt_text,
    }
    if title:
        block["title"] = {"type": "plain_text", "text": title}
    return block


def is_section(block: dict | None) -> bool:
    """Return True for a section block that carries a text field."""
    return (
        block is not None
        and block.get("type") == BlockType.SECTION.value
        and isinstance(block.get("text"), dict)
    )


def block_text(block: dict) -> str:
    """Return the text of a header/section block, or ``""``."""
    text = block.get("text")
    if isinstance(text, dict):
        return text.get("text", "")
    return ""
