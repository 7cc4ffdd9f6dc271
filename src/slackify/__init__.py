"""slackify -- Markdown to Slack Block Kit converter.

Public re-exports
-----------------

* **Conversion:** :class:`MarkdownToSlackConverter`, :func:`markdown_to_blocks`
* **Configuration:** :class:`SlackifyConfig`, :class:`ListOptions`
* **Errors:** :class:`SlackifyError` subclasses and :class:`ErrorCode`
* **Models:** :class:`ConversionResult`, :class:`ConversionWarning`, :class:`BlockType`

Usage::

    from slackify import markdown_to_blocks

    blocks = markdown_to_blocks("# Release notes\\n\\n- fixed *everything*")
"""

from __future__ import annotations

# ── Conversion ─────────────────────────────────────────────────────────
from slackify.converter import MarkdownToSlackConverter, markdown_to_blocks

# ── Configuration ───────────────────────────────────────────────────────
from slackify.config import ListOptions, SlackifyConfig

# ── Errors ──────────────────────────────────────────────────────────────
from slackify.errors import (
    ErrorCode,
    SlackifyConversionError,
    SlackifyError,
    SlackifyHTMLParseError,
)

# ── Models ──────────────────────────────────────────────────────────────
from slackify.models import BlockType, ConversionResult, ConversionWarning

__all__ = [
    "MarkdownToSlackConverter",
    "markdown_to_blocks",
    "SlackifyConfig",
    "ListOptions",
    "SlackifyError",
    "SlackifyConversionError",
    "SlackifyHTMLParseError",
    "ErrorCode",
    "BlockType",
    "ConversionResult",
    "ConversionWarning",
]
