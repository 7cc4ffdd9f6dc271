"""Public data models for slackify.

All types are plain dataclasses or enums with no behaviour beyond what is
needed for structural equality.  Output blocks themselves are plain dicts
in Slack Block Kit JSON shape (see :mod:`slackify.blocks`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class BlockType(str, Enum):
    """Block Kit block types produced by the converter."""

    HEADER = "header"
    SECTION = "section"
    DIVIDER = "divider"
    IMAGE = "image"


# ---------------------------------------------------------------------------
# Conversion warnings
# ---------------------------------------------------------------------------

@dataclass
class ConversionWarning:
    """A non-fatal issue encountered during conversion.

    Attributes
    ----------
    code:
        A machine-readable warning code (e.g. ``"HTML_PARSE_ERROR"``).
    message:
        A human-readable description of the issue.
    context:
        Arbitrary structured data for diagnostics.
    """

    code: str
    message: str
    context: dict = field(default_factory=dict)


@dataclass
class ConversionResult:
    """Output of a Markdown-to-Block-Kit conversion.

    Attributes
    ----------
    blocks:
        Ordered Block Kit block dicts; the order is the message rendering
        order.
    warnings:
        Non-fatal issues discovered during conversion.
    """

    blocks: list[dict] = field(default_factory=list)
    warnings: list[ConversionWarning] = field(default_factory=list)
