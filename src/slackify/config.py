"""Converter configuration for slackify.

:class:`SlackifyConfig` is a frozen-friendly dataclass that captures every
presentation choice the Markdown-to-Block-Kit converter leaves open.
Instances are passed to :class:`MarkdownToSlackConverter` and to
:func:`build_blocks`.

:class:`ListOptions` is the per-list options bag handed to the list
renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from slackify.observability.metrics import MetricsHook

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_SOURCES_MARKER = "**출처:**"
"""Bold paragraph that introduces a citation list in source documents."""

DEFAULT_SOURCES_LABEL = "출처"
"""Header text emitted in place of :data:`DEFAULT_SOURCES_MARKER`."""


@dataclass
class ListOptions:
    """Options forwarded to every list rendering call.

    Parameters
    ----------
    checkbox_prefix:
        Called with the ``checked`` state of a task-list item
        (``- [x] done``) and returns the prefix to render in place of the
        bullet or ordinal.  When ``None`` task items render like any other
        item.
    """

    checkbox_prefix: Callable[[bool], str] | None = None


@dataclass
class SlackifyConfig:
    """Complete configuration for a slackify converter.

    Every parameter has a default, so ``SlackifyConfig()`` reproduces the
    canonical rendering.

    Parameters
    ----------
    h1_prefix:
        Decoration prepended to level-1 headings whose text is made only of
        printable ASCII and Hangul.  ``None`` disables decoration.
    h2_style:
        How to render level-2 headings after their leading divider.

        * ``"header"``: a ``header`` block (plain text).
        * ``"section"``: a ``section`` block with the text wrapped in ``*``.
    heading_glyph:
        Indent glyph placed before level-3-and-deeper headings.
    paragraph_mode:
        How paragraphs are rendered.

        * ``"raw"``: concatenate raw source, keep links, strip ``*_~``.
        * ``"mrkdwn"``: fold each inline child through the mrkdwn renderer;
          images become separate ``image`` blocks.
    sources_marker:
        Exact (trimmed) paragraph source that marks a sources section.
    sources_label:
        Label used when the sources marker is rendered.
    sources_handling:
        Which sources rule is active.

        * ``"lookahead"``: the document assembler emits divider + header and
          renders an immediately following list as part of the section.
        * ``"paragraph"``: the paragraph converter emits divider + a bold
          section label; the following list is rendered independently.
    thematic_break:
        ``"skip"`` renders ``---`` as nothing, ``"divider"`` as a divider.
    bullet:
        Prefix of unordered list items.
    indent_unit:
        Leading indent added once per list nesting level.
    max_list_depth:
        Nested lists deeper than this are dropped with a
        ``NESTING_DEPTH_EXCEEDED`` warning.
    lists:
        Options bag handed to the list renderer.
    metrics:
        Optional :class:`~slackify.observability.MetricsHook` backend.
    debug_dump_ast:
        Write the normalised Mistune AST to *stderr* on each conversion.
    debug_dump_payload:
        Write the produced Block Kit payload to *stderr*.
    """

    # ── Headings ────────────────────────────────────────────────────────
    h1_prefix: str | None = "🔎 "

    h2_style: Literal["header", "section"] = "header"

    heading_glyph: str = "›"

    # ── Paragraphs ──────────────────────────────────────────────────────
    paragraph_mode: Literal["raw", "mrkdwn"] = "raw"

    # ── Sources section ─────────────────────────────────────────────────
    sources_marker: str = DEFAULT_SOURCES_MARKER

    sources_label: str = DEFAULT_SOURCES_LABEL

    sources_handling: Literal["lookahead", "paragraph"] = "lookahead"

    # ── Thematic breaks ─────────────────────────────────────────────────
    thematic_break: Literal["skip", "divider"] = "skip"

    # ── Lists ───────────────────────────────────────────────────────────
    bullet: str = "• "

    indent_unit: str = "  "

    max_list_depth: int = 16

    lists: ListOptions = field(default_factory=ListOptions)

    # ── Observability ──────────────────────────────────────────────────
    metrics: MetricsHook | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_ast: bool = False

    debug_dump_payload: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.h2_style not in ("header", "section"):
            raise ValueError(f"h2_style must be 'header' or 'section', got {self.h2_style!r}")
        if self.paragraph_mode not in ("raw", "mrkdwn"):
            raise ValueError(f"paragraph_mode must be 'raw' or 'mrkdwn', got {self.paragraph_mode!r}")
        if self.sources_handling not in ("lookahead", "paragraph"):
            raise ValueError(
                f"sources_handling must be 'lookahead' or 'paragraph', got {self.sources_handling!r}"
            )
        if self.thematic_break not in ("skip", "divider"):
            raise ValueError(f"thematic_break must be 'skip' or 'divider', got {self.thematic_break!r}")
        if not self.sources_marker.strip():
            raise ValueError("sources_marker must not be empty")
        if not self.bullet:
            raise ValueError("bullet must not be empty")
        if self.max_list_depth < 1:
            raise ValueError(f"max_list_depth must be >= 1, got {self.max_list_depth}")
