"""Full Markdown-to-Block-Kit conversion pipeline.

:class:`MarkdownToSlackConverter` orchestrates three stages:

1. **Parse**: Mistune parses raw Markdown into an AST.
2. **Normalize**: :class:`ASTNormalizer` maps token types to canonical
   names and rebuilds raw source text.
3. **Build**: :func:`build_blocks` converts normalized tokens into Block
   Kit block dicts, collecting :class:`ConversionWarning` along the way.
"""

from __future__ import annotations

import json
import logging
import sys
import time

from slackify.config import SlackifyConfig
from slackify.converter.ast_normalizer import ASTNormalizer
from slackify.converter.block_builder import build_blocks
from slackify.models import ConversionResult
from slackify.observability import NoopMetricsHook, get_logger, log_event

log = get_logger("slackify.converter")


class MarkdownToSlackConverter:
    """Convert Markdown text to Slack Block Kit blocks.

    Parameters
    ----------
    config:
        Converter configuration.  Defaults to ``SlackifyConfig()``.

    Examples
    --------
    >>> converter = MarkdownToSlackConverter()
    >>> result = converter.convert("# Hello\\n\\nWorld")
    >>> [b["type"] for b in result.blocks]
    ['header', 'section']
    """

    def __init__(self, config: SlackifyConfig | None = None) -> None:
        self._config = config or SlackifyConfig()
        self._normalizer = ASTNormalizer()
        self._metrics = self._config.metrics or NoopMetricsHook()

    @property
    def config(self) -> SlackifyConfig:
        return self._config

    def convert(self, markdown: str) -> ConversionResult:
        """Full pipeline: parse -> normalize -> build blocks -> collect warnings."""
        start = time.monotonic()

        tokens = self._normalizer.parse(markdown)

        if self._config.debug_dump_ast:
            print(
                "[slackify] Normalized AST:",
                json.dumps(tokens, indent=2, ensure_ascii=False),
                file=sys.stderr,
            )

        blocks, warnings = build_blocks(tokens, self._config)

        if self._config.debug_dump_payload:
            print(
                "[slackify] Block Kit payload:",
                json.dumps({"blocks": blocks}, indent=2, ensure_ascii=False),
                file=sys.stderr,
            )

        elapsed_ms = (time.monotonic() - start) * 1000
        self._metrics.increment("slackify.conversions_total")
        for block in blocks:
            self._metrics.increment(
                "slackify.blocks_created_total", tags={"type": block["type"]},
            )
        for warning in warnings:
            self._metrics.increment(
                "slackify.conversion_warnings_total", tags={"code": warning.code},
            )
        self._metrics.timing("slackify.conversion_duration_ms", elapsed_ms)

        log_event(
            log,
            logging.DEBUG,
            "conversion complete",
            op="convert",
            blocks=len(blocks),
            warnings=len(warnings),
            duration_ms=round(elapsed_ms, 3),
        )

        return ConversionResult(blocks=blocks, warnings=warnings)


def markdown_to_blocks(markdown: str, config: SlackifyConfig | None = None) -> list[dict]:
    """Convert *markdown* and return only the blocks."""
    return MarkdownToSlackConverter(config).convert(markdown).blocks
