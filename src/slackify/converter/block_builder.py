"""Convert normalized AST tokens to Slack Block Kit blocks.

Top-level token handling:

- heading -> header / divider + header / indented bold section (headings.py)
- paragraph -> section, or nothing when empty (paragraphs.py)
- block_quote -> quoted sections (paragraphs.py)
- list -> one flattened section (lists.py)
- block_code -> fenced section (paragraphs.py)
- table -> fenced grid section (tables.py)
- thematic_break -> nothing or divider, per ``config.thematic_break``
- html_block -> one image block per ``<img>`` tag (html.py)
- blank_line -> nothing

A paragraph equal to the sources marker is handled by the assembler
itself: it becomes divider + header, and a list that follows (optionally
after one blank line) is consumed together with it.
"""

from __future__ import annotations

from collections.abc import Callable as _Callable

from slackify.blocks import divider, header
from slackify.config import SlackifyConfig
from slackify.converter.context import BuildContext
from slackify.converter.headings import build_heading
from slackify.converter.html import build_html_block
from slackify.converter.lists import build_list
from slackify.converter.paragraphs import (
    build_block_quote,
    build_code_block,
    build_paragraph,
    is_sources_marker,
)
from slackify.converter.tables import build_table
from slackify.models import ConversionWarning

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def build_blocks(
    tokens: list[dict],
    config: SlackifyConfig,
) -> tuple[list[dict], list[ConversionWarning]]:
    """Convert normalized AST tokens to Block Kit block dicts.

    Parameters
    ----------
    tokens:
        Top-level canonical tokens from :class:`ASTNormalizer`.
    config:
        Converter configuration.

    Returns
    -------
    tuple[list[dict], list[ConversionWarning]]
        (blocks, warnings)
    """
    ctx = BuildContext(config)
    blocks: list[dict] = []
    i = 0

    while i < len(tokens):
        token = tokens[i]

        if config.sources_handling == "lookahead" and is_sources_marker(token, config):
            blocks.append(divider())
            blocks.append(header(config.sources_label))

            next_index = i + 1
            if next_index < len(tokens) and tokens[next_index].get("type") == "blank_line":
                next_index += 1

            if next_index < len(tokens) and tokens[next_index].get("type") == "list":
                blocks.extend(build_list(tokens[next_index], ctx))
                i = next_index + 1
            else:
                i += 1
            continue

        blocks.extend(process_token(token, ctx))
        i += 1

    return blocks, ctx.warnings


# ---------------------------------------------------------------------------
# Token dispatch
# ---------------------------------------------------------------------------

def process_token(token: dict, ctx: BuildContext) -> list[dict]:
    """Convert a single top-level token; unknown kinds yield no blocks."""
    token_type = token.get("type", "")
    handler = _BLOCK_HANDLERS.get(token_type)
    if handler is not None:
        return handler(token, ctx)
    if token_type:
        ctx.add_warning(
            "UNKNOWN_TOKEN",
            f"Unknown token type '{token_type}' was skipped.",
        )
    return []


def _build_heading(token: dict, ctx: BuildContext) -> list[dict]:
    return build_heading(token, ctx.config)


def _build_thematic_break(token: dict, ctx: BuildContext) -> list[dict]:
    if ctx.config.thematic_break == "divider":
        return [divider()]
    return []


def _skip(token: dict, ctx: BuildContext) -> list[dict]:
    return []


_BlockHandler = _Callable[[dict, BuildContext], list[dict]]

_BLOCK_HANDLERS: dict[str, _BlockHandler] = {
    "heading": _build_heading,
    "paragraph": build_paragraph,
    "block_quote": build_block_quote,
    "list": build_list,
    "block_code": build_code_block,
    "table": build_table,
    "thematic_break": _build_thematic_break,
    "html_block": build_html_block,
    "blank_line": _skip,
}
