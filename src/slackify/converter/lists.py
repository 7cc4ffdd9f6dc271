"""Render Markdown lists as a single mrkdwn section.

Slack has no list block, so a list and all of its nested lists flatten
into one section of prefixed lines::

    • fruit
      • apple
      • pear
    • veg
    1. first
       continuation aligned under "first"

Rules:

* Unordered items use ``config.bullet``; ordered items use ``N. ``, counted
  from 1 within each list independently of sibling and parent lists.
* Every line of a list at nesting depth *d* starts with
  ``config.indent_unit * d``.
* Continuation lines of an item (multi-line paragraphs, code, quotes) are
  padded to the column where the item's first line content starts.
* Task items use ``config.lists.checkbox_prefix(checked)`` when set.
* An item with no content still renders its bare prefix.
"""

from __future__ import annotations

from slackify.blocks import block_text, section
from slackify.converter.context import BuildContext
from slackify.converter.mrkdwn import render_mrkdwn_all
from slackify.converter.paragraphs import build_block_quote, build_code_block, build_paragraph


def build_list(token: dict, ctx: BuildContext, depth: int = 0) -> list[dict]:
    """Convert a list token to exactly one section block."""
    return [section(render_list(token, ctx, depth))]


def render_list(token: dict, ctx: BuildContext, depth: int = 0) -> str:
    """Render a list token, nested lists included, to newline-joined lines."""
    config = ctx.config
    ordered = token.get("attrs", {}).get("ordered", False)
    indent = config.indent_unit * depth
    ordinal = 0
    lines: list[str] = []

    for item in token.get("children", []):
        item_type = item.get("type", "")
        if item_type not in ("list_item", "task_list_item"):
            continue

        checkbox_prefix = config.lists.checkbox_prefix
        if item_type == "task_list_item" and checkbox_prefix is not None:
            marker = checkbox_prefix(item.get("attrs", {}).get("checked", False))
        elif ordered:
            ordinal += 1
            marker = f"{ordinal}. "
        else:
            marker = config.bullet

        prefix = indent + marker
        lines.append(_format_item(prefix, _item_parts(item, ctx, depth)))

    return "\n".join(lines)


def _item_parts(item: dict, ctx: BuildContext, depth: int) -> list[tuple[str, bool]]:
    """Render the children of one item.

    Returns ``(text, nested)`` pairs; ``nested`` marks text produced by a
    nested list, which already carries its own indentation.
    """
    parts: list[tuple[str, bool]] = []

    for child in item.get("children", []):
        child_type = child.get("type", "")
        text = ""
        nested = False

        if child_type == "paragraph":
            text = "".join(block_text(b) for b in build_paragraph(child, ctx))
        elif child_type == "block_text":
            text = render_mrkdwn_all(child.get("children", []))
        elif child_type == "list":
            if depth + 1 >= ctx.config.max_list_depth:
                ctx.add_warning(
                    "NESTING_DEPTH_EXCEEDED",
                    f"List nesting exceeds {ctx.config.max_list_depth} levels; "
                    "nested list dropped.",
                    depth=depth + 1,
                )
            else:
                text = render_list(child, ctx, depth + 1)
                nested = True
        elif child_type == "block_code":
            text = "".join(block_text(b) for b in build_code_block(child, ctx))
        elif child_type == "block_quote":
            text = "\n".join(block_text(b) for b in build_block_quote(child, ctx))

        if text:
            parts.append((text, nested))

    return parts


def _format_item(prefix: str, parts: list[tuple[str, bool]]) -> str:
    if not parts:
        return prefix

    pad = " " * len(prefix)
    lines: list[str] = []
    for text, nested in parts:
        for line in text.split("\n"):
            if not lines:
                lines.append(prefix + line)
            elif nested or not line:
                lines.append(line)
            else:
                lines.append(pad + line)
    return "\n".join(lines)
