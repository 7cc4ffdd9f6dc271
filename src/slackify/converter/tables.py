"""Table conversion: Markdown table AST to a fenced mrkdwn grid.

Block Kit has no table block, so a table renders as monospace text inside
one section::

    ```
    | Name | Qty |
    | --- | --- |
    | apple | 3 |
    ```

Column widths are not aligned.  The normalized table token looks like::

    {
        "type": "table",
        "children": [
            {"type": "table_head", "children": [table_cell, ...]},
            {"type": "table_body", "children": [
                {"type": "table_row", "children": [table_cell, ...]},
                ...
            ]},
        ],
    }

where every ``table_cell`` holds inline tokens.
"""

from __future__ import annotations

from typing import Any

from slackify.blocks import section
from slackify.converter.context import BuildContext
from slackify.converter.mrkdwn import render_cell_text


def build_table(token: dict[str, Any], ctx: BuildContext) -> list[dict]:
    """Convert a table token to exactly one section block."""
    rows = "\n".join(table_rows(token))
    return [section(f"```\n{rows}\n```")]


def table_rows(token: dict[str, Any]) -> list[str]:
    """Return the grid lines: header, ``---`` separator, then body rows."""
    lines: list[str] = []

    for child in token.get("children", []):
        child_type = child.get("type", "")

        if child_type == "table_head":
            cells = _cells_to_text(child.get("children", []))
            lines.append(_between_pipes(cells))
            lines.append(_between_pipes(["---"] * len(cells)))

        elif child_type == "table_body":
            for row in child.get("children", []):
                if row.get("type") == "table_row":
                    lines.append(_between_pipes(_cells_to_text(row.get("children", []))))

    return lines


def _cells_to_text(cells: list[dict[str, Any]]) -> list[str]:
    """Render each cell; the inline children of a cell are joined by a space."""
    return [
        " ".join(render_cell_text(child) for child in cell.get("children", []))
        for cell in cells
        if cell.get("type") == "table_cell"
    ]


def _between_pipes(cells: list[str]) -> str:
    return f"| {' | '.join(cells)} |"
