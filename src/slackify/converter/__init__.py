"""Markdown → Slack Block Kit conversion pipeline.

Public API:

- :class:`MarkdownToSlackConverter`: Markdown → Block Kit blocks.
- :func:`markdown_to_blocks`: shortcut returning only the blocks.
- :class:`ASTNormalizer`: parse and normalize Markdown to canonical AST.
- :func:`build_blocks`: convert normalized AST to Block Kit dicts.
- :func:`render_plain` / :func:`render_mrkdwn`: inline renderers.
- :func:`append_mrkdwn` / :func:`fold_phrasing`: section merge fold.
"""

from slackify.converter.ast_normalizer import ASTNormalizer
from slackify.converter.block_builder import build_blocks
from slackify.converter.md_to_slack import MarkdownToSlackConverter, markdown_to_blocks
from slackify.converter.mrkdwn import append_mrkdwn, fold_phrasing, render_mrkdwn, render_plain

__all__ = [
    "ASTNormalizer",
    "MarkdownToSlackConverter",
    "append_mrkdwn",
    "build_blocks",
    "fold_phrasing",
    "markdown_to_blocks",
    "render_mrkdwn",
    "render_plain",
]
