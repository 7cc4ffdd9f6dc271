"""Shared test fixtures for the slackify test suite."""

from __future__ import annotations

import pytest

from slackify.config import SlackifyConfig
from slackify.converter.ast_normalizer import ASTNormalizer
from slackify.converter.context import BuildContext
from slackify.converter.md_to_slack import MarkdownToSlackConverter


@pytest.fixture
def config() -> SlackifyConfig:
    """Default converter configuration."""
    return SlackifyConfig()


@pytest.fixture
def converter(config: SlackifyConfig) -> MarkdownToSlackConverter:
    """Markdown-to-Slack converter using the default config."""
    return MarkdownToSlackConverter(config)


@pytest.fixture
def normalizer() -> ASTNormalizer:
    return ASTNormalizer()


@pytest.fixture
def ctx(config: SlackifyConfig) -> BuildContext:
    """Fresh build context for calling converters directly."""
    return BuildContext(config)
