"""Tests for SlackifyConfig defaults and validation."""

from __future__ import annotations

import pytest

from slackify.config import (
    DEFAULT_SOURCES_LABEL,
    DEFAULT_SOURCES_MARKER,
    ListOptions,
    SlackifyConfig,
)


class TestDefaults:

    def test_canonical_rendering_choices(self):
        config = SlackifyConfig()
        assert config.h1_prefix == "🔎 "
        assert config.h2_style == "header"
        assert config.heading_glyph == "›"
        assert config.paragraph_mode == "raw"
        assert config.sources_handling == "lookahead"
        assert config.thematic_break == "skip"
        assert config.bullet == "• "
        assert config.indent_unit == "  "

    def test_sources_defaults(self):
        config = SlackifyConfig()
        assert config.sources_marker == DEFAULT_SOURCES_MARKER == "**출처:**"
        assert config.sources_label == DEFAULT_SOURCES_LABEL == "출처"

    def test_list_options_not_shared(self):
        first, second = SlackifyConfig(), SlackifyConfig()
        assert first.lists is not second.lists
        assert first.lists == ListOptions()
        assert first.lists.checkbox_prefix is None


class TestValidation:

    @pytest.mark.parametrize("field_name,value", [
        ("h2_style", "banner"),
        ("paragraph_mode", "html"),
        ("sources_handling", "both"),
        ("thematic_break", "rule"),
    ])
    def test_invalid_literal_rejected(self, field_name, value):
        with pytest.raises(ValueError, match=field_name):
            SlackifyConfig(**{field_name: value})

    def test_blank_sources_marker_rejected(self):
        with pytest.raises(ValueError, match="sources_marker"):
            SlackifyConfig(sources_marker="   ")

    def test_empty_bullet_rejected(self):
        with pytest.raises(ValueError, match="bullet"):
            SlackifyConfig(bullet="")

    @pytest.mark.parametrize("depth", [0, -1])
    def test_non_positive_depth_rejected(self, depth):
        with pytest.raises(ValueError, match="max_list_depth"):
            SlackifyConfig(max_list_depth=depth)

    def test_custom_values_accepted(self):
        config = SlackifyConfig(
            h1_prefix=None,
            h2_style="section",
            sources_marker="**Sources:**",
            sources_label="Sources",
            bullet="- ",
            indent_unit="    ",
            max_list_depth=1,
        )
        assert config.h1_prefix is None
        assert config.max_list_depth == 1


class TestMetricsField:

    def test_annotated_as_metrics_hook(self):
        assert SlackifyConfig.__dataclass_fields__["metrics"].type == "MetricsHook | None"

    def test_accepts_hook(self):
        from slackify.observability.metrics import MetricsHook, NoopMetricsHook

        config = SlackifyConfig(metrics=NoopMetricsHook())
        assert isinstance(config.metrics, MetricsHook)
