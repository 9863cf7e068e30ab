#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_options.py
"""Unit tests for renderer and parser option dataclasses."""

from dataclasses import FrozenInstanceError

import pytest

from mdtodom.options import DomRendererOptions, MarkdownParserOptions


@pytest.mark.unit
class TestDomRendererOptions:
    """Tests for DomRendererOptions."""

    def test_defaults(self):
        """Test default option values."""
        options = DomRendererOptions()
        assert options.raw_html_mode == "escape"
        assert options.image_element == "img"
        assert options.heading_ids is True
        assert options.fallback_tag == "span"
        assert options.strict is True

    def test_frozen(self):
        """Test options cannot be modified in place."""
        with pytest.raises(FrozenInstanceError):
            DomRendererOptions().raw_html_mode = "drop"

    def test_create_updated(self):
        """Test create_updated returns a modified copy."""
        original = DomRendererOptions()
        updated = original.create_updated(raw_html_mode="sanitize", image_element="object")
        assert updated.raw_html_mode == "sanitize"
        assert updated.image_element == "object"
        assert original.raw_html_mode == "escape"

    def test_create_updated_validates(self):
        """Test copies are validated like new instances."""
        with pytest.raises(ValueError):
            DomRendererOptions().create_updated(raw_html_mode="passthrough")

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"raw_html_mode": "raw"},
            {"image_element": "picture"},
            {"fallback_tag": ""},
            {"fallback_tag": "my tag"},
            {"fallback_tag": "<div>"},
        ],
    )
    def test_invalid_values(self, kwargs):
        """Test invalid values are rejected."""
        with pytest.raises(ValueError):
            DomRendererOptions(**kwargs)

    def test_field_names(self):
        """Test field names are listed for configuration lookup."""
        assert DomRendererOptions.field_names() == {
            "raw_html_mode",
            "image_element",
            "heading_ids",
            "fallback_tag",
            "strict",
        }

    def test_help_metadata(self):
        """Test every field documents itself for the command line."""
        for field in DomRendererOptions.__dataclass_fields__.values():
            assert field.metadata["help"]


@pytest.mark.unit
class TestMarkdownParserOptions:
    """Tests for MarkdownParserOptions."""

    def test_defaults(self):
        """Test no plugins are enabled by default."""
        assert MarkdownParserOptions().plugins == ()

    def test_list_converted_to_tuple(self):
        """Test plugin lists are stored as tuples."""
        options = MarkdownParserOptions(plugins=["table", "strikethrough"])
        assert options.plugins == ("table", "strikethrough")
        hash(options)

    @pytest.mark.parametrize("plugins", [("",), (3,)])
    def test_invalid_plugin_names(self, plugins):
        """Test empty or non-string plugin names are rejected."""
        with pytest.raises(ValueError):
            MarkdownParserOptions(plugins=plugins)
