#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_paths.py
"""Unit tests for view path resolution."""

import pytest

from mdtodom.utils.paths import is_safe_view_path, resolve_view_path


@pytest.mark.unit
class TestViewPaths:
    """Tests for resolve_view_path and is_safe_view_path."""

    @pytest.mark.parametrize("path", ["a.md", "docs/a.md", "docs/v1.2/a.md", "a..b.md"])
    def test_safe_paths(self, path):
        """Test ordinary relative paths are accepted."""
        assert is_safe_view_path(path)
        assert resolve_view_path(path) == path

    @pytest.mark.parametrize("path", [".env", "../up.md", "docs/../../up.md", "docs/.git/config", "./a.md"])
    def test_refused_paths(self, path):
        """Test dot-prefixed segments fall back to the welcome page."""
        assert not is_safe_view_path(path)
        assert resolve_view_path(path) == "welcome.md"

    def test_view_prefix_stripped(self):
        """Test the view= prefix is removed."""
        assert resolve_view_path("view=docs/a.md") == "docs/a.md"

    def test_view_prefix_still_checked(self):
        """Test the path after the prefix is checked."""
        assert resolve_view_path("view=../a.md") == "welcome.md"

    @pytest.mark.parametrize("path", [None, "", "view="])
    def test_empty_request(self, path):
        """Test missing paths show the welcome page."""
        assert resolve_view_path(path, welcome_page="index.md") == "index.md"
