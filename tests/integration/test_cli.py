#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_cli.py
"""Integration tests for the mdtodom command-line viewer."""

import pytest

from mdtodom.cli import (
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    get_exit_code_for_exception,
    main,
    read_page,
)
from mdtodom.exceptions import DependencyError, ParsingError, TraversalError, ValidationError


@pytest.fixture
def site(tmp_path, monkeypatch, restore_root_logger):
    """Provide a working directory with a few pages and no configuration."""
    (tmp_path / "welcome.md").write_text("# Welcome\n")
    (tmp_path / "guide.md").write_text("# User Guide\n\n<script>x()</script>\n")
    (tmp_path / ".secret.md").write_text("# Secret\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MDTODOM_CONFIG", raising=False)
    return tmp_path


@pytest.mark.integration
@pytest.mark.cli
class TestViewer:
    """Tests for page selection and output."""

    def test_welcome_page_by_default(self, site, capsys):
        """Test the welcome page is shown when no path is given."""
        assert main(["--no-config"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == '<h1 id="welcome">Welcome</h1>\n'

    def test_view_prefix(self, site, capsys):
        """Test the view= prefix selects a page."""
        assert main(["view=guide.md", "--no-config"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert out.startswith('<h1 id="user-guide">User Guide</h1>')
        assert "&lt;script&gt;" in out

    def test_hidden_page_refused(self, site, capsys):
        """Test dot-prefixed paths fall back to the welcome page."""
        assert main([".secret.md", "--no-config"]) == EXIT_SUCCESS
        assert "Secret" not in capsys.readouterr().out

    def test_missing_page(self, site, capsys):
        """Test a missing page renders a status heading and fails."""
        assert main(["nope.md", "--no-config"]) == EXIT_FILE_ERROR
        assert capsys.readouterr().out == '<h1 id="404-not-found">404 Not Found</h1>\n'

    def test_custom_welcome_page(self, site, capsys):
        """Test the welcome page can be changed."""
        assert main(["--welcome-page", "guide.md", "--no-config"]) == EXIT_SUCCESS
        assert "User Guide" in capsys.readouterr().out

    def test_output_file(self, site, capsys):
        """Test output can be written to a file."""
        assert main(["guide.md", "-o", "out.html", "--raw-html", "drop", "--no-config"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == ""
        assert (site / "out.html").read_text() == '<h1 id="user-guide">User Guide</h1>'

    def test_no_heading_ids(self, site, capsys):
        """Test heading ids can be disabled from the command line."""
        assert main(["--no-heading-ids", "--no-config"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "<h1>Welcome</h1>\n"


@pytest.mark.integration
@pytest.mark.cli
class TestTemplate:
    """Tests for rendering into a page template."""

    def test_renders_into_container(self, site, capsys):
        """Test the page replaces the container's children."""
        (site / "page.html").write_text('<html><body><main id="mdview"><p>Loading...</p></main></body></html>')

        assert main(["--template", "page.html", "--no-config"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == (
            '<html><body><main id="mdview"><h1 id="welcome">Welcome</h1></main></body></html>\n'
        )

    def test_custom_container_id(self, site, capsys):
        """Test another container id can be chosen."""
        (site / "page.html").write_text('<div id="content"></div>')

        assert main(["--template", "page.html", "--container-id", "content", "--no-config"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == '<div id="content"><h1 id="welcome">Welcome</h1></div>\n'

    def test_missing_container(self, site, capsys):
        """Test a template without the container is a validation error."""
        (site / "page.html").write_text("<div></div>")

        assert main(["--template", "page.html", "--no-config"]) == EXIT_VALIDATION_ERROR
        assert "mdview" in capsys.readouterr().err

    def test_undecodable_template(self, site, capsys):
        """Test a template that is not UTF-8 is reported as a file error."""
        (site / "page.html").write_bytes(b'<div id="mdview">\xff\xfe</div>')

        assert main(["--template", "page.html", "--no-config"]) == EXIT_FILE_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error:")


@pytest.mark.integration
@pytest.mark.cli
class TestConfiguration:
    """Tests for configuration files on the command line."""

    def test_config_file_applied(self, site, capsys):
        """Test values from a discovered config file are used."""
        (site / ".mdtodom.toml").write_text('raw-html-mode = "sanitize"\nwelcome_page = "guide.md"\n')

        assert main([]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "User Guide" in out
        assert "script" not in out

    def test_flags_override_config(self, site, capsys):
        """Test command-line flags win over the config file."""
        (site / "config.json").write_text('{"raw_html_mode": "sanitize"}')

        assert main(["guide.md", "--config", "config.json", "--raw-html", "escape"]) == EXIT_SUCCESS
        assert "&lt;script&gt;" in capsys.readouterr().out

    def test_environment_config(self, site, capsys, monkeypatch):
        """Test MDTODOM_CONFIG names the config file."""
        (site / "env.yaml").write_text("heading_ids: false\n")
        monkeypatch.setenv("MDTODOM_CONFIG", str(site / "env.yaml"))

        assert main([]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "<h1>Welcome</h1>\n"

    def test_invalid_config(self, site, capsys):
        """Test an invalid config file is reported."""
        (site / "bad.toml").write_text('colour = "blue"\n')

        assert main(["--config", "bad.toml"]) == EXIT_VALIDATION_ERROR
        assert "colour" in capsys.readouterr().err

    def test_missing_config(self, site, capsys):
        """Test a missing config file is reported."""
        assert main(["--config", "missing.toml"]) == EXIT_VALIDATION_ERROR
        assert "does not exist" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.cli
class TestHelpers:
    """Tests for CLI helper functions."""

    def test_read_page_missing(self, tmp_path):
        """Test missing pages are replaced by a 404 heading."""
        assert read_page(str(tmp_path / "x.md")) == ("# 404 Not Found\n", False)

    def test_read_page_directory(self, tmp_path):
        """Test directories are treated as missing pages."""
        text, found = read_page(str(tmp_path))
        assert found is False
        assert text.startswith("# 40")

    def test_read_page(self, tmp_path):
        """Test existing pages are read."""
        page = tmp_path / "p.md"
        page.write_text("hi")
        assert read_page(str(page)) == ("hi", True)

    @pytest.mark.parametrize(
        "error, code",
        [
            (DependencyError("x", ["y"]), 2),
            (ValidationError("x"), 3),
            (ParsingError("x"), 6),
            (TraversalError("x"), 7),
            (RuntimeError("x"), 1),
        ],
    )
    def test_exit_codes(self, error, code):
        """Test exceptions map to exit codes."""
        assert get_exit_code_for_exception(error) == code
