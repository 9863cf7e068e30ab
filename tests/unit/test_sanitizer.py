#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_sanitizer.py
"""Unit tests for raw HTML sanitization utilities."""

import pytest
from bs4 import BeautifulSoup

from mdtodom.utils.html_sanitizer import (
    is_element_safe,
    is_event_handler_attribute,
    is_style_safe,
    is_url_safe,
    sanitize_attributes,
    sanitize_fragment,
    sanitize_html_string,
)


def clean(markup: str) -> str:
    return str(sanitize_fragment(BeautifulSoup(markup, "html.parser")))


@pytest.mark.unit
@pytest.mark.security
class TestSanitizerPredicates:
    """Tests for the individual safety checks."""

    @pytest.mark.parametrize("name", ["onclick", "ONLOAD", "onerror", "onanimationstart", "srcdoc", "formaction"])
    def test_event_handlers_detected(self, name):
        """Test event handler and dangerous attributes are detected."""
        assert is_event_handler_attribute(name)

    @pytest.mark.parametrize("name", ["href", "class", "on", "one-time", "data-on"])
    def test_regular_attributes_pass(self, name):
        """Test ordinary attributes are not flagged."""
        assert not is_event_handler_attribute(name)

    @pytest.mark.parametrize(
        "url",
        [
            "javascript:alert(1)",
            "JAVASCRIPT:alert(1)",
            " javascript:alert(1)",
            "java\tscript:alert(1)",
            "vbscript:msgbox",
            "data:text/html;base64,PHNjcmlwdD4=",
            "data:image/svg+xml,<svg onload=alert(1)>",
        ],
    )
    def test_dangerous_urls(self, url):
        """Test dangerous schemes are rejected despite case and whitespace tricks."""
        assert not is_url_safe(url)

    @pytest.mark.parametrize("url", ["https://example.com", "/relative", "#anchor", "mailto:a@b.c", "", "pic.png"])
    def test_safe_urls(self, url):
        """Test ordinary URLs are accepted."""
        assert is_url_safe(url)

    def test_element_safety(self):
        """Test script-capable elements are flagged."""
        soup = BeautifulSoup("<script></script><IFRAME></IFRAME><p></p>", "html.parser")
        script, iframe, paragraph = soup.find_all(True)
        assert not is_element_safe(script)
        assert not is_element_safe(iframe)
        assert is_element_safe(paragraph)

    def test_style_safety(self):
        """Test CSS expressions and script URLs are flagged."""
        assert is_style_safe("color: red")
        assert not is_style_safe("width: expression(alert(1))")
        assert not is_style_safe("background: url('javascript:alert(1)')")

    def test_sanitize_attributes_reports_removed(self):
        """Test removed attribute names are returned."""
        tag = BeautifulSoup('<a href="javascript:x()" onclick="y()" title="t">z</a>', "html.parser").a
        assert sorted(sanitize_attributes(tag)) == ["href", "onclick"]
        assert tag.attrs == {"title": "t"}


@pytest.mark.unit
@pytest.mark.security
class TestSanitizeFragment:
    """Tests for sanitize_fragment."""

    def test_removes_script_and_content(self):
        """Test script elements are removed together with their content."""
        assert clean("<p>ok</p><script>evil()</script>") == "<p>ok</p>"

    def test_removes_nested_dangerous_elements(self):
        """Test dangerous elements nested in safe ones are removed."""
        assert clean("<div><span>a<iframe src='x'></iframe></span><style>*{}</style></div>") == (
            "<div><span>a</span></div>"
        )

    def test_removes_forms(self):
        """Test forms and inputs are removed."""
        assert clean("<form action='/x'><input name='a'/></form><b>b</b>") == "<b>b</b>"

    def test_keeps_safe_markup(self):
        """Test harmless markup survives unchanged."""
        markup = '<table><tr><td class="c">1</td></tr></table><a href="https://example.com">x</a>'
        assert clean(markup) == markup

    def test_strips_dangerous_attributes(self):
        """Test event handlers and script URLs are stripped from kept elements."""
        assert clean('<img src="javascript:x()" onerror="y()" alt="pic"/>') == '<img alt="pic"/>'

    def test_strips_dangerous_style(self):
        """Test dangerous inline styles are stripped."""
        assert clean('<p style="background:url(javascript:x())">p</p>') == "<p>p</p>"

    def test_removes_comments_and_declarations(self):
        """Test comments, CDATA, doctypes and processing instructions are removed."""
        assert clean("<!-- note --><!DOCTYPE html><?xml version='1.0'?><p>ok</p>") == "<p>ok</p>"

    def test_removes_svg_and_math(self):
        """Test foreign content is removed together with its children."""
        assert clean('<svg><set attributeName="href" to="javascript:x()"/></svg><math><mi>x</mi></math>b') == "b"


UNTRUSTED_MARKUP = [
    "<![CDATA[><img src=x onerror=alert(1)>]]>",
    "<!-- --!><img src=x onerror=alert(1)> -->",
    '<svg><animate attributeName="href" values="javascript:alert(1)"/><a><text>x</text></a></svg>',
    '<math><maction actiontype="statusline" xlink:href="javascript:alert(1)">x</maction></math>',
    "<?xml-stylesheet href='javascript:alert(1)'?><p>x</p>",
    '<a href="&#106;avascript:alert(1)">x</a>',
    "<p>ok</p><script>alert(1)</script>",
]


@pytest.mark.unit
@pytest.mark.security
class TestSanitizeHtmlString:
    """Tests for the allowlist sanitizer used for raw HTML insertion."""

    @pytest.mark.parametrize("markup", UNTRUSTED_MARKUP)
    def test_no_executable_content(self, markup):
        """Test the output carries no handler, script URL or markup declaration."""
        html = sanitize_html_string(markup)
        assert "onerror" not in html
        assert "javascript" not in html
        assert "<!" not in html
        assert "<?" not in html

    @pytest.mark.parametrize("markup", UNTRUSTED_MARKUP)
    def test_output_is_stable(self, markup):
        """Test re-parsing the output finds no element outside the allowlist."""
        soup = BeautifulSoup(sanitize_html_string(markup), "html.parser")
        names = {tag.name for tag in soup.find_all(True)}
        assert names <= {"a", "img", "p", "b"}
        assert all(not attr.startswith("on") for tag in soup.find_all(True) for attr in tag.attrs)

    def test_keeps_allowlisted_markup(self):
        """Test ordinary formatting survives."""
        markup = '<p class="note">Hi <b>there</b> <a href="https://example.com" title="t">x</a></p>'
        assert sanitize_html_string(markup) == markup

    def test_disallowed_tags_are_unwrapped(self):
        """Test unknown tags are stripped while their text is kept."""
        assert sanitize_html_string("<blink>hi</blink>") == "hi"

    def test_disallowed_protocol(self):
        """Test links with protocols outside the allowlist lose their target."""
        assert sanitize_html_string('<a href="tel:555">x</a>') == "<a>x</a>"

    def test_script_content_removed(self):
        """Test script text does not survive as page text."""
        assert sanitize_html_string("<p>ok</p><script>evil()</script>") == "<p>ok</p>"
