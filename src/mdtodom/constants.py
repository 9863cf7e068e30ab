#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for mdtodom.

This module centralizes the literal types, defaults and security tables used
across the package.

Constants are organized by category:
1. Type Definitions - Literal types for option values
2. Rendering Defaults - Default option values for the DOM renderer
3. Security Constants - Raw HTML sanitization tables
4. Configuration - Config file discovery settings
5. Dependencies - Third-party packages required per component
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

RawHtmlMode = Literal["escape", "sanitize", "drop"]
ImageElementMode = Literal["img", "object"]

RAW_HTML_MODES = ("escape", "sanitize", "drop")
IMAGE_ELEMENT_MODES = ("img", "object")

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_RAW_HTML_MODE: RawHtmlMode = "escape"  # Inert by default
DEFAULT_IMAGE_ELEMENT: ImageElementMode = "img"
DEFAULT_HEADING_IDS = True
DEFAULT_FALLBACK_TAG = "span"
DEFAULT_STRICT_TRAVERSAL = True

# Attribute carrying the image destination for each image element mode
IMAGE_SOURCE_ATTRIBUTES: dict[str, str] = {"img": "src", "object": "data"}

SOFT_BREAK_TEXT = "\n"

# =============================================================================
# Security Constants
# =============================================================================

# Elements that can run script or submit data; removed from inserted raw HTML
# together with their content. svg and math are foreign content whose
# animation elements can rewrite attributes to script URLs.
DANGEROUS_HTML_ELEMENTS = frozenset(
    {
        "script",
        "style",
        "object",
        "embed",
        "form",
        "input",
        "iframe",
        "svg",
        "math",
        "animate",
        "animatemotion",
        "animatetransform",
        "set",
    }
)

DANGEROUS_HTML_ATTRIBUTES = frozenset(
    {
        "onclick",
        "onload",
        "onerror",
        "onmouseover",
        "onfocus",
        "onblur",
        "onbeforeunload",
        "onunload",
        "onchange",
        "oninput",
        "onsubmit",
        "onkeydown",
        "onkeyup",
        "onanimationstart",
        "ontoggle",
        "formaction",
        "srcdoc",
    }
)

URL_ATTRIBUTES = frozenset(
    {"href", "src", "action", "formaction", "data", "poster", "xlink:href", "values", "to", "from", "by"}
)

DANGEROUS_SCHEMES = (
    "javascript:",
    "vbscript:",
    "data:text/html",
    "data:text/javascript",
    "data:application/javascript",
    "data:application/x-javascript",
    "data:image/svg+xml",
)

# Allowlist applied by bleach to sanitized raw HTML
SANITIZE_ALLOWED_TAGS = frozenset(
    {
        "a",
        "abbr",
        "b",
        "blockquote",
        "br",
        "caption",
        "code",
        "dd",
        "del",
        "details",
        "div",
        "dl",
        "dt",
        "em",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "hr",
        "i",
        "img",
        "ins",
        "kbd",
        "li",
        "ol",
        "p",
        "pre",
        "s",
        "small",
        "span",
        "strong",
        "sub",
        "summary",
        "sup",
        "table",
        "tbody",
        "td",
        "tfoot",
        "th",
        "thead",
        "tr",
        "u",
        "ul",
    }
)

SANITIZE_ALLOWED_ATTRIBUTES: dict[str, frozenset[str]] = {
    "a": frozenset({"href", "title", "rel"}),
    "img": frozenset({"src", "alt", "title", "width", "height"}),
    "abbr": frozenset({"title"}),
    "td": frozenset({"colspan", "rowspan", "align"}),
    "th": frozenset({"colspan", "rowspan", "align", "scope"}),
    "ol": frozenset({"start", "type"}),
    "*": frozenset({"class", "id", "style"}),
}

SANITIZE_ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto", "ftp"})

SANITIZE_ALLOWED_CSS_PROPERTIES = frozenset(
    {
        "background-color",
        "border",
        "color",
        "font-family",
        "font-size",
        "font-style",
        "font-weight",
        "height",
        "line-height",
        "margin",
        "padding",
        "text-align",
        "text-decoration",
        "vertical-align",
        "width",
    }
)

# =============================================================================
# Configuration
# =============================================================================

CONFIG_ENV_VAR = "MDTODOM_CONFIG"
CONFIG_FILENAMES = (".mdtodom.toml", ".mdtodom.yaml", ".mdtodom.yml", ".mdtodom.json")
PYPROJECT_TOOL_SECTION = "mdtodom"

DEFAULT_WELCOME_PAGE = "welcome.md"

# =============================================================================
# Dependencies
# =============================================================================

DEPS_MARKDOWN = [("mistune", "mistune")]
DEPS_HTML = [("beautifulsoup4", "bs4")]
DEPS_SANITIZE = [("beautifulsoup4", "bs4"), ("bleach", "bleach"), ("tinycss2", "tinycss2")]
