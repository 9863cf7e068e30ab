#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/utils/html_sanitizer.py
"""HTML sanitization utilities for inserting raw HTML as inert markup.

Raw HTML blocks in a Markdown document are untrusted. When the renderer is
configured with ``raw_html_mode="sanitize"`` the markup goes through
``sanitize_html_string`` before it is attached to the output tree:

1. BeautifulSoup pass (``sanitize_fragment``): script-capable elements
   (script, style, iframe, object, svg, math, ...) are removed together with
   their content; comments, CDATA sections, declarations and processing
   instructions are removed; event handler attributes and URL attributes
   using dangerous schemes are removed
2. bleach pass: the result is re-parsed the way a browser parses it and
   reduced to an allowlist of tags, attributes, URL protocols and CSS
   properties; comments are stripped

Parsing with BeautifulSoup or bleach never executes anything, and the cleaned
markup contains no element, attribute or markup declaration that a browser
would run.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from mdtodom.constants import (
    DANGEROUS_HTML_ATTRIBUTES,
    DANGEROUS_HTML_ELEMENTS,
    DANGEROUS_SCHEMES,
    DEPS_SANITIZE,
    SANITIZE_ALLOWED_ATTRIBUTES,
    SANITIZE_ALLOWED_CSS_PROPERTIES,
    SANITIZE_ALLOWED_PROTOCOLS,
    SANITIZE_ALLOWED_TAGS,
    URL_ATTRIBUTES,
)
from mdtodom.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

# Browsers ignore ASCII whitespace and control characters inside a URL scheme
_SCHEME_NOISE = re.compile(r"[\x00-\x20\x7f]+")


def is_event_handler_attribute(attr_name: str) -> bool:
    """Check if attribute name is a JavaScript event handler.

    Parameters
    ----------
    attr_name : str
        Attribute name to check

    Returns
    -------
    bool
        True if attribute is an event handler

    Examples
    --------
    >>> is_event_handler_attribute("onclick")
    True
    >>> is_event_handler_attribute("one-time")
    False

    """
    attr_name_lower = attr_name.lower()

    if attr_name_lower in DANGEROUS_HTML_ATTRIBUTES:
        return True

    if not (attr_name_lower.startswith("on") and len(attr_name_lower) > 2):
        return False

    # Event handlers are "on" followed by letters only: onclick, onload, onerror
    return attr_name_lower[2:].isalpha()


def is_url_safe(url: str) -> bool:
    """Check if a URL is safe (no dangerous schemes).

    Parameters
    ----------
    url : str
        URL to validate

    Returns
    -------
    bool
        True if URL is safe, False if it uses a dangerous scheme

    Examples
    --------
    >>> is_url_safe("https://example.com")
    True

    >>> is_url_safe("java\\tscript:alert('xss')")
    False

    >>> is_url_safe("pic.png")
    True

    """
    if not url or not url.strip():
        return True

    normalized = _SCHEME_NOISE.sub("", url).lower()
    return not normalized.startswith(DANGEROUS_SCHEMES)


def is_element_safe(element: Any) -> bool:
    """Check if a BeautifulSoup element may be kept at all.

    Parameters
    ----------
    element : Any
        BeautifulSoup element to check

    Returns
    -------
    bool
        False for script-capable elements, True otherwise

    """
    name = getattr(element, "name", None)
    if name is None:
        return True
    return name.lower() not in DANGEROUS_HTML_ELEMENTS


def sanitize_attributes(element: Any) -> list[str]:
    """Remove dangerous attributes from a BeautifulSoup tag in place.

    Parameters
    ----------
    element : Any
        BeautifulSoup tag

    Returns
    -------
    list of str
        Names of the removed attributes

    """
    removed = []
    for attr_name, attr_value in list(element.attrs.items()):
        if is_event_handler_attribute(attr_name):
            removed.append(attr_name)
        elif attr_name.lower() in URL_ATTRIBUTES and isinstance(attr_value, str) and not is_url_safe(attr_value):
            removed.append(attr_name)
        elif attr_name.lower() == "style" and isinstance(attr_value, str) and not is_style_safe(attr_value):
            removed.append(attr_name)

    for attr_name in removed:
        del element[attr_name]
    return removed


def is_style_safe(style_value: str) -> bool:
    """Check if a CSS style attribute value is safe.

    Examples
    --------
    >>> is_style_safe("color: red")
    True
    >>> is_style_safe("background: url(javascript:alert(1))")
    False

    """
    style_lower = style_value.lower()
    if "expression(" in style_lower or "expression (" in style_lower:
        return False

    for match in re.finditer(r'url\s*\(\s*["\']?\s*([^)"\']+)', style_lower):
        if not is_url_safe(match.group(1).strip()):
            return False
    return True


def sanitize_fragment(fragment: Any) -> Any:
    """Remove script-capable content from a parsed BeautifulSoup fragment.

    Comments, CDATA sections, declarations and processing instructions are
    removed as well: they are written back out verbatim on serialization,
    and a browser may parse them differently than ``html.parser`` did.

    Parameters
    ----------
    fragment : bs4.BeautifulSoup or bs4.Tag
        Parsed markup; modified in place

    Returns
    -------
    bs4.BeautifulSoup or bs4.Tag
        The same fragment, cleaned

    Examples
    --------
    >>> from bs4 import BeautifulSoup
    >>> soup = BeautifulSoup('<p onclick="x()">Hi</p><!-- x --><script>evil()</script>', "html.parser")
    >>> str(sanitize_fragment(soup))
    '<p>Hi</p>'

    """
    from bs4.element import PreformattedString

    for node in list(fragment.find_all(string=lambda s: isinstance(s, PreformattedString))):
        logger.debug("Removed %s from raw HTML", type(node).__name__)
        node.extract()

    for element in list(fragment.find_all(True)):
        if element.decomposed:
            continue
        if not is_element_safe(element):
            logger.debug("Removed <%s> element from raw HTML", element.name)
            element.decompose()
            continue
        removed = sanitize_attributes(element)
        if removed:
            logger.debug("Removed attributes %s from <%s> in raw HTML", removed, element.name)
    return fragment


def _is_allowed_attribute(tag: str, name: str, value: str) -> bool:
    allowed = SANITIZE_ALLOWED_ATTRIBUTES.get(tag, frozenset()) | SANITIZE_ALLOWED_ATTRIBUTES["*"]
    if name not in allowed:
        return False
    if name == "style":
        return is_style_safe(value)
    return True


@requires_dependencies("raw HTML sanitizer", DEPS_SANITIZE)
def sanitize_html_string(markup: str) -> str:
    """Sanitize untrusted HTML for insertion into the output document.

    Parameters
    ----------
    markup : str
        Untrusted HTML

    Returns
    -------
    str
        HTML reduced to allowlisted tags, attributes, URL protocols and CSS
        properties, without comments or other markup declarations

    Raises
    ------
    DependencyError
        If bleach (with its CSS support) or BeautifulSoup is not installed

    Examples
    --------
    >>> sanitize_html_string('<p onclick="x()">Hi <b>there</b></p><script>evil()</script>')
    '<p>Hi <b>there</b></p>'

    """
    import bleach
    from bleach.css_sanitizer import CSSSanitizer
    from bs4 import BeautifulSoup

    # Script-capable elements go with their content; bleach alone would keep the text
    prepared = str(sanitize_fragment(BeautifulSoup(markup, "html.parser")))

    return bleach.clean(
        prepared,
        tags=SANITIZE_ALLOWED_TAGS,
        attributes=_is_allowed_attribute,
        protocols=SANITIZE_ALLOWED_PROTOCOLS,
        css_sanitizer=CSSSanitizer(allowed_css_properties=SANITIZE_ALLOWED_CSS_PROPERTIES),
        strip=True,
        strip_comments=True,
    )


__all__ = [
    "is_element_safe",
    "is_event_handler_attribute",
    "is_style_safe",
    "is_url_safe",
    "sanitize_attributes",
    "sanitize_fragment",
    "sanitize_html_string",
]
