#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/dom/soup.py
"""BeautifulSoup-backed output document.

SoupDocument implements the DocumentTarget protocol on top of ``bs4``: new
elements come from ``BeautifulSoup.new_tag``, text nodes are
``NavigableString`` instances (escaped on serialization), and fragments are
empty ``BeautifulSoup`` objects.

Examples
--------
    >>> from mdtodom.dom.soup import SoupDocument
    >>> document = SoupDocument()
    >>> root = document.create_fragment()
    >>> p = document.append_child(root, document.create_element("p"))
    >>> _ = document.append_child(p, document.create_text("a < b"))
    >>> document.serialize(root)
    '<p>a &lt; b</p>'

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from mdtodom.constants import DEPS_HTML
from mdtodom.exceptions import ValidationError
from mdtodom.utils.decorators import requires_dependencies
from mdtodom.utils.html_sanitizer import sanitize_html_string

if TYPE_CHECKING:
    from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

PARSER_FEATURES = "html.parser"


class SoupDocument:
    """Output document whose nodes are BeautifulSoup tags and strings.

    Parameters
    ----------
    soup : BeautifulSoup, optional
        Existing document to create nodes for (e.g. a page template). A new
        empty document is used when omitted.

    """

    @requires_dependencies("DOM output", DEPS_HTML)
    def __init__(self, soup: Optional[BeautifulSoup] = None):
        """Initialize the document."""
        from bs4 import BeautifulSoup

        self.soup = soup if soup is not None else BeautifulSoup("", PARSER_FEATURES)

    @classmethod
    def from_markup(cls, markup: str) -> SoupDocument:
        """Create a document by parsing an existing HTML page.

        Parameters
        ----------
        markup : str
            HTML of the page

        Returns
        -------
        SoupDocument
            Document wrapping the parsed page

        """
        from bs4 import BeautifulSoup

        return cls(BeautifulSoup(markup, PARSER_FEATURES))

    def get_element_by_id(self, element_id: str) -> Optional[Tag]:
        """Return the element of the wrapped page with the given id, if any."""
        return self.soup.find(id=element_id)

    def create_fragment(self) -> BeautifulSoup:
        from bs4 import BeautifulSoup

        return BeautifulSoup("", PARSER_FEATURES)

    def create_element(self, tag: str) -> Tag:
        return self.soup.new_tag(tag)

    def create_text(self, content: str) -> Any:
        from bs4 import NavigableString

        return NavigableString(content)

    def append_child(self, parent: Any, child: Any) -> Any:
        if not hasattr(parent, "append"):
            raise ValidationError(
                f"Cannot append to a {type(parent).__name__} node", parameter_name="parent", parameter_value=parent
            )
        parent.append(child)
        return child

    def set_attribute(self, element: Tag, name: str, value: str) -> None:
        element[name] = str(value)

    def get_attribute(self, element: Tag, name: str) -> Optional[str]:
        value = element.get(name)
        if isinstance(value, list):
            # Multi-valued attributes such as class
            return " ".join(value)
        return value

    def text_content(self, node: Any) -> str:
        if hasattr(node, "get_text"):
            return node.get_text()
        return str(node)

    def remove_children(self, element: Tag) -> None:
        element.clear()

    def insert_markup(self, parent: Any, markup: str) -> None:
        """Sanitize ``markup`` with an allowlist, parse it and append the result.

        Parameters
        ----------
        parent : Tag
            Node to append the parsed markup to
        markup : str
            Untrusted HTML

        """
        from bs4 import BeautifulSoup

        fragment = BeautifulSoup(sanitize_html_string(markup), PARSER_FEATURES)
        for child in list(fragment.contents):
            parent.append(child.extract())

    def serialize(self, node: Any) -> str:
        from bs4 import NavigableString

        if isinstance(node, NavigableString):
            return node.output_ready()
        return node.decode()


__all__ = ["SoupDocument", "PARSER_FEATURES"]
