#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/__init__.py
"""mdtodom - render parsed Markdown into a document object model.

mdtodom walks a parsed Markdown tree once and builds the matching HTML element
tree through an output document. Every source node is mapped to an output
element (headings, paragraphs, lists, links, images, code, ...), nesting is
rebuilt with an explicit ancestor stack, and two node types are finalized
when they close: headings get an ``id`` derived from their text and images
get their description flattened into ``alt``.

Raw HTML found in the Markdown never becomes executable markup: by default it
is inserted as text, and it can instead be sanitized or dropped.

Requirements
------------
- Python 3.10+
- mistune 3 for parsing Markdown, BeautifulSoup for the default output document

Examples
--------
Render Markdown to an HTML string:

    >>> from mdtodom import render_to_string
    >>> html = render_to_string("# Title\\n\\nHello *world*")

Render a hand-built tree into an existing page element:

    >>> from mdtodom import DOMRenderer, SoupDocument
    >>> from mdtodom.ast import Document, Paragraph, Text
    >>> page = SoupDocument.from_markup('<main id="mdview"></main>')
    >>> container = page.get_element_by_id("mdview")
    >>> _ = DOMRenderer(page).render(Document(children=[Paragraph(children=[Text("hi")])]), container)

"""

__version__ = "1.0.0"

from mdtodom.api import render, render_markdown, render_to_string
from mdtodom.dom import DocumentTarget, SoupDocument
from mdtodom.exceptions import (
    ConfigError,
    DependencyError,
    InvalidOptionsError,
    MdToDomError,
    ParsingError,
    RenderingError,
    TraversalError,
    UnbalancedTraversalError,
    ValidationError,
)
from mdtodom.options import DomRendererOptions, MarkdownParserOptions
from mdtodom.parsers import MarkdownParser, parse_markdown
from mdtodom.renderer import AncestorStack, DOMRenderer
from mdtodom.traversal import TraversalEvent, TreeIterator, iter_events

__all__ = [
    "__version__",
    # Rendering
    "render",
    "render_markdown",
    "render_to_string",
    "DOMRenderer",
    "AncestorStack",
    # Traversal
    "TraversalEvent",
    "TreeIterator",
    "iter_events",
    # Output documents
    "DocumentTarget",
    "SoupDocument",
    # Parsing
    "MarkdownParser",
    "parse_markdown",
    # Options
    "DomRendererOptions",
    "MarkdownParserOptions",
    # Exceptions
    "MdToDomError",
    "ValidationError",
    "InvalidOptionsError",
    "ConfigError",
    "ParsingError",
    "RenderingError",
    "TraversalError",
    "UnbalancedTraversalError",
    "DependencyError",
]
