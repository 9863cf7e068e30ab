#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/api.py
"""High-level entry points for rendering Markdown into an output document.

Examples
--------
    >>> from mdtodom import render_to_string
    >>> render_to_string("# Hello World\\n\\nSome *text*.")
    '<h1 id="hello-world">Hello World</h1><p>Some <em>text</em>.</p>'

"""

from __future__ import annotations

import logging
from typing import Optional, Union

from mdtodom.ast.nodes import Node
from mdtodom.dom.base import DocumentTarget, OutputNode
from mdtodom.options.dom import DomRendererOptions
from mdtodom.options.markdown import MarkdownParserOptions
from mdtodom.parsers.markdown import parse_markdown
from mdtodom.renderer import render

logger = logging.getLogger(__name__)


def render_markdown(
    text: str,
    root: OutputNode | None = None,
    *,
    document: Optional[DocumentTarget] = None,
    options: Optional[DomRendererOptions] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
) -> OutputNode:
    """Parse Markdown text and render it into an output document.

    Parameters
    ----------
    text : str
        Markdown text
    root : OutputNode or None, default = None
        Node to populate; a new fragment is created when omitted
    document : DocumentTarget or None, default = None
        Output document; a new SoupDocument is used when omitted
    options : DomRendererOptions or None, default = None
        Rendering options
    parser_options : MarkdownParserOptions or None, default = None
        Parser options

    Returns
    -------
    OutputNode
        The populated root

    """
    tree = parse_markdown(text, parser_options)
    return render(tree, root, document=document, options=options)


def render_to_string(
    source: Union[str, Node],
    *,
    options: Optional[DomRendererOptions] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
) -> str:
    """Render Markdown text or a source tree to an HTML string.

    Parameters
    ----------
    source : str or Node
        Markdown text, or a source tree rooted at a document node
    options : DomRendererOptions or None, default = None
        Rendering options
    parser_options : MarkdownParserOptions or None, default = None
        Parser options, used only when ``source`` is text

    Returns
    -------
    str
        Serialized HTML fragment

    """
    from mdtodom.dom.soup import SoupDocument

    document = SoupDocument()
    tree = parse_markdown(source, parser_options) if isinstance(source, str) else source
    root = render(tree, document=document, options=options)
    return document.serialize(root)


__all__ = ["render", "render_markdown", "render_to_string"]
