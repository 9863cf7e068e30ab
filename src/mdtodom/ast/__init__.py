#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/ast/__init__.py
"""Source tree consumed by the DOM renderer.

This package provides the node vocabulary of a parsed Markdown document and
the depth-first walker that reports each node as entering and exiting steps.

Examples
--------
Build a tree by hand:

    >>> from mdtodom.ast import Document, Heading, Paragraph, Text, Strong
    >>> doc = Document(children=[
    ...     Heading(level=1, children=[Text("Title")]),
    ...     Paragraph(children=[Text("Some "), Strong(children=[Text("bold")]), Text(" text.")]),
    ... ])

"""

from mdtodom.ast.nodes import (
    CONTAINER_TYPES,
    BlockQuote,
    CodeBlock,
    CustomNode,
    Document,
    Emphasis,
    HardLineBreak,
    Heading,
    Image,
    InlineCode,
    Item,
    Link,
    List,
    Node,
    NodeType,
    Paragraph,
    RawHtmlBlock,
    RawHtmlInline,
    SoftBreak,
    Strong,
    Text,
    ThematicBreak,
    get_node_children,
    iter_text,
)
from mdtodom.ast.walker import NodeWalker, WalkStep

__all__ = [
    "CONTAINER_TYPES",
    "BlockQuote",
    "CodeBlock",
    "CustomNode",
    "Document",
    "Emphasis",
    "HardLineBreak",
    "Heading",
    "Image",
    "InlineCode",
    "Item",
    "Link",
    "List",
    "Node",
    "NodeType",
    "NodeWalker",
    "Paragraph",
    "RawHtmlBlock",
    "RawHtmlInline",
    "SoftBreak",
    "Strong",
    "Text",
    "ThematicBreak",
    "WalkStep",
    "get_node_children",
    "iter_text",
]
