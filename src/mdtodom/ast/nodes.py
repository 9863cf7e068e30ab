#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/ast/nodes.py
"""Source tree node classes.

This module defines the node vocabulary of the parsed Markdown tree that the
DOM renderer consumes. Trees are built by a parser (see
``mdtodom.parsers.markdown``) and are read-only from the renderer's point of
view.

Node Vocabulary
---------------
Every node exposes a ``type`` tag and an ``is_container`` flag.

Container nodes own an ordered ``children`` list:
    - Document, Heading, Paragraph, BlockQuote, List, Item
    - Emphasis, Strong, Link, Image

Leaf nodes carry a literal payload or nothing at all:
    - Text, SoftBreak, HardLineBreak, ThematicBreak
    - CodeBlock, InlineCode, RawHtmlBlock, RawHtmlInline

Anything else a parser produces (tables, strikethrough, math, ...) is
represented by CustomNode, whose ``type`` is a plain string outside the
vocabulary.

"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Iterator, Optional, Union

if TYPE_CHECKING:
    from mdtodom.ast.walker import NodeWalker


class NodeType(str, Enum):
    """Fixed vocabulary of source node types."""

    DOCUMENT = "document"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    BLOCK_QUOTE = "block_quote"
    LIST = "list"
    ITEM = "item"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    LINK = "link"
    IMAGE = "image"
    CODE_BLOCK = "code_block"
    INLINE_CODE = "inline_code"
    TEXT = "text"
    SOFT_BREAK = "soft_break"
    HARD_LINE_BREAK = "hard_line_break"
    THEMATIC_BREAK = "thematic_break"
    RAW_HTML_BLOCK = "raw_html_block"
    RAW_HTML_INLINE = "raw_html_inline"

    def __str__(self) -> str:
        return self.value


CONTAINER_TYPES = frozenset(
    {
        NodeType.DOCUMENT,
        NodeType.HEADING,
        NodeType.PARAGRAPH,
        NodeType.BLOCK_QUOTE,
        NodeType.LIST,
        NodeType.ITEM,
        NodeType.EMPHASIS,
        NodeType.STRONG,
        NodeType.LINK,
        NodeType.IMAGE,
    }
)

_VOCABULARY = frozenset(member.value for member in NodeType)


class Node(ABC):
    """Base class for all source tree nodes.

    Subclasses set ``node_type``; the ``type`` and ``is_container`` properties
    are derived from it. CustomNode overrides both with per-instance values.

    """

    node_type: ClassVar[NodeType]

    @property
    def type(self) -> Union[NodeType, str]:
        """Type tag used by the renderer's dispatch."""
        return self.node_type

    @property
    def is_container(self) -> bool:
        """Whether this node type may own children."""
        return self.node_type in CONTAINER_TYPES

    def walker(self) -> NodeWalker:
        """Return a fresh depth-first walker over this subtree.

        Returns
        -------
        NodeWalker
            Walker producing enter/exit steps, starting at this node

        """
        from mdtodom.ast.walker import NodeWalker

        return NodeWalker(self)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root node of a source tree.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document

    """

    node_type: ClassVar[NodeType] = NodeType.DOCUMENT

    children: list[Node] = field(default_factory=list)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    children : list of Node, default = empty list
        Inline nodes representing heading text

    """

    node_type: ClassVar[NodeType] = NodeType.HEADING

    level: int
    children: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content."""

    node_type: ClassVar[NodeType] = NodeType.PARAGRAPH

    children: list[Node] = field(default_factory=list)


@dataclass
class BlockQuote(Node):
    """Block quote node containing other block elements."""

    node_type: ClassVar[NodeType] = NodeType.BLOCK_QUOTE

    children: list[Node] = field(default_factory=list)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for unordered
    children : list of Item, default = empty list
        List items
    start : int, default = 1
        Starting number for ordered lists
    tight : bool, default = True
        Whether list is tight (no blank lines between items)

    """

    node_type: ClassVar[NodeType] = NodeType.LIST

    ordered: bool
    children: list[Node] = field(default_factory=list)
    start: int = 1
    tight: bool = True

    def __post_init__(self) -> None:
        """Validate the start number."""
        if self.start < 0:
            raise ValueError(f"List start must be non-negative, got {self.start}")


@dataclass
class Item(Node):
    """List item node containing block content."""

    node_type: ClassVar[NodeType] = NodeType.ITEM

    children: list[Node] = field(default_factory=list)


@dataclass
class CodeBlock(Node):
    """Code block leaf.

    Parameters
    ----------
    literal : str
        Code content (not parsed as markdown)
    info : str or None, default = None
        Info string following the opening fence

    """

    node_type: ClassVar[NodeType] = NodeType.CODE_BLOCK

    literal: str
    info: Optional[str] = None


@dataclass
class ThematicBreak(Node):
    """Thematic break leaf (horizontal rule)."""

    node_type: ClassVar[NodeType] = NodeType.THEMATIC_BREAK


@dataclass
class RawHtmlBlock(Node):
    """Raw HTML block leaf.

    Warnings
    --------
    The literal is untrusted markup. The renderer inserts it according to
    ``DomRendererOptions.raw_html_mode`` and never as executable content.

    """

    node_type: ClassVar[NodeType] = NodeType.RAW_HTML_BLOCK

    literal: str


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text leaf."""

    node_type: ClassVar[NodeType] = NodeType.TEXT

    literal: str


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node."""

    node_type: ClassVar[NodeType] = NodeType.EMPHASIS

    children: list[Node] = field(default_factory=list)


@dataclass
class Strong(Node):
    """Strong (bold) node."""

    node_type: ClassVar[NodeType] = NodeType.STRONG

    children: list[Node] = field(default_factory=list)


@dataclass
class InlineCode(Node):
    """Inline code leaf."""

    node_type: ClassVar[NodeType] = NodeType.INLINE_CODE

    literal: str


@dataclass
class Link(Node):
    """Link node.

    Parameters
    ----------
    destination : str
        Link destination URL, passed through unvalidated
    children : list of Node, default = empty list
        Inline nodes representing link text
    title : str, default = ''
        Link title; empty means no title

    """

    node_type: ClassVar[NodeType] = NodeType.LINK

    destination: str
    children: list[Node] = field(default_factory=list)
    title: str = ""


@dataclass
class Image(Node):
    """Image node.

    An image is a container: its children are the inline nodes of the alt
    description, which the renderer flattens into an ``alt`` attribute.

    Parameters
    ----------
    destination : str
        Image source URL, passed through unvalidated
    children : list of Node, default = empty list
        Inline nodes of the alt description
    title : str, default = ''
        Image title; empty means no title

    """

    node_type: ClassVar[NodeType] = NodeType.IMAGE

    destination: str
    children: list[Node] = field(default_factory=list)
    title: str = ""


@dataclass
class SoftBreak(Node):
    """Soft line break leaf (newline in the source paragraph)."""

    node_type: ClassVar[NodeType] = NodeType.SOFT_BREAK


@dataclass
class HardLineBreak(Node):
    """Hard line break leaf."""

    node_type: ClassVar[NodeType] = NodeType.HARD_LINE_BREAK


@dataclass
class RawHtmlInline(Node):
    """Inline raw HTML leaf. Inserted under the same policy as RawHtmlBlock."""

    node_type: ClassVar[NodeType] = NodeType.RAW_HTML_INLINE

    literal: str


# ============================================================================
# Open-ended Node
# ============================================================================


@dataclass
class CustomNode(Node):
    """Node of a type outside the fixed vocabulary.

    Parameters
    ----------
    type_name : str
        Type tag of the node; must not collide with a NodeType value
    container : bool, default = False
        Whether the node owns children
    children : list of Node, default = empty list
        Child nodes (ignored unless ``container`` is True)
    literal : str or None, default = None
        Literal payload for leaf nodes

    """

    type_name: str
    container: bool = False
    children: list[Node] = field(default_factory=list)
    literal: Optional[str] = None

    def __post_init__(self) -> None:
        """Reject type names taken by the fixed vocabulary."""
        if not self.type_name:
            raise ValueError("CustomNode requires a non-empty type_name")
        if self.type_name in _VOCABULARY:
            raise ValueError(f"'{self.type_name}' is a built-in node type; use its node class instead")

    @property
    def type(self) -> str:
        """Type tag of this node."""
        return self.type_name

    @property
    def is_container(self) -> bool:
        """Whether this node owns children."""
        return self.container


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list for leaves)

    Examples
    --------
    >>> heading = Heading(level=1, children=[Text("Hello"), Strong(children=[Text("world")])])
    >>> len(get_node_children(heading))
    2

    """
    if not node.is_container:
        return []
    return list(getattr(node, "children", ()))


def iter_text(node: Node) -> Iterator[str]:
    """Yield the literal text of a subtree in document order.

    Text, inline code and soft breaks contribute their text; every other
    node contributes nothing of its own.

    Examples
    --------
    >>> heading = Heading(level=1, children=[Text("Hello "), Strong(children=[Text("world")])])
    >>> "".join(iter_text(heading))
    'Hello world'

    """
    walker = node.walker()
    step = walker.next()
    while step is not None:
        current = step.node
        if step.entering:
            if current.type in (NodeType.TEXT, NodeType.INLINE_CODE):
                yield current.literal  # type: ignore[attr-defined]
            elif current.type == NodeType.SOFT_BREAK:
                yield "\n"
        step = walker.next()


__all__ = [
    "NodeType",
    "CONTAINER_TYPES",
    "Node",
    "Document",
    "Heading",
    "Paragraph",
    "BlockQuote",
    "List",
    "Item",
    "CodeBlock",
    "ThematicBreak",
    "RawHtmlBlock",
    "Text",
    "Emphasis",
    "Strong",
    "InlineCode",
    "Link",
    "Image",
    "SoftBreak",
    "HardLineBreak",
    "RawHtmlInline",
    "CustomNode",
    "get_node_children",
    "iter_text",
]
