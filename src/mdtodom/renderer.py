#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/renderer.py
"""Structural renderer from a source tree to an output document.

This module provides the DOMRenderer class, which walks a source tree once,
depth first, and builds the corresponding output nodes through a
DocumentTarget.

The walk is driven by the flat enter/exit event stream of the traversal
adapter. Nesting is rebuilt with an explicit ancestor stack: every new
element is appended to the current parent as soon as it is created, and when
it is a container the current parent is pushed and the new element takes its
place until the matching exit event. Two node types are finalized on exit:

- headings get an ``id`` derived from their text
- images have their alt description flattened into an ``alt`` attribute

Examples
--------
    >>> from mdtodom.ast import Document, Heading, Text
    >>> from mdtodom.dom import SoupDocument
    >>> from mdtodom.renderer import DOMRenderer
    >>> document = SoupDocument()
    >>> renderer = DOMRenderer(document)
    >>> root = renderer.render(Document(children=[Heading(level=1, children=[Text("Hello World")])]))
    >>> document.serialize(root)
    '<h1 id="hello-world">Hello World</h1>'

"""

from __future__ import annotations

import logging
import re
from typing import Callable, Generic, Iterator, Optional, TypeVar

from mdtodom.ast.nodes import (
    CodeBlock,
    Heading,
    Image,
    InlineCode,
    Link,
    List,
    Node,
    NodeType,
)
from mdtodom.constants import IMAGE_SOURCE_ATTRIBUTES, SOFT_BREAK_TEXT
from mdtodom.dom.base import DocumentTarget, OutputNode
from mdtodom.exceptions import InvalidOptionsError, TraversalError, UnbalancedTraversalError, ValidationError
from mdtodom.options.dom import DomRendererOptions
from mdtodom.traversal import iter_events

logger = logging.getLogger(__name__)

T = TypeVar("T")

_WHITESPACE_RUN = re.compile(r"\s+")


class AncestorStack(Generic[T]):
    """LIFO of the output containers enclosing the current parent.

    One stack is created per ``render`` call and never outlives it.
    """

    __slots__ = ("_items",)

    def __init__(self) -> None:
        """Initialize an empty stack."""
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Push ``item`` on top of the stack."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item.

        Raises
        ------
        UnbalancedTraversalError
            If the stack is empty, i.e. an exit event had no matching enter.

        """
        if not self._items:
            raise UnbalancedTraversalError(-1)
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it.

        Raises
        ------
        UnbalancedTraversalError
            If the stack is empty.

        """
        if not self._items:
            raise UnbalancedTraversalError(-1)
        return self._items[-1]

    def assert_empty(self) -> None:
        """Check that every pushed container has been popped.

        Raises
        ------
        UnbalancedTraversalError
            If items remain on the stack.

        """
        if self._items:
            raise UnbalancedTraversalError(len(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)


def heading_id(text: str) -> str:
    """Derive a heading identifier from its text.

    The text is lower-cased and every run of whitespace becomes a hyphen.
    Identifiers are not de-duplicated.

    Examples
    --------
    >>> heading_id("Hello World")
    'hello-world'
    >>> heading_id("Tabs\\tand  spaces")
    'tabs-and-spaces'

    """
    return _WHITESPACE_RUN.sub("-", text.lower())


EnterHandler = Callable[["DOMRenderer", Node, OutputNode], Optional[OutputNode]]
ExitHandler = Callable[["DOMRenderer", Node, OutputNode], None]


class DOMRenderer:
    """Render a source tree into an output document.

    The renderer keeps no per-render state on the instance: the ancestor
    stack and the current parent are locals of ``render``, so one renderer
    may render several trees, including concurrently into distinct roots.

    Parameters
    ----------
    document : DocumentTarget
        Output document used to create and attach nodes
    options : DomRendererOptions or None, default = None
        Rendering options

    """

    def __init__(self, document: DocumentTarget, options: DomRendererOptions | None = None):
        """Initialize the renderer with an output document and options."""
        if options is not None and not isinstance(options, DomRendererOptions):
            raise InvalidOptionsError("DOMRenderer", DomRendererOptions, type(options))
        self.document = document
        self.options: DomRendererOptions = options or DomRendererOptions()

    def render(self, tree: Node, root: OutputNode | None = None) -> OutputNode:
        """Render ``tree`` into ``root`` and return the root.

        Parameters
        ----------
        tree : Node
            Source tree; its root must be a document node
        root : OutputNode or None, default = None
            Node to populate. Existing children are kept and the rendered
            content is appended after them. A new fragment is created when
            omitted.

        Returns
        -------
        OutputNode
            The populated root

        Raises
        ------
        ValidationError
            If ``tree`` is not a document node
        TraversalError
            If the event stream is structurally broken

        """
        if tree.type != NodeType.DOCUMENT:
            raise ValidationError(
                f"Expected a document node at the root of the tree, got '{tree.type}'",
                parameter_name="tree",
                parameter_value=tree.type,
            )

        if root is None:
            root = self.document.create_fragment()

        ancestors: AncestorStack[OutputNode] = AncestorStack()
        parent: OutputNode | None = None
        events = 0

        for node, entering in iter_events(tree):
            events += 1
            if entering:
                if node.type == NodeType.DOCUMENT:
                    parent = root
                    continue
                if parent is None:
                    raise TraversalError(f"'{node.type}' node entered outside of the document", node_type=str(node.type))

                child = self._enter(node, parent)
                if node.is_container:
                    ancestors.push(parent)
                    if child is not None:
                        parent = child
            else:
                if node.type == NodeType.DOCUMENT:
                    parent = None
                    continue
                if parent is None:
                    raise TraversalError(f"'{node.type}' node exited outside of the document", node_type=str(node.type))

                finalize = self._exit_handlers.get(node.type)
                if finalize is not None:
                    finalize(self, node, parent)
                parent = ancestors.pop()

        if ancestors:
            logger.error("Ancestor stack not empty after traversal: %d open containers", len(ancestors))
            if self.options.strict:
                ancestors.assert_empty()

        logger.debug("Rendered %d traversal events", events)
        return root

    # ------------------------------------------------------------------
    # Entering
    # ------------------------------------------------------------------

    def _enter(self, node: Node, parent: OutputNode) -> Optional[OutputNode]:
        handler = self._enter_handlers.get(node.type)
        if handler is None:
            return self._enter_unknown(node, parent)
        return handler(self, node, parent)

    def _append_element(self, parent: OutputNode, tag: str) -> OutputNode:
        return self.document.append_child(parent, self.document.create_element(tag))

    def _create_code_element(self, text: str) -> OutputNode:
        code = self.document.create_element("code")
        self.document.append_child(code, self.document.create_text(text))
        return code

    def _enter_heading(self, node: Heading, parent: OutputNode) -> OutputNode:
        return self._append_element(parent, f"h{node.level}")

    def _enter_paragraph(self, node: Node, parent: OutputNode) -> OutputNode:
        return self._append_element(parent, "p")

    def _enter_block_quote(self, node: Node, parent: OutputNode) -> OutputNode:
        return self._append_element(parent, "blockquote")

    def _enter_list(self, node: List, parent: OutputNode) -> OutputNode:
        if not node.ordered:
            return self._append_element(parent, "ul")

        element = self._append_element(parent, "ol")
        if node.start != 1:
            self.document.set_attribute(element, "start", str(node.start))
        return element

    def _enter_item(self, node: Node, parent: OutputNode) -> OutputNode:
        return self._append_element(parent, "li")

    def _enter_emphasis(self, node: Node, parent: OutputNode) -> OutputNode:
        return self._append_element(parent, "em")

    def _enter_strong(self, node: Node, parent: OutputNode) -> OutputNode:
        return self._append_element(parent, "strong")

    def _enter_link(self, node: Link, parent: OutputNode) -> OutputNode:
        element = self._append_element(parent, "a")
        self.document.set_attribute(element, "href", node.destination)
        if node.title:
            self.document.set_attribute(element, "title", node.title)
        return element

    def _enter_image(self, node: Image, parent: OutputNode) -> OutputNode:
        tag = self.options.image_element
        element = self._append_element(parent, tag)
        self.document.set_attribute(element, IMAGE_SOURCE_ATTRIBUTES[tag], node.destination)
        if node.title:
            self.document.set_attribute(element, "title", node.title)
        return element

    def _enter_code_block(self, node: CodeBlock, parent: OutputNode) -> None:
        pre = self._append_element(parent, "pre")
        self.document.append_child(pre, self._create_code_element(node.literal))

    def _enter_inline_code(self, node: InlineCode, parent: OutputNode) -> None:
        self.document.append_child(parent, self._create_code_element(node.literal))

    def _enter_text(self, node: Node, parent: OutputNode) -> None:
        self.document.append_child(parent, self.document.create_text(node.literal))  # type: ignore[attr-defined]

    def _enter_soft_break(self, node: Node, parent: OutputNode) -> None:
        self.document.append_child(parent, self.document.create_text(SOFT_BREAK_TEXT))

    def _enter_hard_line_break(self, node: Node, parent: OutputNode) -> None:
        self._append_element(parent, "br")

    def _enter_thematic_break(self, node: Node, parent: OutputNode) -> None:
        self._append_element(parent, "hr")

    def _enter_raw_html(self, node: Node, parent: OutputNode) -> None:
        literal: str = node.literal  # type: ignore[attr-defined]
        mode = self.options.raw_html_mode
        if mode == "escape":
            self.document.append_child(parent, self.document.create_text(literal))
        elif mode == "sanitize":
            self.document.insert_markup(parent, literal)
        else:
            logger.debug("Dropped %s node (%d characters)", node.type, len(literal))

    def _enter_unknown(self, node: Node, parent: OutputNode) -> Optional[OutputNode]:
        if node.is_container:
            logger.warning("Falling back to <%s> for unknown node type: %s", self.options.fallback_tag, node.type)
            return self._append_element(parent, self.options.fallback_tag)

        logger.warning("Skipping unknown leaf node type: %s", node.type)
        return None

    # ------------------------------------------------------------------
    # Exiting
    # ------------------------------------------------------------------

    def _exit_heading(self, node: Node, element: OutputNode) -> None:
        if self.options.heading_ids:
            text = self.document.text_content(element)
            self.document.set_attribute(element, "id", heading_id(text))

    def _exit_image(self, node: Node, element: OutputNode) -> None:
        text = self.document.text_content(element)
        self.document.remove_children(element)
        self.document.set_attribute(element, "alt", text)

    _enter_handlers: dict[NodeType, EnterHandler] = {
        NodeType.HEADING: _enter_heading,
        NodeType.PARAGRAPH: _enter_paragraph,
        NodeType.BLOCK_QUOTE: _enter_block_quote,
        NodeType.LIST: _enter_list,
        NodeType.ITEM: _enter_item,
        NodeType.EMPHASIS: _enter_emphasis,
        NodeType.STRONG: _enter_strong,
        NodeType.LINK: _enter_link,
        NodeType.IMAGE: _enter_image,
        NodeType.CODE_BLOCK: _enter_code_block,
        NodeType.INLINE_CODE: _enter_inline_code,
        NodeType.TEXT: _enter_text,
        NodeType.SOFT_BREAK: _enter_soft_break,
        NodeType.HARD_LINE_BREAK: _enter_hard_line_break,
        NodeType.THEMATIC_BREAK: _enter_thematic_break,
        NodeType.RAW_HTML_BLOCK: _enter_raw_html,
        NodeType.RAW_HTML_INLINE: _enter_raw_html,
    }  # type: ignore[dict-item]

    _exit_handlers: dict[NodeType, ExitHandler] = {
        NodeType.HEADING: _exit_heading,
        NodeType.IMAGE: _exit_image,
    }


def _check_dispatch_table() -> None:
    # The document node is handled inline by render(); every other type needs an entry.
    missing = set(NodeType) - set(DOMRenderer._enter_handlers) - {NodeType.DOCUMENT}
    if missing:
        raise TypeError(f"DOMRenderer has no enter handler for: {sorted(str(t) for t in missing)}")


_check_dispatch_table()


def render(
    tree: Node,
    root: OutputNode | None = None,
    *,
    document: DocumentTarget | None = None,
    options: DomRendererOptions | None = None,
) -> OutputNode:
    """Render a source tree into an output document.

    Parameters
    ----------
    tree : Node
        Source tree rooted at a document node
    root : OutputNode or None, default = None
        Node to populate; a new fragment is created when omitted
    document : DocumentTarget or None, default = None
        Output document; a new SoupDocument is used when omitted
    options : DomRendererOptions or None, default = None
        Rendering options

    Returns
    -------
    OutputNode
        The populated root

    """
    if document is None:
        from mdtodom.dom.soup import SoupDocument

        document = SoupDocument()
    return DOMRenderer(document, options).render(tree, root)


__all__ = ["AncestorStack", "DOMRenderer", "heading_id", "render"]
