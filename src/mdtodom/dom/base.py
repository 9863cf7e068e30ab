#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/dom/base.py
"""Output document capability consumed by the DOM renderer.

The renderer never touches an output tree directly. It asks a
DocumentTarget to create nodes, attach them and read them back, so any
tree-shaped representation can be populated by implementing this protocol.
``mdtodom.dom.soup.SoupDocument`` is the BeautifulSoup-backed implementation.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

OutputNode = Any


@runtime_checkable
class DocumentTarget(Protocol):
    """Factory and builder operations on an output document."""

    def create_fragment(self) -> OutputNode:
        """Create a new detached container node."""
        ...

    def create_element(self, tag: str) -> OutputNode:
        """Create a new element with the given tag name."""
        ...

    def create_text(self, content: str) -> OutputNode:
        """Create a new text node holding ``content`` literally."""
        ...

    def append_child(self, parent: OutputNode, child: OutputNode) -> OutputNode:
        """Append ``child`` as the last child of ``parent`` and return it."""
        ...

    def set_attribute(self, element: OutputNode, name: str, value: str) -> None:
        """Set a string attribute on ``element``."""
        ...

    def get_attribute(self, element: OutputNode, name: str) -> Optional[str]:
        """Return an attribute value, or None when unset."""
        ...

    def text_content(self, node: OutputNode) -> str:
        """Return the concatenated text of ``node`` and its descendants."""
        ...

    def remove_children(self, element: OutputNode) -> None:
        """Remove all children of ``element``."""
        ...

    def insert_markup(self, parent: OutputNode, markup: str) -> None:
        """Append raw markup to ``parent`` as inert content.

        Implementations must guarantee that no script embedded in
        ``markup`` can execute once the output is attached to a live page.
        """
        ...

    def serialize(self, node: OutputNode) -> str:
        """Return the markup of ``node``."""
        ...


__all__ = ["DocumentTarget", "OutputNode"]
