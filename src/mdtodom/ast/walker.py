#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/ast/walker.py
"""Depth-first enter/exit walker over a source tree.

The walker is the source tree's native traversal protocol: each call to
``next()`` returns one WalkStep, or None once the walk is over. Container
nodes are reported twice (entering, then exiting after all of their
descendants); leaves are reported once, as entering.

Examples
--------
    >>> from mdtodom.ast import Document, Paragraph, Text
    >>> doc = Document(children=[Paragraph(children=[Text("hi")])])
    >>> walker = doc.walker()
    >>> step = walker.next()
    >>> while step is not None:
    ...     print(step.node.type, step.entering)
    ...     step = walker.next()
    document True
    paragraph True
    text True
    paragraph False
    document False

"""

from __future__ import annotations

from typing import Iterator, NamedTuple, Optional

from mdtodom.ast.nodes import Node, get_node_children


class WalkStep(NamedTuple):
    """One step of a walk: a node and whether it is being entered."""

    node: Node
    entering: bool


class NodeWalker:
    """Iterative depth-first walker producing enter/exit steps.

    The walk keeps an explicit stack of open containers with an iterator over
    each container's children, so arbitrarily deep trees do not hit the
    interpreter's recursion limit. A walker is single-use: once ``next()``
    has returned None it keeps returning None.

    Parameters
    ----------
    root : Node
        Node the walk starts (and ends) at

    """

    def __init__(self, root: Node):
        """Initialize the walker positioned before the root's entering step."""
        self.root = root
        self._current: Optional[Node] = root
        self._entering = True
        self._open: list[tuple[Node, Iterator[Node]]] = []

    def next(self) -> Optional[WalkStep]:
        """Return the next step, or None when the walk is exhausted.

        Returns
        -------
        WalkStep or None
            The next (node, entering) step

        """
        current = self._current
        if current is None:
            return None

        entering = self._entering
        step = WalkStep(current, entering)

        if entering and current.is_container:
            children = iter(get_node_children(current))
            self._open.append((current, children))
            self._advance(children, current)
        else:
            if not entering:
                # The exiting container's own frame is on top.
                self._open.pop()
            if self._open:
                parent, siblings = self._open[-1]
                self._advance(siblings, parent)
            else:
                self._current = None

        return step

    def _advance(self, children: Iterator[Node], parent: Node) -> None:
        child = next(children, None)
        if child is None:
            self._current = parent
            self._entering = False
        else:
            self._current = child
            self._entering = True


__all__ = ["NodeWalker", "WalkStep"]
