#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/traversal.py
"""Traversal adapter between a source tree walker and the renderer.

A source tree exposes its own step-producing walker (anything with a
``next()`` method returning a step or None). TreeIterator wraps such a walker
in the standard iterator protocol and yields TraversalEvent pairs, so the
renderer only ever sees ``for node, entering in events``.

The adapter is lazy and keeps no state beyond the walker itself: each
``__next__`` asks the walker for exactly one step. Whatever the walker raises
propagates unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NamedTuple, Optional, Protocol

if TYPE_CHECKING:
    from mdtodom.ast.nodes import Node


class Step(Protocol):
    """A walker step: the node and whether it is being entered."""

    node: Any
    entering: bool


class Walker(Protocol):
    """Native walker protocol of a source tree."""

    def next(self) -> Optional[Step]:
        """Return the next step, or None when exhausted."""
        ...


class TraversalEvent(NamedTuple):
    """A (node, entering) pair produced by the traversal adapter."""

    node: Node
    entering: bool


class TreeIterator:
    """Iterator of TraversalEvent over a walker.

    The sequence is finite and not restartable: once the walker reports
    exhaustion the iterator stays exhausted. Request a fresh walker from the
    tree for another pass.

    Parameters
    ----------
    walker : Walker
        Walker positioned at the start of a traversal

    """

    __slots__ = ("_walker",)

    def __init__(self, walker: Walker):
        """Initialize the iterator over ``walker``."""
        self._walker: Optional[Walker] = walker

    @property
    def walker(self) -> Optional[Walker]:
        """The wrapped walker, or None once the iterator is exhausted."""
        return self._walker

    def __iter__(self) -> TreeIterator:
        return self

    def __next__(self) -> TraversalEvent:
        if self._walker is None:
            raise StopIteration

        step = self._walker.next()
        if step is None:
            self._walker = None
            raise StopIteration

        return TraversalEvent(step.node, step.entering)


def iter_events(tree: Node) -> TreeIterator:
    """Return a fresh event sequence over ``tree``.

    Parameters
    ----------
    tree : Node
        Root of the subtree to traverse

    Returns
    -------
    TreeIterator
        Lazy, single-use sequence of TraversalEvent

    """
    return TreeIterator(tree.walker())


__all__ = ["TraversalEvent", "TreeIterator", "Walker", "iter_events"]
