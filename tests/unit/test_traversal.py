#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_traversal.py
"""Unit tests for the traversal adapter.

Tests cover:
- Event pairs in walker order
- Laziness (one walker step per event)
- Non-restartable iteration
- Propagation of walker errors

"""

import pytest

from mdtodom.ast import Document, Paragraph, Text, WalkStep
from mdtodom.traversal import TraversalEvent, TreeIterator, iter_events


class CountingWalker:
    """Walker double that records how often it is asked for a step."""

    def __init__(self, steps):
        self.steps = list(steps)
        self.calls = 0

    def next(self):
        self.calls += 1
        if not self.steps:
            return None
        return self.steps.pop(0)


class FailingWalker:
    """Walker double that fails on its second step."""

    def __init__(self, error):
        self.error = error
        self.calls = 0

    def next(self):
        self.calls += 1
        if self.calls == 2:
            raise self.error
        return WalkStep(Document(), True)


@pytest.mark.unit
class TestTreeIterator:
    """Tests for TreeIterator."""

    def test_yields_event_pairs(self):
        """Test the adapter yields (node, entering) pairs in walker order."""
        text = Text("hi")
        paragraph = Paragraph(children=[text])
        doc = Document(children=[paragraph])

        events = list(iter_events(doc))

        assert events == [
            TraversalEvent(doc, True),
            TraversalEvent(paragraph, True),
            TraversalEvent(text, True),
            TraversalEvent(paragraph, False),
            TraversalEvent(doc, False),
        ]
        node, entering = events[0]
        assert node is doc
        assert entering is True

    def test_is_lazy(self):
        """Test each event pulls exactly one step from the walker."""
        walker = CountingWalker([WalkStep(Document(), True), WalkStep(Document(), False)])
        iterator = TreeIterator(walker)
        assert walker.calls == 0

        next(iterator)
        assert walker.calls == 1
        next(iterator)
        assert walker.calls == 2

    def test_not_restartable(self):
        """Test an exhausted iterator stays exhausted and releases the walker."""
        walker = CountingWalker([WalkStep(Document(), True)])
        iterator = TreeIterator(walker)

        assert len(list(iterator)) == 1
        assert iterator.walker is None
        assert list(iterator) == []
        assert walker.calls == 2

    def test_iter_returns_self(self):
        """Test the adapter is its own iterator."""
        iterator = iter_events(Document())
        assert iter(iterator) is iterator

    def test_walker_property(self):
        """Test the wrapped walker is exposed until exhaustion."""
        walker = CountingWalker([])
        assert TreeIterator(walker).walker is walker

    def test_empty_walker(self):
        """Test a walker with no steps yields no events."""
        assert list(TreeIterator(CountingWalker([]))) == []

    def test_walker_errors_propagate(self):
        """Test errors raised by the walker reach the consumer unchanged."""
        error = RuntimeError("walker broke")
        iterator = TreeIterator(FailingWalker(error))

        next(iterator)
        with pytest.raises(RuntimeError) as exc_info:
            next(iterator)
        assert exc_info.value is error

    def test_fresh_sequences_are_independent(self):
        """Test two sequences over the same tree do not share state."""
        doc = Document(children=[Paragraph()])
        first = iter_events(doc)
        next(first)
        assert len(list(iter_events(doc))) == 4
        assert len(list(first)) == 3
