#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/dom/__init__.py
"""Output document targets for the DOM renderer."""

from mdtodom.dom.base import DocumentTarget, OutputNode
from mdtodom.dom.soup import SoupDocument

__all__ = ["DocumentTarget", "OutputNode", "SoupDocument"]
