#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/options/__init__.py
"""Option dataclasses for the mdtodom parser and renderer."""

from mdtodom.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from mdtodom.options.dom import DomRendererOptions
from mdtodom.options.markdown import MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "DomRendererOptions",
    "MarkdownParserOptions",
]
