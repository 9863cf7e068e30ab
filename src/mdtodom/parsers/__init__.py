#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/parsers/__init__.py
"""Parsers producing source trees for the DOM renderer."""

from mdtodom.parsers.markdown import MarkdownParser, parse_markdown

__all__ = ["MarkdownParser", "parse_markdown"]
