#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/parsers/markdown.py
"""Markdown to source tree parser.

This module parses Markdown text with mistune and converts its token stream
into the node vocabulary of ``mdtodom.ast``. Tokens without a counterpart in
the vocabulary (tables, strikethrough, math, ... from mistune plugins) are
kept as CustomNode instances, so the renderer's fallback decides how they
appear in the output.

Examples
--------
    >>> from mdtodom.parsers.markdown import parse_markdown
    >>> doc = parse_markdown("# Hello *World*")
    >>> [child.type for child in doc.children]
    [<NodeType.HEADING: 'heading'>]

"""

from __future__ import annotations

import logging
from typing import Any, Callable

from mdtodom.ast.nodes import (
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
    Paragraph,
    RawHtmlBlock,
    RawHtmlInline,
    SoftBreak,
    Strong,
    Text,
    ThematicBreak,
)
from mdtodom.constants import DEPS_MARKDOWN
from mdtodom.exceptions import InvalidOptionsError, ParsingError
from mdtodom.options.markdown import MarkdownParserOptions
from mdtodom.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

# Tokens that only carry layout information for mistune's own renderers
_SKIPPED_TOKENS = frozenset({"blank_line"})


class MarkdownParser:
    """Convert Markdown text to a source tree.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> parser = MarkdownParser()
        >>> doc = parser.parse("Some *emphasis*")

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        if options is not None and not isinstance(options, MarkdownParserOptions):
            raise InvalidOptionsError("MarkdownParser", MarkdownParserOptions, type(options))
        self.options: MarkdownParserOptions = options or MarkdownParserOptions()

        self._handlers: dict[str, Callable[[dict[str, Any]], Node]] = {
            # Block-level tokens
            "heading": self._process_heading,
            "paragraph": self._process_paragraph,
            # block_text is used for tight list items
            "block_text": self._process_paragraph,
            "block_code": self._process_code_block,
            "block_quote": self._process_block_quote,
            "list": self._process_list,
            "list_item": self._process_list_item,
            "thematic_break": lambda token: ThematicBreak(),
            "block_html": lambda token: RawHtmlBlock(literal=token.get("raw", "")),
            # Inline tokens
            "text": lambda token: Text(literal=token.get("raw", "")),
            "emphasis": lambda token: Emphasis(children=self._process_children(token)),
            "strong": lambda token: Strong(children=self._process_children(token)),
            "codespan": lambda token: InlineCode(literal=token.get("raw", "")),
            "link": self._process_link,
            "image": self._process_image,
            "softbreak": lambda token: SoftBreak(),
            "linebreak": lambda token: HardLineBreak(),
            "inline_html": lambda token: RawHtmlInline(literal=token.get("raw", "")),
        }

    @requires_dependencies("markdown parser", DEPS_MARKDOWN)
    def parse(self, text: str) -> Document:
        """Parse Markdown text into a source tree.

        Parameters
        ----------
        text : str
            Markdown text

        Returns
        -------
        Document
            Root of the source tree

        Raises
        ------
        ParsingError
            If mistune fails on the input or a plugin cannot be loaded

        """
        import mistune

        try:
            markdown = mistune.create_markdown(renderer=None, plugins=list(self.options.plugins))
        except (ImportError, AttributeError, ValueError) as e:
            raise ParsingError(
                f"Failed to configure mistune plugins {list(self.options.plugins)}: {e}",
                parsing_stage="setup",
                original_error=e,
            ) from e

        try:
            tokens, _state = markdown.parse(text)
        except Exception as e:
            raise ParsingError(f"Failed to parse Markdown: {e}", parsing_stage="tokenize", original_error=e) from e

        document = Document(children=self._process_tokens(tokens))
        logger.debug("Parsed %d top-level blocks from %d characters", len(document.children), len(text))
        return document

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune tokens into nodes.

        Parameters
        ----------
        tokens : list of dict
            Mistune token dictionaries

        Returns
        -------
        list of Node
            Source tree nodes

        """
        nodes: list[Node] = []
        for token in tokens:
            if not isinstance(token, dict):
                continue
            token_type = token.get("type", "")
            if token_type in _SKIPPED_TOKENS:
                continue

            handler = self._handlers.get(token_type)
            if handler is None:
                nodes.append(self._process_custom(token))
            else:
                nodes.append(handler(token))
        return nodes

    def _process_children(self, token: dict[str, Any]) -> list[Node]:
        children = token.get("children", [])
        if not isinstance(children, list):
            return []
        return self._process_tokens(children)

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs") or {}
        level = attrs.get("level", 1)
        return Heading(level=level, children=self._process_children(token))

    def _process_paragraph(self, token: dict[str, Any]) -> Paragraph:
        return Paragraph(children=self._process_children(token))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process block_code token.

        Parameters
        ----------
        token : dict
            Code block token with 'raw' and optional 'attrs.info'

        Returns
        -------
        CodeBlock
            Code block node; the info string is reduced to its first word

        """
        attrs = token.get("attrs") or {}
        info = attrs.get("info")
        if info:
            info = info.split()[0]
        return CodeBlock(literal=token.get("raw", ""), info=info or None)

    def _process_block_quote(self, token: dict[str, Any]) -> BlockQuote:
        return BlockQuote(children=self._process_children(token))

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children', 'tight' and 'attrs' (ordered, start)

        Returns
        -------
        List
            List node

        """
        attrs = token.get("attrs") or {}
        ordered = bool(attrs.get("ordered", False))
        # mistune only records the start number when it differs from 1
        start = attrs.get("start", 1)
        tight = token.get("tight", True)
        return List(ordered=ordered, children=self._process_children(token), start=start, tight=tight)

    def _process_list_item(self, token: dict[str, Any]) -> Item:
        return Item(children=self._process_children(token))

    def _process_link(self, token: dict[str, Any]) -> Link:
        attrs = token.get("attrs") or {}
        return Link(
            destination=attrs.get("url", ""),
            children=self._process_children(token),
            title=attrs.get("title") or "",
        )

    def _process_image(self, token: dict[str, Any]) -> Image:
        # The alt description stays a node subtree; the renderer flattens it.
        attrs = token.get("attrs") or {}
        return Image(
            destination=attrs.get("url", ""),
            children=self._process_children(token),
            title=attrs.get("title") or "",
        )

    def _process_custom(self, token: dict[str, Any]) -> CustomNode:
        """Keep a token with no vocabulary counterpart as a CustomNode.

        Tokens with a ``children`` list become containers; anything else is a
        leaf carrying the token's ``raw`` text, if any.

        """
        token_type = token.get("type", "") or "unknown"
        logger.debug("No node class for mistune token '%s', keeping it as a custom node", token_type)
        if isinstance(token.get("children"), list):
            return CustomNode(type_name=token_type, container=True, children=self._process_children(token))
        return CustomNode(type_name=token_type, literal=token.get("raw"))


def parse_markdown(text: str, options: MarkdownParserOptions | None = None) -> Document:
    """Parse Markdown text into a source tree.

    Parameters
    ----------
    text : str
        Markdown text
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Returns
    -------
    Document
        Root of the source tree

    """
    return MarkdownParser(options).parse(text)


__all__ = ["MarkdownParser", "parse_markdown"]
