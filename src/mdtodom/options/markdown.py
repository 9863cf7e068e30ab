#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/options/markdown.py
"""Configuration options for parsing Markdown into a source tree."""

from __future__ import annotations

from dataclasses import dataclass, field

from mdtodom.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for the mistune-backed Markdown parser.

    Parameters
    ----------
    plugins : tuple of str, default ()
        Names of mistune plugins to enable (e.g. "strikethrough", "table").
        Plugin tokens with no counterpart in the node vocabulary become
        CustomNode instances and render through the fallback element.

    """

    plugins: tuple[str, ...] = field(
        default=(),
        metadata={"help": "mistune plugins to enable (tokens become custom nodes)", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Normalize the plugin list.

        Raises
        ------
        ValueError
            If a plugin name is empty.

        """
        super().__post_init__()
        if isinstance(self.plugins, list):
            object.__setattr__(self, "plugins", tuple(self.plugins))
        for plugin in self.plugins:
            if not isinstance(plugin, str) or not plugin:
                raise ValueError(f"Plugin names must be non-empty strings, got {plugin!r}")
