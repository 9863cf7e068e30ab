#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/options/dom.py
"""Configuration options for rendering a source tree into an output document.

This module defines options for the DOMRenderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mdtodom.constants import (
    DEFAULT_FALLBACK_TAG,
    DEFAULT_HEADING_IDS,
    DEFAULT_IMAGE_ELEMENT,
    DEFAULT_RAW_HTML_MODE,
    DEFAULT_STRICT_TRAVERSAL,
    IMAGE_ELEMENT_MODES,
    RAW_HTML_MODES,
    ImageElementMode,
    RawHtmlMode,
)
from mdtodom.options.base import BaseRendererOptions


@dataclass(frozen=True)
class DomRendererOptions(BaseRendererOptions):
    """Configuration options for the DOM renderer.

    Parameters
    ----------
    raw_html_mode : {"escape", "sanitize", "drop"}, default "escape"
        How raw HTML nodes are inserted into the output:
        - "escape": Insert the markup as a text node (shown literally)
        - "sanitize": Insert parsed markup with script-capable content removed
        - "drop": Insert nothing
        None of the modes can produce executable script.
    image_element : {"img", "object"}, default "img"
        Element created for images. ``img`` carries the destination in
        ``src``, ``object`` carries it in ``data``.
    heading_ids : bool, default True
        Whether closed headings get an ``id`` derived from their text.
    fallback_tag : str, default "span"
        Element created for container nodes of an unknown type.
    strict : bool, default True
        Whether a non-empty ancestor stack at the end of traversal raises
        UnbalancedTraversalError. When False the condition is only logged.

    """

    raw_html_mode: RawHtmlMode = field(
        default=DEFAULT_RAW_HTML_MODE,
        metadata={
            "help": "How to insert raw HTML: escape (as text), sanitize (inert markup), or drop",
            "choices": RAW_HTML_MODES,
            "importance": "security",
        },
    )
    image_element: ImageElementMode = field(
        default=DEFAULT_IMAGE_ELEMENT,
        metadata={
            "help": "Element used for images: img (src attribute) or object (data attribute)",
            "choices": IMAGE_ELEMENT_MODES,
            "importance": "core",
        },
    )
    heading_ids: bool = field(
        default=DEFAULT_HEADING_IDS,
        metadata={
            "help": "Set an id attribute derived from the heading text on each heading",
            "importance": "core",
        },
    )
    fallback_tag: str = field(
        default=DEFAULT_FALLBACK_TAG,
        metadata={"help": "Element created for container nodes of an unknown type", "importance": "advanced"},
    )
    strict: bool = field(
        default=DEFAULT_STRICT_TRAVERSAL,
        metadata={
            "help": "Raise on an unbalanced enter/exit event stream instead of only logging it",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if self.raw_html_mode not in RAW_HTML_MODES:
            raise ValueError(f"raw_html_mode must be one of {RAW_HTML_MODES}, got {self.raw_html_mode!r}")

        if self.image_element not in IMAGE_ELEMENT_MODES:
            raise ValueError(f"image_element must be one of {IMAGE_ELEMENT_MODES}, got {self.image_element!r}")

        if not self.fallback_tag or not self.fallback_tag.isalnum():
            raise ValueError(f"fallback_tag must be a non-empty alphanumeric tag name, got {self.fallback_tag!r}")
