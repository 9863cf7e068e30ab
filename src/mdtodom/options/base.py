#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/options/base.py
"""Base classes for parser and renderer options.

This module defines the foundation classes for the option dataclasses used by
the Markdown parser and the DOM renderer.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Copy-with-changes support for frozen option dataclasses.

    Options are never mutated; the CLI layers command-line flags over values
    from a configuration file by deriving new instances.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with some fields replaced.

        Parameters
        ----------
        **kwargs : Any
            Option names and replacement values

        Returns
        -------
        Self
            New options object; ``__post_init__`` validation runs again

        """
        return replace(self, **kwargs)

    @classmethod
    def field_names(cls) -> frozenset[str]:
        """Return the names of all option fields."""
        return frozenset(f.name for f in fields(cls))  # type: ignore[arg-type]


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options.

    Notes
    -----
    Subclasses define renderer-specific options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate base renderer options."""
        pass


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options.

    Notes
    -----
    Subclasses define parser-specific options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate base parser options."""
        pass
