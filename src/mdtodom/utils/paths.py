#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/utils/paths.py
"""Resolution of the page a viewer request asks for."""

from __future__ import annotations

import logging
from typing import Optional

from mdtodom.constants import DEFAULT_WELCOME_PAGE

logger = logging.getLogger(__name__)

VIEW_PREFIX = "view="


def is_safe_view_path(path: str) -> bool:
    """Check whether a requested page path may be served.

    Paths starting with a dot or containing a dot right after a slash are
    refused; this covers ``..`` traversal as well as hidden files.

    Examples
    --------
    >>> is_safe_view_path("docs/intro.md")
    True
    >>> is_safe_view_path("../secret.md")
    False
    >>> is_safe_view_path("docs/.hidden.md")
    False

    """
    return not (path.startswith(".") or "/." in path)


def resolve_view_path(path: Optional[str], welcome_page: str = DEFAULT_WELCOME_PAGE) -> str:
    """Return the page to show for a request.

    Parameters
    ----------
    path : str or None
        Requested page, optionally prefixed with ``view=``
    welcome_page : str, default "welcome.md"
        Page shown when nothing (or nothing acceptable) was requested

    Returns
    -------
    str
        Requested path without its prefix, or ``welcome_page``

    Examples
    --------
    >>> resolve_view_path("view=guide.md")
    'guide.md'
    >>> resolve_view_path("view=.env")
    'welcome.md'
    >>> resolve_view_path(None, welcome_page="index.md")
    'index.md'

    """
    if path is not None and path.startswith(VIEW_PREFIX):
        path = path[len(VIEW_PREFIX) :]

    if not path:
        return welcome_page

    if not is_safe_view_path(path):
        logger.warning("Refusing to show '%s'; showing '%s' instead", path, welcome_page)
        return welcome_page

    return path


__all__ = ["VIEW_PREFIX", "is_safe_view_path", "resolve_view_path"]
