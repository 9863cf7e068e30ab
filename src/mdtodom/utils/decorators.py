#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/utils/decorators.py
"""Utility decorators for mdtodom parsers and document targets.

The third-party packages behind the parser (mistune) and the output document
(BeautifulSoup) are imported lazily, inside the methods that need them. The
decorator here checks that they are importable first and turns a bare
ImportError into a DependencyError with an install hint.

"""

from __future__ import annotations

import importlib
from functools import wraps
from typing import Any, Callable

from mdtodom.exceptions import DependencyError


def requires_dependencies(component_name: str, packages: list[tuple[str, str]]) -> Callable:
    """Check required dependencies before method execution.

    Parameters
    ----------
    component_name : str
        Name of the component (e.g., "markdown parser"). Appears in the error message.
    packages : list of tuple
        Required packages as (install_name, import_name) tuples.

    Returns
    -------
    Callable
        Decorated method that checks dependencies before execution

    Raises
    ------
    DependencyError
        If any required package cannot be imported.

    Examples
    --------
        >>> @requires_dependencies("markdown parser", [("mistune", "mistune")])
        ... def parse(self, text):
        ...     import mistune
        ...     # parsing logic here

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing = []
            original_error = None

            for install_name, import_name in packages:
                try:
                    # nosemgrep: python.lang.security.audit.non-literal-import.non-literal-import
                    importlib.import_module(import_name)
                except ImportError as e:
                    missing.append(install_name)
                    if original_error is None:
                        original_error = e

            if missing:
                raise DependencyError(
                    component_name=component_name,
                    missing_packages=missing,
                    original_import_error=original_error,
                ) from original_error

            return method(*args, **kwargs)

        return wrapper

    return decorator
