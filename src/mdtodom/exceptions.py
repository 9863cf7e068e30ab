#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mdtodom library.

This module defines the exception classes raised while parsing Markdown into
a source tree, loading configuration, and rendering a source tree into an
output document.

Exception Hierarchy
-------------------
- MdToDomError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a component)

  - ConfigError (configuration file discovery and loading)

  - ParsingError (Markdown parsing failures)

  - RenderingError (output generation failures)
    - TraversalError (broken enter/exit event stream)
      - UnbalancedTraversalError (enter/exit events do not pair up)

  - DependencyError (missing packages)

"""

from __future__ import annotations

from typing import Any


class MdToDomError(Exception):
    """Root of the mdtodom error hierarchy.

    ``except MdToDomError`` handles every error raised on purpose by mdtodom.

    Parameters
    ----------
    message : str
        What went wrong
    original_error : Exception, optional
        Lower-level exception being wrapped

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        Wrapped lower-level exception

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Store the message and the wrapped exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(MdToDomError):
    """A parameter, option value or template failed validation.

    Parameters
    ----------
    message : str
        What was rejected and why
    parameter_name : str, optional
        Parameter that was rejected
    parameter_value : any, optional
        Rejected value
    original_error : Exception, optional
        Lower-level exception being wrapped

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Record which parameter was rejected."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an options object of the wrong class is provided.

    Parameters
    ----------
    component_name : str
        Name of the component (renderer or parser) that received the options
    expected_type : type
        The expected options class
    received_type : type
        The options class that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{component_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class ConfigError(MdToDomError):
    """Exception raised when a configuration file cannot be loaded or is invalid.

    Parameters
    ----------
    message : str
        Description of the problem
    config_path : str, optional
        Path of the offending configuration file

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the config error."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


class ParsingError(MdToDomError):
    """mistune could not be set up or could not tokenize the input.

    Parameters
    ----------
    message : str
        What failed
    parsing_stage : str, optional
        "setup" (building the mistune parser) or "tokenize"
    original_error : Exception, optional
        Exception raised by mistune

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Record the failing stage."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(MdToDomError):
    """Building the output document failed.

    Parameters
    ----------
    message : str
        What failed
    rendering_stage : str, optional
        Rendering step that failed (e.g. "traversal")
    original_error : Exception, optional
        Lower-level exception being wrapped

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Record the failing stage."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class TraversalError(RenderingError):
    """Exception raised when the enter/exit event stream is structurally broken.

    A broken stream is a defect in the source tree's walker, not a recoverable
    runtime condition, so this error always propagates out of ``render``.

    Parameters
    ----------
    message : str
        Description of the defect
    node_type : str, optional
        Type of the node whose event exposed the defect

    """

    def __init__(self, message: str, node_type: str | None = None, original_error: Exception | None = None):
        """Initialize the traversal error."""
        super().__init__(message, rendering_stage="traversal", original_error=original_error)
        self.node_type = node_type


class UnbalancedTraversalError(TraversalError):
    """Exception raised when entering and exiting events do not pair up.

    Parameters
    ----------
    depth : int
        Number of open output containers left on the ancestor stack, or -1
        when an exit event arrived with no open container
    message : str, optional
        Custom error message
    node_type : str, optional
        Type of the node whose event exposed the imbalance

    """

    def __init__(self, depth: int, message: str | None = None, node_type: str | None = None):
        """Initialize the unbalanced traversal error."""
        if message is None:
            if depth < 0:
                message = "Exit event without a matching enter event"
            else:
                message = f"Ancestor stack not empty after traversal ({depth} open containers)"
        super().__init__(message, node_type=node_type)
        self.depth = depth


class DependencyError(MdToDomError):
    """An optional third-party package needed at runtime is missing.

    Parameters
    ----------
    component_name : str
        Feature that needs the packages (e.g. "markdown parser")
    missing_packages : list[str]
        Distribution names for ``pip install``
    message : str, optional
        Custom error message. If not provided, generates one with an install hint

    """

    def __init__(
        self,
        component_name: str,
        missing_packages: list[str],
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Build the install hint."""
        self.original_import_error = original_import_error
        self.install_command = "pip install " + " ".join(missing_packages)
        if message is None:
            pkg_list = ", ".join(f"'{name}'" for name in missing_packages)
            message = f"{component_name} requires the following packages: {pkg_list}. Install with: {self.install_command}"
        super().__init__(message, original_error=original_import_error)
        self.component_name = component_name
        self.missing_packages = missing_packages


__all__ = [
    "MdToDomError",
    "ValidationError",
    "InvalidOptionsError",
    "ConfigError",
    "ParsingError",
    "RenderingError",
    "TraversalError",
    "UnbalancedTraversalError",
    "DependencyError",
]
