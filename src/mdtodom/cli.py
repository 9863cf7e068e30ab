#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/cli.py
"""Command-line viewer for mdtodom.

The ``mdtodom`` command reads one Markdown page, renders it and writes the
resulting HTML. It behaves like a small page viewer:

- without a path (or with a refused one) the welcome page is shown
- a ``view=`` prefix on the path is accepted and stripped
- a page that cannot be read is replaced by a ``# <status> <reason>``
  heading, which is rendered like any other page

With ``--template`` the page is rendered into the element with id
``--container-id`` of an HTML template (after removing that element's
existing children) and the whole template is written out.

Examples
--------
.. code-block:: console

    $ mdtodom README.md -o readme.html
    $ mdtodom view=guide.md --template page.html --raw-html sanitize

"""

from __future__ import annotations

import argparse
import logging
import sys
from http import HTTPStatus
from pathlib import Path
from typing import Optional

from mdtodom import __version__
from mdtodom.config import load_config_file, options_from_config, resolve_config_path
from mdtodom.constants import DEFAULT_WELCOME_PAGE, IMAGE_ELEMENT_MODES, RAW_HTML_MODES
from mdtodom.exceptions import (
    ConfigError,
    DependencyError,
    MdToDomError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from mdtodom.logging_utils import configure_logging
from mdtodom.options.dom import DomRendererOptions
from mdtodom.options.markdown import MarkdownParserOptions
from mdtodom.parsers.markdown import parse_markdown
from mdtodom.renderer import DOMRenderer
from mdtodom.utils.paths import resolve_view_path

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

DEFAULT_CONTAINER_ID = "mdview"


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, (ValidationError, ConfigError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``mdtodom`` command."""
    parser = argparse.ArgumentParser(
        prog="mdtodom",
        description="Render a Markdown page to HTML.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="Markdown page to show, optionally prefixed with 'view=' (default: the welcome page)",
    )
    parser.add_argument("-o", "--output", help="Write HTML to this file instead of stdout")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    render_group = parser.add_argument_group("rendering options")
    render_group.add_argument(
        "--raw-html",
        dest="raw_html_mode",
        choices=RAW_HTML_MODES,
        help=DomRendererOptions.__dataclass_fields__["raw_html_mode"].metadata["help"],
    )
    render_group.add_argument(
        "--image-element",
        choices=IMAGE_ELEMENT_MODES,
        help=DomRendererOptions.__dataclass_fields__["image_element"].metadata["help"],
    )
    render_group.add_argument(
        "--no-heading-ids",
        dest="heading_ids",
        action="store_false",
        default=None,
        help="Do not set id attributes on headings",
    )
    render_group.add_argument(
        "--plugin",
        dest="plugins",
        action="append",
        metavar="NAME",
        help="Enable a mistune plugin (repeatable)",
    )

    page_group = parser.add_argument_group("page options")
    page_group.add_argument(
        "--welcome-page",
        help=f"Page shown when no acceptable path is given (default: {DEFAULT_WELCOME_PAGE})",
    )
    page_group.add_argument("--template", help="HTML page to render into")
    page_group.add_argument(
        "--container-id",
        help=f"Id of the template element that receives the page (default: {DEFAULT_CONTAINER_ID})",
    )

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument("--config", help="Configuration file (TOML, YAML or JSON)")
    config_group.add_argument(
        "--no-config",
        action="store_true",
        help="Ignore MDTODOM_CONFIG and configuration file discovery",
    )

    log_group = parser.add_argument_group("logging")
    log_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    log_group.add_argument("--log-file", help="Also write log messages to this file")
    log_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")

    return parser


def _setup_logging_level(parsed_args: argparse.Namespace, config: dict) -> None:
    # --trace takes precedence over --log-level, which takes precedence over the config file
    if parsed_args.trace:
        log_level: int | str = logging.DEBUG
    else:
        log_level = parsed_args.log_level or config.get("log_level") or "WARNING"
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _load_config(parsed_args: argparse.Namespace) -> dict:
    config_path = resolve_config_path(parsed_args.config, parsed_args.no_config)
    if config_path is None:
        return {}
    return load_config_file(config_path)


def build_options(
    parsed_args: argparse.Namespace, config: dict
) -> tuple[DomRendererOptions, MarkdownParserOptions]:
    """Combine configuration file values and command-line flags into options.

    Flags given on the command line override the configuration file.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments
    config : dict
        Loaded configuration (may be empty)

    Returns
    -------
    tuple of (DomRendererOptions, MarkdownParserOptions)
        Options for the renderer and the parser

    """
    renderer_options, parser_options = options_from_config(config)

    overrides = {
        name: getattr(parsed_args, name)
        for name in ("raw_html_mode", "image_element", "heading_ids")
        if getattr(parsed_args, name) is not None
    }
    if overrides:
        renderer_options = renderer_options.create_updated(**overrides)

    if parsed_args.plugins:
        parser_options = parser_options.create_updated(plugins=tuple(parsed_args.plugins))

    return renderer_options, parser_options


def read_page(path: str) -> tuple[str, bool]:
    """Read a Markdown page, substituting an error page when it cannot be read.

    Parameters
    ----------
    path : str
        Path of the page

    Returns
    -------
    tuple of (str, bool)
        Markdown text, and whether it is the page itself (False for an error page)

    Examples
    --------
    >>> read_page("does-not-exist.md")
    ('# 404 Not Found\\n', False)

    """
    try:
        return Path(path).read_text(encoding="utf-8"), True
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
        status = HTTPStatus.NOT_FOUND
    except PermissionError:
        status = HTTPStatus.FORBIDDEN
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read %s: %s", path, e)
        status = HTTPStatus.INTERNAL_SERVER_ERROR

    logger.warning("Cannot show '%s': %d %s", path, status.value, status.phrase)
    return f"# {status.value} {status.phrase}\n", False


def render_page(
    text: str,
    renderer_options: DomRendererOptions,
    parser_options: MarkdownParserOptions,
    template: Optional[str] = None,
    container_id: str = DEFAULT_CONTAINER_ID,
) -> str:
    """Render Markdown text to HTML, optionally inside a page template.

    Parameters
    ----------
    text : str
        Markdown text
    renderer_options : DomRendererOptions
        Rendering options
    parser_options : MarkdownParserOptions
        Parser options
    template : str, optional
        HTML of a page containing an element with id ``container_id``
    container_id : str, default "mdview"
        Id of the element that receives the rendered page

    Returns
    -------
    str
        Serialized fragment, or the whole template when one is given

    Raises
    ------
    ValidationError
        If the template has no element with id ``container_id``

    """
    from mdtodom.dom.soup import SoupDocument

    tree = parse_markdown(text, parser_options)

    if template is None:
        document = SoupDocument()
        root = DOMRenderer(document, renderer_options).render(tree)
        return document.serialize(root)

    document = SoupDocument.from_markup(template)
    container = document.get_element_by_id(container_id)
    if container is None:
        raise ValidationError(
            f"Template has no element with id '{container_id}'",
            parameter_name="container_id",
            parameter_value=container_id,
        )

    document.remove_children(container)
    DOMRenderer(document, renderer_options).render(tree, container)
    return document.serialize(document.soup)


def main(args: list[str] | None = None) -> int:
    """Execute the ``mdtodom`` command.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments; ``sys.argv[1:]`` when omitted

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    try:
        config = _load_config(parsed_args)
    except ConfigError as e:
        configure_logging(logging.WARNING)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        _setup_logging_level(parsed_args, config)
    except ValueError as e:
        configure_logging(logging.WARNING)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        renderer_options, parser_options = build_options(parsed_args, config)

        welcome_page = parsed_args.welcome_page or config.get("welcome_page") or DEFAULT_WELCOME_PAGE
        page = resolve_view_path(parsed_args.path, welcome_page)
        text, found = read_page(page)

        template_path = parsed_args.template or config.get("template")
        template = Path(template_path).read_text(encoding="utf-8") if template_path else None
        container_id = parsed_args.container_id or config.get("container_id") or DEFAULT_CONTAINER_ID

        html = render_page(text, renderer_options, parser_options, template, container_id)

        if parsed_args.output:
            Path(parsed_args.output).write_text(html, encoding="utf-8")
            logger.info("Wrote %s", parsed_args.output)
        else:
            sys.stdout.write(html)
            if not html.endswith("\n"):
                sys.stdout.write("\n")
    except MdToDomError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    return EXIT_SUCCESS if found else EXIT_FILE_ERROR


if __name__ == "__main__":
    sys.exit(main())
