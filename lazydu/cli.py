"""Command-line front door for lazydu.

Parses options, builds the tree from a ``du`` output file read backwards,
then either prints it or opens the interactive browser.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .errors import FormatError, UsageError
from .render import render_plain_tree
from .reverse_lines import iter_reversed_lines
from .runtime import run_browser
from .runtime.app import DEFAULT_VIEW_THRESHOLD
from .runtime.controller import DEFAULT_SORT_DESCENDING
from .runtime.config import (
    load_absolute_threshold,
    load_config,
    load_human_readable,
    load_relative_threshold,
    load_sort_key,
    load_theme_name,
)
from .size_format import SizeFormat
from .tree_model import (
    DEFAULT_ABSOLUTE_THRESHOLD,
    DEFAULT_RELATIVE_THRESHOLD,
    DuTree,
    SortKey,
    build_tree,
    flatten,
    open_all,
)
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def _non_negative_int(value: str) -> int:
    """argparse type for integer values >= 0."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _non_negative_float(value: str) -> float:
    """argparse type for float values >= 0."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazydu",
        description="Browse the output of 'du' as a collapsible tree.",
    )
    parser.add_argument("paths", nargs="*", metavar="FILE", help="File holding 'du' output.")
    parser.add_argument(
        "-t",
        "--threshold",
        type=_non_negative_int,
        default=None,
        help=f"Only keep entries of at least THRESHOLD units (default: {DEFAULT_ABSOLUTE_THRESHOLD}).",
    )
    parser.add_argument(
        "-T",
        "--relative-threshold",
        type=_non_negative_float,
        default=None,
        help=f"Only keep entries of at least this fraction of the total (default: {DEFAULT_RELATIVE_THRESHOLD}).",
    )
    parser.add_argument(
        "--sort",
        choices=[key.value for key in SortKey],
        default=None,
        help="Initial child order.",
    )
    parser.add_argument("--human-readable", action="store_true", help="Start with human-readable sizes.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--print", dest="print_tree", action="store_true", help="Print the expanded tree and exit.")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors.")
    return parser


def configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def single_input_path(paths: list[str]) -> Path:
    """Return the one input path, or raise ``UsageError``."""
    if len(paths) != 1:
        raise UsageError(f"expected exactly one FILE argument, got {len(paths)}")
    return Path(paths[0])


def load_tree(path: Path, relative_threshold: float, absolute_threshold: int) -> DuTree:
    """Build the tree from ``path``, reading the file from its end."""
    logger.info("reading %s", path)
    with path.open("rb") as stream:
        return build_tree(
            iter_reversed_lines(stream),
            relative_threshold=relative_threshold,
            absolute_threshold=absolute_threshold,
        )


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, build the tree and browse or print it.

    Returns the process exit status: ``0`` on success, ``1`` when the input
    cannot be read or parsed, ``2`` on a usage error.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    try:
        path = single_input_path(args.paths)
    except UsageError as exc:
        parser.print_usage(sys.stderr)
        sys.stderr.write(f"{parser.prog}: error: {exc}\n")
        return EXIT_USAGE

    config = load_config()
    absolute_threshold = args.threshold
    if absolute_threshold is None:
        absolute_threshold = load_absolute_threshold(config)
    if absolute_threshold is None:
        absolute_threshold = DEFAULT_ABSOLUTE_THRESHOLD
    relative_threshold = args.relative_threshold
    if relative_threshold is None:
        relative_threshold = load_relative_threshold(config)
    if relative_threshold is None:
        relative_threshold = DEFAULT_RELATIVE_THRESHOLD
    sort_key = SortKey(args.sort) if args.sort else load_sort_key(config)
    human_readable = args.human_readable or load_human_readable(config)
    size_format = SizeFormat.HUMAN if human_readable else SizeFormat.COMMAS
    theme_name = args.theme if args.theme is not None else load_theme_name(config)

    try:
        tree = load_tree(path, relative_threshold, absolute_threshold)
    except OSError as exc:
        sys.stderr.write(f"Cannot read {path}: {exc.strerror or exc}\n")
        return EXIT_FAILURE
    except FormatError as exc:
        sys.stderr.write(f"Format error: {exc}\n")
        return EXIT_FAILURE

    if args.print_tree:
        open_all(tree.root)
        descending = DEFAULT_SORT_DESCENDING.get(sort_key, False)
        rows = flatten(tree.root, sort_key, descending, DEFAULT_VIEW_THRESHOLD)
        no_color = args.no_color or not sys.stdout.isatty()
        theme = resolve_theme(theme_name, no_color=no_color)
        sys.stdout.write(render_plain_tree(rows, tree.root, size_format, theme))
        return EXIT_OK

    run_browser(
        tree,
        size_format=size_format,
        sort_key=sort_key,
        theme=resolve_theme(theme_name, no_color=args.no_color),
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
