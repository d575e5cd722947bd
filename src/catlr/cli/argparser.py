"""Command-line argument parsing for catlr.

This module defines the command-line interface for catlr,
handling argument parsing and validation.
"""

import argparse
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Type, Union

from catlr import __version__
from catlr.filters.filter_set import Filters
from catlr.filters.pattern_matcher import WILDCARD

LEGACY_PATTERN_PREFIX = "."


def _filter_handlers(filters: Filters) -> Dict[str, Callable[[str], None]]:
    return {
        "exclude": filters.add_exclude,
        "include": filters.add_include,
        "list_include": filters.list_filters.add_include,
        "list_exclude": filters.list_filters.add_exclude,
        "print_include": filters.print_filters.add_include,
        "print_exclude": filters.print_filters.add_exclude,
    }


def create_filter_action(filters: Filters) -> Type[argparse.Action]:
    """Create a custom action class for handling filter patterns.

    This factory function creates an action class that adds each pattern to the
    provided filters as arguments are processed, routing it to the axis selected
    by the option's destination. The command-line order of patterns is preserved.

    Args:
        filters: The filters object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """
    handlers = _filter_handlers(filters)

    class FilterPatternAction(argparse.Action):
        """Action adding a pattern to the filter axis named by its destination."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            if dest not in handlers:
                raise ValueError(f"Unknown filter destination: {dest}")
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return
            pattern = str(values)
            handlers[self.dest](pattern)

            # Also keep the raw patterns on the namespace
            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(pattern)

    return FilterPatternAction


def create_parser(filters: Filters) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        filters: The filters object to update during parsing.

    Returns:
        An ArgumentParser instance configured with catlr's options.
    """
    description = """
    catlr: list a directory tree, then print the contents of its files.

    The tree is drawn with an external tool (tree by default) and files are printed
    with a pager (bat by default), falling back to cat and finally to built-in
    implementations when those tools are not installed. The commands can be changed in
    ~/.config/catlr/catlr.conf with the treePrintCommand and filePrintCommand keys.

    Patterns:
      *X*     path contains X            *X      path ends with X
      X*      path starts with X         dir/    the directory and everything in it
      name    any entry with that name   a/b     exactly that relative path

    Includes always win over excludes. Once any include is given for an axis, only
    included paths are shown on that axis. Directories hidden from the listing are not
    descended into at all.
    """

    epilog = """
    Examples:
      catlr                            # List and print all
      catlr . .txt .md                 # List all, print only .txt and .md
      catlr -e .git -e node_modules    # Ignore .git and node_modules entirely
      catlr -pe build/ -pi build/main.js  # Print only build/main.js
      catlr -pi '*.cpp' -pi '*.h'      # List all, print only .cpp and .h files
      catlr -le .git -pe README.md     # Hide .git from tree, skip printing README
    """

    parser = argparse.ArgumentParser(
        prog="catlr",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"catlr {__version__}", help="Show the version and exit"
    )

    FilterAction = create_filter_action(filters)

    parser.add_argument(
        "directory",
        nargs="?",
        help="The directory to list (defaults to the current directory).",
    )
    parser.add_argument(
        "patterns",
        nargs="*",
        metavar="pattern",
        help="Legacy file extensions (e.g. .txt .md), treated as print-include filters.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        metavar="PATTERN",
        action=FilterAction,
        help="Exclude from both the listing and the printing (e.g. -e node_modules).",
    )
    parser.add_argument(
        "-i",
        "--include",
        metavar="PATTERN",
        action=FilterAction,
        help="Include in both the listing and the printing. Overrides excludes.",
    )
    parser.add_argument(
        "-li",
        "--list-include",
        dest="list_include",
        metavar="PATTERN",
        action=FilterAction,
        help="Only list paths matching the pattern.",
    )
    parser.add_argument(
        "-le",
        "--list-exclude",
        dest="list_exclude",
        metavar="PATTERN",
        action=FilterAction,
        help="Exclude from the listing (tree view) only. Excluded directories are not traversed.",
    )
    parser.add_argument(
        "-pi",
        "--print-include",
        dest="print_include",
        metavar="PATTERN",
        action=FilterAction,
        help="Only print files matching the pattern (e.g. -pi '*.cpp').",
    )
    parser.add_argument(
        "-pe",
        "--print-exclude",
        dest="print_exclude",
        metavar="PATTERN",
        action=FilterAction,
        help="Exclude from the printing only (e.g. -pe '*.min.js').",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        metavar="FILE",
        help="Configuration file to use instead of ~/.config/catlr/catlr.conf.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn", "fail"],
        default="ignore",
        help="How to handle permission errors (default: ignore).",
    )

    return parser


def warn_unknown_arguments(unknown: Sequence[str]) -> List[str]:
    """Report unrecognized flags on stderr and return the leftover positionals.

    argparse returns the words that follow an unknown flag together with it, so only
    arguments starting with ``-`` are reported as flags. The rest are returned for
    normal positional handling.
    """
    positionals: List[str] = []
    for arg in unknown:
        if arg.startswith("-") and arg != "-":
            print(f"Warning: Unknown flag '{arg}'. Ignoring.", file=sys.stderr)
        else:
            positionals.append(arg)
    return positionals


def resolve_target(args: argparse.Namespace, filters: Filters, extra: Sequence[str] = ()) -> Path:
    """Work out the target directory and apply legacy extension patterns.

    If the first positional argument is not an existing directory, the current
    directory is listed and that argument is handled like the other positionals:
    arguments starting with ``.`` become print-include suffix patterns (``.txt`` is
    added as ``*.txt``), anything else is reported and ignored.

    Args:
        args: Parsed command-line arguments.
        filters: The filters object to receive legacy patterns.
        extra: Positionals the parser left over, handled after ``args.patterns``.

    Returns:
        The directory to list.
    """
    positionals = list(args.patterns or []) + list(extra)
    directory = args.directory
    if directory is None and positionals:
        directory = positionals.pop(0)

    target = Path(".")
    if directory is not None:
        if os.path.isdir(directory):
            target = Path(directory)
        else:
            positionals.insert(0, directory)

    for arg in positionals:
        if arg.startswith(LEGACY_PATTERN_PREFIX):
            # ".txt" means "ends with .txt"
            filters.print_filters.add_include(WILDCARD + arg)
        else:
            print(f"Warning: Unknown argument '{arg}'. Ignoring.", file=sys.stderr)

    return target
