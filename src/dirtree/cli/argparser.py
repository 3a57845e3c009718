"""Command-line argument parsing for dirtree.

This module defines the command-line interface for dirtree, handling argument
parsing, validation, and the translation of parsed arguments into the resolved
configuration consumed by the tree builder and renderer.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from dirtree import __version__
from dirtree.config import FilterConfig, RenderConfig
from dirtree.exclusion_rules.base_rules import BaseExclusionRules


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class for handling exclusion rules.

    The returned action updates the provided exclusion rules object as arguments
    are processed, so -e/--exclude files and -i/--ignore patterns keep the exact
    order in which they appear on the command line.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action adding exclusion rules in command-line order."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
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

            if option_string in ("-e", "--exclude"):
                if isinstance(values, (str, os.PathLike)):
                    exclusion_rules.load_rules(values)
                else:
                    exclusion_rules.load_rules(Path(str(values)))
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            # Keep the raw values on the namespace as well
            collected = getattr(namespace, self.dest, None) or []
            collected.append(values)
            setattr(namespace, self.dest, collected)

    return ExclusionRulesAction


def non_negative_int(value: str) -> int:
    """Parse a depth limit, rejecting negative and non-integer values.

    Raises:
        argparse.ArgumentTypeError: If value is not a non-negative integer.
    """
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r} is not an integer")
    if depth < 0:
        raise argparse.ArgumentTypeError(f"invalid depth: {depth} is negative")
    return depth


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with dirtree's options.
    """
    description = """
    dirtree: draw the structure of a directory as an indented text diagram.

    The whole directory tree is read first, then printed one entry per line with
    box-drawing connectors showing how entries nest.

    Key Features:
    - Hidden entries are skipped unless requested
    - Optional depth limit; directories beyond it are shown but not expanded
    - Unicode or ASCII connector glyphs
    - Gitignore-style exclusion patterns
    - Optional directory/file count summary

    Entries are listed in the order the operating system returns them, which may
    differ between platforms and runs. Use -S/--sort for a stable, name-sorted
    listing.
    """

    epilog = """
    Examples:
      # Draw the current directory
      dirtree

      # Include hidden entries
      dirtree -a /path/to/project

      # Only show the first two levels
      dirtree -L 2 /path/to/project

      # ASCII connectors, sorted entries
      dirtree -A -S /path/to/project

      # Exclude entries with gitignore-style patterns
      dirtree -e .gitignore -i "*.log" -i "!important.log" /path/to/project

      # Write the diagram to a file and print counts to stderr
      dirtree -o tree.txt -s stderr /path/to/project

      # Display version information and exit
      dirtree -V
    """

    parser = argparse.ArgumentParser(
        prog="dirtree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dirtree {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=Path("."),
        help="The directory to draw (default: the current directory).",
    )
    parser.add_argument(
        "-a",
        "--all",
        dest="include_hidden",
        action="store_true",
        help="Include hidden entries (names starting with '.').",
    )
    parser.add_argument(
        "-L",
        "--max-depth",
        type=non_negative_int,
        metavar="N",
        help="Descend at most N levels below the directory. 0 shows the directory alone.",
    )
    parser.add_argument(
        "-A",
        "--ascii",
        dest="use_ascii_glyphs",
        action="store_true",
        help="Draw connectors with ASCII characters instead of box-drawing characters.",
    )
    parser.add_argument(
        "-S",
        "--sort",
        dest="sort_by_name",
        action="store_true",
        help="Sort entries by name instead of using the operating system's listing order.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to exclusion file (e.g., .gitignore) (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Individual gitignore-style pattern to exclude entries. Can be specified multiple times, "
            "and patterns are processed in the order they appear, mixed with -e/--exclude options."
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout", "file"],
        help="Print directory and file counts. Valid destinations: stderr, stdout, file (requires -o)",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.summary == "file" and not args.output:
        raise ValueError("--summary=file requires -o/--output to be specified")


def build_filter_config(args: argparse.Namespace, exclusion_rules: Optional[BaseExclusionRules] = None) -> FilterConfig:
    """Translate parsed arguments into the builder's traversal policy."""
    return FilterConfig(
        include_hidden=args.include_hidden,
        max_depth=args.max_depth,
        sort_by_name=args.sort_by_name,
        exclusion_rules=exclusion_rules,
    )


def build_render_config(args: argparse.Namespace) -> RenderConfig:
    """Translate parsed arguments into rendering options."""
    return RenderConfig(use_ascii_glyphs=args.use_ascii_glyphs)
