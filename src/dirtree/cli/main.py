"""Command-line interface for dirtree.

This module provides the command-line entry point, which builds the tree of a
directory and writes its text diagram to stdout or a file. It handles argument
parsing, output writing, error reporting and signal management for graceful
interruption handling.

The whole tree is built before anything is written, so a traversal error never
leaves a partial diagram behind.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution (including unreadable directories)
    2: Command-line syntax error
    126: Permission denied while reading the directory tree
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Draw the current directory
    $ dirtree

    # Two levels, ASCII connectors
    $ dirtree -L 2 -A /path/to/dir
"""

import sys
from collections.abc import Mapping

from dirtree.cli.argparser import build_filter_config, build_render_config, create_parser, validate_args
from dirtree.cli.safe_writer import SafeWriter
from dirtree.cli.signal_handler import setup_signal_handling, signal_handler
from dirtree.exceptions import TreeBuildError
from dirtree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dirtree.file_system_tree.file_system_tree import FileSystemTree


def format_counts(counts: Mapping[str, int]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping with 'directories' and 'files' counts.

    Returns:
        A formatted string showing all counts with appropriate labels.

    Example:
        >>> print(format_counts({"directories": 2, "files": 5}))
        Directories: 2
        Files: 5
    """
    return "\n".join(
        [
            f"Directories: {counts['directories']}",
            f"Files: {counts['files']}",
        ]
    )


def main() -> None:
    """Main entry point for the dirtree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        # Populated by -e/-i while the arguments are parsed
        exclusion_rules = GitIgnoreExclusionRules()

        parser = create_parser(exclusion_rules)
        args = parser.parse_args()
        validate_args(args)

        fs_tree = FileSystemTree(args.directory, build_filter_config(args, exclusion_rules))
        render_config = build_render_config(args)

        try:
            # Build before opening the output so failures leave nothing behind
            fs_tree.get_tree()
        except TreeBuildError as e:
            print(f"Error: {str(e)}", file=sys.stderr)
            sys.exit(126 if e.is_permission_error else 1)

        output_file = args.output if args.output else sys.stdout.fileno()

        with SafeWriter(output_file) as safe_writer:
            try:
                safe_writer.write_lines(fs_tree.stream_tree_representation(render_config))

                if args.summary:
                    count_output_str = format_counts(
                        {
                            "directories": fs_tree.get_directory_count(),
                            "files": fs_tree.get_file_count(),
                        }
                    )
                    if args.summary in ("stdout", "file"):
                        safe_writer.write("\n" + count_output_str + "\n")
                    else:
                        print(count_output_str, file=sys.stderr)

            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    # Handle exit codes based on received signals
    if signal_handler.sigpipe_received.is_set():
        sys.exit(141)
    elif signal_handler.sigint_received.is_set():
        sys.exit(130)


if __name__ == "__main__":
    main()
