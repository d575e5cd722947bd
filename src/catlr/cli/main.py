"""Command-line interface for catlr.

This module provides the command-line interface for catlr, which lists a directory
tree and then prints the contents of the files in it. It handles argument parsing,
configuration loading, output writing, and signal management for graceful
interruption handling.

Key Features:
    - Directory tree visualization through an external tool or the built-in renderer
    - Recursive file content output through a pager, cat, or the built-in reader
    - Independent include/exclude filters for the listing and the printing
    - Protection against printing the file that output is redirected to
    - Signal handling (SIGPIPE on Unix systems, SIGINT)

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # List and print everything below the current directory
    $ catlr

    # Skip dependencies entirely, print only Python sources
    $ catlr /path/to/project -e node_modules -pi '*.py'
"""

import sys

from catlr.catlr import StreamingCatlr
from catlr.cli.argparser import create_parser, resolve_target, warn_unknown_arguments
from catlr.cli.safe_writer import SafeWriter
from catlr.cli.signal_handler import setup_signal_handling, signal_handler
from catlr.config import load_config
from catlr.file_system_tree.file_identifier import FileIdentifier
from catlr.file_system_tree.permission_action import PermissionAction
from catlr.filters.filter_set import Filters


def main() -> None:
    """Main entry point for the catlr command-line interface.

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
        # Populated by the parser as filter options are encountered
        filters = Filters()

        parser = create_parser(filters)
        args, unknown = parser.parse_known_intermixed_args()
        leftover = warn_unknown_arguments(unknown)

        directory = resolve_target(args, filters, leftover)
        config = load_config(args.config)

        # Map CLI permission actions to internal enum
        perm_action = {
            "ignore": PermissionAction.IGNORE,
            "warn": PermissionAction.RAISE,
            "fail": PermissionAction.RAISE,
        }[args.permission_action]

        output_fd = sys.stdout.fileno()

        try:
            listing = StreamingCatlr(
                directory,
                filters=filters,
                config=config,
                permission_action=perm_action,
                output_identity=FileIdentifier.for_redirected_output(output_fd),
                interactive=sys.stdout.isatty(),
            )

            with SafeWriter(output_fd) as safe_writer:
                try:
                    for line in listing.stream_tree():
                        safe_writer.write(line)
                    for chunk in listing.stream_contents():
                        safe_writer.write(chunk)
                except BrokenPipeError:
                    pass  # SafeWriter will automatically close in the context manager

        except PermissionError as e:
            if args.permission_action == "warn":
                print(f"Warning: {str(e)}", file=sys.stderr)
            elif args.permission_action == "fail":
                print(f"Error: {str(e)}", file=sys.stderr)
                sys.exit(126)

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
