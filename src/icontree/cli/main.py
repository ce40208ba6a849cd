"""Command-line interface for icontree.

This module is the entry point of the ``icontree`` command. It parses the
command line, builds a RenderConfig, streams the rendered tree to stdout or a
file, and maps failures and signals to exit codes.

Signal Handling Notes:
    - SIGPIPE: Handled when output pipe is closed (e.g., when piping to `head`)
    - SIGINT: Handled for clean exit on Ctrl+C
    In both cases output stops between two lines and the process exits with the
    conventional status.

Exit Codes:
    0: Successful completion
    1: Runtime error, including a path that is not a directory
    2: Command-line syntax error
    126: An entry could not be read and --permission-action is fail
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE)

Example:
    # Tree of a project, hidden files included
    $ icontree -a /path/to/project

    # Hide build output and stop on unreadable entries
    $ icontree -i "build/" -P fail /path/to/project
"""

import argparse
import os
import sys
from typing import Mapping, Optional

from icontree.cli.argparser import create_parser, validate_args
from icontree.cli.safe_writer import SafeWriter
from icontree.cli.signal_handler import setup_signal_handling, signal_handler
from icontree.config import RenderConfig
from icontree.exceptions import EncodingFailureError
from icontree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from icontree.file_system_tree.permission_action import PermissionAction
from icontree.file_system_tree.tree_renderer import TreeRenderer


def use_color(args: argparse.Namespace, environ: Optional[Mapping[str, str]] = None) -> bool:
    """Decide whether labels are coloured.

    Colour needs all of: no --no-color flag, no NO_COLOR environment variable
    (any value, see https://no-color.org), output going to stdout, and stdout
    being a terminal.
    """
    if environ is None:
        environ = os.environ
    if args.no_color or "NO_COLOR" in environ or args.output is not None:
        return False
    return sys.stdout.isatty()


def build_config(args: argparse.Namespace, exclusion_rules: GitIgnoreExclusionRules) -> RenderConfig:
    """Translate parsed arguments into a RenderConfig.

    Raises:
        PathInvalidError: If the path is not an existing directory.
    """
    permission_action = {
        "ignore": PermissionAction.IGNORE,
        "warn": PermissionAction.IGNORE,
        "fail": PermissionAction.RAISE,
    }[args.permission_action]

    return RenderConfig(
        args.path,
        max_depth=args.level,
        include_hidden=args.all,
        directories_only=args.directory,
        full_path=args.full,
        overview=args.overview,
        no_color=not use_color(args),
        no_icons=args.no_icons,
        follow_symlinks=args.follow_symlinks,
        exclusion_rules=exclusion_rules if exclusion_rules.patterns else None,
        permission_action=permission_action,
    )


def main() -> None:
    """Main entry point for the icontree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error, including a path that is not a directory
        2: Command-line syntax error
        126: An entry could not be read and --permission-action is fail
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE)
    """
    setup_signal_handling()

    try:
        # Populated by -e/-i while the command line is parsed
        exclusion_rules = GitIgnoreExclusionRules()
        parser = create_parser(exclusion_rules)
        args = parser.parse_args()
        validate_args(args)

        # Fails before the output file is opened, so there is no partial output
        renderer = TreeRenderer(build_config(args, exclusion_rules))

        output_file = args.output if args.output else sys.stdout.fileno()

        with SafeWriter(output_file) as safe_writer:
            try:
                for line in renderer.stream_tree():
                    safe_writer.write(line + "\n")
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager
            except (OSError, EncodingFailureError) as e:
                # Lines already written stay as partial output
                print(f"Error: {str(e)}", file=sys.stderr)
                sys.exit(126)

        if args.permission_action == "warn":
            for message in renderer.summary.skipped:
                print(f"Warning: {message}", file=sys.stderr)

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    if signal_handler.sigpipe_received.is_set():
        sys.exit(141)
    elif signal_handler.sigint_received.is_set():
        sys.exit(130)


if __name__ == "__main__":
    main()
