"""Command-line argument parsing for icontree.

This module defines the command-line interface for icontree,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from icontree import __version__
from icontree.config import DEFAULT_MAX_DEPTH, OVERVIEW_LIMIT
from icontree.exclusion_rules.base_rules import BaseExclusionRules


def non_negative_int(value: str) -> int:
    """argparse type for the depth limit."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create an action class that feeds -e/-i options into ``exclusion_rules``.

    Rules are added while the command line is parsed, so ignore files and single
    patterns keep the relative order in which they were given.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Adds an ignore file or a single pattern to the shared exclusion rules."""

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
                try:
                    exclusion_rules.load_rules(Path(str(values)))
                except FileNotFoundError as e:
                    parser.error(str(e))
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            recorded = getattr(namespace, self.dest, None) or []
            setattr(namespace, self.dest, recorded + [values])

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with icontree's options.
    """
    description = """
    icontree: print a directory as a tree, with an icon for every entry.

    Entries are listed depth-first, siblings sorted by name, each decorated with
    a Nerd Font glyph chosen from its name, its extension or its file type.
    A final line reports how many directories and files were shown.
    """

    epilog = f"""
    Examples:
      # Tree of the current directory, five levels deep
      icontree .

      # Include dot files, limit to two levels
      icontree -a -l 1 ~/project

      # Directories only, with full paths
      icontree -d -f src

      # Show at most {OVERVIEW_LIMIT} entries per directory
      icontree --overview /usr

      # Plain output for terminals without a Nerd Font
      icontree --no-icons --no-color .

      # Hide entries using gitignore-style rules
      icontree -e .gitignore -i "*.pyc" -i "__pycache__/" .

      # Report unreadable entries on stderr, or stop at the first one
      icontree -P warn /var
      icontree -P fail /var
    """

    parser = argparse.ArgumentParser(
        prog="icontree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"icontree {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument("path", type=Path, help="The directory to print the tree for.")
    parser.add_argument(
        "-l",
        "--level",
        type=non_negative_int,
        default=DEFAULT_MAX_DEPTH,
        metavar="N",
        help=f"How deep to recurse; 0 lists only the top level (default: {DEFAULT_MAX_DEPTH}).",
    )
    parser.add_argument("-a", "--all", action="store_true", help="Include entries whose name starts with a '.'.")
    parser.add_argument("-d", "--directory", action="store_true", help="Only print directories.")
    parser.add_argument("-f", "--full", action="store_true", help="Print the full path of each entry.")
    parser.add_argument(
        "--overview",
        action="store_true",
        help=f"Print at most {OVERVIEW_LIMIT} entries per directory, followed by '...'.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colors. Colors are also off when NO_COLOR is set or output is not a terminal.",
    )
    parser.add_argument("--no-icons", action="store_true", help="Disable icons.")
    parser.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help="Descend into symbolic links to directories. Links back into their own ancestry are not expanded.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a gitignore-style file of patterns to hide (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Gitignore-style pattern to hide, e.g. '*.pyc', 'build/' or '!keep.txt'. Can be specified multiple "
            "times; patterns apply in command-line order, mixed with -e/--exclude."
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
        "-P",
        "--permission-action",
        choices=["ignore", "warn", "fail"],
        default="ignore",
        help="How to handle entries that cannot be read (default: ignore).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments beyond what argparse checks.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If the output file would be written inside a missing directory.
    """
    if args.output is not None and not args.output.parent.is_dir():
        raise ValueError(f"Output directory does not exist: {args.output.parent}")
