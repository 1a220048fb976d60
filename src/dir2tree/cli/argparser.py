"""Command-line argument parsing for dir2tree.

This module defines the command-line interface for dir2tree,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from dir2tree import __version__
from dir2tree.exclusion_rules.base_rules import BaseExclusionRules
from dir2tree.types import OutputFormat


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create an argparse action that feeds -e/-i options into ``exclusion_rules``.

    Rules are added while the command line is parsed, so files and single
    patterns keep the relative order in which they were given.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
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
            recorded.append(values)
            setattr(namespace, self.dest, recorded)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with dir2tree's options.
    """
    description = """
    dir2tree: render a directory hierarchy as text.

    The directory is walked once and captured as an ordered snapshot: in every
    directory, subdirectories come first and files second, each group sorted
    by name. The snapshot is then rendered in the requested format.
    """

    epilog = """
    Examples:
      # ASCII tree of the current project
      dir2tree /path/to/project

      # Markdown list with four-space indentation
      dir2tree -f markdown --indent 4 /path/to/project

      # JSON written to a file
      dir2tree -f json -o tree.json /path/to/project

      # Skip entries listed in .gitignore plus all log files
      dir2tree -e .gitignore -i "*.log" /path/to/project

      # Print directory and file counts to stderr
      dir2tree -s /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="dir2tree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dir2tree {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "directory",
        type=Path,
        help="The directory to render.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[output_format.value for output_format in OutputFormat],
        default=OutputFormat.TEXT_TREE.value,
        help="Output format (default: text-tree).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a .gitignore-style file of patterns to leave out (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help="Single gitignore-style pattern to leave out (can be specified multiple times).",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        metavar="N",
        help="Spaces per level for the text-indented and markdown formats (default: 2).",
    )
    parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Print the number of directories and files to stderr.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress of the directory walk to stderr.",
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
    if args.indent < 0:
        raise ValueError(f"--indent must not be negative, got {args.indent}")
