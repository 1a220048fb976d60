"""Command-line interface for dir2tree.

This module provides the ``dir2tree`` console entry point. It parses the
command line, builds the directory tree, renders it in the requested format
and writes the result to stdout or a file.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Render the current directory as an ASCII tree
    $ dir2tree .

    # Render as HTML into a file, leaving out ignored entries
    $ dir2tree -f html -e .gitignore -o tree.html .
"""

import logging
import os
import sys

from dir2tree.cli.argparser import create_parser, validate_args
from dir2tree.directory_tree.directory_tree import DirectoryTree
from dir2tree.exceptions import DirectoryTreeError, PathNotReadableError
from dir2tree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dir2tree.viewer import DirectoryTreeViewer, create_strategy


def format_counts(tree: DirectoryTree) -> str:
    """Format the directory and file counts of a tree for the summary report."""
    return f"Directories: {tree.get_directory_count()}\nFiles: {tree.get_file_count()}"


def exit_code_for(error: DirectoryTreeError) -> int:
    """Map a tree error onto the process exit code.

    Permission problems exit with 126, whether reported directly or as the
    cause of a failed directory scan; every other error exits with 1.
    """
    if isinstance(error, PathNotReadableError) or isinstance(error.cause, PermissionError):
        return 126
    return 1


def main() -> None:
    """Main entry point for the dir2tree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    try:
        # Populated by the -e/-i actions while the command line is parsed
        exclusion_rules = GitIgnoreExclusionRules()

        parser = create_parser(exclusion_rules)
        args = parser.parse_args()

        validate_args(args)

        if args.verbose:
            logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

        strategy = create_strategy(args.format, args.indent)
        viewer = DirectoryTreeViewer(exclusion_rules=exclusion_rules, indent_size=args.indent)
        tree = viewer.build_tree(args.directory)
        output = strategy.format_tree(tree)

        # Undecodable file names round-trip to their original bytes
        data = output.encode("utf-8", "surrogateescape")
        if args.output:
            args.output.write_bytes(data)
        else:
            sys.stdout.flush()
            sys.stdout.buffer.write(data)
            sys.stdout.buffer.flush()

        if args.summary:
            print(format_counts(tree), file=sys.stderr)

    except BrokenPipeError:
        # Keep the interpreter from complaining again while flushing stdout at shutdown
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)
    except KeyboardInterrupt:
        sys.exit(130)
    except DirectoryTreeError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(exit_code_for(e))
    except (ValueError, OSError) as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
