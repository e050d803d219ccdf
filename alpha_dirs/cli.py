"""
Command-line interface for alpha-dirs.

Handles argument parsing and drives collection, bucketing and placement.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

from .config import Config, DEFAULT_CONFIG, PlacementMode
from .errors import AlphaDirsError, ConfigurationError
from .normalize import assign_buckets
from .operations import place_files
from .sources import collect_candidates, destination_within, validate_sources
from .utils import OutputCallback, default_output

# Type alias for confirmation callback: prompt -> answer
ConfirmCallback = Callable[[str], bool]


def decline(prompt: str) -> bool:
    """Confirmation callback for non-interactive callers: always says no."""
    return False


def ask_confirmation(prompt: str, input_func: Callable[[str], str] = input) -> bool:
    """
    Ask a yes/no question on the terminal. Anything but "y..." means no.

    Args:
        prompt: Question to show
        input_func: Reads one line of input (injectable for testing)

    Returns:
        True only if the reply starts with "y" or "Y"
    """
    try:
        reply = input_func(prompt)
    except EOFError:
        return False
    return reply.strip().lower().startswith("y")


def create_parser(config: Config = DEFAULT_CONFIG) -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Args:
        config: Configuration to use for default values in help text

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="alpha-dirs",
        description=(
            "Take the files from one or more source files/directories and organize "
            "them into first-letter directories, so they are easy to browse on "
            "devices (like TVs) that lack fast navigation or sorting."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Layout:
  dest_dir/
  ├── a
  │   ├── Abc
  │   └── Amazing.txt
  ├── b
  │   ├── Baseball.jpg
  │   └── bats
  └── c
      ├── Cows.jpg
      └── crazy_recipe.html

Names with nothing usable to sort on go to {config.fallback_key}/.
Files whose name already exists in their letter directory are skipped.
Use --dry-run to preview changes before applying.
        """
    )

    parser.add_argument(
        "dest_dir",
        metavar="DEST_DIR",
        help="Directory to create the letter directories in"
    )

    parser.add_argument(
        "sources",
        metavar="SOURCE",
        nargs="+",
        help="Files/directories to sort"
    )

    parser.add_argument(
        "--dry-run", "-d",
        action="store_true",
        help="Do not move/copy/link any files, just show what would happen"
    )

    modes = parser.add_mutually_exclusive_group()
    modes.add_argument(
        "--link", "-l",
        action="store_true",
        help="Create symbolic links instead of moving the files"
    )
    modes.add_argument(
        "--copy", "-c",
        action="store_true",
        help="Copy the files instead of moving them"
    )

    parser.add_argument(
        "--ignore-the", "-t",
        action="store_true",
        help=f'Ignore a leading "{config.leading_article}" (any case) and punctuation, '
             f'so "The Great Gatsby" goes to g/'
    )

    parser.add_argument(
        "--recurse", "-r",
        action="store_true",
        help="Recurse into source directories (default: top-level files only)"
    )

    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Answer yes to confirmation prompts"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging"
    )

    return parser


def resolve_mode(args: argparse.Namespace) -> PlacementMode:
    """
    Work out the placement mode from the parsed flags.

    Raises:
        ConfigurationError: If both --link and --copy are set
    """
    if args.link and args.copy:
        raise ConfigurationError("Only *one* of --link (-l) or --copy (-c) may be specified")
    if args.link:
        return PlacementMode.LINK
    if args.copy:
        return PlacementMode.COPY
    return PlacementMode.MOVE


def run(
    args: argparse.Namespace,
    config: Config = DEFAULT_CONFIG,
    confirm: ConfirmCallback = decline,
    output: OutputCallback = default_output,
) -> int:
    """
    Run alpha-dirs with the given arguments.

    Args:
        args: Parsed command-line arguments
        config: Configuration to use
        confirm: Asked before walking over a destination inside a source
        output: Callback for output messages

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        mode = resolve_mode(args)
        destination = Path(args.dest_dir).expanduser().resolve()

        # Validate everything before touching anything
        specs = validate_sources(args.sources, recurse=args.recurse, destination=destination)

        overlapping = destination_within(destination, specs)
        if overlapping and not args.yes:
            for spec in overlapping:
                output(f"Destination {destination} is inside source {spec.path}; it will not be scanned.")
            if not confirm(config.confirm_prompt):
                print("Aborted, nothing was changed.", file=sys.stderr)
                return 1

        candidates = collect_candidates(specs, destination=destination, output=output)
        assignments = assign_buckets(candidates, ignore_the=args.ignore_the, config=config)

        place_files(
            assignments,
            destination,
            mode=mode,
            dry_run=args.dry_run,
            config=config,
            output=output,
        )

        return 0

    except (AlphaDirsError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; debug detail only with --verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s - %(name)s - %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    config = DEFAULT_CONFIG
    parser = create_parser(config)
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    return run(args, config, confirm=ask_confirmation)


if __name__ == "__main__":
    sys.exit(main())
