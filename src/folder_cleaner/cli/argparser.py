"""Command-line argument parsing for folder-cleaner.

This module defines the command-line interface for folder-cleaner,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from folder_cleaner import __version__
from folder_cleaner.size_units import DataSizeUnit


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with folder-cleaner's options.
    """
    description = """
    folder-cleaner: a safer file cleaner.

    Finds the files in a folder whose extensions are marked for deletion, shows how
    much space they take and where they are, and deletes them once you confirm.

    The argument is either the name of a folder group from your configuration file
    (~/.nuke.toml) or a path to a folder. Extension, recursion and hidden-file options
    only apply when cleaning a path.
    """

    epilog = """
    Examples:
      # Clean every folder of the "downloads" group from your config file
      folder-cleaner downloads

      # Delete .tmp and .log files anywhere below a folder, showing the tree first
      folder-cleaner -u -r -e tmp -e log -t ~/scratch

      # Delete everything except PDFs, with folder sizes in the tree
      folder-cleaner -u -k pdf -t -s ~/Downloads

      # Never delete anything under an "important" subfolder
      folder-cleaner -u -r -e tmp -p "important/" ~/scratch

      # Only report sizes, never delete
      folder-cleaner -n downloads

      # Show where your configuration file lives
      folder-cleaner -c
    """

    parser = argparse.ArgumentParser(
        prog="folder-cleaner",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"folder-cleaner {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "path_or_config_key",
        nargs="?",
        metavar="PATH_OR_KEY",
        help="Folder group from your configuration file, or a path to clean.",
    )
    parser.add_argument(
        "-c",
        "--config",
        action="store_true",
        help="Display the path to your configuration file and exit.",
    )
    parser.add_argument(
        "--config-file",
        type=Path,
        metavar="FILE",
        help="Configuration file to use instead of ~/.nuke.toml.",
    )
    parser.add_argument(
        "-u",
        "--use-path",
        action="store_true",
        help="Treat the argument as a path without looking it up in the configuration file.",
    )
    parser.add_argument(
        "-t",
        "--tree",
        action="store_true",
        help="Print the tree of files scheduled for deletion.",
    )
    parser.add_argument(
        "-s",
        "--size",
        action="store_true",
        help="Show the size of each folder in the tree (requires -t/--tree).",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="Scan all subfolders (path mode only).",
    )
    parser.add_argument(
        "-d",
        "--delete-hidden",
        action="store_true",
        help="Include hidden files and folders (path mode only).",
    )
    parser.add_argument(
        "-e",
        "--extension",
        action="append",
        metavar="EXT",
        default=[],
        help="Extension to delete; can be given several times. Without it every extension matches.",
    )
    parser.add_argument(
        "-k",
        "--keep",
        action="append",
        metavar="EXT",
        default=[],
        help="Extension never to delete, even if also given with -e; can be given several times.",
    )
    parser.add_argument(
        "-p",
        "--protect",
        action="append",
        metavar="PATTERN",
        default=[],
        help="Gitignore-style pattern, relative to the folder, for files never to delete.",
    )
    parser.add_argument(
        "--unit",
        type=str.upper,
        choices=[unit.value for unit in DataSizeUnit],
        help="Unit for displayed sizes (default: MB, or the configured unit).",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Only report sizes; never delete.",
    )
    parser.add_argument(
        "--prune-empty",
        action="store_true",
        help="Also remove folders left empty after deletion.",
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Approve the deletion without asking.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v for info, -vv for debug).",
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
    if args.config and args.path_or_config_key:
        raise ValueError("-c/--config cannot be combined with a path or config key")
    if not args.config and not args.path_or_config_key:
        raise ValueError("a path or config key is required unless -c/--config is given")
    if args.size and not args.tree:
        raise ValueError("-s/--size requires -t/--tree")
    if args.yes and args.dry_run:
        raise ValueError("-y/--yes cannot be combined with -n/--dry-run")
