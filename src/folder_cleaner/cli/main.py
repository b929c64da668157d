"""Command-line interface for folder-cleaner.

This module provides the command-line entry point. It resolves the folders to clean
from the configuration file or the command line, prints an overview of what would be
deleted, optionally renders the deletion tree, asks for confirmation, and deletes.

Exit Codes:
    0: Successful completion
    1: Runtime error, or some files could not be deleted
    2: Command-line syntax error
    126: Permission denied while scanning
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    # Clean the folders of a config group
    $ folder-cleaner downloads

    # Clean a path directly, previewing the tree with folder sizes
    $ folder-cleaner -u -r -e tmp -t -s ~/scratch
"""

import argparse
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional

from folder_cleaner.cleaning.deleter import DeletionReport, delete_leaves
from folder_cleaner.cli.argparser import create_parser, validate_args
from folder_cleaner.cli.signal_handler import restore_signal_handling, setup_signal_handling, signal_handler
from folder_cleaner.config import get_user_config_path, load_config
from folder_cleaner.deletion_rules.rule_set import RuleSet
from folder_cleaner.exceptions import (
    ConfigError,
    ConfigReadError,
    PathOrConfigKeyError,
    WalkError,
    WalkIOError,
)
from folder_cleaner.folder_tree.deletion_tree import DeletionTree
from folder_cleaner.overview import TextOverviewType
from folder_cleaner.size_units import DataSizeUnit

log = logging.getLogger(__name__)


class PromptChoice(str, Enum):
    """Answers offered after the overview is shown."""

    DELETE = "Delete"
    EXIT = "Exit"
    TREE = "Print directory tree"


def setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def prompt_user_decision(
    overview_type: TextOverviewType,
    input_func: Callable[[str], str] = input,
) -> PromptChoice:
    """Ask the user what to do next until a valid answer is given.

    End of input counts as :attr:`PromptChoice.EXIT`.

    Args:
        overview_type: DELETION offers delete, exit and tree; SIZE offers exit and tree.
        input_func: Function reading one line of user input.

    Returns:
        The selected choice.
    """
    if overview_type is TextOverviewType.DELETION:
        choices = [PromptChoice.DELETE, PromptChoice.EXIT, PromptChoice.TREE]
        question = "Would you like to proceed with the deletion?"
    else:
        choices = [PromptChoice.EXIT, PromptChoice.TREE]
        question = "Would you like to see the directory tree representation?"

    menu = "\n".join(f"  {index}) {choice.value}" for index, choice in enumerate(choices, start=1))
    while True:
        try:
            answer = input_func(f"{question}\n{menu}\n> ").strip().lower()
        except EOFError:
            return PromptChoice.EXIT

        for index, choice in enumerate(choices, start=1):
            if answer in (str(index), choice.value.lower(), choice.value.lower()[0]):
                return choice
        print(f"Please answer with a number between 1 and {len(choices)}.")


def _rule_set_from_args(path: Path, args: argparse.Namespace, unit: DataSizeUnit) -> RuleSet:
    return RuleSet(
        path.expanduser(),
        extensions_to_delete=args.extension,
        extensions_to_keep=args.keep,
        recurse_into_subdirectories=args.recursive,
        include_hidden=args.delete_hidden,
        protect_patterns=args.protect,
        display_unit=unit,
    )


def resolve_rule_sets(args: argparse.Namespace) -> List[RuleSet]:
    """Turn the positional argument into the rule sets to clean.

    The argument names a config group unless ``--use-path`` is given. A key missing
    from the configuration (or a missing configuration file) falls back to path mode
    when the key is an existing path.

    Raises:
        PathOrConfigKeyError: If the key is neither a group nor an existing path.
        ConfigError: If the configuration file exists but is invalid.
    """
    key = args.path_or_config_key
    unit_override = DataSizeUnit(args.unit) if args.unit else None

    if args.use_path:
        return [_rule_set_from_args(Path(key), args, unit_override or DataSizeUnit.MB)]

    config_path = args.config_file or get_user_config_path()
    try:
        config = load_config(config_path)
    except ConfigReadError:
        log.info("No readable config at %s; treating '%s' as a path", config_path, key)
        config = None

    if config is not None and key in config.groups:
        rule_sets = config.groups[key]
        if unit_override is not None:
            return [rule_set.with_display_unit(unit_override) for rule_set in rule_sets]
        return rule_sets

    if Path(key).expanduser().exists():
        default_unit = config.display_unit if config is not None else DataSizeUnit.MB
        return [_rule_set_from_args(Path(key), args, unit_override or default_unit)]

    raise PathOrConfigKeyError(key)


def clean_folder(
    rule_set: RuleSet,
    args: argparse.Namespace,
    input_func: Callable[[str], str] = input,
) -> Optional[DeletionReport]:
    """Walk, report on and (once confirmed) clean a single folder.

    Returns:
        The deletion report, or None if nothing was deleted.

    Raises:
        WalkError: If the folder cannot be walked.
    """
    tree = DeletionTree(rule_set)
    if tree.is_empty:
        print(f"Nothing to delete in {rule_set.root_directory}")
        return None

    overview_type = TextOverviewType.SIZE if args.dry_run else TextOverviewType.DELETION
    print(overview_type.generate_text(rule_set, tree.metadata))

    options = tree.render_options(show_sizes=args.size)
    if args.tree:
        print(tree.get_tree_representation(options), end="")

    if not args.yes:
        choice = prompt_user_decision(overview_type, input_func)
        while choice is PromptChoice.TREE:
            print(tree.get_tree_representation(options), end="")
            choice = prompt_user_decision(overview_type, input_func)
        if choice is PromptChoice.EXIT:
            print(f"Leaving {rule_set.root_directory} untouched.")
            return None

    if args.dry_run:
        return None

    setup_signal_handling()
    try:
        report = delete_leaves(
            tree.leaves,
            prune_empty_dirs=args.prune_empty,
            should_stop=signal_handler.sigint_received.is_set,
        )
    finally:
        restore_signal_handling()

    print(report.summary())
    return report


def main() -> None:
    """Main entry point for the folder-cleaner command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error, or some files could not be deleted
        2: Command-line syntax error
        126: Permission denied while scanning
        130: Interrupted by SIGINT (Ctrl+C)
    """
    parser = create_parser()
    args = parser.parse_args()

    try:
        validate_args(args)
    except ValueError as e:
        parser.error(str(e))

    setup_logging(args.verbose)

    failed = False
    try:
        if args.config:
            print(
                f"The path to your current configuration file is: {args.config_file or get_user_config_path()}. "
                "You can edit this file to customize your cleaning preferences."
            )
            return

        for rule_set in resolve_rule_sets(args):
            report = clean_folder(rule_set, args)
            if report is not None and not report.succeeded:
                failed = True
            if signal_handler.sigint_received.is_set():
                break

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(130)
    except WalkIOError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126 if e.is_permission_error else 1)
    except (WalkError, ConfigError, PathOrConfigKeyError) as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    if signal_handler.sigint_received.is_set():
        sys.exit(130)
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
