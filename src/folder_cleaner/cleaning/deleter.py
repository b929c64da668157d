"""Remove the files of a walked leaf sequence."""

import logging
import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from folder_cleaner.folder_tree.tree_leaf import TreeLeaf, iterate_file_leaves

log = logging.getLogger(__name__)


class DeletionFailure:
    """A file or folder that could not be removed.

    Attributes:
        path (Path): The entry that was left in place.
        error (OSError): Why the removal failed.
    """

    def __init__(self, path: Path, error: OSError):
        self.path = path
        self.error = error

    def __str__(self) -> str:
        return f"{self.path}: {self.error.strerror or self.error}"

    def __repr__(self) -> str:
        return f"DeletionFailure(path={str(self.path)!r}, error={self.error!r})"


class DeletionReport:
    """Outcome of a deletion run.

    Attributes:
        deleted_files (List[Path]): Files that were removed.
        deleted_folders (List[Path]): Folders removed because they ended up empty.
        failures (List[DeletionFailure]): Entries that could not be removed.
        interrupted (bool): True if the run stopped before every file was processed.
    """

    def __init__(self) -> None:
        self.deleted_files: List[Path] = []
        self.deleted_folders: List[Path] = []
        self.failures: List[DeletionFailure] = []
        self.interrupted = False

    @property
    def succeeded(self) -> bool:
        return not self.failures and not self.interrupted

    def summary(self) -> str:
        """One-paragraph description of the run, failures listed one per line."""
        lines = [f"Deleted {len(self.deleted_files)} files and {len(self.deleted_folders)} folders."]
        if self.interrupted:
            lines.append("Deletion was interrupted before all files were processed.")
        if self.failures:
            lines.append(f"Failed to delete {len(self.failures)} entries:")
            lines.extend(f"    {failure}" for failure in self.failures)
        return "\n".join(lines)


def delete_leaves(
    leaves: Iterable[TreeLeaf],
    prune_empty_dirs: bool = False,
    should_stop: Optional[Callable[[], bool]] = None,
) -> DeletionReport:
    """Delete every file leaf of a walked sequence.

    A failure to remove one file is recorded and the run continues with the next. A file
    that is already gone, for instance because it was reached through a symlinked
    folder earlier in the run, is skipped. Leaves without a real filesystem path are
    ignored.

    Args:
        leaves: Leaf sequence produced by the tree walker.
        prune_empty_dirs: Also remove non-root folder leaves that are empty once their
            files are gone, deepest first.
        should_stop: Polled before each removal; returning True ends the run early.

    Returns:
        A report of what was removed and what failed.
    """
    leaves = [leaf for leaf in leaves if leaf.has_real_path]
    report = DeletionReport()

    for leaf in iterate_file_leaves(leaves):
        if should_stop is not None and should_stop():
            report.interrupted = True
            log.info("Deletion interrupted")
            return report
        try:
            os.remove(leaf.path)
        except FileNotFoundError:
            log.debug("Skipping %s: already removed", leaf.path)
        except OSError as e:
            log.warning("Could not delete %s: %s", leaf.path, e)
            report.failures.append(DeletionFailure(leaf.path, e))
        else:
            log.debug("Deleted %s", leaf.path)
            report.deleted_files.append(leaf.path)

    if prune_empty_dirs:
        _remove_empty_folders(leaves, report)

    return report


def _remove_empty_folders(leaves: List[TreeLeaf], report: DeletionReport) -> None:
    folders = [leaf for leaf in leaves if not leaf.is_file and leaf.depth > 0]
    for leaf in sorted(folders, key=lambda leaf: leaf.depth, reverse=True):
        try:
            if any(leaf.path.iterdir()):
                continue
            os.rmdir(leaf.path)
        except OSError as e:
            report.failures.append(DeletionFailure(leaf.path, e))
        else:
            log.debug("Removed empty folder %s", leaf.path)
            report.deleted_folders.append(leaf.path)
