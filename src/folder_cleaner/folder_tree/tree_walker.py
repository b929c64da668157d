"""Walk a folder and collect the files marked for deletion as a tree leaf sequence.

The walk never recurses at the Python level. It runs in three passes over explicit
stacks:

1. scan: list every reachable folder, stat every file, evaluate the deletion rules;
2. prune: drop folders that contain nothing marked for deletion, children first;
3. emit: produce the surviving entries in pre-order with depth and last-sibling flags.

Any I/O failure aborts the walk with nothing returned, so the counts in the metadata
always describe exactly the leaves that were emitted.
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Dict, FrozenSet, List, Tuple

from folder_cleaner.deletion_rules.extension_rules import should_delete
from folder_cleaner.deletion_rules.rule_set import RuleSet
from folder_cleaner.exceptions import RootNotFoundError, WalkIOError
from folder_cleaner.folder_tree.file_identifier import FileIdentifier
from folder_cleaner.folder_tree.tree_leaf import PathKey, TreeLeaf
from folder_cleaner.types import PathType

log = logging.getLogger(__name__)


class DeletionMetadata:
    """Statistics gathered while walking a folder.

    Attributes:
        total_bytes_scanned (int): Size of every file visited, deletable or not.
        bytes_marked_for_deletion (int): Size of the files marked for deletion.
        file_count (int): Number of files marked for deletion.
        dir_count (int): Number of folders, not counting the root, that contain at
            least one file marked for deletion somewhere below them.
        root_last_modified (datetime): Modification time of the root when the walk
            started.
        folder_sizes (Dict[Path, int]): Bytes marked for deletion below each emitted
            folder, the root included.
    """

    def __init__(self, root_last_modified: datetime) -> None:
        self.total_bytes_scanned = 0
        self.bytes_marked_for_deletion = 0
        self.file_count = 0
        self.dir_count = 0
        self.root_last_modified = root_last_modified
        self.folder_sizes: Dict[Path, int] = {}

    @classmethod
    def from_root(cls, root: Path) -> "DeletionMetadata":
        """Create empty metadata stamped with the root's modification time.

        Raises:
            WalkIOError: If the root cannot be stat'ed.
        """
        try:
            modified = root.stat().st_mtime
        except OSError as e:
            raise WalkIOError(root, e) from e
        return cls(datetime.fromtimestamp(modified))

    def record_file(self, size: int, marked: bool) -> None:
        self.total_bytes_scanned += size
        if marked:
            self.bytes_marked_for_deletion += size
            self.file_count += 1

    def __repr__(self) -> str:
        return (
            f"DeletionMetadata(total_bytes_scanned={self.total_bytes_scanned}, "
            f"bytes_marked_for_deletion={self.bytes_marked_for_deletion}, "
            f"file_count={self.file_count}, dir_count={self.dir_count})"
        )


class _ScannedFolder:
    """Result of listing one folder during the scan pass."""

    __slots__ = ("path", "files", "subfolders", "marked_bytes")

    def __init__(self, path: Path) -> None:
        self.path = path
        self.files: List[Path] = []
        self.subfolders: List[Path] = []
        self.marked_bytes = 0


def walk(root: PathType, rule_set: RuleSet) -> Tuple[List[TreeLeaf], DeletionMetadata]:
    """Collect every file under ``root`` that ``rule_set`` marks for deletion.

    The returned leaves form a pre-order traversal: the root first (depth 0), then each
    surviving child sorted by name, each folder immediately followed by its own
    descendants. Only files marked for deletion and folders that contain such files
    appear. The last child of every folder has ``is_last`` set.

    A root that is a plain file yields a single file leaf when it is marked for
    deletion and no leaves otherwise.

    Args:
        root: The folder (or file) to walk.
        rule_set: Rules deciding which files are marked for deletion.

    Returns:
        The leaf sequence and the metadata gathered while walking.

    Raises:
        RootNotFoundError: If ``root`` does not exist.
        WalkIOError: If a folder cannot be listed or a file cannot be stat'ed.

    Example:
        >>> leaves, metadata = walk("downloads", RuleSet("downloads", ["tmp"]))  # doctest: +SKIP
        >>> [(leaf.display_name, leaf.depth) for leaf in leaves]  # doctest: +SKIP
        [('downloads', 0), ('old.tmp', 1)]
    """
    root = Path(root)
    if not root.exists():
        raise RootNotFoundError(root)

    metadata = DeletionMetadata.from_root(root)

    if not root.is_dir():
        return _walk_single_file(root, rule_set, metadata), metadata

    scanned = _scan_folders(root, rule_set, metadata)
    surviving = _prune_folders(scanned, metadata)
    leaves = _emit_leaves(root, surviving, metadata)

    log.debug(
        "Walked %s: %d files and %d folders marked for deletion",
        root,
        metadata.file_count,
        metadata.dir_count,
    )
    return leaves, metadata


def _walk_single_file(path: Path, rule_set: RuleSet, metadata: DeletionMetadata) -> List[TreeLeaf]:
    marked = should_delete(path, rule_set, path.parent)
    metadata.record_file(_file_size(path), marked)
    if not marked:
        return []
    return [TreeLeaf.root(PathKey(path), is_file=True)]


def _file_size(path: Path) -> int:
    try:
        return os.stat(path).st_size
    except OSError as e:
        raise WalkIOError(path, e) from e


def _scan_folders(root: Path, rule_set: RuleSet, metadata: DeletionMetadata) -> Dict[Path, _ScannedFolder]:
    """List every reachable folder, parents strictly before their children.

    Each pending folder carries the identifiers of the folders above it. A folder whose
    identifier is among them is a symlink cycle and is not entered. Aliases of folders
    elsewhere in the tree are scanned under each of their paths.
    """
    scanned: Dict[Path, _ScannedFolder] = {}
    pending: List[Tuple[Path, FrozenSet[FileIdentifier]]] = [(root, frozenset())]

    while pending:
        folder_path, ancestors = pending.pop()

        try:
            identifier = FileIdentifier.from_path(folder_path)
        except OSError as e:
            raise WalkIOError(folder_path, e) from e

        if identifier in ancestors:
            log.debug("Skipping %s: symlink cycle", folder_path)
            continue

        folder = _scan_folder(folder_path, root, rule_set, metadata)
        scanned[folder_path] = folder
        below = ancestors | {identifier}
        pending.extend((subfolder, below) for subfolder in reversed(folder.subfolders))

    return scanned


def _scan_folder(folder_path: Path, root: Path, rule_set: RuleSet, metadata: DeletionMetadata) -> _ScannedFolder:
    folder = _ScannedFolder(folder_path)
    log.debug("Scanning %s", folder_path)

    try:
        with os.scandir(folder_path) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        raise WalkIOError(folder_path, e) from e

    for entry in entries:
        path = folder_path / entry.name
        try:
            is_dir = entry.is_dir()
            is_file = not is_dir and entry.is_file()
        except OSError as e:
            raise WalkIOError(path, e) from e

        if is_dir:
            if rule_set.recurse_into_subdirectories and not rule_set.is_hidden(path):
                folder.subfolders.append(path)
        elif is_file:
            size = _file_size(path)
            marked = should_delete(path, rule_set, root)
            metadata.record_file(size, marked)
            if marked:
                folder.files.append(path)
                folder.marked_bytes += size

    return folder


def _prune_folders(scanned: Dict[Path, _ScannedFolder], metadata: DeletionMetadata) -> Dict[Path, List[Path]]:
    """Map each folder worth emitting to its surviving children, sorted by name.

    ``scanned`` lists parents before children, so walking it backwards settles every
    subfolder before the folder containing it.
    """
    surviving: Dict[Path, List[Path]] = {}

    for folder in reversed(list(scanned.values())):
        kept_subfolders = [path for path in folder.subfolders if path in surviving]
        if not folder.files and not kept_subfolders:
            log.debug("Pruning %s: nothing marked for deletion", folder.path)
            continue

        surviving[folder.path] = sorted(folder.files + kept_subfolders, key=lambda path: path.name)
        metadata.folder_sizes[folder.path] = folder.marked_bytes + sum(
            metadata.folder_sizes[path] for path in kept_subfolders
        )

    return surviving


def _emit_leaves(root: Path, surviving: Dict[Path, List[Path]], metadata: DeletionMetadata) -> List[TreeLeaf]:
    leaves: List[TreeLeaf] = []
    if root not in surviving:
        return leaves

    pending = [TreeLeaf.root(PathKey(root))]
    while pending:
        leaf = pending.pop()
        leaves.append(leaf)
        if leaf.is_file:
            continue

        if leaf.depth > 0:
            metadata.dir_count += 1

        children = surviving[leaf.path]
        last_index = len(children) - 1
        # Pushed in reverse so the first child is popped first
        for index in range(last_index, -1, -1):
            child = children[index]
            pending.append(
                TreeLeaf(
                    PathKey(child),
                    depth=leaf.depth + 1,
                    is_last=index == last_index,
                    is_file=child not in surviving,
                )
            )

    return leaves
