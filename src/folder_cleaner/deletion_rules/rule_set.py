"""Validated settings governing a single cleaning run."""

import copy
from pathlib import Path
from typing import FrozenSet, Iterable, Optional

from folder_cleaner.size_units import DataSizeUnit
from folder_cleaner.types import PathType

from .protect_rules import ProtectedPathRules


def normalize_extensions(extensions: Optional[Iterable[str]]) -> FrozenSet[str]:
    """Strip leading dots from extensions and drop empty entries.

    Example:
        >>> sorted(normalize_extensions(["tmp", ".log", "..rs", ""]))
        ['log', 'rs', 'tmp']
    """
    if extensions is None:
        return frozenset()
    cleaned = (ext.strip().lstrip(".") for ext in extensions)
    return frozenset(ext for ext in cleaned if ext)


class RuleSet:
    """Settings deciding which files under a folder are marked for deletion.

    A rule set is built once per folder and never changed afterwards, so the same
    instance can be reused across several walks.

    Attributes:
        root_directory (Path): The folder to clean.
        extensions_to_delete (FrozenSet[str]): Extensions (without dots) to delete.
            An empty set matches every extension.
        extensions_to_keep (FrozenSet[str]): Extensions that are never deleted. Takes
            precedence over ``extensions_to_delete``.
        recurse_into_subdirectories (bool): Whether subfolders are scanned.
        include_hidden (bool): Whether entries starting with ``.`` are considered.
        protected (ProtectedPathRules): Gitignore-style patterns, relative to
            ``root_directory``, for files that are never deleted.
        display_unit (DataSizeUnit): Unit used when reporting sizes.

    Example:
        >>> rules = RuleSet("downloads", extensions_to_delete=[".tmp", "log"])
        >>> sorted(rules.extensions_to_delete)
        ['log', 'tmp']
        >>> rules.extensions_to_keep
        frozenset()
    """

    def __init__(
        self,
        root_directory: PathType,
        extensions_to_delete: Optional[Iterable[str]] = None,
        extensions_to_keep: Optional[Iterable[str]] = None,
        recurse_into_subdirectories: bool = False,
        include_hidden: bool = False,
        protect_patterns: Optional[Iterable[str]] = None,
        display_unit: DataSizeUnit = DataSizeUnit.MB,
    ) -> None:
        self.root_directory = Path(root_directory)
        self.extensions_to_delete = normalize_extensions(extensions_to_delete)
        self.extensions_to_keep = normalize_extensions(extensions_to_keep)
        self.recurse_into_subdirectories = recurse_into_subdirectories
        self.include_hidden = include_hidden
        self.protected = ProtectedPathRules(protect_patterns)
        self.display_unit = display_unit

    def is_hidden(self, path: PathType) -> bool:
        """True if ``path`` names a hidden entry that these rules skip."""
        return not self.include_hidden and Path(path).name.startswith(".")

    def is_protected(self, path: PathType, root: Optional[PathType] = None) -> bool:
        """True if ``path`` matches one of the protecting patterns.

        Patterns are matched relative to ``root``, which defaults to
        ``root_directory``. Paths outside that folder are matched by name only.
        """
        if not self.protected:
            return False
        path = Path(path)
        base = Path(root) if root is not None else self.root_directory
        try:
            relative = path.relative_to(base)
        except ValueError:
            relative = Path(path.name)
        return self.protected.protects(relative.as_posix())

    def with_display_unit(self, unit: DataSizeUnit) -> "RuleSet":
        """Copy of these rules reporting sizes in another unit."""
        rule_set = copy.copy(self)
        rule_set.display_unit = unit
        return rule_set

    def __repr__(self) -> str:
        return (
            f"RuleSet(root_directory={str(self.root_directory)!r}, "
            f"extensions_to_delete={sorted(self.extensions_to_delete)}, "
            f"extensions_to_keep={sorted(self.extensions_to_keep)}, "
            f"recurse_into_subdirectories={self.recurse_into_subdirectories}, "
            f"include_hidden={self.include_hidden})"
        )
