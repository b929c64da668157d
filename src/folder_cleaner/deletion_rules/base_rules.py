from abc import ABC, abstractmethod

from folder_cleaner.types import PathType


class BaseDeletionRules(ABC):
    """
    Abstract base class defining the interface for file deletion rules.

    A deletion rule answers a single question for a single file: should this file be
    deleted? Implementations must be pure predicates; they may inspect the path but must
    not touch the file itself. Directories are never passed to a deletion rule.

    Example:
        >>> from pathlib import Path
        >>> class TmpDeletionRules(BaseDeletionRules):
        ...     def should_delete(self, path: PathType) -> bool:
        ...         return Path(path).suffix == ".tmp"
        >>> rules = TmpDeletionRules()
        >>> rules.should_delete("build/cache.tmp")
        True
        >>> rules.should_delete("main.py")
        False
    """

    @abstractmethod
    def should_delete(self, path: PathType) -> bool:
        """
        Determine if the file at ``path`` should be deleted.

        Args:
            path: Path of a file, absolute or relative to the current directory.

        Returns:
            bool: True if the file is a deletion candidate, False if it should be kept.
        """
        pass
