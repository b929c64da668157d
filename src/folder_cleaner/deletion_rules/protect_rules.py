"""Gitignore-style patterns for paths that must never be deleted."""

from typing import Iterable, List, Optional, Sequence

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore


class ProtectedPathRules:
    """Set of gitignore-style patterns protecting files from deletion.

    Patterns use the same syntax as a ``.gitignore`` file: globs, directory patterns
    ending in ``/``, ``**`` and negations starting with ``!``. Paths are matched relative
    to the folder being cleaned, using forward slashes.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = ProtectedPathRules(["important/", "*.keep.log"])
        >>> rules.protects("important/report.tmp")
        True
        >>> rules.protects("logs/app.keep.log")
        True
        >>> rules.protects("logs/app.log")
        False
        >>> rules.add_rule("!important/scratch.tmp")
        >>> rules.protects("important/scratch.tmp")
        False
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None):
        self._lines: List[str] = list(patterns or [])
        self.spec = PathSpec.from_lines(GitWildMatchPattern, self._lines)

    def __bool__(self) -> bool:
        return len(self.patterns) > 0

    @property
    def patterns(self) -> Sequence[str]:
        """The source text of every loaded pattern, in load order."""
        return [pattern.pattern for pattern in self.spec.patterns if pattern.include is not None]

    def protects(self, relative_path: str) -> bool:
        """Check if a path relative to the cleaned folder is protected.

        Args:
            relative_path: Path relative to the cleaned folder. Backslashes are
                converted to forward slashes before matching.

        Returns:
            bool: True if the path matches the protecting patterns.
        """
        return bool(self.spec.match_file(relative_path.replace("\\", "/")))

    def add_rule(self, rule: str) -> None:
        """Add a single gitignore-style pattern after the existing ones."""
        # The compiled matcher is immutable, so it is rebuilt from every source line
        self._lines.append(rule)
        self.spec = PathSpec.from_lines(GitWildMatchPattern, self._lines)
