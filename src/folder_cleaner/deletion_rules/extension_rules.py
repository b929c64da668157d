"""Extension-based deletion rules."""

from pathlib import Path
from typing import Optional

from folder_cleaner.types import PathType

from .base_rules import BaseDeletionRules
from .rule_set import RuleSet


def file_extension(path: PathType) -> Optional[str]:
    """Return the extension of ``path`` without its leading dot, or None.

    Only the last suffix counts, and a leading dot on its own (``.bashrc``) is not an
    extension.

    Example:
        >>> file_extension("archive.tar.gz")
        'gz'
        >>> file_extension("Makefile") is None
        True
        >>> file_extension(".bashrc") is None
        True
    """
    suffix = Path(path).suffix
    return suffix[1:] if suffix else None


def should_delete(path: PathType, rule_set: RuleSet, root: Optional[PathType] = None) -> bool:
    """Decide whether a single file is marked for deletion.

    The checks run in a fixed order and the first one that applies wins:

    1. Hidden files are kept unless the rule set includes hidden entries.
    2. Files matching a protecting pattern are kept.
    3. Files without an extension are kept.
    4. Files whose extension is in ``extensions_to_keep`` are kept, even when the
       extension is also listed for deletion.
    5. With an empty ``extensions_to_delete`` every remaining file is deleted,
       otherwise only files whose extension is listed.

    Extensions are compared case-sensitively.

    Args:
        path: Path to a file. Never called with a directory.
        rule_set: The rules to apply.
        root: Folder being walked, against which protecting patterns are matched.
            Defaults to the rule set's ``root_directory``.

    Returns:
        bool: True if the file should be deleted.

    Example:
        >>> rules = RuleSet(".", extensions_to_delete=["txt", "md"], extensions_to_keep=["md"])
        >>> should_delete("notes.txt", rules)
        True
        >>> should_delete("README.md", rules)
        False
        >>> should_delete(".secret.txt", rules)
        False
    """
    if rule_set.is_hidden(path):
        return False

    if rule_set.is_protected(path, root):
        return False

    extension = file_extension(path)
    if extension is None:
        return False

    if extension in rule_set.extensions_to_keep:
        return False

    if not rule_set.extensions_to_delete:
        return True
    return extension in rule_set.extensions_to_delete


class ExtensionDeletionRules(BaseDeletionRules):
    """Deletion rules backed by a :class:`RuleSet`.

    Example:
        >>> rules = ExtensionDeletionRules(RuleSet(".", extensions_to_keep=["pdf"]))
        >>> rules.should_delete("invoice.pdf")
        False
        >>> rules.should_delete("draft.docx")
        True
    """

    def __init__(self, rule_set: RuleSet):
        self.rule_set = rule_set

    def should_delete(self, path: PathType) -> bool:
        return should_delete(path, self.rule_set)
