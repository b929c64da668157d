"""Text summaries shown before a folder is cleaned."""

from enum import Enum
from typing import Iterable, List

from folder_cleaner.deletion_rules.rule_set import RuleSet
from folder_cleaner.folder_tree.tree_walker import DeletionMetadata

DASHED_LINE = "-" * 57
LINE = "=" * 57


def bold(text: str) -> str:
    return f"\x1b[1m{text}\x1b[0m"


def format_extensions(extensions: Iterable[str]) -> str:
    """Format extensions as a dotted, sorted list.

    Example:
        >>> format_extensions({"tmp", "log"})
        '(.log, .tmp)'
    """
    return "(" + ", ".join(f".{ext}" for ext in sorted(extensions)) + ")"


def _extension_lines(rule_set: RuleSet) -> List[str]:
    lines = []
    if rule_set.extensions_to_delete:
        lines.append(f"{bold('Extensions marked for deletion')}: {format_extensions(rule_set.extensions_to_delete)}")
    else:
        lines.append(f"{bold('Extensions marked for deletion')}: (any)")
    if rule_set.extensions_to_keep:
        lines.append(f"{bold('Extensions to keep')}: {format_extensions(rule_set.extensions_to_keep)}")
    if rule_set.protected:
        lines.append(f"{bold('Protected patterns')}: {', '.join(rule_set.protected.patterns)}")
    return lines


def _counts_text(metadata: DeletionMetadata) -> str:
    return f"{metadata.file_count} files, {metadata.dir_count} directories"


def generate_deletion_overview(rule_set: RuleSet, metadata: DeletionMetadata) -> str:
    """Summarize a pending deletion, ending with an irreversibility warning.

    Args:
        rule_set: Rules the folder was walked with.
        metadata: Statistics from the walk.

    Returns:
        Newline-separated overview text.
    """
    unit = rule_set.display_unit
    lines = [LINE, "Cleaning Overview", DASHED_LINE]
    lines.append(f"{bold('Folder path')}: {rule_set.root_directory}")
    lines.append(f"{bold('Total folder size')}: {unit.display_total_size(metadata.total_bytes_scanned)}")
    lines.append(
        f"{bold('Data scheduled for deletion')}: {_counts_text(metadata)} - "
        f"{bold(unit.display_total_size(metadata.bytes_marked_for_deletion))}"
    )
    lines.append(f"{bold('Last modified date')}: {metadata.root_last_modified:%Y-%m-%d %H:%M:%S}")
    lines.extend(_extension_lines(rule_set))
    lines.extend(
        [
            DASHED_LINE,
            bold("WARNING: This action is irreversible"),
            "Ensure you've backed up any important data before proceeding.",
            "Review the information carefully before proceeding.",
            LINE,
        ]
    )
    return "\n".join(lines)


def generate_size_overview(rule_set: RuleSet, metadata: DeletionMetadata) -> str:
    """Summarize the size of the matching files without proposing a deletion."""
    unit = rule_set.display_unit
    lines = [LINE, "Folder Size Overview", DASHED_LINE]
    lines.append(f"{bold('Folder path')}: {rule_set.root_directory}")
    lines.append(
        f"{bold('Total size of matching files and directories')}: {_counts_text(metadata)} - "
        f"{bold(unit.display_total_size(metadata.bytes_marked_for_deletion))}"
    )
    lines.append(f"{bold('Last modified date')}: {metadata.root_last_modified:%Y-%m-%d %H:%M:%S}")
    lines.extend(_extension_lines(rule_set))
    return "\n".join(lines)


class TextOverviewType(str, Enum):
    """Which overview to generate for a walked folder."""

    DELETION = "deletion"
    SIZE = "size"

    def generate_text(self, rule_set: RuleSet, metadata: DeletionMetadata) -> str:
        if self is TextOverviewType.DELETION:
            return generate_deletion_overview(rule_set, metadata)
        return generate_size_overview(rule_set, metadata)
