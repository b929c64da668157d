"""Render a tree leaf sequence as a ``tree``-style diagram.

The renderer rebuilds the branch structure purely from each leaf's depth and
last-sibling flag. It keeps one continuation segment per ancestor on a prefix stack;
returning from a deeper subtree is detected by truncating that stack to the depth of
the next leaf.

Example:
    >>> leaves = [TreeLeaf("root", 0, True), TreeLeaf("a.txt", 1, False), TreeLeaf("b.txt", 1, True)]
    >>> print(render(leaves), end="")
    root
    ├── a.txt
    └── b.txt
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Iterator, List, Mapping, Optional

from folder_cleaner.folder_tree.tree_leaf import TreeLeaf
from folder_cleaner.size_units import DataSizeUnit

SPACE = "    "
BRANCH = "│   "
TEE = "├── "
LAST = "└── "


def get_pointer(depth: int, is_last: bool) -> str:
    """Glyph placed in front of a leaf's name."""
    if depth == 0:
        return ""
    return LAST if is_last else TEE


def get_prefix(depth: int, is_last: bool) -> str:
    """Segment a leaf contributes to the lines of its descendants."""
    if depth == 0:
        return ""
    return SPACE if is_last else BRANCH


class TreeSuffix(ABC):
    """Text appended to folder lines of a rendered tree."""

    @abstractmethod
    def suffix_for(self, leaf: TreeLeaf) -> str:
        """Return the text to append after ``leaf``'s name, or an empty string."""
        pass


class SizeSuffix(TreeSuffix):
    """Appends the bytes marked for deletion below each folder.

    Attributes:
        unit (DataSizeUnit): Unit the sizes are displayed in.
        folder_sizes (Mapping[Path, int]): Bytes per folder path, as gathered by the
            tree walker.
        bold (bool): Whether to wrap the size in ANSI bold escapes.

    Example:
        >>> suffix = SizeSuffix(DataSizeUnit.KB, {Path("cache"): 2048})
        >>> suffix.suffix_for(TreeLeaf(Path("cache")))
        ' - 2.00 KB'
        >>> suffix.suffix_for(TreeLeaf(Path("elsewhere")))
        ''
    """

    def __init__(self, unit: DataSizeUnit, folder_sizes: Mapping[Path, int], bold: bool = False):
        self.unit = unit
        self.folder_sizes = folder_sizes
        self.bold = bold

    def suffix_for(self, leaf: TreeLeaf) -> str:
        size = self.folder_sizes.get(leaf.path)
        if size is None:
            return ""
        text = self.unit.display_total_size(size)
        if self.bold:
            text = f"\x1b[1m{text}\x1b[0m"
        return f" - {text}"


class RenderOptions:
    """Display options for :func:`render`.

    Attributes:
        display_files (bool): Whether file leaves are drawn. When False, file leaves
            are skipped entirely.
        tree_suffix (Optional[TreeSuffix]): Suffix applied to folder leaves.
    """

    def __init__(self, display_files: bool = True, tree_suffix: Optional[TreeSuffix] = None):
        self.display_files = display_files
        self.tree_suffix = tree_suffix

    def skip_leaf(self, leaf: TreeLeaf) -> bool:
        return leaf.is_file and not self.display_files

    def suffix_for(self, leaf: TreeLeaf) -> str:
        if self.tree_suffix is None or leaf.is_file:
            return ""
        return self.tree_suffix.suffix_for(leaf)


def stream_render(leaves: Iterable[TreeLeaf], options: Optional[RenderOptions] = None) -> Iterator[str]:
    """Render a leaf sequence one line at a time.

    Each yielded line ends with a newline. No validation is performed: a sequence whose
    depth jumps by more than one renders with only the prefixes collected so far.

    Args:
        leaves: Leaves in pre-order.
        options: Display options. Defaults to showing files without suffixes.

    Yields:
        Lines of the tree diagram.
    """
    if options is None:
        options = RenderOptions()

    prefix_stack: List[str] = []
    for leaf in leaves:
        if options.skip_leaf(leaf):
            continue

        del prefix_stack[leaf.depth :]
        pointer = get_pointer(leaf.depth, leaf.is_last)
        yield f"{''.join(prefix_stack)}{pointer}{leaf.display_name}{options.suffix_for(leaf)}\n"
        prefix_stack.append(get_prefix(leaf.depth, leaf.is_last))


def render(leaves: Iterable[TreeLeaf], options: Optional[RenderOptions] = None) -> str:
    """Render a leaf sequence as a complete tree diagram.

    Args:
        leaves: Leaves in pre-order.
        options: Display options. Defaults to showing files without suffixes.

    Returns:
        The diagram, one line per displayed leaf, each terminated by a newline.
    """
    return "".join(stream_render(leaves, options))
