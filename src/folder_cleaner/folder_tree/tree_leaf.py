"""Leaf entries shared between the tree walker and the tree renderer."""

from pathlib import Path
from typing import Any, Iterator, List, Union

from anytree import NodeMixin, PreOrderIter


class PathKey:
    """Leaf key backed by a real filesystem path.

    Attributes:
        path (Path): Full path of the entry.

    Example:
        >>> key = PathKey(Path("/tmp/cache/old.tmp"))
        >>> key.display_name
        'old.tmp'
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    @property
    def display_name(self) -> str:
        """The entry's base name, or the full path when it has none (``/``, ``.``)."""
        return self.path.name or str(self.path)

    def as_path(self) -> Path:
        return self.path

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, PathKey) and self.path == other.path

    def __hash__(self) -> int:
        return hash(("path", self.path))

    def __repr__(self) -> str:
        return f"PathKey({str(self.path)!r})"


class NameKey:
    """Display-only leaf key holding a bare name, with no disk access implied.

    Example:
        >>> NameKey("main_folder").display_name
        'main_folder'
    """

    def __init__(self, name: str):
        self.name = name

    @property
    def display_name(self) -> str:
        return self.name

    def as_path(self) -> Path:
        return Path(self.name)

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, NameKey) and self.name == other.name

    def __hash__(self) -> int:
        return hash(("name", self.name))

    def __repr__(self) -> str:
        return f"NameKey({self.name!r})"


TreeKey = Union[PathKey, NameKey]


class TreeLeaf:
    """One entry of a pre-order tree traversal.

    Attributes:
        key (TreeKey): Identifies the entry, either by path or by display name.
        depth (int): Distance from the root; the root has depth 0.
        is_last (bool): True if no later sibling shares this entry's parent.
        is_file (bool): True for files, False for folders.

    Example:
        >>> leaf = TreeLeaf("notes.txt", depth=1, is_last=True, is_file=True)
        >>> leaf.key
        NameKey('notes.txt')
        >>> leaf.display_name
        'notes.txt'
    """

    def __init__(
        self,
        key: Union[TreeKey, str, Path],
        depth: int = 0,
        is_last: bool = True,
        is_file: bool = False,
    ) -> None:
        if isinstance(key, str):
            key = NameKey(key)
        elif isinstance(key, Path):
            key = PathKey(key)
        if depth < 0:
            raise ValueError(f"depth must be non-negative, got {depth}")
        self.key: TreeKey = key
        self.depth = depth
        self.is_last = is_last
        self.is_file = is_file

    @classmethod
    def root(cls, key: Union[TreeKey, str, Path], is_file: bool = False) -> "TreeLeaf":
        """Create the depth-0 leaf that starts a sequence."""
        return cls(key, depth=0, is_last=True, is_file=is_file)

    @property
    def display_name(self) -> str:
        return self.key.display_name

    @property
    def path(self) -> Path:
        return self.key.as_path()

    @property
    def has_real_path(self) -> bool:
        """True if the leaf refers to an actual filesystem entry."""
        return isinstance(self.key, PathKey)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, TreeLeaf):
            return NotImplemented
        return (self.key, self.depth, self.is_last, self.is_file) == (
            other.key,
            other.depth,
            other.is_last,
            other.is_file,
        )

    def __repr__(self) -> str:
        return (
            f"TreeLeaf(key={self.key!r}, depth={self.depth}, "
            f"is_last={self.is_last}, is_file={self.is_file})"
        )


def leaves_from_node(root: NodeMixin) -> List[TreeLeaf]:
    """Flatten an anytree hierarchy into a display-only leaf sequence.

    Each node contributes one leaf keyed by its ``name`` attribute. A node counts as a
    file when it has a truthy ``is_file`` attribute; nodes without one are folders.
    Children keep the order anytree reports them in.

    Args:
        root: The root of the hierarchy.

    Returns:
        Leaves in pre-order, depths relative to ``root``.

    Example:
        >>> from anytree import Node
        >>> top = Node("project")
        >>> src = Node("src", parent=top)
        >>> _ = Node("main.py", parent=src, is_file=True)
        >>> _ = Node("README.md", parent=top, is_file=True)
        >>> [(leaf.display_name, leaf.depth, leaf.is_last) for leaf in leaves_from_node(top)]
        [('project', 0, True), ('src', 1, False), ('main.py', 2, True), ('README.md', 1, True)]
    """
    base_depth = root.depth
    leaves = []
    for node in PreOrderIter(root):
        is_last = node is root or node.parent.children[-1] is node
        leaves.append(
            TreeLeaf(
                NameKey(str(node.name)),
                depth=node.depth - base_depth,
                is_last=is_last,
                is_file=bool(getattr(node, "is_file", False)),
            )
        )
    return leaves


def iterate_file_leaves(leaves: List[TreeLeaf]) -> Iterator[TreeLeaf]:
    """Yield only the file leaves of a sequence, in order."""
    return (leaf for leaf in leaves if leaf.is_file)
