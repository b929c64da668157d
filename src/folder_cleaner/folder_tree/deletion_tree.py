"""Lazily walked view of the files a rule set marks for deletion."""

from typing import Iterator, List, Optional, Tuple

from folder_cleaner.deletion_rules.rule_set import RuleSet
from folder_cleaner.folder_tree.tree_leaf import TreeLeaf
from folder_cleaner.folder_tree.tree_renderer import RenderOptions, SizeSuffix, stream_render
from folder_cleaner.folder_tree.tree_walker import DeletionMetadata, walk


class DeletionTree:
    """The deletion candidates under a rule set's root folder.

    The folder is walked lazily on first access, and can be walked again with
    :meth:`refresh` when the filesystem has changed.

    Attributes:
        rule_set (RuleSet): Rules deciding which files are marked for deletion.

    Example:
        >>> tree = DeletionTree(RuleSet("downloads", ["tmp"], recurse_into_subdirectories=True))  # doctest: +SKIP
        >>> print(tree.get_tree_representation(), end="")  # doctest: +SKIP
        downloads
        ├── old.tmp
        └── cache
            └── page.tmp
        >>> tree.metadata.file_count  # doctest: +SKIP
        2
    """

    def __init__(self, rule_set: RuleSet) -> None:
        self.rule_set = rule_set
        self._leaves: Optional[List[TreeLeaf]] = None
        self._metadata: Optional[DeletionMetadata] = None

    def _build(self) -> Tuple[List[TreeLeaf], DeletionMetadata]:
        if self._leaves is None or self._metadata is None:
            self._leaves, self._metadata = walk(self.rule_set.root_directory, self.rule_set)
        return self._leaves, self._metadata

    @property
    def leaves(self) -> List[TreeLeaf]:
        """The walked leaf sequence.

        Raises:
            RootNotFoundError: If the root folder does not exist.
            WalkIOError: If part of the folder cannot be read.
        """
        leaves, _ = self._build()
        return leaves

    @property
    def metadata(self) -> DeletionMetadata:
        """Statistics gathered during the walk."""
        _, metadata = self._build()
        return metadata

    @property
    def is_empty(self) -> bool:
        """True if nothing under the root is marked for deletion."""
        return not self.leaves

    def render_options(self, show_sizes: bool = False, display_files: bool = True) -> RenderOptions:
        """Build render options, optionally annotating folders with their sizes."""
        suffix = None
        if show_sizes:
            suffix = SizeSuffix(self.rule_set.display_unit, self.metadata.folder_sizes, bold=True)
        return RenderOptions(display_files=display_files, tree_suffix=suffix)

    def stream_tree_representation(self, options: Optional[RenderOptions] = None) -> Iterator[str]:
        """Generate the tree diagram one line at a time."""
        yield from stream_render(self.leaves, options)

    def get_tree_representation(self, options: Optional[RenderOptions] = None) -> str:
        """Get the complete tree diagram as a string."""
        return "".join(self.stream_tree_representation(options))

    def refresh(self) -> None:
        """Discard the cached walk and walk the folder again."""
        self._leaves = None
        self._metadata = None
        self._build()
