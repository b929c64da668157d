"""Tree walking and rendering for folders being cleaned.

This package provides the walker that collects files marked for deletion as an
ordered leaf sequence, and the renderer that turns such a sequence into a
tree diagram.
"""

from .deletion_tree import DeletionTree
from .tree_leaf import NameKey, PathKey, TreeLeaf, leaves_from_node
from .tree_renderer import RenderOptions, SizeSuffix, TreeSuffix, render, stream_render
from .tree_walker import DeletionMetadata, walk

__all__ = [
    "DeletionMetadata",
    "DeletionTree",
    "NameKey",
    "PathKey",
    "RenderOptions",
    "SizeSuffix",
    "TreeLeaf",
    "TreeSuffix",
    "leaves_from_node",
    "render",
    "stream_render",
    "walk",
]
