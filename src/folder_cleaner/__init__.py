"""Folder cleaning utilities.

This package provides tools for finding files that match extension-based
deletion rules, previewing them as a directory tree, and deleting them.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("folder-cleaner")
except PackageNotFoundError:
    __version__ = "unknown"
