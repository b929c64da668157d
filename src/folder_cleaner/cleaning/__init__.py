"""Deletion of the files collected by a tree walk."""

from .deleter import DeletionFailure, DeletionReport, delete_leaves

__all__ = ["DeletionFailure", "DeletionReport", "delete_leaves"]
