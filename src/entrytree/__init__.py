from __future__ import annotations

"""
entrytree - In-memory hierarchical entry tree.

Files and directories share one Entry interface for size aggregation and
path-prefixed listing; visitors add new operations without touching the
entry classes.
"""

__version__ = "0.1.0"

from entrytree.core.builder import add_user_entries, build_tree, make_sample_root
from entrytree.core.traversal import walk
from entrytree.core.visitors import FileFindVisitor, ListVisitor, SizeVisitor
from entrytree.domain.entries import Composite, Directory, Entry, File, Leaf
from entrytree.domain.exceptions import (
    EntryOwnershipError,
    EntryTreeError,
    UnsupportedOperationError,
)
from entrytree.domain.visitor import EntryVisitor

__all__ = [
    "__version__",
    # Entries
    "Entry",
    "File",
    "Directory",
    "Leaf",
    "Composite",
    # Errors
    "EntryTreeError",
    "UnsupportedOperationError",
    "EntryOwnershipError",
    # Visitors
    "EntryVisitor",
    "ListVisitor",
    "FileFindVisitor",
    "SizeVisitor",
    # Builders
    "build_tree",
    "make_sample_root",
    "add_user_entries",
    "walk",
]
