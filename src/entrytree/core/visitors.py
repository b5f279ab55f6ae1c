from __future__ import annotations

"""
Concrete Entry Visitors.

Operations implemented on top of the visitor abstraction: listing,
suffix-based file search and size accounting.
"""

from typing import Dict, List, Optional

from entrytree.core.traversal import PATH_SEPARATOR, subtree_sizes
from entrytree.domain.entries import Directory, File, LineSink
from entrytree.domain.visitor import EntryVisitor


# -----------------------------------------------------------------------------
# LISTING
# -----------------------------------------------------------------------------

class ListVisitor(EntryVisitor):
    """
    Emit one `{prefix}/{name}({size})` line per visited entry.

    Produces the same lines, in the same order, as `Entry.print_list`.
    Directory sizes come from a table computed once when the traversal
    enters its first directory and dropped when it leaves that directory,
    so listing stays linear in the size of the tree.
    """

    def __init__(self, sink: Optional[LineSink] = None) -> None:
        self._sink: LineSink = sink if sink is not None else print
        self._sizes: Optional[Dict[int, int]] = None
        self._table_root: Optional[Directory] = None

    def visit_file(self, file: File, prefix: str) -> None:
        self._sink(f"{prefix}{PATH_SEPARATOR}{file}")

    def visit_directory(self, directory: Directory, prefix: str) -> None:
        if self._sizes is None:
            self._sizes = subtree_sizes(directory)
            self._table_root = directory
        size = self._sizes[id(directory)]
        self._sink(f"{prefix}{PATH_SEPARATOR}{directory.name}({size})")

    def leave_directory(self, directory: Directory, prefix: str) -> None:
        if directory is self._table_root:
            self._sizes = None
            self._table_root = None


# -----------------------------------------------------------------------------
# SEARCH
# -----------------------------------------------------------------------------

class FileFindVisitor(EntryVisitor):
    """
    Collect the files whose name ends with a given suffix.

    Attributes:
        suffix: Name suffix to match (e.g. ".html").
        found_files: Matching files in traversal order.
        lines: Listing line of every match.
    """

    def __init__(self, suffix: str) -> None:
        if not suffix:
            raise ValueError("Search suffix must be a non-empty string.")
        self.suffix = suffix
        self.found_files: List[File] = []
        self.lines: List[str] = []

    def visit_file(self, file: File, prefix: str) -> None:
        if file.name.endswith(self.suffix):
            self.found_files.append(file)
            self.lines.append(f"{prefix}{PATH_SEPARATOR}{file}")

    def visit_directory(self, directory: Directory, prefix: str) -> None:
        pass


# -----------------------------------------------------------------------------
# ACCOUNTING
# -----------------------------------------------------------------------------

class SizeVisitor(EntryVisitor):
    """
    Accumulate the size of every visited file.

    Totals keep growing across traversals until `reset` is called.
    """

    def __init__(self) -> None:
        self.total = 0
        self.file_count = 0
        self.directory_count = 0

    def visit_file(self, file: File, prefix: str) -> None:
        self.total += file.get_size()
        self.file_count += 1

    def visit_directory(self, directory: Directory, prefix: str) -> None:
        self.directory_count += 1

    def reset(self) -> None:
        self.total = 0
        self.file_count = 0
        self.directory_count = 0
