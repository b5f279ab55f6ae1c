from __future__ import annotations

"""
Visitor Abstraction for the Entry Tree.

Declares one operation per entry variant. An entry picks the operation
matching its own variant when it accepts a visitor, so the code executed
depends on both the concrete entry and the concrete visitor.

The listing prefix is passed to every operation by value. A visitor never
has to save and restore path state while descending into a directory.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from entrytree.domain.entries import Directory, File


class EntryVisitor(ABC):
    """
    Abstract base class for operations over the entry tree.

    Adding an operation means adding a subclass; File and Directory stay
    untouched.
    """

    @abstractmethod
    def visit_file(self, file: File, prefix: str) -> None:
        """
        Process a leaf entry.

        Args:
            file: The visited File.
            prefix: Path prefix of the file's parent.
        """

    @abstractmethod
    def visit_directory(self, directory: Directory, prefix: str) -> None:
        """
        Process a composite entry before any of its children.

        Args:
            directory: The visited Directory.
            prefix: Path prefix of the directory's parent.
        """

    def leave_directory(self, directory: Directory, prefix: str) -> None:
        """Called once every child of `directory` has been visited."""
