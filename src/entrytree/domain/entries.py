from __future__ import annotations

"""
Entry Tree Data Models.

Defines the uniform node type of the hierarchical entry tree and its two
variants: File (leaf, carries a size) and Directory (composite, owns an
ordered list of children). Both variants expose the same operations, so
callers can aggregate sizes or list a subtree without knowing which kind
of entry they hold.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Iterator, List, Optional, Tuple

from entrytree.core.traversal import (
    PATH_SEPARATOR,
    dispatch,
    subtree_sizes,
    sum_file_sizes,
    walk,
)
from entrytree.domain.exceptions import EntryOwnershipError, UnsupportedOperationError

if TYPE_CHECKING:
    from entrytree.domain.visitor import EntryVisitor

logger = logging.getLogger(__name__)

# Any callable receiving one rendered line
LineSink = Callable[[str], None]

# -----------------------------------------------------------------------------
# COMPONENT
# -----------------------------------------------------------------------------

class Entry(ABC):
    """
    Abstract node of the entry tree.

    Attributes:
        is_composite: True for variants that own children.
    """

    is_composite: bool = False

    def __init__(self, name: str) -> None:
        if not isinstance(name, str) or not name:
            raise ValueError(f"Entry name must be a non-empty string, received {name!r}.")
        self._name = name
        self._parent: Optional[Directory] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def size(self) -> int:
        return self.get_size()

    @property
    def parent(self) -> Optional[Directory]:
        """Directory owning this entry, or None for a root."""
        return self._parent

    def get_name(self) -> str:
        return self._name

    @abstractmethod
    def get_size(self) -> int:
        """Return the size of the entry (aggregated for directories)."""

    def add(self, entry: Entry) -> Entry:
        """
        Append a child entry.

        Only composites hold children; every other variant rejects the call
        whatever the argument is.

        Raises:
            UnsupportedOperationError: Always, for non-composite entries.
        """
        raise UnsupportedOperationError("add", self._name)

    def print_list(self, prefix: str = "", sink: Optional[LineSink] = None) -> None:
        """
        Emit one `{prefix}/{name}({size})` line per entry of the subtree.

        Lines follow depth-first pre-order; children are listed under
        `prefix + "/" + name`.

        Args:
            prefix: Path prefix of this entry.
            sink: Line consumer. Defaults to `print`.
        """
        emit = sink if sink is not None else print
        sizes = subtree_sizes(self)
        for entry, entry_prefix in walk(self, prefix):
            emit(f"{entry_prefix}{PATH_SEPARATOR}{entry.name}({sizes[id(entry)]})")

    def list_lines(self, prefix: str = "") -> List[str]:
        """Collect the `print_list` output into a list."""
        lines: List[str] = []
        self.print_list(prefix, sink=lines.append)
        return lines

    def accept(self, visitor: EntryVisitor, prefix: str = "") -> None:
        """
        Hand this entry (and its subtree) to the visitor.

        Every entry of the subtree, this one included, is reached through
        `_dispatch_visit`; variants customize visiting by overriding that
        hook, not `accept`.
        """
        dispatch(self, visitor, prefix)

    def get_full_name(self) -> str:
        """Return the absolute path of the entry, e.g. `/root/bin/vi`."""
        names: List[str] = []
        current: Optional[Entry] = self
        while current is not None:
            names.append(current.name)
            current = current.parent
        return PATH_SEPARATOR + PATH_SEPARATOR.join(reversed(names))

    # -------------------------------------------------------------------------
    # Double dispatch hooks (driven by core.traversal.dispatch)
    # -------------------------------------------------------------------------

    @abstractmethod
    def _dispatch_visit(self, visitor: EntryVisitor, prefix: str) -> None:
        """Invoke the visitor operation matching this variant."""

    def _dispatch_leave(self, visitor: EntryVisitor, prefix: str) -> None:
        """Invoked after the subtree of a composite was visited."""

    def __str__(self) -> str:
        return f"{self._name}({self.get_size()})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"


# -----------------------------------------------------------------------------
# LEAF
# -----------------------------------------------------------------------------

class File(Entry):
    """
    Leaf entry carrying an immutable, non-negative size.
    """

    def __init__(self, name: str, size: int) -> None:
        super().__init__(name)
        if isinstance(size, bool) or not isinstance(size, int) or size < 0:
            raise ValueError(f"File size must be a non-negative integer, received {size!r}.")
        self._size = size

    def get_size(self) -> int:
        return self._size

    def _dispatch_visit(self, visitor: EntryVisitor, prefix: str) -> None:
        visitor.visit_file(self, prefix)

    def __repr__(self) -> str:
        return f"File(name={self._name!r}, size={self._size})"


# -----------------------------------------------------------------------------
# COMPOSITE
# -----------------------------------------------------------------------------

class Directory(Entry):
    """
    Composite entry owning an ordered sequence of child entries.

    The tree is append-only: `add` is the single mutator and it refuses
    entries that are already owned, as well as entries that would turn the
    tree into a cycle.
    """

    is_composite = True

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._children: List[Entry] = []

    @property
    def children(self) -> Tuple[Entry, ...]:
        """Read-only snapshot of the children in insertion order."""
        return tuple(self._children)

    def get_size(self) -> int:
        # Recomputed on every call; no cache to invalidate.
        return sum_file_sizes(self)

    def add(self, entry: Entry) -> Entry:
        """
        Append `entry` as the last child and return this directory.

        Raises:
            TypeError: If `entry` is not an Entry.
            EntryOwnershipError: If `entry` is already owned, or would
                become its own transitive child.
        """
        if not isinstance(entry, Entry):
            raise TypeError(f"Expected an Entry, received {type(entry).__name__}.")

        if entry is self:
            raise EntryOwnershipError(entry.name, self._name, "an entry cannot contain itself")
        if entry.parent is not None:
            raise EntryOwnershipError(
                entry.name, self._name, f"already owned by '{entry.parent.name}'"
            )
        # Only a non-empty directory can be one of our ancestors
        if isinstance(entry, Directory) and entry._children and self._has_ancestor(entry):
            raise EntryOwnershipError(entry.name, self._name, "would create a cycle")

        self._children.append(entry)
        entry._parent = self
        logger.debug(f"Appended '{entry.name}' to '{self._name}' ({len(self._children)} children)")
        return self

    def _has_ancestor(self, candidate: Entry) -> bool:
        current = self._parent
        while current is not None:
            if current is candidate:
                return True
            current = current._parent
        return False

    def _dispatch_visit(self, visitor: EntryVisitor, prefix: str) -> None:
        visitor.visit_directory(self, prefix)

    def _dispatch_leave(self, visitor: EntryVisitor, prefix: str) -> None:
        visitor.leave_directory(self, prefix)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._children)


# Names used by the composite vocabulary
Leaf = File
Composite = Directory
