from __future__ import annotations

"""
Iterative Tree Traversal.

Explicit-stack walkers shared by the entry variants and the visitors. All
walkers are depth-first and pre-order, so the recursion depth of the
interpreter never limits the depth of the tree being processed.
"""

import logging
from typing import TYPE_CHECKING, Dict, Iterator, List, Tuple

if TYPE_CHECKING:
    from entrytree.domain.entries import Entry
    from entrytree.domain.visitor import EntryVisitor

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "/"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def child_prefix(prefix: str, name: str) -> str:
    """Return the prefix under which the children of `name` are listed."""
    return f"{prefix}{PATH_SEPARATOR}{name}"


def walk(root: Entry, prefix: str = "") -> Iterator[Tuple[Entry, str]]:
    """
    Yield every entry of the subtree together with its listing prefix.

    Entries come out in depth-first pre-order: a directory precedes its
    children, and children keep their insertion order.

    Args:
        root: Entry where the traversal starts.
        prefix: Prefix under which `root` itself is listed.

    Yields:
        Tuple[Entry, str]: The entry and the prefix of its parent path.
    """
    stack: List[Tuple[Entry, str]] = [(root, prefix)]
    while stack:
        entry, entry_prefix = stack.pop()
        yield entry, entry_prefix

        if entry.is_composite:
            nested = child_prefix(entry_prefix, entry.name)
            stack.extend((child, nested) for child in reversed(entry.children))


def dispatch(root: Entry, visitor: EntryVisitor, prefix: str = "") -> None:
    """
    Drive a visitor over the subtree rooted at `root`.

    Each entry selects the visitor operation matching its own variant
    (double dispatch). After the last child of a directory was visited,
    the directory is handed to `leave_directory`.

    Args:
        root: Entry where the traversal starts.
        visitor: Operation applied to each entry.
        prefix: Prefix under which `root` itself is listed.
    """
    logger.debug(f"Dispatching {type(visitor).__name__} from '{root.name}'")

    # Stack items: (entry, prefix, leaving)
    stack: List[Tuple[Entry, str, bool]] = [(root, prefix, False)]
    while stack:
        entry, entry_prefix, leaving = stack.pop()

        if leaving:
            entry._dispatch_leave(visitor, entry_prefix)
            continue

        entry._dispatch_visit(visitor, entry_prefix)

        if entry.is_composite:
            stack.append((entry, entry_prefix, True))
            nested = child_prefix(entry_prefix, entry.name)
            stack.extend((child, nested, False) for child in reversed(entry.children))


def sum_file_sizes(root: Entry) -> int:
    """Sum the size of every File reachable from `root`."""
    total = 0
    stack: List[Entry] = [root]
    while stack:
        entry = stack.pop()
        if entry.is_composite:
            stack.extend(entry.children)
        else:
            total += entry.get_size()
    return total


def subtree_sizes(root: Entry) -> Dict[int, int]:
    """
    Compute the aggregated size of every entry of the subtree in one pass.

    Uses a post-order walk so each directory sums its children once.

    Returns:
        Dict[int, int]: Mapping of `id(entry)` to the entry size.
    """
    sizes: Dict[int, int] = {}

    # Stack items: (entry, children_already_pushed)
    stack: List[Tuple[Entry, bool]] = [(root, False)]
    while stack:
        entry, expanded = stack.pop()

        if not entry.is_composite:
            sizes[id(entry)] = entry.get_size()
            continue

        if expanded:
            sizes[id(entry)] = sum(sizes[id(child)] for child in entry.children)
        else:
            stack.append((entry, True))
            stack.extend((child, False) for child in entry.children)

    return sizes
