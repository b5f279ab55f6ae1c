from __future__ import annotations

"""
Entry Tree Error Hierarchy.

All errors raised by the entry tree inherit from EntryTreeError so callers
can trap the whole family with a single clause.
"""


class EntryTreeError(Exception):
    """Base error for the entry tree package."""


class UnsupportedOperationError(EntryTreeError):
    """
    Raised when an operation is invoked on an entry variant that cannot
    perform it (e.g. appending a child to a File).

    Attributes:
        operation: Name of the rejected operation.
        entry_name: Name of the entry that rejected it.
    """

    def __init__(self, operation: str, entry_name: str) -> None:
        self.operation = operation
        self.entry_name = entry_name
        super().__init__(
            f"Operation '{operation}' is not supported by entry '{entry_name}'."
        )


class EntryOwnershipError(EntryTreeError):
    """
    Raised when appending an entry would share it between two directories
    or make a directory its own transitive child.
    """

    def __init__(self, entry_name: str, target_name: str, reason: str) -> None:
        self.entry_name = entry_name
        self.target_name = target_name
        self.reason = reason
        super().__init__(
            f"Cannot add '{entry_name}' to '{target_name}': {reason}."
        )
