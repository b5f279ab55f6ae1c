from __future__ import annotations

"""
Entry Tree Builders.

Helpers to assemble trees from nested mappings, plus the reference
scenario used by the command-line front end.
"""

import logging
from typing import Any, List, Mapping, Tuple, Union

from entrytree.domain.entries import Directory, File

logger = logging.getLogger(__name__)

# Values of a layout: a File size or a nested layout
Layout = Mapping[str, Union[int, "Layout"]]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(name: str, layout: Layout) -> Directory:
    """
    Build a Directory from a nested mapping.

    Integer values become Files of that size, mappings become
    sub-directories. Mapping order is preserved as child order.

    Args:
        name: Name of the root directory.
        layout: Mapping of child names to sizes or nested layouts.

    Returns:
        Directory: The populated root.

    Raises:
        TypeError: If a value is neither an int nor a mapping.
    """
    root = Directory(name)

    # Explicit stack keeps deep layouts within the interpreter limits
    pending: List[Tuple[Directory, Any]] = [(root, layout)]
    while pending:
        directory, children = pending.pop()
        if not isinstance(children, Mapping):
            raise TypeError(
                f"Layout of '{directory.name}' must be a mapping, "
                f"received {type(children).__name__}."
            )

        for child_name, value in children.items():
            if isinstance(value, Mapping):
                sub_directory = Directory(child_name)
                directory.add(sub_directory)
                pending.append((sub_directory, value))
            elif isinstance(value, int) and not isinstance(value, bool):
                directory.add(File(child_name, value))
            else:
                raise TypeError(
                    f"Invalid layout value for '{child_name}': "
                    f"expected int or mapping, received {type(value).__name__}."
                )

    logger.debug(f"Built tree '{name}' with total size {root.get_size()}")
    return root


def make_sample_root() -> Directory:
    """
    Build the reference tree:

    root
      bin  (vi 10000, latex 20000)
      tmp
      usr
    """
    root = Directory("root")
    bin_dir = Directory("bin")
    tmp_dir = Directory("tmp")
    usr_dir = Directory("usr")
    root.add(bin_dir)
    root.add(tmp_dir)
    root.add(usr_dir)
    bin_dir.add(File("vi", 10000))
    bin_dir.add(File("latex", 20000))
    return root


def add_user_entries(usr: Directory) -> Directory:
    """Populate `usr` with the home directories of the reference scenario."""
    yuki = Directory("yuki")
    hanako = Directory("hanako")
    tomura = Directory("tomura")
    usr.add(yuki).add(hanako).add(tomura)

    yuki.add(File("diary.html", 100)).add(File("Composite.java", 200))
    hanako.add(File("memo.tex", 300))
    tomura.add(File("game.doc", 400)).add(File("junk.mail", 500))
    return usr


def find_child(directory: Directory, name: str) -> Directory:
    """
    Return the child directory called `name`.

    Raises:
        KeyError: If no child directory carries that name.
    """
    for child in directory:
        if isinstance(child, Directory) and child.name == name:
            return child
    raise KeyError(f"No directory '{name}' under '{directory.name}'.")
