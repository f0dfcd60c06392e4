from __future__ import annotations

"""
Path Resolution Service.

Translates path strings into node references inside the namespace tree.
Supports absolute and relative addressing plus the '.' and '..' segments.
Resolution is read-only: it never mutates the tree.
"""

import logging
from typing import List, Optional

from fsnavigator.domain.constants import (
    CURRENT_SEGMENT,
    PARENT_SEGMENT,
    PATH_SEPARATOR,
)
from fsnavigator.domain.tree_models import Node

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def split_path(path: str) -> List[str]:
    """
    Split a path into its non-empty segments.

    Absoluteness is not encoded in the result: a leading separator simply
    contributes no segment.

    Args:
        path: Raw path string (e.g. '/home//user/').

    Returns:
        List[str]: Ordered segments (e.g. ['home', 'user']).
    """
    return [part for part in path.split(PATH_SEPARATOR) if part]


def is_absolute(path: str) -> bool:
    """Return True if the path starts at the root."""
    return path.startswith(PATH_SEPARATOR)


def is_valid_name(name: str) -> bool:
    """Return True if `name` can be used as a file or directory name."""
    return bool(name) and PATH_SEPARATOR not in name


def resolve(path: str, current: Node, root: Node) -> Optional[Node]:
    """
    Resolve a path to a node, starting from the root or the current directory.

    Only directories can be descended into: a segment naming a file, or a
    missing segment, fails the whole resolution. '..' at the root is a no-op.

    Args:
        path: Absolute or relative path.
        current: Directory used for relative paths.
        root: Root of the tree.

    Returns:
        Optional[Node]: The target node, or None when the path does not resolve.
    """
    if path == PATH_SEPARATOR:
        return root

    node = root if is_absolute(path) else current

    for segment in split_path(path):
        if segment == PARENT_SEGMENT:
            if node.parent is not None:
                node = node.parent
            continue

        if segment == CURRENT_SEGMENT:
            continue

        if not node.is_directory:
            logger.debug(f"Resolution of '{path}' failed: '{node.name}' is not a directory")
            return None

        child = node.child(segment)
        if child is None or not child.is_directory:
            logger.debug(f"Resolution of '{path}' failed at segment '{segment}'")
            return None
        node = child

    return node


def get_path(node: Node) -> str:
    """
    Reconstruct the absolute path of a node by walking up to the root.

    Args:
        node: Any node attached to a tree.

    Returns:
        str: '/' for the root, otherwise '/name/.../name'.
    """
    names: List[str] = []
    cursor: Optional[Node] = node
    while cursor is not None and not cursor.is_root:
        names.append(cursor.name)
        cursor = cursor.parent

    return PATH_SEPARATOR + PATH_SEPARATOR.join(reversed(names))
