from __future__ import annotations

"""
Namespace Session Service.

Holds the tree root and the current-directory pointer of a session and
exposes the mutating and querying operations on top of path resolution.
Every operation either completes fully or leaves the tree untouched.
"""

import logging
from typing import List

from fsnavigator.core.analysis.tree_renderer import render_tree
from fsnavigator.core.resolution.path_resolver import get_path, is_valid_name, resolve
from fsnavigator.domain.constants import PATH_SEPARATOR
from fsnavigator.domain.results import (
    ListingEntry,
    OperationResult,
    OperationStatus,
    failure,
    success,
)
from fsnavigator.domain.tree_models import Node, NodeKind

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# NAMESPACE SERVICE
# -----------------------------------------------------------------------------

class Namespace:
    """
    In-memory directory tree with a current working directory.

    The namespace exclusively owns the root node; each directory owns its
    children. The current directory starts at the root and only moves on a
    successful `change_directory`.
    """

    def __init__(self) -> None:
        self._root: Node = Node.new_root()
        self._current: Node = self._root

    @property
    def root(self) -> Node:
        return self._root

    @property
    def current(self) -> Node:
        return self._current

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def make_directory(self, name: str) -> OperationResult:
        """Create an empty directory in the current directory."""
        return self._create(name, NodeKind.DIRECTORY)

    def create_file(self, name: str) -> OperationResult:
        """Create an empty file marker in the current directory."""
        return self._create(name, NodeKind.FILE)

    def change_directory(self, path: str) -> OperationResult:
        """
        Move the current directory to the directory addressed by `path`.

        Args:
            path: Absolute or relative path; '/' jumps straight to the root.

        Returns:
            OperationResult: OK, or INVALID_PATH when the path does not
            resolve or resolves to a file. The current directory is left
            unchanged on failure.
        """
        if path == PATH_SEPARATOR:
            self._current = self._root
            return success(path)

        target = resolve(path, self._current, self._root)
        if target is None or not target.is_directory:
            logger.debug(f"cd rejected: '{path}' from {get_path(self._current)}")
            return failure(OperationStatus.INVALID_PATH, path)

        self._current = target
        return success(path)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def list_entries(self) -> List[ListingEntry]:
        """Return the direct children of the current directory ordered by name."""
        return [
            ListingEntry(name=child.name, is_directory=child.is_directory)
            for child in self._current.sorted_children()
        ]

    def print_working_directory(self) -> str:
        return get_path(self._current)

    def find(self, name: str) -> List[str]:
        """
        Search the whole tree for nodes called `name`.

        Performs a pre-order traversal from the root, visiting children in
        name order. Files and directories are both eligible.

        Args:
            name: Exact name to match.

        Returns:
            List[str]: Absolute paths of every match, in visit order.
        """
        matches: List[str] = []
        stack: List[Node] = [self._root]

        while stack:
            node = stack.pop()
            if node.name == name:
                matches.append(get_path(node))
            # Reverse so the smallest name is popped first
            stack.extend(reversed(list(node.sorted_children())))

        logger.debug(f"find '{name}': {len(matches)} match(es)")
        return matches

    def render_tree(self) -> List[str]:
        """Render the current directory and its descendants as ASCII art."""
        return render_tree(self._current, get_path(self._current))

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _create(self, name: str, kind: NodeKind) -> OperationResult:
        if not is_valid_name(name):
            return failure(OperationStatus.NAME_INVALID, name)

        if self._current.child(name) is not None:
            return failure(OperationStatus.NAME_COLLISION, name)

        if kind is NodeKind.DIRECTORY:
            Node.directory(name, parent=self._current)
        else:
            Node.file(name, parent=self._current)

        logger.debug(f"Created {kind.value} '{name}' in {get_path(self._current)}")
        return success(name)
