from __future__ import annotations

"""
Tree Renderer.

Converts a namespace subtree into a visual ASCII representation using the
standard connectors (├──, └──). Directories are suffixed with '/'.
"""

from typing import List, Tuple

from fsnavigator.domain.constants import DIRECTORY_MARKER
from fsnavigator.domain.tree_models import Node

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_structure(
        node: Node,
        lines: List[str],
        prefix: str = "",
) -> None:
    """
    Render the descendants of `node` into a list of strings.

    Walks the subtree depth-first with an explicit stack, so rendering is
    not bounded by the interpreter recursion limit.

    Args:
        node: Directory whose contents are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the first level.
    """
    # Pending entries: (node, prefix of its line, is last among siblings)
    stack: List[Tuple[Node, str, bool]] = _pending_children(node, prefix)

    while stack:
        child, child_prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "

        # Scenario A: File (leaf)
        if not child.is_directory:
            lines.append(f"{child_prefix}{connector}{child.name}")
            continue

        # Scenario B: Directory (queue its children with an extended prefix)
        lines.append(f"{child_prefix}{connector}{child.name}{DIRECTORY_MARKER}")
        nested_prefix = child_prefix + ("    " if is_last else "│   ")
        stack.extend(_pending_children(child, nested_prefix))


def render_tree(node: Node, header: str) -> List[str]:
    """Render `node` as a block headed by its display path."""
    lines: List[str] = [header]
    render_tree_structure(node, lines)
    return lines

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _pending_children(node: Node, prefix: str) -> List[Tuple[Node, str, bool]]:
    """Children of `node` as stack entries, reversed so the first name pops first."""
    entries = list(node.sorted_children())
    total = len(entries)
    pending = [(child, prefix, i == total - 1) for i, child in enumerate(entries)]
    pending.reverse()
    return pending
