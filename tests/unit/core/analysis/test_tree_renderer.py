from __future__ import annotations

"""
Unit tests for the ASCII Tree Renderer.
"""

from fsnavigator.core.analysis.tree_renderer import render_tree, render_tree_structure
from fsnavigator.domain.tree_models import Node


def test_render_empty_directory() -> None:
    lines = []
    render_tree_structure(Node.new_root(), lines)
    assert lines == []


def test_render_nested_structure_with_connectors() -> None:
    root = Node.new_root()
    src = Node.directory("src", parent=root)
    Node.file("main.py", parent=src)
    Node.file("util.py", parent=src)
    Node.file("README.md", parent=root)

    assert render_tree(root, "/") == [
        "/",
        "├── README.md",
        "└── src/",
        "    ├── main.py",
        "    └── util.py",
    ]


def test_render_deep_tree_beyond_recursion_limit() -> None:
    """Rendering walks the tree iteratively, so depth is not capped."""
    depth = 1500
    root = Node.new_root()
    parent = root
    for _ in range(depth):
        parent = Node.directory("d", parent=parent)
    Node.file("leaf", parent=parent)

    lines = render_tree(root, "/")

    assert len(lines) == depth + 2
    assert lines[1] == "└── d/"
    assert lines[-1] == " " * 4 * depth + "└── leaf"
