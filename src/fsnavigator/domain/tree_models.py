from __future__ import annotations

"""
Namespace Tree Data Models.

Provides the node structure of the in-memory directory tree. A single
dataclass carries a kind tag: directories own a children mapping, files
carry none. The parent link is a weak reference so that ownership flows
strictly top-down from the root.
"""

import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Optional

from fsnavigator.domain.constants import ROOT_NAME

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Tag distinguishing the two node variants."""
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(eq=False)
class Node:
    """
    A single file or directory entry in the namespace tree.

    Attributes:
        name: Entry name, unique among its siblings. The root uses '/'.
        kind: Variant tag (directory or file).
        children: Owned child nodes keyed by name. None for files.
    """
    name: str
    kind: NodeKind
    children: Optional[Dict[str, "Node"]] = field(default=None, repr=False)
    _parent_ref: Optional["weakref.ReferenceType[Node]"] = field(
        default=None, repr=False
    )

    @classmethod
    def directory(cls, name: str, parent: Optional[Node] = None) -> Node:
        node = cls(name=name, kind=NodeKind.DIRECTORY, children={})
        node._attach(parent)
        return node

    @classmethod
    def file(cls, name: str, parent: Optional[Node] = None) -> Node:
        node = cls(name=name, kind=NodeKind.FILE)
        node._attach(parent)
        return node

    @classmethod
    def new_root(cls) -> Node:
        return cls.directory(ROOT_NAME)

    @property
    def parent(self) -> Optional[Node]:
        """Owning directory, or None for the root."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def is_directory(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @property
    def is_root(self) -> bool:
        return self._parent_ref is None

    def child(self, name: str) -> Optional[Node]:
        """Return the direct child called `name`, or None (files have no children)."""
        if self.children is None:
            return None
        return self.children.get(name)

    def sorted_children(self) -> Iterator[Node]:
        """Yield direct children ordered lexicographically by name."""
        if not self.children:
            return
        for name in sorted(self.children):
            yield self.children[name]

    def _attach(self, parent: Optional[Node]) -> None:
        if parent is None:
            return
        if parent.children is None:
            raise TypeError(f"Cannot attach '{self.name}' under file '{parent.name}'")
        self._parent_ref = weakref.ref(parent)
        parent.children[self.name] = self
