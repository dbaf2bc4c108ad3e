from __future__ import annotations

"""
Virtual File System Data Models.

Provides the immutable node definitions that make up the in-memory project
tree. Trees are plain tuples of nodes so that unchanged subtrees can be shared
between successive snapshots and compared by identity.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Variant tag of a tree entry. Values match the model wire format."""
    FILE = "file"
    FOLDER = "folder"


@dataclass(frozen=True)
class Node:
    """
    Represents a single file or folder in the virtual tree.

    Attributes:
        name: Last path segment.
        path: Slash-joined path from the tree root (no leading/trailing slash).
        kind: FILE or FOLDER.
        content: Text content. Always a string for files, None for folders.
        children: Sorted child nodes. Always a tuple for folders, None for files.
    """
    name: str
    path: str
    kind: NodeKind
    content: Optional[str] = None
    children: Optional[Tuple["Node", ...]] = None

    @property
    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE

    @property
    def is_folder(self) -> bool:
        return self.kind is NodeKind.FOLDER


Tree = Tuple[Node, ...]

EMPTY_TREE: Tree = ()

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def make_file(name: str, path: str, content: Optional[str] = "") -> Node:
    """Build a file node, normalizing missing content to an empty string."""
    return Node(name=name, path=path, kind=NodeKind.FILE, content=content or "")


def make_folder(name: str, path: str, children: Tree = EMPTY_TREE) -> Node:
    """Build a folder node that always owns a children tuple."""
    return Node(name=name, path=path, kind=NodeKind.FOLDER, children=tuple(children))


def join_path(parent_path: str, name: str) -> str:
    """Derive a child path from its parent path."""
    return f"{parent_path}/{name}" if parent_path else name
