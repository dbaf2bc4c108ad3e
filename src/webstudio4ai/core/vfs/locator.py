from __future__ import annotations

"""
Virtual Tree Locator.

Read-only traversal helpers that resolve slash-delimited paths against the
virtual tree. A miss is never an error: callers receive None and render a
placeholder.
"""

from typing import Iterator, List, Optional

from webstudio4ai.domain.vfs_models import Node, Tree

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def split_path(path: Optional[str]) -> List[str]:
    """
    Split a path into its non-empty segments.

    Leading, trailing and duplicated slashes are tolerated.
    """
    if not path:
        return []
    return [p for p in path.split("/") if p]


def find_node(tree: Tree, path: Optional[str]) -> Optional[Node]:
    """
    Resolve a path to the node it addresses.

    Args:
        tree: Root sibling sequence.
        path: Slash-delimited path.

    Returns:
        Optional[Node]: The matched file or folder, or None when any segment
                        is missing or the path tries to descend into a file.
    """
    current: Optional[Node] = None
    siblings: Tree = tree

    for segment in split_path(path):
        if current is not None:
            if not current.is_folder:
                return None
            siblings = current.children or ()
        current = _find_sibling(siblings, segment)
        if current is None:
            return None

    return current


def get_file_content(tree: Tree, path: Optional[str]) -> Optional[str]:
    """Return the content of the file at path, or None for folders and misses."""
    node = find_node(tree, path)
    if node is None or not node.is_file:
        return None
    return node.content if node.content is not None else ""


def iter_nodes(tree: Tree) -> Iterator[Node]:
    """Yield every node depth-first, parents before their children."""
    for node in tree:
        yield node
        if node.is_folder and node.children:
            yield from iter_nodes(node.children)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _find_sibling(siblings: Tree, name: str) -> Optional[Node]:
    for node in siblings:
        if node.name == name:
            return node
    return None


def _index_of(siblings: Tree, name: str) -> int:
    """Position of the sibling called name, or -1."""
    for i, node in enumerate(siblings):
        if node.name == name:
            return i
    return -1
