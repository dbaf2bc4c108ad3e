from __future__ import annotations

"""
Virtual Tree Deleter.

Removes the node addressed by a path, mirroring the upserter's descent.
Ancestor folders left empty by a deletion are kept.
"""

from dataclasses import replace
from typing import List, Optional

from webstudio4ai.core.vfs.locator import _index_of, split_path
from webstudio4ai.domain.vfs_models import Tree


def delete_node(tree: Tree, path: Optional[str]) -> Tree:
    """
    Remove the node at path and its whole subtree.

    Args:
        tree: Root sibling sequence.
        path: Slash-delimited path of the node to remove.

    Returns:
        Tree: A new tree, or the input object itself when the path does not
              resolve.
    """
    segments = split_path(path)
    if not segments:
        return tree
    return _delete(tree, segments)


def _delete(siblings: Tree, segments: List[str]) -> Tree:
    name, rest = segments[0], segments[1:]
    index = _index_of(siblings, name)
    if index == -1:
        return siblings

    if not rest:
        return siblings[:index] + siblings[index + 1:]

    existing = siblings[index]
    if not existing.is_folder or not existing.children:
        return siblings

    new_children = _delete(existing.children, rest)
    if new_children is existing.children:
        return siblings

    updated = replace(existing, children=new_children)
    return siblings[:index] + (updated,) + siblings[index + 1:]
