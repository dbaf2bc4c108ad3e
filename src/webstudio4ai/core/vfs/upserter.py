from __future__ import annotations

"""
Virtual Tree Upserter.

Creates or updates a node at a path using copy-on-write reconstruction. Only
the sibling tuples along the touched path are rebuilt; every other subtree is
reused, and a call that changes nothing returns its input object so callers
can detect no-ops with an identity check.
"""

import logging
from dataclasses import replace
from typing import List, Optional

from webstudio4ai.core.vfs.locator import _index_of, split_path
from webstudio4ai.domain.vfs_models import (
    Node,
    NodeKind,
    Tree,
    join_path,
    make_file,
    make_folder,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def upsert_node(
        tree: Tree,
        path: Optional[str],
        kind: NodeKind,
        content: Optional[str] = "",
) -> Tree:
    """
    Create or update the node at path, creating missing intermediate folders.

    Type conflicts (file vs folder at an existing path) and attempts to create
    nodes below a file are logged and rejected; the input tree is returned.

    Args:
        tree: Root sibling sequence.
        path: Slash-delimited target path.
        kind: Requested node kind.
        content: File content. Ignored for folders.

    Returns:
        Tree: A new tree, or the input object itself when nothing changed.
    """
    segments = split_path(path)
    if not segments:
        return tree
    return _upsert(tree, segments, "", NodeKind(kind), content or "", path or "")

# -----------------------------------------------------------------------------
# RECURSIVE DESCENT
# -----------------------------------------------------------------------------

def _upsert(
        siblings: Tree,
        segments: List[str],
        parent_path: str,
        kind: NodeKind,
        content: str,
        full_path: str,
) -> Tree:
    name, rest = segments[0], segments[1:]
    node_path = join_path(parent_path, name)
    index = _index_of(siblings, name)

    # Scenario A: Segment missing, build the remaining chain
    if index == -1:
        new_node = _build_chain(name, node_path, rest, kind, content, full_path)
        return _sorted_siblings(siblings + (new_node,))

    existing = siblings[index]

    # Scenario B: Target node reached
    if not rest:
        if existing.kind is not kind:
            logger.error(
                f"Cannot replace {existing.kind.value} with {kind.value} at path: {full_path}"
            )
            return siblings
        if kind is NodeKind.FILE and existing.content != content:
            return _replace_at(siblings, index, replace(existing, content=content))
        return siblings

    # Scenario C: Intermediate node, descend
    if not existing.is_folder:
        logger.error(f"Cannot create nodes inside a file: {full_path}")
        return siblings

    children = existing.children if existing.children is not None else ()
    new_children = _upsert(children, rest, node_path, kind, content, full_path)
    if new_children is children:
        return siblings

    return _replace_at(siblings, index, replace(existing, children=new_children))

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _build_chain(
        name: str,
        node_path: str,
        rest: List[str],
        kind: NodeKind,
        content: str,
        full_path: str,
) -> Node:
    """Construct a new leaf, or a folder holding the chain down to the leaf."""
    if not rest:
        if kind is NodeKind.FILE:
            return make_file(name, node_path, content)
        return make_folder(name, node_path)

    children = _upsert((), rest, node_path, kind, content, full_path)
    return make_folder(name, node_path, children)


def _replace_at(siblings: Tree, index: int, node: Node) -> Tree:
    return siblings[:index] + (node,) + siblings[index + 1:]


def _sorted_siblings(siblings: Tree) -> Tree:
    return tuple(sorted(siblings, key=lambda n: n.name))
