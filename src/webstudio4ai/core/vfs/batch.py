from __future__ import annotations

"""
Batch Operation Applier.

Folds an ordered list of file operations over the virtual tree. Each step sees
the tree produced by the previous one. There is no rollback: a rejected or
unrecognized operation leaves the tree unchanged for that step and the fold
moves on.
"""

import logging
from typing import Any, Iterable

from webstudio4ai.core.vfs.deleter import delete_node
from webstudio4ai.core.vfs.upserter import upsert_node
from webstudio4ai.domain.operations import (
    CreateFile,
    CreateFolder,
    DeleteNode,
    UpdateFile,
)
from webstudio4ai.domain.vfs_models import NodeKind, Tree

logger = logging.getLogger(__name__)


def apply_operations(tree: Tree, operations: Iterable[Any]) -> Tree:
    """
    Apply operations left to right and return the resulting tree.

    Args:
        tree: Starting tree snapshot.
        operations: Ordered operation variants.

    Returns:
        Tree: Final snapshot. Identical to the input when nothing changed.
    """
    current = tree
    for op in operations:
        current = apply_operation(current, op)
    return current


def apply_operation(tree: Tree, op: Any) -> Tree:
    """Map a single operation variant to its tree mutation."""
    if isinstance(op, CreateFile):
        return upsert_node(tree, op.path, NodeKind.FILE, op.content)
    if isinstance(op, CreateFolder):
        return upsert_node(tree, op.path, NodeKind.FOLDER)
    if isinstance(op, UpdateFile):
        return upsert_node(tree, op.path, NodeKind.FILE, op.content)
    if isinstance(op, DeleteNode):
        return delete_node(tree, op.path)

    # Future operation kinds fail closed
    logger.debug(f"Skipping unsupported operation: {op!r}")
    return tree
