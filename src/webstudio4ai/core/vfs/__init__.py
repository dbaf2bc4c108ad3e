from __future__ import annotations

from .batch import apply_operation, apply_operations
from .deleter import delete_node
from .locator import find_node, get_file_content, iter_nodes, split_path
from .upserter import upsert_node

__all__ = [
    "apply_operation",
    "apply_operations",
    "delete_node",
    "find_node",
    "get_file_content",
    "iter_nodes",
    "split_path",
    "upsert_node",
]
