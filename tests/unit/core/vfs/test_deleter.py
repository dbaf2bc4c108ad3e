from __future__ import annotations

"""
Unit tests for the Virtual Tree Deleter.

Verifies:
1. Removal of files and whole folders.
2. Delete-then-find returns None.
3. Empty ancestor folders are kept.
4. Identity-preserving no-ops for unknown paths and descents into files.
"""

from webstudio4ai.core.vfs import delete_node, find_node, upsert_node
from webstudio4ai.domain.vfs_models import NodeKind


def test_delete_file_then_find_is_none(sample_tree) -> None:
    result = delete_node(sample_tree, "src/a.css")

    assert find_node(result, "src/a.css") is None
    assert [n.name for n in find_node(result, "src").children] == ["b.css", "lib"]


def test_delete_folder_removes_subtree(sample_tree) -> None:
    result = delete_node(sample_tree, "src")

    assert [n.name for n in result] == ["index.html"]
    assert find_node(result, "src/lib/util.js") is None


def test_delete_last_child_keeps_empty_folder(sample_tree) -> None:
    result = delete_node(sample_tree, "src/lib/util.js")
    lib = find_node(result, "src/lib")

    assert lib is not None
    assert lib.is_folder
    assert lib.children == ()


def test_delete_shares_untouched_subtrees(sample_tree) -> None:
    result = delete_node(sample_tree, "src/lib/util.js")

    assert result[0] is sample_tree[0]
    assert find_node(result, "src/a.css") is find_node(sample_tree, "src/a.css")


def test_delete_unknown_path_is_noop(sample_tree) -> None:
    assert delete_node(sample_tree, "src/missing.css") is sample_tree
    assert delete_node(sample_tree, "ghost/a.css") is sample_tree
    assert delete_node(sample_tree, "") is sample_tree


def test_delete_below_file_is_noop(sample_tree) -> None:
    assert delete_node(sample_tree, "index.html/x") is sample_tree


def test_delete_below_empty_folder_is_noop() -> None:
    tree = upsert_node((), "empty", NodeKind.FOLDER)
    assert delete_node(tree, "empty/anything") is tree


def test_delete_does_not_mutate_input(sample_tree) -> None:
    delete_node(sample_tree, "src/b.css")
    assert find_node(sample_tree, "src/b.css") is not None
