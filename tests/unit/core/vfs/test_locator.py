from __future__ import annotations

"""
Unit tests for the Virtual Tree Locator.

Verifies:
1. Resolution of files and folders at any depth.
2. Tolerance of leading, trailing and duplicated slashes.
3. Misses (unknown segments, descending into files) return None.
4. Path round-trip for every reachable node.
"""

from webstudio4ai.core.vfs import find_node, get_file_content, iter_nodes, split_path
from webstudio4ai.domain.vfs_models import NodeKind


def test_split_path_discards_empty_segments() -> None:
    assert split_path("/src//lib/") == ["src", "lib"]
    assert split_path("") == []
    assert split_path(None) == []


def test_find_node_resolves_nested_file(sample_tree) -> None:
    node = find_node(sample_tree, "src/lib/util.js")

    assert node is not None
    assert node.kind is NodeKind.FILE
    assert node.content == "export {};"


def test_find_node_resolves_folder(sample_tree) -> None:
    node = find_node(sample_tree, "src/lib")

    assert node is not None
    assert node.is_folder
    assert [c.name for c in node.children] == ["util.js"]


def test_find_node_tolerates_extra_slashes(sample_tree) -> None:
    assert find_node(sample_tree, "/src//a.css/") is find_node(sample_tree, "src/a.css")


def test_find_node_missing_segment_returns_none(sample_tree) -> None:
    assert find_node(sample_tree, "src/missing.css") is None
    assert find_node(sample_tree, "nope") is None


def test_find_node_cannot_descend_into_file(sample_tree) -> None:
    assert find_node(sample_tree, "index.html/child") is None


def test_find_node_empty_path_returns_none(sample_tree) -> None:
    assert find_node(sample_tree, "") is None
    assert find_node((), "anything") is None


def test_get_file_content_only_for_files(sample_tree) -> None:
    assert get_file_content(sample_tree, "src/b.css") == "b{}"
    assert get_file_content(sample_tree, "src") is None
    assert get_file_content(sample_tree, "src/zzz.css") is None


def test_every_node_is_found_by_its_own_path(sample_tree) -> None:
    """Path round-trip: find(T, n.path) is n for every reachable node."""
    nodes = list(iter_nodes(sample_tree))

    assert len(nodes) == 6
    for node in nodes:
        assert find_node(sample_tree, node.path) is node
