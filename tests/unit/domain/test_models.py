from __future__ import annotations

"""
Unit tests for Virtual File System Models.

Verifies node factories, kind helpers and immutability.
"""

import dataclasses

import pytest

from webstudio4ai.domain.vfs_models import NodeKind, join_path, make_file, make_folder


def test_make_file_defaults() -> None:
    node = make_file("a.txt", "docs/a.txt", None)

    assert node.kind is NodeKind.FILE
    assert node.is_file and not node.is_folder
    assert node.content == ""
    assert node.children is None


def test_make_folder_owns_children_tuple() -> None:
    child = make_file("x", "f/x")
    folder = make_folder("f", "f", [child])

    assert folder.is_folder
    assert folder.children == (child,)
    assert folder.content is None
    assert make_folder("g", "g").children == ()


def test_nodes_are_frozen() -> None:
    node = make_file("a", "a")
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.content = "changed"  # type: ignore[misc]


def test_node_kind_values_match_wire_format() -> None:
    assert NodeKind("file") is NodeKind.FILE
    assert NodeKind("folder") is NodeKind.FOLDER


def test_join_path() -> None:
    assert join_path("", "src") == "src"
    assert join_path("src/lib", "a.js") == "src/lib/a.js"
