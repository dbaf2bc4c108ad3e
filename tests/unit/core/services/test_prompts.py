from __future__ import annotations

"""
Unit tests for prompt assembly.
"""

from webstudio4ai.core.services.prompts import RESPONSE_SCHEMA, build_prompt


def test_build_prompt_for_empty_project() -> None:
    text = build_prompt("Create a login form", ())

    assert 'User Prompt: "Create a login form"' in text
    assert "Current File System Structure:\n(empty)" in text
    assert "Current File Contents:\n(no files with content)" in text


def test_build_prompt_includes_structure_and_contents(sample_tree) -> None:
    text = build_prompt("Restyle", sample_tree)

    assert "src/\n  a.css" in text
    assert "--- FILE: src/a.css ---\na{}" in text


def test_response_schema_requires_top_level_fields() -> None:
    assert RESPONSE_SCHEMA["required"] == ["reasoning", "operations", "html_output"]
    assert RESPONSE_SCHEMA["properties"]["operations"]["items"]["required"] == ["action", "path"]
