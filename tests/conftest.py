from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for sample trees and configuration dictionaries.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from webstudio4ai.domain.vfs_models import Tree, make_file, make_folder  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree() -> Tree:
    """
    Return a small project tree.

    Structure:
        index.html
        src/
            a.css
            b.css
            lib/
                util.js
    """
    lib = make_folder("lib", "src/lib", (make_file("util.js", "src/lib/util.js", "export {};"),))
    src = make_folder(
        "src",
        "src",
        (
            make_file("a.css", "src/a.css", "a{}"),
            make_file("b.css", "src/b.css", "b{}"),
            lib,
        ),
    )
    return (make_file("index.html", "index.html", "<html></html>"), src)


@pytest.fixture
def mock_config_dict(tmp_path: Any) -> Dict[str, Any]:
    """Return a valid, complete configuration dictionary for testing."""
    return {
        "model_id": "gemini-2.5-flash",
        "api_key_env": "GOOGLE_API_KEY",
        "preview_path": str(tmp_path / "preview" / "index.html"),
        "export_dir": str(tmp_path / "exports"),
        "log_level": "INFO",
        "save_log_file": False,
    }
