from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs the one-shot flow end to end with a fake generator, so no SDK or
network access is involved.
"""

import json
from pathlib import Path
from typing import List

import pytest

from webstudio4ai.core.services.generator import CodeGenerator
from webstudio4ai.domain import config
from webstudio4ai.domain.errors import GenerationError
from webstudio4ai.domain.operations import CreateFile, GenerationResult
from webstudio4ai.domain.vfs_models import Tree
from webstudio4ai.interface.cli import app


class CannedGenerator(CodeGenerator):
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.trees: List[Tree] = []

    def generate(self, prompt: str, tree: Tree) -> GenerationResult:
        self.trees.append(tree)
        if self.fail:
            raise GenerationError("Service unavailable.")
        return GenerationResult(
            reasoning="Created a page.",
            operations=[CreateFile(path="src/index.html", content="<h1>Hi</h1>")],
            html_output="<h1>Hi</h1>",
        )


@pytest.fixture(autouse=True)
def no_log_file(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the CLI from writing a log file into the real user data dir."""
    monkeypatch.setattr(app, "get_default_log_path", lambda: None)


def _base_args(tmp_path: Path) -> List[str]:
    return ["--use-defaults", "--preview-out", str(tmp_path / "preview.html")]


def test_one_shot_generation_writes_preview(tmp_path: Path, capsys) -> None:
    code = app.main(_base_args(tmp_path) + ["-p", "make a page", "--print-tree"], generator=CannedGenerator())
    out = capsys.readouterr().out

    assert code == 0
    assert (tmp_path / "preview.html").read_text(encoding="utf-8") == "<h1>Hi</h1>"
    assert "Created a page." in out
    assert "CREATE src/index.html" in out
    assert "└── src/" in out


def test_one_shot_json_output(tmp_path: Path, capsys) -> None:
    code = app.main(_base_args(tmp_path) + ["-p", "x", "--json"], generator=CannedGenerator())
    data = json.loads(capsys.readouterr().out)

    assert code == 0
    assert data["reasoning"] == "Created a page."
    assert data["operations"] == [
        {"action": "CREATE", "path": "src/index.html", "type": "file", "content": "<h1>Hi</h1>"}
    ]
    assert data["preview_path"] == str(tmp_path / "preview.html")


def test_imports_are_sent_to_generator(tmp_path: Path) -> None:
    seed = tmp_path / "seed.css"
    seed.write_text("a{}", encoding="utf-8")
    gen = CannedGenerator()

    code = app.main(_base_args(tmp_path) + ["-i", str(seed), "-p", "x"], generator=gen)

    assert code == 0
    assert [n.name for n in gen.trees[0]] == ["seed.css"]


def test_generation_failure_exit_code(tmp_path: Path, capsys) -> None:
    code = app.main(_base_args(tmp_path) + ["-p", "x"], generator=CannedGenerator(fail=True))

    assert code == 1
    assert "Service unavailable." in capsys.readouterr().err
    assert not (tmp_path / "preview.html").exists()


def test_empty_prompt_exit_code(tmp_path: Path) -> None:
    gen = CannedGenerator()
    assert app.main(_base_args(tmp_path) + ["-p", "  "], generator=gen) == 2
    assert gen.trees == []


def test_missing_import_exit_code(tmp_path: Path) -> None:
    code = app.main(_base_args(tmp_path) + ["-i", str(tmp_path / "ghost"), "-p", "x"], generator=CannedGenerator())
    assert code == 2


def test_dump_config(tmp_path: Path, capsys) -> None:
    code = app.main(_base_args(tmp_path) + ["--dump-config", "--model", "gemini-x"])
    data = json.loads(capsys.readouterr().out)

    assert code == 0
    assert data["model_id"] == "gemini-x"
    assert data["preview_path"] == str(tmp_path / "preview.html")


def test_unwritable_preview_exit_code(tmp_path: Path, capsys) -> None:
    blocker = tmp_path / "f"
    blocker.write_text("", encoding="utf-8")
    args = ["--use-defaults", "--preview-out", str(blocker / "p.html"), "-p", "x"]

    code = app.main(args, generator=CannedGenerator())

    assert code == 1
    assert "ERROR:" in capsys.readouterr().err


def test_save_config_persists_effective_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_file = tmp_path / "settings" / "config.json"
    monkeypatch.setattr(config, "get_config_file", lambda: str(config_file))

    code = app.main(_base_args(tmp_path) + ["--save-config", "--dump-config", "--model", "gemini-x"])
    saved = json.loads(config_file.read_text(encoding="utf-8"))

    assert code == 0
    assert saved["model_id"] == "gemini-x"
    assert saved["preview_path"] == str(tmp_path / "preview.html")
    assert saved["version"] == config.CURRENT_CONFIG_VERSION
