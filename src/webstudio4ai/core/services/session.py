from __future__ import annotations

"""
Studio Session Controller.

Owns the application state: the current tree snapshot, the open editor tabs,
the preview HTML and the model's reasoning. The session is the single writer
of the tree; it replaces its reference wholesale after every mutation and
only runs a batch after the generation response was fully parsed.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from webstudio4ai.core.services.generator import CodeGenerator
from webstudio4ai.core.vfs import (
    apply_operations,
    find_node,
    get_file_content,
    upsert_node,
)
from webstudio4ai.domain.errors import (
    ExportError,
    GenerationError,
    PromptValidationError,
    SubmissionInProgressError,
)
from webstudio4ai.domain.operations import CreateFile, CreateFolder, GenerationResult
from webstudio4ai.domain.vfs_models import EMPTY_TREE, NodeKind, Tree
from webstudio4ai.infra.fs import collect_import_entries, write_text

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# STATE MODEL
# -----------------------------------------------------------------------------

@dataclass
class StudioState:
    """
    Mutable top-level state of an editing session.

    Attributes:
        tree: Current project snapshot.
        open_file_paths: Paths of open editor tabs, in opening order.
        active_file_path: Tab currently shown in the editor.
        html_output: Last preview document returned by the model.
        reasoning: Last explanation returned by the model.
        is_loading: True while a generation request is pending.
        error: Last user-facing error message.
    """
    tree: Tree = EMPTY_TREE
    open_file_paths: List[str] = field(default_factory=list)
    active_file_path: Optional[str] = None
    html_output: str = ""
    reasoning: str = ""
    is_loading: bool = False
    error: Optional[str] = None


class StudioSession:
    """
    Coordinates user actions, the generation service and the virtual tree.
    """

    def __init__(self, generator: CodeGenerator, state: Optional[StudioState] = None) -> None:
        self.generator = generator
        self.state = state or StudioState()

    # -------------------------------------------------------------------------
    # GENERATION
    # -------------------------------------------------------------------------

    def submit(self, prompt: str) -> GenerationResult:
        """
        Send a change request and apply the returned operations.

        Args:
            prompt: Natural language change request.

        Returns:
            GenerationResult: The parsed response that was applied.

        Raises:
            PromptValidationError: If the prompt is blank.
            SubmissionInProgressError: If another request is pending.
            GenerationError: If the service fails. The tree is left untouched.
        """
        if not prompt or not prompt.strip():
            self.state.error = "Prompt cannot be empty."
            raise PromptValidationError(self.state.error)
        if self.state.is_loading:
            raise SubmissionInProgressError("A generation request is already in progress.")

        self.state.is_loading = True
        self.state.error = None
        self.state.reasoning = ""

        try:
            result = self.generator.generate(prompt, self.state.tree)
        except GenerationError as e:
            self.state.error = str(e) or "An unknown error occurred."
            logger.error(f"Generation failed: {self.state.error}")
            raise
        finally:
            self.state.is_loading = False

        new_tree = apply_operations(self.state.tree, result.operations)
        self.state.tree = new_tree
        self.state.html_output = result.html_output
        self.state.reasoning = result.reasoning
        logger.info(f"Applied {len(result.operations)} operations from model response.")

        # Open the first created file so the user sees the change
        created = next(
            (op for op in result.operations if isinstance(op, (CreateFile, CreateFolder))),
            None,
        )
        if created is not None:
            node = find_node(new_tree, created.path)
            if node is not None and node.is_file:
                self.select_file(node.path)

        return result

    # -------------------------------------------------------------------------
    # EXPLORER ACTIONS
    # -------------------------------------------------------------------------

    def new_file(self, path: str) -> Tree:
        """Create an empty file. Blank paths are ignored."""
        if path and path.strip():
            self.state.tree = upsert_node(self.state.tree, path.strip(), NodeKind.FILE, "")
        return self.state.tree

    def new_folder(self, path: str) -> Tree:
        """Create a folder. Blank paths are ignored."""
        if path and path.strip():
            self.state.tree = upsert_node(self.state.tree, path.strip(), NodeKind.FOLDER)
        return self.state.tree

    def import_paths(self, paths: Iterable[str]) -> int:
        """
        Upload local files or folders into the tree as text files.

        Args:
            paths: Local file or directory paths.

        Returns:
            int: Number of files imported.
        """
        entries = collect_import_entries(paths)
        tree = self.state.tree
        for rel_path, content in entries:
            tree = upsert_node(tree, rel_path, NodeKind.FILE, content)
        self.state.tree = tree
        logger.info(f"Imported {len(entries)} files.")
        return len(entries)

    def download_active(self, dest_dir: str) -> str:
        """
        Export the active file to dest_dir under its own name.

        Returns:
            str: Absolute path of the written file.

        Raises:
            ExportError: If nothing is selected or the selection is not a file.
        """
        if not self.state.active_file_path:
            raise ExportError("Please select a file to download.")

        node = find_node(self.state.tree, self.state.active_file_path)
        if node is None or not node.is_file:
            raise ExportError("Only files can be downloaded. Please select a file.")

        target = write_text(os.path.join(dest_dir, node.name), node.content or "")
        logger.info(f"Downloaded '{node.path}' to {target}")
        return target

    def write_preview(self, dest: str) -> str:
        """Persist the current preview document and return its path."""
        target = write_text(dest, self.state.html_output)
        logger.debug(f"Preview written to {target}")
        return target

    # -------------------------------------------------------------------------
    # TABS
    # -------------------------------------------------------------------------

    def select_file(self, path: str) -> None:
        """Open a tab for path if needed and make it active."""
        if path not in self.state.open_file_paths:
            self.state.open_file_paths.append(path)
        self.state.active_file_path = path

    def close_file(self, path: str) -> None:
        """Close a tab. Closing the active tab activates the last remaining one."""
        remaining = [p for p in self.state.open_file_paths if p != path]
        self.state.open_file_paths = remaining
        if self.state.active_file_path == path:
            self.state.active_file_path = remaining[-1] if remaining else None

    def active_file_content(self) -> Optional[str]:
        """Content of the active tab, or None when nothing resolvable is active."""
        if not self.state.active_file_path:
            return None
        return get_file_content(self.state.tree, self.state.active_file_path)
