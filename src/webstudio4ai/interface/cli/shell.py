from __future__ import annotations

"""
Interactive Studio Shell.

Line-oriented front end over a StudioSession: explorer actions, editor tabs,
generation and preview. The shell only reads the tree through the locator
and mutates it through the session.
"""

import cmd
import logging
import shlex
from typing import IO, List, Optional

from webstudio4ai.core.analysis.tree_renderer import render_tree_structure
from webstudio4ai.core.services.session import StudioSession
from webstudio4ai.core.vfs import find_node
from webstudio4ai.domain.errors import StudioError

logger = logging.getLogger(__name__)


class StudioShell(cmd.Cmd):
    intro = "WebStudio4AI interactive shell. Type 'help' for commands, 'quit' to exit."
    prompt = "studio> "

    def __init__(
            self,
            session: StudioSession,
            preview_path: str,
            export_dir: str,
            stdin: Optional[IO[str]] = None,
            stdout: Optional[IO[str]] = None,
    ) -> None:
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self.session = session
        self.preview_path = preview_path
        self.export_dir = export_dir

    # -------------------------------------------------------------------------
    # GENERATION
    # -------------------------------------------------------------------------

    def do_prompt(self, arg: str) -> None:
        """prompt <text>: ask the model to change the project."""
        self._say("Generating...")
        try:
            result = self.session.submit(arg)
        except StudioError as e:
            self._say(f"ERROR: {e}")
            return

        self._say(result.reasoning)
        self._say(f"{len(result.operations)} operations applied.")
        self._write_preview(self.preview_path)

    def do_reasoning(self, arg: str) -> None:
        """reasoning: show the model's last explanation."""
        self._say(self.session.state.reasoning or "AI's explanation will appear here after code generation.")

    def do_preview(self, arg: str) -> None:
        """preview [file]: write the last HTML output to a file."""
        self._write_preview(arg.strip() or self.preview_path)

    # -------------------------------------------------------------------------
    # EXPLORER
    # -------------------------------------------------------------------------

    def do_tree(self, arg: str) -> None:
        """tree: show the project structure."""
        if not self.session.state.tree:
            self._say("No files yet. Create or upload a file to start.")
            return
        lines: List[str] = []
        render_tree_structure(self.session.state.tree, lines)
        self._say("\n".join(lines))

    def do_newfile(self, arg: str) -> None:
        """newfile <path>: create an empty file (e.g. css/style.css)."""
        self.session.new_file(arg)

    def do_newfolder(self, arg: str) -> None:
        """newfolder <path>: create a folder (e.g. components/ui)."""
        self.session.new_folder(arg)

    def do_import(self, arg: str) -> None:
        """import <path> [path ...]: upload local files or folders."""
        try:
            count = self.session.import_paths(shlex.split(arg))
        except ValueError as e:
            self._say(f"ERROR: {e}")
            return
        except OSError as e:
            logger.error(f"Error reading files: {e}")
            self._say("An error occurred while reading the files.")
            return
        self._say(f"Imported {count} files.")

    def do_download(self, arg: str) -> None:
        """download [dir]: save the active file locally."""
        dest = arg.strip() or self.export_dir
        try:
            target = self.session.download_active(dest)
        except (StudioError, OSError) as e:
            self._say(str(e))
            return
        self._say(f"Saved {target}")

    # -------------------------------------------------------------------------
    # EDITOR TABS
    # -------------------------------------------------------------------------

    def do_open(self, arg: str) -> None:
        """open <path>: open a file in a tab."""
        path = arg.strip()
        node = find_node(self.session.state.tree, path)
        if node is None or not node.is_file:
            self._say(f"No file at '{path}'.")
            return
        self.session.select_file(node.path)

    def do_close(self, arg: str) -> None:
        """close [path]: close a tab (defaults to the active one)."""
        path = arg.strip() or self.session.state.active_file_path
        if path:
            self.session.close_file(path)

    def do_tabs(self, arg: str) -> None:
        """tabs: list open tabs, the active one marked with '*'."""
        state = self.session.state
        for path in state.open_file_paths:
            marker = "*" if path == state.active_file_path else " "
            self._say(f"{marker} {path}")

    def do_cat(self, arg: str) -> None:
        """cat: show the active file."""
        content = self.session.active_file_content()
        self._say("Select a file to view its content." if content is None else content)

    # -------------------------------------------------------------------------
    # LIFECYCLE
    # -------------------------------------------------------------------------

    def do_quit(self, arg: str) -> bool:
        """quit: leave the shell."""
        return True

    do_EOF = do_quit

    def emptyline(self) -> bool:
        return False

    def _write_preview(self, target: str) -> None:
        try:
            path = self.session.write_preview(target)
        except OSError as e:
            logger.error(f"Failed to write preview: {e}")
            self._say(f"ERROR: {e}")
            return
        self._say(f"Preview: {path}")

    def _say(self, text: str) -> None:
        self.stdout.write(f"{text}\n")
