from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path resolution and the local I/O glue used by the
studio: reading user-selected files as text for import, writing exported
files, and persisting the HTML preview document.
"""

import logging
import os
from typing import Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "WebStudio4AI"
UNIX_APP_DIR_NAME = ".webstudio4ai"
PREVIEW_SUBDIR = "preview"
PREVIEW_FILE_NAME = "index.html"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/WebStudio4AI
    - Linux/Mac: ~/.webstudio4ai

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    # Windows specific resolution
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    # Idempotent directory creation
    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def get_default_preview_path() -> str:
    """Default location of the rendered preview document."""
    return os.path.join(get_user_data_dir(), PREVIEW_SUBDIR, PREVIEW_FILE_NAME)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# IMPORT API
# -----------------------------------------------------------------------------

def collect_import_entries(paths: Iterable[str]) -> List[Tuple[str, str]]:
    """
    Read local files and folders as (virtual_path, text) pairs.

    A single file maps to its base name. A folder maps every file below it to
    a path relative to the folder's parent, so the folder itself becomes the
    root entry. Content is decoded as UTF-8; undecodable bytes are replaced.

    Args:
        paths: Local file or directory paths.

    Returns:
        List[Tuple[str, str]]: Sorted import entries.

    Raises:
        FileNotFoundError: If a path does not exist.
    """
    entries: List[Tuple[str, str]] = []

    for raw in paths:
        local = os.path.abspath(raw)
        if os.path.isfile(local):
            entries.append((os.path.basename(local), read_text(local)))
            continue
        if not os.path.isdir(local):
            raise FileNotFoundError(f"Import path does not exist: {raw}")

        base = os.path.dirname(local.rstrip(os.sep)) or local
        for root, dirs, files in os.walk(local):
            dirs.sort()
            for file_name in sorted(files):
                full = os.path.join(root, file_name)
                rel = os.path.relpath(full, base).replace(os.sep, "/")
                entries.append((rel, read_text(full)))

    logger.debug(f"Collected {len(entries)} import entries.")
    return entries


def read_text(file_path: str) -> str:
    """Read a file as text, replacing undecodable bytes."""
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()

# -----------------------------------------------------------------------------
# OUTPUT API
# -----------------------------------------------------------------------------

def write_text(file_path: str, content: str) -> str:
    """
    Write text to file_path, creating parent folders as needed.

    Returns:
        str: The absolute path written.

    Raises:
        OSError: If the destination is not writable.
    """
    target = os.path.abspath(file_path)
    parent = os.path.dirname(target)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(target, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    return target
