from __future__ import annotations

"""
File Operation Domain Models.

Defines the tagged operation variants that a generation response can request
against the virtual tree, plus the parser that turns loosely-typed wire
dictionaries into those variants. Unknown actions are kept as an explicit
variant so the batch applier can skip them without failing.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Union

logger = logging.getLogger(__name__)

ACTION_CREATE = "CREATE"
ACTION_UPDATE = "UPDATE"
ACTION_DELETE = "DELETE"

# -----------------------------------------------------------------------------
# OPERATION VARIANTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CreateFile:
    path: str
    content: str = ""


@dataclass(frozen=True)
class CreateFolder:
    path: str


@dataclass(frozen=True)
class UpdateFile:
    """Update is defined for files only."""
    path: str
    content: str = ""


@dataclass(frozen=True)
class DeleteNode:
    path: str


@dataclass(frozen=True)
class UnknownOperation:
    """
    Placeholder for an action this version does not understand.

    Attributes:
        action: The raw action tag received.
        raw: The original payload, kept for diagnostics.
    """
    action: str
    raw: Dict[str, Any] = field(default_factory=dict)


Operation = Union[CreateFile, CreateFolder, UpdateFile, DeleteNode, UnknownOperation]


@dataclass(frozen=True)
class GenerationResult:
    """
    Parsed response of the code generation service.

    Attributes:
        reasoning: Short explanation of the proposed changes.
        operations: Ordered file operations to fold over the tree.
        html_output: Complete HTML document for the preview pane.
    """
    reasoning: str
    operations: List[Operation] = field(default_factory=list)
    html_output: str = ""

# -----------------------------------------------------------------------------
# WIRE PARSING
# -----------------------------------------------------------------------------

def parse_operation(payload: Mapping[str, Any]) -> Operation:
    """
    Convert a wire dictionary into its operation variant.

    CREATE without a recognizable 'type' defaults to a file, since the response
    schema only makes 'action' and 'path' mandatory.

    Args:
        payload: Dictionary with 'action', 'path' and optional 'type'/'content'.

    Returns:
        Operation: The matching variant, or UnknownOperation.
    """
    action = str(payload.get("action") or "").strip().upper()
    path = str(payload.get("path") or "")
    content = payload.get("content")
    content = content if isinstance(content, str) else ""

    if action == ACTION_CREATE:
        node_type = str(payload.get("type") or "file").strip().lower()
        if node_type == "folder":
            return CreateFolder(path=path)
        return CreateFile(path=path, content=content)

    if action == ACTION_UPDATE:
        return UpdateFile(path=path, content=content)

    if action == ACTION_DELETE:
        return DeleteNode(path=path)

    logger.debug(f"Unrecognized operation action '{action}' for path '{path}'.")
    return UnknownOperation(action=action, raw=dict(payload))


def operation_to_dict(op: Operation) -> Dict[str, Any]:
    """Serialize an operation back to its wire representation."""
    if isinstance(op, CreateFile):
        return {"action": ACTION_CREATE, "path": op.path, "type": "file", "content": op.content}
    if isinstance(op, CreateFolder):
        return {"action": ACTION_CREATE, "path": op.path, "type": "folder"}
    if isinstance(op, UpdateFile):
        return {"action": ACTION_UPDATE, "path": op.path, "content": op.content}
    if isinstance(op, DeleteNode):
        return {"action": ACTION_DELETE, "path": op.path}
    return dict(op.raw) if op.raw else {"action": op.action}
