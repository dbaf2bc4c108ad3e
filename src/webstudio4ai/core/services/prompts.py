from __future__ import annotations

"""
Generation Prompt Templates.

Holds the system instruction, the structured response schema and the prompt
assembly used when asking the model to modify the project.
"""

from typing import Any, Dict

from webstudio4ai.core.analysis.tree_renderer import collect_file_contents, serialize_tree
from webstudio4ai.domain.vfs_models import Tree

SYSTEM_INSTRUCTION = """You are an expert web developer AI. Your task is to understand a user's prompt and modify a given file system to achieve the desired result.
You must respond with a single, valid JSON object that strictly adheres to the provided schema. Do not include any markdown formatting (e.g., ```json).

The user's project structure and file contents will be provided.

Your JSON output must contain three properties:
1.  'reasoning': A brief, user-friendly explanation of the changes you are making.
2.  'operations': An array of file operations to be performed. Each object in the array must have:
    - 'action': One of 'CREATE', 'UPDATE', or 'DELETE'.
    - 'path': The full, absolute path of the file or folder (e.g., 'src/components/Button.tsx'). Do not use relative paths.
    - 'type': (Required **only** for 'CREATE' actions) Specify 'file' or 'folder'.
    - 'content': (Required for 'CREATE'/'UPDATE' on files) The full source code for the file. This should not be included for 'DELETE' actions or folder creation.
3.  'html_output': The complete HTML content to be displayed in the preview panel. This should be a single HTML string that represents the final output of the project.

Analyze the user's request and the existing files carefully to determine the necessary modifications. Ensure all paths are correct and the content is complete."""

RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "reasoning": {"type": "STRING"},
        "operations": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "action": {"type": "STRING"},
                    "path": {"type": "STRING"},
                    "type": {
                        "type": "STRING",
                        "description": "Must be 'file' or 'folder'. Required for CREATE operations.",
                    },
                    "content": {"type": "STRING"},
                },
                "required": ["action", "path"],
            },
        },
        "html_output": {"type": "STRING"},
    },
    "required": ["reasoning", "operations", "html_output"],
}


def build_prompt(prompt: str, tree: Tree) -> str:
    """
    Assemble the full user turn: request, structure listing and file dump.

    Args:
        prompt: Natural language change request.
        tree: Current project snapshot.

    Returns:
        str: Prompt text sent to the model.
    """
    file_tree = serialize_tree(tree).strip() or "(empty)"
    file_contents = collect_file_contents(tree).strip() or "(no files with content)"

    return (
        f'\nUser Prompt: "{prompt}"\n\n'
        f"Current File System Structure:\n{file_tree}\n\n"
        f"Current File Contents:\n{file_contents}\n\n"
        "Based on the prompt and the current project state, generate the required JSON "
        "output to modify the file system and produce the desired HTML preview.\n"
    )
