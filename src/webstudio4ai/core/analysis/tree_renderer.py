from __future__ import annotations

"""
Tree Renderer.

Converts the virtual tree into text views: an ASCII diagram for terminal
display, the compact indented listing sent to the generation model, and the
concatenated file dump that accompanies it.
"""

from typing import List

from webstudio4ai.domain.vfs_models import Tree

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_structure(tree: Tree, lines: List[str], prefix: str = "") -> None:
    """
    Recursively transform the tree into a list of strings.

    Uses standard ASCII connectors (├──, └──) and manages indentation levels
    for nested folders. Folders are suffixed with '/'.

    Args:
        tree: Current sibling sequence to process.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
    """
    total = len(tree)

    for i, node in enumerate(tree):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        if node.is_folder:
            lines.append(f"{prefix}{connector}{node.name}/")
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_tree_structure(node.children or (), lines, prefix=new_prefix)
            continue

        lines.append(f"{prefix}{connector}{node.name}")


def serialize_tree(tree: Tree, indent: str = "") -> str:
    """
    Produce the indented structure listing used in generation prompts.

    One line per node, two spaces per depth level, folders suffixed with '/'.
    """
    result = ""
    for node in tree:
        result += f"{indent}{node.name}{'/' if node.is_folder else ''}\n"
        if node.is_folder and node.children:
            result += serialize_tree(node.children, indent + "  ")
    return result


def collect_file_contents(tree: Tree) -> str:
    """Concatenate every file under a '--- FILE: <path> ---' header, depth first."""
    result = ""
    for node in tree:
        if node.is_file:
            result += f"\n--- FILE: {node.path} ---\n{node.content or ''}\n"
        if node.is_folder and node.children:
            result += collect_file_contents(node.children)
    return result
