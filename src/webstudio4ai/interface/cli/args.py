from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed argparse
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the WebStudio4AI CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="webstudio4ai",
        description="Describe web project changes in natural language and let an AI model apply them.",
    )

    # --- Generation ---
    p.add_argument(
        "-p", "--prompt",
        dest="prompt",
        default=None,
        help="Run a single generation with this prompt and exit. Without it an interactive shell starts.",
    )
    p.add_argument(
        "--model",
        dest="model_id",
        default=None,
        help="Gemini model identifier.",
    )

    # --- Project seeding and outputs ---
    p.add_argument(
        "-i", "--import",
        dest="import_paths",
        action="append",
        default=[],
        help="Local file or folder to load into the project (repeatable).",
    )
    p.add_argument(
        "--preview-out",
        dest="preview_path",
        default=None,
        help="Where to write the generated HTML preview.",
    )
    p.add_argument(
        "--export-dir",
        dest="export_dir",
        default=None,
        help="Destination folder for downloaded files.",
    )

    # --- Output Format ---
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Print the resulting project tree.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the generation result as JSON.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration file.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration as the new saved defaults.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset. Unset values are None.
    """
    overrides: Dict[str, Any] = {
        "model_id": args.model_id,
        "preview_path": args.preview_path,
        "export_dir": args.export_dir,
    }
    if args.debug:
        overrides["log_level"] = "DEBUG"
    return overrides
