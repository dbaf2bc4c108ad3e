from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration resolution
(defaults, persistent storage and CLI overrides), project seeding, and then
either a single generation run or the interactive shell.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from webstudio4ai.core.analysis.tree_renderer import render_tree_structure
from webstudio4ai.core.services.generator import CodeGenerator, GeminiCodeGenerator
from webstudio4ai.core.services.session import StudioSession
from webstudio4ai.core.services.validator import validate_config
from webstudio4ai.domain.config import (
    GeneratorSettings,
    get_default_config,
    load_config,
    save_config,
)
from webstudio4ai.domain.errors import GenerationError, PromptValidationError
from webstudio4ai.domain.operations import GenerationResult, operation_to_dict
from webstudio4ai.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from webstudio4ai.interface.cli import args as cli_args
from webstudio4ai.interface.cli.shell import StudioShell

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None, generator: Optional[CodeGenerator] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.
        generator: Optional generation backend. Defaults to Gemini.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve base configuration (Default vs Persistent state)
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap
    log_file = get_default_log_path() if clean_conf["save_log_file"] else None
    configure_logging(LoggingConfig(level=clean_conf["log_level"], console=True, log_file=log_file))

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        save_config(clean_conf)

    # Short-circuit if configuration dump is requested
    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Session assembly and project seeding
    backend = generator or GeminiCodeGenerator(GeneratorSettings.from_config(clean_conf))
    session = StudioSession(backend)

    if args.import_paths:
        try:
            session.import_paths(args.import_paths)
        except OSError as e:
            logger.error(f"Error reading files: {e}")
            print(f"ERROR: {e}", file=sys.stderr)
            return 2

    # 5. Interactive mode
    if args.prompt is None:
        shell = StudioShell(session, clean_conf["preview_path"], clean_conf["export_dir"])
        try:
            shell.cmdloop()
        except KeyboardInterrupt:
            print("\nInterrupted.", file=sys.stderr)
            return 130
        return 0

    # 6. One-shot generation
    try:
        result = session.submit(args.prompt)
    except PromptValidationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except GenerationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    try:
        preview_path = session.write_preview(clean_conf["preview_path"])
    except OSError as e:
        logger.error(f"Failed to write preview: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    # 7. Output rendering phase
    if args.json_output:
        print(json.dumps(_result_to_dict(result, preview_path), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result, preview_path)

    if args.print_tree:
        lines: List[str] = []
        render_tree_structure(session.state.tree, lines)
        print("\n".join(lines))

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None override values for known keys into the base.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in ("model_id", "preview_path", "export_dir", "log_level"):
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _result_to_dict(result: GenerationResult, preview_path: str) -> Dict[str, Any]:
    data = asdict(result)
    data["operations"] = [operation_to_dict(op) for op in result.operations]
    data["preview_path"] = preview_path
    return data


def _print_human_summary(result: GenerationResult, preview_path: str) -> None:
    """Print the reasoning, the applied operations and the preview location."""
    print(result.reasoning)
    if result.operations:
        print("\nOperations:")
        for op in result.operations:
            wire = operation_to_dict(op)
            print(f"  - {wire.get('action', '?')} {wire.get('path', '')}")
    print(f"\nPreview: {preview_path}")


if __name__ == "__main__":
    sys.exit(main())
