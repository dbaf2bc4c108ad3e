from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of user preferences using JSON in the user data
directory. The virtual project tree itself is never persisted.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict

from webstudio4ai.infra.fs import get_default_preview_path, get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
CURRENT_CONFIG_VERSION = "1.0.0"

DEFAULT_MODEL_ID = "gemini-2.5-flash"
DEFAULT_API_KEY_ENV = "GOOGLE_API_KEY"


def get_config_file() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Configuration Models
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class GeneratorSettings:
    """
    Immutable parameters for the code generation service.

    Attributes:
        model_id: Gemini model identifier.
        api_key_env: Environment variable holding the API key.
    """
    model_id: str = DEFAULT_MODEL_ID
    api_key_env: str = DEFAULT_API_KEY_ENV

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "GeneratorSettings":
        return cls(
            model_id=cfg.get("model_id") or DEFAULT_MODEL_ID,
            api_key_env=cfg.get("api_key_env") or DEFAULT_API_KEY_ENV,
        )


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Generation service
        "model_id": DEFAULT_MODEL_ID,
        "api_key_env": DEFAULT_API_KEY_ENV,

        # IO Paths
        "preview_path": get_default_preview_path(),
        "export_dir": os.getcwd(),

        # Diagnostics
        "log_level": "INFO",
        "save_log_file": True,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Load configuration from disk merged over the defaults.

    Returns:
        Dict[str, Any]: The loaded configuration or defaults on failure.
    """
    defaults = get_default_config()
    config_file = get_config_file()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return defaults

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            logger.warning("Corrupted config file. Resetting to defaults.")
            return defaults

        data.pop("version", None)
        defaults.update(data)
        return defaults

    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return defaults


def save_config(config: Dict[str, Any]) -> None:
    """
    Persist configuration to disk.

    Args:
        config: The configuration dictionary to save.
    """
    config_file = get_config_file()
    try:
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        state = dict(config)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.info(f"Configuration saved to {config_file}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
