"""Family configuration loader.

Reads and writes the persisted ModConfig JSON file. A missing file is
created with the built-in defaults; an unreadable one yields the invalid
sentinel so the mod falls back to pass-through.
"""

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from ..models.config import ModConfig

logger = logging.getLogger(__name__)

JSON_INDENT = 4


def dump_config(config: ModConfig) -> str:
    """Serialize a configuration to its on-disk text."""
    return json.dumps(config.to_dict(), indent=JSON_INDENT, ensure_ascii=False) + "\n"


def save_config(config: ModConfig, path: Union[str, Path]) -> None:
    """
    Write a configuration to disk.

    Args:
        config: The configuration to save. The invalid sentinel is refused.
        path: Destination file.
    """
    if not config.is_valid:
        raise ValueError("Refusing to save an invalid configuration")

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(dump_config(config))


def load_config(path: Union[str, Path]) -> ModConfig:
    """
    Load the configuration file.

    Args:
        path: Configuration file path.

    Returns:
        The loaded ModConfig, the defaults if the file did not exist, or
        ModConfig.invalid() if it could not be read or parsed.
    """
    path = Path(path)

    if not path.exists():
        config = ModConfig()
        try:
            save_config(config, path)
            logger.info("Created default configuration at %s", path)
        except OSError as e:
            logger.warning("Could not write default configuration to %s: %s", path, e)
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("configuration root must be an object")
        return ModConfig.model_validate(data)
    except (OSError, ValueError, ValidationError) as e:
        logger.error("Failed to load configuration %s: %s", path, e)
        return ModConfig.invalid()
