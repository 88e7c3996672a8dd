"""Configuration file loading."""

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from advisor.models.config import AdvisorConfig, DEFAULT_CONFIG


def load_config(path: Union[str, Path]) -> AdvisorConfig:
    """Load AdvisorConfig from a JSON file.

    Args:
        path: JSON file with any subset of AdvisorConfig fields

    Returns:
        Parsed config, or DEFAULT_CONFIG if the file is missing or invalid
    """
    logger = logging.getLogger("advisor.config")
    config_path = Path(path)

    if not config_path.exists():
        logger.info(f"No config file at {config_path}, using defaults")
        return DEFAULT_CONFIG

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        config = AdvisorConfig(**data)
    except (OSError, json.JSONDecodeError, TypeError, ValidationError) as e:
        logger.error(f"Failed to load config file {config_path}: {e}", exc_info=True)
        return DEFAULT_CONFIG

    logger.info(
        f"Loaded config: minimum_supportable_version={config.minimum_supportable_version}, "
        f"releases_base_path={config.releases_base_path}"
    )
    return config
