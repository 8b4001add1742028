"""
Settings

Loads SortOptions from environment variables or a JSON file.
Supports loading from a .env file using python-dotenv.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from .errors import ConfigError
from .models.config import SortOptions

logger = logging.getLogger(__name__)

ENV_PREFIX = "FUZZYRANK_"


def options_from_env(
    prefix: str = ENV_PREFIX,
    env_file: Optional[Union[str, Path]] = None,
) -> SortOptions:
    """
    Load sort options from environment variables.

    Each field maps to PREFIX + FIELD_NAME in upper case, e.g.
    FUZZYRANK_ADJACENCY_BONUS. Unset or empty variables keep their defaults.
    Variables already set in the environment win over the .env file.
    """
    env_path = Path(env_file) if env_file is not None else Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=False)
    elif env_file is not None:
        raise ConfigError(f"Env file not found: {env_path}")

    values = {}
    for field in SortOptions.model_fields:
        key = f"{prefix}{field.upper()}"
        raw = os.getenv(key, "").strip()
        if not raw:
            continue
        try:
            values[field] = float(raw)
        except ValueError as e:
            raise ConfigError(f"{key} must be a number, got {raw!r}") from e

    if values:
        logger.debug("[settings] options from env: %s", values)
    return SortOptions.model_validate(values)


def load_options(path: Union[str, Path]) -> SortOptions:
    """Load sort options from a JSON file (flat fields or bonuses/penalties sections)."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a JSON object: {path}")
    try:
        return SortOptions.from_dict(data)
    except ValueError as e:
        raise ConfigError(f"Invalid sort options in {path}: {e}") from e
