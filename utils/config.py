"""Loading of the JSON configuration file."""

import logging
from pathlib import Path

from pydantic import ValidationError

from dtos import AppConfig
from utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def load_config(path: str | Path) -> AppConfig:
    """Read and validate the configuration file.

    All required keys are checked here, once, so a broken configuration stops
    the run before any request is sent to Fakturoid.
    """
    config_path = Path(path)
    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {config_path}: {e}") from e

    try:
        config = AppConfig.model_validate_json(raw)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigurationError(f"Invalid config file {config_path}: {problems}") from e

    logger.debug(f"Configuration loaded from {config_path}")
    return config
