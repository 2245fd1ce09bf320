"""Loading configuration fragments from disk."""

from __future__ import annotations

from typing import TYPE_CHECKING

import yaml
from pydantic import ValidationError

from mcpbrowse.errors import ConfigLoadError
from mcpbrowse.logging_config import get_logger

from .models import Config

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


def load_config_file(path: Path | None) -> Config:
    """Load a configuration fragment from a YAML (or JSON) file.

    Args:
        path: File to read. ``None`` means no file was given.

    Returns:
        The fragment; only keys present in the file count as set.

    Raises:
        ConfigLoadError: If the file cannot be read, is not valid YAML/JSON,
            is not a mapping, or does not match the configuration schema.

    """
    if path is None:
        return Config()

    try:
        # Read bytes: PyYAML raises ReaderError for undecodable input
        with path.open("rb") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigLoadError(path, exc) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        exc = TypeError(f"expected a mapping at the top level, got {type(data).__name__}")
        raise ConfigLoadError(path, exc)

    try:
        config = Config.model_validate(data)
    except ValidationError as exc:
        raise ConfigLoadError(path, exc) from exc

    logger.info("Loaded configuration file", path=str(path), keys=sorted(config.model_fields_set))
    return config
