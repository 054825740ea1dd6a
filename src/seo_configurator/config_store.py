"""
Persistence of the SEO configuration as seo.config.json.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from .config import DEFAULT_SETTINGS, GeneratorSettings
from .files import atomic_write_text
from .models import SEOConfig

logger = logging.getLogger(__name__)


class ConfigStoreError(Exception):
    """Raised when a stored SEO configuration exists but cannot be read."""
    pass


def config_path(
    project_path: Union[str, Path],
    settings: GeneratorSettings = DEFAULT_SETTINGS,
) -> Path:
    return Path(project_path) / settings.config_filename


def load_config(
    project_path: Union[str, Path],
    settings: GeneratorSettings = DEFAULT_SETTINGS,
) -> Optional[SEOConfig]:
    """
    Load the stored SEO configuration of a project.

    Args:
        project_path: Project root directory.
        settings: File-level settings.

    Returns:
        The stored SEOConfig, or None if the project has none.

    Raises:
        ConfigStoreError: If the file exists but is not a valid config.
    """
    path = config_path(project_path, settings)

    if not path.exists():
        logger.debug(f"No stored SEO config at {path}")
        return None

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigStoreError(f"Failed to read {path.name}: {e}")

    if not isinstance(data, dict):
        raise ConfigStoreError(f"{path.name} must contain a JSON object")

    try:
        return SEOConfig.from_dict(data)
    except (KeyError, TypeError) as e:
        raise ConfigStoreError(f"{path.name} is missing required field {e}")


def save_config(
    project_path: Union[str, Path],
    config: SEOConfig,
    settings: GeneratorSettings = DEFAULT_SETTINGS,
) -> Path:
    """Write the configuration as indented JSON and return its path."""
    path = config_path(project_path, settings)
    atomic_write_text(path, json.dumps(config.to_dict(), indent=2, ensure_ascii=False))
    logger.info(f"Saved SEO config to {path}")
    return path
