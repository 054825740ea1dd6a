"""
Locating and updating a project's HTML entry document.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .config import DEFAULT_SETTINGS, GeneratorSettings
from .files import atomic_write_text, read_text_exact
from .head_mutator import HeadMutator
from .models import SEOConfig

logger = logging.getLogger(__name__)


def find_index_html(
    project_path: Union[str, Path],
    settings: GeneratorSettings = DEFAULT_SETTINGS,
) -> Optional[Path]:
    """Return the first existing candidate document, or None."""
    root = Path(project_path)
    for candidate in settings.index_candidates:
        path = root / candidate
        if path.is_file():
            return path
    return None


def update_index_html(
    project_path: Union[str, Path],
    config: Optional[SEOConfig] = None,
    settings: GeneratorSettings = DEFAULT_SETTINGS,
) -> Optional[Path]:
    """
    Inject SEO tags into the project's HTML document.

    Args:
        project_path: Project root directory.
        config: Config to render. None injects placeholder tags.
        settings: File-level settings.

    Returns:
        Path of the rewritten document, or None when no document was found
        or the document needed no change.
    """
    path = find_index_html(project_path, settings)
    if path is None:
        logger.info(f"No HTML document found under {project_path}")
        return None

    content = read_text_exact(path)
    updated = HeadMutator(config, marker=settings.og_title_marker).apply(content)

    if updated == content:
        logger.debug(f"{path} unchanged")
        return None

    atomic_write_text(path, updated)
    logger.info(f"Injected SEO tags into {path}")
    return path
