"""
Orchestration of SEO setup for a project.

Decides between reusing a stored configuration, falling back to the
default configuration, or running interactive setup, and projects the
resulting configuration into the project's artifacts.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from .config import DEFAULT_SETTINGS, GeneratorSettings
from .config_store import ConfigStoreError, load_config, save_config
from .index_html import update_index_html
from .meta_tags_util import write_meta_tags_util
from .models import SEOAnswers, SEOConfig
from .robots import write_robots_txt
from .synthesizer import build_config, default_config, resolve_project_name
from .validation import validate_answers

logger = logging.getLogger(__name__)


@dataclass
class ApplyResult:
    """Files touched when projecting a configuration into a project."""
    index_html: Optional[Path]
    robots_txt: Path
    meta_tags_util: Path


class SEOConfigurator:
    """Resolves the SEO configuration of one project."""

    def __init__(self, settings: GeneratorSettings = DEFAULT_SETTINGS):
        self.settings = settings

    def configure(self, project_path: Union[str, Path]) -> SEOConfig:
        """
        Return the stored config, or the default config when none exists.

        Never prompts and never writes.
        """
        existing = load_config(project_path, self.settings)
        if existing is not None:
            logger.info(f"Using existing SEO configuration from {self.settings.config_filename}")
            return existing

        logger.info("No SEO configuration found, using defaults")
        return self.default(project_path)

    def default(self, project_path: Union[str, Path]) -> SEOConfig:
        """Build the default config for a project, ignoring any stored one."""
        return default_config(resolve_project_name(project_path, self.settings))

    def load_reusable(self, project_path: Union[str, Path]) -> Optional[SEOConfig]:
        """
        Return the stored config if it can be reused.

        A stored config that cannot be parsed is reported and treated as
        absent, so setup can run again and overwrite it.
        """
        try:
            return load_config(project_path, self.settings)
        except ConfigStoreError as e:
            logger.warning(f"Ignoring unreadable SEO configuration: {e}")
            return None

    def build_and_save(self, project_path: Union[str, Path], answers: SEOAnswers) -> SEOConfig:
        """Validate answers, synthesize the config and persist it."""
        validate_answers(answers)
        config = build_config(answers)
        save_config(project_path, config, self.settings)
        return config

    def interactive_configure(
        self,
        project_path: Union[str, Path],
        collect: Callable[[], SEOAnswers],
        confirm_reuse: Callable[[], bool],
    ) -> SEOConfig:
        """
        Run setup, offering to reuse an existing configuration first.

        Args:
            project_path: Project root directory.
            collect: Returns a fresh answer record.
            confirm_reuse: Asked only when a readable stored config exists;
                True keeps it. An unreadable one is replaced.
        """
        existing = self.load_reusable(project_path)
        if existing is not None and confirm_reuse():
            return existing

        return self.build_and_save(project_path, collect())


def apply_config(
    project_path: Union[str, Path],
    config: Optional[SEOConfig],
    settings: GeneratorSettings = DEFAULT_SETTINGS,
) -> ApplyResult:
    """
    Project a configuration into the project's artifacts.

    Injects head tags into the HTML document, writes robots.txt and writes
    the browser meta tag utility. A None config injects placeholder tags,
    writes robots.txt without a sitemap and leaves the utility unseeded.
    """
    index_path = update_index_html(project_path, config, settings)
    robots_path = write_robots_txt(project_path, config.site_url if config else None, settings)
    util_path = write_meta_tags_util(project_path, config, settings)
    return ApplyResult(index_html=index_path, robots_txt=robots_path, meta_tags_util=util_path)
