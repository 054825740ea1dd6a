"""
SEO Configurator

Builds an SEO configuration for a web project from a few business facts and
projects it into the project:
- Meta, Open Graph and Twitter Card tags injected into index.html
- A JSON-LD structured data script
- A robots.txt
- A browser-side meta tag utility (TypeScript)
"""

__version__ = "1.0.0"
__author__ = "SEO Configurator Team"

from .config import GeneratorSettings, DEFAULT_SETTINGS, PrimaryGoal

from .models import (
    SEOConfig,
    SEOAnswers,
    Location,
    Coordinates,
    Contact,
    Social,
    SEOStrategy,
    StructuredData,
)

from .synthesizer import (
    build_config,
    default_config,
    get_structured_data_type,
    resolve_project_name,
    split_csv,
)

from .head_mutator import (
    HeadMutator,
    has_seo_tags,
    inject_seo_tags,
)

from .validation import AnswerValidationError, validate_answers
from .config_store import ConfigStoreError, load_config, save_config
from .index_html import find_index_html, update_index_html
from .robots import build_robots_txt, write_robots_txt
from .meta_tags_util import build_meta_tags_util, write_meta_tags_util
from .configurator import SEOConfigurator, apply_config

__all__ = [
    "GeneratorSettings",
    "DEFAULT_SETTINGS",
    "PrimaryGoal",
    "SEOConfig",
    "SEOAnswers",
    "Location",
    "Coordinates",
    "Contact",
    "Social",
    "SEOStrategy",
    "StructuredData",
    "build_config",
    "default_config",
    "get_structured_data_type",
    "resolve_project_name",
    "split_csv",
    "HeadMutator",
    "has_seo_tags",
    "inject_seo_tags",
    "AnswerValidationError",
    "validate_answers",
    "ConfigStoreError",
    "load_config",
    "save_config",
    "find_index_html",
    "update_index_html",
    "build_robots_txt",
    "write_robots_txt",
    "build_meta_tags_util",
    "write_meta_tags_util",
    "SEOConfigurator",
    "apply_config",
]
