# -*- coding: utf-8 -*-
"""
Centralized configuration for SEO Configurator.

This module holds the fixed names, candidate paths and tag defaults used
when synthesizing an SEO configuration and projecting it into a project.
"""

from dataclasses import dataclass, field
from typing import Literal


# Primary SEO goals offered during setup
PrimaryGoal = Literal["traffic", "leads", "sales", "awareness"]
PRIMARY_GOALS = ("traffic", "leads", "sales", "awareness")

# Business types offered during setup, in prompt order
BUSINESS_TYPES = (
    "E-commerce",
    "SaaS/Software",
    "Blog/Content",
    "Portfolio",
    "Corporate/Business",
    "Restaurant/Food",
    "Health/Medical",
    "Education",
    "Real Estate",
    "Other Service",
)

SOCIAL_PLATFORMS = ("twitter", "facebook", "instagram", "linkedin", "youtube", "github")

DEFAULT_IMAGE = "/og-image.png"
DEFAULT_THEME_COLOR = "#ffffff"
DEFAULT_LOCALE = "en_US"
DEFAULT_COUNTRY = "United States"
DEFAULT_SITE_URL = "https://example.com"
DEFAULT_PROJECT_NAME = "My Website"
FALLBACK_SCHEMA_TYPE = "Organization"


@dataclass
class GeneratorSettings:
    """
    File-level settings for reading and writing SEO artifacts.

    Attributes:
        config_filename: Project-relative path of the persisted SEO config.
        manifest_filename: Manifest read for the project name on the
            default-config path.
        index_candidates: Ordered project-relative paths searched for the
            HTML document to mutate. The first existing one wins.
        robots_dir: Project-relative directory that receives robots.txt.
        meta_tags_util_path: Project-relative path of the generated browser
            meta tag utility.
        og_title_marker: Substring whose presence marks a document as
            already configured.
    """

    config_filename: str = "seo.config.json"
    manifest_filename: str = "package.json"
    index_candidates: tuple[str, ...] = field(
        default=("index.html", "client/index.html", "client/public/index.html")
    )
    robots_dir: str = "client/public"
    meta_tags_util_path: str = "client/src/utils/metaTags.ts"
    og_title_marker: str = "og:title"


DEFAULT_SETTINGS = GeneratorSettings()
