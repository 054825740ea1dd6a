"""
Idempotent injection of SEO meta tags into an HTML document head.

The mutator builds a block of description/keyword/robots meta tags, Open
Graph and Twitter Card tags, a canonical link and a theme color, plus a
JSON-LD structured data script, and inserts it once before the first
closing head tag. A document that already carries an Open Graph title is
treated as configured and left untouched.
"""

import json
import logging
import re
import textwrap
from typing import Optional

from .config import (
    DEFAULT_IMAGE,
    DEFAULT_LOCALE,
    DEFAULT_SETTINGS,
    DEFAULT_THEME_COLOR,
    FALLBACK_SCHEMA_TYPE,
)
from .models import SEOConfig

logger = logging.getLogger(__name__)


OG_TITLE_MARKER = DEFAULT_SETTINGS.og_title_marker

CLOSING_HEAD_PATTERN = re.compile(r"</head\s*>", re.IGNORECASE)

INDENT = "    "

PLACEHOLDER_TAGS = """\
    <!-- SEO Meta Tags -->
    <meta name="description" content="Your site description">
    <meta name="keywords" content="your, keywords, here">
    <meta name="author" content="Your Name">
    <meta name="robots" content="index, follow">

    <!-- Open Graph Meta Tags -->
    <meta property="og:title" content="Your Site Title">
    <meta property="og:description" content="Your site description">
    <meta property="og:image" content="/og-image.png">
    <meta property="og:url" content="https://example.com">
    <meta property="og:type" content="website">

    <!-- Twitter Card Meta Tags -->
    <meta name="twitter:card" content="summary_large_image">
    <meta name="twitter:title" content="Your Site Title">
    <meta name="twitter:description" content="Your site description">
    <meta name="twitter:image" content="/og-image.png">"""


def has_seo_tags(html: str, marker: str = OG_TITLE_MARKER) -> bool:
    """Check whether a document already carries injected SEO tags."""
    return marker in html


class HeadMutator:
    """
    Injects SEO tags into one HTML document.

    Construct one instance per mutation with the config to render; with no
    config, a fixed set of placeholder tags is injected instead.
    """

    def __init__(self, config: Optional[SEOConfig] = None, marker: str = OG_TITLE_MARKER):
        self.config = config
        self.marker = marker

    def apply(self, html: str) -> str:
        """
        Return the document with SEO tags inserted before the closing head tag.

        The document is returned unchanged if it already contains the Open
        Graph title marker, or if it has no closing head tag. Inserted lines
        end with CRLF when the document already uses CRLF line endings.
        """
        if has_seo_tags(html, self.marker):
            logger.info("Document already has SEO meta tags, leaving it unchanged")
            return html

        match = CLOSING_HEAD_PATTERN.search(html)
        if match is None:
            logger.info("No closing head tag found, leaving document unchanged")
            return html

        newline = "\r\n" if "\r\n" in html else "\n"
        block = self.render_block().replace("\n", newline)
        insert_at = match.start()
        return f"{html[:insert_at]}{block}{newline}  {html[insert_at:]}"

    def render_block(self) -> str:
        """Render everything that goes before the closing head tag."""
        if self.config is None:
            return PLACEHOLDER_TAGS
        return f"{self.render_meta_tags()}\n{self.render_structured_data()}"

    def render_meta_tags(self) -> str:
        """Render the config-driven meta tag block."""
        config = self.config
        image_url = _image_url(config)
        twitter_handle = config.twitter_handle

        lines = [
            "<!-- SEO Meta Tags -->",
            f'<meta name="description" content="{config.description}">',
            f'<meta name="keywords" content="{", ".join(config.keywords)}">',
            f'<meta name="author" content="{config.author or config.business_name}">',
            '<meta name="robots" content="index, follow">',
            "",
            "<!-- Open Graph Meta Tags -->",
            f'<meta property="og:title" content="{config.site_name}">',
            f'<meta property="og:description" content="{config.description}">',
            f'<meta property="og:image" content="{image_url}">',
            f'<meta property="og:url" content="{config.site_url}">',
            '<meta property="og:type" content="website">',
            f'<meta property="og:site_name" content="{config.site_name}">',
            f'<meta property="og:locale" content="{config.locale or DEFAULT_LOCALE}">',
            "",
            "<!-- Twitter Card Meta Tags -->",
            '<meta name="twitter:card" content="summary_large_image">',
            f'<meta name="twitter:title" content="{config.site_name}">',
            f'<meta name="twitter:description" content="{config.description}">',
            f'<meta name="twitter:image" content="{image_url}">',
        ]
        if twitter_handle:
            lines.append(f'<meta name="twitter:site" content="{twitter_handle}">')
            lines.append(f'<meta name="twitter:creator" content="{twitter_handle}">')

        lines.extend([
            "",
            "<!-- Additional SEO Meta Tags -->",
            f'<link rel="canonical" href="{config.site_url}">',
            f'<meta name="theme-color" content="{config.theme_color or DEFAULT_THEME_COLOR}">',
        ])

        return "\n".join(f"{INDENT}{line}" if line else "" for line in lines)

    def render_structured_data(self) -> str:
        """Render the JSON-LD script describing the business."""
        config = self.config
        schema_type = config.structured_data.type if config.structured_data else FALLBACK_SCHEMA_TYPE

        structured_data = {
            "@context": "https://schema.org",
            "@type": schema_type,
            "name": config.business_name,
            "url": config.site_url,
            "description": config.description,
            "logo": _image_url(config),
        }
        payload = json.dumps(structured_data, indent=2, ensure_ascii=False)

        return "\n".join([
            "",
            f"{INDENT}<!-- Structured Data -->",
            f'{INDENT}<script type="application/ld+json">',
            textwrap.indent(payload, INDENT),
            f"{INDENT}</script>",
        ])


def _image_url(config: SEOConfig) -> str:
    return f"{config.site_url}{config.default_image or DEFAULT_IMAGE}"


def inject_seo_tags(html: str, config: Optional[SEOConfig] = None) -> str:
    """
    Inject SEO tags into an HTML document, at most once.

    Args:
        html: Full HTML document text.
        config: Config to render. None injects placeholder tags.

    Returns:
        The mutated document, or the input unchanged when it is already
        configured or has no closing head tag.
    """
    return HeadMutator(config).apply(html)
