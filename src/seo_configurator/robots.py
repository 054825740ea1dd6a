"""
robots.txt generation.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .config import DEFAULT_SETTINGS, GeneratorSettings
from .files import atomic_write_text

logger = logging.getLogger(__name__)


ROBOTS_RULES = [
    "# robots.txt",
    "User-agent: *",
    "Allow: /",
    "",
    "# Disallow crawling of API routes",
    "Disallow: /api/",
    "Disallow: /_next/",
    "Disallow: /admin/",
    "",
    "# Allow crawling of static assets",
    "Allow: /images/",
    "Allow: /*.js$",
    "Allow: /*.css$",
    "Allow: /*.png$",
    "Allow: /*.jpg$",
    "Allow: /*.jpeg$",
    "Allow: /*.gif$",
    "Allow: /*.svg$",
    "Allow: /*.webp$",
    "",
    "# Crawl delay",
    "Crawl-delay: 1",
]


def build_robots_txt(domain: Optional[str] = None) -> str:
    """Render robots.txt, pointing at the sitemap when a domain is known."""
    lines = list(ROBOTS_RULES)
    if domain:
        lines.extend(["", "# Sitemap", f"Sitemap: {domain.rstrip('/')}/sitemap.xml"])
    return "\n".join(lines)


def write_robots_txt(
    project_path: Union[str, Path],
    domain: Optional[str] = None,
    settings: GeneratorSettings = DEFAULT_SETTINGS,
) -> Path:
    path = Path(project_path) / settings.robots_dir / "robots.txt"
    atomic_write_text(path, build_robots_txt(domain))
    logger.info(f"Wrote {path}")
    return path
