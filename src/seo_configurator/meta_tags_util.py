"""
Generation of the browser-side meta tag utility.

Writes a TypeScript module into the web project that updates the title,
meta tags, Open Graph and Twitter Card tags and the JSON-LD script of the
current page at runtime. Each call builds its own MetaTags instance from the
defaults passed to it; the module keeps no shared instance.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from .config import DEFAULT_IMAGE, DEFAULT_SETTINGS, GeneratorSettings
from .files import atomic_write_text
from .models import SEOConfig

logger = logging.getLogger(__name__)


DEFAULTS_PLACEHOLDER = "__SITE_DEFAULTS__"

META_TAGS_TEMPLATE = """\
export interface MetaTagsConfig {
  title?: string;
  description?: string;
  keywords?: string;
  author?: string;
  image?: string;
  url?: string;
  siteName?: string;
  type?: string;
  twitterUsername?: string;
}

export const siteDefaults: MetaTagsConfig = __SITE_DEFAULTS__;

export class MetaTags {
  constructor(private readonly defaults: MetaTagsConfig = siteDefaults) {}

  updateMetaTags(pageConfig: MetaTagsConfig): void {
    const config: MetaTagsConfig = { ...this.defaults, ...pageConfig };

    if (config.title) {
      document.title = config.siteName
        ? `${config.title} | ${config.siteName}`
        : config.title;
    }

    this.setMetaTag('description', config.description);
    this.setMetaTag('keywords', config.keywords);
    this.setMetaTag('author', config.author);

    this.updateOpenGraph(config);
    this.updateTwitterCards(config);
    this.updateStructuredData(config);
  }

  private updateOpenGraph(config: MetaTagsConfig): void {
    const title = config.siteName
      ? `${config.title} | ${config.siteName}`
      : config.title;

    this.setMetaTag('og:title', title, 'property');
    this.setMetaTag('og:description', config.description, 'property');
    this.setMetaTag('og:image', config.image, 'property');
    this.setMetaTag('og:url', config.url, 'property');
    this.setMetaTag('og:type', config.type || 'website', 'property');
    this.setMetaTag('og:site_name', config.siteName, 'property');
  }

  private updateTwitterCards(config: MetaTagsConfig): void {
    this.setMetaTag('twitter:card', 'summary_large_image');
    this.setMetaTag('twitter:title', config.title);
    this.setMetaTag('twitter:description', config.description);
    this.setMetaTag('twitter:image', config.image);

    if (config.twitterUsername) {
      this.setMetaTag('twitter:site', config.twitterUsername);
      this.setMetaTag('twitter:creator', config.twitterUsername);
    }
  }

  private updateStructuredData(config: MetaTagsConfig): void {
    const structuredData = {
      '@context': 'https://schema.org',
      '@type': config.type === 'article' ? 'Article' : 'WebSite',
      name: config.siteName || config.title,
      description: config.description,
      url: config.url,
      image: config.image,
      author: {
        '@type': 'Person',
        name: config.author
      }
    };

    let scriptTag = document.querySelector('script[type="application/ld+json"]');
    if (!scriptTag) {
      scriptTag = document.createElement('script');
      scriptTag.setAttribute('type', 'application/ld+json');
      document.head.appendChild(scriptTag);
    }
    scriptTag.textContent = JSON.stringify(structuredData);
  }

  private setMetaTag(name: string, content?: string, attr = 'name'): void {
    if (!content) return;

    let tag = document.querySelector(`meta[${attr}="${name}"]`);
    if (!tag) {
      tag = document.createElement('meta');
      tag.setAttribute(attr, name);
      document.head.appendChild(tag);
    }
    tag.setAttribute('content', content);
  }
}

export function updateMetaTags(
  pageConfig: MetaTagsConfig,
  defaults: MetaTagsConfig = siteDefaults
): void {
  new MetaTags(defaults).updateMetaTags(pageConfig);
}
"""


def site_defaults(config: Optional[SEOConfig]) -> dict[str, Any]:
    """Page-independent values baked into the utility from a config."""
    if config is None:
        return {}

    defaults = {
        "description": config.description,
        "keywords": ", ".join(config.keywords),
        "author": config.author or config.business_name,
        "image": f"{config.site_url}{config.default_image or DEFAULT_IMAGE}",
        "url": config.site_url,
        "siteName": config.site_name,
    }
    if config.twitter_handle:
        defaults["twitterUsername"] = config.twitter_handle
    return defaults


def build_meta_tags_util(config: Optional[SEOConfig] = None) -> str:
    """Render the TypeScript utility, seeded with the config's site defaults."""
    defaults = json.dumps(site_defaults(config), indent=2, ensure_ascii=False)
    return META_TAGS_TEMPLATE.replace(DEFAULTS_PLACEHOLDER, defaults)


def write_meta_tags_util(
    project_path: Union[str, Path],
    config: Optional[SEOConfig] = None,
    settings: GeneratorSettings = DEFAULT_SETTINGS,
) -> Path:
    path = Path(project_path) / settings.meta_tags_util_path
    atomic_write_text(path, build_meta_tags_util(config))
    logger.info(f"Wrote {path}")
    return path
