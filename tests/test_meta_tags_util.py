"""Tests for the generated browser meta tag utility."""

import json
import re

from pathlib import Path

from seo_configurator.config import GeneratorSettings
from seo_configurator.meta_tags_util import (
    build_meta_tags_util,
    site_defaults,
    write_meta_tags_util,
)
from seo_configurator.models import SEOConfig, Social


def _embedded_defaults(source: str) -> dict:
    match = re.search(r"export const siteDefaults: MetaTagsConfig = (\{.*?\});\n", source, re.S)
    return json.loads(match.group(1))


class TestSiteDefaults:
    def test_values_from_config(self, sample_config: SEOConfig):
        defaults = site_defaults(sample_config)

        assert defaults["siteName"] == "Acme"
        assert defaults["url"] == "https://acme.io"
        assert defaults["image"] == "https://acme.io/og-image.png"
        assert defaults["author"] == "Acme Inc"
        assert defaults["keywords"] == "scheduling, clinic software"
        assert defaults["twitterUsername"] == "@acmehq"

    def test_no_twitter_handle(self, sample_config: SEOConfig):
        sample_config.social = Social(github="acme")
        assert "twitterUsername" not in site_defaults(sample_config)

    def test_no_config(self):
        assert site_defaults(None) == {}


class TestBuildMetaTagsUtil:
    """Tests for the rendered TypeScript module."""

    def test_exports(self, sample_config: SEOConfig):
        source = build_meta_tags_util(sample_config)

        assert "export interface MetaTagsConfig" in source
        assert "export class MetaTags" in source
        assert "export function updateMetaTags(" in source

    def test_no_shared_instance(self, sample_config: SEOConfig):
        source = build_meta_tags_util(sample_config)

        assert "getInstance" not in source
        assert "new MetaTags(defaults).updateMetaTags(pageConfig)" in source

    def test_embeds_site_defaults(self, sample_config: SEOConfig):
        defaults = _embedded_defaults(build_meta_tags_util(sample_config))
        assert defaults == site_defaults(sample_config)

    def test_quotes_are_escaped(self, sample_config: SEOConfig):
        sample_config.description = 'Say "hello" to {fast} setup'
        defaults = _embedded_defaults(build_meta_tags_util(sample_config))
        assert defaults["description"] == 'Say "hello" to {fast} setup'

    def test_template_expressions_are_kept(self):
        source = build_meta_tags_util()

        assert "`${config.title} | ${config.siteName}`" in source
        assert "meta[${attr}=\"${name}\"]" in source
        assert "__SITE_DEFAULTS__" not in source

    def test_updates_every_tag_family(self):
        source = build_meta_tags_util()

        for name in ("og:title", "og:site_name", "twitter:card", "twitter:creator",
                     "application/ld+json"):
            assert name in source


class TestWriteMetaTagsUtil:
    def test_creates_directories(self, tmp_path: Path, sample_config: SEOConfig):
        path = write_meta_tags_util(tmp_path, sample_config)

        assert path == tmp_path / "client" / "src" / "utils" / "metaTags.ts"
        assert path.read_text(encoding="utf-8") == build_meta_tags_util(sample_config)

    def test_custom_path(self, tmp_path: Path):
        settings = GeneratorSettings(meta_tags_util_path="src/seo.ts")
        path = write_meta_tags_util(tmp_path, settings=settings)
        assert path == tmp_path / "src" / "seo.ts"

    def test_overwrites_existing(self, tmp_path: Path, sample_config: SEOConfig):
        write_meta_tags_util(tmp_path, sample_config)
        sample_config.site_name = "Renamed"
        path = write_meta_tags_util(tmp_path, sample_config)

        assert _embedded_defaults(path.read_text(encoding="utf-8"))["siteName"] == "Renamed"
