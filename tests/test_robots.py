"""Tests for robots.txt generation."""

from pathlib import Path

from seo_configurator.robots import build_robots_txt, write_robots_txt


class TestBuildRobotsTxt:
    def test_rules_without_domain(self):
        content = build_robots_txt()

        assert content.startswith("# robots.txt\nUser-agent: *\nAllow: /")
        assert "Disallow: /api/" in content
        assert "Crawl-delay: 1" in content
        assert "Sitemap" not in content

    def test_sitemap_with_domain(self):
        content = build_robots_txt("https://acme.io")
        assert content.endswith("# Sitemap\nSitemap: https://acme.io/sitemap.xml")

    def test_trailing_slash_in_domain(self):
        assert "Sitemap: https://acme.io/sitemap.xml" in build_robots_txt("https://acme.io/")


class TestWriteRobotsTxt:
    def test_creates_directories(self, tmp_path: Path):
        path = write_robots_txt(tmp_path, "https://acme.io")

        assert path == tmp_path / "client" / "public" / "robots.txt"
        assert path.read_text(encoding="utf-8") == build_robots_txt("https://acme.io")

    def test_overwrites_existing(self, tmp_path: Path):
        write_robots_txt(tmp_path, "https://old.example")
        path = write_robots_txt(tmp_path)
        assert "old.example" not in path.read_text(encoding="utf-8")
