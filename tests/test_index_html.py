"""Tests for locating and updating the project HTML document."""

from pathlib import Path

from seo_configurator.config import GeneratorSettings
from seo_configurator.index_html import find_index_html, update_index_html
from seo_configurator.models import SEOConfig


class TestFindIndexHtml:
    def test_none_when_missing(self, tmp_path: Path):
        assert find_index_html(tmp_path) is None

    def test_candidate_order(self, tmp_path: Path):
        nested = tmp_path / "client" / "public"
        nested.mkdir(parents=True)
        (nested / "index.html").write_text("<html></html>")
        assert find_index_html(tmp_path) == nested / "index.html"

        (tmp_path / "client" / "index.html").write_text("<html></html>")
        assert find_index_html(tmp_path) == tmp_path / "client" / "index.html"

        (tmp_path / "index.html").write_text("<html></html>")
        assert find_index_html(tmp_path) == tmp_path / "index.html"

    def test_custom_candidates(self, tmp_path: Path):
        (tmp_path / "public").mkdir()
        (tmp_path / "public" / "home.html").write_text("<html></html>")
        settings = GeneratorSettings(index_candidates=("public/home.html",))
        assert find_index_html(tmp_path, settings) == tmp_path / "public" / "home.html"


class TestUpdateIndexHtml:
    def test_writes_tags(self, project_dir: Path, sample_config: SEOConfig):
        path = update_index_html(project_dir, sample_config)

        assert path == project_dir / "index.html"
        content = path.read_text(encoding="utf-8")
        assert 'property="og:title" content="Acme"' in content
        assert "application/ld+json" in content

    def test_second_run_is_noop(self, project_dir: Path, sample_config: SEOConfig):
        update_index_html(project_dir, sample_config)
        first = (project_dir / "index.html").read_text(encoding="utf-8")

        assert update_index_html(project_dir, sample_config) is None
        assert (project_dir / "index.html").read_text(encoding="utf-8") == first

    def test_placeholder_tags(self, project_dir: Path):
        path = update_index_html(project_dir)
        assert "Your Site Title" in path.read_text(encoding="utf-8")

    def test_no_document_is_noop(self, tmp_path: Path, sample_config: SEOConfig):
        assert update_index_html(tmp_path, sample_config) is None
        assert list(tmp_path.iterdir()) == []

    def test_no_closing_head_is_noop(self, tmp_path: Path, sample_config: SEOConfig):
        (tmp_path / "index.html").write_text("<html><body></body></html>")
        assert update_index_html(tmp_path, sample_config) is None
        assert (tmp_path / "index.html").read_text() == "<html><body></body></html>"
        assert [p.name for p in tmp_path.iterdir()] == ["index.html"]

    def test_preserves_crlf_line_endings(self, tmp_path: Path, sample_config: SEOConfig):
        original = b"<html>\r\n<head>\r\n</head>\r\n<body></body>\r\n</html>\r\n"
        (tmp_path / "index.html").write_bytes(original)

        update_index_html(tmp_path, sample_config)
        written = (tmp_path / "index.html").read_bytes()

        assert written.startswith(b"<html>\r\n<head>\r\n")
        assert written.endswith(b"</head>\r\n<body></body>\r\n</html>\r\n")
        assert b"\n" not in written.replace(b"\r\n", b"")
