"""
Pytest fixtures and configuration for SEO Configurator tests.
"""

import pytest
from pathlib import Path

from seo_configurator.models import SEOAnswers, SEOConfig, Social, StructuredData


SAMPLE_HTML = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <title>Acme</title>
  </head>
  <body>
    <div id="root"></div>
  </body>
</html>
"""


@pytest.fixture
def basic_answers() -> SEOAnswers:
    """Answers for a non-local SaaS business."""
    return SEOAnswers(
        business_name="Acme",
        site_url="https://acme.io/",
        business_type="SaaS/Software",
        description="Acme builds scheduling software for clinics.",
        keywords="scheduling, , clinic software,",
        target_audience="Clinic managers",
        unique_value="Setup in five minutes",
        is_local=False,
        primary_goal="leads",
        target_keywords="clinic scheduling, appointment software",
        competitors="Calendly, ,Acuity",
        twitter="acmehq",
    )


@pytest.fixture
def local_answers() -> SEOAnswers:
    """Answers for a local restaurant."""
    return SEOAnswers(
        business_name="Luigi's",
        site_url="https://luigis.example",
        business_type="Restaurant/Food",
        description="Family-run Italian restaurant since 1985.",
        keywords="pizza, pasta",
        target_audience="Locals and tourists",
        unique_value="Wood-fired oven",
        is_local=True,
        city="Portland",
        state="OR",
        phone="555-0100",
        primary_goal="awareness",
    )


@pytest.fixture
def sample_config() -> SEOConfig:
    """Minimal config with a Twitter handle."""
    return SEOConfig(
        site_name="Acme",
        site_url="https://acme.io",
        business_type="SaaS/Software",
        description="Acme builds scheduling software.",
        keywords=["scheduling", "clinic software"],
        business_name="Acme Inc",
        target_audience="Clinic managers",
        unique_value="Fast setup",
        social=Social(twitter="acmehq"),
        structured_data=StructuredData(type="SoftwareApplication"),
    )


@pytest.fixture
def sample_html() -> str:
    return SAMPLE_HTML


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A project with an index.html at its root."""
    (tmp_path / "index.html").write_text(SAMPLE_HTML, encoding="utf-8")
    return tmp_path
