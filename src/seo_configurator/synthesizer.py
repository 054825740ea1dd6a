"""
SEO configuration synthesis.

Turns a flat SEOAnswers record into a normalized SEOConfig, and builds the
minimal default config used when a project has no stored configuration.
Nothing here rejects input: validation happens at the answer boundary
(see validation.py), synthesis only normalizes.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from .config import (
    DEFAULT_COUNTRY,
    DEFAULT_IMAGE,
    DEFAULT_LOCALE,
    DEFAULT_PROJECT_NAME,
    DEFAULT_SETTINGS,
    DEFAULT_SITE_URL,
    DEFAULT_THEME_COLOR,
    FALLBACK_SCHEMA_TYPE,
    GeneratorSettings,
)
from .models import (
    Contact,
    Location,
    SEOAnswers,
    SEOConfig,
    SEOStrategy,
    Social,
    StructuredData,
)

logger = logging.getLogger(__name__)


# schema.org type per business type. None marks entries resolved by locality.
STRUCTURED_DATA_TYPES: dict[str, Optional[str]] = {
    "E-commerce": "OnlineStore",
    "SaaS/Software": "SoftwareApplication",
    "Blog/Content": "Blog",
    "Portfolio": "Person",
    "Corporate/Business": None,
    "Restaurant/Food": "Restaurant",
    "Health/Medical": "MedicalBusiness",
    "Education": "EducationalOrganization",
    "Real Estate": "RealEstateAgent",
    "Other Service": None,
}


def get_structured_data_type(business_type: str, is_local: bool) -> str:
    """
    Infer the schema.org type for a business.

    Args:
        business_type: One of BUSINESS_TYPES, or any free text.
        is_local: Whether the business serves a physical/local area.

    Returns:
        The schema.org type. Unknown business types map to Organization.

    Examples:
        >>> get_structured_data_type("Restaurant/Food", True)
        'Restaurant'
        >>> get_structured_data_type("Corporate/Business", True)
        'LocalBusiness'
        >>> get_structured_data_type("Corporate/Business", False)
        'Organization'
    """
    if business_type not in STRUCTURED_DATA_TYPES:
        return FALLBACK_SCHEMA_TYPE

    schema_type = STRUCTURED_DATA_TYPES[business_type]
    if schema_type is None:
        return "LocalBusiness" if is_local else "Organization"
    return schema_type


def split_csv(value: Optional[str]) -> list[str]:
    """
    Split a comma-separated answer into trimmed, non-empty tokens.

    >>> split_csv("a, ,b,")
    ['a', 'b']
    """
    if not value:
        return []
    return [token.strip() for token in value.split(",") if token.strip()]


def normalize_site_url(url: str) -> str:
    """Strip surrounding whitespace and any trailing slashes from a site URL."""
    return url.strip().rstrip("/")


def _clean(value: Optional[str]) -> Optional[str]:
    """Trim an optional answer, mapping blank answers to None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def _build_location(answers: SEOAnswers) -> Location:
    return Location(
        street_address=_clean(answers.street_address),
        city=_clean(answers.city),
        state=_clean(answers.state),
        postal_code=_clean(answers.postal_code),
        country=_clean(answers.country) or DEFAULT_COUNTRY,
    )


def _build_contact(answers: SEOAnswers) -> Optional[Contact]:
    contact = Contact(
        phone=_clean(answers.phone),
        email=_clean(answers.email),
        hours=_clean(answers.hours),
    )
    if contact.phone or contact.email or contact.hours:
        return contact
    return None


def _build_social(answers: SEOAnswers) -> Optional[Social]:
    twitter = _clean(answers.twitter)
    if twitter:
        twitter = twitter.lstrip("@") or None

    social = Social(
        twitter=twitter,
        facebook=_clean(answers.facebook),
        instagram=_clean(answers.instagram),
        linkedin=_clean(answers.linkedin),
        youtube=_clean(answers.youtube),
        github=_clean(answers.github),
    )
    if any(social.to_dict().values()):
        return social
    return None


def _build_strategy(answers: SEOAnswers, keywords: list[str]) -> Optional[SEOStrategy]:
    primary_goal = _clean(answers.primary_goal)
    # The questionnaire offers the main keywords as the default targets
    target_keywords = split_csv(answers.target_keywords) or list(keywords)
    competitors = split_csv(answers.competitors) or None

    if not primary_goal and not target_keywords and not competitors:
        return None
    return SEOStrategy(
        primary_goal=primary_goal or "traffic",
        target_keywords=target_keywords,
        competitors=competitors,
    )


def build_config(answers: SEOAnswers) -> SEOConfig:
    """
    Synthesize a complete SEOConfig from setup answers.

    Location and contact groups are attached only for local businesses,
    and only groups with at least one populated member are attached.

    Args:
        answers: The flat answer record from the questionnaire.

    Returns:
        A normalized SEOConfig.
    """
    keywords = split_csv(answers.keywords)
    business_name = (answers.business_name or "").strip()

    config = SEOConfig(
        site_name=business_name,
        site_url=normalize_site_url(answers.site_url or ""),
        business_type=answers.business_type,
        description=(answers.description or "").strip(),
        keywords=keywords,
        business_name=business_name,
        target_audience=(answers.target_audience or "").strip(),
        unique_value=(answers.unique_value or "").strip(),
        default_image=DEFAULT_IMAGE,
        theme_color=DEFAULT_THEME_COLOR,
        locale=DEFAULT_LOCALE,
        author=_clean(answers.author),
    )

    if answers.is_local:
        config.is_local = True
        config.location = _build_location(answers)
        config.contact = _build_contact(answers)

    config.social = _build_social(answers)
    config.seo_strategy = _build_strategy(answers, keywords)
    config.structured_data = StructuredData(
        type=get_structured_data_type(answers.business_type, answers.is_local)
    )

    logger.debug(
        f"Built SEO config for {config.site_name!r} "
        f"(type={config.structured_data.type}, local={answers.is_local})"
    )
    return config


def resolve_project_name(
    project_path: Union[str, Path],
    settings: GeneratorSettings = DEFAULT_SETTINGS,
) -> str:
    """
    Determine a project's display name.

    Reads the "name" field of the project manifest. A manifest without a
    name yields DEFAULT_PROJECT_NAME; a missing or unreadable manifest
    falls back to the project directory's name.
    """
    path = Path(project_path)
    manifest_path = path / settings.manifest_filename

    try:
        manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.debug(f"No usable manifest at {manifest_path}: {e}")
        return path.resolve().name

    if isinstance(manifest, dict) and manifest.get("name"):
        return str(manifest["name"])
    return DEFAULT_PROJECT_NAME


def default_config(project_name: str) -> SEOConfig:
    """
    Build the minimal config used when no setup has been run.

    Never consults location, contact, social or strategy data.
    """
    return SEOConfig(
        site_name=project_name,
        site_url=DEFAULT_SITE_URL,
        business_type="Corporate/Business",
        description=f"{project_name} website",
        keywords=[project_name.lower()],
        business_name=project_name,
        target_audience="General audience",
        unique_value="Quality products and services",
        structured_data=StructuredData(type=FALLBACK_SCHEMA_TYPE),
    )
