"""
Collection of setup answers, interactively or from a JSON file.
"""

import json
from pathlib import Path
from typing import Callable, Union

import click

from .config import BUSINESS_TYPES, DEFAULT_COUNTRY, PRIMARY_GOALS
from .models import SEOAnswers
from .validation import (
    AnswerValidationError,
    validate_business_name,
    validate_city,
    validate_description,
    validate_keywords,
    validate_site_url,
)


class AnswersFileError(Exception):
    """Raised when an answers file cannot be read or parsed."""
    pass


DEFAULT_KEYWORDS = "website, business, service"


def _checked(validator: Callable[[str], str]) -> Callable[[str], str]:
    """Adapt a validator into a click value_proc that re-prompts on failure."""
    def value_proc(value: str) -> str:
        try:
            return validator(value)
        except AnswerValidationError as e:
            raise click.BadParameter(str(e))
    return value_proc


def _optional(prompt: Callable, text: str) -> str:
    return prompt(text, default="", show_default=False)


def gather_answers(
    prompt: Callable = click.prompt,
    confirm: Callable = click.confirm,
    echo: Callable = click.echo,
) -> SEOAnswers:
    """
    Ask the setup questions and return the flat answer record.

    Args:
        prompt: click.prompt-compatible callable.
        confirm: click.confirm-compatible callable.
        echo: Callable used for section headings.

    Returns:
        SEOAnswers with every required answer validated.
    """
    echo("\nBasic Information\n")
    business_name = prompt(
        "What is your business/website name?",
        value_proc=_checked(validate_business_name),
    )
    site_url = prompt(
        "What is your website URL?",
        default="https://example.com",
        value_proc=_checked(validate_site_url),
    )
    business_type = prompt(
        "What type of business/website is this?",
        type=click.Choice(BUSINESS_TYPES),
    )
    description = prompt(
        "Describe your business in 1-2 sentences",
        value_proc=_checked(validate_description),
    )
    keywords = prompt(
        "Enter main keywords (comma-separated)",
        default=DEFAULT_KEYWORDS,
        value_proc=_checked(validate_keywords),
    )

    echo("\nTarget Audience & Value\n")
    target_audience = prompt("Who is your target audience?", default="General consumers")
    unique_value = _optional(prompt, "What makes your business unique?")

    echo("\nLocation Information\n")
    is_local = confirm("Do you have a physical location/serve a local area?", default=False)

    local = {}
    if is_local:
        local["street_address"] = _optional(prompt, "Street address")
        local["city"] = prompt("City", value_proc=_checked(validate_city))
        local["state"] = _optional(prompt, "State/Province")
        local["postal_code"] = _optional(prompt, "Postal/ZIP code")
        local["country"] = prompt("Country", default=DEFAULT_COUNTRY)
        local["phone"] = _optional(prompt, "Business phone number (optional)")
        local["email"] = _optional(prompt, "Business email (optional)")
        local["hours"] = _optional(prompt, "Business hours (e.g., Mon-Fri 9-5)")

    echo("\nSEO Strategy\n")
    primary_goal = prompt(
        "What is your primary SEO goal?",
        type=click.Choice(PRIMARY_GOALS),
        default="traffic",
    )
    target_keywords = prompt(
        "List your top target keywords (comma-separated)",
        default=keywords,
    )
    competitors = _optional(prompt, "List main competitors (comma-separated, optional)")

    echo("\nSocial Media (optional)\n")
    social = {
        "twitter": _optional(prompt, "Twitter/X handle (without @)"),
        "facebook": _optional(prompt, "Facebook page URL"),
        "instagram": _optional(prompt, "Instagram handle"),
        "linkedin": _optional(prompt, "LinkedIn page URL"),
        "youtube": _optional(prompt, "YouTube channel URL"),
        "github": _optional(prompt, "GitHub organization/user"),
    }

    author = prompt("Content author/company name", default=business_name)

    return SEOAnswers(
        business_name=business_name,
        site_url=site_url,
        business_type=business_type,
        description=description,
        keywords=keywords,
        target_audience=target_audience,
        unique_value=unique_value,
        is_local=is_local,
        primary_goal=primary_goal,
        target_keywords=target_keywords,
        competitors=competitors,
        author=author,
        **local,
        **social,
    )


def load_answers_file(file_path: Union[str, Path]) -> SEOAnswers:
    """
    Load a camelCase answer record from a JSON file.

    Raises:
        AnswersFileError: If the file is missing, not JSON, not an object, or
            holds a non-boolean isLocal.
    """
    path = Path(file_path)

    if not path.exists():
        raise AnswersFileError(f"File not found: {file_path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except ValueError as e:
        raise AnswersFileError(f"Failed to parse answers file: {e}")

    if not isinstance(data, dict):
        raise AnswersFileError("Answers file must contain a JSON object")

    try:
        return SEOAnswers.from_dict(data)
    except ValueError as e:
        raise AnswersFileError(f"Invalid answers file: {e}")
