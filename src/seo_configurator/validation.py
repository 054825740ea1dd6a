"""
Validation of setup answers at the collection boundary.

Each validator returns the accepted value or raises AnswerValidationError,
so they can be used both on a full SEOAnswers record and as per-question
value processors in the interactive questionnaire.
"""

from urllib.parse import urlparse

from .config import PRIMARY_GOALS
from .models import SEOAnswers
from .synthesizer import split_csv


class AnswerValidationError(ValueError):
    """Raised when a setup answer is missing or malformed."""
    pass


MIN_DESCRIPTION_LENGTH = 10


def validate_business_name(value: str) -> str:
    if not value or not value.strip():
        raise AnswerValidationError("Business name is required")
    return value


def validate_site_url(value: str) -> str:
    """Require an absolute URL with a scheme and a host."""
    parsed = urlparse((value or "").strip())
    if not parsed.scheme or not parsed.netloc:
        raise AnswerValidationError("Please enter a valid URL")
    return value


def validate_description(value: str) -> str:
    if not value or len(value.strip()) <= MIN_DESCRIPTION_LENGTH:
        raise AnswerValidationError("Please provide a meaningful description")
    return value


def validate_keywords(value: str) -> str:
    if not split_csv(value):
        raise AnswerValidationError("At least one keyword is required")
    return value


def validate_city(value: str) -> str:
    if not value or not value.strip():
        raise AnswerValidationError("City is required for local SEO")
    return value


def validate_primary_goal(value: str) -> str:
    if value not in PRIMARY_GOALS:
        raise AnswerValidationError(
            f"Primary goal must be one of: {', '.join(PRIMARY_GOALS)}"
        )
    return value


def validate_answers(answers: SEOAnswers) -> SEOAnswers:
    """
    Check every required answer before synthesis.

    Raises:
        AnswerValidationError: On the first invalid answer.
    """
    validate_business_name(answers.business_name)
    validate_site_url(answers.site_url)
    validate_description(answers.description)
    validate_keywords(answers.keywords)
    validate_primary_goal(answers.primary_goal)
    if answers.is_local:
        validate_city(answers.city or "")
    return answers
