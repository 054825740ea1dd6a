"""Tests for answer validation."""

import pytest

from seo_configurator.models import SEOAnswers
from seo_configurator.validation import (
    AnswerValidationError,
    validate_answers,
    validate_business_name,
    validate_city,
    validate_description,
    validate_keywords,
    validate_primary_goal,
    validate_site_url,
)


class TestFieldValidators:
    def test_business_name(self):
        assert validate_business_name("Acme") == "Acme"
        with pytest.raises(AnswerValidationError, match="Business name is required"):
            validate_business_name("   ")

    @pytest.mark.parametrize("url", ["https://acme.io", "http://localhost:3000", "https://acme.io/"])
    def test_valid_urls(self, url):
        assert validate_site_url(url) == url

    @pytest.mark.parametrize("url", ["", "acme.io", "https://", "not a url"])
    def test_invalid_urls(self, url):
        with pytest.raises(AnswerValidationError, match="valid URL"):
            validate_site_url(url)

    def test_description_length(self):
        assert validate_description("Eleven char")
        with pytest.raises(AnswerValidationError):
            validate_description("Ten chars!")

    @pytest.mark.parametrize("value", [" " * 12, "   Too short   ", "\tshort\n"])
    def test_description_length_ignores_padding(self, value):
        with pytest.raises(AnswerValidationError, match="meaningful description"):
            validate_description(value)

    def test_keywords(self):
        assert validate_keywords("a, b")
        with pytest.raises(AnswerValidationError):
            validate_keywords(" , ,")

    def test_city(self):
        with pytest.raises(AnswerValidationError, match="City is required"):
            validate_city("")

    def test_primary_goal(self):
        assert validate_primary_goal("sales") == "sales"
        with pytest.raises(AnswerValidationError, match="Primary goal"):
            validate_primary_goal("fame")


class TestValidateAnswers:
    def test_valid_records(self, basic_answers: SEOAnswers, local_answers: SEOAnswers):
        assert validate_answers(basic_answers) is basic_answers
        assert validate_answers(local_answers) is local_answers

    def test_local_requires_city(self, local_answers: SEOAnswers):
        local_answers.city = None
        with pytest.raises(AnswerValidationError, match="City"):
            validate_answers(local_answers)

    def test_non_local_does_not_require_city(self, basic_answers: SEOAnswers):
        basic_answers.city = None
        validate_answers(basic_answers)

    def test_short_description(self, basic_answers: SEOAnswers):
        basic_answers.description = "Too short"
        with pytest.raises(AnswerValidationError, match="meaningful description"):
            validate_answers(basic_answers)

    def test_whitespace_description(self, basic_answers: SEOAnswers):
        basic_answers.description = " " * 20
        with pytest.raises(AnswerValidationError, match="meaningful description"):
            validate_answers(basic_answers)
