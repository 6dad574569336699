"""
Unit tests for Pydantic models.

This module tests validation and serialization of the request models, the
response records and the environment configuration.
"""

import pytest
from pydantic import BaseModel, ValidationError

from news_proxy.handlers.models.env_vars import ProxyEnvVars, get_proxy_config
from news_proxy.models.input import ArticleRef, FetchCategoriesRequest, GroupEventsRequest
from news_proxy.models.output import ErrorOutput, TitleRecord, WordRecord


class TestGroupEventsRequest:
    """Test cases for GroupEventsRequest model."""

    def test_numeric_article_ids_kept(self):
        request = GroupEventsRequest(articles=[{"id": 7, "title": "Numeric id"}])

        assert request.articles[0].id == 7

    def test_article_without_title(self):
        """Test a missing or null title is passed through to the prompt."""
        assert ArticleRef(id="a1").title is None
        assert ArticleRef(id="a1", title=None).title is None

    def test_float_article_id_kept(self):
        assert ArticleRef(id=1.5, title="t").id == 1.5

    def test_article_without_id(self):
        with pytest.raises(ValidationError):
            ArticleRef(title="t")

    def test_empty_article_list_allowed(self):
        assert GroupEventsRequest(articles=[]).articles == []

    def test_action_literal(self):
        with pytest.raises(ValidationError):
            GroupEventsRequest(action="supabase-fetch-words", articles=[])

    def test_categories_request_has_no_params(self):
        assert FetchCategoriesRequest().model_dump() == {"action": "supabase-fetch-categories"}


class TestOutputModels:
    """Test cases for response records."""

    def test_title_record_aliases(self):
        record = TitleRecord(
            id="article_Hola_0",
            title="Hola",
            domain="x.es",
            publish_date="2024-01-01T00:00:00.000Z",
            url="http://x.es",
        )

        assert list(record.model_dump(by_alias=True)) == [
            "id", "title", "domain", "publishDate", "relevanceScore", "mentions", "url", "excerpt",
        ]
        assert record.relevance_score == 0
        assert record.mentions == 0
        assert record.excerpt == ""

    def test_title_record_accepts_aliases(self):
        record = TitleRecord(
            id="i", title="t", domain="d", publishDate="2024-01-01", url="http://d",
        )
        assert record.publish_date == "2024-01-01"

    def test_word_record_float_frequency(self):
        assert WordRecord(text="a", category="b", frequency=1.5).frequency == 1.5

    def test_error_output(self):
        assert ErrorOutput(error="boom").model_dump() == {"error": "boom"}


class TestProxyEnvVars:
    """Test cases for the environment configuration model."""

    def test_defaults(self):
        config = ProxyEnvVars()

        assert config.GEMINI_API_KEY is None
        assert config.SUPABASE_URL is None
        assert config.SUPABASE_ANON_KEY is None
        assert config.GEMINI_DEFAULT_MODEL == "gemini-2.0-flash-exp"
        assert config.GEMINI_TIMEOUT_SECONDS == 30
        assert config.client_error_status_codes is False

    def test_parsed_from_environment_mapping(self):
        config = ProxyEnvVars.model_validate({
            "GEMINI_API_KEY": "k",
            "GEMINI_TIMEOUT_SECONDS": "45",
            "CLIENT_ERROR_STATUS_CODES": "true",
            "UNRELATED_VARIABLE": "ignored",
        })

        assert config.GEMINI_API_KEY == "k"
        assert config.GEMINI_TIMEOUT_SECONDS == 45
        assert config.client_error_status_codes is True

    def test_invalid_flag(self):
        with pytest.raises(ValidationError):
            ProxyEnvVars(CLIENT_ERROR_STATUS_CODES="yes")

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            ProxyEnvVars(LOG_LEVEL="LOUD")

    def test_is_pydantic_model(self):
        assert issubclass(ProxyEnvVars, BaseModel)

    def test_loaded_from_environment(self):
        config = get_proxy_config()

        assert isinstance(config, ProxyEnvVars)
        assert config.POWERTOOLS_SERVICE_NAME == "test-news-proxy"
        assert config.LOG_LEVEL == "DEBUG"
