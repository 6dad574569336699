"""
Pytest configuration and shared fixtures for the news proxy.

This module provides common test fixtures and configuration used across
unit and end-to-end tests.
"""

import json
import os
from typing import Any, Dict, Optional
from unittest.mock import Mock

import pytest

from news_proxy.handlers.models.env_vars import ProxyEnvVars


# Test environment configuration
@pytest.fixture(scope="session", autouse=True)
def test_environment():
    """Set up test environment variables."""
    os.environ.update({
        "AWS_DEFAULT_REGION": "us-east-1",
        "POWERTOOLS_SERVICE_NAME": "test-news-proxy",
        "POWERTOOLS_METRICS_NAMESPACE": "TestNewsProxy",
        "LOG_LEVEL": "DEBUG",
        "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
    })


@pytest.fixture
def proxy_config() -> ProxyEnvVars:
    """Configuration with fake credentials for every collaborator."""
    return ProxyEnvVars(
        GEMINI_API_KEY="test-gemini-key",
        SUPABASE_URL="https://test-project.supabase.co",
        SUPABASE_ANON_KEY="test-anon-key",
    )


@pytest.fixture
def empty_config() -> ProxyEnvVars:
    """Configuration without any credential."""
    return ProxyEnvVars()


@pytest.fixture
def make_http_event():
    """Build an API Gateway HTTP API (v2) event."""

    def _make(body: Any = None, method: str = "POST", raw_body: Optional[str] = None) -> Dict[str, Any]:
        if raw_body is None and body is not None:
            raw_body = json.dumps(body)
        return {
            "version": "2.0",
            "routeKey": "$default",
            "rawPath": "/",
            "rawQueryString": "",
            "headers": {
                "content-type": "application/json",
                "user-agent": "test-agent/1.0",
            },
            "requestContext": {
                "accountId": "123456789012",
                "apiId": "testapi123",
                "http": {
                    "method": method,
                    "path": "/",
                    "protocol": "HTTP/1.1",
                    "sourceIp": "127.0.0.1",
                    "userAgent": "test-agent/1.0",
                },
                "requestId": "test-request-id-123",
                "stage": "$default",
                "timeEpoch": 1704110400000,
            },
            "body": raw_body,
            "isBase64Encoded": False,
        }

    return _make


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-news-proxy"
    context.function_version = "$LATEST"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-news-proxy"
    context.memory_limit_in_mb = 512
    context.aws_request_id = "test-lambda-request-id"
    context.log_group_name = "/aws/lambda/test-news-proxy"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    context.get_remaining_time_in_millis.return_value = 30000
    return context


@pytest.fixture
def fake_dal():
    """Data access layer double returning canned Supabase rows."""
    dal = Mock()
    dal.fetch_entities.return_value = [
        {"entity": "Real Madrid", "category": "Equipo", "frequency": 42},
        {"entity": "Madrid", "category": "Ciudad", "frequency": 17},
        {"entity": "Pedro Sánchez", "category": "Persona", "frequency": 9},
    ]
    dal.search_article_titles.return_value = [
        {"title": "Real Madrid gana la liga", "domain": "elpais.com", "published_date": "2024-05-12T10:00:00+00:00"},
        {"title": "El Madrid celebra en Cibeles", "domain": "marca.com", "published_date": "2024-05-11T21:30:00+00:00"},
    ]
    return dal


@pytest.fixture
def sample_articles():
    return [
        {"id": "a1", "title": "X wins award"},
        {"id": "a2", "title": "X wins award"},
    ]


# Integration test fixtures
@pytest.fixture
def integration_client():
    """HTTP client for end-to-end testing against a deployed endpoint."""
    import httpx

    base_url = os.environ.get("API_BASE_URL")
    if not base_url:
        pytest.skip("API_BASE_URL is not set")

    with httpx.Client(base_url=base_url, timeout=30.0) as client:
        yield client


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "e2e" in str(item.fspath):
            item.add_marker(pytest.mark.e2e)
