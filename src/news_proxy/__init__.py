"""
News Proxy Service Module.

A single Lambda function that proxies the Gemini generateContent API and a
Supabase project behind one HTTP endpoint, dispatching on the ``action`` field
of the request body:

- handlers: Lambda entry point, response envelope and error mapping
- logic: action dispatch and the per-action adapters
- dal: Gemini and Supabase clients
- models: request and response schemas
"""

__version__ = "1.0.0"
__description__ = "Gemini and Supabase proxy for the news dashboard"

# Re-export commonly used classes for convenience
from news_proxy.models.input import (
    FetchCategoriesRequest,
    FetchTitlesRequest,
    FetchWordsRequest,
    GroupEventsRequest,
)
from news_proxy.models.output import ErrorOutput, TitleRecord, WordRecord
from news_proxy.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "GroupEventsRequest",
    "FetchWordsRequest",
    "FetchTitlesRequest",
    "FetchCategoriesRequest",
    "TitleRecord",
    "WordRecord",
    "ErrorOutput",
    "logger",
    "tracer",
    "metrics",
]
