"""
Service Models Package

This package contains the Pydantic models used throughout the service:
one request model per action and the response records.
"""

from .input import (
    ArticleRef,
    FetchCategoriesRequest,
    FetchTitlesRequest,
    FetchWordsRequest,
    GroupEventsRequest,
    ProxyRequest,
)
from .output import ErrorOutput, TitleRecord, WordRecord

__all__ = [
    # Input models
    "ArticleRef",
    "GroupEventsRequest",
    "FetchWordsRequest",
    "FetchTitlesRequest",
    "FetchCategoriesRequest",
    "ProxyRequest",

    # Output models
    "WordRecord",
    "TitleRecord",
    "ErrorOutput",
]
