"""
Data Access Layer (DAL) for the news proxy.

This module provides the data access layer interfaces and factory functions
for the query backend.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class DalHandler(Protocol):
    """Protocol defining the data access layer interface."""

    def fetch_entities(self, category_prefix: Optional[str] = None) -> List[Dict[str, Any]]:
        """Fetch entity frequency rows ordered by frequency descending."""
        ...

    def search_article_titles(self, word: str = '') -> List[Dict[str, Any]]:
        """Fetch article rows whose title contains a substring."""
        ...


class BaseDalHandler(ABC):
    """Abstract base class for data access layer implementations."""

    @abstractmethod
    def fetch_entities(self, category_prefix: Optional[str] = None) -> List[Dict[str, Any]]:
        """Fetch entity frequency rows ordered by frequency descending."""
        pass

    @abstractmethod
    def search_article_titles(self, word: str = '') -> List[Dict[str, Any]]:
        """Fetch article rows whose title contains a substring."""
        pass


def get_dal_handler(url: Optional[str], key: Optional[str]) -> DalHandler:
    """
    Factory function to get the query backend handler.

    Args:
        url: Supabase project URL
        key: Supabase anon key

    Returns:
        DAL handler instance

    Raises:
        ConfigurationError: If either credential is missing
    """
    # Import here to avoid circular imports
    from news_proxy.dal.supabase_handler import SupabaseHandler
    from news_proxy.handlers.utils.errors import ConfigurationError

    if not url or not key:
        raise ConfigurationError('Supabase credentials not configured')

    return SupabaseHandler.from_credentials(url, key)


__all__ = [
    'DalHandler',
    'BaseDalHandler',
    'get_dal_handler'
]
