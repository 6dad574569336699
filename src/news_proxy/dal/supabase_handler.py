"""
Supabase implementation of the Data Access Layer (DAL).

Each method performs exactly one PostgREST round trip and returns the raw rows.
"""

from typing import Any, Dict, List, Optional

from postgrest.exceptions import APIError
from supabase import Client, create_client

from news_proxy.dal import BaseDalHandler
from news_proxy.handlers.utils.errors import DownstreamError
from news_proxy.handlers.utils.observability import logger, tracer

SERVICE_NAME = 'supabase'

ENTITIES_TABLE = 'entities'
ARTICLES_TABLE = 'articles'


class SupabaseHandler(BaseDalHandler):
    """Supabase implementation of the data access layer."""

    def __init__(self, client: Client) -> None:
        self.client = client

    @classmethod
    def from_credentials(cls, url: str, key: str) -> 'SupabaseHandler':
        """Create a handler with a fresh Supabase client."""
        return cls(create_client(url, key))

    def _execute(self, query: Any, table: str) -> List[Dict[str, Any]]:
        try:
            result = query.execute()
        except APIError as e:
            logger.error(f'Supabase error querying {table}', extra={
                'error': str(e),
                'code': getattr(e, 'code', None),
            })
            raise DownstreamError(e.message or str(e), service_name=SERVICE_NAME) from e
        return result.data or []

    @tracer.capture_method
    def fetch_entities(self, category_prefix: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Fetch entity frequency rows, most frequent first.

        Args:
            category_prefix: Optional prefix matched against the category column

        Returns:
            Rows with entity, category and frequency

        Raises:
            DownstreamError: If the query fails
        """
        query = (
            self.client.table(ENTITIES_TABLE)
            .select('entity, category, frequency')
            .order('frequency', desc=True)
        )
        if category_prefix:
            query = query.like('category', f'{category_prefix}%')

        rows = self._execute(query, ENTITIES_TABLE)
        logger.info('Entities retrieved', extra={'row_count': len(rows), 'category_prefix': category_prefix})
        return rows

    @tracer.capture_method
    def search_article_titles(self, word: str = '') -> List[Dict[str, Any]]:
        """
        Fetch articles whose title contains ``word``, newest first.

        Args:
            word: Case-insensitive substring; empty matches every title

        Returns:
            Rows with title, domain and published_date

        Raises:
            DownstreamError: If the query fails
        """
        query = (
            self.client.table(ARTICLES_TABLE)
            .select('title, domain, published_date')
            .ilike('title', f'%{word}%')
            .order('published_date', desc=True)
        )

        rows = self._execute(query, ARTICLES_TABLE)
        logger.info('Article titles retrieved', extra={'row_count': len(rows), 'word': word})
        return rows
