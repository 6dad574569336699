"""
Entity, title and category lookups backed by Supabase.

These adapters only reshape rows for display; nothing here ranks or scores
content.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from news_proxy.dal import DalHandler, get_dal_handler
from news_proxy.handlers.models.env_vars import ProxyEnvVars
from news_proxy.handlers.utils.observability import logger, tracer
from news_proxy.models.input import FetchTitlesRequest, FetchWordsRequest
from news_proxy.models.output import TitleRecord, WordRecord

CATEGORIES: List[str] = [
    'Evento', 'Equipo', 'Lugar', 'Organización',
    'Persona', 'Medio', 'Marca', 'Grupo',
    'Fenómeno', 'Concepto', 'Ciudad',
]

TITLE_ID_PREFIX = 'article_'


def _iso_now(now: Optional[datetime] = None) -> str:
    # Millisecond precision with a Z suffix, as browsers format dates
    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def _dal(config: ProxyEnvVars, dal: Optional[DalHandler]) -> DalHandler:
    return dal or get_dal_handler(config.SUPABASE_URL, config.SUPABASE_ANON_KEY)


@tracer.capture_method
def fetch_words(
    request: FetchWordsRequest,
    config: ProxyEnvVars,
    dal: Optional[DalHandler] = None,
) -> List[Dict[str, Any]]:
    """Entity frequencies, most frequent first, optionally filtered by category prefix."""
    rows = _dal(config, dal).fetch_entities(request.category or None)
    return [
        WordRecord(text=row.get('entity'), category=row.get('category'), frequency=row.get('frequency')).model_dump()
        for row in rows
    ]


@tracer.capture_method
def fetch_titles(
    request: FetchTitlesRequest,
    config: ProxyEnvVars,
    dal: Optional[DalHandler] = None,
    now: Optional[datetime] = None,
) -> List[Dict[str, Any]]:
    """
    Article titles containing ``word``, newest first.

    ``id`` embeds the first ten characters of the title and the row position, so
    it is unique within one response but not stable across queries. Characters
    are code points: a title with an astral character such as an emoji in its
    first ten positions keeps more of its text than a UTF-16 slice would.
    Missing publication dates fall back to the current time.
    """
    rows = _dal(config, dal).search_article_titles(request.word or '')

    records = []
    for index, row in enumerate(rows):
        title = row.get('title')
        domain = row.get('domain')
        records.append(TitleRecord(
            id=f'{TITLE_ID_PREFIX}{(title or "")[:10]}_{index}',
            title=title,
            domain=domain,
            publish_date=row.get('published_date') or _iso_now(now),
            url=f'http://{domain}',
        ).model_dump(by_alias=True))

    logger.debug('Title records built', extra={'record_count': len(records)})
    return records


def fetch_categories() -> List[str]:
    return list(CATEGORIES)
