"""
Input models for request validation using Pydantic.

Each supported action has its own request model carrying only the fields that
action reads. The ``action`` literal is the discriminator of ``ProxyRequest``.
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

GROUP_EVENTS_ACTION = 'gemini-group-events'
FETCH_WORDS_ACTION = 'supabase-fetch-words'
FETCH_TITLES_ACTION = 'supabase-fetch-titles'
FETCH_CATEGORIES_ACTION = 'supabase-fetch-categories'


class ArticleRef(BaseModel):
    """Article reference sent to the event grouping prompt."""

    model_config = ConfigDict(extra='ignore')

    id: Annotated[Union[str, int, float], Field(
        description='Article identifier echoed back in article_ids',
        examples=['a1']
    )]

    title: Annotated[Optional[str], Field(
        default=None,
        description='Article headline, sent to the model as given',
        examples=['X wins award']
    )] = None


class GroupEventsRequest(BaseModel):
    """Request model for grouping articles into events."""

    model_config = ConfigDict(extra='ignore')

    action: Literal['gemini-group-events'] = GROUP_EVENTS_ACTION

    articles: Annotated[List[ArticleRef], Field(
        description='Articles to cluster into real-world events'
    )]

    modelName: Annotated[Optional[str], Field(
        default=None,
        description='Gemini model override',
        examples=['gemini-2.0-flash-exp']
    )] = None


class FetchWordsRequest(BaseModel):
    """Request model for entity frequency statistics."""

    model_config = ConfigDict(extra='ignore')

    action: Literal['supabase-fetch-words'] = FETCH_WORDS_ACTION

    category: Annotated[Optional[str], Field(
        default=None,
        description='Category prefix filter',
        examples=['Pers']
    )] = None


class FetchTitlesRequest(BaseModel):
    """Request model for the article title search."""

    model_config = ConfigDict(extra='ignore')

    action: Literal['supabase-fetch-titles'] = FETCH_TITLES_ACTION

    word: Annotated[Optional[str], Field(
        default=None,
        description='Case-insensitive substring searched in article titles',
        examples=['Madrid']
    )] = None


class FetchCategoriesRequest(BaseModel):
    """Request model for the category list."""

    model_config = ConfigDict(extra='ignore')

    action: Literal['supabase-fetch-categories'] = FETCH_CATEGORIES_ACTION


ProxyRequest = Annotated[
    Union[GroupEventsRequest, FetchWordsRequest, FetchTitlesRequest, FetchCategoriesRequest],
    Field(discriminator='action'),
]
