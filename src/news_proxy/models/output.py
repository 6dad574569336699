"""
Output models for API responses using Pydantic.

Field aliases carry the camelCase names the front end reads.
"""

from typing import Annotated, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class WordRecord(BaseModel):
    """Entity frequency row returned by supabase-fetch-words."""

    text: Annotated[Optional[str], Field(
        description='Entity text',
        examples=['Real Madrid']
    )]

    category: Annotated[Optional[str], Field(
        description='Entity category',
        examples=['Equipo']
    )]

    frequency: Annotated[Optional[Union[int, float]], Field(
        description='Number of mentions',
        examples=[42]
    )]


class TitleRecord(BaseModel):
    """Article title row returned by supabase-fetch-titles."""

    model_config = ConfigDict(populate_by_name=True)

    id: Annotated[str, Field(
        description='Positional identifier, not stable across queries',
        examples=['article_Real Madri_0']
    )]

    title: Annotated[Optional[str], Field(description='Article headline')]

    domain: Annotated[Optional[str], Field(
        description='Publishing domain',
        examples=['elpais.com']
    )]

    publish_date: Annotated[str, Field(
        alias='publishDate',
        description='ISO-8601 publication timestamp'
    )]

    relevance_score: Annotated[int, Field(alias='relevanceScore')] = 0

    mentions: int = 0

    url: Annotated[str, Field(
        description='http:// followed by the domain',
        examples=['http://elpais.com']
    )]

    excerpt: str = ''


class ErrorOutput(BaseModel):
    """Error response body."""

    error: Annotated[str, Field(
        description='Error message',
        examples=['Unknown action: not-a-real-action']
    )]
