"""
Business Logic Layer Module.

The logic layer sits between the handler and the data access layer:

- dispatcher: parses the request body and routes it to one adapter
- event_grouping: clusters articles into events with Gemini
- entity_service: entity frequencies, title search and the category list
"""

from news_proxy.logic.dispatcher import dispatch, parse_request_body

__all__ = [
    "dispatch",
    "parse_request_body",
]
