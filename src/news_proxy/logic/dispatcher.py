"""
Action dispatch.

Turns an API Gateway event into a typed request and routes it to exactly one
adapter. The set of actions is closed.
"""

import base64
import binascii
import json
from typing import Any, Callable, Dict

from pydantic import TypeAdapter, ValidationError

from news_proxy.handlers.models.env_vars import ProxyEnvVars
from news_proxy.handlers.utils.errors import ParseError, UnknownActionError
from news_proxy.handlers.utils.observability import logger, tracer
from news_proxy.logic.entity_service import fetch_categories, fetch_titles, fetch_words
from news_proxy.logic.event_grouping import group_events
from news_proxy.models.input import (
    FETCH_CATEGORIES_ACTION,
    FETCH_TITLES_ACTION,
    FETCH_WORDS_ACTION,
    GROUP_EVENTS_ACTION,
    ProxyRequest,
)

ACTION_HANDLERS: Dict[str, Callable[[Any, ProxyEnvVars], Any]] = {
    GROUP_EVENTS_ACTION: group_events,
    FETCH_WORDS_ACTION: fetch_words,
    FETCH_TITLES_ACTION: fetch_titles,
    FETCH_CATEGORIES_ACTION: lambda request, config: fetch_categories(),
}

_request_adapter = TypeAdapter(ProxyRequest)


def _reject_constant(name: str) -> Any:
    raise ParseError(f'Invalid JSON body: non-standard constant {name}')


def parse_request_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Decode the JSON object carried in ``event["body"]``.

    Raises:
        ParseError: If the body is missing, not JSON, or not a JSON object
    """
    raw = event.get('body')
    if raw is None or raw == '':
        raise ParseError('Request body is empty')

    if event.get('isBase64Encoded'):
        try:
            raw = base64.b64decode(raw).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError) as e:
            raise ParseError(f'Invalid base64 request body: {e}') from e

    try:
        parsed = json.loads(raw, parse_constant=_reject_constant)
    except (json.JSONDecodeError, TypeError) as e:
        raise ParseError(f'Invalid JSON body: {e}') from e

    if not isinstance(parsed, dict):
        raise ParseError('Request body must be a JSON object')
    return parsed


def _summarize(error: ValidationError, action: str) -> str:
    fields = []
    for item in error.errors():
        # Discriminated union locations start with the tag
        loc = item['loc'][1:] if item['loc'][:1] == (action,) else item['loc']
        location = '.'.join(str(part) for part in loc) or 'body'
        fields.append(f"{location}: {item['msg']}")
    return '; '.join(fields)


def validate_request(body: Dict[str, Any]) -> Any:
    """
    Validate the body into the request model of its action.

    Raises:
        UnknownActionError: If ``action`` is not a supported action
        ParseError: If the parameters do not fit the action's model
    """
    action = body.get('action')
    if not isinstance(action, str) or action not in ACTION_HANDLERS:
        raise UnknownActionError(action)

    try:
        return _request_adapter.validate_python(body)
    except ValidationError as e:
        raise ParseError(f"Invalid parameters for action '{action}': {_summarize(e, action)}") from e


@tracer.capture_method
def dispatch(body: Dict[str, Any], config: ProxyEnvVars) -> Any:
    """Route a parsed request body to its adapter and return the adapter result."""
    request = validate_request(body)

    tracer.put_annotation('action', request.action)
    logger.append_keys(action=request.action)
    logger.info('Dispatching action')

    return ACTION_HANDLERS[request.action](request, config)
