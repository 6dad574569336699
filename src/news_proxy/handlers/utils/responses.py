"""
HTTP envelope helpers for the proxy handler.

Every response, including pre-flight answers and errors, carries the same
fixed CORS header set.
"""

import json
from typing import Any, Dict, List

CORS_HEADERS: Dict[str, str] = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Allow-Methods': 'POST, OPTIONS',
    'Content-Type': 'application/json',
}


def request_methods(event: Dict[str, Any]) -> List[str]:
    """
    Collect the HTTP method fields an event may carry.

    HTTP API (v2) events carry ``requestContext.http.method``; older payloads
    carry ``requestMethod`` or the REST API (v1) ``httpMethod``.
    """
    request_context = event.get('requestContext') or {}
    http = request_context.get('http') or {}
    candidates = (http.get('method'), event.get('requestMethod'), event.get('httpMethod'))
    return [str(method).upper() for method in candidates if method]


def is_preflight(event: Dict[str, Any]) -> bool:
    """Check whether the event is a CORS pre-flight request."""
    return 'OPTIONS' in request_methods(event)


def create_api_response(status_code: int, body: Any) -> Dict[str, Any]:
    """
    Create an API Gateway response with the fixed header set.

    Raises:
        ValueError: If the body holds NaN or Infinity, which JSON cannot carry
    """
    return {
        'statusCode': status_code,
        'headers': dict(CORS_HEADERS),
        'body': body if isinstance(body, str) else json.dumps(body, ensure_ascii=False, allow_nan=False),
    }


def preflight_response() -> Dict[str, Any]:
    return create_api_response(200, '')
