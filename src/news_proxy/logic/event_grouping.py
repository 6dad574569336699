"""
Event grouping via Gemini.

Asks the model to cluster article headlines into real-world events and pulls
the JSON array out of whatever text comes back.
"""

import json
from typing import Any, List, Optional

from aws_lambda_powertools.metrics import MetricUnit

from news_proxy.dal.gemini_handler import GeminiHandler
from news_proxy.handlers.models.env_vars import ProxyEnvVars
from news_proxy.handlers.utils.errors import ConfigurationError, ErrorCategory, ExtractionError, ParseError
from news_proxy.handlers.utils.observability import logger, metrics, tracer
from news_proxy.models.input import GroupEventsRequest

PROMPT_TEMPLATE = """You are an expert event analysis AI. Your task is to organize the following list of news articles into distinct real-world events in Spanish.

Rules:
1.  Analyze the provided articles, which have an "id" and a "title".
2.  Group articles that refer to the same underlying event.
3.  Return your response as a valid JSON array of objects.
4.  Each object must have two keys: "eventName" (a concise string) and "article_ids" (an array of the original article 'id' strings that belong to that event).
5.  Do not include any text, markdown, or explanations outside of the final JSON array.

Here is the list of articles:
{articles}"""


def build_prompt(request: GroupEventsRequest) -> str:
    """Embed the articles, reduced to id and title, in the grouping instruction."""
    articles = [{'id': article.id, 'title': article.title} for article in request.articles]
    return PROMPT_TEMPLATE.format(articles=json.dumps(articles, indent=2, ensure_ascii=False))


def _reject_constant(name: str) -> Any:
    raise ParseError(f'Invalid JSON in model response: non-standard constant {name}', category=ErrorCategory.EXTERNAL_SERVICE)


def extract_json_array(text: str) -> Any:
    """
    Parse the span from the first '[' to the last ']' of the model output.

    NaN and Infinity are not JSON and are rejected like any other syntax error.

    Raises:
        ExtractionError: If either delimiter is missing
        ParseError: If the span is not valid JSON
    """
    start = text.find('[')
    end = text.rfind(']')
    if start == -1 or end == -1:
        raise ExtractionError()

    try:
        return json.loads(text[start:end + 1], parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ParseError(f'Invalid JSON in model response: {e}', category=ErrorCategory.EXTERNAL_SERVICE) from e


def _unknown_article_ids(groups: Any, known_ids: set) -> List[str]:
    unknown: List[str] = []
    if not isinstance(groups, list):
        return unknown
    for group in groups:
        if not isinstance(group, dict):
            continue
        for article_id in group.get('article_ids') or []:
            if str(article_id) not in known_ids:
                unknown.append(str(article_id))
    return unknown


@tracer.capture_method
def group_events(
    request: GroupEventsRequest,
    config: ProxyEnvVars,
    gemini: Optional[GeminiHandler] = None,
) -> Any:
    """
    Group articles into events.

    The parsed array is returned as-is; ids the model invents are only logged.

    Args:
        request: Validated group events request
        config: Proxy configuration
        gemini: Gemini client override

    Returns:
        Parsed JSON array of {eventName, article_ids}
    """
    if not config.GEMINI_API_KEY:
        raise ConfigurationError('GEMINI_API_KEY not configured')

    model = request.modelName or config.GEMINI_DEFAULT_MODEL
    gemini = gemini or GeminiHandler(
        api_key=config.GEMINI_API_KEY,
        base_url=config.GEMINI_API_BASE_URL,
        timeout=config.GEMINI_TIMEOUT_SECONDS,
    )

    tracer.put_annotation('model', model)
    logger.info('Grouping articles into events', extra={'model': model, 'article_count': len(request.articles)})

    response_text = gemini.generate_content(model, build_prompt(request))
    groups = extract_json_array(response_text)

    unknown = _unknown_article_ids(groups, {str(article.id) for article in request.articles})
    if unknown:
        logger.warning('Model returned article ids not present in the request', extra={'unknown_ids': unknown})

    metrics.add_metric(name='EventGroupCount', unit=MetricUnit.Count, value=len(groups) if isinstance(groups, list) else 0)
    return groups
