"""
Proxy Handler - Lambda function for the news proxy API.

Answers CORS pre-flight requests, dispatches POST bodies on their ``action``
field and normalizes every outcome into the same response envelope.
"""

from typing import Any, Dict, Optional

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from news_proxy.handlers.models.env_vars import ProxyEnvVars, get_proxy_config
from news_proxy.handlers.utils.errors import format_error_response, get_http_status_code, log_error_metrics
from news_proxy.handlers.utils.observability import logger, metrics, tracer
from news_proxy.handlers.utils.responses import create_api_response, is_preflight, preflight_response
from news_proxy.logic.dispatcher import dispatch, parse_request_body


def handle_request(event: Dict[str, Any], config: Optional[ProxyEnvVars] = None) -> Dict[str, Any]:
    """
    Process one proxy request.

    Args:
        event: API Gateway event (HTTP API or REST API shape)
        config: Configuration override; loaded from the environment when omitted

    Returns:
        API Gateway response dictionary
    """
    if is_preflight(event):
        logger.debug('Answering CORS pre-flight request')
        metrics.add_metric(name='PreflightCount', unit=MetricUnit.Count, value=1)
        return preflight_response()

    metrics.add_metric(name='RequestCount', unit=MetricUnit.Count, value=1)

    action = None
    client_error_status_codes = False
    try:
        config = config or get_proxy_config()
        client_error_status_codes = config.client_error_status_codes

        body = parse_request_body(event)
        action = body.get('action')
        result = dispatch(body, config)
        response = create_api_response(status_code=200, body=result)

    except Exception as e:
        log_error_metrics(e, action=action if isinstance(action, str) else None)
        return create_api_response(
            status_code=get_http_status_code(e, client_error_status_codes),
            body=format_error_response(e),
        )

    metrics.add_metric(name='SuccessCount', unit=MetricUnit.Count, value=1)
    logger.info('Request completed successfully')
    return response


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_HTTP, clear_state=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler for the news proxy API.

    Args:
        event: Lambda event payload (API Gateway event)
        context: Lambda context object

    Returns:
        API Gateway response
    """
    return handle_request(event)
