"""
Proxy Lambda Function - Entry point for the news proxy API.

This module serves as the Lambda function entry point that delegates to the
proxy handler in the news_proxy package.
"""

import os
import sys
from typing import Any, Dict

# Add the news_proxy package to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from news_proxy.handlers.proxy_handler import lambda_handler as proxy_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for the proxy API.

    Args:
        event: Lambda event payload (API Gateway event)
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    return proxy_handler(event, context)
