"""
AWS Lambda Handlers Module.

This module contains the Lambda handler that serves as the entry point of the
proxy. It follows the three-layer layout:

1. Handler Layer (this module): pre-flight, response envelope, error mapping
2. Logic Layer: action dispatch and the per-action adapters
3. Data Access Layer: Gemini and Supabase clients

The handler uses AWS Lambda Powertools for:
- Structured logging with correlation IDs
- Distributed tracing with X-Ray
- Custom metrics collection
"""

__version__ = "1.0.0"

# Re-export handler utilities for convenience
from news_proxy.handlers.utils.observability import logger, tracer, metrics
from news_proxy.handlers.utils.responses import CORS_HEADERS

__all__ = [
    "logger",
    "tracer",
    "metrics",
    "CORS_HEADERS",
]
