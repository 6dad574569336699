"""
Error model for the proxy handler.

Every failure raised by the dispatcher, the adapters or the collaborators is a
``ProxyError`` subclass carrying an error code and a category. The handler
boundary converts any exception into the single ``{"error": message}`` body.
"""

from enum import Enum
from typing import Any, Dict, Optional

from aws_lambda_powertools.metrics import MetricUnit

from news_proxy.handlers.utils.observability import logger, metrics, tracer
from news_proxy.models.output import ErrorOutput


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    VALIDATION = "VALIDATION"
    CONFIGURATION = "CONFIGURATION"
    EXTERNAL_SERVICE = "EXTERNAL_SERVICE"
    INTERNAL = "INTERNAL"


class ProxyError(Exception):
    """Base exception class for proxy errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "INTERNAL_SERVER_ERROR",
        category: ErrorCategory = ErrorCategory.INTERNAL,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.category = category

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "category": self.category.value,
        }


class ParseError(ProxyError):
    """Raised when the request body or the model output is not valid JSON."""

    def __init__(self, message: str, category: ErrorCategory = ErrorCategory.VALIDATION):
        super().__init__(message=message, error_code="PARSE_ERROR", category=category)


class ConfigurationError(ProxyError):
    """Raised when a credential required by an action is not configured."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            category=ErrorCategory.CONFIGURATION,
        )


class UnknownActionError(ProxyError):
    """Raised when the request names an action outside the supported set."""

    def __init__(self, action: Any):
        super().__init__(
            message=f"Unknown action: {action}",
            error_code="UNKNOWN_ACTION",
            category=ErrorCategory.VALIDATION,
        )
        self.action = action


class ExtractionError(ProxyError):
    """Raised when no JSON array delimiters can be located in the model output."""

    def __init__(self, message: str = "No valid JSON array found in the response."):
        super().__init__(
            message=message,
            error_code="EXTRACTION_ERROR",
            category=ErrorCategory.EXTERNAL_SERVICE,
        )


class DownstreamError(ProxyError):
    """Raised when Gemini or Supabase reports a failure."""

    def __init__(self, message: str, service_name: str):
        super().__init__(
            message=message,
            error_code="DOWNSTREAM_ERROR",
            category=ErrorCategory.EXTERNAL_SERVICE,
        )
        self.service_name = service_name


def error_message(error: Exception) -> str:
    """Message exposed to the caller for any exception."""
    if isinstance(error, ProxyError):
        return error.message or "Internal server error"
    return str(error) or "Internal server error"


def format_error_response(error: Exception) -> Dict[str, str]:
    """Format error for API response."""
    return ErrorOutput(error=error_message(error)).model_dump()


def get_http_status_code(error: Exception, client_error_status_codes: bool = False) -> int:
    """
    Get the HTTP status code for an error.

    All errors map to 500 unless client error status codes are enabled, in which
    case validation errors (bad body, bad params, unknown action) map to 400.
    """
    if client_error_status_codes and isinstance(error, ProxyError) and error.category == ErrorCategory.VALIDATION:
        return 400
    return 500


@tracer.capture_method
def log_error_metrics(error: Exception, action: Optional[str] = None) -> None:
    """Log error metrics and a structured error line."""
    category = error.category if isinstance(error, ProxyError) else ErrorCategory.INTERNAL
    error_code = error.error_code if isinstance(error, ProxyError) else "INTERNAL_SERVER_ERROR"

    metrics.add_metric(name="ErrorCount", unit=MetricUnit.Count, value=1)
    metrics.add_metric(name=f"Error{category.value.title().replace('_', '')}Count", unit=MetricUnit.Count, value=1)

    tracer.put_annotation("error_code", error_code)

    logger.exception(
        "Request failed",
        exc_info=error,
        extra={
            "action": action,
            "error_code": error_code,
            "error_category": category.value,
            "error_message": error_message(error),
        },
    )
