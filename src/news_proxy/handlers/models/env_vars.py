"""
Environment variable models for type-safe configuration.

Credentials are optional at load time: a missing key only fails the action
that needs it, never the whole function.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field

DEFAULT_GEMINI_MODEL = 'gemini-2.0-flash-exp'
DEFAULT_GEMINI_API_BASE_URL = 'https://generativelanguage.googleapis.com/v1beta'


class ProxyEnvVars(BaseModel):
    """Environment variables for the proxy handler."""

    # Gemini credential, required by gemini-group-events only
    GEMINI_API_KEY: Annotated[Optional[str], Field(
        default=None,
        description='API key for the Gemini generateContent API'
    )] = None

    GEMINI_DEFAULT_MODEL: Annotated[str, Field(
        default=DEFAULT_GEMINI_MODEL,
        description='Gemini model used when the request does not name one',
        min_length=1
    )] = DEFAULT_GEMINI_MODEL

    GEMINI_API_BASE_URL: Annotated[str, Field(
        default=DEFAULT_GEMINI_API_BASE_URL,
        description='Base URL of the Gemini REST API'
    )] = DEFAULT_GEMINI_API_BASE_URL

    GEMINI_TIMEOUT_SECONDS: Annotated[int, Field(
        default=30,
        description='Gemini HTTP timeout in seconds',
        ge=1,
        le=900
    )] = 30

    # Supabase project, required by the supabase-* actions
    SUPABASE_URL: Annotated[Optional[str], Field(
        default=None,
        description='Supabase project URL'
    )] = None

    SUPABASE_ANON_KEY: Annotated[Optional[str], Field(
        default=None,
        description='Supabase anon key'
    )] = None

    # Map request errors to 400 instead of 500
    CLIENT_ERROR_STATUS_CODES: Annotated[str, Field(
        default='false',
        description='Return 400 for malformed requests and unknown actions (true/false)',
        pattern=r'^(true|false)$'
    )] = 'false'

    # Service name for observability
    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='news-proxy',
        description='Service name for AWS Powertools'
    )] = 'news-proxy'

    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    @property
    def client_error_status_codes(self) -> bool:
        """Check if validation errors should map to 400."""
        return self.CLIENT_ERROR_STATUS_CODES.lower() == 'true'


def get_proxy_config() -> ProxyEnvVars:
    """
    Get typed environment variables for the proxy handler.

    The model is parsed once per execution environment and cached.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=ProxyEnvVars)
