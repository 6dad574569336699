"""
Gemini REST client for the generateContent endpoint.

Accepts a model identifier and a prompt string and returns the model's free-form
text. Transport failures and non-2xx answers surface as ``DownstreamError``.
"""

from typing import Any, Dict, Optional

import httpx

from news_proxy.handlers.utils.errors import DownstreamError
from news_proxy.handlers.utils.observability import logger, tracer

SERVICE_NAME = 'gemini'


def _sanitize_api_key(raw: str) -> str:
    return (raw or '').strip().strip(' "\'`')


def _candidate_text(data: Dict[str, Any]) -> str:
    candidates = data.get('candidates') or []
    if not candidates:
        feedback = data.get('promptFeedback') or {}
        reason = feedback.get('blockReason')
        message = f'Gemini returned no candidates (blockReason: {reason})' if reason else 'Gemini returned no candidates'
        raise DownstreamError(message, service_name=SERVICE_NAME)

    parts = (candidates[0].get('content') or {}).get('parts') or []
    return ''.join(part.get('text', '') for part in parts)


class GeminiHandler:
    """Thin client over the Gemini generateContent REST API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = 'https://generativelanguage.googleapis.com/v1beta',
        timeout: float = 30,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Initialize the Gemini handler.

        Args:
            api_key: Gemini API key
            base_url: REST API base URL
            timeout: HTTP timeout in seconds
            client: Pre-built httpx client, used by tests to plug a mock transport
        """
        self.api_key = _sanitize_api_key(api_key)
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._client = client

    @tracer.capture_method
    def generate_content(self, model: str, prompt: str) -> str:
        """
        Send a single-turn prompt and return the generated text.

        Args:
            model: Gemini model identifier
            prompt: Prompt text

        Returns:
            Concatenated text parts of the first candidate

        Raises:
            DownstreamError: If the call fails or yields no candidate
        """
        url = f'{self.base_url}/models/{model}:generateContent'
        payload = {'contents': [{'role': 'user', 'parts': [{'text': prompt}]}]}
        headers = {'Content-Type': 'application/json', 'x-goog-api-key': self.api_key}

        logger.debug('Calling Gemini generateContent', extra={'model': model, 'prompt_chars': len(prompt)})

        client = self._client or httpx.Client(timeout=self.timeout)
        try:
            response = client.post(url, headers=headers, json=payload)
        except httpx.HTTPError as e:
            raise DownstreamError(f'Gemini request failed: {e}', service_name=SERVICE_NAME) from e
        finally:
            if self._client is None:
                client.close()

        if response.status_code != 200:
            logger.error('Gemini returned an error status', extra={
                'model': model,
                'status_code': response.status_code,
            })
            raise DownstreamError(
                f'Gemini HTTP {response.status_code}: {response.text[:800]}',
                service_name=SERVICE_NAME,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise DownstreamError(f'Gemini returned a non-JSON body: {e}', service_name=SERVICE_NAME) from e

        text = _candidate_text(data)
        tracer.put_metadata('gemini_response_chars', len(text))
        return text
