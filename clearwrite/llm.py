"""Gemini backends for the rewrite call."""

import logging
from typing import Any, Dict

import requests
from openai import OpenAI, APIError, APIStatusError

from clearwrite.errors import RewriteAPIError, UnexpectedResponseError

logger = logging.getLogger(__name__)


class GeminiRESTService:
    """Calls the generateContent endpoint directly, key in the query string."""

    def __init__(self, config, api_key: str, session: requests.Session = None):
        self.api_base = config['api_base'].rstrip('/')
        self.model = config['model']
        self.temperature = config['temperature']
        self.max_output_tokens = config['max_output_tokens']
        self.timeout = config['timeout']
        self.api_key = api_key
        self.session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self.api_base}/models/{self.model}:generateContent"

    def build_payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.temperature,
                "maxOutputTokens": self.max_output_tokens,
            },
        }

    def generate(self, prompt: str) -> str:
        """Send one prompt and return the first candidate's trimmed text."""
        try:
            response = self.session.post(
                self.url,
                params={"key": self.api_key},
                headers={"Content-Type": "application/json"},
                json=self.build_payload(prompt),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise RewriteAPIError(str(e)) from e

        if not response.ok:
            raise RewriteAPIError(_error_message(response), status=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise UnexpectedResponseError("Gemini API returned a non-JSON body") from e

        return extract_text(data)


def _error_message(response) -> str:
    try:
        error_data = response.json()
    except ValueError:
        return response.text or response.reason or ""
    if isinstance(error_data, dict) and isinstance(error_data.get('error'), dict):
        return error_data['error'].get('message', '')
    return response.text


def extract_text(data: Any) -> str:
    """Pull ``candidates[0].content.parts[0].text`` out of a generateContent response."""
    try:
        text = data['candidates'][0]['content']['parts'][0]['text']
    except (KeyError, IndexError, TypeError) as e:
        raise UnexpectedResponseError("Invalid response format from Gemini API") from e
    if not isinstance(text, str):
        raise UnexpectedResponseError("Invalid response format from Gemini API")
    return text.strip()


class GeminiSDKService:
    """Talks to Gemini through its OpenAI-compatible endpoint with the openai SDK."""

    def __init__(self, config, api_key: str, client: OpenAI = None):
        self.model = config['model']
        self.temperature = config['temperature']
        self.max_output_tokens = config['max_output_tokens']
        self.client = client or OpenAI(
            api_key=api_key,
            base_url=config['openai_base'],
            timeout=config['timeout'],
            max_retries=0,
        )

    def generate(self, prompt: str) -> str:
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.temperature,
                max_tokens=self.max_output_tokens,
            )
        except APIStatusError as e:
            raise RewriteAPIError(e.message, status=e.status_code) from e
        except APIError as e:
            raise RewriteAPIError(e.message) from e

        try:
            content = resp.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise UnexpectedResponseError("Invalid response format from Gemini API") from e
        if not isinstance(content, str):
            raise UnexpectedResponseError("Gemini API returned no text")
        return content.strip()


BACKENDS = {
    'rest': GeminiRESTService,
    'sdk': GeminiSDKService,
}


def build_service(config, api_key: str):
    """Create the backend named by ``config['backend']``."""
    backend = config.get('backend') or 'rest'
    if backend not in BACKENDS:
        raise ValueError(f"Unknown backend '{backend}'. Available backends: {', '.join(BACKENDS)}")
    logger.debug(f"Using {backend} backend with model {config['model']}")
    return BACKENDS[backend](config, api_key)
