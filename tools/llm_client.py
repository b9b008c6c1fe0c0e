"""Text-generation provider client for marketing plan prompts."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests
from anthropic import Anthropic, APIError, APIStatusError

from core.errors import UpstreamError
from core.models import ChatCompletionRequest, ChatMessage

logger = logging.getLogger(__name__)

PROVIDERS = ("openai", "anthropic")
DEFAULT_CHAT_COMPLETION_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_OPENAI_MODEL = "gpt-4-turbo-preview"
DEFAULT_ANTHROPIC_MODEL = "claude-3-opus-20240229"


@dataclass(frozen=True)
class GenerationSettings:
    """Connection settings for the generation provider."""
    api_key: str
    provider: str = "openai"
    url: str = DEFAULT_CHAT_COMPLETION_URL
    model: str = DEFAULT_OPENAI_MODEL
    temperature: float = 0.7
    max_tokens: int = 4096
    timeout: float = 120.0

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "GenerationSettings":
        provider = config.get('GENERATION_PROVIDER', 'openai')
        key_name = 'ANTHROPIC_API_KEY' if provider == 'anthropic' else 'OPENAI_API_KEY'
        return cls(
            api_key=config.get(key_name) or '',
            provider=provider,
            url=config.get('GENERATION_URL', cls.url),
            model=config.get('GENERATION_MODEL', cls.model),
            temperature=float(config.get('GENERATION_TEMPERATURE', cls.temperature)),
            max_tokens=int(config.get('GENERATION_MAX_TOKENS', cls.max_tokens)),
            timeout=float(config.get('GENERATION_TIMEOUT', cls.timeout)),
        )

    def missing(self) -> List[str]:
        """Names of required settings that are not configured."""
        missing = []
        if self.provider not in PROVIDERS:
            missing.append('GENERATION_PROVIDER')
        if not self.api_key:
            missing.append('ANTHROPIC_API_KEY' if self.provider == 'anthropic' else 'OPENAI_API_KEY')
        if self.provider == 'openai' and not self.url:
            missing.append('GENERATION_URL')
        return missing


class GenerationClient:
    """Issues a single generation request per prompt and returns the generated text."""

    def __init__(self, settings: GenerationSettings, anthropic_client: Optional[Anthropic] = None):
        self.settings = settings
        self._anthropic = anthropic_client

    def generate(self, prompt: str) -> str:
        """
        Generate a document for the prompt.

        Args:
            prompt: Rendered prompt text

        Returns:
            Generated text only (usage and model metadata are discarded)

        Raises:
            UpstreamError: missing credentials, transport failure, timeout,
                non-success status or unexpected response shape
        """
        missing = self.settings.missing()
        if missing:
            raise UpstreamError(f"Generation provider is not configured: missing {', '.join(missing)}")

        messages: List[ChatMessage] = [{"role": "user", "content": prompt}]
        if self.settings.provider == "anthropic":
            return self._generate_anthropic(messages)
        return self._generate_chat_completion(messages)

    def _generate_chat_completion(self, messages: List[ChatMessage]) -> str:
        payload: ChatCompletionRequest = {
            "model": self.settings.model,
            "messages": messages,
            "temperature": self.settings.temperature,
        }
        headers = {
            "Authorization": f"Bearer {self.settings.api_key}",
            "Content-Type": "application/json",
        }

        logger.info(f"Calling chat completion endpoint with model {self.settings.model}")
        try:
            response = requests.post(
                self.settings.url,
                headers=headers,
                json=payload,
                timeout=self.settings.timeout,
            )
        except requests.Timeout as e:
            raise UpstreamError(f"Generation request timed out after {self.settings.timeout}s: {e}") from e
        except requests.RequestException as e:
            raise UpstreamError(f"Generation request failed: {e}") from e

        if not response.ok:
            raise UpstreamError(
                f"Generation provider returned HTTP {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(
                "Generation provider returned a non-JSON body",
                status_code=response.status_code,
                body=response.text,
            ) from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise UpstreamError(
                "Generation response is missing choices[0].message.content",
                status_code=response.status_code,
                body=response.text,
            ) from e

        if not isinstance(content, str):
            raise UpstreamError(
                "Generation response content is not text",
                status_code=response.status_code,
                body=response.text,
            )
        return content

    def _get_anthropic(self) -> Anthropic:
        if self._anthropic is None:
            # The SDK retries by default; one request per prompt.
            self._anthropic = Anthropic(
                api_key=self.settings.api_key,
                timeout=self.settings.timeout,
                max_retries=0,
            )
        return self._anthropic

    def _generate_anthropic(self, messages: List[ChatMessage]) -> str:
        logger.info(f"Calling Anthropic messages API with model {self.settings.model}")
        try:
            response = self._get_anthropic().messages.create(
                model=self.settings.model,
                max_tokens=self.settings.max_tokens,
                messages=messages,
                temperature=self.settings.temperature,
            )
        except APIStatusError as e:
            raise UpstreamError(
                f"Generation provider returned HTTP {e.status_code}",
                status_code=e.status_code,
                body=e.response.text,
            ) from e
        except APIError as e:
            raise UpstreamError(f"Generation request failed: {e}") from e

        # Extract text from response
        text_parts = []
        for block in getattr(response, "content", None) or []:
            if hasattr(block, 'text'):
                text_parts.append(block.text)
            elif isinstance(block, dict) and 'text' in block:
                text_parts.append(block['text'])
        if not text_parts:
            raise UpstreamError("Generation response contained no text content")
        return "".join(text_parts)
