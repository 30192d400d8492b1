"""
LLM completion client and JSON response handling.

The pipeline only needs "prompt in, text out"; `OpenAILLMClient` provides
that through the OpenAI chat completions API. Responses that should be JSON
are passed through `parse_json_response`, which tolerates Markdown code
fences around the payload.
"""
import json
import logging
import re
from typing import Any, Callable, Optional, Protocol

from openai import OpenAI, OpenAIError

from ..config import get_settings
from ..core.errors import ConfigurationError, ExternalServiceError, LLMParseError

logger = logging.getLogger(__name__)

_CODE_FENCE_RE = re.compile(r"```json|```")


class LLMClient(Protocol):
    def complete(self, prompt: str, temperature: float = 0.2) -> str:
        """Text completion for `prompt`."""
        ...


class OpenAILLMClient:
    def __init__(self, api_key: str, model: str, system_prompt: Optional[str] = None):
        self.model = model
        self.system_prompt = system_prompt
        self._client = OpenAI(api_key=api_key)

    def complete(self, prompt: str, temperature: float = 0.2) -> str:
        messages = []
        if self.system_prompt:
            messages.append({"role": "system", "content": self.system_prompt})
        messages.append({"role": "user", "content": prompt})

        try:
            response = self._client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=temperature,
            )
        except OpenAIError as e:
            raise ExternalServiceError(f"LLM request failed: {e}") from e

        content = response.choices[0].message.content or ""
        logger.debug(f"[LLM] {self.model} returned {len(content)} chars")
        return content


def get_llm_client() -> OpenAILLMClient:
    """
    Build the LLM client from settings.

    Raises:
        ConfigurationError: If OPENAI_API_KEY is not configured
    """
    settings = get_settings()
    if not settings.openai_api_key:
        raise ConfigurationError("Missing API Key")
    return OpenAILLMClient(api_key=settings.openai_api_key, model=settings.openai_model)


def strip_code_fences(text: str) -> str:
    """Remove ```json / ``` markers wrapping an otherwise-JSON payload."""
    return _CODE_FENCE_RE.sub("", text).strip()


def parse_json_response(text: str) -> Any:
    """
    Parse an LLM response as JSON after stripping code fences.

    Raises:
        LLMParseError: If the cleaned text is not valid JSON
    """
    cleaned = strip_code_fences(text or "")
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error(f"[LLM] Unparseable JSON response ({len(cleaned)} chars): {e}")
        raise LLMParseError(f"LLM returned invalid JSON: {e}") from e


class LazyLLMClient:
    """
    Defers building the real client until the first completion.

    Lets request handlers reject bad input or missing records before a
    missing API key is reported.
    """

    def __init__(self, factory: Callable[[], LLMClient] = get_llm_client):
        self._factory = factory
        self._client: Optional[LLMClient] = None

    def complete(self, prompt: str, temperature: float = 0.2) -> str:
        if self._client is None:
            self._client = self._factory()
        return self._client.complete(prompt, temperature=temperature)
