"""Async JSON generation through the configured LLM provider."""

import json
import re
from typing import Any, Dict, Optional

import anthropic
import openai

from astrovogue.config.settings import LLMSettings
from astrovogue.core.circuit_breaker import CircuitBreaker
from astrovogue.core.errors import ConfigurationError, GeneratorError
from astrovogue.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MODELS = {
    "openai": "gpt-4o-mini",
    "anthropic": "claude-3-5-haiku-20241022",
}

_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$")


def parse_json_object(text: Optional[str]) -> Dict[str, Any]:
    """Parse model output into a dict, tolerating a markdown code fence."""
    if not text or not text.strip():
        raise GeneratorError("Generator returned empty content")
    cleaned = _FENCE.sub("", text.strip())
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        start, end = cleaned.find("{"), cleaned.rfind("}")
        if start == -1 or end <= start:
            raise GeneratorError(f"Generator returned non-JSON content: {cleaned[:160]}") from e
        try:
            data = json.loads(cleaned[start : end + 1])
        except json.JSONDecodeError as inner:
            raise GeneratorError(
                f"Generator returned non-JSON content: {cleaned[:160]}"
            ) from inner
    if not isinstance(data, dict):
        raise GeneratorError(f"Generator returned {type(data).__name__}, expected object")
    return data


class TextGenerator:
    """Chat-completion client in JSON mode, guarded by a circuit breaker.

    Args:
        settings: provider, model, temperature, timeout and API keys
        breaker: shared breaker; a fresh one is created when omitted
    """

    def __init__(
        self, settings: LLMSettings, breaker: Optional[CircuitBreaker] = None
    ) -> None:
        self.settings = settings
        self.provider = settings.provider.lower().strip()
        self.model = settings.model or DEFAULT_MODELS.get(self.provider, "")
        self.breaker = breaker or CircuitBreaker()
        self._client: Any = None

    async def generate_json(self, system: str, user: str) -> Dict[str, Any]:
        if not self.breaker.allow():
            raise GeneratorError("Generator circuit is open")
        try:
            text = await self._generate(system, user)
            result = parse_json_object(text)
        except GeneratorError:
            self.breaker.record_failure()
            raise
        except BaseException:
            self.breaker.cancel_trial()
            raise
        self.breaker.record_success()
        return result

    async def _generate(self, system: str, user: str) -> Optional[str]:
        if self.provider == "openai":
            return await self._generate_openai(system, user)
        elif self.provider == "anthropic":
            return await self._generate_anthropic(system, user)
        else:
            raise ConfigurationError(f"Unknown provider: {self.provider}")

    async def _generate_openai(self, system: str, user: str) -> Optional[str]:
        if not self.settings.openai_api_key:
            raise ConfigurationError("OPENAI_API_KEY missing")
        if self._client is None:
            self._client = openai.AsyncOpenAI(
                api_key=self.settings.openai_api_key,
                timeout=self.settings.timeout_seconds,
            )
        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                temperature=self.settings.temperature,
                response_format={"type": "json_object"},
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
            )
        except openai.APIError as e:
            raise GeneratorError(f"OpenAI request failed: {str(e)[:160]}") from e
        if not response.choices:
            raise GeneratorError("OpenAI returned no choices")
        return response.choices[0].message.content

    async def _generate_anthropic(self, system: str, user: str) -> Optional[str]:
        if not self.settings.anthropic_api_key:
            raise ConfigurationError("ANTHROPIC_API_KEY missing")
        if self._client is None:
            self._client = anthropic.AsyncAnthropic(
                api_key=self.settings.anthropic_api_key,
                timeout=self.settings.timeout_seconds,
            )
        try:
            response = await self._client.messages.create(
                model=self.model,
                max_tokens=1024,
                temperature=self.settings.temperature,
                system=system,
                messages=[{"role": "user", "content": user}],
            )
        except anthropic.APIError as e:
            raise GeneratorError(f"Anthropic request failed: {str(e)[:160]}") from e
        if not response.content:
            raise GeneratorError("Anthropic returned no content")
        return response.content[0].text
