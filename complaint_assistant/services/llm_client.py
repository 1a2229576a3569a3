from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol

import httpx
import openai
from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types
from openai import OpenAI

from complaint_assistant.core.errors import ConfigError, UpstreamMalformed, UpstreamUnavailable

logger = logging.getLogger(__name__)

PING_PROMPT = "Respond with 'OK' if you can read this."


@dataclass
class LLMConfig:
    provider: str
    model: str
    temperature: float = 0.7
    max_tokens: int = 2000
    base_url: Optional[str] = None
    timeout: Optional[float] = None
    openai_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None


class CompletionClient(Protocol):
    def complete(self, system: str, user: str) -> str: ...

    def ping(self) -> str: ...


class OpenAIChatLLM:
    """Chat-completions endpoint (OpenAI or anything speaking its protocol)."""

    def __init__(
        self,
        api_key: str,
        model: str,
        temperature: float,
        max_tokens: int,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Any = None,
    ):
        if client is None:
            kwargs: dict[str, Any] = {"api_key": api_key, "base_url": base_url, "max_retries": 0}
            if timeout is not None:
                kwargs["timeout"] = timeout
            client = OpenAI(**kwargs)
        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    def _create(self, messages: list[dict[str, str]], max_tokens: int, temperature: Optional[float]):
        params: dict[str, Any] = {"model": self.model, "messages": messages, "max_tokens": max_tokens}
        if temperature is not None:
            params["temperature"] = temperature
        try:
            return self.client.chat.completions.create(**params)
        except openai.APIStatusError as e:
            body = getattr(e, "body", None)
            logger.error("Completion API error: status=%s body=%s", e.status_code, body)
            raise UpstreamUnavailable(
                f"Request failed with status code {e.status_code}",
                detail=str(e),
                status=e.status_code,
                body=body,
            ) from e
        except openai.APIError as e:
            logger.error("Completion API unreachable: %s", e)
            raise UpstreamUnavailable(str(e), detail=f"{type(e).__name__}: {e}") from e

    @staticmethod
    def _first_content(resp: Any) -> str:
        choices = getattr(resp, "choices", None) or []
        if not choices:
            raise UpstreamMalformed(detail="Response contained no choices")
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not content:
            raise UpstreamMalformed(detail="First choice has no message content")
        return content

    def complete(self, system: str, user: str) -> str:
        resp = self._create(
            [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )
        return self._first_content(resp)

    def ping(self) -> str:
        resp = self._create([{"role": "user", "content": PING_PROMPT}], max_tokens=5, temperature=None)
        return self._first_content(resp)


class GeminiLLM:
    """Google Gemini through google-genai; the system instruction travels in the config."""

    def __init__(self, api_key: str, model: str, temperature: float, max_tokens: int, client: Any = None):
        self.client = client if client is not None else genai.Client(api_key=api_key)
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    def _generate(self, contents: str, config: genai_types.GenerateContentConfig) -> str:
        try:
            resp = self.client.models.generate_content(model=self.model, contents=contents, config=config)
        except genai_errors.APIError as e:
            logger.error("Gemini API error: status=%s body=%s", e.code, e.details)
            raise UpstreamUnavailable(
                f"Request failed with status code {e.code}",
                detail=str(e),
                status=e.code,
                body=e.details,
            ) from e
        except httpx.HTTPError as e:
            logger.error("Gemini API unreachable: %s", e)
            raise UpstreamUnavailable(str(e) or type(e).__name__, detail=f"{type(e).__name__}: {e}") from e

        txt = resp.text
        if not txt:
            raise UpstreamMalformed(detail="Gemini response had no text")
        return txt

    def complete(self, system: str, user: str) -> str:
        return self._generate(
            user,
            genai_types.GenerateContentConfig(
                system_instruction=[system],
                temperature=self.temperature,
                max_output_tokens=self.max_tokens,
            ),
        )

    def ping(self) -> str:
        return self._generate(PING_PROMPT, genai_types.GenerateContentConfig(max_output_tokens=5))


def build_llm(cfg: LLMConfig) -> CompletionClient:
    provider = (cfg.provider or "").lower().strip()

    if provider == "openai":
        if not cfg.openai_api_key:
            raise ConfigError("OPENAI_API_KEY is required but not set")
        return OpenAIChatLLM(
            api_key=cfg.openai_api_key,
            model=cfg.model,
            temperature=cfg.temperature,
            max_tokens=cfg.max_tokens,
            base_url=cfg.base_url,
            timeout=cfg.timeout,
        )

    if provider == "gemini":
        if not cfg.gemini_api_key:
            raise ConfigError("GEMINI_API_KEY is required but not set")
        return GeminiLLM(
            api_key=cfg.gemini_api_key,
            model=cfg.model,
            temperature=cfg.temperature,
            max_tokens=cfg.max_tokens,
        )

    raise ConfigError(f"Unsupported llm provider: {cfg.provider}. Use provider: openai or gemini")
