from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from recipeagent.shared.config.settings import settings
from recipeagent.shared.concurrency import LLM_REQUEST_SEMAPHORE
from recipeagent.shared.errors import (
    ConfigurationAbsent,
    UpstreamParseFailure,
    UpstreamStatusFailure,
    UpstreamTransportFailure,
)

log = logging.getLogger("openai")

PROVIDER = "llm"


class ChatClient:
    """
    Thin client for an OpenAI-compatible ``/chat/completions`` endpoint.
    Every failure is raised as one of the ``UpstreamError`` subclasses.
    """

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 4096,
        request_timeout: float = 60,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.request_timeout = request_timeout
        self._chat_url = f"{base_url.rstrip('/')}/chat/completions"
        self._http_client = http_client

    @classmethod
    def from_settings(cls, http_client: Optional[httpx.AsyncClient] = None) -> "ChatClient":
        return cls(
            api_key=settings.OPENAI_API_KEY,
            base_url=settings.OPENAI_BASE_URL,
            model=settings.CHAT_MODEL,
            temperature=settings.TEMPERATURE,
            max_tokens=settings.MAX_TOKENS,
            request_timeout=settings.LLM_REQUEST_TIMEOUT,
            http_client=http_client,
        )

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def _post(self, payload: Dict[str, Any], timeout: httpx.Timeout) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.post(self._chat_url, headers=self._headers(), json=payload, timeout=timeout)
        async with httpx.AsyncClient(timeout=timeout) as client:
            return await client.post(self._chat_url, headers=self._headers(), json=payload)

    async def complete_chat(
        self,
        messages: List[Dict[str, str]],
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        request_timeout: Optional[float] = None,
    ) -> str:
        """
        Send one non-streaming completion request and return the first
        choice's message content.
        """
        if not self.configured:
            raise ConfigurationAbsent(PROVIDER, "API key is not configured")

        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature if temperature is not None else self.temperature,
            "max_tokens": max_tokens if max_tokens is not None else self.max_tokens,
            "stream": False,
        }
        timeout = httpx.Timeout(request_timeout or self.request_timeout)

        async with LLM_REQUEST_SEMAPHORE:
            try:
                resp = await self._post(payload, timeout)
                resp.raise_for_status()
            except httpx.TimeoutException as e:
                raise UpstreamTransportFailure(PROVIDER, f"timed out: {e}") from e
            except httpx.HTTPStatusError as e:
                raise UpstreamStatusFailure(PROVIDER, e.response.status_code, e.response.text) from e
            except httpx.RequestError as e:
                raise UpstreamTransportFailure(PROVIDER, str(e)) from e

        try:
            data = resp.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise UpstreamParseFailure(PROVIDER, f"unexpected response body: {e}") from e
        return content or ""
