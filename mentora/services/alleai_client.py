"""Thin async HTTP client for the Alle AI multi-model chat endpoint."""

from typing import Any

import httpx

from mentora.config import Settings


class AlleAIClient:
    """
    Async client for Alle AI chat completions.

    One request fans out to every model in ``models``; the reply is keyed
    by model identifier::

        {"success": true,
         "responses": {"responses": {"gpt-4o": {"message": {"content": "..."}}}}}

    This class only does transport. It raises ``httpx`` errors and returns
    the decoded JSON body untouched; interpreting the body is up to the
    caller.
    """

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.settings.alleai_base_url,
                headers={
                    "Authorization": f"Bearer {self.settings.alleai_api_key}",
                    "Content-Type": "application/json",
                },
                timeout=httpx.Timeout(self.settings.llm_timeout_seconds, connect=10.0),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()

    @staticmethod
    def build_payload(
        *,
        models: list[str],
        system_prompt: str | None,
        user_message: str,
        temperature: float,
        max_tokens: int,
    ) -> dict[str, Any]:
        turn: dict[str, list[dict[str, str]]] = {}
        if system_prompt:
            turn["system"] = [{"type": "text", "text": system_prompt}]
        turn["user"] = [{"type": "text", "text": user_message}]

        return {
            "models": models,
            "messages": [turn],
            "web_search": False,
            "temperature": temperature,
            "max_tokens": max_tokens,
            "stream": False,
        }

    async def chat(self, payload: dict[str, Any]) -> Any:
        """POST a completion request and return the decoded JSON body."""
        response = await self.client.post(self.settings.alleai_chat_path, json=payload)
        response.raise_for_status()
        return response.json()
