"""
Completion gateway: one provider call, an explicit result, no exceptions.

Chat and storytelling favour conversational continuity over strict
correctness, so provider problems never surface as request errors.
Instead ``CompletionGateway.complete`` returns a ``CompletionResult``
that is either a success carrying content or a fallback carrying a
``FallbackReason``; callers substitute their own canned text and report
degraded mode.

There is deliberately no retry loop: a single attempt, then fallback.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx

from mentora.config import Settings
from mentora.services.alleai_client import AlleAIClient

logger = logging.getLogger(__name__)


class FallbackReason(str, Enum):
    NO_API_KEY = "no_api_key"
    TIMEOUT = "timeout"
    TRANSPORT_ERROR = "transport_error"
    HTTP_ERROR = "http_error"
    MALFORMED_RESPONSE = "malformed_response"
    EMPTY_CONTENT = "empty_content"
    PROVIDER_ERROR = "provider_error"


@dataclass(frozen=True)
class CompletionResult:
    content: str | None = None
    model: str | None = None
    reason: FallbackReason | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    @classmethod
    def success(cls, content: str, model: str) -> "CompletionResult":
        return cls(content=content, model=model)

    @classmethod
    def fallback(cls, reason: FallbackReason, detail: str = "") -> "CompletionResult":
        return cls(reason=reason, detail=detail)


class MalformedResponseError(ValueError):
    """Provider replied with a body we cannot interpret."""


def select_model_content(body: Any, preferred: list[str]) -> tuple[str, str] | None:
    """
    Pick the first usable model reply from a provider body.

    Preferred models are tried in configured order, then any other model
    keys in sorted order, so the choice never depends on dict ordering.
    Returns ``(model, content)`` or None if no model produced content.

    Raises MalformedResponseError if the body does not have the expected
    nested shape at all.
    """
    if not isinstance(body, dict):
        raise MalformedResponseError("response body is not an object")

    outer = body.get("responses")
    models = outer.get("responses") if isinstance(outer, dict) else None
    if not isinstance(models, dict):
        raise MalformedResponseError("missing responses.responses mapping")

    ordered = [m for m in preferred if m in models]
    ordered += sorted(k for k in models if k not in preferred)

    for model in ordered:
        entry = models[model]
        if not isinstance(entry, dict):
            continue
        message = entry.get("message")
        if not isinstance(message, dict):
            continue
        content = message.get("content")
        if isinstance(content, str) and content.strip():
            return model, content
    return None


class CompletionGateway:
    """Sends assembled prompts to the provider and classifies the outcome."""

    def __init__(self, settings: Settings, client: AlleAIClient | None = None):
        self.settings = settings
        self.client = client or AlleAIClient(settings)

    async def close(self) -> None:
        await self.client.close()

    async def complete(
        self,
        system_prompt: str | None,
        user_message: str,
        temperature: float,
        max_tokens: int,
    ) -> CompletionResult:
        if not self.settings.alleai_api_key:
            return CompletionResult.fallback(
                FallbackReason.NO_API_KEY, "ALLEAI_API_KEY is not configured"
            )

        payload = self.client.build_payload(
            models=self.settings.llm_models,
            system_prompt=system_prompt,
            user_message=user_message,
            temperature=temperature,
            max_tokens=max_tokens,
        )

        try:
            body = await self.client.chat(payload)
        except httpx.TimeoutException as e:
            return self._fallback(FallbackReason.TIMEOUT, e)
        except httpx.HTTPStatusError as e:
            return self._fallback(
                FallbackReason.HTTP_ERROR,
                f"provider returned HTTP {e.response.status_code}",
            )
        except httpx.TransportError as e:
            return self._fallback(FallbackReason.TRANSPORT_ERROR, e)
        except ValueError as e:
            # Body was not JSON
            return self._fallback(FallbackReason.MALFORMED_RESPONSE, e)
        except Exception as e:
            logger.exception("Unexpected error calling completion provider")
            return self._fallback(FallbackReason.PROVIDER_ERROR, e)

        if isinstance(body, dict) and body.get("success") is False:
            return self._fallback(
                FallbackReason.PROVIDER_ERROR,
                str(body.get("error") or "provider reported failure"),
            )

        try:
            selected = select_model_content(body, self.settings.llm_models)
        except MalformedResponseError as e:
            return self._fallback(FallbackReason.MALFORMED_RESPONSE, e)

        if selected is None:
            return self._fallback(FallbackReason.EMPTY_CONTENT, "no model returned content")

        model, content = selected
        return CompletionResult.success(content, model)

    @staticmethod
    def _fallback(reason: FallbackReason, error: Exception | str) -> CompletionResult:
        detail = str(error)
        logger.warning("Completion provider unavailable (%s): %s", reason.value, detail)
        return CompletionResult.fallback(reason, detail)
