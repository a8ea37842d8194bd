"""Lecturer chat: persona prompt, provider call, fallback, history."""

import logging
from dataclasses import dataclass
from datetime import datetime

from mentora.config import Settings
from mentora.services.completion import CompletionGateway, FallbackReason
from mentora.services.personas import Persona
from mentora.services.prompt_builder import AssembledPrompt, build_chat_prompt
from mentora.stores.base import StoreBundle
from mentora.stores.models import ConversationTurn, utcnow

logger = logging.getLogger(__name__)


def fallback_reply(persona: Persona, message: str) -> str:
    """Persona-flavoured canned reply that still echoes the question."""
    return f'{persona.fallback_line} You asked about: "{message}". (Note: Using fallback mode)'


@dataclass(frozen=True)
class ChatOutcome:
    response: str
    persona: Persona
    prompt: AssembledPrompt
    timestamp: datetime
    fallback_reason: FallbackReason | None = None

    @property
    def is_fallback(self) -> bool:
        return self.fallback_reason is not None


class ChatService:
    """Service for lecturer-persona chat with uploaded-file grounding."""

    def __init__(self, settings: Settings, gateway: CompletionGateway):
        self.settings = settings
        self.gateway = gateway

    async def respond(
        self,
        stores: StoreBundle,
        *,
        user_id: str,
        chat_id: str,
        persona: Persona,
        message: str,
    ) -> ChatOutcome:
        """
        Answer ``message`` as ``persona`` and record the exchange.

        The user turn and an assistant turn are always appended together,
        whether the assistant text came from the provider or the fallback.
        """
        asked_at = utcnow()
        prompt = build_chat_prompt(
            persona,
            message,
            stores.files.get(user_id),
            self.settings,
        )

        result = await self.gateway.complete(
            prompt.system,
            prompt.user,
            prompt.temperature,
            prompt.max_tokens,
        )

        if result.ok:
            answer = result.content
        else:
            logger.info(
                "Chat for %s/%s answered in fallback mode (%s)",
                user_id, chat_id, result.reason.value,
            )
            answer = fallback_reply(persona, message)

        answered_at = utcnow()
        stores.conversations.append(
            user_id,
            chat_id,
            ConversationTurn(role="user", content=message, timestamp=asked_at),
            ConversationTurn(
                role="assistant",
                content=answer,
                timestamp=answered_at,
                lecturer=persona.key.value,
            ),
        )

        return ChatOutcome(
            response=answer,
            persona=persona,
            prompt=prompt,
            timestamp=answered_at,
            fallback_reason=result.reason,
        )
