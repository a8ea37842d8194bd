"""Services for persona chat, storytelling, and external integrations."""

from mentora.services.chat_service import ChatService
from mentora.services.completion import CompletionGateway, CompletionResult, FallbackReason
from mentora.services.story_service import StoryService
from mentora.services.text_extractor import text_extractor

__all__ = [
    "ChatService",
    "CompletionGateway",
    "CompletionResult",
    "FallbackReason",
    "StoryService",
    "text_extractor",
]
