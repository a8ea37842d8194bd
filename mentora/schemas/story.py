"""Storytelling schemas."""

from datetime import datetime

from pydantic import Field

from mentora.schemas.base import BaseSchema, SuccessResponse
from mentora.services.completion import FallbackReason


class StoryRequest(BaseSchema):
    concept: str = Field(..., min_length=1, max_length=2000)
    mode: str = "story"
    user_id: str | None = None
    generate_images: bool = True
    generate_audio: bool = True


class StoryImageRead(BaseSchema):
    id: str
    prompt: str
    url: str
    generated: bool


class StoryResponse(SuccessResponse):
    story: str
    concept: str
    mode: str
    images: list[StoryImageRead]
    audio_url: str | None
    timestamp: datetime
    fallback_reason: FallbackReason | None = None
