"""Pydantic schemas for lecturer chat and personas."""

from datetime import datetime

from pydantic import AliasChoices, ConfigDict, Field, field_validator

from mentora.schemas.base import BaseSchema, SuccessResponse
from mentora.services.completion import FallbackReason
from mentora.services.personas import Persona


class PersonaRead(BaseSchema):
    """Lecturer persona as shown to clients."""

    id: str = Field(validation_alias=AliasChoices("key", "id"))
    name: str
    description: str
    personality: str
    tone: str
    emoji: str
    color: str
    teaching_style: str
    response_style: str

    @classmethod
    def from_persona(cls, persona: Persona) -> "PersonaRead":
        return cls.model_validate(persona.model_dump(mode="json"))


class PersonaListResponse(SuccessResponse):
    lecturers: list[PersonaRead]


# Request schemas
class ChatRequest(BaseSchema):
    """
    Request to chat with a lecturer.

    ``lecturerType`` may also be sent as ``persona``. It is validated
    against the registry in the route so unknown personas return 404.
    The message is kept exactly as sent.
    """

    model_config = ConfigDict(str_strip_whitespace=False)

    message: str = Field(..., min_length=1, max_length=10000)
    user_id: str = "anonymous"
    lecturer_type: str = Field(
        "friendly",
        validation_alias=AliasChoices("lecturerType", "lecturer_type", "persona"),
    )
    chat_id: str = "main"

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Message cannot be empty")
        return value


# Response schemas
class ChatResponse(SuccessResponse):
    response: str
    lecturer: PersonaRead
    persona: str
    timestamp: datetime
    mode: str | None = None
    fallback_reason: FallbackReason | None = None


class ConversationTurnRead(BaseSchema):
    role: str
    content: str
    timestamp: datetime
    lecturer: str | None = None


class ConversationHistoryResponse(SuccessResponse):
    user_id: str
    chat_id: str
    messages: list[ConversationTurnRead]
