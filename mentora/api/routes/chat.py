"""API routes for lecturer chat and the persona catalogue."""

from fastapi import APIRouter, HTTPException, status

from mentora.api.deps import Chat, Stores
from mentora.schemas.chat import (
    ChatRequest,
    ChatResponse,
    ConversationHistoryResponse,
    ConversationTurnRead,
    PersonaListResponse,
    PersonaRead,
)
from mentora.services.personas import all_personas, lookup

router = APIRouter(tags=["chat"])


# =============================================================================
# PERSONAS
# =============================================================================


@router.get("/lecturers/types", response_model=PersonaListResponse)
@router.get("/personas", response_model=PersonaListResponse)
async def list_personas() -> PersonaListResponse:
    """List every available lecturer persona."""
    return PersonaListResponse(
        lecturers=[PersonaRead.from_persona(p) for p in all_personas()],
    )


# =============================================================================
# CHAT
# =============================================================================


@router.post("/chat/lecturer", response_model=ChatResponse, response_model_exclude_none=True)
@router.post("/chat", response_model=ChatResponse, response_model_exclude_none=True)
async def chat_with_lecturer(
    request: ChatRequest,
    stores: Stores,
    chat: Chat,
) -> ChatResponse:
    """
    Send a message to a lecturer persona.

    Provider failures do not fail the request: the reply is a canned,
    persona-flavoured fallback and the response carries
    ``mode: "fallback"`` plus the reason.
    """
    persona = lookup(request.lecturer_type)
    if persona is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Invalid lecturer type",
        )

    outcome = await chat.respond(
        stores,
        user_id=request.user_id,
        chat_id=request.chat_id,
        persona=persona,
        message=request.message,
    )

    return ChatResponse(
        response=outcome.response,
        lecturer=PersonaRead.from_persona(persona),
        persona=persona.key.value,
        timestamp=outcome.timestamp,
        mode="fallback" if outcome.is_fallback else None,
        fallback_reason=outcome.fallback_reason,
    )


@router.get("/chat/{user_id}/{chat_id}/history", response_model=ConversationHistoryResponse)
async def get_chat_history(
    user_id: str,
    chat_id: str,
    stores: Stores,
) -> ConversationHistoryResponse:
    """Return the retained turns of one conversation, oldest first."""
    turns = stores.conversations.list(user_id, chat_id)
    return ConversationHistoryResponse(
        user_id=user_id,
        chat_id=chat_id,
        messages=[ConversationTurnRead.model_validate(t) for t in turns],
    )
