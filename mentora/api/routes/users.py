"""User lookup routes."""

from fastapi import APIRouter

from mentora.api.deps import Stores
from mentora.schemas.user import UserSearchResponse, UserSummary

router = APIRouter(prefix="/users", tags=["users"])

SEARCH_MIN_QUERY_LENGTH = 2
SEARCH_RESULT_LIMIT = 10


@router.get("/search", response_model=UserSearchResponse)
async def search_users(stores: Stores, query: str | None = None) -> UserSearchResponse:
    """
    Find users whose name or email contains ``query`` (case-insensitive).

    Queries shorter than two characters return no results.
    """
    if not query or len(query) < SEARCH_MIN_QUERY_LENGTH:
        return UserSearchResponse(users=[])

    matches = stores.users.search(query, limit=SEARCH_RESULT_LIMIT)
    return UserSearchResponse(users=[UserSummary.model_validate(u) for u in matches])
