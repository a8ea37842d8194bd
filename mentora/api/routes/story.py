"""Storytelling routes and the placeholder media they link to."""

from urllib.parse import unquote

from fastapi import APIRouter, Response

from mentora.api.deps import Storyteller
from mentora.schemas.story import StoryImageRead, StoryRequest, StoryResponse
from mentora.stores.models import utcnow

router = APIRouter(tags=["story"])


@router.post("/storytelling/enhanced", response_model=StoryResponse)
@router.post("/story", response_model=StoryResponse)
async def tell_story(request: StoryRequest, storyteller: Storyteller) -> StoryResponse:
    """
    Explain a concept as a story, metaphor, dialogue or interactive walkthrough.

    Image and audio outputs are placeholder links; on provider failure the
    story is a generic explanation and no media is attached.
    """
    outcome = await storyteller.tell(
        request.concept,
        request.mode,
        generate_images=request.generate_images,
        generate_audio=request.generate_audio,
    )
    return StoryResponse(
        story=outcome.story,
        concept=request.concept,
        mode=outcome.mode,
        images=[StoryImageRead.model_validate(i) for i in outcome.images],
        audio_url=outcome.audio_url,
        timestamp=utcnow(),
        fallback_reason=outcome.fallback_reason,
    )


_PLACEHOLDER_SVG = """<svg width="400" height="300" xmlns="http://www.w3.org/2000/svg">
  <rect width="400" height="300" fill="#3B82F6"/>
  <text x="200" y="150" text-anchor="middle" fill="white" font-size="16" font-family="Arial">
    Generated Image: {label}
  </text>
</svg>"""


@router.get("/placeholder-image/{concept_index}")
async def placeholder_image(concept_index: str) -> Response:
    label = (
        unquote(concept_index)
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )
    return Response(content=_PLACEHOLDER_SVG.format(label=label), media_type="image/svg+xml")


@router.get("/placeholder-audio/{concept}")
async def placeholder_audio(concept: str) -> dict:
    return {
        "success": True,
        "message": f"Audio for {unquote(concept)} would be generated here",
        "placeholder": True,
    }
