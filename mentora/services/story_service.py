"""Illustrated storytelling built on the completion gateway."""

import logging
import time
from dataclasses import dataclass, field
from urllib.parse import quote

from mentora.config import Settings
from mentora.services.completion import CompletionGateway, FallbackReason
from mentora.services.prompt_builder import build_story_prompt

logger = logging.getLogger(__name__)

FALLBACK_STORY = (
    "Here's a simple explanation of {concept}: This is an important concept that "
    "involves multiple interconnected elements. To better understand it, think of it "
    "as a system where different components work together to achieve a specific "
    "outcome. (Fallback mode - please check API credits for enhanced storytelling)"
)


@dataclass
class StoryImage:
    id: str
    prompt: str
    url: str
    generated: bool = True


@dataclass
class StoryOutcome:
    story: str
    mode: str
    images: list[StoryImage] = field(default_factory=list)
    audio_url: str | None = None
    fallback_reason: FallbackReason | None = None


def placeholder_images(concept: str) -> list[StoryImage]:
    """Illustration placeholders served by the media routes."""
    prompts = [
        f"Illustration for educational story about {concept}, colorful and engaging, suitable for learning",
        f"Visual representation of {concept}, educational illustration style, clear and informative",
        f"Scene from story about {concept}, cartoon style, educational and friendly",
    ]
    stamp = int(time.time() * 1000)
    return [
        StoryImage(
            id=f"img_{stamp}_{index}",
            prompt=prompt,
            url=f"/api/placeholder-image/{quote(concept, safe='')}_{index}",
        )
        for index, prompt in enumerate(prompts)
    ]


class StoryService:
    def __init__(self, settings: Settings, gateway: CompletionGateway):
        self.settings = settings
        self.gateway = gateway

    async def tell(
        self,
        concept: str,
        mode: str = "story",
        *,
        generate_images: bool = True,
        generate_audio: bool = True,
    ) -> StoryOutcome:
        prompt = build_story_prompt(concept, mode, self.settings)
        result = await self.gateway.complete(
            prompt.system,
            prompt.user,
            prompt.temperature,
            prompt.max_tokens,
        )

        if not result.ok:
            logger.info("Story for %r answered in fallback mode (%s)", concept, result.reason.value)
            return StoryOutcome(
                story=FALLBACK_STORY.format(concept=concept),
                mode="fallback",
                fallback_reason=result.reason,
            )

        outcome = StoryOutcome(story=result.content, mode=mode)
        if generate_images:
            outcome.images = placeholder_images(concept)
        if generate_audio:
            outcome.audio_url = f"/api/placeholder-audio/{quote(concept, safe='')}"
        return outcome
