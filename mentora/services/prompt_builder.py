"""System prompt assembly for lecturer chat and storytelling."""

from dataclasses import dataclass

from mentora.config import Settings
from mentora.services.personas import PERSONAS, Persona


@dataclass(frozen=True)
class AssembledPrompt:
    """Everything the completion gateway needs for one request."""

    system: str | None
    user: str
    temperature: float
    max_tokens: int


def file_excerpt(buffer: str, max_chars: int) -> str:
    """Return the head of a user's uploaded-text buffer, or "" if empty."""
    if not buffer:
        return ""
    return buffer[:max_chars]


def temperature_for(persona: Persona, settings: Settings) -> float:
    """Creative personas sample hotter than the rest."""
    if persona.creative:
        return settings.creative_temperature
    return settings.chat_temperature


def _directive_lines() -> str:
    return "\n".join(
        f"- If the lecturer type is '{key.value}', {p.directive[0].lower()}{p.directive[1:]}"
        for key, p in PERSONAS.items()
    )


def build_system_prompt(persona: Persona, excerpt: str = "") -> str:
    """
    Build the system instruction for a persona.

    The persona's identity, personality, teaching and response style and
    tone are injected verbatim, followed by the per-persona directives and
    the uploaded-file excerpt (if any) as grounding context.
    """
    file_context = f"\n\nStudent's uploaded materials: {excerpt}..." if excerpt else ""

    return f"""You are {persona.name}, an AI lecturer with this personality: {persona.personality}

Teaching Style: {persona.teaching_style}
Response Style: {persona.response_style}
Tone: {persona.tone}

IMPORTANT INSTRUCTIONS:
- Always respond exactly as {persona.name} would
- Match the specified response style and tone perfectly
- Your lecturer type is '{persona.key.value}': {persona.directive}
{_directive_lines()}

Context from student's files: {file_context}"""


def build_chat_prompt(
    persona: Persona,
    message: str,
    file_buffer: str,
    settings: Settings,
) -> AssembledPrompt:
    excerpt = file_excerpt(file_buffer, settings.file_context_max_chars)
    return AssembledPrompt(
        system=build_system_prompt(persona, excerpt),
        user=message,
        temperature=temperature_for(persona, settings),
        max_tokens=settings.chat_max_tokens,
    )


# Story modes -> prompt template. Unknown modes use the default.
_STORY_TEMPLATES = {
    "story": (
        'Create an engaging, educational story that explains "{concept}". '
        "Make it visual and descriptive so it could be illustrated. "
        "Include specific scenes that could be turned into images."
    ),
    "metaphor": (
        'Explain "{concept}" using a detailed visual metaphor. '
        "Describe the metaphor in a way that could be illustrated with images."
    ),
    "dialogue": (
        'Create a dialogue between characters discussing "{concept}". '
        "Include scene descriptions that could be illustrated."
    ),
    "interactive": (
        'Create an interactive explanation of "{concept}" with step-by-step '
        "visual elements that could be illustrated."
    ),
}
_DEFAULT_STORY_TEMPLATE = 'Explain "{concept}" in an engaging, visual way with descriptive scenes.'


def build_story_prompt(concept: str, mode: str, settings: Settings) -> AssembledPrompt:
    template = _STORY_TEMPLATES.get(mode, _DEFAULT_STORY_TEMPLATE)
    return AssembledPrompt(
        system=None,
        user=template.format(concept=concept),
        temperature=settings.story_temperature,
        max_tokens=settings.story_max_tokens,
    )
