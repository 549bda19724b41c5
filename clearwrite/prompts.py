"""Prompt templates for the rewrite call."""

from typing import Optional

from clearwrite.context import WritingContext, context_string

REWRITE_INSTRUCTION = (
    "Please rewrite the following text to be more clear and concise. "
    "Just return the improved text without any explanations or additional comments:"
)

CONTEXT_INTRO = (
    "Here is some previous writing from the same author. Use it to keep the "
    "terminology, voice and subject matter consistent:"
)

TONE_TEMPLATE = "Use a {tone} tone."


def build_prompt(text: str, context: str = "", tone: Optional[str] = None) -> str:
    """Assemble the rewrite prompt.

    The input text is quoted verbatim at the end. The context block and the
    tone sentence only appear when they carry something.
    """
    sections = []

    if context:
        sections.append(f"{CONTEXT_INTRO}\n\n{context}")

    if tone and tone.strip():
        sections.append(TONE_TEMPLATE.format(tone=tone.strip()))

    sections.append(REWRITE_INSTRUCTION)
    sections.append(f'"{text}"')
    return "\n\n".join(sections)


def build_prompt_from_context(text: str, ctx: WritingContext) -> str:
    return build_prompt(text, context_string(ctx), ctx.tone)
