"""Prompt generation utilities.

This module ties enhancement and templating together and exposes a single
generator class used by the API layer. Generation is a pure function of its
input: persistence is left to the caller.
"""

from dataclasses import dataclass
import logging
from typing import Tuple

from promptmaster.pipeline import (
    classify_content_type,
    enhance_input,
    infer_purpose_context,
)
from promptmaster.prompting import build_alternative_prompts, build_generation_prompt
from promptmaster.schemas import PromptRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PromptDraft:
    """Enhanced fields plus generated text, before the store assigns an id."""

    title: str
    context: str
    purpose: str
    tone: str
    length: str
    generated_prompt: str
    alternative_prompts: Tuple[str, str, str]


class PromptGenerator:
    """Generates a main prompt and three alternatives from user fields."""

    def generate(self, request: PromptRequest) -> PromptDraft:
        """Enhance the request and render every prompt template.

        Content type and purpose context are derived from the enhanced fields
        only; the raw request is not consulted after enhancement.
        """
        item = enhance_input(request)
        content_type = classify_content_type(item.context)
        purpose_context = infer_purpose_context(item.purpose, content_type)
        logger.debug(
            "Enhanced input title=%r content_type=%r", item.title, content_type
        )

        generated_prompt = build_generation_prompt(item, content_type, purpose_context)
        educational, question_answer, narrative = build_alternative_prompts(
            item, content_type, purpose_context
        )

        return PromptDraft(
            title=item.title,
            context=item.context,
            purpose=item.purpose,
            tone=item.tone,
            length=item.length,
            generated_prompt=generated_prompt,
            alternative_prompts=(educational, question_answer, narrative),
        )

