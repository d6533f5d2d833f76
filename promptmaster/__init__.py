"""Prompt enhancement, templating, and generation package."""

from .generator import PromptDraft, PromptGenerator
from .pipeline import (
    EnhancedInput,
    classify_content_type,
    describe_length,
    describe_tone,
    enhance_input,
    infer_purpose_context,
)
from .prompting import build_alternative_prompts, build_generation_prompt
from .schemas import PromptRequest, PromptResponse, TemplateResponse

__all__ = [
    "EnhancedInput",
    "PromptDraft",
    "PromptGenerator",
    "PromptRequest",
    "PromptResponse",
    "TemplateResponse",
    "build_alternative_prompts",
    "build_generation_prompt",
    "classify_content_type",
    "describe_length",
    "describe_tone",
    "enhance_input",
    "infer_purpose_context",
]
