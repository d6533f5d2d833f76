"""Input enhancement pipeline for prompt generation.

This module normalizes raw user fields, infers the content type from keyword
hints, and derives the purpose sentence used by the prompt templates.
"""

from dataclasses import dataclass, replace
from typing import List, Tuple

from promptmaster.schemas import PromptRequest


TITLE_PREFIXES = (
    "introduction to",
    "guide to",
    "understanding",
    "the basics of",
)

# Order matters: the first keyword found anywhere in the context wins.
CONTENT_TYPES: List[Tuple[str, str]] = [
    ("poem", "educational poem"),
    ("story", "narrative"),
    ("blog", "blog post"),
    ("article", "article"),
    ("guide", "comprehensive guide"),
    ("tutorial", "step-by-step tutorial"),
    ("explanation", "detailed explanation"),
    ("overview", "overview"),
    ("analysis", "analysis"),
    ("report", "report"),
    ("summary", "summary"),
    ("review", "review"),
]
DEFAULT_CONTENT_TYPE = "comprehensive guide"

LENGTH_DESCRIPTIONS = {
    "short": "1-2 concise paragraphs with clear points",
    "medium": "3-4 detailed paragraphs with examples",
    "long": "comprehensive coverage with multiple sections and detailed explanations",
}

TONE_DESCRIPTIONS = {
    "professional": "formal yet accessible",
    "casual": "friendly and conversational",
    "educational": "clear and instructive",
    "formal": "structured and detailed",
}

MIN_WORDS = 5
SHORT_TITLE_LENGTH = 10


@dataclass(frozen=True)
class EnhancedInput:
    """Normalized payload consumed by prompt building."""

    title: str
    context: str
    purpose: str
    tone: str
    length: str


def _word_count(text: str) -> int:
    # Any whitespace run separates words; blank text has none.
    return len(text.split())


def _improve_title(title: str) -> str:
    clean_title = title.strip()
    if len(clean_title) < SHORT_TITLE_LENGTH:
        return f"Introduction to {clean_title}"
    return clean_title


def _expand_context(context: str, title: str) -> str:
    return (
        f"This {classify_content_type(context)} aims to explain {title} in a clear "
        "and comprehensive way, focusing on key concepts and practical applications"
    )


def _enhance_purpose(title: str) -> str:
    return (
        f"help readers understand {title} through clear explanations "
        "and practical examples"
    )


def classify_content_type(context: str) -> str:
    """Return the content-type label for the first table keyword in `context`."""
    context_lower = context.lower()
    for keyword, label in CONTENT_TYPES:
        if keyword in context_lower:
            return label
    return DEFAULT_CONTENT_TYPE


def infer_purpose_context(purpose: str, content_type: str) -> str:
    """Turn the user's purpose into the goal sentence of the main prompt."""
    purpose_lower = purpose.lower()
    if "teach" in purpose_lower or "educate" in purpose_lower:
        return (
            f"This {content_type} should effectively educate and inform readers "
            "through clear explanations and examples."
        )
    if "explain" in purpose_lower or "introduce" in purpose_lower:
        return (
            "The content should break down complex concepts into "
            "easy-to-understand explanations."
        )
    return (
        f"This {content_type} should effectively {purpose} while maintaining "
        "clarity and engagement."
    )


def describe_length(length: str) -> str:
    """Map a length choice to its prose description, defaulting to medium."""
    return LENGTH_DESCRIPTIONS.get(length, LENGTH_DESCRIPTIONS["medium"])


def describe_tone(tone: str) -> str:
    """Map a tone choice to its prose description, defaulting to professional."""
    return TONE_DESCRIPTIONS.get(tone, TONE_DESCRIPTIONS["professional"])


def enhance_input(request: PromptRequest) -> EnhancedInput:
    """Build an `EnhancedInput` with under-specified fields rewritten.

    The request itself is never modified; each rule is applied independently.
    """
    enhanced = EnhancedInput(
        title=request.title,
        context=request.context,
        purpose=request.purpose,
        tone=request.tone,
        length=request.length,
    )

    if not enhanced.title.lower().startswith(TITLE_PREFIXES):
        enhanced = replace(enhanced, title=_improve_title(enhanced.title))

    # Brief context is regenerated from the original text's content type.
    if _word_count(enhanced.context) < MIN_WORDS:
        enhanced = replace(
            enhanced, context=_expand_context(enhanced.context, enhanced.title)
        )

    if _word_count(enhanced.purpose) < MIN_WORDS:
        enhanced = replace(enhanced, purpose=_enhance_purpose(enhanced.title))

    return enhanced
