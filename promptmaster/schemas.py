"""Pydantic schemas for the prompt generation API."""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

Tone = Literal["professional", "casual", "educational", "formal"]
Length = Literal["short", "medium", "long"]


class PromptRequest(BaseModel):
    """Inbound payload describing the content a prompt should ask for."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1, description="Topic title (e.g., AI).")
    context: str = Field(
        ..., min_length=1, description="What the content is about or should be."
    )
    purpose: str = Field(
        ..., min_length=1, description="What the content should achieve."
    )
    tone: Tone = Field(
        ..., description="professional | casual | educational | formal"
    )
    length: Length = Field(..., description="short | medium | long")


class PromptResponse(BaseModel):
    """Stored prompt record returned to the client."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    title: str
    context: str
    purpose: str
    tone: str
    length: str
    generated_prompt: str = Field(..., alias="generatedPrompt")
    alternative_prompts: List[str] = Field(..., alias="alternativePrompts")


class TemplateResponse(BaseModel):
    """Reusable prompt template with its placeholder names."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    template: str
    fields: List[str]


class ErrorResponse(BaseModel):
    error: str
