"""Persistence for generated prompts and the template catalog."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
from typing import Dict, List, Tuple

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from promptmaster.db import Database, PromptModel, PromptTemplateModel
from promptmaster.exceptions import StorageError
from promptmaster.generator import PromptDraft

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES: List[Dict] = [
    {
        "name": "Blog Post",
        "description": "Generate a blog post about a specific topic",
        "template": "Write a {tone} {length} blog post about {context}. The goal is to {purpose}.",
        "fields": ["context", "tone", "length", "purpose"],
    },
    {
        "name": "Social Media",
        "description": "Create engaging social media content",
        "template": "Create a {tone} {length} social media post about {context} that will {purpose}.",
        "fields": ["context", "tone", "length", "purpose"],
    },
]


@dataclass(frozen=True)
class PromptRecord:
    id: int
    title: str
    context: str
    purpose: str
    tone: str
    length: str
    generated_prompt: str
    alternative_prompts: Tuple[str, ...]


@dataclass(frozen=True)
class PromptTemplate:
    id: int
    name: str
    description: str
    template: str
    fields: Tuple[str, ...]


class PromptStore(ABC):
    @abstractmethod
    def save(self, draft: PromptDraft) -> PromptRecord: ...

    @abstractmethod
    def list_templates(self) -> List[PromptTemplate]: ...


class InMemoryPromptStore(PromptStore):
    """Process-local store, handy for tests and throwaway runs."""

    def __init__(self) -> None:
        self._prompts: Dict[int, PromptRecord] = {}
        self._templates: List[PromptTemplate] = []

    def save(self, draft: PromptDraft) -> PromptRecord:
        record = PromptRecord(
            id=len(self._prompts) + 1,
            title=draft.title,
            context=draft.context,
            purpose=draft.purpose,
            tone=draft.tone,
            length=draft.length,
            generated_prompt=draft.generated_prompt,
            alternative_prompts=tuple(draft.alternative_prompts),
        )
        self._prompts[record.id] = record
        return record

    def list_templates(self) -> List[PromptTemplate]:
        if not self._templates:
            logger.info("Creating default templates")
            self._templates = [
                PromptTemplate(
                    id=index,
                    name=item["name"],
                    description=item["description"],
                    template=item["template"],
                    fields=tuple(item["fields"]),
                )
                for index, item in enumerate(DEFAULT_TEMPLATES, start=1)
            ]
        return list(self._templates)


def _to_record(row: PromptModel) -> PromptRecord:
    return PromptRecord(
        id=row.id,
        title=row.title,
        context=row.context,
        purpose=row.purpose,
        tone=row.tone,
        length=row.length,
        generated_prompt=row.generated_prompt,
        alternative_prompts=tuple(row.alternative_prompts),
    )


def _to_template(row: PromptTemplateModel) -> PromptTemplate:
    return PromptTemplate(
        id=row.id,
        name=row.name,
        description=row.description,
        template=row.template,
        fields=tuple(row.fields),
    )


class SqlPromptStore(PromptStore):
    """Store backed by the `prompts` and `prompt_templates` tables."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def save(self, draft: PromptDraft) -> PromptRecord:
        try:
            with self.database.session() as session:
                row = PromptModel(
                    title=draft.title,
                    context=draft.context,
                    purpose=draft.purpose,
                    tone=draft.tone,
                    length=draft.length,
                    generated_prompt=draft.generated_prompt,
                    alternative_prompts=list(draft.alternative_prompts),
                )
                session.add(row)
                session.flush()
                record = _to_record(row)
        except SQLAlchemyError as exc:
            logger.exception("Error saving generated prompt")
            raise StorageError(f"Failed to generate prompt: {exc}") from exc

        logger.info("Stored prompt id=%s", record.id)
        return record

    def list_templates(self) -> List[PromptTemplate]:
        """Return all templates, seeding the defaults when the table is empty."""
        try:
            with self.database.session() as session:
                rows = list(session.scalars(select(PromptTemplateModel)))
                if not rows:
                    logger.info("Creating default templates")
                    rows = [PromptTemplateModel(**item) for item in DEFAULT_TEMPLATES]
                    session.add_all(rows)
                    session.flush()
                return [_to_template(row) for row in rows]
        except SQLAlchemyError as exc:
            logger.exception("Error fetching templates")
            raise StorageError(f"Failed to fetch templates: {exc}") from exc
