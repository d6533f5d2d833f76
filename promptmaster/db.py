"""SQLAlchemy tables and engine/session setup for the prompt store."""

from contextlib import contextmanager
import logging
from typing import Iterator, Optional

from sqlalchemy import JSON, Column, Integer, Text, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


class PromptModel(Base):
    __tablename__ = "prompts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    context = Column(Text, nullable=False)
    purpose = Column(Text, nullable=False)
    tone = Column(Text, nullable=False)
    length = Column(Text, nullable=False)
    generated_prompt = Column(Text, nullable=False)
    alternative_prompts = Column(JSON, nullable=False)

    def __repr__(self) -> str:
        return f"<PromptModel(id={self.id}, title='{self.title}')>"


class PromptTemplateModel(Base):
    __tablename__ = "prompt_templates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    template = Column(Text, nullable=False)
    fields = Column(JSON, nullable=False)

    def __repr__(self) -> str:
        return f"<PromptTemplateModel(id={self.id}, name='{self.name}')>"


class Database:
    """Owns the engine and hands out transactional sessions."""

    def __init__(self, database_url: str, echo: bool = False) -> None:
        self.database_url = database_url
        self.echo = echo
        self.engine: Optional[Engine] = None
        self.session_maker = None

    def initialize(self) -> None:
        logger.info("Initializing database connection")
        engine_kwargs = {"echo": self.echo}
        if self.database_url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            # In-memory SQLite must share one connection across sessions.
            if ":memory:" in self.database_url or self.database_url == "sqlite://":
                engine_kwargs["poolclass"] = StaticPool
        self.engine = create_engine(self.database_url, **engine_kwargs)
        Base.metadata.create_all(self.engine)
        self.session_maker = sessionmaker(
            bind=self.engine, expire_on_commit=False, autoflush=False
        )
        logger.info("Database connection initialized")

    def close(self) -> None:
        if self.engine is not None:
            logger.info("Closing database connection")
            self.engine.dispose()
            self.engine = None
            self.session_maker = None

    @contextmanager
    def session(self) -> Iterator[Session]:
        if self.session_maker is None:
            raise RuntimeError("Database not initialized. Call initialize() first.")

        session = self.session_maker()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
