"""Shared fixtures for the prompt generation tests."""

import pytest
from fastapi.testclient import TestClient

from promptmaster.db import Database
from promptmaster.main import app, get_store
from promptmaster.schemas import PromptRequest
from promptmaster.storage import InMemoryPromptStore, SqlPromptStore


@pytest.fixture
def sample_request():
    return PromptRequest(
        title="AI",
        context="short blog",
        purpose="to teach",
        tone="casual",
        length="short",
    )


@pytest.fixture
def detailed_request():
    return PromptRequest(
        title="Understanding neural networks",
        context="A tutorial that walks through how layers transform inputs",
        purpose="explain how backpropagation adjusts the weights of a model",
        tone="educational",
        length="long",
    )


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.initialize()
    yield db
    db.close()


@pytest.fixture
def sql_store(database):
    return SqlPromptStore(database)


@pytest.fixture
def memory_store():
    return InMemoryPromptStore()


@pytest.fixture
def client(memory_store):
    app.dependency_overrides[get_store] = lambda: memory_store
    yield TestClient(app)
    app.dependency_overrides.clear()
