"""Pytest fixtures for the interview evaluator.

The service modules read their configuration at import, so the environment is
pinned here before any of them is imported. Nothing in the suite talks to a
real database, model API, or push endpoint: the store functions, the model
call, and the notifier are replaced per test.
"""

from __future__ import annotations

import copy
import datetime
import os
import typing as t
from unittest.mock import AsyncMock

os.environ["DEEPSEEK_API_KEY"] = "test-deepseek-key"
os.environ["DEEPSEEK_BASE_URL"] = "https://api.deepseek.com"
os.environ["DEEPSEEK_MODEL"] = "deepseek-chat"
os.environ["MONGODB_URI"] = "mongodb://localhost:27017"
os.environ["MONGO_DB_NAME"] = "mockInterviewTestDB"
os.environ["AUTH_JWT_SECRET"] = "test-jwt-secret-for-evaluator-tests"
os.environ["PUSH_NOTIFICATION_URL"] = ""

import jwt  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from interview_eval import evaluator, main  # noqa: E402

TEST_USER_ID = "user-123"
TEST_JWT_SECRET = os.environ["AUTH_JWT_SECRET"]


def make_token(sub: str = TEST_USER_ID, secret: str = TEST_JWT_SECRET, expires_in: int = 1800) -> str:
    now = datetime.datetime.now(datetime.timezone.utc)
    payload = {
        "sub": sub,
        "iat": int(now.timestamp()),
        "exp": int((now + datetime.timedelta(seconds=expires_in)).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


class FakeStore(object):
    """In-memory stand-in for the document store functions used by main."""

    def __init__(self) -> None:
        self.documents: dict[tuple[str, str], dict[str, t.Any]] = {}
        self.updates: list[tuple[str, str, dict[str, t.Any]]] = []

    def put(self, collection_path: str, doc_id: str, document: dict[str, t.Any]) -> None:
        self.documents[(collection_path, doc_id)] = copy.deepcopy(document)

    async def get_document(self, collection_path: str, doc_id: str) -> dict[str, t.Any] | None:
        document = self.documents.get((collection_path, doc_id))
        return copy.deepcopy(document) if document is not None else None

    async def update_document(self, collection_path: str, doc_id: str, fields: dict[str, t.Any]) -> None:
        self.updates.append((collection_path, doc_id, copy.deepcopy(fields)))
        self.documents[(collection_path, doc_id)].update(copy.deepcopy(fields))


@pytest.fixture
def hash_map_question() -> dict[str, t.Any]:
    return {
        "question": "What is a hash map?",
        "candidateAnswer": "A key-value store",
        "difficulty": "easy",
        "topic": "data structures",
        "keywords": ["hash", "map"],
        "score": 0,
        "explanation": "",
    }


@pytest.fixture
def llm(monkeypatch: pytest.MonkeyPatch) -> AsyncMock:
    """Replace the model call; tests set return_value / side_effect."""
    mock = AsyncMock(return_value='{"score": 4, "explanation": "Good, could mention collisions"}')
    monkeypatch.setattr(evaluator, "_call_llm", mock)
    return mock


@pytest.fixture
def store(monkeypatch: pytest.MonkeyPatch) -> FakeStore:
    fake = FakeStore()
    monkeypatch.setattr(main, "get_document", fake.get_document)
    monkeypatch.setattr(main, "update_document", fake.update_document)
    return fake


@pytest.fixture
def notifier(monkeypatch: pytest.MonkeyPatch) -> AsyncMock:
    mock = AsyncMock(return_value=True)
    monkeypatch.setattr(main, "send_evaluation_notification", mock)
    return mock


@pytest.fixture
def client() -> TestClient:
    return TestClient(main.app)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token()}"}
