import json
import os
from typing import List

import pytest

# Keep the app's own engine off the working directory
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import models  # noqa: E402,F401
from db import Base, get_db  # noqa: E402
from llm import get_hint_text_generator, get_text_generator  # noqa: E402
from main import app  # noqa: E402

PROBLEM_REPLY = json.dumps(
    {
        "problem_text": "Sarah bought 3 boxes of cookies with 24 cookies each. "
        "She gave 1/4 of them away. How many are left?",
        "final_answer": 54,
    }
)


class StubTextGenerator:
    """Deterministic stand-in for the model: canned replies, recorded prompts."""

    def __init__(self, replies: List[str] | None = None, default: str = "Well done!"):
        self.replies = list(replies or [])
        self.default = default
        self.prompts: List[str] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.replies:
            reply = self.replies.pop(0)
            if isinstance(reply, Exception):
                raise reply
            return reply
        return self.default


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def llm():
    return StubTextGenerator()


@pytest.fixture
def client(engine, llm):
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    def _get_db():
        s = TestingSession()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_text_generator] = lambda: llm
    app.dependency_overrides[get_hint_text_generator] = lambda: llm
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
