import os
import time
import uuid

os.environ.setdefault("DATABASE_URL", "sqlite:///./test_campus_calm.db")
os.environ.setdefault("AUTH_JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from campus_calm.main import app
from campus_calm.api.deps import get_completion_client
from campus_calm.core.db import Base, engine
from campus_calm.core.config import settings


class FakeCompletionClient:
    """Stands in for the completion service; records every call."""

    def __init__(self, reply="That sounds hard. What's weighing on you most?", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def complete(self, messages, temperature=0.7, max_tokens=None, response_format=None):
        self.calls.append({
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
            "response_format": response_format,
        })
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture(autouse=True, scope="session")
def setup_db():
    # fresh db for tests
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture()
def fake_llm_factory():
    return FakeCompletionClient

@pytest.fixture()
def fake_llm():
    fake = FakeCompletionClient()
    app.dependency_overrides[get_completion_client] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_completion_client, None)

@pytest.fixture()
def client(fake_llm):
    return TestClient(app)

def make_token(user_id: str, secret: str | None = None, audience: str | None = None) -> str:
    now = int(time.time())
    payload = {
        "sub": user_id,
        "aud": audience or settings.AUTH_JWT_AUDIENCE,
        "iat": now,
        "exp": now + 3600,
        "role": "authenticated",
    }
    return jwt.encode(payload, secret or settings.AUTH_JWT_SECRET, algorithm="HS256")

@pytest.fixture()
def token_for():
    return make_token

@pytest.fixture()
def auth_headers():
    user_id = str(uuid.uuid4())
    return {"Authorization": f"Bearer {make_token(user_id)}"}
