from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.main import app, get_assistant, get_store
from app.store import TicketStore


class FakeAssistant:
    def __init__(self, text: str = "Have you tried turning it off and on again?"):
        self.text = text
        self.messages = []

    def reply(self, message: str) -> str:
        self.messages.append(message)
        return self.text


@pytest.fixture
def store(tmp_path) -> TicketStore:
    s = TicketStore(str(tmp_path / "tickets.db"))
    s.init_schema()
    return s


@pytest.fixture
def assistant() -> FakeAssistant:
    return FakeAssistant()


@pytest.fixture
def client(store, assistant):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_assistant] = lambda: assistant
    yield TestClient(app)
    app.dependency_overrides.clear()
