import httpx
import openai
import pytest
from fastapi.testclient import TestClient
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from studybuddy.core.config import settings
from studybuddy.core.dependencies import get_db, get_llm_factory
from studybuddy.db.base import Base, create_db_engine
from studybuddy.main import app
import studybuddy.models  # noqa: F401


class UnreachableChatModel(FakeListChatModel):
    """Chat model whose every call fails like a dropped connection."""

    def _call(self, *args, **kwargs):
        request = httpx.Request("POST", f"{settings.LLM_BASE_URL}/chat/completions")
        raise openai.APIConnectionError(request=request)


class FakeLLMFactory:
    """
    Stand-in for LLMFactory. Queue responses with ``reply`` or make the
    next model unreachable with ``fail``.
    """

    def __init__(self):
        self.responses = []
        self.unreachable = False
        self.calls = []

    def reply(self, *responses):
        self.responses.extend(responses)

    def fail(self):
        self.unreachable = True

    def create_llm(self, max_tokens=1024, temperature=0.4, model=None):
        self.calls.append({"max_tokens": max_tokens, "temperature": temperature})
        if self.unreachable:
            return UnreachableChatModel(responses=["unused"])
        if not self.responses:
            raise AssertionError("LLM called without a queued response")
        return FakeListChatModel(responses=[self.responses.pop(0)])


@pytest.fixture()
def db_engine():
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session(db_engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def llm():
    return FakeLLMFactory()


@pytest.fixture()
def upload_dir(tmp_path, monkeypatch):
    target = tmp_path / "uploads"
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(target))
    return target


@pytest.fixture()
def client(db_engine, llm, upload_dir):
    """
    TestClient bound to an isolated in-memory database, a temporary upload
    directory and a fake LLM.
    """
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_llm_factory] = lambda: llm
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def signup(client, email="ada@example.com", name="Ada", password="secret123"):
    r = client.post(
        "/api/v1/auth/signup",
        json={"name": name, "email": email, "password": password},
    )
    assert r.status_code == 201, r.text
    return {"Authorization": f"Bearer {r.json()['token']}"}


@pytest.fixture()
def auth_headers(client):
    return signup(client)


@pytest.fixture()
def other_headers(client):
    return signup(client, email="grace@example.com", name="Grace")


@pytest.fixture()
def course_id(client, auth_headers):
    r = client.post(
        "/api/v1/courses",
        json={"name": "Biology", "description": "Cells and genetics"},
        headers=auth_headers,
    )
    assert r.status_code == 201, r.text
    return r.json()["id"]
