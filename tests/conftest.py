import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_request_context
from app.core import genai_client
from app.core.config import settings
from app.main import app
from app.models.user import Language, RequestContext, User


class FakeStructuredModel:
    """Stands in for ChatGoogleGenerativeAI(...).with_structured_output(...)."""

    def __init__(self):
        self.result = None
        self.error = None
        self.schema = None
        self.calls = []

    def with_structured_output(self, schema, method=None):
        self.schema = schema
        return self

    async def ainvoke(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_model(monkeypatch):
    model = FakeStructuredModel()
    monkeypatch.setattr(genai_client, "get_chat_model", lambda *args, **kwargs: model)
    return model


@pytest.fixture
def farmer():
    return User(name="Ramesh", village="Rampur", crop="Wheat", language=Language.HINDI)


@pytest.fixture
def context(farmer):
    return RequestContext.for_user(farmer)


@pytest.fixture(autouse=True)
def jwt_secret(monkeypatch):
    monkeypatch.setattr(settings, "JWT_SECRET_KEY", "test-secret-key-for-kisan-sathi-0123456789")


@pytest.fixture
def client(context):
    app.dependency_overrides[get_request_context] = lambda: context
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client():
    app.dependency_overrides.clear()
    return TestClient(app)
