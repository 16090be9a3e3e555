import httpx
import pytest
from fastapi.testclient import TestClient

from recipe_importer.app.api.deps import get_backend_factory
from recipe_importer.app.main import create_app


class FakeBackend:
    """Deterministic stand-in for the generative backend."""

    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def app(fake_backend):
    app = create_app()
    app.dependency_overrides[get_backend_factory] = lambda: (lambda: fake_backend)
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def mock_http(monkeypatch):
    """Route every httpx.AsyncClient through a MockTransport built from ``handler``."""
    real_client = httpx.AsyncClient
    requests: list[httpx.Request] = []

    def install(handler):
        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        def client_factory(*args, **kwargs):
            kwargs["transport"] = httpx.MockTransport(recording_handler)
            return real_client(*args, **kwargs)

        monkeypatch.setattr(httpx, "AsyncClient", client_factory)
        return requests

    return install
