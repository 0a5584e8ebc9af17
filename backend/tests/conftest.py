import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure backend package is importable without installation
backend_root = Path(__file__).resolve().parents[1]
if str(backend_root) not in sys.path:
    sys.path.insert(0, str(backend_root))

ENV_VARS = (
    "GROK_API_KEY", "GROQ_API_KEY", "OPENAI_API_KEY",
    "GROK_BASE_URL", "GROQ_BASE_URL", "OPENAI_BASE_URL",
    "LLM_MODEL", "LLM_TIMEOUT", "RATE_LIMIT_MAX", "RATE_LIMIT_WINDOW_MINUTES",
    "CORS_ORIGINS", "APP_ENV", "NODE_ENV", "MAX_BODY_BYTES", "LOG_LEVEL",
)


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def make_client(tmp_path, upload_dir, monkeypatch):
    """Build a TestClient for an app configured from the given env vars."""
    from resume_builder.config import Settings
    from resume_builder.main import create_app

    def _make(**env):
        # Avoid accidental usage of real API keys during tests
        for name in ENV_VARS:
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("UPLOAD_DIR", str(upload_dir))
        monkeypatch.setenv("STATIC_DIR", str(tmp_path / "public"))
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return TestClient(create_app(Settings.from_env()))

    return _make


@pytest.fixture
def client(make_client):
    return make_client(OPENAI_API_KEY="sk-test")


class FakeResponse:
    def __init__(self, status_code, payload):
        self.status_code = status_code
        self._payload = payload
        self.text = str(payload)

    def json(self):
        return self._payload


class FakeLLM:
    """Records chat-completion requests and answers with canned content."""

    def __init__(self):
        self.calls = []
        self.status_code = 200
        self.content = "Generated by mock"
        self.payload = None
        self.error = None

    def respond(self):
        if self.error is not None:
            raise self.error
        payload = self.payload
        if payload is None:
            payload = {"choices": [{"message": {"content": self.content}}]}
        return FakeResponse(self.status_code, payload)


@pytest.fixture
def fake_llm(monkeypatch):
    # Mock httpx.AsyncClient used in ai_services to avoid network
    from resume_builder import ai_services

    llm = FakeLLM()

    class FakeAsyncClient:
        def __init__(self, *args, **kwargs):
            self.timeout = kwargs.get("timeout")

        async def __aenter__(self):
            return self

        async def __aexit__(self, exc_type, exc, tb):
            return False

        async def post(self, url, json=None, headers=None):
            llm.calls.append({"url": url, "json": json, "headers": headers, "timeout": self.timeout})
            return llm.respond()

    monkeypatch.setattr(ai_services.httpx, "AsyncClient", FakeAsyncClient)
    return llm


def words(n, filler="detail"):
    return " ".join(f"{filler}{i}" for i in range(n))


RICH_RESUME = (
    "Jane Doe, Senior Backend Engineer. Work Experience: Acme Corp 2019-2024, led a team of "
    "five engineers building payment APIs in Python and Go, cut p99 latency by 40 percent, "
    "migrated services to Kubernetes, mentored junior developers, owned on-call rotation and "
    "incident reviews. Previous role at Initech 2016-2019 maintaining billing pipelines and "
    "reporting jobs. Skills: Python, Go, PostgreSQL, Redis, Docker, Kubernetes, Terraform, AWS, "
    "gRPC, observability tooling and CI pipelines. Education: Bachelor of Science in Computer "
    "Science, State University, 2016, graduated with honors and a minor in mathematics."
)
