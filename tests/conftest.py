import httpx
import pytest

from blogtool.config import ConfigStore
from blogtool.models import Configuration


class Recorder:
    """MockTransport handler that records requests and answers with a fixed response."""

    def __init__(self, status_code: int = 201, text: str = '{"content": {}}'):
        self.status_code = status_code
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.text)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def stored_config() -> Configuration:
    return Configuration(
        repository="blog",
        access_token="stored-token",
        username="alice",
        default_branch="main",
        default_path="/posts/",
    )


@pytest.fixture
def config_root(tmp_path):
    return tmp_path / "config"


@pytest.fixture
def store(config_root) -> ConfigStore:
    return ConfigStore(config_root / "blog-tool" / "config.json")


@pytest.fixture
def saved_store(store, stored_config) -> ConfigStore:
    store.save(stored_config)
    return store


@pytest.fixture
def answers(monkeypatch):
    """Feed canned answers to the interactive prompts and record the questions."""
    asked: list[str] = []
    values = iter(["bob", "notes", "new-token", "dev", "/"])

    def fake_prompt(text, **kwargs):
        asked.append(text)
        return next(values)

    monkeypatch.setattr("blogtool.config.click.prompt", fake_prompt)
    return asked
