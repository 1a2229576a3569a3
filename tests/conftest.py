import pytest
from fastapi.testclient import TestClient
from unittest.mock import MagicMock
from types import SimpleNamespace
from typing import Generator

from complaint_assistant.core.settings import Settings
from complaint_assistant.main import create_app


def chat_response(content):
    """Build an object shaped like an OpenAI chat completion"""
    if content is None:
        return SimpleNamespace(choices=[])
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def settings():
    """Settings with a dummy key, isolated from any local .env"""
    return Settings(_env_file=None, OPENAI_API_KEY="sk-test", llm_startup_check=False)


@pytest.fixture
def mock_llm():
    """Mock completion client"""
    mock = MagicMock()
    mock.complete = MagicMock(return_value="Geachte heer/mevrouw, ...")
    mock.ping = MagicMock(return_value="OK")
    return mock


@pytest.fixture
def app(settings, mock_llm):
    return create_app(settings, llm=mock_llm)


@pytest.fixture
def client(app) -> Generator:
    """Create test client"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_letter():
    return "Mijn pakket is niet aangekomen."
