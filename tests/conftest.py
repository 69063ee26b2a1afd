"""Shared test fixtures and configuration."""

import json
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_file(temp_dir, mocker):
    """Point the user config file at a temporary location."""
    path = temp_dir / ".lazycommit.yaml"
    mocker.patch("lazycommit.global_config._CONFIG_FILE", path)
    return path


@pytest.fixture
def sample_diff():
    """Sample staged diff for testing."""
    return """diff --git a/app.py b/app.py
index 1234567..abcdefg 100644
--- a/app.py
+++ b/app.py
@@ -1,2 +1,2 @@
-print("old")
+print("new")
"""


@pytest.fixture
def sample_messages():
    """Five suggestions as they come back from the completion service."""
    return [
        ":sparkles: Print new greeting",
        ":bug: Fix greeting output",
        ":recycle: Update print statement in app",
        ":art: Tidy app output",
        ":sparkles: Print new greeting",
    ]


@pytest.fixture
def completion_body():
    """Build a chat completion response body with one choice per message."""

    def _build(messages: list[str]) -> str:
        return json.dumps({
            "id": "chatcmpl-123",
            "object": "chat.completion",
            "model": "gpt-3.5-turbo",
            "choices": [
                {
                    "index": i,
                    "message": {"role": "assistant", "content": message},
                    "finish_reason": "stop",
                }
                for i, message in enumerate(messages)
            ],
            "usage": {"prompt_tokens": 120, "completion_tokens": 40, "total_tokens": 160},
        })

    return _build


@pytest.fixture
def mock_openai(mocker):
    """Patch the OpenAI client class used by the provider.

    Returns the mocked class; set the response body with
    ``mock_openai.return_value.chat.completions.with_raw_response.create.return_value.http_response.text``.
    """
    mock_cls = mocker.patch("lazycommit.llm.openai_provider.OpenAI")
    mock_cls.return_value = MagicMock()
    return mock_cls


@pytest.fixture
def set_completion_body(mock_openai):
    """Make the mocked client return a raw body; returns the create mock."""

    def _set(body: str) -> MagicMock:
        create = mock_openai.return_value.chat.completions.with_raw_response.create
        create.return_value.http_response.text = body
        return create

    return _set
