"""Base classes and shared utilities for LLM providers."""

import json
from abc import ABC, abstractmethod

from pydantic import BaseModel, ValidationError

from lazycommit.llm.prompts import USER_PROMPT


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class MissingAPIKeyError(LLMError):
    """Raised when the required API key is not set."""

    pass


class ResponseParseError(LLMError):
    """Raised when the completion response does not have the expected shape."""

    pass


class CompletionMessage(BaseModel):
    """The message object of a single completion choice."""

    content: str


class CompletionChoice(BaseModel):
    """One of the ``choices`` entries of a chat completion response."""

    message: CompletionMessage


class ChatCompletionPayload(BaseModel):
    """The parts of a chat completion response body that we rely on."""

    choices: list[CompletionChoice]


def parse_completion_response(body: str) -> list[str]:
    """Extract the suggested messages from a chat completion response body.

    Every choice must carry ``message.content`` as a string. A single
    malformed choice rejects the whole response.

    Args:
        body: The raw HTTP response body.

    Returns:
        The content of each choice, in response order.

    Raises:
        ResponseParseError: If the body is not JSON or lacks the expected structure.
    """
    try:
        parsed = json.loads(body)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Error parsing response: {e}")

    try:
        payload = ChatCompletionPayload.model_validate(parsed)
    except ValidationError as e:
        raise ResponseParseError(f"Error parsing response: unexpected structure\n{e}")

    return [choice.message.content for choice in payload.choices]


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    def generate(self, diff: str, api_key: str) -> list[str]:
        """Generate commit message suggestions for a staged diff.

        Args:
            diff: The raw staged diff.
            api_key: The credential for the provider.

        Returns:
            The suggested messages, in the order the provider returned them.

        Raises:
            MissingAPIKeyError: If the API key is empty.
            ResponseParseError: If the response cannot be parsed.
            LLMError: For other LLM-related errors.
        """
        pass

    def build_user_prompt(self, diff: str) -> str:
        """Build the user prompt from the staged diff.

        Args:
            diff: The raw staged diff.

        Returns:
            The task text followed by the diff.
        """
        return USER_PROMPT + diff
