"""LLM access for lazycommit.

Suggestions come from the OpenAI chat completion API.
"""

import typer
from dotenv import load_dotenv

from lazycommit.llm.base import (
    BaseLLMProvider,
    ChatCompletionPayload,
    LLMError,
    MissingAPIKeyError,
    ResponseParseError,
    parse_completion_response,
)
from lazycommit.llm.openai_provider import OpenAIProvider

# Load environment variables from .env file
load_dotenv()


def get_provider(model: str | None = None) -> BaseLLMProvider:
    """Get an LLM provider instance.

    Args:
        model: The model to use. Defaults to MODEL from config.

    Returns:
        The OpenAI provider.
    """
    return OpenAIProvider(model=model)


def generate_commit_messages(diff: str, api_key: str) -> list[str]:
    """Get commit message suggestions for a staged diff.

    Failures are reported on stderr and produce an empty list.

    Args:
        diff: The raw staged diff.
        api_key: The OpenAI API key.

    Returns:
        The suggested messages in response order, or an empty list on failure.
    """
    provider = get_provider()
    try:
        return provider.generate(diff, api_key)
    except LLMError as e:
        typer.echo(str(e))
        return []


# Export commonly used items
__all__ = [
    "BaseLLMProvider",
    "ChatCompletionPayload",
    "LLMError",
    "MissingAPIKeyError",
    "OpenAIProvider",
    "ResponseParseError",
    "generate_commit_messages",
    "get_provider",
    "parse_completion_response",
]
