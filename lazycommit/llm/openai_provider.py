"""OpenAI chat completion provider."""

from openai import APIStatusError, OpenAI

from lazycommit.config import MAX_TOKENS, MODEL, NUM_SUGGESTIONS, OPENAI_BASE_URL
from lazycommit.llm.base import (
    BaseLLMProvider,
    LLMError,
    MissingAPIKeyError,
    parse_completion_response,
)
from lazycommit.llm.prompts import SYSTEM_PROMPT


class OpenAIProvider(BaseLLMProvider):
    """OpenAI GPT LLM provider."""

    def __init__(self, model: str | None = None, n: int | None = None):
        """Initialize the OpenAI provider.

        Args:
            model: The model to use. Defaults to MODEL from config.
            n: Number of suggestions to request. Defaults to NUM_SUGGESTIONS.
        """
        self.model = model or MODEL
        self.n = n or NUM_SUGGESTIONS

    def build_request(self, diff: str) -> dict:
        """Build the chat completion request parameters for a diff."""
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": self.build_user_prompt(diff)},
            ],
            "max_tokens": MAX_TOKENS,
            "n": self.n,
        }

    def generate(self, diff: str, api_key: str) -> list[str]:
        """Request commit message suggestions from OpenAI.

        Sends exactly one request asking for ``n`` completions. The SDK's
        automatic retries are disabled.

        Args:
            diff: The raw staged diff.
            api_key: The OpenAI API key.

        Returns:
            The suggested messages, in response order.

        Raises:
            MissingAPIKeyError: If the API key is empty.
            ResponseParseError: If the response cannot be parsed.
            LLMError: For request failures and HTTP error statuses.
        """
        if not api_key:
            raise MissingAPIKeyError("No OpenAI API key provided.")

        client = OpenAI(api_key=api_key, base_url=OPENAI_BASE_URL, max_retries=0)

        try:
            raw_response = client.chat.completions.with_raw_response.create(
                **self.build_request(diff)
            )
            body = raw_response.http_response.text
        except APIStatusError as e:
            raise LLMError(
                f"Error making request: OpenAI returned HTTP {e.status_code}: {e.message}"
            )
        except Exception as e:
            raise LLMError(f"Error making request: {e}")

        return parse_completion_response(body)
