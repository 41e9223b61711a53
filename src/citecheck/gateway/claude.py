import logging
import os

import anthropic
from anthropic.types import Message

from citecheck.credentials import DEFAULT_API_KEY_ENV, KeyStore
from citecheck.data import APICallUsage, Usage
from citecheck.errors import ConfigurationError, CredentialPermissionError, GatewayError

logger = logging.getLogger(__name__)


class ClaudeGateway:
    """Call Claude once per prompt, optionally with the web search tool.

    Uses Anthropic's server-side web search, so no separate search API is
    needed. Web search must be enabled for the key in the Anthropic Console;
    a key without it is rejected with a permission error.

    The key is resolved on every call: an explicit ``api_key`` wins, then the
    ``key_store`` (so a key picked mid-session takes effect), then the
    ``api_key_env`` environment variable.

    Args:
        api_key: Anthropic API key.
        key_store: Session key store consulted when ``api_key`` is not given.
        api_key_env: Environment variable read when neither of the above has a key.
        max_tokens: Response token limit per call.
        max_searches: Max web searches per call when search is enabled.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        key_store: KeyStore | None = None,
        api_key_env: str = DEFAULT_API_KEY_ENV,
        max_tokens: int = 4096,
        max_searches: int = 5,
    ) -> None:
        self._api_key = api_key
        self._key_store = key_store
        self._api_key_env = api_key_env
        self._max_tokens = max_tokens
        self._max_searches = max_searches
        self._client: anthropic.AsyncAnthropic | None = None
        self._client_key: str | None = None
        self.usage = Usage()

        resolved_key = self._resolve_key()
        if resolved_key:
            self._client = anthropic.AsyncAnthropic(api_key=resolved_key)
            self._client_key = resolved_key

    def _resolve_key(self) -> str | None:
        if self._api_key:
            return self._api_key
        if self._key_store is not None and self._key_store.api_key:
            return self._key_store.api_key
        return os.environ.get(self._api_key_env) or None

    def _get_client(self) -> anthropic.AsyncAnthropic:
        key = self._resolve_key()
        if not key:
            raise ConfigurationError(f"{self._api_key_env} environment variable not set.")
        if self._client is None or key != self._client_key:
            self._client = anthropic.AsyncAnthropic(api_key=key)
            self._client_key = key
        return self._client

    async def invoke(self, model: str, prompt: str, *, search: bool = False) -> str:
        client = self._get_client()

        kwargs: dict[str, object] = {}
        if search:
            kwargs["tools"] = [
                {
                    "type": "web_search_20250305",
                    "name": "web_search",
                    "max_uses": self._max_searches,
                }
            ]

        try:
            response = await client.messages.create(
                model=model,
                max_tokens=self._max_tokens,
                messages=[{"role": "user", "content": prompt}],
                **kwargs,
            )
        except (anthropic.AuthenticationError, anthropic.PermissionDeniedError) as e:
            raise CredentialPermissionError(f"PERMISSION_DENIED: {e}") from e
        except anthropic.APIError as e:
            raise GatewayError(str(e)) from e

        self._record_usage(model, response)

        text = ""
        for block in response.content:
            if getattr(block, "type", None) == "text":
                text += block.text
        logger.debug("Model %s returned %d characters", model, len(text))
        return text

    def _record_usage(self, model: str, response: Message) -> None:
        web_searches = 0
        server_tool_use = getattr(response.usage, "server_tool_use", None)
        if server_tool_use is not None:
            web_searches = getattr(server_tool_use, "web_search_requests", 0) or 0

        self.usage += Usage(
            api_calls=[
                APICallUsage(
                    model=model,
                    input_tokens=getattr(response.usage, "input_tokens", 0) or 0,
                    output_tokens=getattr(response.usage, "output_tokens", 0) or 0,
                    web_searches=web_searches,
                ),
            ],
        )
