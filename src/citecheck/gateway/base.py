from typing import Protocol

# Search and URL extraction run on the fast model, citation analysis on the
# stronger one. Not user-configurable.
FAST_MODEL = "claude-haiku-4-5-20251001"
ANALYSIS_MODEL = "claude-sonnet-4-5-20250929"


class Gateway(Protocol):
    """Interface for a single prompt/response call to the LLM provider."""

    async def invoke(self, model: str, prompt: str, *, search: bool = False) -> str:
        """Send one prompt and return the raw response text.

        Args:
            model: Provider model ID.
            prompt: Full user prompt.
            search: Whether the provider's web search tool is available.

        Returns:
            The concatenated text of the response.

        Raises:
            ConfigurationError: No API key is configured.
            CredentialPermissionError: The provider rejected the key.
            GatewayError: Any other upstream failure.
        """
        ...
