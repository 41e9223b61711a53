"""API key selection for the session."""

import asyncio
import getpass
import logging
import os
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_API_KEY_ENV = "CLAUDE_API_KEY"


class CredentialSelector(Protocol):
    """Interface the workflow uses to check for and pick an API key."""

    async def has_selected_credential(self) -> bool: ...

    async def open_selector(self) -> None: ...


class KeyStore:
    """Holds the Anthropic API key for one session, in memory only.

    Seeded from an environment variable. ``open_selector`` asks the user for a
    replacement key through ``prompt`` (``getpass.getpass`` by default), which
    runs in a worker thread so the event loop is not blocked.

    Args:
        env_var: Environment variable to read the initial key from.
        prompt: Callable that takes a prompt string and returns the key.
    """

    def __init__(
        self,
        env_var: str = DEFAULT_API_KEY_ENV,
        *,
        prompt: Callable[[str], str] | None = None,
    ) -> None:
        self._env_var = env_var
        self._key: str | None = os.environ.get(env_var) or None
        self._prompt = prompt or getpass.getpass

    @property
    def api_key(self) -> str | None:
        """The currently selected key, or None."""
        return self._key

    async def has_selected_credential(self) -> bool:
        return bool(self._key)

    async def open_selector(self) -> None:
        key = await asyncio.to_thread(self._prompt, f"Anthropic API key ({self._env_var}): ")
        self._key = key.strip() or None
        if self._key is None:
            logger.warning("No API key entered")
