"""Factory functions to create components from configuration."""

from datetime import date

from citecheck.config.models import CiteCheckConfig
from citecheck.credentials import KeyStore
from citecheck.data import QueryParams
from citecheck.gateway.claude import ClaudeGateway
from citecheck.workflow.session import CitationCheckSession


def create_from_config(
    config: CiteCheckConfig,
    *,
    today: date | None = None,
) -> tuple[CitationCheckSession, ClaudeGateway]:
    """Create a session and its gateway from root config.

    Args:
        config: Root configuration.
        today: Reference date for the default search window.

    Returns:
        Tuple of (session, gateway). The gateway is returned so callers can
        read its accumulated usage.
    """
    key_store = KeyStore(config.gateway.api_key_env)
    gateway = ClaudeGateway(
        key_store=key_store,
        api_key_env=config.gateway.api_key_env,
        max_tokens=config.gateway.max_tokens,
        max_searches=config.gateway.max_searches,
    )
    params = QueryParams.default(
        today,
        keywords=config.session.default_keywords,
        lookback_days=config.session.lookback_days,
    )
    session = CitationCheckSession(gateway, key_store, params=params)
    return (session, gateway)
