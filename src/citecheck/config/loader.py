"""YAML configuration loading utilities."""

import logging
from pathlib import Path

import yaml

from citecheck.config.models import CiteCheckConfig

logger = logging.getLogger(__name__)


def load_config(path: Path | str) -> CiteCheckConfig:
    """Load configuration from YAML file.

    An empty file yields the defaults.

    Args:
        path: Path to YAML config file.

    Returns:
        Validated CiteCheckConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    return CiteCheckConfig.model_validate(raw or {})


def get_default_config_path() -> Path:
    """Get path to default config file."""
    return Path(__file__).parents[3] / "configs" / "default.yaml"


def load_default_config() -> CiteCheckConfig:
    """Load the bundled default config, or built-in defaults if it is absent.

    ``configs/default.yaml`` only exists in a source checkout; an installed
    wheel does not ship it.
    """
    path = get_default_config_path()
    if not path.exists():
        logger.debug("No default config at %s, using built-in defaults", path)
        return CiteCheckConfig()
    return load_config(path)
