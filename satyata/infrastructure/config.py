"""Helpers for reading provider settings from the environment."""

import os
from typing import List

from ..domain.errors import ConfigurationError

# Values shipped in example .env files that must be treated as unset.
PLACEHOLDER_VALUES = {
    "your_openai_api_key_here",
    "your_serper_api_key_here",
    "your_imagebb_api_key_here",
    "your_api_key_here",
    "changeme",
}


def is_configured(value: str) -> bool:
    """Check that a setting holds a real value."""
    return bool(value and value.strip() and value.strip() not in PLACEHOLDER_VALUES)


def require_api_key(value: str, env_var: str) -> str:
    """Return the key or fail before any provider call is attempted.

    Raises:
        ConfigurationError: If the key is empty or a known placeholder
    """
    if not is_configured(value):
        raise ConfigurationError(f"{env_var} is not configured")
    return value.strip()


def env_list(name: str, default: str = "") -> List[str]:
    """Read a comma separated environment variable."""
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean environment variable such as ``TRUST_PROXY_HEADERS=true``."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")
