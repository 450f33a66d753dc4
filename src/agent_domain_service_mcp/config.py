"""
Configuration for Agent Domain Service MCP.

Each setting is looked up in this order:
1. Environment variable
2. Config file (config.json in the app's config directory)
3. Built-in default
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_BASE_URL = "https://agentdomainservice.com"
DEFAULT_TIMEOUT = 30.0

ENV_BASE_URL = "AGENT_DOMAIN_SERVICE_URL"
ENV_TIMEOUT = "AGENT_DOMAIN_SERVICE_TIMEOUT"
ENV_DEBUG = "AGENT_DOMAIN_SERVICE_DEBUG"


@dataclass(frozen=True)
class Settings:
    """Resolved settings for talking to the domain service."""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    debug: bool = False


def get_config_dir() -> Path:
    """Get the config directory for this app."""
    if os.name == 'nt':  # Windows
        base = Path(os.environ.get('APPDATA', Path.home()))
    else:  # macOS, Linux
        base = Path(os.environ.get('XDG_CONFIG_HOME', Path.home() / '.config'))

    return base / 'agent-domain-service-mcp'


def get_config_file() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / 'config.json'


def load_config() -> dict:
    """Load the config file, returning an empty dict if missing or unreadable."""
    try:
        config_file = get_config_file()
        if config_file.exists():
            config = json.loads(config_file.read_text())
            if isinstance(config, dict):
                return config
    except (json.JSONDecodeError, OSError):
        pass
    return {}


def _parse_timeout(value) -> float | None:
    """Parse a timeout value, returning None if it isn't a positive number."""
    if isinstance(value, bool):
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        return None
    return timeout if timeout > 0 else None


def get_base_url() -> str:
    """Get the domain service base URL, without a trailing slash."""
    if url := os.environ.get(ENV_BASE_URL, "").strip():
        return url.rstrip("/")

    url = load_config().get('base_url')
    if isinstance(url, str) and url.strip():
        return url.strip().rstrip("/")

    return DEFAULT_BASE_URL


def get_timeout() -> float:
    """Get the request timeout in seconds."""
    if (timeout := _parse_timeout(os.environ.get(ENV_TIMEOUT))) is not None:
        return timeout

    if (timeout := _parse_timeout(load_config().get('timeout'))) is not None:
        return timeout

    return DEFAULT_TIMEOUT


def is_debug() -> bool:
    """Check whether verbose HTTP logging was requested."""
    return os.environ.get(ENV_DEBUG, "").strip().lower() in ("1", "true", "yes", "on")


def get_setting_source(env_var: str, config_key: str) -> str:
    """Determine where a setting comes from (for display purposes)."""
    if os.environ.get(env_var, "").strip():
        return "environment variable"
    if config_key in load_config():
        return "config file"
    return "default"


def load_settings() -> Settings:
    """Resolve all settings."""
    return Settings(
        base_url=get_base_url(),
        timeout=get_timeout(),
        debug=is_debug(),
    )
