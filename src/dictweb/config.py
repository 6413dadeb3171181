# src/dictweb/config.py
"""
Configuration for dictweb.

Values come from environment variables on top of defaults:

- DICTWEB_API_URL        upstream base endpoint, the word is appended
- DICTWEB_CACHE_DIR      explicit cache root; set to "" to disable caching
- XDG_CACHE_HOME / HOME  otherwise the root is $XDG_CACHE_HOME/dictweb,
                         or $HOME/.cache/dictweb
- DICTWEB_TIMEOUT        seconds to wait for the dictionary service
- DICTWEB_RATE_INTERVAL  seconds between rate limiter tokens (0 = off)
- DICTWEB_RATE_BURST     rate limiter capacity
- DICTWEB_HOST / DICTWEB_PORT
- DICTWEB_LOG_LEVEL

Tests build Settings directly and pass them to create_app().
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dictweb.logging_setup import get_logger

log = get_logger("config")

DEFAULT_API_URL = "https://api.dictionaryapi.dev/api/v2/entries/en/"
CACHE_SUBDIR = "dictweb"


def resolve_cache_root(env: dict | None = None) -> Path | None:
    """
    Work out where the cache lives, without touching the filesystem.

    Returns None when caching is disabled: DICTWEB_CACHE_DIR is set but
    empty, or neither XDG_CACHE_HOME nor HOME is available.
    """
    env = os.environ if env is None else env

    if "DICTWEB_CACHE_DIR" in env:
        explicit = env["DICTWEB_CACHE_DIR"].strip()
        return Path(explicit) if explicit else None

    cache_home = env.get("XDG_CACHE_HOME", "").strip()
    if not cache_home:
        home = env.get("HOME", "").strip()
        if not home:
            log.warning("neither $XDG_CACHE_HOME nor $HOME is set; caching disabled")
            return None
        cache_home = os.path.join(home, ".cache")
    return Path(cache_home) / CACHE_SUBDIR


def _float(env: dict, name: str, default: float) -> float:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        log.warning("ignoring invalid %s=%r", name, raw)
        return default
    return value if value >= 0 else default


def _int(env: dict, name: str, default: int, low: int = 1, high: int | None = None) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        log.warning("ignoring invalid %s=%r", name, raw)
        return default
    if value < low or (high is not None and value > high):
        return default
    return value


@dataclass
class Settings:
    api_url: str = DEFAULT_API_URL
    cache_dir: Path | None = None
    timeout: float = 10.0
    rate_interval: float = 1.0
    rate_burst: int = 1
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: dict | None = None) -> "Settings":
        env = os.environ if env is None else env
        return cls(
            api_url=env.get("DICTWEB_API_URL", "").strip() or cls.api_url,
            cache_dir=resolve_cache_root(env),
            timeout=_float(env, "DICTWEB_TIMEOUT", cls.timeout) or cls.timeout,
            rate_interval=_float(env, "DICTWEB_RATE_INTERVAL", cls.rate_interval),
            rate_burst=_int(env, "DICTWEB_RATE_BURST", cls.rate_burst),
            host=env.get("DICTWEB_HOST", "").strip() or cls.host,
            port=_int(env, "DICTWEB_PORT", cls.port, high=65535),
            log_level=env.get("DICTWEB_LOG_LEVEL", "").strip() or cls.log_level,
        )


def init_cache_dir(settings: Settings) -> Path | None:
    """
    Create the cache root if needed and return it.

    Returns None (caching disabled) when there is no root or it cannot be
    created; startup goes on either way.
    """
    root = settings.cache_dir
    if root is None:
        log.info("caching disabled")
        return None
    try:
        root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        log.warning("failed to create cache dir %s: %s; ignoring", root, e)
        return None
    log.info("cache dir: %s", root)
    return root


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS


def set_settings(settings: Settings | None) -> None:
    """Replace (or with None, reset) the process-wide settings."""
    global _SETTINGS
    _SETTINGS = settings
