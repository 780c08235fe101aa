"""Engine configuration via environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_POLL_INTERVAL_MS = 100


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class EngineConfig:
    """Settings shared by the resolver, the wait policy and the browser."""

    default_timeout_ms: int = DEFAULT_TIMEOUT_MS
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS
    strict: bool = True
    headless: bool = True
    browser: str = "chromium"
    log_level: str = "INFO"
    log_format: str = "console"

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Load config from environment variables."""
        return cls(
            default_timeout_ms=int(
                os.environ.get("WEBSCOPE_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS))
            ),
            poll_interval_ms=int(
                os.environ.get(
                    "WEBSCOPE_POLL_INTERVAL_MS", str(DEFAULT_POLL_INTERVAL_MS)
                )
            ),
            strict=_env_bool("WEBSCOPE_STRICT", True),
            headless=_env_bool("WEBSCOPE_HEADLESS", True),
            browser=os.environ.get("WEBSCOPE_BROWSER", "chromium"),
            log_level=os.environ.get("WEBSCOPE_LOG_LEVEL", "INFO"),
            log_format=os.environ.get("WEBSCOPE_LOG_FORMAT", "console"),
        )
