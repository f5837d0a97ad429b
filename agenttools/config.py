import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(override=False)


def _as_int(raw: str | None, default: int) -> int:
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str
    duckduckgo_timeout_seconds: int
    duckduckgo_proxy: str | None
    duckduckgo_region: str


def load_settings() -> Settings:
    return Settings(
        log_level=os.getenv("AGENTTOOLS_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        duckduckgo_timeout_seconds=max(
            1, _as_int(os.getenv("DUCKDUCKGO_TIMEOUT_SECONDS"), 10)
        ),
        duckduckgo_proxy=(os.getenv("DUCKDUCKGO_PROXY") or None),
        duckduckgo_region=(os.getenv("DUCKDUCKGO_REGION") or "wt-wt").strip().lower(),
    )


settings = load_settings()
