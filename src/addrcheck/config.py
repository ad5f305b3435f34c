"""Runtime settings for the address checker.

Values are read from the environment (and a local `.env` file, if any) each
time `load_settings` is called, so an updated `.env` is picked up without a
restart.
"""
from dataclasses import dataclass
import os
from dotenv import load_dotenv

from .errors import ConfigError


VERSION = "0.1.0"

DEFAULT_API_URL = "https://api-adresse.data.gouv.fr/search/"
DEFAULT_MIN_SCORE = 0.7
DEFAULT_PACING_MS = 33
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    min_score: float = DEFAULT_MIN_SCORE
    pacing_ms: int = DEFAULT_PACING_MS
    timeout: float = DEFAULT_TIMEOUT

    @property
    def pacing_interval(self) -> float:
        return self.pacing_ms / 1000.0


def _env_number(name: str, default, kind):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = kind(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be a {kind.__name__}, got {raw!r}") from None
    if value < 0:
        raise ConfigError(f"{name} must not be negative, got {raw!r}")
    return value


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        api_url=os.getenv("ADDRCHECK_API_URL") or DEFAULT_API_URL,
        min_score=_env_number("ADDRCHECK_MIN_SCORE", DEFAULT_MIN_SCORE, float),
        pacing_ms=_env_number("ADDRCHECK_PACING_MS", DEFAULT_PACING_MS, int),
        timeout=_env_number("ADDRCHECK_TIMEOUT", DEFAULT_TIMEOUT, float),
    )
