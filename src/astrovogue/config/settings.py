"""Configuration settings for the gateway."""
import os
from dataclasses import dataclass, field
from typing import Tuple

from dotenv import load_dotenv

load_dotenv()


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


def _langs() -> Tuple[str, ...]:
    raw = _env("SUPPORTED_LANGS", "en,tr")
    return tuple(code.strip().lower() for code in raw.split(",") if code.strip())


@dataclass
class LLMSettings:
    provider: str = field(default_factory=lambda: _env("LLM_PROVIDER", "openai"))
    model: str = field(default_factory=lambda: _env("LLM_MODEL", ""))
    temperature: float = field(default_factory=lambda: float(_env("LLM_TEMPERATURE", "0.6")))
    timeout_seconds: float = field(
        default_factory=lambda: float(_env("LLM_TIMEOUT_SECONDS", "30"))
    )
    openai_api_key: str = field(default_factory=lambda: _env("OPENAI_API_KEY", ""))
    anthropic_api_key: str = field(default_factory=lambda: _env("ANTHROPIC_API_KEY", ""))


@dataclass
class CacheSettings:
    daily_ttl_seconds: int = field(
        default_factory=lambda: int(_env("DAILY_CACHE_TTL_SECONDS", str(30 * 60)))
    )
    personalized_ttl_seconds: int = field(
        default_factory=lambda: int(_env("PERSONALIZED_CACHE_TTL_SECONDS", str(20 * 60)))
    )


@dataclass
class Settings:
    llm: LLMSettings = field(default_factory=LLMSettings)
    cache: CacheSettings = field(default_factory=CacheSettings)
    # "llm" or "astrology_api"
    daily_source: str = field(default_factory=lambda: _env("DAILY_SOURCE", "llm"))
    astrology_api_url: str = field(
        default_factory=lambda: _env("ASTROLOGY_API_URL", "https://aztro.sameerkumar.website/")
    )
    default_lang: str = field(default_factory=lambda: _env("DEFAULT_LANG", "tr").lower())
    supported_langs: Tuple[str, ...] = field(default_factory=_langs)
    brand: str = field(default_factory=lambda: _env("BRAND", "AstroVogue"))
    static_dir: str = field(default_factory=lambda: _env("STATIC_DIR", "public"))
    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "3000")))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO").upper())


settings = Settings()
