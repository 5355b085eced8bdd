from datetime import datetime, timezone

import pytest

from astrovogue.config.settings import CacheSettings, LLMSettings, Settings
from astrovogue.core.cache import ResponseCache
from astrovogue.service import HoroscopeService

FIXED_NOW = datetime(2025, 3, 10, 9, 30, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeGenerator:
    """Stands in for TextGenerator; counts calls and replays outcomes."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    async def generate_json(self, system, user):
        self.calls.append({"system": system, "user": user})
        outcome = self.outcomes.pop(0) if self.outcomes else {}
        if isinstance(outcome, Exception):
            raise outcome
        return dict(outcome)


@pytest.fixture
def settings():
    return Settings(
        llm=LLMSettings(provider="openai", model="gpt-4o-mini", openai_api_key="sk-test"),
        cache=CacheSettings(daily_ttl_seconds=1800, personalized_ttl_seconds=1200),
        daily_source="llm",
        default_lang="tr",
        supported_langs=("en", "tr"),
        brand="AstroVogue",
        static_dir="does-not-exist",
        log_level="INFO",
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_service(settings, clock):
    def _make(*outcomes, astrology=None):
        generator = FakeGenerator(*outcomes)
        service = HoroscopeService(
            settings=settings,
            generator=generator,
            cache=ResponseCache(clock=clock),
            astrology=astrology,
            now=lambda: FIXED_NOW,
        )
        return service, generator

    return _make
