"""Horoscope service: single entry point for both reading endpoints.

Validate → cache lookup → (miss) generator → shape → cache store.
Generator and configuration failures fall back to the locale's static
payload; fallbacks are never cached.
"""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from astrovogue.config.settings import Settings
from astrovogue.core.cache import ResponseCache, cache_key
from astrovogue.core.errors import ConfigurationError, GeneratorError
from astrovogue.core.logging import get_logger
from astrovogue.core.metrics import metrics
from astrovogue.core.shaping import shape_daily, shape_personalized, target_date
from astrovogue.core.validation import (
    DailyQuery,
    PersonalizedQuery,
    validate_daily,
    validate_lang,
    validate_personalized,
)
from astrovogue.data.astrology_api import AstrologyAPIClient
from astrovogue.llm.generate import TextGenerator
from astrovogue.locales import (
    DAILY_FIELDS,
    PERSONALIZED_FIELDS,
    SIGNS,
    Locale,
    get_locale,
    validate_locales,
)
from astrovogue.prompts_loader import build_user_prompt, load_prompt, validate_prompts

logger = get_logger(__name__)


class HoroscopeService:
    def __init__(
        self,
        settings: Settings,
        generator: TextGenerator,
        cache: ResponseCache,
        astrology: Optional[AstrologyAPIClient] = None,
        now: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.settings = settings
        self.generator = generator
        self.cache = cache
        self.astrology = astrology
        self._now = now

    def _validation_kwargs(self) -> Dict[str, Any]:
        return {
            "supported_langs": self.settings.supported_langs,
            "default_lang": self.settings.default_lang,
        }

    def _current_time(self) -> datetime:
        return self._now() if self._now else datetime.now(timezone.utc)

    async def daily(
        self, sign: Optional[str], day: Optional[str], lang: Optional[str]
    ) -> Dict[str, Any]:
        query = validate_daily(sign, day, lang, **self._validation_kwargs())
        locale = get_locale(query.lang)
        now = self._current_time()
        day_date = target_date(query.day, locale.timezone, now).isoformat()
        key = cache_key("daily", query.sign, query.day, query.lang, day_date)
        entry = self.cache.get(key)
        if entry is not None:
            metrics.increment_cache_hits()
            return entry.payload
        metrics.increment_cache_misses()

        shape_args = {"brand": self.settings.brand, "now": now}
        try:
            raw = await self._daily_content(query, locale)
        except (GeneratorError, ConfigurationError) as e:
            self._log_fallback("daily", key, e)
            return shape_daily({}, query, locale, **shape_args)

        payload = shape_daily(raw, query, locale, **shape_args)
        self.cache.put(key, payload, self.settings.cache.daily_ttl_seconds)
        return payload

    async def personalized(
        self,
        sun: Optional[str],
        rising: Optional[str],
        day: Optional[str],
        lang: Optional[str],
    ) -> Dict[str, Any]:
        query = validate_personalized(sun, rising, day, lang, **self._validation_kwargs())
        locale = get_locale(query.lang)
        now = self._current_time()
        day_date = target_date(query.day, locale.timezone, now).isoformat()
        key = cache_key(
            "personalized", query.sun, query.rising, query.day, query.lang, day_date
        )
        entry = self.cache.get(key)
        if entry is not None:
            metrics.increment_cache_hits()
            return entry.payload
        metrics.increment_cache_misses()

        shape_args = {"brand": self.settings.brand, "now": now}
        try:
            raw = await self._personalized_content(query, locale)
        except (GeneratorError, ConfigurationError) as e:
            self._log_fallback("personalized", key, e)
            return shape_personalized({}, query, locale, **shape_args)

        payload = shape_personalized(raw, query, locale, **shape_args)
        self.cache.put(key, payload, self.settings.cache.personalized_ttl_seconds)
        return payload

    def signs(self, lang: Optional[str]) -> Dict[str, Any]:
        code = validate_lang(lang, self.settings.supported_langs, self.settings.default_lang)
        locale = get_locale(code)
        return {
            "lang": code,
            "signs": [{"id": s, "name": locale.sign_names[s]} for s in SIGNS],
        }

    async def _daily_content(self, query: DailyQuery, locale: Locale) -> Dict[str, Any]:
        if self.settings.daily_source == "astrology_api" and self.astrology is not None:
            return await self.astrology.fetch(query.sign, query.day)
        prompt = load_prompt(locale.code, "daily")
        user = build_user_prompt(
            "daily", query.day, locale.sign_name(query.sign), None,
            DAILY_FIELDS, prompt["guidance"],
        )
        return await self.generator.generate_json(prompt["system"], user)

    async def _personalized_content(
        self, query: PersonalizedQuery, locale: Locale
    ) -> Dict[str, Any]:
        prompt = load_prompt(locale.code, "personalized")
        user = build_user_prompt(
            "personalized", query.day, locale.sign_name(query.sun),
            locale.sign_name(query.rising), PERSONALIZED_FIELDS, prompt["guidance"],
        )
        return await self.generator.generate_json(prompt["system"], user)

    def _log_fallback(self, kind: str, key: str, error: Exception) -> None:
        metrics.increment_fallbacks()
        if isinstance(error, ConfigurationError):
            logger.error(f"{kind} fallback key={key} configuration error: {error}")
        else:
            logger.warning(f"{kind} fallback key={key} generator error: {error}")


def build_service(settings: Settings) -> HoroscopeService:
    """Validate locales and prompts, then wire the service's collaborators."""
    if settings.default_lang not in settings.supported_langs:
        raise ConfigurationError(
            f"DEFAULT_LANG '{settings.default_lang}' is not in SUPPORTED_LANGS"
        )
    validate_locales(settings.supported_langs)
    validate_prompts(settings.supported_langs)

    astrology = None
    if settings.daily_source == "astrology_api":
        astrology = AstrologyAPIClient(settings.astrology_api_url)
    elif settings.daily_source != "llm":
        raise ConfigurationError(f"Unknown DAILY_SOURCE: {settings.daily_source}")

    logger.info(
        f"Service ready: provider={settings.llm.provider} daily_source={settings.daily_source} "
        f"langs={','.join(settings.supported_langs)}"
    )
    return HoroscopeService(
        settings=settings,
        generator=TextGenerator(settings.llm),
        cache=ResponseCache(),
        astrology=astrology,
    )
