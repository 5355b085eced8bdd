"""Request validation against the closed sign/day/language enumerations."""

from dataclasses import dataclass
from typing import Iterable, Optional

from astrovogue.core.errors import ValidationError
from astrovogue.locales import DAYS, SIGNS, get_locale


@dataclass(frozen=True)
class DailyQuery:
    sign: str
    day: str
    lang: str


@dataclass(frozen=True)
class PersonalizedQuery:
    sun: str
    rising: Optional[str]
    day: str
    lang: str


def _norm(value: Optional[str]) -> str:
    return str(value or "").strip().lower()


def validate_lang(lang: Optional[str], supported: Iterable[str], default: str) -> str:
    code = _norm(lang) or default
    if code not in supported:
        raise ValidationError("lang", code, get_locale(default).messages["invalid_lang"])
    return code


def _validate_day(day: Optional[str], lang: str) -> str:
    value = _norm(day) or "today"
    if value not in DAYS:
        raise ValidationError("day", value, get_locale(lang).messages["invalid_day"])
    return value


def _validate_sign(sign: Optional[str], field: str, message_key: str, lang: str) -> str:
    value = _norm(sign)
    if value not in SIGNS:
        raise ValidationError(field, value, get_locale(lang).messages[message_key])
    return value


def validate_daily(
    sign: Optional[str],
    day: Optional[str],
    lang: Optional[str],
    *,
    supported_langs: Iterable[str],
    default_lang: str,
) -> DailyQuery:
    code = validate_lang(lang, supported_langs, default_lang)
    return DailyQuery(
        sign=_validate_sign(sign, "sign", "invalid_sign", code),
        day=_validate_day(day, code),
        lang=code,
    )


def validate_personalized(
    sun: Optional[str],
    rising: Optional[str],
    day: Optional[str],
    lang: Optional[str],
    *,
    supported_langs: Iterable[str],
    default_lang: str,
) -> PersonalizedQuery:
    """Rising sign is optional; an empty value means "not given"."""
    code = validate_lang(lang, supported_langs, default_lang)
    sun_sign = _validate_sign(sun, "sun", "invalid_sun", code)
    rising_sign = None
    if _norm(rising):
        rising_sign = _validate_sign(rising, "rising", "invalid_rising", code)
    return PersonalizedQuery(
        sun=sun_sign, rising=rising_sign, day=_validate_day(day, code), lang=code
    )
