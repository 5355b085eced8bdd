"""
Turn a raw generator result into the fixed daily/personalized payloads.
Why: the front-end card renders every field; it must never see a gap.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, Mapping, Optional
from zoneinfo import ZoneInfo

from astrovogue.core.validation import DailyQuery, PersonalizedQuery
from astrovogue.locales import DAILY_FIELDS, PERSONALIZED_FIELDS, Locale

_DAY_OFFSETS = {"yesterday": -1, "today": 0, "tomorrow": 1}


def _lookup(locale: Locale, table: Mapping[str, str], key: str) -> Optional[str]:
    wanted = locale.fold(key)
    for name, tip in table.items():
        if locale.fold(name) == wanted:
            return tip
    return None


def fashion_tip(locale: Locale, color: str, mood: str) -> str:
    """Color table first, then mood table, then the generic tip."""
    return (
        _lookup(locale, locale.color_tips, color)
        or _lookup(locale, locale.mood_tips, mood)
        or locale.generic_tip
    )


def target_date(day: str, tz_name: str, now: Optional[datetime] = None) -> date:
    now = now or datetime.now(timezone.utc)
    local = now.astimezone(ZoneInfo(tz_name))
    return local.date() + timedelta(days=_DAY_OFFSETS[day])


def _text(raw: Mapping[str, Any], field: str) -> Optional[str]:
    value = raw.get(field)
    if not value or isinstance(value, (dict, list, bool)):
        return None
    text = str(value).strip()
    return text or None


def _fill(raw: Mapping[str, Any], fields, defaults: Mapping[str, str]) -> Dict[str, str]:
    return {f: _text(raw, f) or defaults[f] for f in fields if f in defaults}


def shape_daily(
    raw: Mapping[str, Any],
    query: DailyQuery,
    locale: Locale,
    *,
    brand: str,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    content = _fill(raw, DAILY_FIELDS, locale.daily_defaults)
    tip = _text(raw, "fashion_tip") or fashion_tip(locale, content["color"], content["mood"])
    return {
        "brand": brand,
        "sign": query.sign,
        "sign_name": locale.sign_name(query.sign),
        "day": query.day,
        "date": locale.format_date(target_date(query.day, locale.timezone, now)),
        **content,
        "fashion_tip": tip,
    }


def shape_personalized(
    raw: Mapping[str, Any],
    query: PersonalizedQuery,
    locale: Locale,
    *,
    brand: str,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    content = _fill(raw, PERSONALIZED_FIELDS, locale.personalized_defaults)
    style = _text(raw, "style") or fashion_tip(locale, content["color"], content["mood"])
    payload: Dict[str, Any] = {
        "brand": brand,
        "sun": query.sun,
        "sun_name": locale.sign_name(query.sun),
        "rising": query.rising,
        "rising_name": locale.sign_name(query.rising),
        "day": query.day,
        "date": locale.format_date(target_date(query.day, locale.timezone, now)),
    }
    for field in PERSONALIZED_FIELDS:
        payload[field] = style if field == "style" else content[field]
    return payload
