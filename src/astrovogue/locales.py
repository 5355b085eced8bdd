"""Per-language records: sign names, default tables, styling tips, messages.

Every supported language code maps to exactly one ``Locale``. The registry is
checked once at startup by ``validate_locales`` so a request can never reach a
language without a complete record.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, Mapping, Optional, Tuple

from astrovogue.core.errors import ConfigurationError

SIGNS: Tuple[str, ...] = (
    "aries", "taurus", "gemini", "cancer", "leo", "virgo",
    "libra", "scorpio", "sagittarius", "capricorn", "aquarius", "pisces",
)
DAYS: Tuple[str, ...] = ("today", "tomorrow", "yesterday")

# Content fields the generator is asked for, in payload order.
DAILY_FIELDS: Tuple[str, ...] = (
    "description", "compatibility", "mood", "color", "lucky_number",
    "lucky_time", "analysis", "love", "career", "money", "social",
    "caution", "time_window", "mantra", "moon_phase",
)
PERSONALIZED_FIELDS: Tuple[str, ...] = (
    "focus", "guidance", "style", "description", "mood", "color",
    "compatibility", "love", "career", "money", "social", "caution",
    "time_window", "mantra",
)
# Derived from color/mood when the generator leaves them out.
DERIVED_FIELDS = frozenset({"style", "fashion_tip"})


@dataclass(frozen=True)
class Locale:
    code: str
    sign_names: Mapping[str, str]
    timezone: str
    date_pattern: str
    daily_defaults: Mapping[str, str]
    personalized_defaults: Mapping[str, str]
    color_tips: Mapping[str, str]
    mood_tips: Mapping[str, str]
    generic_tip: str
    messages: Mapping[str, str]
    month_names: Tuple[str, ...] = ()
    # Upper-case letters whose lower-case form differs from str.lower()
    case_map: Mapping[int, str] = field(default_factory=dict)

    def sign_name(self, sign: Optional[str]) -> Optional[str]:
        if not sign:
            return None
        return self.sign_names[sign]

    def format_date(self, value: date) -> str:
        month = self.month_names[value.month - 1] if self.month_names else ""
        return self.date_pattern.format(d=value, month=month)

    def fold(self, text: str) -> str:
        """Case-insensitive form of a color or mood name in this language."""
        return text.strip().translate(self.case_map).lower()


EN = Locale(
    code="en",
    sign_names={
        "aries": "Aries", "taurus": "Taurus", "gemini": "Gemini",
        "cancer": "Cancer", "leo": "Leo", "virgo": "Virgo",
        "libra": "Libra", "scorpio": "Scorpio", "sagittarius": "Sagittarius",
        "capricorn": "Capricorn", "aquarius": "Aquarius", "pisces": "Pisces",
    },
    timezone="UTC",
    date_pattern="{month} {d.day}, {d.year}",
    month_names=(
        "January", "February", "March", "April", "May", "June", "July",
        "August", "September", "October", "November", "December",
    ),
    daily_defaults={
        "description": "Keep the day simple and be clear when you speak.",
        "compatibility": "Cancer",
        "mood": "Balanced",
        "color": "Gray",
        "lucky_number": "4",
        "lucky_time": "14:00",
        "analysis": "Don't scatter your focus. Move forward calmly.",
        "love": "Say what you feel, plainly.",
        "career": "Shorten your priority list.",
        "money": "Put unnecessary spending on hold.",
        "social": "A short talk with close friends will do you good.",
        "caution": "Don't rush into decisions.",
        "time_window": "13:00-16:00",
        "mantra": "I stay simple, I move forward clearly.",
        "moon_phase": "Neutral",
    },
    personalized_defaults={
        "focus": "General",
        "guidance": "Make a clear plan and take small steps.",
        "description": "Move ahead today with simple goals.",
        "mood": "Balanced",
        "color": "Gray",
        "compatibility": "Cancer",
        "love": "Say what you feel, plainly.",
        "career": "Shorten your priority list.",
        "money": "Put unnecessary spending on hold.",
        "social": "A short talk with close friends will do you good.",
        "caution": "Don't rush into decisions.",
        "time_window": "13:00-16:00",
        "mantra": "I stay simple, I move forward clearly.",
    },
    color_tips={
        "Gray": "Choose muted tones and clean cuts.",
        "Blue": "Light blue or denim keeps things balanced.",
        "Red": "A small red accessory adds energy.",
        "Green": "Natural tones reflect inner calm.",
        "Pink": "Add warmth with soft details.",
        "Black": "Go for a minimal, strong silhouette.",
    },
    mood_tips={
        "Balanced": "Stay elegant and understated.",
        "Energetic": "Mix sporty and smart pieces.",
        "Romantic": "Lean towards pastel textures.",
        "Calm": "Wear neutral, relaxed cuts.",
    },
    generic_tip="Add one elegant accessory.",
    messages={
        "invalid_sign": "Invalid sign.",
        "invalid_sun": "Invalid sun sign.",
        "invalid_rising": "Invalid rising sign.",
        "invalid_day": "Invalid day.",
        "invalid_lang": "Unsupported language.",
    },
)

TR = Locale(
    code="tr",
    sign_names={
        "aries": "Koç", "taurus": "Boğa", "gemini": "İkizler",
        "cancer": "Yengeç", "leo": "Aslan", "virgo": "Başak",
        "libra": "Terazi", "scorpio": "Akrep", "sagittarius": "Yay",
        "capricorn": "Oğlak", "aquarius": "Kova", "pisces": "Balık",
    },
    timezone="Europe/Istanbul",
    date_pattern="{d:%d}.{d:%m}.{d:%Y}",
    case_map={ord("I"): "ı", ord("İ"): "i"},
    daily_defaults={
        "description": "Günü sade planla ve iletişimde net ol.",
        "compatibility": "Yengeç",
        "mood": "Dengeli",
        "color": "Gri",
        "lucky_number": "4",
        "lucky_time": "14:00",
        "analysis": "Odak dağılmasın. Sakin ilerle.",
        "love": "Duyguları açıkça ifade et.",
        "career": "Öncelik listeni daralt.",
        "money": "Gereksiz harcamaları beklet.",
        "social": "Yakın çevreyle kısa sohbet iyi gelir.",
        "caution": "Acele karar verme.",
        "time_window": "13:00-16:00",
        "mantra": "Sade kalırım, net ilerlerim.",
        "moon_phase": "Nötr",
    },
    personalized_defaults={
        "focus": "Genel",
        "guidance": "Net plan yap, küçük adımlar at.",
        "description": "Bugün sade hedeflerle ilerle.",
        "mood": "Dengeli",
        "color": "Gri",
        "compatibility": "Yengeç",
        "love": "Duyguları açıkça ifade et.",
        "career": "Öncelik listeni daralt.",
        "money": "Gereksiz harcamaları beklet.",
        "social": "Yakın çevreyle kısa sohbet iyi gelir.",
        "caution": "Acele karar verme.",
        "time_window": "13:00-16:00",
        "mantra": "Sade kalırım, net ilerlerim.",
    },
    color_tips={
        "Gri": "Sade tonlar ve net kesimler seç.",
        "Mavi": "Açık mavi ya da denim dengeleme sağlar.",
        "Kırmızı": "Küçük bir kırmızı aksesuar enerji katar.",
        "Yeşil": "Doğal tonlar iç huzuru yansıtır.",
        "Pembe": "Yumuşak detaylarla sıcaklık ekle.",
        "Siyah": "Minimal ve güçlü bir siluet uygula.",
    },
    mood_tips={
        "Dengeli": "Zarif ve yalın kal.",
        "Enerjik": "Spor-şık parçaları karıştır.",
        "Romantik": "Pastel dokulara yönel.",
        "Sakin": "Nötr ve rahat kesimler kullan.",
    },
    generic_tip="Zarif bir aksesuar ekle.",
    messages={
        "invalid_sign": "Geçersiz burç.",
        "invalid_sun": "Geçersiz güneş burcu.",
        "invalid_rising": "Geçersiz yükselen burç.",
        "invalid_day": "Geçersiz gün.",
        "invalid_lang": "Desteklenmeyen dil.",
    },
)

LOCALES: Dict[str, Locale] = {locale.code: locale for locale in (EN, TR)}

_MESSAGE_KEYS = ("invalid_sign", "invalid_sun", "invalid_rising", "invalid_day", "invalid_lang")


def get_locale(code: str) -> Locale:
    try:
        return LOCALES[code]
    except KeyError:
        raise ConfigurationError(f"No locale registered for language '{code}'") from None


def validate_locales(codes: Iterable[str]) -> None:
    """Fail fast if any supported language lacks a complete record."""
    codes = list(codes)
    if not codes:
        raise ConfigurationError("At least one supported language is required")
    for code in codes:
        locale = get_locale(code)
        missing = [s for s in SIGNS if not locale.sign_names.get(s)]
        missing += [
            f for f in DAILY_FIELDS if not locale.daily_defaults.get(f)
        ]
        missing += [
            f for f in PERSONALIZED_FIELDS
            if f not in DERIVED_FIELDS and not locale.personalized_defaults.get(f)
        ]
        missing += [m for m in _MESSAGE_KEYS if not locale.messages.get(m)]
        if missing:
            raise ConfigurationError(f"Locale '{code}' is incomplete: missing {missing}")
        if "{month}" in locale.date_pattern and len(locale.month_names) != 12:
            raise ConfigurationError(f"Locale '{code}' needs twelve month names")
        if locale.daily_defaults["color"] not in locale.color_tips:
            raise ConfigurationError(f"Locale '{code}' has no tip for its default color")
