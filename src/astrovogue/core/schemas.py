"""
Pydantic models for the API boundaries.
Why: contract-first; the front-end card relies on every field being present.
"""

from typing import List, Optional

from pydantic import BaseModel


class PersonalizedRequest(BaseModel):
    # Enumeration checks live in core.validation
    # and come back as 400 {error}.
    sun: Optional[str] = None
    rising: Optional[str] = None
    day: Optional[str] = None
    lang: Optional[str] = None


class DailyReading(BaseModel):
    brand: str
    sign: str
    sign_name: str
    day: str
    date: str
    description: str
    compatibility: str
    mood: str
    color: str
    lucky_number: str
    lucky_time: str
    analysis: str
    love: str
    career: str
    money: str
    social: str
    caution: str
    time_window: str
    mantra: str
    moon_phase: str
    fashion_tip: str


class PersonalizedReading(BaseModel):
    brand: str
    sun: str
    sun_name: str
    rising: Optional[str] = None
    rising_name: Optional[str] = None
    day: str
    date: str
    focus: str
    guidance: str
    style: str
    description: str
    mood: str
    color: str
    compatibility: str
    love: str
    career: str
    money: str
    social: str
    caution: str
    time_window: str
    mantra: str


class ErrorResponse(BaseModel):
    error: str


class Sign(BaseModel):
    id: str
    name: str


class SignsResponse(BaseModel):
    lang: str
    signs: List[Sign]
