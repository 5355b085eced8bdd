"""
Client for the external astrology data API (aztro-style).
Why: alternative daily source; the service is flaky, so calls are retried.
"""

import asyncio
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx

from astrovogue.core.errors import GeneratorError
from astrovogue.core.logging import get_logger

logger = get_logger(__name__)

FIELDS = (
    "current_date", "description", "compatibility", "mood",
    "color", "lucky_number", "lucky_time",
)


class AstrologyAPIClient:
    """POST ``?sign=&day=``; up to ``attempts`` tries with linear backoff.

    The n-th failed attempt waits ``backoff_seconds * n`` before the next one.
    """

    def __init__(
        self,
        base_url: str,
        *,
        attempts: int = 3,
        backoff_seconds: float = 0.3,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self.base_url = base_url
        self.attempts = attempts
        self.backoff_seconds = backoff_seconds
        self.timeout = timeout
        self._transport = transport
        self._sleep = sleep

    async def fetch(self, sign: str, day: str) -> Dict[str, Any]:
        last_error: Optional[Exception] = None
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            for attempt in range(1, self.attempts + 1):
                try:
                    response = await client.post(self.base_url, params={"sign": sign, "day": day})
                    response.raise_for_status()
                    data = response.json()
                    if not isinstance(data, dict):
                        raise ValueError(f"expected object, got {type(data).__name__}")
                    return {k: data.get(k) for k in FIELDS}
                except (httpx.HTTPError, ValueError) as e:
                    last_error = e
                    logger.warning(
                        f"astrology api attempt {attempt}/{self.attempts} failed "
                        f"sign={sign} day={day}: {e}"
                    )
                    if attempt < self.attempts:
                        await self._sleep(self.backoff_seconds * attempt)
        raise GeneratorError(f"Astrology API failed after {self.attempts} attempts") from last_error
