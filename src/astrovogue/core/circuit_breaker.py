"""
Tiny circuit breaker for the text generator.
Why: fail fast to the fallback payload while the generator keeps erroring.
"""

import time
from enum import Enum
from typing import Callable

from .logging import get_logger

_LOG = get_logger(__name__)


class CircuitState(Enum):
    CLOSED = "closed"
    OPEN = "open"
    HALF_OPEN = "half_open"


class CircuitBreaker:
    def __init__(
        self,
        failure_threshold: int = 5,
        recovery_timeout: int = 60,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.state = CircuitState.CLOSED
        self.failure_count = 0
        self.failure_threshold = failure_threshold
        self.recovery_timeout = recovery_timeout
        self._clock = clock
        self._opened_at: float = 0.0
        self._trial_in_flight = False

    def allow(self) -> bool:
        if self.state is CircuitState.CLOSED:
            return True
        if (
            self.state is CircuitState.OPEN
            and (self._clock() - self._opened_at) >= self.recovery_timeout
        ):
            self.state = CircuitState.HALF_OPEN
            self._trial_in_flight = False
        if self.state is CircuitState.HALF_OPEN and not self._trial_in_flight:
            # one trial call until its result is recorded
            self._trial_in_flight = True
            return True
        return False

    def record_success(self) -> None:
        self.state = CircuitState.CLOSED
        self.failure_count = 0
        self._trial_in_flight = False

    def cancel_trial(self) -> None:
        """Release the half-open slot when the call ended without a verdict."""
        self._trial_in_flight = False

    def record_failure(self) -> None:
        self.failure_count += 1
        self._trial_in_flight = False
        if self.state is CircuitState.HALF_OPEN or (
            self.failure_count >= self.failure_threshold
        ):
            if self.state is not CircuitState.OPEN:
                _LOG.warning(f"circuit opened after {self.failure_count} failures")
            self.state = CircuitState.OPEN
            self._opened_at = self._clock()
