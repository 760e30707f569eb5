"""Pacing adapters: the pause taken between two page fetches."""

import time

from src.config import DEFAULT_REQUEST_DELAY_S
from src.domain.ports import PacerPort


class SleepPacer(PacerPort):
    """Sleep a fixed delay so the TrueCoach API is not hammered."""

    def __init__(self, delay_s: float = DEFAULT_REQUEST_DELAY_S, sleep=time.sleep):
        self.delay_s = delay_s
        self._sleep = sleep

    def wait(self) -> None:
        if self.delay_s > 0:
            self._sleep(self.delay_s)


class NoDelayPacer(PacerPort):
    """No-op pacer used when the delay is disabled."""

    def wait(self) -> None:
        return None


def build_pacer(delay_s: float) -> PacerPort:
    if delay_s > 0:
        return SleepPacer(delay_s)
    return NoDelayPacer()
