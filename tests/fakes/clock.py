from collections.abc import Iterable
from datetime import datetime

from prlens.core.ports.clock import Clock


class FakeClock(Clock):
    def __init__(self, now_values: datetime | Iterable[datetime]) -> None:
        if isinstance(now_values, datetime):
            self._times = iter([now_values])
            self._repeat_last = True
        else:
            self._times = iter(now_values)
            self._repeat_last = False
        self._last: datetime | None = None
        self.calls = 0

    def now(self) -> datetime:
        self.calls += 1
        try:
            self._last = next(self._times)
            return self._last
        except StopIteration:
            if self._repeat_last and self._last is not None:
                return self._last
            raise
