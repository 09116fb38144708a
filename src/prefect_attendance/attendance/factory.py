from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time

from ..core.constants import DEFAULT_LATE_CUTOFF
from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the status strategy from the time of marking.

    Comparison is at minute granularity: with a 07:00 cutoff, 07:00:59 is
    still Present and 07:01:00 is Late.
    """

    cutoff: time = DEFAULT_LATE_CUTOFF

    def for_mark(self, *, now: datetime) -> AttendanceStrategy:
        if (now.hour, now.minute) > (self.cutoff.hour, self.cutoff.minute):
            return LateStrategy()
        return PresentStrategy()
