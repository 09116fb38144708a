from __future__ import annotations

from datetime import datetime, time

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Marked after the cutoff minute."""

    def decide(self, *, now: datetime, cutoff: time) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.LATE)


def late_note(*, now: datetime, cutoff: time) -> str:
    minutes = (now.hour * 60 + now.minute) - (cutoff.hour * 60 + cutoff.minute)
    minutes = max(minutes, 0)
    return f"Arrived {minutes // 60}h {minutes % 60}m late"
