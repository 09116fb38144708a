from datetime import datetime, time

import pytest

from prefect_attendance.attendance.factory import AttendanceStrategyFactory
from prefect_attendance.attendance.strategies.late_strategy import LateStrategy, late_note
from prefect_attendance.attendance.strategies.present_strategy import PresentStrategy
from prefect_attendance.core.enums import AttendanceStatus


@pytest.mark.parametrize(
    "hour, minute, second",
    [(6, 30, 0), (6, 59, 59), (7, 0, 0), (7, 0, 59)],
)
def test_factory_present_up_to_cutoff_minute(hour, minute, second):
    now = datetime(2026, 2, 2, hour, minute, second)

    strategy = AttendanceStrategyFactory().for_mark(now=now)

    assert isinstance(strategy, PresentStrategy)
    assert strategy.decide(now=now, cutoff=time(7, 0)).status == AttendanceStatus.PRESENT


@pytest.mark.parametrize(
    "hour, minute, second",
    [(7, 1, 0), (7, 59, 59), (8, 0, 0), (23, 59, 59)],
)
def test_factory_late_after_cutoff_minute(hour, minute, second):
    now = datetime(2026, 2, 2, hour, minute, second)

    strategy = AttendanceStrategyFactory().for_mark(now=now)

    assert isinstance(strategy, LateStrategy)
    assert strategy.decide(now=now, cutoff=time(7, 0)).status == AttendanceStatus.LATE


def test_factory_respects_configured_cutoff():
    factory = AttendanceStrategyFactory(cutoff=time(8, 30))

    assert isinstance(factory.for_mark(now=datetime(2026, 2, 2, 8, 30, 30)), PresentStrategy)
    assert isinstance(factory.for_mark(now=datetime(2026, 2, 2, 8, 31)), LateStrategy)


def test_late_note_counts_minutes_past_cutoff():
    assert late_note(now=datetime(2026, 2, 2, 8, 15), cutoff=time(7, 0)) == "Arrived 1h 15m late"
    assert late_note(now=datetime(2026, 2, 2, 7, 1), cutoff=time(7, 0)) == "Arrived 0h 1m late"
