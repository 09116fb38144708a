from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark of a member for one day.

    ``prefect_number`` and ``role`` are joined from the owning member for
    display; they are None when the member row no longer exists.
    """

    id: str
    member_id: str
    date: str
    timestamp: str
    status: str
    prefect_number: Optional[str] = None
    role: Optional[str] = None
