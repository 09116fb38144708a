from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status derived when attendance is marked.

    Stored as plain text; rows written by other tools may carry other values.
    """

    PRESENT = "Present"
    LATE = "Late"
