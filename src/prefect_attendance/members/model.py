from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Member:
    """Domain entity: a tracked individual identified by a badge number.

    Note: Plain data object (no DB access code here).
    """

    id: str
    role: str
    prefect_number: str
    name: Optional[str] = None


@dataclass(frozen=True)
class MemberResolution:
    """Outcome of find-or-create: which member, and whether it was just created."""

    member_id: str
    created: bool

    @classmethod
    def found(cls, member_id: str) -> "MemberResolution":
        return cls(member_id=member_id, created=False)

    @classmethod
    def new(cls, member_id: str) -> "MemberResolution":
        return cls(member_id=member_id, created=True)
