from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence

from .model import Member


class MemberRepository(Protocol):
    """Repository interface for Member.

    Note (DIP): the service layer depends on this interface, not on SQLite.
    """

    def get_by_id(self, member_id: str) -> Optional[Member]:
        raise NotImplementedError

    def get_by_prefect_number(self, prefect_number: str) -> Optional[Member]:
        raise NotImplementedError

    def insert_if_absent(self, *, member_id: str, prefect_number: str, role: str) -> bool:
        """Insert unless the prefect number exists. True when a row was written."""

        raise NotImplementedError

    def create(self, *, member_id: str, prefect_number: str, role: str, name: Optional[str]) -> None:
        raise NotImplementedError

    def update_fields(self, member_id: str, changes: Mapping[str, Optional[str]]) -> bool:
        """Apply all changes atomically. False when no member has ``member_id``."""

        raise NotImplementedError

    def delete_by_id(self, member_id: str) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Member]:
        raise NotImplementedError

    def delete_all(self) -> int:
        raise NotImplementedError
