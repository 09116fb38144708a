from __future__ import annotations

import logging
import uuid
from typing import Callable, Optional, Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import ConflictError, DuplicateMemberError
from .model import Member, MemberResolution
from .repository import MemberRepository

logger = logging.getLogger(__name__)


def new_id() -> str:
    return str(uuid.uuid4())


class MemberService:
    """Use cases: resolve badge numbers to members and manage the roster."""

    def __init__(self, members: MemberRepository, *, id_factory: Callable[[], str] = new_id):
        self._members = members
        self._new_id = id_factory

    def resolve_or_create(self, prefect_number: str, role: str) -> MemberResolution:
        """Find the member owning ``prefect_number``, creating it on first sighting.

        A concurrent first sighting of the same number loses the insert and
        resolves to the row the other call wrote.
        """
        prefect_number = require_non_empty(prefect_number, "Prefect number")
        role = require_non_empty(role, "Role")

        existing = self._members.get_by_prefect_number(prefect_number)
        if existing:
            return MemberResolution.found(existing.id)

        member_id = self._new_id()
        if self._members.insert_if_absent(member_id=member_id, prefect_number=prefect_number, role=role):
            logger.info("Created member %s for prefect number %s", member_id, prefect_number)
            return MemberResolution.new(member_id)

        winner = self._members.get_by_prefect_number(prefect_number)
        if not winner:
            raise ConflictError(f"Member {prefect_number} could not be resolved")
        return MemberResolution.found(winner.id)

    def get_member(self, member_id: str) -> Optional[Member]:
        return self._members.get_by_id(member_id)

    def get_by_prefect_number(self, prefect_number: str) -> Optional[Member]:
        return self._members.get_by_prefect_number(prefect_number)

    def list_members(self) -> Sequence[Member]:
        return self._members.list_all()

    def create_member(self, prefect_number: str, role: str, name: Optional[str] = None) -> str:
        prefect_number = require_non_empty(prefect_number, "Prefect number")
        role = require_non_empty(role, "Role")

        member_id = self._new_id()
        try:
            self._members.create(
                member_id=member_id,
                prefect_number=prefect_number,
                role=role,
                name=optional_text(name, "Name"),
            )
        except ConflictError as e:
            raise DuplicateMemberError(prefect_number) from e

        logger.info("Created member %s for prefect number %s", member_id, prefect_number)
        return member_id

    def update_member(
        self,
        member_id: str,
        *,
        prefect_number: Optional[str] = None,
        role: Optional[str] = None,
        name: Optional[str] = None,
    ) -> bool:
        """Update the provided fields, leaving the others untouched.

        All fields are validated before anything is written and applied in one
        transaction. An unknown ``member_id`` touches no rows and returns False.
        """
        changes = {}
        if role is not None:
            changes["role"] = require_non_empty(role, "Role")
        if name is not None:
            changes["name"] = optional_text(name, "Name")
        if prefect_number is not None:
            changes["prefect_number"] = require_non_empty(prefect_number, "Prefect number")
        if not changes:
            return False

        try:
            changed = self._members.update_fields(member_id, changes)
        except ConflictError as e:
            raise DuplicateMemberError(changes["prefect_number"]) from e

        if not changed:
            logger.debug("Update of member %s matched no rows", member_id)
        return changed

    def delete_member(self, member_id: str) -> bool:
        # Attendance rows of the member are left in place.
        deleted = self._members.delete_by_id(member_id)
        if deleted:
            logger.info("Deleted member %s", member_id)
        return deleted
