from __future__ import annotations

import pytest

from prefect_attendance.core.exceptions import DuplicateMemberError, ValidationError


def test_create_member_returns_generated_id(container):
    svc = container.member_service

    member_id = svc.create_member("A100", "student", "Ada")

    member = svc.get_member(member_id)
    assert member.prefect_number == "A100"
    assert member.role == "student"
    assert member.name == "Ada"


def test_create_member_with_taken_number_fails_without_new_row(container):
    svc = container.member_service
    svc.create_member("A100", "student")

    with pytest.raises(DuplicateMemberError) as exc:
        svc.create_member("A100", "staff", "Someone")

    assert "A100" in str(exc.value)
    assert len(svc.list_members()) == 1


def test_create_member_requires_number_and_role(container):
    svc = container.member_service

    with pytest.raises(ValidationError):
        svc.create_member("", "student")
    with pytest.raises(ValidationError):
        svc.create_member("A100", "   ")
    assert svc.list_members() == []


def test_update_single_field_leaves_others(container):
    svc = container.member_service
    member_id = svc.create_member("A100", "student", "Ada")

    assert svc.update_member(member_id, role="monitor") is True

    member = svc.get_member(member_id)
    assert member.role == "monitor"
    assert member.prefect_number == "A100"
    assert member.name == "Ada"


def test_update_several_fields(container):
    svc = container.member_service
    member_id = svc.create_member("A100", "student")

    svc.update_member(member_id, prefect_number="A101", name="Ada")

    member = svc.get_member(member_id)
    assert (member.prefect_number, member.role, member.name) == ("A101", "student", "Ada")


def test_update_unknown_id_is_silent_noop(container):
    svc = container.member_service
    member_id = svc.create_member("A100", "student", "Ada")

    assert svc.update_member("missing", prefect_number="Z1", role="x", name="y") is False

    (member,) = svc.list_members()
    assert member.id == member_id
    assert (member.prefect_number, member.role, member.name) == ("A100", "student", "Ada")


def test_update_to_taken_number_is_rejected(container):
    svc = container.member_service
    svc.create_member("A100", "student")
    other = svc.create_member("B200", "student")

    with pytest.raises(DuplicateMemberError):
        svc.update_member(other, prefect_number="A100")

    assert svc.get_member(other).prefect_number == "B200"


def test_delete_member(container):
    svc = container.member_service
    member_id = svc.create_member("A100", "student")

    assert svc.delete_member(member_id) is True
    assert svc.delete_member(member_id) is False
    assert svc.list_members() == []


def test_resolve_or_create_against_store(container):
    svc = container.member_service

    created = svc.resolve_or_create("A100", "student")
    found = svc.resolve_or_create("A100", "student")

    assert created.created and not found.created
    assert created.member_id == found.member_id
    assert svc.get_member(created.member_id).name is None


def test_update_with_one_invalid_field_writes_nothing(container):
    svc = container.member_service
    member_id = svc.create_member("A100", "student", "Ada")

    with pytest.raises(ValidationError):
        svc.update_member(member_id, prefect_number="A101", role="   ")
    with pytest.raises(ValidationError):
        svc.update_member(member_id, role="monitor", name=42)

    member = svc.get_member(member_id)
    assert (member.prefect_number, member.role, member.name) == ("A100", "student", "Ada")


def test_update_with_taken_number_rolls_back_other_fields(container):
    svc = container.member_service
    svc.create_member("A100", "student")
    other = svc.create_member("B200", "student", "Bo")

    with pytest.raises(DuplicateMemberError):
        svc.update_member(other, role="monitor", name="Bob", prefect_number="A100")

    member = svc.get_member(other)
    assert (member.prefect_number, member.role, member.name) == ("B200", "student", "Bo")
