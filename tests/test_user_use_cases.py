"""Tests for the user service."""
import pytest

from app.application.dtos.user_dto import UserCreate, UserUpdate
from app.application.use_cases import AsyncUserService
from app.domain.exceptions import ConflictError, NotFoundError


def _create_data(email: str = "john@example.com", **overrides) -> UserCreate:
    data = {
        "first_name": "John",
        "last_name": "Doe",
        "email": email,
        "phone_number": "555-0100",
        "group_ids": [],
    }
    data.update(overrides)
    return UserCreate(**data)


def _update_data(email: str, **overrides) -> UserUpdate:
    data = {
        "first_name": "Johnny",
        "last_name": "Doe",
        "email": email,
        "phone_number": None,
        "is_active": True,
        "group_ids": [],
    }
    data.update(overrides)
    return UserUpdate(**data)


@pytest.fixture
def service(db):
    return AsyncUserService(db)


async def test_create_user_returns_the_input_fields(service):
    user = await service.create_user(_create_data())

    assert user.id > 0
    assert user.first_name == "John"
    assert user.last_name == "Doe"
    assert user.email == "john@example.com"
    assert user.phone_number == "555-0100"
    assert user.is_active is True
    assert user.modified_date is None
    assert user.groups == []


async def test_create_user_with_existing_email_raises_conflict(service):
    await service.create_user(_create_data())

    with pytest.raises(ConflictError):
        await service.create_user(_create_data(first_name="Other"))

    assert await service.count_users() == 1


async def test_create_user_with_unknown_group_raises_not_found(service):
    with pytest.raises(NotFoundError) as exc_info:
        await service.create_user(_create_data(group_ids=[1, 42]))

    assert "42" in str(exc_info.value)
    assert await service.count_users() == 0


async def test_create_user_with_group_shows_exactly_that_group(service):
    created = await service.create_user(_create_data(group_ids=[1]))

    user = await service.get_user(created.id)

    assert [group.id for group in user.groups] == [1]
    assert user.groups[0].name == "Admin"
    assert len(user.groups[0].permissions) == 8


async def test_create_user_ignores_repeated_group_ids(service):
    created = await service.create_user(_create_data(group_ids=[3, 3, 2]))

    assert [group.id for group in created.groups] == [2, 3]


async def test_get_user_returns_none_for_missing_id(service):
    assert await service.get_user(9999) is None


async def test_list_users_after_seeding_three_users(service):
    for email in ("john@example.com", "jane@example.com", "bob@example.com"):
        await service.create_user(_create_data(email=email))

    users = await service.list_users()

    assert len(users) == 3
    assert "john@example.com" in [user.email for user in users]


async def test_update_user_overwrites_fields(service):
    created = await service.create_user(_create_data(group_ids=[2]))

    updated = await service.update_user(
        created.id,
        _update_data("johnny@example.com", is_active=False, group_ids=[3, 4]),
    )

    assert updated.first_name == "Johnny"
    assert updated.email == "johnny@example.com"
    assert updated.phone_number is None
    assert updated.is_active is False
    assert updated.modified_date is not None
    assert [group.id for group in updated.groups] == [3, 4]


async def test_update_user_with_empty_group_ids_clears_membership(service):
    created = await service.create_user(_create_data(group_ids=[1]))

    await service.update_user(created.id, _update_data("john@example.com", group_ids=[]))

    user = await service.get_user(created.id)
    assert user.groups == []


async def test_update_user_keeping_own_email_is_allowed(service):
    created = await service.create_user(_create_data())

    updated = await service.update_user(created.id, _update_data("john@example.com"))

    assert updated.email == "john@example.com"


async def test_update_missing_user_raises_not_found(service):
    with pytest.raises(NotFoundError):
        await service.update_user(9999, _update_data("ghost@example.com"))


async def test_update_to_another_users_email_raises_conflict(service):
    john = await service.create_user(_create_data("john@example.com"))
    await service.create_user(_create_data("jane@example.com"))

    with pytest.raises(ConflictError):
        await service.update_user(john.id, _update_data("jane@example.com"))

    assert (await service.get_user(john.id)).email == "john@example.com"


async def test_update_with_unknown_group_keeps_previous_membership(service):
    created = await service.create_user(_create_data(group_ids=[1]))

    with pytest.raises(NotFoundError):
        await service.update_user(created.id, _update_data("john@example.com", group_ids=[2, 77]))

    user = await service.get_user(created.id)
    assert [group.id for group in user.groups] == [1]
    assert user.first_name == "John"


async def test_delete_user_once_then_false(service):
    created = await service.create_user(_create_data(group_ids=[1, 2]))

    assert await service.delete_user(created.id) is True
    assert await service.delete_user(created.id) is False
    assert await service.get_user(created.id) is None


async def test_count_users_by_group_includes_empty_groups(service):
    await service.create_user(_create_data("a@example.com", group_ids=[1, 2]))
    await service.create_user(_create_data("b@example.com", group_ids=[1]))

    counts = await service.count_users_by_group()

    assert [(c.group_id, c.group_name, c.user_count) for c in counts] == [
        (1, "Admin", 2),
        (2, "Level 1", 1),
        (3, "Level 2", 0),
        (4, "Manager", 0),
    ]
