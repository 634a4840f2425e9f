# File: tests/test_user_service.py

import pytest

from users_api.core.security import verify_password
from users_api.repositories import user_repo
from users_api.services import user_service


def test_insert_does_not_mutate_body(db):
    body = {"email": "dave@example.com", "password": "pw", "permissionLevel": 7}
    user = user_service.insert(db, body)

    assert body == {"email": "dave@example.com", "password": "pw", "permissionLevel": 7}
    assert user.id is not None
    assert user.permissionLevel == 1
    assert verify_password("pw", user.password)


def test_insert_requires_password(db):
    with pytest.raises(KeyError):
        user_service.insert(db, {"email": "eve@example.com"})


def test_patch_without_password_keeps_hash(db):
    user = user_service.insert(db, {"password": "pw"})
    stored = user.password

    patched = user_service.patch(db, user.id, {"firstName": "Eve", "unknown": 1})
    assert patched.firstName == "Eve"
    assert patched.password == stored


def test_patch_missing_user(db):
    assert user_service.patch(db, 12345, {"firstName": "Nobody"}) is None


def test_repo_list_and_remove(db):
    first = user_repo.create_user(db, {"email": "a@example.com"})
    second = user_repo.create_user(db, {"email": "b@example.com"})

    assert [u.id for u in user_repo.list_users(db, 10)] == [first.id, second.id]
    assert user_repo.remove_by_id(db, first.id) is True
    assert user_repo.remove_by_id(db, first.id) is False
    assert [u.id for u in user_repo.list_users(db, 10)] == [second.id]


def test_patch_ignores_permission_level(db):
    user = user_service.insert(db, {"password": "pw"})

    patched = user_service.patch(db, user.id, {"permissionLevel": 5})
    assert patched.permissionLevel == 1
