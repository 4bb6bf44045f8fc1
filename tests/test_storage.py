import pytest

from salarydesk.storage import (
    PAYROLL_FILE,
    USERS_FILE,
    DuplicateUserError,
    Storage,
    UserNotFoundError,
)
from salarydesk.user import User

PASSWORD = "password"


@pytest.fixture
def storage(tmp_path):
    store = Storage(tmp_path)
    store.initialize()
    return store


def test_initialize_creates_files_and_admin(tmp_path):
    store = Storage(tmp_path)
    store.initialize()
    assert (tmp_path / USERS_FILE).exists()
    assert (tmp_path / PAYROLL_FILE).exists()
    admin = store.find_user("admin")
    assert admin is not None
    assert admin.admin is True
    assert admin.position == "System Admin"
    assert admin.base_salary == 5000.0
    assert store.read_lines(PAYROLL_FILE) == []


def test_initialize_keeps_existing_users(tmp_path):
    store = Storage(tmp_path)
    user = User("alice", PASSWORD, "Alice", "Manager", 100.0)
    store.write_lines(USERS_FILE, [user.to_line()])
    store.initialize()
    assert [u.username for u in store.all_users()] == ["alice"]


def test_initialize_is_idempotent(storage):
    storage.initialize()
    assert [u.username for u in storage.all_users()] == ["admin"]


def test_add_and_find_user(storage):
    user = User("alice", PASSWORD, "Alice Smith", "Manager", 2500.0)
    storage.add_user(user)
    assert storage.find_user("alice") == user
    assert [u.username for u in storage.all_users()] == ["admin", "alice"]


def test_find_missing_user_returns_none(storage):
    assert storage.find_user("nobody") is None


def test_add_duplicate_raises(storage):
    user = User("alice", PASSWORD, "Alice", "Manager", 1.0)
    storage.add_user(user)
    with pytest.raises(DuplicateUserError):
        storage.add_user(User("alice", PASSWORD, "Other", "Clerk", 2.0))
    assert len(storage.all_users()) == 2


def test_delete_user(storage):
    storage.add_user(User("alice", PASSWORD, "Alice", "Manager", 1.0))
    storage.add_user(User("bob", PASSWORD, "Bob", "Clerk", 2.0))
    storage.delete_user("alice")
    assert [u.username for u in storage.all_users()] == ["admin", "bob"]


def test_delete_missing_user_raises(storage):
    with pytest.raises(UserNotFoundError):
        storage.delete_user("ghost")
    assert [u.username for u in storage.all_users()] == ["admin"]


def test_read_lines_of_missing_file(tmp_path):
    assert Storage(tmp_path).read_lines("absent.txt") == []


def test_write_and_append_lines(tmp_path):
    store = Storage(tmp_path)
    store.write_lines("data.txt", ["a", "b"])
    store.append_line("data.txt", "c")
    assert store.read_lines("data.txt") == ["a", "b", "c"]
    store.write_lines("data.txt", ["z"])
    assert store.read_lines("data.txt") == ["z"]


def test_all_users_skips_blank_lines(tmp_path):
    store = Storage(tmp_path)
    user = User("alice", PASSWORD, "Alice", "Manager", 1.0)
    store.write_lines(USERS_FILE, ["", user.to_line(), ""])
    assert store.all_users() == [user]


def test_delete_drops_blank_lines(tmp_path):
    store = Storage(tmp_path)
    first = User("alice", PASSWORD, "Alice", "Manager", 1.0)
    second = User("bob", PASSWORD, "Bob", "Clerk", 2.0)
    store.write_lines(USERS_FILE, [first.to_line(), "", second.to_line()])
    store.delete_user("alice")
    assert store.read_lines(USERS_FILE) == [second.to_line()]