"""Plain-text storage for users and payroll lines."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .user import User

USERS_FILE = "users.txt"
PAYROLL_FILE = "payroll.txt"


class DuplicateUserError(Exception):
    """Raised when adding a user whose username is already taken."""


class UserNotFoundError(Exception):
    """Raised when a user to be removed does not exist."""


class Storage:
    """Line-oriented files kept in one directory."""

    def __init__(self, directory: str | Path = ".") -> None:
        self.directory = Path(directory)

    def _path(self, name: str) -> Path:
        return self.directory / name

    def initialize(self) -> None:
        """Create missing data files; a new users file gets the default admin."""
        for name in (USERS_FILE, PAYROLL_FILE):
            path = self._path(name)
            if path.exists():
                continue
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as handle:
                if name == USERS_FILE:
                    admin = User(
                        "admin", "admin123", "Administrator", "System Admin", 5000.0, True
                    )
                    handle.write(admin.to_line() + "\n")

    def all_users(self) -> list[User]:
        """Return every stored user in file order."""
        return [User.from_line(line) for line in self.read_lines(USERS_FILE) if line]

    def find_user(self, username: str) -> User | None:
        """Return the user with this username, or None."""
        return next((u for u in self.all_users() if u.username == username), None)

    def add_user(self, user: User) -> None:
        """Append a new user; raise DuplicateUserError if the name is taken."""
        if self.find_user(user.username) is not None:
            raise DuplicateUserError(f"username already exists: {user.username}")
        self.append_line(USERS_FILE, user.to_line())

    def delete_user(self, username: str) -> None:
        """Remove a user; raise UserNotFoundError if there is none."""
        kept: list[str] = []
        found = False
        for line in self.read_lines(USERS_FILE):
            if not line:
                continue
            if User.from_line(line).username == username:
                found = True
            else:
                kept.append(line)
        if not found:
            raise UserNotFoundError(f"user not found: {username}")
        self.write_lines(USERS_FILE, kept)

    def read_lines(self, name: str) -> list[str]:
        """Return the lines of a file, or an empty list if it does not exist."""
        path = self._path(name)
        if not path.exists():
            return []
        return path.read_text(encoding="utf-8").splitlines()

    def write_lines(self, name: str, lines: Iterable[str]) -> None:
        """Replace a file's content with the given lines."""
        with self._path(name).open("w", encoding="utf-8") as handle:
            for line in lines:
                handle.write(line + "\n")

    def append_line(self, name: str, line: str) -> None:
        """Append one line to a file, creating it if needed."""
        with self._path(name).open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")