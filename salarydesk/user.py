"""User accounts and their one-line text form."""

from __future__ import annotations

from dataclasses import dataclass

FIELD_SEPARATOR = "|"
_FIELD_COUNT = 6


@dataclass
class User:
    """An employee account as kept in the users file."""

    username: str
    password: str
    full_name: str
    position: str
    base_salary: float
    admin: bool = False

    def to_line(self) -> str:
        """Return the record as a single separator-delimited line."""
        return FIELD_SEPARATOR.join(
            (
                self.username,
                self.password,
                self.full_name,
                self.position,
                repr(float(self.base_salary)),
                "1" if self.admin else "0",
            )
        )

    @classmethod
    def from_line(cls, line: str) -> User:
        """Parse a line produced by :meth:`to_line`."""
        parts = line.rstrip("\r\n").split(FIELD_SEPARATOR)
        if len(parts) != _FIELD_COUNT:
            raise ValueError(f"malformed user record: {line!r}")
        username, password, full_name, position, salary_text, admin_flag = parts
        if admin_flag not in ("0", "1"):
            raise ValueError(f"malformed admin flag in user record: {line!r}")
        try:
            salary = float(salary_text)
        except ValueError:
            raise ValueError(f"malformed salary in user record: {line!r}") from None
        return cls(username, password, full_name, position, salary, admin_flag == "1")