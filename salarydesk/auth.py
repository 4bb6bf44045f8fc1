"""Login and self-registration dialogs."""

from __future__ import annotations

import re

from .storage import DuplicateUserError, Storage
from .ui import Console, _parse_amount
from .user import User

_USERNAME_PATTERN = re.compile(r"[a-zA-Z0-9_]+")
MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


def validate_username(username: str) -> bool:
    """At least three characters, only ASCII letters, digits and underscores."""
    if len(username) < MIN_USERNAME_LENGTH:
        return False
    return _USERNAME_PATTERN.fullmatch(username) is not None


def validate_password(password: str) -> bool:
    """At least six characters."""
    return len(password) >= MIN_PASSWORD_LENGTH


def login(console: Console, storage: Storage) -> User | None:
    """Ask for credentials and return the matching user, or None on failure."""
    console.show_title("Login")

    username = console.read_line("Enter username: ")
    if not username:
        console.show_message("Username cannot be empty.")
        return None

    entered = console.get_hidden_input("Enter password: ")
    if not entered:
        console.show_message("Password cannot be empty.")
        return None

    user = storage.find_user(username)
    if user is None:
        console.show_message("User not found.")
        return None

    if user.password != entered:
        console.show_message("Incorrect password.")
        return None

    console.show_message("Login successful!")
    return user


def register_user(console: Console, storage: Storage) -> bool:
    """Create a regular (non-admin) account; return True if it was stored."""
    console.show_title("Register New User")

    username = console.read_line("Create username: ")
    if not validate_username(username):
        console.show_message(
            "Username must be at least 3 characters and contain only letters, "
            "numbers, and underscores."
        )
        return False

    if storage.find_user(username) is not None:
        console.show_message("Username already exists.")
        return False

    chosen = console.get_hidden_input("Create password: ")
    if not validate_password(chosen):
        console.show_message("Password must be at least 6 characters long.")
        return False

    confirmation = console.get_hidden_input("Confirm password: ")
    if chosen != confirmation:
        console.show_message("Passwords do not match.")
        return False

    full_name = console.read_line("Enter your full name: ")
    if not full_name:
        console.show_message("Full name cannot be empty.")
        return False

    position = console.read_line("Enter your position: ")
    if not position:
        console.show_message("Position cannot be empty.")
        return False

    try:
        salary = _parse_amount(console.read_line("Enter your base salary: $"))
    except ValueError:
        console.show_message("Invalid salary amount.")
        return False
    if salary < 0:
        console.show_message("Salary cannot be negative.")
        return False

    try:
        storage.add_user(User(username, chosen, full_name, position, salary, False))
    except (DuplicateUserError, OSError):
        console.show_message("Error creating user account.")
        return False

    console.show_message("Registration successful! You can now log in.")
    return True