"""Text console: screens, menus and user management dialogs."""

from __future__ import annotations

import getpass
import math
import os
import re
import subprocess
import sys
from typing import TextIO

from .storage import DuplicateUserError, Storage, UserNotFoundError
from .user import User

_BANNER = "========================================="

_WELCOME = """
    ================================================
       ENTERPRISE SALARY PAYMENT SYSTEM
    ================================================
    
    Welcome to the salary payment management system.
    This system allows for tracking and processing 
    employee salary payments.
    
    ------------------------------------------------
    """

_GOODBYE = """
    ================================================
       THANK YOU FOR USING THE SYSTEM
    ================================================
    
    All data has been saved.
    Have a great day!
    
    ------------------------------------------------
    """

_NUMBER_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _parse_amount(text: str) -> float:
    """Read a number from the start of text, ignoring anything after it."""
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    literal = match.group(1)
    value = float(literal)
    if math.isinf(value) and "inf" not in literal.lower():
        raise ValueError(f"number out of range: {text!r}")
    return value


def _clean_hidden(text: str) -> str:
    """Apply backspaces and keep only printable ASCII characters."""
    kept: list[str] = []
    for char in text:
        if char == "\b":
            if kept:
                kept.pop()
        elif 32 <= ord(char) <= 126:
            kept.append(char)
    return "".join(kept)


class Console:
    """Interactive text interface bound to an input and an output stream."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clear: bool = True,
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._clear = clear

    def _write(self, text: str) -> None:
        self._stdout.write(text)

    def read_line(self, prompt: str = "") -> str:
        """Show a prompt and return one line of input without its newline."""
        self._write(prompt)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EOFError("input closed")
        return line.rstrip("\r\n")

    def clear_screen(self) -> None:
        """Clear the terminal if clearing is enabled."""
        if not self._clear:
            return
        self._stdout.flush()
        command = "cls" if os.name == "nt" else "clear"
        try:
            subprocess.run(command, shell=os.name == "nt", check=False)
        except OSError:
            pass

    def show_title(self, title: str) -> None:
        self.clear_screen()
        self._write(f"{_BANNER}\n   {title}\n{_BANNER}\n\n")

    def show_message(self, message: str) -> None:
        self._write(f"\n{message}\n")
        self.wait_for_keypress()

    def wait_for_keypress(self) -> None:
        """Wait until a line is entered; end of input also continues."""
        self._write("\nPress Enter to continue...")
        self._stdout.flush()
        self._stdin.readline()

    def show_welcome_screen(self) -> None:
        self.clear_screen()
        self._write(_WELCOME)
        self.wait_for_keypress()

    def show_exit_message(self) -> None:
        self.clear_screen()
        self._write(_GOODBYE)
        self._stdout.flush()

    def _menu(self, title: str, options: list[str]) -> str:
        self.show_title(title)
        for number, option in enumerate(options, start=1):
            self._write(f"{number}. {option}\n")
        self._write("\nType 'exit' to quit the program\n\n")
        return self.read_line("Enter your choice: ")

    def show_auth_menu(self) -> str:
        return self._menu("Authentication", ["Login", "Register"])

    def show_admin_menu(self) -> str:
        return self._menu(
            "Admin Menu",
            [
                "View All Users",
                "Create User",
                "Delete User",
                "View All Payrolls",
                "Process Salary Payment",
                "Log Out",
            ],
        )

    def show_user_menu(self) -> str:
        return self._menu("User Menu", ["View Profile", "View Salary History", "Log Out"])

    def display_all_users(self, storage: Storage) -> None:
        """Print a table of every user."""
        self.show_title("All Users")
        users = storage.all_users()
        if not users:
            self.show_message("No users found in the system.")
            return
        self._write(
            f"{'Username':<15}{'Full Name':<25}{'Position':<20}{'Salary':>10}  Role\n"
        )
        self._write("-" * 80 + "\n")
        for user in users:
            role = "Admin" if user.admin else "User"
            self._write(
                f"{user.username:<15}{user.full_name:<25}{user.position:<20}"
                f"${user.base_salary:>9.2f}  {role}\n"
            )
        self._write("-" * 80 + "\n")
        self.wait_for_keypress()

    def create_user(self, storage: Storage) -> None:
        """Ask for a new user's details and store the account."""
        self.show_title("Create New User")

        username = self.read_line("Enter username: ")
        if not username:
            self.show_message("Username cannot be empty.")
            return
        if storage.find_user(username) is not None:
            self.show_message("Username already exists.")
            return

        hidden_entry = self.get_hidden_input("Enter password: ")
        if not hidden_entry:
            self.show_message("Password cannot be empty.")
            return

        full_name = self.read_line("Enter full name: ")
        if not full_name:
            self.show_message("Full name cannot be empty.")
            return

        position = self.read_line("Enter position: ")
        if not position:
            self.show_message("Position cannot be empty.")
            return

        try:
            salary = _parse_amount(self.read_line("Enter base salary: $"))
        except ValueError:
            self.show_message("Invalid salary amount.")
            return
        if salary < 0:
            self.show_message("Salary cannot be negative.")
            return

        admin_choice = self.read_line("Make this user an admin? (y/n): ")
        user = User(
            username, hidden_entry, full_name, position, salary, admin_choice in ("y", "Y")
        )

        try:
            storage.add_user(user)
        except (DuplicateUserError, OSError):
            self.show_message("Error creating user.")
        else:
            self.show_message("User created successfully.")

    def delete_user(self, storage: Storage) -> None:
        """List users and remove the one chosen after confirmation."""
        self.show_title("Delete User")
        users = storage.all_users()
        if not users:
            self.show_message("No users found in the system.")
            return

        self._write(f"{'Username':<15}{'Full Name':<25}{'Position':<20}  Role\n")
        self._write("-" * 70 + "\n")
        for user in users:
            if user.username == "admin":
                continue
            role = "Admin" if user.admin else "User"
            self._write(
                f"{user.username:<15}{user.full_name:<25}{user.position:<20}  {role}\n"
            )
        self._write("-" * 70 + "\n\n")

        username = self.read_line("Enter username to delete (or 'back' to return): ")
        if username == "back":
            return
        if username == "admin":
            self.show_message("Cannot delete the main admin account.")
            return

        confirm = self.read_line(
            f"Are you sure you want to delete user '{username}'? (y/n): "
        )
        if confirm not in ("y", "Y"):
            self.show_message("Delete operation cancelled.")
            return
        try:
            storage.delete_user(username)
        except (UserNotFoundError, OSError):
            self.show_message("User not found or could not be deleted.")
        else:
            self.show_message("User deleted successfully.")

    def show_user_profile(self, user: User | None) -> None:
        if user is None:
            self.show_message("User not found.")
            return
        self.show_title("User Profile")
        self._write(f"Username: {user.username}\n")
        self._write(f"Full Name: {user.full_name}\n")
        self._write(f"Position: {user.position}\n")
        self._write(f"Base Salary: ${user.base_salary:.2f}\n")
        role = "Administrator" if user.admin else "Regular User"
        self._write(f"Role: {role}\n")
        self.wait_for_keypress()

    def get_hidden_input(self, prompt: str) -> str:
        """Read a line without showing it on a terminal."""
        if self._stdin is sys.stdin and sys.stdin.isatty():
            return _clean_hidden(getpass.getpass(prompt, stream=self._stdout))
        self._write(prompt)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EOFError("input closed")
        self._write("\n")
        return _clean_hidden(line.rstrip("\r\n"))