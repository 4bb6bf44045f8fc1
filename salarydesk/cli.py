"""Command-line entry point and the main menu loop."""

from __future__ import annotations

import argparse

from .auth import login, register_user
from .payroll import PayrollManager
from .storage import Storage
from .ui import Console
from .user import User


def _admin_step(choice: str, console: Console, storage: Storage,
                payroll: PayrollManager, user: User) -> tuple[User | None, bool]:
    if choice == "1":
        console.display_all_users(storage)
    elif choice == "2":
        console.create_user(storage)
    elif choice == "3":
        console.delete_user(storage)
    elif choice == "4":
        payroll.view_all()
    elif choice == "5":
        payroll.process_salary_payment()
    elif choice == "6":
        console.show_message("Logged out successfully.")
        return None, True
    elif choice == "exit":
        return user, False
    return user, True


def _user_step(choice: str, console: Console,
               payroll: PayrollManager, user: User) -> tuple[User | None, bool]:
    if choice == "1":
        console.show_user_profile(user)
    elif choice == "2":
        payroll.view_user(user.username)
    elif choice == "3":
        console.show_message("Logged out successfully.")
        return None, True
    elif choice == "exit":
        return user, False
    return user, True


def run(console: Console, storage: Storage) -> None:
    """Drive the menus until the user exits or input ends."""
    payroll = PayrollManager(storage, console)
    current: User | None = None
    running = True
    try:
        while running:
            if current is None:
                choice = console.show_auth_menu()
                if choice == "1":
                    current = login(console, storage)
                elif choice == "2":
                    register_user(console, storage)
                elif choice == "exit":
                    running = False
            elif current.admin:
                choice = console.show_admin_menu()
                current, running = _admin_step(choice, console, storage, payroll, current)
            else:
                choice = console.show_user_menu()
                current, running = _user_step(choice, console, payroll, current)
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Start the salary payment system."""
    parser = argparse.ArgumentParser(
        prog="salarydesk", description="Salary payment management system."
    )
    parser.add_argument(
        "--data-dir", default=".", help="directory holding users.txt and payroll.txt"
    )
    parser.add_argument(
        "--no-clear", action="store_true", help="do not clear the screen between views"
    )
    args = parser.parse_args(argv)

    storage = Storage(args.data_dir)
    storage.initialize()
    console = Console(clear=not args.no_clear)
    try:
        console.show_welcome_screen()
        run(console, storage)
    finally:
        console.show_exit_message()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())