"""Salary payment records and the screens that manage them."""

from __future__ import annotations

import datetime
from dataclasses import dataclass

from .storage import PAYROLL_FILE, Storage
from .ui import Console, _parse_amount
from .user import FIELD_SEPARATOR

DEFAULT_DESCRIPTION = "Monthly Salary"


@dataclass
class PayrollRecord:
    """One salary payment made to a user."""

    username: str
    date: str
    amount: float
    description: str

    def to_line(self) -> str:
        """Return the record as a single separator-delimited line."""
        return FIELD_SEPARATOR.join(
            (self.username, self.date, f"{self.amount:g}", self.description)
        )

    @classmethod
    def from_line(cls, line: str) -> PayrollRecord:
        """Parse a line; the description takes everything after the third field."""
        parts = line.rstrip("\r\n").split(FIELD_SEPARATOR, 3)
        parts += [""] * (4 - len(parts))
        username, date, amount_text, description = parts
        amount = _parse_amount(amount_text)
        return cls(username, date, amount, description)


class PayrollManager:
    """Reads, records and displays salary payments."""

    def __init__(self, storage: Storage, console: Console) -> None:
        self.storage = storage
        self.console = console

    def all_records(self) -> list[PayrollRecord]:
        """Return every payment record in file order."""
        return [
            PayrollRecord.from_line(line)
            for line in self.storage.read_lines(PAYROLL_FILE)
            if line
        ]

    def user_records(self, username: str) -> list[PayrollRecord]:
        """Return the payment records of one user."""
        return [r for r in self.all_records() if r.username == username]

    def add_record(self, record: PayrollRecord) -> None:
        """Append a payment record to the payroll file."""
        self.storage.append_line(PAYROLL_FILE, record.to_line())

    def process_salary_payment(self) -> None:
        """Choose a user, confirm an amount and record the payment."""
        console = self.console
        console.show_title("Process Salary Payment")

        users = self.storage.all_users()
        if not users:
            console.show_message("No users found in the system.")
            return

        console.display_all_users(self.storage)

        username = console.read_line("Enter username to pay (or 'back' to return): ")
        if username == "back":
            return

        target = next((u for u in users if u.username == username), None)
        if target is None:
            console.show_message("User not found.")
            return

        console._write(
            "\n==== User Details ====\n"
            f"Username: {target.username}\n"
            f"Full Name: {target.full_name}\n"
            f"Position: {target.position}\n"
            f"Base Salary: ${target.base_salary:.2f}\n\n"
        )

        amount = target.base_salary
        amount_text = console.read_line(f"Enter payment amount [${amount:.2f}]: ")
        if amount_text:
            try:
                amount = _parse_amount(amount_text)
            except ValueError:
                console.show_message("Invalid amount. Using base salary.")

        description = console.read_line(
            f"Enter payment description [{DEFAULT_DESCRIPTION}]: "
        )
        if not description:
            description = DEFAULT_DESCRIPTION

        today = datetime.date.today().strftime("%Y-%m-%d")
        record = PayrollRecord(username, today, amount, description)
        try:
            self.add_record(record)
        except OSError:
            console.show_message("Error processing payment.")
        else:
            console.show_message("Payment processed successfully.")

    def view_all(self) -> None:
        """Print a table of every payment record."""
        console = self.console
        console.show_title("All Payroll Records")
        records = self.all_records()
        if not records:
            console.show_message("No payroll records found.")
            return
        console._write(f"{'Username':<15}{'Date':<12}{'($) Amount':>10}  Description\n")
        console._write("-" * 100 + "\n")
        for record in records:
            console._write(
                f"{record.username:<15}{record.date:<12}{record.amount:>9.2f}"
                f"  {record.description}\n"
            )
        console._write("-" * 100 + "\n")
        console.wait_for_keypress()

    def view_user(self, username: str) -> None:
        """Print one user's payment history and the total received."""
        console = self.console
        console.show_title(f"Salary History for {username}")
        records = self.user_records(username)
        if not records:
            console.show_message("No payroll records found for this user.")
            return
        console._write(f"{'Date':<12}{'Amount':>10}  Description\n")
        console._write("-" * 100 + "\n")
        for record in records:
            console._write(
                f"{record.date:<12}${record.amount:>9.2f}  {record.description}\n"
            )
        console._write("-" * 100 + "\n")
        total = sum(record.amount for record in records)
        console._write(f"Total received: ${total:.2f}\n")
        console.wait_for_keypress()