import io
import re

import pytest

from salarydesk.payroll import PayrollManager, PayrollRecord
from salarydesk.storage import Storage
from salarydesk.user import User


@pytest.fixture
def storage(tmp_path):
    store = Storage(tmp_path)
    store.initialize()
    password = "password"
    store.add_user(User("alice", password, "Alice Example", "Clerk", 1200.0))
    return store


def make_manager(storage, text=""):
    from salarydesk.ui import Console

    out = io.StringIO()
    console = Console(io.StringIO(text), out, clear=False)
    return PayrollManager(storage, console), out


def test_record_round_trip():
    record = PayrollRecord("alice", "2024-01-31", 1500.5, "Monthly Salary")
    assert PayrollRecord.from_line(record.to_line()) == record


def test_record_line_format():
    record = PayrollRecord("alice", "2024-01-31", 5000.0, "Monthly Salary")
    assert record.to_line() == "alice|2024-01-31|5000|Monthly Salary"


def test_description_keeps_separators():
    record = PayrollRecord.from_line("alice|2024-01-31|10|part|two")
    assert record.description == "part|two"
    assert record.amount == 10.0


def test_amount_prefix_is_read():
    assert PayrollRecord.from_line("a|d|12.5abc|x").amount == 12.5


@pytest.mark.parametrize("line", ["alice|2024-01-31", "alice|d|abc|x", "alice"])
def test_malformed_lines_raise(line):
    with pytest.raises(ValueError):
        PayrollRecord.from_line(line)


def test_records_empty_initially(storage):
    manager, _ = make_manager(storage)
    assert manager.all_records() == []


def test_add_and_filter_records(storage):
    manager, _ = make_manager(storage)
    first = PayrollRecord("alice", "2024-01-31", 100.0, "Jan")
    second = PayrollRecord("bob", "2024-01-31", 200.0, "Jan")
    third = PayrollRecord("alice", "2024-02-29", 150.0, "Feb")
    for record in (first, second, third):
        manager.add_record(record)
    assert manager.all_records() == [first, second, third]
    assert manager.user_records("alice") == [first, third]
    assert manager.user_records("nobody") == []


def test_process_payment_defaults(storage):
    manager, out = make_manager(storage, "\nalice\n\n\n\n")
    manager.process_salary_payment()
    records = manager.all_records()
    assert len(records) == 1
    record = records[0]
    assert record.username == "alice"
    assert record.amount == 1200.0
    assert record.description == "Monthly Salary"
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", record.date)
    assert "Payment processed successfully." in out.getvalue()


def test_process_payment_custom_values(storage):
    manager, _ = make_manager(storage, "\nalice\n250\nBonus\n\n")
    manager.process_salary_payment()
    [record] = manager.user_records("alice")
    assert record.amount == 250.0
    assert record.description == "Bonus"


def test_process_payment_invalid_amount_uses_base(storage):
    manager, out = make_manager(storage, "\nalice\nabc\n\nBonus\n\n")
    manager.process_salary_payment()
    [record] = manager.user_records("alice")
    assert record.amount == 1200.0
    assert "Invalid amount. Using base salary." in out.getvalue()


def test_process_payment_back(storage):
    manager, _ = make_manager(storage, "\nback\n")
    manager.process_salary_payment()
    assert manager.all_records() == []


def test_process_payment_unknown_user(storage):
    manager, out = make_manager(storage, "\nnobody\n\n")
    manager.process_salary_payment()
    assert manager.all_records() == []
    assert "User not found." in out.getvalue()


def test_view_all_lists_records(storage):
    manager, out = make_manager(storage, "\n")
    manager.add_record(PayrollRecord("alice", "2024-01-31", 1200.0, "Monthly Salary"))
    manager.view_all()
    text = out.getvalue()
    assert "($) Amount" in text
    assert "1200.00  Monthly Salary" in text


def test_view_all_empty(storage):
    manager, out = make_manager(storage, "\n")
    manager.view_all()
    assert "No payroll records found." in out.getvalue()


def test_view_user_shows_only_own_records(storage):
    manager, out = make_manager(storage, "\n")
    manager.add_record(PayrollRecord("alice", "2024-01-31", 100.25, "Jan"))
    manager.add_record(PayrollRecord("bob", "2024-01-31", 300.0, "Other"))
    manager.view_user("alice")
    text = out.getvalue()
    assert "Salary History for alice" in text
    assert "Total received: $100.25" in text
    assert "Other" not in text


def test_view_user_empty(storage):
    manager, out = make_manager(storage, "\n")
    manager.view_user("alice")
    assert "No payroll records found for this user." in out.getvalue()