# salarydesk

An interactive console program for keeping a list of employees and recording
the salary payments made to them.

## Installing

```
pip install .
```

## Running

```
salarydesk
```

Options:

- `--data-dir DIR`: directory that holds the data files (default: the
  current directory)
- `--no-clear`: do not clear the screen between views

The program keeps its data in two plain text files in the data directory:

- `users.txt`: one account per line, fields separated by `|`
  (username, password, full name, position, base salary, admin flag `1`/`0`)
- `payroll.txt`: one payment per line (username, date, amount, description)

Both are created on start if they are missing. A new `users.txt` holds a
single administrator account named `admin`; its starting password can be
read from the second field of that line. Passwords are stored in plain text.

When input is a terminal, passwords are read without echo. The screen is
cleared with the system `clear` (or `cls` on Windows) command unless
`--no-clear` is given. The program ends when `exit` is chosen at a menu or
when input runs out.

## What you can do

Before logging in:

1. **Login**: enter a username and password.
2. **Register**: create a regular (non-admin) account. Usernames need at
   least three characters and may only contain ASCII letters, digits and
   underscores; passwords need at least six characters and must be entered
   twice. A base salary must be a non-negative number.

As an administrator:

1. View all users with position, base salary and role
2. Create a user, optionally with administrator rights
3. Delete a user after confirmation (the `admin` account cannot be deleted)
4. View every payroll record
5. Process a salary payment: pick a user, accept or change the amount
   (defaults to their base salary) and the description (defaults to
   "Monthly Salary"); the payment is dated today
6. Log out

As a regular user:

1. View your profile
2. View your salary history with the total received
3. Log out

## Using it from Python

```python
from salarydesk.storage import Storage
from salarydesk.payroll import PayrollManager
from salarydesk.ui import Console

storage = Storage("data")
storage.initialize()
for user in storage.all_users():
    print(user.username, user.base_salary)

payroll = PayrollManager(storage, Console())
for record in payroll.user_records("admin"):
    print(record.date, record.amount, record.description)
```

- `salarydesk.user.User` is a dataclass with `to_line()` and
  `User.from_line(line)`; `from_line` raises `ValueError` on a malformed line.
- `Storage.add_user` raises `DuplicateUserError` for a taken username;
  `Storage.delete_user` raises `UserNotFoundError` for an unknown one.
- `salarydesk.payroll.PayrollRecord` has `to_line()` and `from_line(line)`;
  `PayrollManager.add_record(record)` appends a payment.
- `salarydesk.auth.validate_username` and `salarydesk.auth.validate_password`
  apply the registration rules; `login` and `register_user` run the dialogs
  on a `Console`.
- `salarydesk.cli.run(console, storage)` runs the menu loop;
  `salarydesk.cli.main(argv)` is the command.

`Console(stdin, stdout, clear)` accepts any text streams, so the dialogs can
be driven from a script or a test.

## What it does not do

There is no way to change a password or edit an existing account's name,
position or salary, and payroll records cannot be edited or removed from
within the program.

## Tests

```
pip install .[test]
pytest
```