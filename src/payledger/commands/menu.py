"""Interactive menu controller — the console state machine.

MENU → ID → NAME → PAY FIELDS → COMMIT → MENU
MENU → REPORT → MENU
MENU → EXIT

Every prompt loops until it gets acceptable input; a rejected line prints
the message for its :class:`~payledger.domain.types.InputError` and asks
again.  Nothing the user types ends the session except choice 5.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click
import structlog

from payledger.domain.types import InputError, PayModel, error_message
from payledger.domain.validators import first_token, is_menu_choice, parse_amount, parse_count

if TYPE_CHECKING:
    from payledger.commands._context import AppContext

logger = structlog.get_logger(__name__)

MENU_TEXT = """\

Menu
1 - Full-time Employee
2 - Part-time Employee
3 - Contractual Employee
4 - Display Payroll Report
5 - Exit"""

FAREWELL = "Exiting program. Goodbye!"

CHOICE_REPORT = 4
CHOICE_EXIT = 5

MENU_MODELS: dict[int, PayModel] = {
    1: PayModel.SALARIED,
    2: PayModel.HOURLY,
    3: PayModel.CONTRACTUAL,
}


def _ask(label: str) -> str:
    """Read one raw line; an empty line comes back as ``""``."""
    return click.prompt(label, default="", show_default=False)


class PayrollMenu:
    """Drives one interactive session against the app's ledger."""

    def __init__(self, app: AppContext) -> None:
        self._app = app
        self._ledger = app.ledger

    def run(self) -> None:
        """Loop over the menu until the user chooses to exit."""
        logger.debug("session started")
        while True:
            choice = self._read_choice()
            if choice is None:
                continue
            if choice in MENU_MODELS:
                self._enter_employee(MENU_MODELS[choice])
            elif choice == CHOICE_REPORT:
                self._app.emit(self._ledger.payroll_report())
            elif choice == CHOICE_EXIT:
                click.echo(FAREWELL)
                break
            else:
                self._reject(InputError.INVALID_CHOICE, choice=choice)
        logger.debug("session ended", records=len(self._app.store))

    # ------------------------------------------------------------------
    # Menu
    # ------------------------------------------------------------------

    def _read_choice(self) -> int | None:
        click.echo(MENU_TEXT)
        raw = _ask("Enter your choice")
        if not is_menu_choice(raw):
            self._reject(InputError.INVALID_INPUT)
            return None
        digits = raw.strip().lstrip("0") or "0"
        if len(digits) > 1:
            # No menu entry has more than one digit.
            self._reject(InputError.INVALID_CHOICE, choice=digits[:20])
            return None
        return int(digits)

    def _reject(self, code: InputError, **fields: Any) -> None:
        logger.debug("input rejected", code=str(code), **fields)
        click.echo(error_message(code))

    # ------------------------------------------------------------------
    # Entry flow
    # ------------------------------------------------------------------

    def _enter_employee(self, kind: PayModel) -> None:
        employee_id = self._prompt_id()
        name = self._prompt_name()
        match kind:
            case PayModel.SALARIED:
                fields = {"monthly_salary": self._prompt_amount("Enter Fixed Monthly Salary")}
            case PayModel.HOURLY:
                fields = {
                    "hourly_wage": self._prompt_amount("Enter Hourly Wage"),
                    "hours_worked": self._prompt_count(
                        "Enter Number of Hours Worked", InputError.INVALID_HOURS
                    ),
                }
            case PayModel.CONTRACTUAL:
                fields = {
                    "payment_per_project": self._prompt_amount("Enter Payment Per Project"),
                    "projects_completed": self._prompt_count(
                        "Enter Number of Projects Completed", InputError.INVALID_PROJECTS
                    ),
                }

        result = self._ledger.add_employee(
            {"kind": kind.value, "id": employee_id, "name": name, **fields}
        )
        if not result.ok:
            self._app.emit(result)

    def _prompt_id(self) -> str:
        """First token of the line; blank lines are skipped silently."""
        while True:
            employee_id = first_token(_ask("Enter ID"))
            if not employee_id:
                continue
            check = self._ledger.check_id(employee_id)
            if check.ok:
                return employee_id
            self._reject(InputError.DUPLICATE_ID, id=employee_id)

    def _prompt_name(self) -> str:
        """Full line, returned trimmed."""
        while True:
            check = self._ledger.check_name(_ask("Enter Name"))
            if check.ok:
                return check.data["name"]
            assert check.error is not None
            self._reject(InputError(check.error.code))

    def _prompt_amount(self, label: str) -> float:
        while True:
            token = first_token(_ask(label))
            value = parse_amount(token)
            if value is not None:
                return value
            self._reject(InputError.INVALID_NUMBER, field=label, value=token)

    def _prompt_count(self, label: str, code: InputError) -> int:
        while True:
            token = first_token(_ask(label))
            value = parse_count(token)
            if value is not None:
                return value
            self._reject(code, field=label, value=token)
