"""Pay-model variants and the input error taxonomy.

Every rejected console input maps to one :class:`InputError` code.  The
controller prints :data:`ERROR_MESSAGES` verbatim and re-prompts.
"""

from __future__ import annotations

from enum import StrEnum


class PayModel(StrEnum):
    """How an employee is paid."""

    SALARIED = "salaried"
    HOURLY = "hourly"
    CONTRACTUAL = "contractual"


class InputError(StrEnum):
    """Recoverable user-input errors, grouped by the prompt that raises them."""

    # Menu prompt
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_CHOICE = "INVALID_CHOICE"
    # Identity prompts
    DUPLICATE_ID = "DUPLICATE_ID"
    EMPTY_NAME = "EMPTY_NAME"
    DUPLICATE_NAME = "DUPLICATE_NAME"
    # Pay fields
    INVALID_NUMBER = "INVALID_NUMBER"
    INVALID_HOURS = "INVALID_HOURS"
    INVALID_PROJECTS = "INVALID_PROJECTS"


ERROR_MESSAGES: dict[InputError, str] = {
    InputError.INVALID_INPUT: "Invalid input. Please enter a valid number.",
    InputError.INVALID_CHOICE: "Invalid choice. Please try again.",
    InputError.DUPLICATE_ID: "Error: ID already exists! Please use a unique ID.",
    InputError.EMPTY_NAME: "Error: Name cannot be empty or only spaces. Try again.",
    InputError.DUPLICATE_NAME: "Error: Name already exists! Please use a unique name.",
    InputError.INVALID_NUMBER: "Error: Please enter a valid numeric value.",
    InputError.INVALID_HOURS: "Error: Enter a valid number of hours.",
    InputError.INVALID_PROJECTS: "Error: Enter a valid number of projects.",
}


def error_message(code: InputError) -> str:
    """Return the console message for an input error code."""
    return ERROR_MESSAGES[code]
