"""Employee record models — one frozen model per pay variant.

The variant set is closed: :data:`EmployeeRecord` is a discriminated union
on ``kind`` and every consumer matches over it exhaustively.

INVARIANT: Records are immutable once created.  ``id`` and ``name`` are the
identity of an employee; uniqueness across records is enforced by the
caller, not by the models.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, assert_never

from pydantic import BaseModel, Field, TypeAdapter, field_validator


class BaseRecord(BaseModel):
    """Fields shared by every pay variant."""

    model_config = {"frozen": True}

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)

    @field_validator("id")
    @classmethod
    def _id_is_token(cls, value: str) -> str:
        if any(ch.isspace() for ch in value):
            raise ValueError("id must be a single token")
        return value

    @field_validator("name")
    @classmethod
    def _name_is_trimmed(cls, value: str) -> str:
        trimmed = value.strip(" ")
        if not trimmed:
            raise ValueError("name cannot be empty or only spaces")
        return trimmed


class SalariedRecord(BaseRecord):
    """Full-time employee on a fixed monthly salary."""

    kind: Literal["salaried"] = "salaried"
    monthly_salary: float = Field(ge=0)


class HourlyRecord(BaseRecord):
    """Part-time employee paid per hour worked."""

    kind: Literal["hourly"] = "hourly"
    hourly_wage: float = Field(ge=0)
    hours_worked: int = Field(ge=0)


class ContractualRecord(BaseRecord):
    """Contractor paid per completed project."""

    kind: Literal["contractual"] = "contractual"
    payment_per_project: float = Field(ge=0)
    projects_completed: int = Field(ge=0)


EmployeeRecord = Annotated[
    SalariedRecord | HourlyRecord | ContractualRecord,
    Field(discriminator="kind"),
]

_RECORD_ADAPTER: TypeAdapter[EmployeeRecord] = TypeAdapter(EmployeeRecord)


def build_record(data: dict[str, Any]) -> EmployeeRecord:
    """Validate a raw mapping into the matching record variant."""
    return _RECORD_ADAPTER.validate_python(data)


def total_pay(record: EmployeeRecord) -> float:
    """Compute the pay shown as the record's total.

    Salaried pay is the monthly salary as entered; the other variants
    multiply their rate by the completed quantity.
    """
    match record:
        case SalariedRecord():
            return record.monthly_salary
        case HourlyRecord():
            return record.hourly_wage * record.hours_worked
        case ContractualRecord():
            return record.payment_per_project * record.projects_completed
        case _:
            assert_never(record)
