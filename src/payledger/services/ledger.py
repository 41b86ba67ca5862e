"""LedgerService — uniqueness checks, record commits, and the payroll report.

Entry pipeline driven by the menu controller:
CHECK ID → CHECK NAME → BUILD RECORD → ADD → RESPOND
"""

from __future__ import annotations

import logging
from typing import Any, assert_never

from pydantic import ValidationError

from payledger.domain.records import (
    ContractualRecord,
    EmployeeRecord,
    HourlyRecord,
    SalariedRecord,
    build_record,
    total_pay,
)
from payledger.domain.types import InputError
from payledger.domain.validators import is_non_empty_trimmed
from payledger.services.base import BaseService
from payledger.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def _record_fields(record: EmployeeRecord) -> dict[str, Any]:
    """Variant-specific fields, in display order."""
    match record:
        case SalariedRecord():
            return {"monthly_salary": record.monthly_salary}
        case HourlyRecord():
            return {"hourly_wage": record.hourly_wage, "hours_worked": record.hours_worked}
        case ContractualRecord():
            return {
                "payment_per_project": record.payment_per_project,
                "projects_completed": record.projects_completed,
            }
        case _:
            assert_never(record)


class LedgerService(BaseService):
    """Operations over the in-memory payroll ledger."""

    # ------------------------------------------------------------------
    # Uniqueness checks
    # ------------------------------------------------------------------

    def check_id(self, employee_id: str) -> ServiceResult:
        """Accept *employee_id* unless another record already uses it."""
        op = "check_id"
        if self._store.contains_id(employee_id):
            logger.debug("Rejected id %r: %s", employee_id, InputError.DUPLICATE_ID)
            return self._fail(op, InputError.DUPLICATE_ID, id=employee_id)
        return ServiceResult(ok=True, op=op, data={"id": employee_id})

    def check_name(self, name: str) -> ServiceResult:
        """Accept *name* if it is non-blank and unused; returns the trimmed name."""
        op = "check_name"
        if not is_non_empty_trimmed(name):
            logger.debug("Rejected name: %s", InputError.EMPTY_NAME)
            return self._fail(op, InputError.EMPTY_NAME)
        trimmed = name.strip(" ")
        if self._store.contains_name(trimmed):
            logger.debug("Rejected name %r: %s", trimmed, InputError.DUPLICATE_NAME)
            return self._fail(op, InputError.DUPLICATE_NAME, name=trimmed)
        return ServiceResult(ok=True, op=op, data={"name": trimmed})

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------

    def add_employee(self, data: dict[str, Any]) -> ServiceResult:
        """Validate *data* into a record and append it to the store.

        *data* carries ``kind``, ``id``, ``name`` and the variant fields.
        Identity is re-checked here so no caller can bypass uniqueness.
        """
        op = "add_employee"
        for check in (
            self.check_id(str(data.get("id", ""))),
            self.check_name(str(data.get("name", ""))),
        ):
            if not check.ok:
                return check.model_copy(update={"op": op})

        try:
            record = build_record(data)
        except ValidationError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="VALIDATION",
                    message=f"Invalid employee record: {exc.error_count()} error(s)",
                    detail={"errors": exc.errors(include_url=False, include_context=False)},
                ),
            )

        self._store.add(record)
        logger.debug(
            "Committed %s record %s (%d in ledger)", record.kind, record.id, len(self._store)
        )
        return ServiceResult(ok=True, op=op, data=self._summarize(record))

    # ------------------------------------------------------------------
    # Report
    # ------------------------------------------------------------------

    def payroll_report(self) -> ServiceResult:
        """Every record in insertion order with its computed total."""
        items = [self._summarize(record) for record in self._store.all_records()]
        logger.debug("Payroll report over %d record(s)", len(items))
        return ServiceResult(ok=True, op="payroll_report", data={"items": items})

    @staticmethod
    def _summarize(record: EmployeeRecord) -> dict[str, Any]:
        return {
            "id": record.id,
            "name": record.name,
            "kind": str(record.kind),
            "fields": _record_fields(record),
            "total": total_pay(record),
        }
