"""Tests for LedgerService — uniqueness checks, commits, and the report."""

from typing import Any

import pytest

from payledger.domain.types import InputError
from payledger.infrastructure.store import RecordStore
from payledger.services.ledger import LedgerService


def _salaried(
    employee_id: str = "E1", name: str = "Alice", salary: float = 3000
) -> dict[str, Any]:
    return {"kind": "salaried", "id": employee_id, "name": name, "monthly_salary": salary}


def _hourly(employee_id: str = "E2", name: str = "Bob") -> dict[str, Any]:
    return {
        "kind": "hourly",
        "id": employee_id,
        "name": name,
        "hourly_wage": 20,
        "hours_worked": 8,
    }


class TestCheckId:
    def test_unused_id(self, ledger: LedgerService) -> None:
        result = ledger.check_id("E1")
        assert result.ok is True
        assert result.data == {"id": "E1"}

    def test_duplicate_id(self, ledger: LedgerService) -> None:
        ledger.add_employee(_salaried())
        result = ledger.check_id("E1")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == InputError.DUPLICATE_ID
        assert result.error.message == "Error: ID already exists! Please use a unique ID."


class TestCheckName:
    def test_returns_trimmed_name(self, ledger: LedgerService) -> None:
        result = ledger.check_name("  Alice Smith ")
        assert result.ok is True
        assert result.data["name"] == "Alice Smith"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name(self, ledger: LedgerService, name: str) -> None:
        result = ledger.check_name(name)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == InputError.EMPTY_NAME

    def test_duplicate_name_after_trimming(self, ledger: LedgerService) -> None:
        ledger.add_employee(_salaried())
        result = ledger.check_name(" Alice ")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == InputError.DUPLICATE_NAME


class TestAddEmployee:
    def test_commits_record(self, ledger: LedgerService, store: RecordStore) -> None:
        result = ledger.add_employee(_hourly())
        assert result.ok is True
        assert result.op == "add_employee"
        assert result.data["total"] == 160.0
        assert result.data["kind"] == "hourly"
        assert len(store) == 1

    def test_duplicate_id_not_committed(self, ledger: LedgerService, store: RecordStore) -> None:
        ledger.add_employee(_salaried())
        result = ledger.add_employee(_salaried(name="Other"))
        assert result.ok is False
        assert result.op == "add_employee"
        assert result.error is not None
        assert result.error.code == InputError.DUPLICATE_ID
        assert len(store) == 1

    def test_duplicate_name_not_committed(self, ledger: LedgerService, store: RecordStore) -> None:
        ledger.add_employee(_salaried())
        result = ledger.add_employee(_salaried(employee_id="E9"))
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == InputError.DUPLICATE_NAME
        assert len(store) == 1

    def test_invalid_fields_not_committed(self, ledger: LedgerService, store: RecordStore) -> None:
        result = ledger.add_employee(_salaried(salary=-5))
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "VALIDATION"
        assert result.error.detail["errors"]
        assert len(store) == 0

    def test_stores_trimmed_name(self, ledger: LedgerService, store: RecordStore) -> None:
        ledger.add_employee(_salaried(name="  Alice  "))
        assert store.all_records()[0].name == "Alice"


class TestPayrollReport:
    def test_empty(self, ledger: LedgerService) -> None:
        result = ledger.payroll_report()
        assert result.ok is True
        assert result.op == "payroll_report"
        assert result.data == {"items": []}

    def test_items_in_insertion_order(self, ledger: LedgerService) -> None:
        ledger.add_employee(_hourly())
        ledger.add_employee(_salaried())
        ledger.add_employee(
            {
                "kind": "contractual",
                "id": "E3",
                "name": "Cara",
                "payment_per_project": 200.0,
                "projects_completed": 3,
            }
        )
        items = ledger.payroll_report().data["items"]
        assert [item["id"] for item in items] == ["E2", "E1", "E3"]
        assert [item["total"] for item in items] == [160.0, 3000.0, 600.0]
        assert items[2]["fields"] == {"payment_per_project": 200.0, "projects_completed": 3}
