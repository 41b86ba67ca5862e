"""RecordStore — the single owning container for employee records.

The store is process-scoped: created with the application context and
dropped on exit.  It keeps insertion order and never removes or replaces
an entry.

INVARIANT: ``add`` does not dedupe.  Callers check ``contains_id`` and
``contains_name`` first (see :class:`~payledger.services.ledger.LedgerService`).
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payledger.domain.records import EmployeeRecord


class RecordStore:
    """Ordered, append-only collection of employee records."""

    def __init__(self) -> None:
        self._records: list[EmployeeRecord] = []

    def add(self, record: EmployeeRecord) -> None:
        """Append *record* unconditionally."""
        self._records.append(record)

    def contains_id(self, employee_id: str) -> bool:
        return any(record.id == employee_id for record in self._records)

    def contains_name(self, name: str) -> bool:
        """Match on the trimmed name; stored names are already trimmed."""
        wanted = name.strip(" ")
        return any(record.name == wanted for record in self._records)

    def all_records(self) -> tuple[EmployeeRecord, ...]:
        """Snapshot of every record in insertion order."""
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[EmployeeRecord]:
        return iter(self.all_records())
