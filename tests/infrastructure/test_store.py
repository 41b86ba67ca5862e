"""Tests for the in-memory RecordStore."""

from payledger.domain.records import ContractualRecord, HourlyRecord, SalariedRecord
from payledger.infrastructure.store import RecordStore


def _alice() -> SalariedRecord:
    return SalariedRecord(id="E1", name="Alice", monthly_salary=3000.0)


def _bob() -> HourlyRecord:
    return HourlyRecord(id="E2", name="Bob", hourly_wage=20.0, hours_worked=8)


class TestRecordStore:
    def test_empty(self, store: RecordStore) -> None:
        assert len(store) == 0
        assert store.all_records() == ()
        assert store.contains_id("E1") is False
        assert store.contains_name("Alice") is False

    def test_contains_reflects_additions(self, store: RecordStore) -> None:
        store.add(_alice())
        assert store.contains_id("E1") is True
        assert store.contains_name("Alice") is True
        assert store.contains_id("E2") is False
        assert store.contains_name("Bob") is False

        store.add(_bob())
        assert store.contains_id("E2") is True
        assert store.contains_name("Bob") is True

    def test_name_lookup_trims(self, store: RecordStore) -> None:
        store.add(_alice())
        assert store.contains_name("  Alice ") is True

    def test_lookups_are_exact(self, store: RecordStore) -> None:
        store.add(_alice())
        assert store.contains_id("e1") is False
        assert store.contains_name("alice") is False

    def test_insertion_order(self, store: RecordStore) -> None:
        cara = ContractualRecord(
            id="E3", name="Cara", payment_per_project=200.0, projects_completed=3
        )
        for record in (_bob(), cara, _alice()):
            store.add(record)
        assert [r.id for r in store.all_records()] == ["E2", "E3", "E1"]
        assert [r.id for r in store] == ["E2", "E3", "E1"]

    def test_add_does_not_dedupe(self, store: RecordStore) -> None:
        store.add(_alice())
        store.add(_alice())
        assert len(store) == 2

    def test_snapshot_is_detached(self, store: RecordStore) -> None:
        snapshot = store.all_records()
        store.add(_alice())
        assert snapshot == ()
