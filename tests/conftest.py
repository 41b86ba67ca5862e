"""Shared pytest fixtures and test helpers for payledger tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from payledger.cli import cli
from payledger.infrastructure.store import RecordStore
from payledger.services.ledger import LedgerService


@pytest.fixture(autouse=True)
def _clean_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> None:
    """Keep a developer's own config and env vars out of the tests."""
    for name in [key for key in os.environ if key.startswith("PAYLEDGER_")]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path_factory.mktemp("xdg")))


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo handler changes made by configure_logging()."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pay = logging.getLogger("payledger")
    pay_handlers = pay.handlers[:]
    pay_level = pay.level
    pay_propagate = pay.propagate
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pay.handlers = pay_handlers
    pay.setLevel(pay_level)
    pay.propagate = pay_propagate


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty directory so no payledger.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def store() -> RecordStore:
    return RecordStore()


@pytest.fixture
def ledger(store: RecordStore) -> LedgerService:
    return LedgerService(store)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def run_session(runner: CliRunner, *lines: str, args: list[str] | None = None) -> Result:
    """Feed *lines* to the menu, one per prompt, and return the run result."""
    return runner.invoke(cli, args or [], input="".join(f"{line}\n" for line in lines))


def salaried(employee_id: str, name: str, salary: str) -> tuple[str, ...]:
    """Menu input for a full-time employee."""
    return ("1", employee_id, name, salary)


def hourly(employee_id: str, name: str, wage: str, hours: str) -> tuple[str, ...]:
    """Menu input for a part-time employee."""
    return ("2", employee_id, name, wage, hours)


def contractual(employee_id: str, name: str, pay: str, projects: str) -> tuple[str, ...]:
    """Menu input for a contractual employee."""
    return ("3", employee_id, name, pay, projects)
