"""AppContext — process-scoped state for one payledger session.

Created once by the root command.  Owns the RecordStore for the life of
the process and centralizes result emission.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from payledger.config.logging import configure_logging
from payledger.infrastructure.store import RecordStore
from payledger.output.formatters import OutputSettings, format_result
from payledger.services.ledger import LedgerService

if TYPE_CHECKING:
    from payledger.config.settings import PayledgerSettings
    from payledger.services.result import ServiceResult


class AppContext:
    """Settings, the record store, and the ledger service for one run."""

    def __init__(self, settings: PayledgerSettings) -> None:
        self.settings = settings
        self.store = RecordStore()
        self.ledger = LedgerService(self.store)

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult.

        Success goes to stdout.  Failures go to stderr but never end the
        session; the menu keeps running.
        """
        output = format_result(
            result,
            settings=OutputSettings(json_output=self.settings.json_output),
            report=self.settings.report,
        )
        click.echo(output, err=not result.ok)
