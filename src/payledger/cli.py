"""Root CLI command for payledger with global flags."""

from __future__ import annotations

import click

from payledger import __version__
from payledger.commands._context import AppContext
from payledger.commands.menu import PayrollMenu
from payledger.config.settings import PayledgerSettings


@click.command()
@click.version_option(version=__version__, prog_name="payledger")
@click.option("--json", "json_output", is_flag=True, help="Print the payroll report as JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
def cli(
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """payledger — interactive payroll ledger.

    Enter salaried, hourly, and per-project employees from a menu and
    print a payroll report.  Records live only for the session.
    """
    settings = PayledgerSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    PayrollMenu(AppContext(settings)).run()
