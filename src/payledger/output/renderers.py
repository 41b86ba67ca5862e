"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`; failed
results of any op share one error line.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from payledger.config.models import ReportConfig
from payledger.domain.types import PayModel
from payledger.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from payledger.services.result import ServiceResult

REPORT_HEADER = "------ Employee Payroll Report ------"


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, report: ReportConfig | None = None) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    cfg = report or ReportConfig()

    if result.ok:
        _OP_RENDERERS[result.op](result, console, cfg)
    else:
        _render_error(result, console)

    return get_output(console).rstrip("\n")


def format_amount(value: float, significant_digits: int = 6) -> str:
    """Format *value* with at most *significant_digits* and no trailing zeros.

    >>> format_amount(3000.0)
    '3000'
    >>> format_amount(12.5)
    '12.5'
    """
    return f"{value:.{significant_digits}g}"


# ── Helpers ───────────────────────────────────────────────────────────


def _line(console: Console, *parts: str | tuple[str, str]) -> None:
    console.print(Text.assemble(*parts), soft_wrap=True)


def _money(value: Any, cfg: ReportConfig) -> str:
    return f"{cfg.currency_symbol}{format_amount(float(value), cfg.significant_digits)}"


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console) -> None:
    msg = result.error.message if result.error else "Unknown error"
    _line(console, ("ERROR", "pay.error"), (f"  {result.op}", "pay.op"), f" — {msg}")


def _render_report(result: ServiceResult, console: Console, cfg: ReportConfig) -> None:
    """Payroll report: one block per employee, in ledger order."""
    console.print()
    _line(console, (REPORT_HEADER, "pay.header"))
    for item in result.data.get("items", []):
        _render_employee(console, item, cfg)


def _render_employee(console: Console, item: dict[str, Any], cfg: ReportConfig) -> None:
    fields = item["fields"]
    _line(
        console,
        ("Employee: ", "pay.key"),
        (item["name"], style_for_kind(item["kind"])),
        " (ID: ",
        (item["id"], "pay.id"),
        ")",
    )
    match PayModel(item["kind"]):
        case PayModel.SALARIED:
            _line(
                console,
                ("Fixed Monthly Salary: ", "pay.key"),
                (_money(item["total"], cfg), "pay.total"),
            )
        case PayModel.HOURLY:
            _line(
                console,
                ("Hourly Wage: ", "pay.key"),
                (_money(fields["hourly_wage"], cfg), "pay.amount"),
            )
            _line(console, ("Hours Worked: ", "pay.key"), str(fields["hours_worked"]))
            _line(
                console,
                ("Total Salary: ", "pay.key"),
                (_money(item["total"], cfg), "pay.total"),
            )
        case PayModel.CONTRACTUAL:
            _line(
                console,
                ("Contract Payment Per Project: ", "pay.key"),
                (_money(fields["payment_per_project"], cfg), "pay.amount"),
            )
            _line(
                console,
                ("Projects Completed: ", "pay.key"),
                str(fields["projects_completed"]),
            )
            _line(
                console,
                ("Total Salary: ", "pay.key"),
                (_money(item["total"], cfg), "pay.total"),
            )
    console.print()


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console, ReportConfig], None]] = {
    "payroll_report": _render_report,
}
