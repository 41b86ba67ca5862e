"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output) or machines
(--json).  The formatter layer adapts ServiceResult to the requested mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from payledger.output.renderers import render_result

if TYPE_CHECKING:
    from payledger.config.models import ReportConfig
    from payledger.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output-mode flags resolved from PayledgerSettings."""

    model_config = {"frozen": True}

    json_output: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    report: ReportConfig | None = None,
) -> str:
    """Format a ServiceResult for display.

    JSON mode dumps the whole result; human mode goes through the Rich
    renderers.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    return render_result(result, report=report)
