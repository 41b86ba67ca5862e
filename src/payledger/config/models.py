"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, payledger.toml only contains
overrides.  A run with no config file behaves exactly like the defaults.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ReportConfig(BaseModel):
    """[report] section — how amounts are printed in the payroll report."""

    model_config = {"frozen": True}

    currency_symbol: str = "$"
    significant_digits: int = Field(default=6, ge=1, le=17)
