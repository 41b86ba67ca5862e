"""Locate the payledger.toml that shapes the payroll report.

Lookup order, first hit wins:
  1. ``PAYLEDGER_CONFIG`` — an explicit file; if it is missing nothing else
     is tried, so a typo never silently picks up another ledger's settings.
  2. ``payledger.toml`` in the working directory or any parent (a payroll
     folder can carry its own currency and precision).
  3. ``$XDG_CONFIG_HOME/payledger/payledger.toml`` (``~/.config`` when unset),
     the per-user default.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "payledger.toml"
CONFIG_ENV_VAR = "PAYLEDGER_CONFIG"


def user_config_path() -> Path:
    """Per-user config location, honouring ``XDG_CONFIG_HOME``."""
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / "payledger" / CONFIG_FILENAME


def _walk_up(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies from *start* (default: cwd), or None."""
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None

    found = _walk_up((start or Path.cwd()).resolve())
    if found is not None:
        return found

    user_file = user_config_path()
    return user_file if user_file.is_file() else None
