"""
Where the catalog and the saved schedule live.

Lookup order for each path:
    1. explicit value (CLI flag)
    2. environment variable (WEEKPLAN_CATALOG / WEEKPLAN_STATE)
    3. package default under weekplan/data/

Using functions instead of constants keeps tests free to point
everything at a temporary directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

CATALOG_ENV = "WEEKPLAN_CATALOG"
STATE_ENV = "WEEKPLAN_STATE"


def _data_dir() -> Path:
    base_dir = Path(__file__).resolve().parent
    return base_dir / "data"


def default_catalog_path() -> Path:
    return _data_dir() / "courses.txt"


def default_state_path() -> Path:
    return _data_dir() / "schedule.json"


@dataclass
class Settings:
    catalog_path: Path
    state_path: Path
    verbose: bool = False

    @classmethod
    def resolve(
        cls, catalog: str | Path | None = None, state: str | Path | None = None, verbose: bool = False
    ) -> "Settings":
        catalog_path = catalog or os.environ.get(CATALOG_ENV) or default_catalog_path()
        state_path = state or os.environ.get(STATE_ENV) or default_state_path()
        return cls(catalog_path=Path(catalog_path), state_path=Path(state_path), verbose=verbose)
