from __future__ import annotations

import string
from dataclasses import dataclass

from .chemical import ChemicalRecord


@dataclass(frozen=True, slots=True, order=True)
class TankPosition:
    """Grid slot of a tank: row along the vessel, column across it (both 0-indexed)."""

    row: int
    col: int

    @classmethod
    def from_tank_id(cls, tank_id: str) -> "TankPosition":
        row, col = tank_id.split("-")
        return cls(int(row), int(col))

    @property
    def tank_id(self) -> str:
        """Stable key used in results and reports, e.g. "0-1"."""
        return f"{self.row}-{self.col}"

    @property
    def label(self) -> str:
        """Operator-facing name: row letter plus 1-based column, e.g. "A2"."""
        return f"{string.ascii_uppercase[self.row]}{self.col + 1}"


@dataclass(slots=True)
class Tank:
    position: TankPosition
    # Canonical index name; empty means unloaded
    chemical_name: str = ""
    # Text the operator typed, kept for diagnostics and reports
    entered_name: str = ""
    # Resolved reactivity group; None when unloaded or unclassified
    group: int | None = None
    record: ChemicalRecord | None = None

    @property
    def is_loaded(self) -> bool:
        return bool(self.chemical_name.strip())

    def clear(self) -> None:
        self.chemical_name = ""
        self.entered_name = ""
        self.group = None
        self.record = None
