"""
Rectangular grid of cargo tanks and the edits the stowage planner makes to it.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Dict, List

from ..config.limits import (
    DEFAULT_GRID_LENGTH,
    DEFAULT_GRID_WIDTH,
    MAX_GRID_LENGTH,
    MAX_GRID_WIDTH,
    MIN_GRID_LENGTH,
    MIN_GRID_WIDTH,
)
from ..models import Tank, TankPosition
from .chemical_index import ChemicalIndex

logger = logging.getLogger(__name__)


@dataclass(slots=True, eq=False)
class ChemicalNotFoundError(Exception):
    attempted_name: str

    def __str__(self) -> str:
        return (
            f"Chemical '{self.attempted_name}' not found in approved cargo index. "
            "Please verify spelling or consult IMO chemical classification."
        )


@dataclass(slots=True, eq=False)
class GridDimensionError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class TankGrid:
    """
    `length` rows of `width` tanks. Every slot always holds exactly one Tank;
    resizing means building a new grid.
    """

    def __init__(self, width: int = DEFAULT_GRID_WIDTH, length: int = DEFAULT_GRID_LENGTH) -> None:
        if not MIN_GRID_WIDTH <= width <= MAX_GRID_WIDTH:
            raise GridDimensionError(
                f"Grid width {width} outside {MIN_GRID_WIDTH}-{MAX_GRID_WIDTH} tanks."
            )
        if not MIN_GRID_LENGTH <= length <= MAX_GRID_LENGTH:
            raise GridDimensionError(
                f"Grid length {length} outside {MIN_GRID_LENGTH}-{MAX_GRID_LENGTH} rows."
            )
        self.width = width
        self.length = length
        self._tanks: Dict[TankPosition, Tank] = {}
        for row in range(length):
            for col in range(width):
                pos = TankPosition(row, col)
                self._tanks[pos] = Tank(position=pos)

    def __len__(self) -> int:
        return len(self._tanks)

    def tank(self, position: TankPosition) -> Tank:
        try:
            return self._tanks[position]
        except KeyError:
            raise KeyError(f"No tank at row {position.row}, column {position.col}") from None

    def tanks(self) -> List[Tank]:
        """All tanks in row-major order."""
        return list(self._tanks.values())

    def loaded_tanks(self) -> List[Tank]:
        return [t for t in self._tanks.values() if t.is_loaded]

    def adjacent_positions(self, row: int, col: int) -> List[TankPosition]:
        """The up to 8 surrounding slots (Moore neighbourhood), clipped to the grid."""
        adjacent: List[TankPosition] = []
        for r in range(row - 1, row + 2):
            for c in range(col - 1, col + 2):
                if (r, c) == (row, col):
                    continue
                if 0 <= r < self.length and 0 <= c < self.width:
                    adjacent.append(TankPosition(r, c))
        return adjacent

    def assign_chemical(self, position: TankPosition, raw_name: str, index: ChemicalIndex) -> Tank:
        """
        Load `raw_name` into the tank at `position`.

        A blank name unloads the tank. An unknown name raises
        ChemicalNotFoundError and leaves the tank as it was.
        """
        tank = self.tank(position)
        if not raw_name or not raw_name.strip():
            tank.clear()
            return tank

        record = index.resolve(raw_name)
        if record is None:
            logger.info("Rejected %s for tank %s: not in cargo index", raw_name, position.label)
            raise ChemicalNotFoundError(raw_name)

        tank.chemical_name = record.name
        tank.entered_name = raw_name.strip()
        tank.group = record.group
        tank.record = record
        return tank

    def clear(self, position: TankPosition) -> Tank:
        tank = self.tank(position)
        tank.clear()
        return tank

    def snapshot(self) -> "TankGrid":
        """Independent copy, so an analysis pass never sees a half-made edit."""
        return copy.deepcopy(self)
