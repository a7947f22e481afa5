"""
Stowage plan editing and compatibility checks.

The service owns the tank grid: all edits go through it, and each analysis
pass runs on a snapshot of the grid against the read-only reference tables.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from ..config.limits import DEFAULT_GRID_LENGTH, DEFAULT_GRID_WIDTH, SUGGESTION_LIMIT
from ..models import ChemicalRecord, Tank, TankPosition
from ..reports.compliance_report import ComplianceReport, build_compliance_report
from .compatibility_engine import AnalysisResult, analyze
from .reference_import import ReferenceData
from .tank_grid import TankGrid

logger = logging.getLogger(__name__)


class StowageService:
    """
    Holds the current stowage plan and the latest analysis result.

    Any edit or resize invalidates the previous result; callers run
    `analyze()` again to get a fresh one.
    """

    def __init__(
        self,
        reference: ReferenceData,
        width: int = DEFAULT_GRID_WIDTH,
        length: int = DEFAULT_GRID_LENGTH,
    ) -> None:
        self._reference = reference
        self._grid = TankGrid(width, length)
        self._result: AnalysisResult | None = None

    @property
    def reference(self) -> ReferenceData:
        return self._reference

    @property
    def grid(self) -> TankGrid:
        return self._grid

    @property
    def result(self) -> AnalysisResult | None:
        """Latest analysis, or None if the plan changed since the last pass."""
        return self._result

    def resize(self, width: int, length: int) -> TankGrid:
        """Replace the grid with an empty one of the new size."""
        self._grid = TankGrid(width, length)
        self._result = None
        logger.info("Tank layout set to %d x %d", width, length)
        return self._grid

    def assign(self, row: int, col: int, chemical_name: str) -> Tank:
        """
        Load a chemical into a tank by name.

        Raises ChemicalNotFoundError if the name is not in the index; the tank
        keeps its previous contents in that case.
        """
        tank = self._grid.assign_chemical(TankPosition(row, col), chemical_name, self._reference.index)
        self._result = None
        return tank

    def clear(self, row: int, col: int) -> Tank:
        tank = self._grid.clear(TankPosition(row, col))
        self._result = None
        return tank

    def suggest(self, term: str, limit: int = SUGGESTION_LIMIT) -> List[ChemicalRecord]:
        return self._reference.index.suggest(term, limit)

    def analyze(self) -> AnalysisResult:
        self._result = analyze(
            self._grid.snapshot(),
            self._reference.matrix,
            self._reference.registry,
        )
        logger.info(
            "Compatibility analysis: %d loaded tanks, %d problems",
            len(self._result.results),
            len(self._result.problems),
        )
        return self._result

    def build_report(self, timestamp: Optional[datetime] = None) -> ComplianceReport:
        """Report on the current plan, analysing it first if needed."""
        result = self._result if self._result is not None else self.analyze()
        return build_compliance_report(self._grid.snapshot(), result, timestamp=timestamp)
