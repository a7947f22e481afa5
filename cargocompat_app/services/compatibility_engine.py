"""
Adjacent-tank compatibility analysis.

A pass walks every loaded tank in row-major order and classifies its
relationship with each loaded neighbour:

    base      - chart lookup (group of this tank, group of the neighbour)
    exception - named-chemical override, if any
    final     - the exception only when it reverses the base, else the base

Every undirected adjacency is evaluated from both ends, so a flagged pair
shows up twice in the problem list ((A, B) and (B, A)). The pass is a pure
function of its inputs and performs no I/O.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Set

from ..models import TankPosition
from .compatibility_matrix import CompatibilityMatrix
from .exception_registry import ExceptionKind, ExceptionRegistry
from .tank_grid import TankGrid

logger = logging.getLogger(__name__)


class Compatibility(Enum):
    COMPATIBLE = "compatible"
    INCOMPATIBLE = "incompatible"
    COMPATIBLE_EXCEPTION = "compatible_exception"
    INCOMPATIBLE_EXCEPTION = "incompatible_exception"

    @property
    def is_incompatible(self) -> bool:
        return self in (Compatibility.INCOMPATIBLE, Compatibility.INCOMPATIBLE_EXCEPTION)


@dataclass(frozen=True, slots=True)
class Relationship:
    """How one loaded tank stands with one loaded neighbour."""

    position: TankPosition
    chemical: str
    group: int | None
    base: Compatibility
    exception: ExceptionKind
    final: Compatibility

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chemical": self.chemical,
            "group": self.group,
            "compatibility": self.final.value,
            "baseCompatibility": self.base.value,
            "exception": None if self.exception is ExceptionKind.NONE else self.exception.value,
        }


@dataclass(slots=True)
class TankAnalysis:
    position: TankPosition
    chemical: str
    group: int | None
    adjacent: Dict[TankPosition, Relationship] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chemical": self.chemical,
            "group": self.group,
            "adjacentCompatibility": {
                pos.tank_id: rel.to_dict() for pos, rel in self.adjacent.items()
            },
        }


@dataclass(frozen=True, slots=True)
class Problem:
    tank1: TankPosition
    tank2: TankPosition
    chemical1: str
    chemical2: str
    compatibility: Compatibility

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tank1": self.tank1.tank_id,
            "tank2": self.tank2.tank_id,
            "chemical1": self.chemical1,
            "chemical2": self.chemical2,
            "compatibility": self.compatibility.value,
        }


@dataclass(slots=True)
class AnalysisResult:
    results: Dict[TankPosition, TankAnalysis] = field(default_factory=dict)
    problems: List[Problem] = field(default_factory=list)

    @property
    def has_problems(self) -> bool:
        return bool(self.problems)

    def problem_tanks(self) -> Set[TankPosition]:
        """Tanks involved in at least one problem, for highlighting on the plan."""
        tanks: Set[TankPosition] = set()
        for p in self.problems:
            tanks.add(p.tank1)
            tanks.add(p.tank2)
        return tanks

    def to_dict(self) -> Dict[str, Any]:
        return {
            "results": {pos.tank_id: ta.to_dict() for pos, ta in self.results.items()},
            "problems": [p.to_dict() for p in self.problems],
        }


def resolve_compatibility(base: Compatibility, exception: ExceptionKind) -> Compatibility:
    """Apply an override only where it reverses the chart result."""
    if exception is ExceptionKind.COMPATIBLE and base is Compatibility.INCOMPATIBLE:
        return Compatibility.COMPATIBLE_EXCEPTION
    if exception is ExceptionKind.INCOMPATIBLE and base is Compatibility.COMPATIBLE:
        return Compatibility.INCOMPATIBLE_EXCEPTION
    return base


def analyze(
    grid: TankGrid,
    matrix: CompatibilityMatrix,
    registry: ExceptionRegistry,
) -> AnalysisResult:
    """Classify every loaded adjacency in the grid and collect the incompatible ones."""
    result = AnalysisResult()

    for tank in grid.tanks():
        if not tank.is_loaded:
            continue
        pos = tank.position
        analysis = TankAnalysis(position=pos, chemical=tank.chemical_name, group=tank.group)
        result.results[pos] = analysis

        for adj_pos in grid.adjacent_positions(pos.row, pos.col):
            adj = grid.tank(adj_pos)
            if not adj.is_loaded:
                continue

            if matrix.is_flagged(tank.group, adj.group):
                base = Compatibility.INCOMPATIBLE
            else:
                base = Compatibility.COMPATIBLE
            exception = registry.classify_exception(
                tank.chemical_name, tank.group, adj.chemical_name, adj.group
            )
            final = resolve_compatibility(base, exception)

            analysis.adjacent[adj_pos] = Relationship(
                position=adj_pos,
                chemical=adj.chemical_name,
                group=adj.group,
                base=base,
                exception=exception,
                final=final,
            )
            if final.is_incompatible:
                result.problems.append(
                    Problem(
                        tank1=pos,
                        tank2=adj_pos,
                        chemical1=tank.chemical_name,
                        chemical2=adj.chemical_name,
                        compatibility=final,
                    )
                )

    logger.debug(
        "Analysis pass: %d loaded tanks, %d problems",
        len(result.results),
        len(result.problems),
    )
    return result
