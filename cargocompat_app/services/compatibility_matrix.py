"""
Group x group compatibility chart.

Each chart row declares a source group and marks the other groups it is
flagged against. Lookups are directional: (g1, g2) is read exactly as built
and is never back-filled with (g2, g1).
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Tuple

from ..config.limits import COL_REACTIVE_GROUP, INCOMPATIBLE_MARK
from .chemical_index import parse_group

logger = logging.getLogger(__name__)

_LEADING_DIGITS = re.compile(r"\s*(\d+)")


def _source_group(cell: Any) -> int | None:
    """Group number from a chart row label such as "1. Non-oxidizing Mineral Acids"."""
    if cell is None:
        return None
    text = str(cell).strip()
    if "." not in text:
        return None
    match = _LEADING_DIGITS.match(text)
    return int(match.group(1)) if match else None


def _column_group(key: Any) -> int | None:
    if isinstance(key, str):
        key = key.strip()
    return parse_group(key)


class CompatibilityMatrix:
    """Partial, directional mapping of group pairs to a flagged state."""

    def __init__(self, flagged: Mapping[int, Iterable[int]] | None = None) -> None:
        self._flagged: Dict[int, FrozenSet[int]] = {
            int(group): frozenset(int(c) for c in columns)
            for group, columns in (flagged or {}).items()
        }

    @classmethod
    def from_chart(cls, chart: Mapping[int, Iterable[int]]) -> "CompatibilityMatrix":
        return cls(chart)

    @classmethod
    def from_chart_rows(cls, rows: Iterable[Mapping[Any, Any]]) -> "CompatibilityMatrix":
        """
        Build from compatibility chart rows.

        Rows whose REACTIVE GROUP cell has no "<n>." prefix (headers, notes)
        are skipped. Every column headed by a group number whose cell holds
        the incompatible mark flags (row group, column group). A later row for
        the same group replaces the earlier one.
        """
        chart: Dict[int, set] = {}
        for row in rows:
            if not row:
                continue
            group = _source_group(row.get(COL_REACTIVE_GROUP))
            if group is None:
                continue
            columns: set = set()
            for key, value in row.items():
                column = _column_group(key)
                if column is None or value is None:
                    continue
                if str(value).strip().upper() == INCOMPATIBLE_MARK:
                    columns.add(column)
            chart[group] = columns
        logger.debug("Compatibility chart built with %d source groups", len(chart))
        return cls(chart)

    @property
    def is_empty(self) -> bool:
        return not any(self._flagged.values())

    def is_flagged(self, g1: int | None, g2: int | None) -> bool:
        """True if the chart row for g1 marks g2. Unknown groups are never flagged."""
        if g1 is None or g2 is None:
            return False
        columns = self._flagged.get(g1)
        return columns is not None and g2 in columns

    def flagged_pairs(self) -> List[Tuple[int, int]]:
        return sorted((g, c) for g, columns in self._flagged.items() for c in columns)
