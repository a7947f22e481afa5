"""
Named-chemical exceptions to the group compatibility chart.

Compatible overrides are checked first and win over incompatible overrides
regardless of the order in which either list was issued.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Iterable, List, Mapping, Sequence

from ..config.limits import COL_COMPATIBLE_CHEMICAL, COL_EXCEPTION_CHEMICAL, COL_INCOMPATIBLE_GROUP
from ..models import CompatibleOverride, IncompatibleOverride
from .chemical_index import clean_text

logger = logging.getLogger(__name__)


class ExceptionKind(Enum):
    COMPATIBLE = "compatible_exception"
    INCOMPATIBLE = "incompatible_exception"
    NONE = "none"


def _groups_text(value: Any) -> str:
    # Excel hands back a lone group as a number (5 or 5.0)
    if isinstance(value, float) and value == value and value.is_integer():
        return str(int(value))
    return clean_text(value)


class ExceptionRegistry:
    """Read-only compatible and incompatible override lists."""

    def __init__(
        self,
        compatible: Iterable[CompatibleOverride] = (),
        incompatible: Iterable[IncompatibleOverride] = (),
    ) -> None:
        self._compatible: tuple[CompatibleOverride, ...] = tuple(compatible)
        self._incompatible: tuple[IncompatibleOverride, ...] = tuple(incompatible)

    @classmethod
    def from_rows(
        cls,
        compatible_rows: Iterable[Mapping[str, Any]] = (),
        incompatible_rows: Iterable[Mapping[str, Any]] = (),
    ) -> "ExceptionRegistry":
        """Build from exception workbook rows; rows missing a field are skipped."""
        compatible: List[CompatibleOverride] = []
        for row in compatible_rows:
            if not row:
                continue
            a = clean_text(row.get(COL_EXCEPTION_CHEMICAL))
            b = clean_text(row.get(COL_COMPATIBLE_CHEMICAL))
            if a and b:
                compatible.append(CompatibleOverride(a, b))

        incompatible: List[IncompatibleOverride] = []
        for row in incompatible_rows:
            if not row:
                continue
            chemical = clean_text(row.get(COL_EXCEPTION_CHEMICAL))
            groups = _groups_text(row.get(COL_INCOMPATIBLE_GROUP))
            if chemical and groups:
                incompatible.append(IncompatibleOverride(chemical, groups))

        logger.debug(
            "Exception registry: %d compatible, %d incompatible overrides",
            len(compatible),
            len(incompatible),
        )
        return cls(compatible, incompatible)

    @property
    def compatible_overrides(self) -> Sequence[CompatibleOverride]:
        return self._compatible

    @property
    def incompatible_overrides(self) -> Sequence[IncompatibleOverride]:
        return self._incompatible

    @property
    def is_empty(self) -> bool:
        return not self._compatible and not self._incompatible

    def classify_exception(
        self,
        chem1: str,
        group1: int | None,
        chem2: str,
        group2: int | None,
    ) -> ExceptionKind:
        if not chem1 or not chem2 or group1 is None or group2 is None:
            return ExceptionKind.NONE

        for override in self._compatible:
            if override.matches(chem1, chem2):
                return ExceptionKind.COMPATIBLE

        for override in self._incompatible:
            if override.chemical != chem1 and override.chemical != chem2:
                continue
            try:
                groups = override.parse_groups()
            except ValueError:
                logger.debug(
                    "Skipping incompatible override for %s: unparsable groups %r",
                    override.chemical,
                    override.groups_text,
                )
                continue
            if group1 in groups or group2 in groups:
                return ExceptionKind.INCOMPATIBLE

        return ExceptionKind.NONE
