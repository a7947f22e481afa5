"""
Named-chemical exceptions layered on top of the group compatibility chart.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CompatibleOverride:
    """Two chemicals declared mutually safe regardless of their groups (unordered)."""

    chemical_a: str
    chemical_b: str

    def matches(self, chem1: str, chem2: str) -> bool:
        return (self.chemical_a == chem1 and self.chemical_b == chem2) or (
            self.chemical_a == chem2 and self.chemical_b == chem1
        )


@dataclass(frozen=True, slots=True)
class IncompatibleOverride:
    """
    A chemical declared incompatible with a set of reactivity groups.

    `groups_text` is kept as issued in the workbook (e.g. "1, 5, 9"); it is
    parsed when the record is evaluated so one bad row cannot break loading.
    """

    chemical: str
    groups_text: str

    def parse_groups(self) -> frozenset[int]:
        """
        Return the group set.

        Raises ValueError if any comma-separated token is not an integer.
        """
        groups = set()
        for token in self.groups_text.split(","):
            groups.add(int(token.strip()))
        return frozenset(groups)
