"""
Chemical index record.

One row of the approved cargo index: canonical name, reactivity group and an
optional footnote. Group is None when the index leaves the chemical
unclassified.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ChemicalRecord:
    """A chemical in the approved cargo index."""

    name: str
    group: int | None = None
    footnote: str | None = None
