"""
Approved cargo index: name resolution for operator-entered chemical names.

Resolution is deliberately literal so compliance reports stay reproducible
against the same index: an exact case-insensitive match wins, otherwise the
first record in index order whose name contains the query. There is no
ranking by length or similarity.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, List, Mapping

from ..config.limits import COL_CHEMICAL_NAME, COL_FOOTNOTE, COL_GROUP_NO, SUGGESTION_LIMIT
from ..models import ChemicalRecord

logger = logging.getLogger(__name__)


def parse_group(value: Any) -> int | None:
    """
    Coerce a workbook group cell to an int.

    Spreadsheet readers hand back 3, 3.0 or "3" for the same cell; anything
    that is not a whole number (blank, "-", "n/a") is treated as unclassified.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or not value.is_integer():  # NaN or fractional
            return None
        return int(value)
    text = str(value).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None


def clean_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value != value:
        return ""
    return str(value).strip()


class ChemicalIndex:
    """Ordered, read-only lookup of known chemicals to their reactivity group."""

    def __init__(self, records: Iterable[ChemicalRecord] = ()) -> None:
        self._records: tuple[ChemicalRecord, ...] = tuple(records)
        self._lowered: tuple[str, ...] = tuple(r.name.lower() for r in self._records)

    @classmethod
    def from_rows(cls, rows: Iterable[Mapping[str, Any]]) -> "ChemicalIndex":
        """Build from chemical index rows; rows without a chemical name are skipped."""
        records: List[ChemicalRecord] = []
        skipped = 0
        for row in rows:
            if not row:
                skipped += 1
                continue
            name = clean_text(row.get(COL_CHEMICAL_NAME))
            if not name:
                skipped += 1
                continue
            footnote = clean_text(row.get(COL_FOOTNOTE)) or None
            records.append(
                ChemicalRecord(name=name, group=parse_group(row.get(COL_GROUP_NO)), footnote=footnote)
            )
        if skipped:
            logger.debug("Skipped %d chemical index rows without a name", skipped)
        return cls(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ChemicalRecord]:
        return iter(self._records)

    @property
    def is_empty(self) -> bool:
        return not self._records

    def resolve(self, name: str | None) -> ChemicalRecord | None:
        """Return the matching record, or None if the name is blank or unknown."""
        if not name or not name.strip():
            return None
        query = name.strip().lower()
        for record, lowered in zip(self._records, self._lowered):
            if lowered == query:
                return record
        for record, lowered in zip(self._records, self._lowered):
            if query in lowered:
                return record
        return None

    def suggest(self, term: str | None, limit: int = SUGGESTION_LIMIT) -> List[ChemicalRecord]:
        """Records whose name contains `term`, in index order, at most `limit`."""
        if not term or not term.strip() or limit <= 0:
            return []
        query = term.strip().lower()
        found: List[ChemicalRecord] = []
        for record, lowered in zip(self._records, self._lowered):
            if query in lowered:
                found.append(record)
                if len(found) >= limit:
                    break
        return found
