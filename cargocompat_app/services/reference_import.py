"""
Import the four reference workbooks from Excel (.xlsx) or CSV.

    chemical index         - Chemical name, Group No., Footnote
    compatibility chart    - REACTIVE GROUP plus one column per group, "X" where flagged
    compatible exceptions  - Chemical Name, Compatible Chemical Name
    incompatible exceptions- Chemical Name, Incompatible Group

Only the first sheet of each workbook is read. Incomplete rows are skipped by
the table builders rather than failing the load; empty tables are reported as
warnings so the operator knows the analysis cannot flag anything from them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from .chemical_index import ChemicalIndex
from .compatibility_matrix import CompatibilityMatrix
from .exception_registry import ExceptionRegistry

logger = logging.getLogger(__name__)


def _read_frame(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix in (".xlsx", ".xls"):
        return pd.read_excel(path, sheet_name=0, engine="openpyxl")
    if suffix == ".csv":
        return pd.read_csv(path)
    raise ValueError(f"Unsupported format: {path.suffix}. Use .xlsx or .csv.")


def read_table(file_path: str | Path) -> List[Dict[Any, Any]]:
    """
    Read the first sheet of a workbook (or a CSV file) as a list of row dicts.

    Header cells become keys; empty cells become None.
    Raises FileNotFoundError if the file is missing, ValueError for other formats.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    df = _read_frame(path)
    df = df.dropna(how="all")
    df = df.astype(object).where(pd.notna(df), None)
    rows = df.to_dict(orient="records")
    logger.info("Read %d rows from %s", len(rows), path.name)
    return rows


@dataclass(slots=True)
class ReferenceData:
    """Read-only tables the compatibility engine works from."""

    index: ChemicalIndex = field(default_factory=ChemicalIndex)
    matrix: CompatibilityMatrix = field(default_factory=CompatibilityMatrix)
    registry: ExceptionRegistry = field(default_factory=ExceptionRegistry)

    @classmethod
    def from_rows(
        cls,
        chemical_rows: List[Dict[Any, Any]],
        chart_rows: List[Dict[Any, Any]],
        compatible_rows: List[Dict[Any, Any]],
        incompatible_rows: List[Dict[Any, Any]],
    ) -> "ReferenceData":
        return cls(
            index=ChemicalIndex.from_rows(chemical_rows),
            matrix=CompatibilityMatrix.from_chart_rows(chart_rows),
            registry=ExceptionRegistry.from_rows(compatible_rows, incompatible_rows),
        )

    def warnings(self) -> List[str]:
        """Gaps in the reference data that silently weaken the analysis."""
        found: List[str] = []
        if self.index.is_empty:
            found.append("Chemical index is empty: no chemical names can be assigned.")
        if self.matrix.is_empty:
            found.append("Compatibility chart has no flagged group pairs: group conflicts cannot be detected.")
        if self.registry.is_empty:
            found.append("No exception records loaded: only group-level compatibility applies.")
        return found


def load_reference_data(
    chemical_index: str | Path,
    compatibility_chart: str | Path,
    compatible_exceptions: str | Path,
    incompatible_exceptions: str | Path,
) -> ReferenceData:
    """Read all four reference files and build the engine tables."""
    data = ReferenceData.from_rows(
        read_table(chemical_index),
        read_table(compatibility_chart),
        read_table(compatible_exceptions),
        read_table(incompatible_exceptions),
    )
    logger.info(
        "Reference data loaded: %d chemicals, %d flagged group pairs",
        len(data.index),
        len(data.matrix.flagged_pairs()),
    )
    for message in data.warnings():
        logger.warning(message)
    return data
