"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from cargocompat_app.models import ChemicalRecord
from cargocompat_app.services.chemical_index import ChemicalIndex
from cargocompat_app.services.compatibility_matrix import CompatibilityMatrix
from cargocompat_app.services.exception_registry import ExceptionRegistry
from cargocompat_app.services.reference_import import ReferenceData
from cargocompat_app.services.tank_grid import TankGrid


@pytest.fixture
def chemical_rows():
    """Rows as read from the chemical index workbook."""
    return [
        {"Chemical name": "Acetic acid", "Group No.": 4, "Footnote": None},
        {"Chemical name": "Boric acid", "Group No.": 1, "Footnote": None},
        {"Chemical name": "Acid X", "Group No.": 1, "Footnote": None},
        {"Chemical name": "Base Y", "Group No.": 2, "Footnote": "2"},
        {"Chemical name": "Toluene", "Group No.": 32, "Footnote": None},
        {"Chemical name": "Mystery oil", "Group No.": None, "Footnote": None},
    ]


@pytest.fixture
def chemical_index(chemical_rows):
    return ChemicalIndex.from_rows(chemical_rows)


@pytest.fixture
def matrix():
    """Groups 1 and 2 flagged against each other."""
    return CompatibilityMatrix.from_chart({1: [2], 2: [1]})


@pytest.fixture
def empty_registry():
    return ExceptionRegistry()


@pytest.fixture
def reference(chemical_index, matrix, empty_registry):
    return ReferenceData(index=chemical_index, matrix=matrix, registry=empty_registry)


@pytest.fixture
def grid():
    """Default 4 x 8 tank layout, all tanks empty."""
    return TankGrid(4, 8)


@pytest.fixture
def records():
    return [
        ChemicalRecord("Acetic Acid", 4),
        ChemicalRecord("Boric Acid", 1),
    ]
