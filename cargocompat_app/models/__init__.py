"""
Domain models for the cargo compatibility tool.

These are pure Python/domain classes, independent of how the reference data
is read or how results are presented.
"""

from .chemical import ChemicalRecord
from .override import CompatibleOverride, IncompatibleOverride
from .tank import Tank, TankPosition

__all__ = [
    "ChemicalRecord",
    "CompatibleOverride",
    "IncompatibleOverride",
    "Tank",
    "TankPosition",
]
