"""Tests for domain models."""

from __future__ import annotations

import dataclasses

import pytest

from cargocompat_app.models import (
    ChemicalRecord,
    CompatibleOverride,
    IncompatibleOverride,
    Tank,
    TankPosition,
)


class TestChemicalRecord:
    def test_defaults(self):
        r = ChemicalRecord("Toluene")
        assert r.group is None
        assert r.footnote is None

    def test_immutable(self):
        r = ChemicalRecord("Toluene", 32)
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.group = 1


class TestTankPosition:
    def test_label(self):
        assert TankPosition(0, 0).label == "A1"
        assert TankPosition(2, 3).label == "C4"

    def test_tank_id_roundtrip(self):
        pos = TankPosition(7, 3)
        assert pos.tank_id == "7-3"
        assert TankPosition.from_tank_id("7-3") == pos

    def test_ordering_is_row_major(self):
        assert sorted([TankPosition(1, 0), TankPosition(0, 3)]) == [TankPosition(0, 3), TankPosition(1, 0)]


class TestTank:
    def test_defaults_unloaded(self):
        t = Tank(TankPosition(0, 0))
        assert not t.is_loaded
        assert t.group is None

    def test_whitespace_name_is_unloaded(self):
        t = Tank(TankPosition(0, 0), chemical_name="   ")
        assert not t.is_loaded

    def test_clear(self):
        t = Tank(TankPosition(0, 0), chemical_name="Toluene", entered_name="tol", group=32)
        t.clear()
        assert t.chemical_name == ""
        assert t.entered_name == ""
        assert t.group is None
        assert t.record is None


class TestOverrides:
    def test_compatible_override_unordered(self):
        o = CompatibleOverride("Acid X", "Base Y")
        assert o.matches("Acid X", "Base Y")
        assert o.matches("Base Y", "Acid X")
        assert not o.matches("Acid X", "Toluene")

    def test_incompatible_groups_parse(self):
        o = IncompatibleOverride("Toluene", "1, 5 ,9")
        assert o.parse_groups() == frozenset({1, 5, 9})

    def test_incompatible_groups_malformed(self):
        o = IncompatibleOverride("Toluene", "1, five")
        with pytest.raises(ValueError):
            o.parse_groups()
