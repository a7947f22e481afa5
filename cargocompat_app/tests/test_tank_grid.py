"""Tests for the tank grid: layout, adjacency and chemical assignment."""

from __future__ import annotations

import pytest

from cargocompat_app.models import TankPosition
from cargocompat_app.services.tank_grid import ChemicalNotFoundError, GridDimensionError, TankGrid


class TestLayout:
    def test_every_slot_has_one_empty_tank(self, grid):
        assert len(grid) == 32
        positions = {t.position for t in grid.tanks()}
        assert positions == {TankPosition(r, c) for r in range(8) for c in range(4)}
        assert grid.loaded_tanks() == []

    def test_tanks_row_major(self):
        g = TankGrid(2, 4)
        assert [t.position for t in g.tanks()][:3] == [
            TankPosition(0, 0),
            TankPosition(0, 1),
            TankPosition(1, 0),
        ]

    @pytest.mark.parametrize("width, length", [(1, 8), (9, 8), (4, 3), (4, 13)])
    def test_out_of_range(self, width, length):
        with pytest.raises(GridDimensionError):
            TankGrid(width, length)

    def test_unknown_position(self, grid):
        with pytest.raises(KeyError):
            grid.tank(TankPosition(8, 0))


class TestAdjacency:
    def test_corner_has_three(self, grid):
        assert set(grid.adjacent_positions(0, 0)) == {
            TankPosition(0, 1),
            TankPosition(1, 0),
            TankPosition(1, 1),
        }

    def test_interior_has_eight(self, grid):
        adj = grid.adjacent_positions(3, 2)
        assert len(adj) == 8
        assert TankPosition(3, 2) not in adj

    def test_edge_has_five(self, grid):
        assert len(grid.adjacent_positions(4, 0)) == 5

    def test_no_wraparound(self, grid):
        adj = grid.adjacent_positions(7, 3)
        assert len(adj) == 3
        assert TankPosition(0, 0) not in adj


class TestAssignChemical:
    def test_assign_resolves_group(self, grid, chemical_index):
        t = grid.assign_chemical(TankPosition(0, 0), "toluene", chemical_index)
        assert t.is_loaded
        assert t.chemical_name == "Toluene"
        assert t.entered_name == "toluene"
        assert t.group == 32
        assert grid.loaded_tanks() == [t]

    def test_unknown_name_rejected_and_tank_kept(self, grid, chemical_index):
        pos = TankPosition(1, 1)
        grid.assign_chemical(pos, "Acid X", chemical_index)
        with pytest.raises(ChemicalNotFoundError) as excinfo:
            grid.assign_chemical(pos, "Unobtainium", chemical_index)
        assert excinfo.value.attempted_name == "Unobtainium"
        assert "Unobtainium" in str(excinfo.value)
        assert grid.tank(pos).chemical_name == "Acid X"
        assert grid.tank(pos).group == 1

    def test_blank_name_unloads(self, grid, chemical_index):
        pos = TankPosition(0, 0)
        grid.assign_chemical(pos, "Acid X", chemical_index)
        t = grid.assign_chemical(pos, "  ", chemical_index)
        assert not t.is_loaded
        assert t.group is None

    def test_unclassified_chemical_has_no_group(self, grid, chemical_index):
        t = grid.assign_chemical(TankPosition(0, 0), "Mystery oil", chemical_index)
        assert t.is_loaded
        assert t.group is None

    def test_clear(self, grid, chemical_index):
        pos = TankPosition(2, 2)
        grid.assign_chemical(pos, "Base Y", chemical_index)
        grid.clear(pos)
        assert not grid.tank(pos).is_loaded


class TestSnapshot:
    def test_snapshot_is_independent(self, grid, chemical_index):
        pos = TankPosition(0, 0)
        grid.assign_chemical(pos, "Acid X", chemical_index)
        snap = grid.snapshot()
        grid.clear(pos)
        assert snap.tank(pos).chemical_name == "Acid X"
        assert not grid.tank(pos).is_loaded
