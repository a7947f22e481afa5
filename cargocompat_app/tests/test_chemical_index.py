"""Tests for chemical name resolution and suggestions."""

from __future__ import annotations

import math

import pytest

from cargocompat_app.models import ChemicalRecord
from cargocompat_app.services.chemical_index import ChemicalIndex, parse_group


class TestParseGroup:
    @pytest.mark.parametrize("value, expected", [(3, 3), (3.0, 3), ("3", 3), (" 12 ", 12), ("4.0", 4)])
    def test_whole_numbers(self, value, expected):
        assert parse_group(value) == expected

    @pytest.mark.parametrize("value", [None, "", "-", "n/a", 2.5, math.nan, True])
    def test_unclassified(self, value):
        assert parse_group(value) is None


class TestResolve:
    def test_blank_is_not_found(self, chemical_index):
        assert chemical_index.resolve("") is None
        assert chemical_index.resolve("   ") is None
        assert chemical_index.resolve(None) is None

    def test_exact_match_case_insensitive(self, chemical_index):
        r = chemical_index.resolve("  TOLUENE ")
        assert r is not None
        assert r.name == "Toluene"
        assert r.group == 32

    def test_first_containment_match_in_index_order(self, records):
        index = ChemicalIndex(records)
        r = index.resolve("acid")
        assert r is not None
        assert r.name == "Acetic Acid"

    def test_exact_match_beats_earlier_containment(self):
        index = ChemicalIndex([ChemicalRecord("Acid X solution", 1), ChemicalRecord("Acid X", 2)])
        assert index.resolve("acid x").name == "Acid X"

    def test_short_query_matches_unrelated_record_first(self, chemical_index):
        # "id" is contained in "Acetic acid" before any other record
        assert chemical_index.resolve("id").name == "Acetic acid"

    def test_unknown_name(self, chemical_index):
        assert chemical_index.resolve("Unobtainium") is None

    def test_unclassified_record_resolves(self, chemical_index):
        r = chemical_index.resolve("mystery oil")
        assert r is not None
        assert r.group is None


class TestFromRows:
    def test_skips_rows_without_name(self):
        index = ChemicalIndex.from_rows([
            {"Chemical name": None, "Group No.": 1},
            {"Chemical name": "  ", "Group No.": 1},
            {},
            {"Chemical name": "Benzene", "Group No.": 32.0, "Footnote": None},
        ])
        assert len(index) == 1
        assert list(index)[0] == ChemicalRecord("Benzene", 32, None)

    def test_empty(self):
        index = ChemicalIndex.from_rows([])
        assert index.is_empty
        assert index.resolve("anything") is None

    def test_footnote_kept(self, chemical_index):
        assert chemical_index.resolve("Base Y").footnote == "2"


class TestSuggest:
    def test_in_index_order(self, chemical_index):
        names = [r.name for r in chemical_index.suggest("acid")]
        assert names == ["Acetic acid", "Boric acid", "Acid X"]

    def test_limit(self, chemical_index):
        assert len(chemical_index.suggest("a", limit=2)) == 2

    def test_blank_term(self, chemical_index):
        assert chemical_index.suggest("") == []
        assert chemical_index.suggest("  ") == []
