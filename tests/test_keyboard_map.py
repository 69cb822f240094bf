"""Tests for the physical key grids."""

import importlib

import pytest
import config
from keyboard_map import KeyboardGrid, KeyPosition, QWERTY, DVORAK, GRIDS, grid_by_name


class TestGridShape:
    """Rows run bottom-up."""

    def test_bottom_row_is_row_zero(self):
        assert QWERTY.lookup("z") == KeyPosition(0, 0)
        assert QWERTY.lookup("a") == KeyPosition(1, 0)
        assert QWERTY.lookup("q") == KeyPosition(2, 0)
        assert QWERTY.lookup("1") == KeyPosition(3, 0)

    def test_columns(self):
        assert QWERTY.lookup("x") == KeyPosition(0, 1)
        assert QWERTY.lookup("=") == KeyPosition(3, 11)
        assert QWERTY.lookup("'") == KeyPosition(1, 10)

    def test_dvorak(self):
        assert DVORAK.lookup(";") == KeyPosition(0, 0)
        assert DVORAK.lookup("a") == KeyPosition(1, 0)
        assert DVORAK.lookup("'") == KeyPosition(2, 0)
        assert DVORAK.lookup("]") == KeyPosition(3, 11)

    def test_four_rows(self):
        assert len(QWERTY.rows) == 4
        assert len(DVORAK.rows) == 4
        assert len(QWERTY) == 12 + 12 + 11 + 10


class TestLookup:
    """Lookup by symbol."""

    def test_uppercase_maps_to_same_key(self):
        assert QWERTY.lookup("Q") == QWERTY.lookup("q")

    def test_missing_symbol(self):
        assert QWERTY.lookup("!") is None
        assert QWERTY.lookup("") is None
        assert " " not in QWERTY

    def test_symbol_at(self):
        assert QWERTY.symbol_at(KeyPosition(0, 0)) == "z"
        assert QWERTY.symbol_at(KeyPosition(0, 10)) is None
        assert QWERTY.symbol_at(KeyPosition(-1, 0)) is None

    def test_iteration_matches_lookup(self):
        for position, symbol in QWERTY:
            assert QWERTY.lookup(symbol) == position


class TestGridConfig:
    """Grid construction and selection."""

    def test_duplicate_symbol_rejected(self):
        with pytest.raises(ValueError):
            KeyboardGrid("broken", ("abc", "cde"))

    def test_grid_by_name(self):
        assert grid_by_name("qwerty") is QWERTY
        assert grid_by_name("Dvorak") is DVORAK

    def test_unknown_grid(self):
        with pytest.raises(KeyError):
            grid_by_name("colemak")

    def test_grid_table_is_read_only(self):
        with pytest.raises(TypeError):
            GRIDS["colemak"] = QWERTY

    def test_default_grid_is_qwerty(self, monkeypatch):
        monkeypatch.delenv("MUSICAL_KEYS_GRID", raising=False)
        assert importlib.reload(config).GRID_NAME == "qwerty"

    def test_grid_from_environment(self, monkeypatch):
        monkeypatch.setenv("MUSICAL_KEYS_GRID", "Dvorak")
        try:
            assert grid_by_name(importlib.reload(config).GRID_NAME) is DVORAK
        finally:
            monkeypatch.delenv("MUSICAL_KEYS_GRID")
            importlib.reload(config)
