# ==========================================================
# keyboard_map.py — Physical Key Grids (QWERTY / Dvorak)
# ==========================================================
from types import MappingProxyType
from typing import Dict, Iterator, NamedTuple, Optional, Sequence, Tuple

# --- Row Definitions ---
# Listed top to bottom, as printed on the keyboard.
QWERTY_ROWS = ("1234567890-=", "qwertyuiop[]", "asdfghjkl;'", "zxcvbnm,./")
DVORAK_ROWS = ("1234567890[]", "',.pyfgcrl/=", "aoeuidhtns-", ";qjkxbmwvz")


class KeyPosition(NamedTuple):
    row: int  # 0 is the bottom row
    col: int


class KeyboardGrid:
    """
    Immutable arrangement of key symbols.

    Row 0 is the bottom row and row numbers grow upward, so the number row
    of a four-row keyboard is row 3.
    """

    def __init__(self, name: str, rows_top_down: Sequence[str]):
        self.name = name
        self.rows: Tuple[Tuple[str, ...], ...] = tuple(
            tuple(row.lower()) for row in reversed(rows_top_down)
        )
        index: Dict[str, KeyPosition] = {}
        for r, row in enumerate(self.rows):
            for c, symbol in enumerate(row):
                if symbol in index:
                    raise ValueError(f"Duplicate key {symbol!r} in grid {name!r}")
                index[symbol] = KeyPosition(r, c)
        self._index = index

    def lookup(self, symbol: str) -> Optional[KeyPosition]:
        if not symbol:
            return None
        return self._index.get(symbol.lower())

    def symbol_at(self, position: KeyPosition) -> Optional[str]:
        row, col = position
        if 0 <= row < len(self.rows) and 0 <= col < len(self.rows[row]):
            return self.rows[row][col]
        return None

    def __contains__(self, symbol):
        return self.lookup(symbol) is not None

    def __iter__(self) -> Iterator[Tuple[KeyPosition, str]]:
        for r, row in enumerate(self.rows):
            for c, symbol in enumerate(row):
                yield KeyPosition(r, c), symbol

    def __len__(self):
        return len(self._index)

    def __repr__(self):
        return f"KeyboardGrid({self.name!r})"


QWERTY = KeyboardGrid("qwerty", QWERTY_ROWS)
DVORAK = KeyboardGrid("dvorak", DVORAK_ROWS)

GRIDS = MappingProxyType({grid.name: grid for grid in (QWERTY, DVORAK)})


def grid_by_name(name: str) -> KeyboardGrid:
    try:
        return GRIDS[name.lower()]
    except KeyError:
        raise KeyError(f"Unknown keyboard grid {name!r}; choose one of {sorted(GRIDS)}") from None
