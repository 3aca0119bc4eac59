"""
Bead-Value Codec.

Converts between a non-negative integer and the set of active bead keys that
show it on an N-column board. Keys have the form "{column}-{upper|lower}-{row}";
column 0 is the most significant place.

Lower beads are activated from the crossbar side: a digit needing k ones uses
rows lower_beads-k .. lower_beads-1. Upper beads are activated from row 0.
"""

from __future__ import annotations

from dataclasses import dataclass

from sempoa.config import get_settings

UPPER = "upper"
LOWER = "lower"


@dataclass(frozen=True)
class BoardConfig:
    """Dimensions of the bead board."""

    columns: int = 9
    upper_beads: int = 1
    lower_beads: int = 4

    def place_value(self, column: int) -> int:
        """Place value of a column (leftmost column is the highest)."""
        return 10 ** (self.columns - 1 - column)

    @property
    def max_value(self) -> int:
        """Value shown when every bead is active."""
        per_column = self.upper_beads * 5 + self.lower_beads
        return sum(per_column * self.place_value(column) for column in range(self.columns))

    @classmethod
    def from_settings(cls) -> BoardConfig:
        return cls(**get_settings().get_board_config())


@dataclass(frozen=True)
class BeadPosition:
    """One bead on the board."""

    column: int
    row: int
    is_upper: bool

    @property
    def key(self) -> str:
        return bead_key(self)


def bead_key(bead: BeadPosition) -> str:
    """Key of a bead position."""
    return f"{bead.column}-{UPPER if bead.is_upper else LOWER}-{bead.row}"


def parse_bead_key(key: str) -> BeadPosition:
    """
    Parse a bead key.

    Raises:
        ValueError: If the key is not "{column}-{upper|lower}-{row}"
    """
    parts = key.split("-")
    if len(parts) != 3 or parts[1] not in (UPPER, LOWER):
        raise ValueError(f"Malformed bead key: '{key}'")
    column, kind, row = parts
    if not column.isdigit() or not row.isdigit():
        raise ValueError(f"Malformed bead key: '{key}'")
    return BeadPosition(column=int(column), row=int(row), is_upper=kind == UPPER)


def _resolve(board: BoardConfig | None) -> BoardConfig:
    return board if board is not None else BoardConfig.from_settings()


def can_represent_value(value: int, board: BoardConfig | None = None) -> bool:
    """True if value is non-negative and fits on the board."""
    if value < 0:
        return False
    return value <= _resolve(board).max_value


def value_to_bead_keys(value: int, board: BoardConfig | None = None) -> set[str]:
    """
    Convert a value to the active bead keys representing it.

    Args:
        value: Non-negative integer
        board: Board dimensions (defaults to configured board)

    Returns:
        Set of bead keys; empty for 0

    Raises:
        ValueError: If value is negative or exceeds the board capacity
    """
    board = _resolve(board)
    if value < 0:
        raise ValueError(f"Value must be non-negative, got {value}")
    if value > board.max_value:
        raise ValueError(f"Value {value} exceeds board capacity {board.max_value}")

    active: set[str] = set()
    remaining = value
    for column in range(board.columns):
        place = board.place_value(column)
        digit = remaining // place
        remaining -= digit * place
        if digit == 0:
            continue

        fives = min(digit // 5, board.upper_beads)
        for row in range(fives):
            active.add(f"{column}-{UPPER}-{row}")

        ones = min(digit % 5, board.lower_beads)
        for row in range(board.lower_beads - ones, board.lower_beads):
            active.add(f"{column}-{LOWER}-{row}")

    return active


def bead_keys_to_value(keys: set[str] | frozenset[str], board: BoardConfig | None = None) -> int:
    """Sum the values of active bead keys."""
    board = _resolve(board)
    total = 0
    for key in keys:
        bead = parse_bead_key(key)
        if bead.column >= board.columns:
            raise ValueError(f"Bead key '{key}' is outside a {board.columns}-column board")
        place = board.place_value(bead.column)
        total += 5 * place if bead.is_upper else place
    return total
