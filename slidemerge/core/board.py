"""
Board representation for the 2048 game, a fixed 4x4 grid of optional power-of-two tiles.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from numpy import argwhere, array_equal, count_nonzero, int64, integer, ndarray, zeros

# ##: Fixed size of the grid.
BOARD_SIZE = 4

Coord = tuple[int, int]
Snapshot = tuple[tuple[Optional[int], ...], ...]


def is_tile_value(value: int) -> bool:
    """Check if a value is a valid tile, i.e. a power of two greater or equal to 2."""
    return isinstance(value, (int, integer)) and value >= 2 and value & (value - 1) == 0


class Board:
    """
    Mutable 4x4 game board.

    Cells hold either ``None`` (empty) or a power of two. Every coordinate outside the grid
    behaves like a wall: it is reported as occupied, its value is ``None`` and writes to it
    are ignored.

    Notes
    -----
    The values are stored in a ``int64`` array where ``0`` marks an empty cell.
    """

    def __init__(self):
        self._cells: ndarray = zeros((BOARD_SIZE, BOARD_SIZE), dtype=int64)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[int]]]) -> Board:
        """
        Build a board from nested rows.

        Parameters
        ----------
        rows : Sequence[Sequence[Optional[int]]]
            Four rows of four values, ``None`` marking an empty cell.

        Returns
        -------
        Board
            A new board holding the given values.

        Raises
        ------
        ValueError
            If the rows are not 4x4 or a value is not a power of two >= 2.
        """
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f'Board must be {BOARD_SIZE}x{BOARD_SIZE}, got {[len(row) for row in rows]}')

        board = cls()
        for row, values in enumerate(rows):
            for col, value in enumerate(values):
                if value is None:
                    continue
                if not is_tile_value(value):
                    raise ValueError(f'Invalid tile value {value!r} at ({row}, {col})')
                board._cells[row, col] = int(value)
        return board

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        """Check if a coordinate lies inside the grid."""
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def is_occupied(self, row: int, col: int) -> bool:
        """
        Check if a cell holds a tile.

        Out-of-bounds coordinates are always occupied, so tiles stop against the edges.
        """
        if not self.in_bounds(row, col):
            return True
        return bool(self._cells[row, col] != 0)

    def value_at(self, row: int, col: int) -> Optional[int]:
        """
        Get the value of a cell.

        Returns ``None`` for empty cells and for out-of-bounds coordinates.
        """
        if not self.in_bounds(row, col):
            return None
        value = int(self._cells[row, col])
        return value if value else None

    def set_value(self, row: int, col: int, value: Optional[int]) -> None:
        """
        Set the value of a cell, ``None`` clears it.

        Writes outside the grid are ignored.
        """
        if not self.in_bounds(row, col):
            return
        self._cells[row, col] = 0 if value is None else value

    def coords(self) -> Iterable[Coord]:
        """Iterate over all coordinates in row-major order."""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                yield row, col

    def empty_cells(self) -> list[Coord]:
        """List the coordinates of all empty cells in row-major order."""
        return [(int(cell[0]), int(cell[1])) for cell in argwhere(self._cells == 0)]

    def count_tiles(self) -> int:
        """Number of occupied cells."""
        return int(count_nonzero(self._cells))

    def max_tile(self) -> Optional[int]:
        """Highest tile on the board, ``None`` if the board is empty."""
        value = int(self._cells.max())
        return value if value else None

    def snapshot(self) -> Snapshot:
        """
        Take a read-only copy of the board.

        Returns
        -------
        Snapshot
            A tuple of four row tuples, ``None`` marking an empty cell.
        """
        return tuple(tuple(value if value else None for value in row) for row in self._cells.tolist())

    def as_array(self) -> ndarray:
        """Copy of the numeric grid, ``0`` marking an empty cell."""
        return self._cells.copy()

    def clear(self) -> None:
        """Empty every cell."""
        self._cells[:] = 0

    def copy(self) -> Board:
        """Independent copy of the board."""
        board = Board()
        board._cells = self._cells.copy()
        return board

    def pretty(self) -> str:
        """Text rendering of the board, one tab-separated line per row."""
        return '\n'.join(' \t'.join('.' if value is None else str(value) for value in row) for row in self.snapshot())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        return f'Board({[list(row) for row in self.snapshot()]})'
