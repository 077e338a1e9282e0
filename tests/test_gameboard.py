"""
Tests for game over detection and tile spawning.
"""

from collections import Counter
from unittest import TestCase, main

import numpy as np

from slidemerge.core.board import Board
from slidemerge.core.gameboard import SPAWN_VALUE, fill_cells, is_done, spawn_tile

_ = None

BLOCKED = [[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]]


class TestGameTermination(TestCase):
    """Test game over detection."""

    def test_game_over_full_board_no_merges(self):
        """Game ends when board full and no adjacent equal tiles."""
        self.assertTrue(is_done(Board.from_rows(BLOCKED)))

    def test_game_over_checkerboard(self):
        """Equal values on diagonals do not count as a merge."""
        board = Board.from_rows([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])
        self.assertTrue(is_done(board))

    def test_game_not_over_with_empty_cells(self):
        """Game continues when empty cells exist, whatever the neighbours."""
        rows = [row[:] for row in BLOCKED]
        rows[0][3] = None
        self.assertFalse(is_done(Board.from_rows(rows)))

        # ##>: An empty board is not finished either.
        self.assertFalse(is_done(Board()))

    def test_game_not_over_with_horizontal_merge(self):
        """Game continues when two tiles of a row can merge."""
        rows = [row[:] for row in BLOCKED]
        rows[3][2] = rows[3][3]
        self.assertFalse(is_done(Board.from_rows(rows)))

    def test_game_not_over_with_vertical_merge(self):
        """Game continues when two tiles of a column can merge."""
        rows = [row[:] for row in BLOCKED]
        rows[1][0] = rows[0][0]
        self.assertFalse(is_done(Board.from_rows(rows)))


class TestSpawnTile(TestCase):
    """Test the random tile spawning."""

    def test_spawn_on_empty_board(self):
        """Two spawns on an empty board give exactly two tiles of value 2."""
        board = Board()
        rng = np.random.default_rng(0)
        first = spawn_tile(board, rng=rng)
        second = spawn_tile(board, rng=rng)

        self.assertNotEqual(first, second)
        self.assertEqual(board.count_tiles(), 2)
        self.assertEqual(len(board.empty_cells()), 14)
        self.assertEqual(board.value_at(*first), SPAWN_VALUE)
        self.assertEqual(board.value_at(*second), SPAWN_VALUE)

    def test_spawn_changes_only_one_empty_cell(self):
        """Spawning never overwrites a tile and touches a single cell."""
        rng = np.random.default_rng(3)
        board = Board.from_rows([[2, 4, _, _], [_, 8, 16, _], [_, _, _, 32], [64, _, _, _]])

        for _step in range(board.count_tiles(), 16):
            before = board.as_array()
            cell = spawn_tile(board, rng=rng)
            after = board.as_array()

            self.assertEqual(before[cell], 0)
            self.assertEqual(after[cell], SPAWN_VALUE)

            # ##>: Every other cell is unchanged.
            after[cell] = 0
            np.testing.assert_array_equal(before, after)

    def test_spawn_on_finished_game(self):
        """A finished game is left untouched."""
        board = Board.from_rows(BLOCKED)
        before = board.copy()
        self.assertIsNone(spawn_tile(board))
        self.assertEqual(board, before)

    def test_spawn_on_full_board_with_merges(self):
        """A full board that can still merge has no cell to fill."""
        board = Board.from_rows([[2, 2, 4, 8]] + BLOCKED[1:])
        self.assertFalse(is_done(board))
        self.assertIsNone(spawn_tile(board))

    def test_spawn_fills_last_cell(self):
        """The only empty cell is always the one chosen."""
        rows = [row[:] for row in BLOCKED]
        rows[2][1] = None
        board = Board.from_rows(rows)
        self.assertEqual(spawn_tile(board), (2, 1))
        self.assertEqual(board.value_at(2, 1), SPAWN_VALUE)

    def test_spawn_is_uniform(self):
        """Every empty cell is chosen with the same frequency."""
        rng = np.random.default_rng(11)
        board = Board.from_rows([[2, _, 4, _], [8, 16, 32, 64], [_, 128, 256, 512], [1024, 2048, _, 4096]])
        samples = 4000

        counts = Counter(spawn_tile(board.copy(), rng=rng) for _sample in range(samples))

        self.assertEqual(set(counts), {(0, 1), (0, 3), (2, 0), (3, 2)})
        for count in counts.values():
            # ##>: Expected 1000 per cell, allow a wide tolerance.
            self.assertAlmostEqual(count / samples, 0.25, delta=0.04)


class TestFillCells(TestCase):
    """Test the placement of several tiles."""

    def test_fill_seed_reproducibility(self):
        """Same seed produces identical boards."""
        first, second = Board(), Board()
        fill_cells(first, number_tile=2, seed=42)
        fill_cells(second, number_tile=2, seed=42)
        self.assertEqual(first, second)

    def test_fill_returns_cells(self):
        """The new tiles are reported."""
        board = Board()
        cells = fill_cells(board, number_tile=3, seed=1)
        self.assertEqual(len(set(cells)), 3)
        self.assertEqual(sorted(cells), sorted(set((r, c) for r, c in board.coords() if board.is_occupied(r, c))))

    def test_fill_stops_when_blocked(self):
        """Asking for more tiles than possible fills what it can."""
        board = Board()
        cells = fill_cells(board, number_tile=20, seed=5)
        self.assertEqual(len(cells), 16)
        self.assertEqual(board.count_tiles(), 16)


if __name__ == '__main__':
    main()
