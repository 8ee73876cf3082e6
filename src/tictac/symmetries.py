"""
D4 symmetries of a square board (8 transforms).

Rotations: 0°, 90°, 180°, 270°
Reflections: horizontal, vertical, main diagonal, anti-diagonal
"""

from functools import lru_cache
from typing import List, Tuple

import numpy as np

NUM_SYMMETRIES = 8


@lru_cache(maxsize=None)
def _build_symmetry_maps(grid_size: int) -> Tuple[np.ndarray, ...]:
    """Build 8 permutation maps: transformed[i] = board[map[i]]."""
    grid = np.arange(grid_size * grid_size).reshape(grid_size, grid_size)
    views = (
        grid,                       # identity
        np.rot90(grid, 1),          # rotate 90
        np.rot90(grid, 2),          # rotate 180
        np.rot90(grid, 3),          # rotate 270
        np.fliplr(grid),            # reflect horizontal
        np.flipud(grid),            # reflect vertical
        grid.T,                     # reflect main diag
        np.rot90(grid, 2).T,        # reflect anti-diag
    )
    maps = tuple(np.ascontiguousarray(v).reshape(-1) for v in views)
    for mp in maps:
        mp.setflags(write=False)
    return maps


def symmetry_maps(grid_size: int) -> List[np.ndarray]:
    """Return the 8 index permutations for a grid_size x grid_size board."""
    return list(_build_symmetry_maps(grid_size))


def apply_symmetry_board(board: List[int], grid_size: int, sym_id: int) -> List[int]:
    """
    Apply symmetry transform to board.

    Args:
        board: flat board values
        grid_size: board width
        sym_id: symmetry ID (0-7)

    Returns:
        Transformed board
    """
    mp = _build_symmetry_maps(grid_size)[sym_id]
    return np.asarray(board)[mp].tolist()


def get_all_symmetries(board: List[int], grid_size: int) -> List[List[int]]:
    """Return all 8 symmetric versions of a board."""
    return [apply_symmetry_board(board, grid_size, k) for k in range(NUM_SYMMETRIES)]


def canonical_board(board: List[int], grid_size: int) -> Tuple[int, ...]:
    """Smallest symmetric version of the board, as a hashable tuple."""
    return min(tuple(b) for b in get_all_symmetries(board, grid_size))
