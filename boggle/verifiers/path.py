"""
Path search for validating a word against the board.

A word is on the board when it can be traced through a chain of distinct,
8-directionally adjacent cells whose tiles spell it in order. A digraph
tile consumes its two characters in one step; a blank tile can never be
entered. No cell may be used twice within one path.
"""

from typing import List, Optional

from .grid import DIRECTIONS, TileGrid
from .models import Position


MIN_WORD_LENGTH = 3


def find_path(grid: TileGrid, word: str) -> Optional[List[Position]]:
    """
    Find one path that spells `word` on the grid.

    Args:
        grid: The board to search
        word: Uppercase, trimmed word

    Returns:
        The cells of the first path found, or None if the word cannot be traced.
        Words shorter than three characters are never on the board.
    """
    if len(word) < MIN_WORD_LENGTH:
        return None

    # One visited grid, reset by backtracking between starting cells
    visited = [[False] * grid.size for _ in range(grid.size)]
    path: List[Position] = []

    for row, col in grid.positions():
        if _match(grid, row, col, word, 0, visited, path):
            return path
    return None


def path_exists(grid: TileGrid, word: str) -> bool:
    """True if `word` can be traced on the grid."""
    return find_path(grid, word) is not None


def _match(
    grid: TileGrid,
    row: int,
    col: int,
    word: str,
    index: int,
    visited: List[List[bool]],
    path: List[Position],
) -> bool:
    """Depth-first match of word[index:] starting at (row, col)."""
    if index == len(word):
        return True

    if not grid.in_bounds(row, col) or visited[row][col]:
        return False

    tile = grid.tile(row, col)
    consumed = tile.consumes(word, index)
    if not consumed:
        return False

    visited[row][col] = True
    path.append(Position(row, col))

    found = any(
        _match(grid, row + dr, col + dc, word, index + consumed, visited, path)
        for dr, dc in DIRECTIONS
    )

    visited[row][col] = False
    if not found:
        path.pop()
    return found
