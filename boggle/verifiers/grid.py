"""Tile grid and rendering utilities."""

from typing import Iterator, List, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, model_validator

from .models import Position, Tile


SUPPORTED_SIZES = (4, 5, 6)

# 8-connectivity, row-major order
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


class TileGrid(BaseModel):
    """
    Square NxN board of tiles, indexed ``[row][col]``.

    The grid is frozen: every cell holds exactly one tile for the
    lifetime of the board.
    """

    model_config = ConfigDict(frozen=True)

    rows: Tuple[Tuple[Tile, ...], ...]

    @model_validator(mode="after")
    def _check_shape(self) -> "TileGrid":
        size = len(self.rows)
        if size not in SUPPORTED_SIZES:
            raise ValueError(f"Grid size must be one of {SUPPORTED_SIZES}, got {size}")
        for i, row in enumerate(self.rows):
            if len(row) != size:
                raise ValueError(f"Row {i} has {len(row)} tiles, expected {size}")
        return self

    @classmethod
    def from_rows(cls, rows: Sequence[Union[str, Sequence[str]]]) -> "TileGrid":
        """
        Build a grid from face text.

        Each row is either a string of single letters (``"CAT."``, where
        ``.`` or ``#`` marks a blank) or a list of faces such as
        ``["QU", "E", "S", "T"]``.
        """
        return cls(rows=tuple(
            tuple(Tile.parse(face) for face in row)
            for row in rows
        ))

    @property
    def size(self) -> int:
        return len(self.rows)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def tile(self, row: int, col: int) -> Tile:
        """Tile at (row, col). Raises IndexError outside the grid."""
        if not self.in_bounds(row, col):
            raise IndexError(f"Position ({row}, {col}) out of bounds for {self.size}x{self.size} grid")
        return self.rows[row][col]

    def display_text(self, row: int, col: int) -> str:
        return self.tile(row, col).display_text

    def positions(self) -> Iterator[Position]:
        """All cells in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                yield Position(row, col)

    def neighbors(self, position: Position) -> List[Position]:
        """In-bounds cells adjacent to `position`."""
        return [
            Position(position.row + dr, position.col + dc)
            for dr, dc in DIRECTIONS
            if self.in_bounds(position.row + dr, position.col + dc)
        ]

    def letters(self) -> str:
        """All display texts as one flat string (for debugging)."""
        return "".join(self.display_text(r, c) for r, c in self.positions())

    def render(self, title: Optional[str] = None) -> str:
        return render_grid(self, title)


def render_grid(grid: TileGrid, title: Optional[str] = None) -> str:
    """Render the grid to a bordered string."""
    rule = "=" * (grid.size * 4 + 1)
    lines = []
    if title:
        lines.append(title)
    lines.append(rule)
    for row in grid.rows:
        cells = "".join(f"{tile.display_text:<2}  " for tile in row)
        lines.append(f"| {cells.rstrip()} |")
    lines.append(rule)
    return "\n".join(lines)
