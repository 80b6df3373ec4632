"""Board geometry and word verification for boggle."""

from .models import Tile, TileKind, Position
from .grid import TileGrid, DIRECTIONS, SUPPORTED_SIZES, render_grid
from .path import find_path, path_exists, MIN_WORD_LENGTH
from .data import Dictionary, DEFAULT_WORDS

__all__ = [
    # Models
    "Tile",
    "TileKind",
    "Position",
    # Grid
    "TileGrid",
    "DIRECTIONS",
    "SUPPORTED_SIZES",
    "render_grid",
    # Path search
    "find_path",
    "path_exists",
    "MIN_WORD_LENGTH",
    # Dictionary
    "Dictionary",
    "DEFAULT_WORDS",
]
