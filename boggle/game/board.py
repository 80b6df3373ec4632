import logging
import random
from typing import Dict, List, Optional

from .variants import GameVariant
from ..verifiers.grid import TileGrid
from ..verifiers.models import Tile

log = logging.getLogger("boggle")


# Letter frequencies of the standard Boggle dice (100 faces)
TILE_DISTRIBUTION: Dict[str, int] = {
    "A": 8, "B": 2, "C": 2, "D": 4, "E": 12, "F": 2, "G": 3,
    "H": 2, "I": 9, "J": 1, "K": 1, "L": 4, "M": 2, "N": 6,
    "O": 8, "P": 2, "Q": 1, "R": 6, "S": 4, "T": 6, "U": 4,
    "V": 2, "W": 2, "X": 1, "Y": 2, "Z": 1
}

# Faces of the digraph die used by Big Boggle and Super Big Boggle
DIGRAPH_FACES = ("AN", "ER", "HE", "IN", "QU", "TH")


def letter_pool() -> List[str]:
    """Return every letter face as a flat list (unshuffled)."""
    pool = []
    for letter, count in TILE_DISTRIBUTION.items():
        pool.extend([letter] * count)
    return pool


def generate_board(
    variant: GameVariant,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> TileGrid:
    """
    Generate a random board for a variant.

    Digraph and blank tiles are placed on distinct random cells; every
    other cell is drawn independently from the weighted letter pool.

    Args:
        variant: The variant whose size and special dice to use
        rng: Random source (takes precedence over seed)
        seed: Optional seed for a reproducible board

    Returns:
        A new TileGrid
    """
    config = variant.config
    rng = rng or random.Random(seed)
    size = config.grid_size
    pool = letter_pool()

    special_cells = rng.sample(range(config.dice_count), config.digraph_tiles + config.blank_tiles)
    specials: Dict[int, Tile] = {}
    for i, cell in enumerate(special_cells):
        if i < config.digraph_tiles:
            specials[cell] = Tile.digraph(rng.choice(DIGRAPH_FACES))
        else:
            specials[cell] = Tile.blank()

    rows = []
    for row in range(size):
        tiles = []
        for col in range(size):
            cell = row * size + col
            tiles.append(specials[cell] if cell in specials else Tile.letter(rng.choice(pool)))
        rows.append(tuple(tiles))

    grid = TileGrid(rows=tuple(rows))
    log.debug("Generated %s board: %s", variant.value, grid.letters())
    return grid
