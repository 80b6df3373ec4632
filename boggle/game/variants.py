"""
The three supported Boggle variants and their per-variant constants.

- Boggle (4x4): 16 dice, 3-letter minimum
- Big Boggle (5x5): 25 dice, one digraph die
- Super Big Boggle (6x6): 36 dice, one digraph die and one blank die,
  per-letter scoring for 9+ letter words
"""

from enum import Enum
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .scoring import (
    ScoringRules,
    big_boggle_5x5_rules,
    boggle_4x4_rules,
    super_big_boggle_6x6_rules,
)
from ..verifiers.grid import SUPPORTED_SIZES


class VariantConfig(BaseModel):
    """Board size, special dice and scoring for one variant."""

    model_config = ConfigDict(frozen=True)

    display_name: str
    grid_size: int
    digraph_tiles: int = Field(default=0, ge=0)
    blank_tiles: int = Field(default=0, ge=0)
    scoring: ScoringRules

    @model_validator(mode="after")
    def _check_board(self) -> "VariantConfig":
        if self.grid_size not in SUPPORTED_SIZES:
            raise ValueError(f"Grid size must be one of {SUPPORTED_SIZES}, got {self.grid_size}")
        if self.digraph_tiles + self.blank_tiles > self.dice_count:
            raise ValueError(
                f"{self.digraph_tiles} digraph and {self.blank_tiles} blank tiles "
                f"do not fit on a {self.grid_size}x{self.grid_size} board"
            )
        return self

    @property
    def dice_count(self) -> int:
        return self.grid_size * self.grid_size


class GameVariant(str, Enum):
    """Closed set of board kinds; the value is the board dimension."""
    BOGGLE_4X4 = "4x4"
    BIG_BOGGLE_5X5 = "5x5"
    SUPER_BIG_BOGGLE_6X6 = "6x6"

    @property
    def config(self) -> VariantConfig:
        return VARIANT_CONFIGS[self]

    @property
    def display_name(self) -> str:
        return self.config.display_name

    @property
    def grid_size(self) -> int:
        return self.config.grid_size

    @property
    def scoring(self) -> ScoringRules:
        return self.config.scoring

    @classmethod
    def parse(cls, value: "str | GameVariant") -> "GameVariant":
        """
        Resolve a variant from its value ("5x5"), enum name or mode alias ("big").

        Raises:
            ValueError: If the value names no variant
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for variant in cls:
            if key in (variant.value, variant.name.lower()):
                return variant
        if key in _ALIASES:
            return _ALIASES[key]
        raise ValueError(
            f"Unknown variant '{value}'. Choose one of: {', '.join(v.value for v in cls)}"
        )


_ALIASES: Dict[str, GameVariant] = {
    "classic": GameVariant.BOGGLE_4X4,
    "boggle": GameVariant.BOGGLE_4X4,
    "big": GameVariant.BIG_BOGGLE_5X5,
    "big_boggle": GameVariant.BIG_BOGGLE_5X5,
    "super": GameVariant.SUPER_BIG_BOGGLE_6X6,
    "super_big_boggle": GameVariant.SUPER_BIG_BOGGLE_6X6,
}


VARIANT_CONFIGS: Dict[GameVariant, VariantConfig] = {
    GameVariant.BOGGLE_4X4: VariantConfig(
        display_name="Boggle",
        grid_size=4,
        scoring=boggle_4x4_rules(),
    ),
    GameVariant.BIG_BOGGLE_5X5: VariantConfig(
        display_name="Big Boggle",
        grid_size=5,
        digraph_tiles=1,
        scoring=big_boggle_5x5_rules(),
    ),
    GameVariant.SUPER_BIG_BOGGLE_6X6: VariantConfig(
        display_name="Super Big Boggle",
        grid_size=6,
        digraph_tiles=1,
        blank_tiles=1,
        scoring=super_big_boggle_6x6_rules(),
    ),
}
