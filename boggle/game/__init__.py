"""Game rules and session state for boggle."""

from .scoring import (
    ScoringTier,
    ScoringRules,
    calculate_points,
    boggle_4x4_rules,
    big_boggle_5x5_rules,
    super_big_boggle_6x6_rules,
)
from .variants import GameVariant, VariantConfig, VARIANT_CONFIGS
from .board import TILE_DISTRIBUTION, DIGRAPH_FACES, generate_board, letter_pool
from .models import RejectReason, Accepted, Rejected, Outcome, GameConfig
from .session import GameSession

__all__ = [
    "ScoringTier",
    "ScoringRules",
    "calculate_points",
    "boggle_4x4_rules",
    "big_boggle_5x5_rules",
    "super_big_boggle_6x6_rules",
    "GameVariant",
    "VariantConfig",
    "VARIANT_CONFIGS",
    "TILE_DISTRIBUTION",
    "DIGRAPH_FACES",
    "generate_board",
    "letter_pool",
    "RejectReason",
    "Accepted",
    "Rejected",
    "Outcome",
    "GameConfig",
    "GameSession",
]
