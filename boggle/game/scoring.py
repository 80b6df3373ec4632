"""
Tier-based scoring for Boggle variants.

Each variant awards points by word length. A tier applies from its
``min_length`` up to the next tier's ``min_length``; the last tier applies
to every longer word. Super Big Boggle additionally overrides the tiers
with a per-letter formula for very long words.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ScoringTier(BaseModel):
    """Points awarded to words of at least `min_length` letters."""

    model_config = ConfigDict(frozen=True)

    min_length: int = Field(..., ge=3)
    points: int = Field(..., ge=0)


class ScoringRules(BaseModel):
    """
    Ordered scoring tiers plus the optional per-letter formula.

    Attributes:
        tiers: Tiers sorted by strictly ascending min_length
        use_per_letter_scoring: Whether long words score per letter
        per_letter_points: Points per letter when the formula applies
        per_letter_min_length: Word length from which the formula overrides the tiers
    """

    model_config = ConfigDict(frozen=True)

    tiers: Tuple[ScoringTier, ...] = Field(..., min_length=1)
    use_per_letter_scoring: bool = False
    per_letter_points: int = Field(default=2, ge=0)
    per_letter_min_length: int = Field(default=9, ge=3)

    @model_validator(mode="after")
    def _check_tier_order(self) -> "ScoringRules":
        for current, following in zip(self.tiers, self.tiers[1:]):
            if current.min_length >= following.min_length:
                raise ValueError(
                    "Scoring tiers must be sorted by min_length in ascending order. "
                    f"Found tier with min_length={current.min_length} before "
                    f"tier with min_length={following.min_length}"
                )
        return self

    @property
    def min_length(self) -> int:
        """Shortest word length that scores."""
        return self.tiers[0].min_length

    def points(self, word_length: int) -> int:
        return calculate_points(word_length, self)


def calculate_points(word_length: int, rules: ScoringRules) -> int:
    """
    Calculate the points for a word of the given length.

    Args:
        word_length: Number of characters in the submitted word
        rules: The variant's scoring rules

    Returns:
        0 below the first tier; length * per_letter_points when the per-letter
        formula applies; otherwise the points of the highest tier reached.
    """
    if word_length < rules.min_length:
        return 0

    if rules.use_per_letter_scoring and word_length >= rules.per_letter_min_length:
        return word_length * rules.per_letter_points

    points = 0
    for tier in rules.tiers:
        if tier.min_length > word_length:
            break
        points = tier.points
    return points


def _standard_tiers(min_length: int) -> Tuple[ScoringTier, ...]:
    return (ScoringTier(min_length=min_length, points=1),) + tuple(
        ScoringTier(min_length=length, points=points)
        for length, points in ((5, 2), (6, 3), (7, 5), (8, 11))
    )


def boggle_4x4_rules() -> ScoringRules:
    """3-4 letters: 1, 5: 2, 6: 3, 7: 5, 8+: 11."""
    return ScoringRules(tiers=_standard_tiers(3))


def big_boggle_5x5_rules() -> ScoringRules:
    """4 letters: 1, 5: 2, 6: 3, 7: 5, 8+: 11."""
    return ScoringRules(tiers=_standard_tiers(4))


def super_big_boggle_6x6_rules() -> ScoringRules:
    """As Big Boggle up to 8 letters; 9+ letters score 2 points per letter."""
    return ScoringRules(
        tiers=_standard_tiers(4),
        use_per_letter_scoring=True,
        per_letter_points=2,
        per_letter_min_length=9,
    )
