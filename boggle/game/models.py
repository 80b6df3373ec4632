"""
Pydantic models for the game layer.

This module contains the submission outcomes and the game configuration.
The session logic itself lives in session.py.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .variants import GameVariant


class RejectReason(str, Enum):
    """Why a submitted word scored nothing. Checked in this order."""
    TOO_SHORT = "TOO_SHORT"
    ALREADY_FOUND = "ALREADY_FOUND"
    NOT_IN_DICTIONARY = "NOT_IN_DICTIONARY"
    NOT_ON_BOARD = "NOT_ON_BOARD"


class Accepted(BaseModel):
    """A valid new word and the points it earned."""
    model_config = ConfigDict(frozen=True)

    status: Literal["ACCEPTED"] = "ACCEPTED"
    word: str
    points: int = Field(..., ge=0)
    total_score: int = Field(..., ge=0)

    @property
    def accepted(self) -> bool:
        return True

    @property
    def message(self) -> str:
        return f"Great! '{self.word}' is worth {self.points} points. Total score: {self.total_score}"


class Rejected(BaseModel):
    """A submission that scored nothing."""
    model_config = ConfigDict(frozen=True)

    status: Literal["REJECTED"] = "REJECTED"
    word: str
    reason: RejectReason

    @property
    def accepted(self) -> bool:
        return False

    @property
    def message(self) -> str:
        if self.reason == RejectReason.TOO_SHORT:
            return "Word must be at least 3 letters long!"
        if self.reason == RejectReason.ALREADY_FOUND:
            return f"You already found '{self.word}'!"
        if self.reason == RejectReason.NOT_IN_DICTIONARY:
            return f"'{self.word}' is not in the dictionary!"
        return f"'{self.word}' cannot be formed on the board!"


Outcome = Annotated[Union[Accepted, Rejected], Field(discriminator="status")]


class GameConfig(BaseModel):
    """Configuration for a single game."""
    model_config = ConfigDict(extra='forbid')

    variant: GameVariant = GameVariant.BOGGLE_4X4
    seed: Optional[int] = None
    dictionary_path: Optional[str] = None

    @field_validator("variant", mode="before")
    @classmethod
    def _parse_variant(cls, value):
        return GameVariant.parse(value)
