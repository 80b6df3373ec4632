"""Data models for board tiles and positions."""

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, model_validator


BLANK_MARKERS = ("", ".", "#")


class TileKind(str, Enum):
    """The three kinds of die face a cell can show."""
    LETTER = "letter"
    DIGRAPH = "digraph"
    BLANK = "blank"


class Position(NamedTuple):
    """A (row, col) cell on the grid."""
    row: int
    col: int

    def is_adjacent(self, other: "Position") -> bool:
        """True if the cells touch horizontally, vertically or diagonally."""
        if self == other:
            return False
        return abs(self.row - other.row) <= 1 and abs(self.col - other.col) <= 1


class Tile(BaseModel):
    """
    A single die face on the board.

    Letters match one character of a word, digraphs (e.g. "QU") match their
    two characters as one indivisible step, and blanks never match anything
    and cannot be entered by a path.
    """

    model_config = ConfigDict(frozen=True)

    kind: TileKind
    text: str = ""

    @model_validator(mode="after")
    def _check_text(self) -> "Tile":
        if self.kind == TileKind.BLANK:
            if self.text:
                raise ValueError("Blank tiles carry no text")
        elif not self.text.isalpha() or self.text != self.text.upper():
            raise ValueError(f"Tile text must be uppercase letters, got {self.text!r}")
        elif self.kind == TileKind.LETTER and len(self.text) != 1:
            raise ValueError(f"Letter tiles hold one character, got {self.text!r}")
        elif self.kind == TileKind.DIGRAPH and len(self.text) != 2:
            raise ValueError(f"Digraph tiles hold two characters, got {self.text!r}")
        return self

    @classmethod
    def letter(cls, char: str) -> "Tile":
        return cls(kind=TileKind.LETTER, text=char.upper())

    @classmethod
    def digraph(cls, text: str) -> "Tile":
        return cls(kind=TileKind.DIGRAPH, text=text.upper())

    @classmethod
    def blank(cls) -> "Tile":
        return cls(kind=TileKind.BLANK)

    @classmethod
    def parse(cls, face: str) -> "Tile":
        """Build a tile from its face text: blank marker, one letter or a digraph."""
        face = face.strip()
        if face in BLANK_MARKERS:
            return cls.blank()
        if len(face) == 1:
            return cls.letter(face)
        return cls.digraph(face)

    @property
    def is_blank(self) -> bool:
        return self.kind == TileKind.BLANK

    @property
    def display_text(self) -> str:
        """Text shown for this cell when the board is rendered."""
        if self.kind == TileKind.BLANK:
            return "."
        if self.kind == TileKind.DIGRAPH:
            return self.text.capitalize()
        return self.text

    def consumes(self, word: str, index: int) -> int:
        """
        Number of characters of `word` this tile matches starting at `index`.

        Returns 0 when the tile cannot be used at that point of the word.
        """
        if self.kind == TileKind.BLANK or index >= len(word):
            return 0
        width = len(self.text)
        if word[index:index + width].upper() == self.text:
            return width
        return 0
