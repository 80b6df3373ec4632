import logging
import random
from typing import Dict, FrozenSet, List, Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .board import generate_board
from .models import Accepted, Outcome, Rejected, RejectReason
from .scoring import ScoringRules, calculate_points
from .variants import GameVariant
from ..verifiers.data import Dictionary
from ..verifiers.grid import TileGrid
from ..verifiers.path import MIN_WORD_LENGTH, path_exists

log = logging.getLogger("boggle")


class GameSession(BaseModel):
    """
    One game of Boggle on a fixed board.

    Processes word submissions, tracks the words found and accumulates
    the score. A session is driven by a single caller; submissions are
    not synchronized.

    Attributes:
        variant: The board variant, fixed at creation
        board: The board, generated once at creation
        dictionary: Word lookup used to validate submissions
        found_words: Normalized words accepted so far
        score: Total points so far
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    variant: GameVariant = Field(frozen=True)
    board: TileGrid = Field(frozen=True)
    dictionary: Dictionary = Field(default_factory=Dictionary, frozen=True)
    _found_words: Set[str] = PrivateAttr(default_factory=set)
    _score: int = PrivateAttr(default=0)

    @classmethod
    def create(
        cls,
        variant: GameVariant = GameVariant.BOGGLE_4X4,
        dictionary: Optional[Dictionary] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        board: Optional[TileGrid] = None,
    ) -> "GameSession":
        """
        Factory method to start a new game.

        Args:
            variant: Board variant to play
            dictionary: Word lookup (defaults to the built-in word list)
            seed: Optional random seed for a reproducible board
            rng: Optional random source (takes precedence over seed)
            board: Optional prebuilt board, used instead of generating one

        Returns:
            A new GameSession with an empty word list and zero score

        Raises:
            ValueError: If a supplied board does not match the variant's size
        """
        variant = GameVariant.parse(variant)
        if board is None:
            board = generate_board(variant, rng=rng, seed=seed)
        elif board.size != variant.grid_size:
            raise ValueError(
                f"Board is {board.size}x{board.size} but {variant.display_name} "
                f"needs {variant.grid_size}x{variant.grid_size}"
            )

        return cls(
            variant=variant,
            board=board,
            dictionary=dictionary if dictionary is not None else Dictionary(),
        )

    @property
    def found_words(self) -> FrozenSet[str]:
        """Snapshot of the words accepted so far."""
        return frozenset(self._found_words)

    @property
    def score(self) -> int:
        return self._score

    @property
    def rules(self) -> ScoringRules:
        return self.variant.scoring

    def submit(self, raw_word: str) -> Outcome:
        """
        Submit a word.

        Checks run in a fixed order and the first failure decides the
        rejection: length, duplicate, dictionary, then board.

        Args:
            raw_word: The word as typed

        Returns:
            Accepted with the points earned and new total, or Rejected with a reason
        """
        word = raw_word.strip().upper()
        outcome = self._check(word)
        log.debug("Submitted %r: %s", word, outcome.message)
        return outcome

    def _check(self, word: str) -> Outcome:
        if len(word) < MIN_WORD_LENGTH:
            return Rejected(word=word, reason=RejectReason.TOO_SHORT)

        if word in self._found_words:
            return Rejected(word=word, reason=RejectReason.ALREADY_FOUND)

        if not self.dictionary.is_valid(word):
            return Rejected(word=word, reason=RejectReason.NOT_IN_DICTIONARY)

        if not path_exists(self.board, word):
            return Rejected(word=word, reason=RejectReason.NOT_ON_BOARD)

        points = calculate_points(len(word), self.rules)
        self._found_words.add(word)
        self._score += points
        return Accepted(word=word, points=points, total_score=self._score)

    def word_points(self) -> List[Tuple[str, int]]:
        """Found words in alphabetical order with the points each earned."""
        return [
            (word, calculate_points(len(word), self.rules))
            for word in sorted(self._found_words)
        ]

    def render_board(self) -> str:
        return self.board.render(title=f"{self.variant.display_name} ({self.variant.value})")

    def get_state(self) -> Dict:
        """
        Get the current session state as a dictionary.

        Returns:
            Dictionary containing session state
        """
        return {
            "variant": self.variant.value,
            "grid_size": self.board.size,
            "board": [
                [tile.display_text for tile in row]
                for row in self.board.rows
            ],
            "found_words": sorted(self.found_words),
            "words_found": len(self.found_words),
            "score": self.score,
        }
