"""Dictionary with a built-in sample word list and word-list file loading."""

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Optional

from ..path import MIN_WORD_LENGTH

log = logging.getLogger("boggle")

# Small sample list; load a real word list with Dictionary.from_file
DEFAULT_WORDS: FrozenSet[str] = frozenset({
    "THE", "AND", "FOR", "ARE", "BUT", "NOT", "YOU", "ALL", "CAN", "HER",
    "WAS", "ONE", "OUR", "OUT", "DAY", "GET", "HAS", "HIM", "HIS", "HOW",
    "MAN", "NEW", "NOW", "OLD", "SEE", "TWO", "WAY", "WHO", "BOY", "DID",
    "ITS", "LET", "PUT", "SAY", "SHE", "TOO", "USE", "CAR", "CAT", "DOG",
    "WORD", "WORK", "WORLD", "YEAR", "GAME", "GOOD", "GREAT", "HAND", "HIGH",
    "LIFE", "LONG", "MAKE", "MANY", "OVER", "PART", "SAME", "SUCH", "TAKE",
    "THAN", "THAT", "THEM", "THEN", "THEY", "THIS", "TIME", "VERY", "WANT",
    "WELL", "WENT", "WERE", "WHAT", "WHEN", "WITH", "BACK", "BEEN", "BEFORE",
    "BEST", "BOTH", "CAME", "CALL", "COME", "COULD", "EACH", "FIND", "FIRST",
    "FROM", "GIVE", "HAVE", "HERE", "INTO", "JUST", "KNOW", "LAST", "LIKE",
    "LOOK", "MADE", "MORE", "MOST", "MUCH", "MUST", "NAME", "NEVER",
    "NEXT", "ONLY", "OTHER", "PEOPLE", "PLACE", "RIGHT", "SAID",
    "SOME", "STILL", "TELL", "THEIR", "THERE",
    "THESE", "THING", "THINK", "THREE", "THROUGH", "UNDER",
    "WATER", "WHERE", "WHICH", "WHILE",
    "WILL", "WOULD", "WRITE", "YOUR", "ABOUT", "AFTER", "AGAIN",
    "ALSO", "ANOTHER", "AROUND", "BECAUSE", "BETWEEN",
    "DIFFERENT", "EVERY", "FOUND", "HOUSE", "LARGE", "LITTLE",
    "NUMBER", "POINT", "SCHOOL", "SHOULD",
    "SMALL", "THOSE", "UNTIL", "YEARS", "BOGGLE", "BOARD", "LETTER", "QUEST", "SUPER",
})


class Dictionary:
    """
    Case-insensitive word lookup.

    Words shorter than three letters are never valid, whatever the list holds.
    """

    def __init__(self, words: Optional[Iterable[str]] = None):
        source = DEFAULT_WORDS if words is None else words
        self.words: FrozenSet[str] = frozenset(
            w for w in (word.strip().upper() for word in source)
            if len(w) >= MIN_WORD_LENGTH and w.isalpha()
        )

    @classmethod
    def from_file(cls, path: str | Path) -> "Dictionary":
        """
        Load a newline-separated word list.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Word list not found: {path}")

        with open(path, encoding="utf-8") as f:
            dictionary = cls(line for line in f if line.strip())

        log.info("Loaded %s words from %s", f"{len(dictionary):,}", path)
        return dictionary

    def is_valid(self, word: str) -> bool:
        """True if `word` is a known word of at least three letters."""
        normalized = word.strip().upper()
        return len(normalized) >= MIN_WORD_LENGTH and normalized in self.words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_valid(word)

    def __len__(self) -> int:
        return len(self.words)
