"""
Command-line driver for a single Boggle game.

Usage:
    python -m boggle.main --variant 5x5 --seed 42 --words QUEST THEN HERE
    python -m boggle.main config.yaml < words.txt
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

import yaml

from .game import GameConfig, GameSession
from .verifiers import Dictionary


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def build_session(config: GameConfig) -> GameSession:
    """Create a session from configuration, loading the word list if one is given."""
    if config.dictionary_path:
        dictionary = Dictionary.from_file(config.dictionary_path)
    else:
        dictionary = Dictionary()
    return GameSession.create(variant=config.variant, dictionary=dictionary, seed=config.seed)


def play(session: GameSession, words: Iterable[str]) -> None:
    """Submit each word and print its outcome."""
    for word in words:
        if not word.strip():
            continue
        outcome = session.submit(word)
        print(outcome.message)


def print_summary(session: GameSession) -> None:
    print()
    print("=== Game Summary ===")
    print(f"Mode: {session.variant.display_name} ({session.variant.value})")
    print(f"Words found: {len(session.found_words)}")
    for word, points in session.word_points():
        print(f"  - {word} ({points} pts)")
    print(f"Total score: {session.score}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Play a game of Boggle from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  variant: 6x6
  seed: 42
  dictionary_path: words.txt

Words are read from the command line, or one per line from stdin.
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--variant",
        help="Board variant: 4x4, 5x5 or 6x6 (overrides config)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for a reproducible board (overrides config)"
    )
    parser.add_argument(
        "--dictionary", "-d",
        help="Path to a word list file (overrides config)"
    )
    parser.add_argument(
        "--words", "-w",
        nargs="*",
        default=None,
        help="Words to submit (default: read from stdin)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug-level logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else GameConfig()
        overrides = {
            key: value for key, value in (
                ("variant", args.variant),
                ("seed", args.seed),
                ("dictionary_path", args.dictionary),
            )
            if value is not None
        }
        if overrides:
            config = GameConfig(**{**config.model_dump(), **overrides})
        session = build_session(config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    print(session.render_board())

    words = args.words if args.words is not None else sys.stdin
    try:
        play(session, words)
    except KeyboardInterrupt:
        print("\nGame interrupted by user")

    print_summary(session)
    return 0


if __name__ == "__main__":
    sys.exit(main())
