"""Test word submission through a game session."""

import pytest

from boggle.game import Accepted, GameSession, GameVariant, Rejected, RejectReason
from boggle.verifiers import Dictionary, TileGrid


def cat_board() -> TileGrid:
    return TileGrid.from_rows([
        "CATS",
        "XOGX",
        "XDXX",
        "XXXX",
    ])


class RecordingDictionary(Dictionary):
    """Dictionary that remembers every word it was asked about."""

    def __init__(self, words):
        super().__init__(words)
        self.lookups = []

    def is_valid(self, word: str) -> bool:
        self.lookups.append(word)
        return super().is_valid(word)


def make_session(**kwargs) -> GameSession:
    return GameSession.create(variant=GameVariant.BOGGLE_4X4, board=cat_board(), **kwargs)


class TestEndToEnd:
    """A short game on a fixed 4x4 board."""

    def test_cat_scenario(self):
        """Too short, accepted, then already found."""
        session = make_session()

        outcome = session.submit("ca")
        assert isinstance(outcome, Rejected)
        assert outcome.reason == RejectReason.TOO_SHORT
        assert session.score == 0

        outcome = session.submit("cat")
        assert isinstance(outcome, Accepted)
        assert outcome.word == "CAT"
        assert outcome.points == 1
        assert outcome.total_score == 1
        assert session.score == 1

        outcome = session.submit("cat")
        assert isinstance(outcome, Rejected)
        assert outcome.reason == RejectReason.ALREADY_FOUND
        assert session.score == 1
        assert session.found_words == {"CAT"}

    def test_score_accumulates(self):
        """Each accepted word adds to the total."""
        session = make_session()
        session.submit("cat")
        outcome = session.submit("dog")
        assert isinstance(outcome, Accepted)
        assert outcome.total_score == 2
        assert session.found_words == {"CAT", "DOG"}

    def test_normalizes_input(self):
        """Surrounding whitespace and case are ignored."""
        session = make_session()
        outcome = session.submit("  cAt \n")
        assert isinstance(outcome, Accepted)
        assert outcome.word == "CAT"
        assert isinstance(session.submit("CAT"), Rejected)


class TestRejections:
    """Each check, and their order."""

    def test_not_in_dictionary(self):
        """A traceable non-word is rejected by the dictionary."""
        outcome = make_session().submit("tac")
        assert outcome.reason == RejectReason.NOT_IN_DICTIONARY

    def test_not_on_board(self):
        """A real word absent from the board."""
        outcome = make_session().submit("quest")
        assert outcome.reason == RejectReason.NOT_ON_BOARD

    def test_too_short_checked_first(self):
        """A two-letter non-word is reported as too short."""
        outcome = make_session().submit("zz")
        assert outcome.reason == RejectReason.TOO_SHORT

    def test_blank_input(self):
        """Whitespace only is too short."""
        outcome = make_session().submit("   ")
        assert outcome.reason == RejectReason.TOO_SHORT

    def test_duplicate_checked_before_dictionary(self):
        """A repeated word is rejected without consulting the dictionary."""
        dictionary = RecordingDictionary(["CAT"])
        session = make_session(dictionary=dictionary)
        session.submit("cat")
        assert dictionary.lookups == ["CAT"]

        assert session.submit("cat").reason == RejectReason.ALREADY_FOUND
        assert dictionary.lookups == ["CAT"]

    def test_dictionary_checked_before_board(self):
        """A non-word that is also off the board fails the dictionary check."""
        outcome = make_session().submit("zzz")
        assert outcome.reason == RejectReason.NOT_IN_DICTIONARY

    def test_rejections_leave_state_unchanged(self):
        """Rejected words are not recorded and score nothing."""
        session = make_session()
        for word in ("ca", "tac", "quest"):
            session.submit(word)
        assert session.score == 0
        assert session.found_words == set()

    def test_custom_dictionary(self):
        """Sessions use the supplied word list."""
        session = make_session(dictionary=Dictionary(["TAC"]))
        assert isinstance(session.submit("tac"), Accepted)
        assert session.submit("cat").reason == RejectReason.NOT_IN_DICTIONARY


class TestMessages:
    """Outcome messages shown to the player."""

    def test_accepted_message(self):
        outcome = make_session().submit("cat")
        assert outcome.message == "Great! 'CAT' is worth 1 points. Total score: 1"

    def test_rejected_messages(self):
        session = make_session()
        assert session.submit("ca").message == "Word must be at least 3 letters long!"
        assert session.submit("tac").message == "'TAC' is not in the dictionary!"
        assert session.submit("quest").message == "'QUEST' cannot be formed on the board!"
        session.submit("cat")
        assert session.submit("cat").message == "You already found 'CAT'!"


class TestVariantScoring:
    """Scoring follows the session's variant."""

    def test_three_letters_on_5x5(self):
        """A 3-letter word is accepted but earns nothing on Big Boggle."""
        board = TileGrid.from_rows([
            "CATXX",
            "XXXXX",
            "XXXXX",
            "XXXXX",
            ["X", "X", "X", "X", "QU"],
        ])
        session = GameSession.create(variant=GameVariant.BIG_BOGGLE_5X5, board=board)
        outcome = session.submit("cat")
        assert isinstance(outcome, Accepted)
        assert outcome.points == 0
        assert session.found_words == {"CAT"}

    def test_per_letter_on_6x6(self):
        """A 9-letter word scores 18 on Super Big Boggle."""
        board = TileGrid.from_rows([
            "DIFFER",
            "XXXTNE",
            "XXXXXX",
            "XX.XXX",
            "XXXXXX",
            ["X", "X", "X", "X", "X", "TH"],
        ])
        session = GameSession.create(variant=GameVariant.SUPER_BIG_BOGGLE_6X6, board=board)
        outcome = session.submit("different")
        assert isinstance(outcome, Accepted)
        assert outcome.points == 18
        assert session.score == 18

    def test_length_counts_characters_not_cells(self):
        """A digraph tile still counts as two letters for scoring."""
        board = TileGrid.from_rows([
            ["QU", "E", "S", "T", "X"],
            "XXXXX",
            "XXXXX",
            "XXXXX",
            "XXXXX",
        ])
        session = GameSession.create(variant=GameVariant.BIG_BOGGLE_5X5, board=board)
        outcome = session.submit("quest")
        assert outcome.points == 2


class TestCreation:
    """Session construction."""

    def test_generated_board_matches_variant(self):
        """Without a board one is generated at the variant's size."""
        for variant in GameVariant:
            session = GameSession.create(variant=variant, seed=1)
            assert session.board.size == variant.grid_size
            assert session.score == 0
            assert session.found_words == set()

    def test_seeded_sessions_share_board(self):
        """The same seed gives the same board."""
        first = GameSession.create(variant=GameVariant.BIG_BOGGLE_5X5, seed=9)
        second = GameSession.create(variant=GameVariant.BIG_BOGGLE_5X5, seed=9)
        assert first.board == second.board

    def test_variant_from_string(self):
        """Variants may be given by value."""
        session = GameSession.create(variant="6x6", seed=2)
        assert session.variant is GameVariant.SUPER_BIG_BOGGLE_6X6

    def test_board_size_mismatch(self):
        """A supplied board must fit the variant."""
        with pytest.raises(ValueError):
            GameSession.create(variant=GameVariant.BIG_BOGGLE_5X5, board=cat_board())


class TestState:
    """Statistics and state snapshots."""

    def test_word_points(self):
        """Found words are listed alphabetically with their points."""
        session = make_session()
        session.submit("dog")
        session.submit("cat")
        assert session.word_points() == [("CAT", 1), ("DOG", 1)]

    def test_get_state(self):
        """State snapshot reports board, words and score."""
        session = make_session()
        session.submit("cat")
        state = session.get_state()
        assert state["variant"] == "4x4"
        assert state["grid_size"] == 4
        assert state["board"][0] == ["C", "A", "T", "S"]
        assert state["found_words"] == ["CAT"]
        assert state["words_found"] == 1
        assert state["score"] == 1

    def test_render_board(self):
        """Rendered board carries the variant name."""
        rendered = make_session().render_board()
        assert rendered.splitlines()[0] == "Boggle (4x4)"
        assert "| C   A   T   S |" in rendered


class TestEncapsulation:
    """Session state only changes through submit."""

    def test_found_words_is_a_snapshot(self):
        """Clearing the returned words does not let a duplicate through."""
        session = make_session()
        session.submit("cat")
        found = session.found_words
        assert isinstance(found, frozenset)
        with pytest.raises(AttributeError):
            found.clear()

        assert session.submit("cat").reason == RejectReason.ALREADY_FOUND
        assert session.score == 1

    def test_score_is_read_only(self):
        """The score cannot be assigned from outside."""
        session = make_session()
        session.submit("cat")
        with pytest.raises((AttributeError, ValueError)):
            session.score = -7
        assert session.score == 1

    def test_variant_board_and_dictionary_are_frozen(self):
        """The session's fixed parts cannot be replaced."""
        session = make_session()
        with pytest.raises(ValueError):
            session.variant = GameVariant.BIG_BOGGLE_5X5
        with pytest.raises(ValueError):
            session.board = cat_board()
        with pytest.raises(ValueError):
            session.dictionary = Dictionary(["DOG"])
        assert session.variant is GameVariant.BOGGLE_4X4
