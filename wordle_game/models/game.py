"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Optional, Tuple


class LetterStatus(Enum):
    """Letter evaluation status for a board cell or a keyboard key."""
    UNUSED = "UNUSED"
    INCORRECT = "INCORRECT"
    CLOSE = "CLOSE"
    CORRECT = "CORRECT"

    @property
    def rank(self) -> int:
        """Precedence used when several statuses apply to the same key."""
        return _STATUS_RANK[self]


_STATUS_RANK = {
    LetterStatus.UNUSED: 0,
    LetterStatus.INCORRECT: 1,
    LetterStatus.CLOSE: 2,
    LetterStatus.CORRECT: 3,
}


@dataclass(frozen=True)
class GameState:
    """
    Authoritative in-memory state of the game being played.

    Instances are never mutated; every transition builds a new one through the
    `with_*` helpers so observers can keep old snapshots around.
    """
    target_word: str
    guessed_words: Tuple[str, ...] = ()
    active_guess: str = ""

    @property
    def current_row(self) -> int:
        return len(self.guessed_words)

    def with_active_guess(self, active_guess: str) -> "GameState":
        return replace(self, active_guess=active_guess)

    def with_guess_committed(self) -> "GameState":
        return replace(self, guessed_words=self.guessed_words + (self.active_guess,), active_guess="")


@dataclass
class PersistedHistory:
    """Cumulative statistics plus the snapshot of the unfinished game."""
    games_played: int = 0
    games_won: int = 0
    win_streak: int = 0
    max_streak: int = 0
    guess_amount_for_win: Dict[int, int] = field(default_factory=dict)
    target_word: str = ""
    guessed_words: Tuple[str, ...] = ()

    def to_record(self) -> Dict:
        """Serializable form using the storage key names."""
        return {
            "gamesPlayed": self.games_played,
            "gamesWon": self.games_won,
            "winStreak": self.win_streak,
            "maxStreak": self.max_streak,
            "guessAmountForWin": {str(k): v for k, v in sorted(self.guess_amount_for_win.items())},
            "currentWord": self.target_word,
            "guessedWords": list(self.guessed_words),
        }

    @classmethod
    def from_record(cls, record: Dict) -> "PersistedHistory":
        """
        Builds a history from a stored record.

        Raises:
            KeyError, TypeError, ValueError: If the record does not have the expected shape
        """
        if not isinstance(record, dict):
            raise TypeError(f"History record must be an object, got {type(record).__name__}")

        distribution = record["guessAmountForWin"]
        if not isinstance(distribution, dict):
            raise TypeError("guessAmountForWin must be an object")

        guessed_words = record["guessedWords"]
        if not isinstance(guessed_words, list) or not all(isinstance(w, str) for w in guessed_words):
            raise TypeError("guessedWords must be a list of strings")

        target_word = record["currentWord"]
        if not isinstance(target_word, str):
            raise TypeError("currentWord must be a string")

        return cls(
            games_played=int(record["gamesPlayed"]),
            games_won=int(record["gamesWon"]),
            win_streak=int(record["winStreak"]),
            max_streak=int(record["maxStreak"]),
            guess_amount_for_win={int(k): int(v) for k, v in distribution.items()},
            target_word=target_word.upper(),
            guessed_words=tuple(w.upper() for w in guessed_words),
        )


@dataclass(frozen=True)
class GameResult:
    """Outcome of a finished game, handed to the caller for presentation."""
    won: bool
    target_word: str
    attempt_number: int
    guesses: Tuple[str, ...]
    history: PersistedHistory
    message: str


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable view published to observers after every mutation."""
    active_guess: str
    guessed_words: Tuple[str, ...]
    current_row: int
    max_rows: int
    word_length: int
    target_word: Optional[str] = None  # Only included when a game just ended
    result: Optional[GameResult] = None
