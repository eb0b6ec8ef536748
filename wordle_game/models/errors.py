"""
Game Errors

Exception hierarchy for the recoverable and fatal conditions of a game.
"""


class WordleError(Exception):
    """Base class for all game errors."""


class GuessError(WordleError):
    """A submitted guess was rejected; the game state is left untouched."""
    reason = "invalid_guess"


class IncompleteGuessError(GuessError):
    """The active guess is shorter than the word length."""
    reason = "incomplete_guess"

    def __init__(self, message: str = "Not enough letters"):
        super().__init__(message)


class InvalidWordError(GuessError):
    """The active guess is well-formed but not part of the vocabulary."""
    reason = "invalid_word"

    def __init__(self, message: str = "Not in word list"):
        super().__init__(message)


class CorruptedStateError(WordleError):
    """A stored record could not be parsed."""


class ExhaustedVocabularyError(WordleError):
    """No unused word is left to pick as a target."""
