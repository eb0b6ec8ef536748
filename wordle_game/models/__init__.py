"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameState, GameResult, GameSnapshot, LetterStatus, PersistedHistory
from .errors import (
    WordleError, GuessError, IncompleteGuessError, InvalidWordError,
    CorruptedStateError, ExhaustedVocabularyError
)

__all__ = [
    'GameState', 'GameResult', 'GameSnapshot', 'LetterStatus', 'PersistedHistory',
    'WordleError', 'GuessError', 'IncompleteGuessError', 'InvalidWordError',
    'CorruptedStateError', 'ExhaustedVocabularyError'
]
