"""
Services Package

Contains all business logic: evaluation, statistics, vocabulary,
storage and the game engine.
"""

from .evaluator import evaluate_guess, letter_status, key_status, keyboard_status, merge_status
from .statistics import empty_history, record_game, summarize, win_percentage
from .word_provider import WordProvider
from .store import (
    PersistentStore, MemoryStore, JsonFileStore, MongoStore, HistoryRepository, create_store
)
from .game_engine import GameEngine

__all__ = [
    'evaluate_guess', 'letter_status', 'key_status', 'keyboard_status', 'merge_status',
    'empty_history', 'record_game', 'summarize', 'win_percentage',
    'WordProvider',
    'PersistentStore', 'MemoryStore', 'JsonFileStore', 'MongoStore', 'HistoryRepository', 'create_store',
    'GameEngine'
]
