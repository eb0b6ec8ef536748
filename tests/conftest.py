import json
import random

import pytest

from wordle_game import create_app
from wordle_game.config import TestingConfig
from wordle_game.services.game_engine import GameEngine
from wordle_game.services.store import MemoryStore, HISTORY_KEY, USED_WORDS_KEY
from wordle_game.services.word_provider import WordProvider

WORDS = [
    "CRANE", "REACT", "SPEED", "ERASE", "EERIE", "ABBEY", "TRACE", "STONE",
    "PLANT", "MOUSE", "GHOST", "BRICK", "LIGHT", "WORLD", "QUICK", "JUMPY",
]


def history_record(target="CRANE", guesses=(), **counters):
    record = {
        "gamesPlayed": 0,
        "gamesWon": 0,
        "winStreak": 0,
        "maxStreak": 0,
        "guessAmountForWin": {},
        "currentWord": target,
        "guessedWords": list(guesses),
    }
    record.update(counters)
    return record


@pytest.fixture
def word_provider():
    return WordProvider(WORDS, rng=random.Random(1234))


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def engine(word_provider, store):
    return GameEngine(word_provider, store)


@pytest.fixture
def start_game(engine, store):
    """Start the engine on a known target, optionally mid-game."""
    def _start(target="CRANE", guesses=(), used=None, **counters):
        store.set(HISTORY_KEY, json.dumps(history_record(target, guesses, **counters)))
        store.set(USED_WORDS_KEY, json.dumps(used if used is not None else [target]))
        engine.resume_or_init()
        return engine
    return _start


def type_word(engine, word):
    for letter in word:
        engine.add_letter(letter)


@pytest.fixture
def app_config(tmp_path):
    return type('AppTestConfig', (TestingConfig,), {'LOG_DIR': str(tmp_path / 'logs')})


@pytest.fixture
def app(app_config, start_game):
    engine = start_game("CRANE")
    flask_app, socketio = create_app(app_config, engine=engine)
    yield flask_app
    flask_app.unsubscribe_broadcaster()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    sio_client = app.socketio.test_client(app)
    yield sio_client
    if sio_client.is_connected():
        sio_client.disconnect()
