"""
Testing the stores and the history repository.
"""

import json

import pytest

from wordle_game.config import TestingConfig
from wordle_game.models.errors import CorruptedStateError
from wordle_game.models.game import PersistedHistory
from wordle_game.services.store import (
    HISTORY_KEY, USED_WORDS_KEY, HistoryRepository, JsonFileStore, MemoryStore, MongoStore,
    create_store
)

from .conftest import history_record


class FakeCollection:
    """Just enough of a pymongo collection for MongoStore."""

    def __init__(self):
        self.documents = {}

    def find_one(self, query):
        return self.documents.get(query["_id"])

    def replace_one(self, query, document, upsert=False):
        if upsert or query["_id"] in self.documents:
            self.documents[query["_id"]] = document

    def delete_one(self, query):
        self.documents.pop(query["_id"], None)


@pytest.fixture(params=["memory", "file", "mongo"])
def any_store(request, tmp_path):
    if request.param == "memory":
        return MemoryStore()
    if request.param == "file":
        return JsonFileStore(str(tmp_path / "store" / "wordle.json"))
    return MongoStore(FakeCollection())


def test_get_set_delete(any_store):
    assert any_store.get("missing") is None
    any_store.set("key", "value")
    assert any_store.get("key") == "value"
    any_store.set("key", "other")
    assert any_store.get("key") == "other"
    any_store.delete("key")
    assert any_store.get("key") is None
    any_store.delete("key")


def test_file_store_survives_reopening(tmp_path):
    path = str(tmp_path / "wordle.json")
    JsonFileStore(path).set("key", "value")
    assert JsonFileStore(path).get("key") == "value"


def test_file_store_reads_garbage_as_empty(tmp_path):
    path = tmp_path / "wordle.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonFileStore(str(path))
    assert store.get("key") is None
    store.set("key", "value")
    assert json.loads(path.read_text(encoding="utf-8")) == {"key": "value"}


def test_create_store_follows_configuration(tmp_path):
    assert isinstance(create_store(TestingConfig), MemoryStore)

    file_config = type('FileConfig', (TestingConfig,), {
        'STORE_BACKEND': 'file', 'STORE_PATH': str(tmp_path / 'data.json'), 'MONGO_URI': None
    })
    assert isinstance(create_store(file_config), JsonFileStore)

    explicit_file_config = type('ExplicitFileConfig', (TestingConfig,), {
        'STORE_BACKEND': 'file', 'STORE_PATH': str(tmp_path / 'explicit.json'),
        'MONGO_URI': 'mongodb://localhost:1/'
    })
    assert isinstance(create_store(explicit_file_config), JsonFileStore)

    default_config = type('DefaultConfig', (TestingConfig,), {
        'STORE_BACKEND': None, 'STORE_PATH': str(tmp_path / 'default.json'), 'MONGO_URI': None
    })
    assert isinstance(create_store(default_config), JsonFileStore)

    unknown_config = type('UnknownConfig', (TestingConfig,), {'STORE_BACKEND': 'redis'})
    with pytest.raises(ValueError):
        create_store(unknown_config)

    broken_config = type('BrokenConfig', (TestingConfig,), {'STORE_BACKEND': 'mongo', 'MONGO_URI': None})
    with pytest.raises(ValueError):
        create_store(broken_config)


def test_history_round_trip(any_store):
    repository = HistoryRepository(any_store)
    history = PersistedHistory(games_played=5, games_won=4, win_streak=2, max_streak=3,
                               guess_amount_for_win={2: 1, 4: 3}, target_word="CRANE",
                               guessed_words=("REACT", "STONE"))

    repository.save_history(history)

    assert repository.load_history() == history


def test_history_uses_storage_key_names():
    store = MemoryStore()
    HistoryRepository(store).save_history(PersistedHistory(games_won=1, games_played=1,
                                                           guess_amount_for_win={3: 1},
                                                           target_word="CRANE"))
    record = json.loads(store.get(HISTORY_KEY))
    assert record == history_record("CRANE", gamesPlayed=1, gamesWon=1, guessAmountForWin={"3": 1})


def test_missing_history_is_none():
    assert HistoryRepository(MemoryStore()).load_history() is None


@pytest.mark.parametrize("raw", [
    "{broken",
    "[]",
    json.dumps({"gamesPlayed": 1}),
    json.dumps(history_record(guessAmountForWin=[1, 2])),
    json.dumps(history_record(guessedWords=None)),
    json.dumps(history_record(gamesPlayed="many")),
])
def test_malformed_history_raises(raw):
    repository = HistoryRepository(MemoryStore({HISTORY_KEY: raw}))
    with pytest.raises(CorruptedStateError):
        repository.load_history()


def test_used_words():
    repository = HistoryRepository(MemoryStore())
    assert repository.load_used_words() == []
    repository.add_used_word("CRANE")
    repository.add_used_word("STONE")
    repository.add_used_word("CRANE")
    assert repository.load_used_words() == ["CRANE", "STONE"]


@pytest.mark.parametrize("raw", ["{broken", json.dumps({"a": 1}), json.dumps([1, 2])])
def test_malformed_used_words_read_as_empty(raw):
    repository = HistoryRepository(MemoryStore({USED_WORDS_KEY: raw}))
    assert repository.load_used_words() == []


def test_clear_removes_both_records():
    store = MemoryStore({HISTORY_KEY: "{}", USED_WORDS_KEY: "[]"})
    HistoryRepository(store).clear()
    assert store.data == {}
