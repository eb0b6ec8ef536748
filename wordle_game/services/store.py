"""
Persistent Storage

Key/value stores that keep game history between sessions, and the
repository that reads and writes the two game records through them.
"""

import json
import logging
import os
import tempfile
from typing import Dict, List, Optional

from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..models.errors import CorruptedStateError
from ..models.game import PersistedHistory

logger = logging.getLogger('wordle_game.store')

HISTORY_KEY = "wordleData"
USED_WORDS_KEY = "usedWordsList"


class PersistentStore:
    """Synchronous string key/value store."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class MemoryStore(PersistentStore):
    """Process-local store, used for tests and throwaway sessions."""

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class JsonFileStore(PersistentStore):
    """
    Store backed by a single JSON object on disk.

    Every write rewrites the whole file through a temporary file and an
    atomic replace, so a crash never leaves a half-written file behind.
    """

    def __init__(self, path: str):
        self.path = path
        directory = os.path.dirname(os.path.abspath(path))
        os.makedirs(directory, exist_ok=True)

    def _read_all(self) -> Dict[str, str]:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Storage file {self.path} is unreadable, starting empty: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Storage file {self.path} does not hold an object, starting empty")
            return {}
        return data

    def _write_all(self, data: Dict[str, str]) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def delete(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)


class MongoStore(PersistentStore):
    """
    Store backed by a MongoDB collection holding `{_id: key, value: str}` documents.
    """

    def __init__(self, collection):
        self.collection = collection

    @classmethod
    def from_uri(cls, mongo_uri: str, database: str = "wordle_game", collection: str = "storage") -> "MongoStore":
        """
        Connect to MongoDB and check the connection.

        Args:
            mongo_uri: MongoDB connection string
            database: Database name
            collection: Collection name
        """
        client = MongoClient(mongo_uri, server_api=ServerApi('1'))

        # Test connection
        try:
            client.admin.command('ping')
            logger.info("Successfully connected to MongoDB")
        except Exception as e:
            logger.error(f"MongoDB connection error: {e}")
            raise

        return cls(client[database][collection])

    def get(self, key: str) -> Optional[str]:
        document = self.collection.find_one({"_id": key})
        if document is None:
            return None
        value = document.get("value")
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        self.collection.replace_one({"_id": key}, {"_id": key, "value": value}, upsert=True)

    def delete(self, key: str) -> None:
        self.collection.delete_one({"_id": key})


def create_store(config_class) -> PersistentStore:
    """Builds the store selected by the configuration."""
    backend = getattr(config_class, 'STORE_BACKEND', None)
    mongo_uri = getattr(config_class, 'MONGO_URI', None)

    if backend == 'memory':
        return MemoryStore()
    if not backend:
        backend = 'mongo' if mongo_uri else 'file'

    if backend == 'mongo':
        if not mongo_uri:
            raise ValueError("STORE_BACKEND is 'mongo' but MONGO_URI is not configured")
        return MongoStore.from_uri(mongo_uri, config_class.MONGO_DATABASE, config_class.MONGO_COLLECTION)
    if backend == 'file':
        return JsonFileStore(config_class.STORE_PATH)
    raise ValueError(f"Unknown STORE_BACKEND '{backend}'")


class HistoryRepository:
    """Reads and writes the history record and the used words list."""

    def __init__(self, store: PersistentStore):
        self.store = store

    def load_history(self) -> Optional[PersistedHistory]:
        """
        Returns the stored history, or None if there is none yet.

        Raises:
            CorruptedStateError: If the stored record cannot be parsed
        """
        raw = self.store.get(HISTORY_KEY)
        if raw is None:
            return None
        try:
            return PersistedHistory.from_record(json.loads(raw))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
            raise CorruptedStateError(f"Stored history is malformed: {e}") from e

    def save_history(self, history: PersistedHistory) -> None:
        self.store.set(HISTORY_KEY, json.dumps(history.to_record()))

    def load_used_words(self) -> List[str]:
        raw = self.store.get(USED_WORDS_KEY)
        if raw is None:
            return []
        try:
            words = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Used words list is malformed, treating it as empty: {e}")
            return []
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            logger.warning("Used words list is not a list of strings, treating it as empty")
            return []
        return [w.upper() for w in words]

    def save_used_words(self, words: List[str]) -> None:
        self.store.set(USED_WORDS_KEY, json.dumps(words))

    def add_used_word(self, word: str) -> None:
        words = self.load_used_words()
        if word not in words:
            words.append(word)
        self.save_used_words(words)

    def clear(self) -> None:
        self.store.delete(HISTORY_KEY)
        self.store.delete(USED_WORDS_KEY)
