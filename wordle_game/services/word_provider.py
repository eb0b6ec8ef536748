"""
Word Provider

Supplies the vocabulary used to validate guesses and to pick target words.
"""

import logging
import random
from typing import AbstractSet, Iterable, List, Optional

from ..config.game_settings import WORD_LENGTH
from ..models.errors import ExhaustedVocabularyError

logger = logging.getLogger('wordle_game.words')


class WordProvider:
    """
    Vocabulary of valid guesses and candidate targets.

    Words are stored uppercase; lookups are case-insensitive.
    """

    def __init__(self,
                 words: Iterable[str],
                 rng: Optional[random.Random] = None,
                 max_attempts: int = 1000,
                 word_length: int = WORD_LENGTH):
        """
        Args:
            words: Vocabulary, duplicates are dropped
            rng: Random source, defaults to a fresh `random.Random`
            max_attempts: Random draws made before falling back to the unused remainder
            word_length: Required length of every word

        Raises:
            ValueError: If the vocabulary is empty or holds a malformed word
        """
        self.word_length = word_length
        self.max_attempts = max_attempts
        self.rng = rng or random.Random()

        self.word_list: List[str] = []
        seen = set()
        for word in words:
            normalized = word.strip().upper()
            if len(normalized) != word_length or not normalized.isalpha():
                raise ValueError(f"Word '{word}' is not a {word_length}-letter word")
            if normalized not in seen:
                seen.add(normalized)
                self.word_list.append(normalized)

        if not self.word_list:
            raise ValueError("Word list cannot be empty")

        self._words = frozenset(self.word_list)

    def __len__(self) -> int:
        return len(self.word_list)

    def is_valid_word(self, word: str) -> bool:
        if not word or not isinstance(word, str):
            return False
        return word.strip().upper() in self._words

    def pick_random_word(self, exclude: AbstractSet[str] = frozenset()) -> str:
        """
        Picks a word that is not in `exclude`.

        Draws at random up to `max_attempts` times, then chooses among the
        words that are still unused.

        Raises:
            ExhaustedVocabularyError: If every word is excluded
        """
        excluded = {word.upper() for word in exclude}

        for _ in range(self.max_attempts):
            word = self.rng.choice(self.word_list)
            if word not in excluded:
                return word

        remaining = [word for word in self.word_list if word not in excluded]
        if not remaining:
            raise ExhaustedVocabularyError(
                f"All {len(self.word_list)} words have already been used as targets"
            )

        logger.warning(f"Random draw missed {self.max_attempts} times, {len(remaining)} unused words left")
        return self.rng.choice(remaining)
