"""
Game Engine

Owns the state of the game being played and every operation that changes
it: typing letters, submitting guesses, finishing games, and keeping the
stored history in step.
"""

import logging
import threading
from dataclasses import replace
from typing import Callable, Dict, List, Optional

from ..config.game_settings import WORD_LENGTH, MAX_ROWS
from ..models.errors import CorruptedStateError, IncompleteGuessError, InvalidWordError
from ..models.game import GameResult, GameSnapshot, GameState, LetterStatus, PersistedHistory
from .evaluator import evaluate_guess, key_status, keyboard_status
from .statistics import empty_history, record_game, summarize
from .store import HistoryRepository, PersistentStore
from .word_provider import WordProvider

logger = logging.getLogger('wordle_game.engine')

RESET_MESSAGE = "Your game was reset!"

Listener = Callable[[GameSnapshot], None]


def result_message(won: bool, target_word: str) -> str:
    if won:
        return f"Correct! You correctly guessed the word, {target_word.upper()}"
    return f"Sorry, you did not guess the correct word, {target_word.upper()}"


class GameEngine:
    """
    Single-player game state machine.

    The engine is created explicitly with its word provider and store, then
    started with `resume_or_init()`. Each mutation replaces the immutable
    GameState and publishes a GameSnapshot to every subscribed listener.
    Operations hold a reentrant lock, so they never interleave.
    """

    def __init__(self,
                 word_provider: WordProvider,
                 store: PersistentStore,
                 word_length: int = WORD_LENGTH,
                 max_rows: int = MAX_ROWS):
        self.word_provider = word_provider
        self.repository = HistoryRepository(store)
        self.word_length = word_length
        self.max_rows = max_rows

        self._state: Optional[GameState] = None
        self._listeners: List[Listener] = []
        self._lock = threading.RLock()

    # State and observers

    @property
    def started(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> GameState:
        if self._state is None:
            raise RuntimeError("Game engine has not been started, call resume_or_init() first")
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Registers a listener called with every new snapshot.

        Returns:
            Callable that removes the listener again
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def snapshot(self, target_word: Optional[str] = None, result: Optional[GameResult] = None) -> GameSnapshot:
        state = self.state
        return GameSnapshot(
            active_guess=state.active_guess,
            guessed_words=state.guessed_words,
            current_row=state.current_row,
            max_rows=self.max_rows,
            word_length=self.word_length,
            target_word=target_word,
            result=result,
        )

    def _set_state(self, state: GameState, target_word: Optional[str] = None,
                   result: Optional[GameResult] = None) -> None:
        self._state = state
        snapshot = self.snapshot(target_word, result)
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Snapshot listener failed")

    # Typing

    def add_letter(self, letter: str) -> None:
        """Appends a letter to the active guess; ignored when the row is full."""
        with self._lock:
            if self._state is None:
                return
            if not isinstance(letter, str) or len(letter) != 1 or not letter.isalpha():
                return
            if len(self._state.active_guess) >= self.word_length:
                return
            self._set_state(self._state.with_active_guess(self._state.active_guess + letter.upper()))

    def remove_letter(self) -> None:
        """Removes the last letter of the active guess; ignored when it is empty."""
        with self._lock:
            if self._state is None or not self._state.active_guess:
                return
            self._set_state(self._state.with_active_guess(self._state.active_guess[:-1]))

    # Guesses

    def submit_guess(self) -> Optional[GameResult]:
        """
        Submits the active guess.

        Returns:
            GameResult when the guess finished the game, None when play goes on

        Raises:
            IncompleteGuessError: If the active guess is not full
            InvalidWordError: If the active guess is not in the vocabulary
            ExhaustedVocabularyError: If no fresh target word is left after the game ends
        """
        with self._lock:
            state = self.state
            guess = state.active_guess

            if len(guess) != self.word_length:
                raise IncompleteGuessError()
            if not self.word_provider.is_valid_word(guess):
                raise InvalidWordError()

            won = guess == state.target_word
            attempt_number = state.current_row + 1

            if won or attempt_number >= self.max_rows:
                return self._finish_game(state, won, attempt_number)

            self._set_state(state.with_guess_committed())
            logger.debug(f"Guess {attempt_number}/{self.max_rows} accepted")
            return None

    def _finish_game(self, state: GameState, won: bool, attempt_number: int) -> GameResult:
        finished_target = state.target_word
        next_target = self._draw_target(exclude_extra=finished_target)

        history = record_game(self._load_history(), won, attempt_number)
        history = replace(history, target_word=next_target, guessed_words=())
        self.repository.save_history(history)

        result = GameResult(
            won=won,
            target_word=finished_target,
            attempt_number=attempt_number,
            guesses=state.guessed_words + (state.active_guess,),
            history=history,
            message=result_message(won, finished_target),
        )
        logger.info(
            f"Game {'won' if won else 'lost'} in {attempt_number} attempt(s), "
            f"played={history.games_played} won={history.games_won} streak={history.win_streak}"
        )

        self._set_state(GameState(target_word=next_target), target_word=finished_target, result=result)
        return result

    # Lifecycle

    def resume_or_init(self) -> GameState:
        """
        Restores the unfinished game from storage, or starts a first game.

        A missing, malformed or inconsistent history record is replaced by a
        fresh zeroed one.
        """
        with self._lock:
            try:
                history = self.repository.load_history()
            except CorruptedStateError as e:
                logger.warning(f"Discarding stored history: {e}")
                history = None

            if history is not None and not self._is_resumable(history):
                logger.warning("Stored game snapshot is inconsistent, starting over")
                history = None

            if history is None:
                self.repository.save_used_words([])
                history = empty_history(self._draw_target())
                self.repository.save_history(history)
                logger.info("Initialized new game history")

            self._set_state(GameState(target_word=history.target_word, guessed_words=history.guessed_words))
            return self.state

    def reset_all(self) -> GameState:
        """Wipes the history and the used words, then starts a new game."""
        with self._lock:
            self.repository.clear()
            self.repository.save_used_words([])
            history = empty_history(self._draw_target())
            self.repository.save_history(history)
            logger.info("Game history reset")

            self._set_state(GameState(target_word=history.target_word))
            return self.state

    def persist_progress(self) -> None:
        """Stores the unfinished game next to the counters, which are left as they are."""
        with self._lock:
            if self._state is None:
                return
            history = replace(
                self._load_history(),
                target_word=self._state.target_word,
                guessed_words=self._state.guessed_words,
            )
            self.repository.save_history(history)

    def _load_history(self) -> PersistedHistory:
        try:
            history = self.repository.load_history()
        except CorruptedStateError as e:
            logger.warning(f"Stored history is unreadable, counters restart from zero: {e}")
            history = None
        return history if history is not None else empty_history()

    def _draw_target(self, exclude_extra: Optional[str] = None) -> str:
        used = set(self.repository.load_used_words())
        if exclude_extra:
            used.add(exclude_extra)
        word = self.word_provider.pick_random_word(used)
        self.repository.add_used_word(word)
        return word

    def _is_resumable(self, history: PersistedHistory) -> bool:
        target = history.target_word
        if len(target) != self.word_length or not self.word_provider.is_valid_word(target):
            return False
        if len(history.guessed_words) >= self.max_rows:
            return False
        if any(len(word) != self.word_length or word == target for word in history.guessed_words):
            return False
        counters = (history.games_played, history.games_won, history.win_streak, history.max_streak)
        if min(counters) < 0 or history.games_won > history.games_played:
            return False
        distribution = history.guess_amount_for_win
        if any(not 1 <= attempt <= self.max_rows or wins < 0 for attempt, wins in distribution.items()):
            return False
        return sum(distribution.values()) == history.games_won

    # Derived queries

    def get_letter_status(self, row: int, position: int) -> LetterStatus:
        """Status of one board cell; cells of rows not yet submitted are UNUSED."""
        state = self.state
        if not 0 <= position < self.word_length or not 0 <= row < state.current_row:
            return LetterStatus.UNUSED
        return evaluate_guess(state.guessed_words[row], state.target_word)[position]

    def get_key_status(self, key: str) -> LetterStatus:
        state = self.state
        return key_status(key, state.target_word, state.guessed_words)

    def keyboard(self) -> Dict[str, LetterStatus]:
        state = self.state
        return keyboard_status(state.target_word, state.guessed_words)

    def board(self) -> List[List[LetterStatus]]:
        state = self.state
        return [evaluate_guess(word, state.target_word) for word in state.guessed_words]

    def statistics(self) -> Dict:
        return summarize(self._load_history(), self.max_rows)
