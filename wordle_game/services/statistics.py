"""
Statistics Aggregator

Folds the outcome of a finished game into the cumulative history.
"""

from dataclasses import replace
from typing import Dict

from ..models.game import PersistedHistory


def empty_history(target_word: str = "") -> PersistedHistory:
    """Zero state used on first launch and after a full reset."""
    return PersistedHistory(target_word=target_word)


def record_game(history: PersistedHistory, won: bool, attempt_number: int) -> PersistedHistory:
    """
    Returns the history that results from finishing one more game.

    Args:
        history: Statistics before the game
        won: Whether the target word was found
        attempt_number: Number of guesses used, 1-based

    Returns:
        New PersistedHistory; `history` is left unchanged
    """
    distribution = dict(history.guess_amount_for_win)

    if not won:
        return replace(
            history,
            games_played=history.games_played + 1,
            win_streak=0,
            guess_amount_for_win=distribution,
        )

    win_streak = history.win_streak + 1
    distribution[attempt_number] = distribution.get(attempt_number, 0) + 1
    return replace(
        history,
        games_played=history.games_played + 1,
        games_won=history.games_won + 1,
        win_streak=win_streak,
        max_streak=max(history.max_streak, win_streak),
        guess_amount_for_win=distribution,
    )


def win_percentage(history: PersistedHistory) -> int:
    if not history.games_played:
        return 0
    return round(100 * history.games_won / history.games_played)


def summarize(history: PersistedHistory, max_rows: int) -> Dict:
    """Statistics dialog payload, with every attempt count present."""
    return {
        "games_played": history.games_played,
        "games_won": history.games_won,
        "win_percentage": win_percentage(history),
        "win_streak": history.win_streak,
        "max_streak": history.max_streak,
        "guess_distribution": {
            str(attempt): history.guess_amount_for_win.get(attempt, 0)
            for attempt in range(1, max_rows + 1)
        },
    }
