"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional

from flask import request

from ..models.game import GameResult, GameSnapshot
from ..services.statistics import summarize


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request
        
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'
    
    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None)
    }


def serialize_statuses(statuses) -> Dict[str, str]:
    return {key: status.value for key, status in statuses.items()}


def serialize_result(result: GameResult, max_rows: int) -> Dict:
    return {
        'won': result.won,
        'target_word': result.target_word,
        'attempt_number': result.attempt_number,
        'guesses': list(result.guesses),
        'message': result.message,
        'statistics': summarize(result.history, max_rows)
    }


def serialize_snapshot(snapshot: GameSnapshot, board=None, keyboard=None) -> Dict:
    """
    JSON-ready form of a snapshot.

    Args:
        snapshot: Snapshot to serialize
        board: Optional per-row cell statuses of the submitted guesses
        keyboard: Optional key statuses
    """
    data = {
        'active_guess': snapshot.active_guess,
        'guessed_words': list(snapshot.guessed_words),
        'current_row': snapshot.current_row,
        'max_rows': snapshot.max_rows,
        'word_length': snapshot.word_length,
        'target_word': snapshot.target_word,
        'result': serialize_result(snapshot.result, snapshot.max_rows) if snapshot.result else None
    }
    if board is not None:
        data['board'] = [[status.value for status in row] for row in board]
    if keyboard is not None:
        data['keyboard'] = serialize_statuses(keyboard)
    return data
