"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_engine, websocket_engine_required, get_engine
from .helpers import get_user_identity, serialize_snapshot
from .game_logger import game_logger

__all__ = [
    'require_engine', 'websocket_engine_required', 'get_engine',
    'get_user_identity', 'serialize_snapshot', 'game_logger'
]
