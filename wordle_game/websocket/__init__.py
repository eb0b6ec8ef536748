"""
WebSocket Package

Contains the Socket.IO event handlers of the game server.
"""

from .handlers import register_websocket_handlers, make_snapshot_broadcaster

__all__ = ['register_websocket_handlers', 'make_snapshot_broadcaster']
