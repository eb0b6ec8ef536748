"""
Service Decorators

Contains decorators that hand the game engine to HTTP and WebSocket handlers.
"""

from functools import wraps
from flask import jsonify, current_app
from flask_socketio import emit

ENGINE_EXTENSION = 'wordle_engine'


def get_engine():
    """Return the game engine attached to the current app, if any."""
    return current_app.extensions.get(ENGINE_EXTENSION)


def require_engine(f):
    """
    Decorator to pass a started game engine to an HTTP endpoint.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        engine = get_engine()
        if engine is None or not engine.started:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500
        
        kwargs['engine'] = engine
        return f(*args, **kwargs)
    
    return decorated_function


def websocket_engine_required(f):
    """Decorator for WebSocket handlers that need the game engine."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        engine = get_engine()
        if engine is None or not engine.started:
            emit('error', {'error': 'Game service unavailable'})
            return
        
        kwargs['engine'] = engine
        return f(*args, **kwargs)
    
    return decorated_function
