"""
WebSocket Event Handlers

Handles keyboard input over WebSocket and pushes every new game snapshot
to the connected clients.
"""

from flask import request
from flask_socketio import emit
from ..config.game_settings import SUBMIT_KEY, BACKSPACE_KEY
from ..models.errors import GuessError
from ..utils.decorators import websocket_engine_required
from ..utils.game_logger import game_logger
from ..utils.helpers import serialize_snapshot, serialize_result


def state_payload(engine, snapshot):
    return serialize_snapshot(snapshot, board=engine.board(), keyboard=engine.keyboard())


def make_snapshot_broadcaster(socketio, engine):
    """
    Build the engine listener that broadcasts each snapshot.

    Every snapshot goes out as `state_update`; a snapshot that closes a game
    is followed by a `game_over` event carrying the result.
    """
    def broadcast(snapshot):
        socketio.emit('state_update', {
            'success': True,
            'state': state_payload(engine, snapshot)
        })
        if snapshot.result is not None:
            socketio.emit('game_over', serialize_result(snapshot.result, snapshot.max_rows))

    return broadcast


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""
    
    @socketio.on('connect')
    @websocket_engine_required
    def handle_connect(auth=None, engine=None):
        """Send the current state to the new client."""
        emit('state_update', {
            'success': True,
            'state': state_payload(engine, engine.snapshot())
        })

    @socketio.on('disconnect')
    @websocket_engine_required
    def handle_disconnect(*args, engine=None):
        """Keep the unfinished game when a player leaves."""
        try:
            engine.persist_progress()
        except Exception as e:
            game_logger.log_error(request, e, 'disconnect')

    @socketio.on('request_state')
    @websocket_engine_required
    def handle_request_state(data=None, engine=None):
        """Send the current state to the requesting client."""
        emit('state_update', {
            'success': True,
            'state': state_payload(engine, engine.snapshot())
        })

    @socketio.on('key_press')
    @websocket_engine_required
    def handle_key_press(data, engine=None):
        """Apply one key of the on-screen or physical keyboard."""
        key = data.get('key') if isinstance(data, dict) else None
        if not key or not isinstance(key, str):
            emit('error', {'error': 'Key is required'})
            return
        
        key = key.upper()
        try:
            if key == SUBMIT_KEY:
                game_logger.log_user_action(request, 'submit_guess', transport='websocket')
                result = engine.submit_guess()
                if result is not None:
                    game_logger.log_game_event(
                        'game_won' if result.won else 'game_lost', request.remote_addr,
                        attempts_used=result.attempt_number, target_word=result.target_word
                    )
            elif key == BACKSPACE_KEY:
                engine.remove_letter()
            else:
                engine.add_letter(key)
                
        except GuessError as e:
            emit('guess_rejected', {
                'success': False,
                'error': str(e),
                'reason': e.reason
            })
        except Exception as e:
            game_logger.log_error(request, e, 'key_press')
            emit('error', {'error': str(e)})

    @socketio.on('save_progress')
    @websocket_engine_required
    def handle_save_progress(data=None, engine=None):
        """Store the unfinished game on request."""
        try:
            engine.persist_progress()
            emit('progress_saved', {'success': True})
        except Exception as e:
            game_logger.log_error(request, e, 'save_progress')
            emit('error', {'error': str(e)})
