"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..config.game_settings import KEYBOARD_ROWS, TUTORIAL_EXAMPLES
from ..models.errors import GuessError
from ..services.evaluator import evaluate_guess, letter_status
from ..utils.decorators import require_engine, get_engine
from ..utils.game_logger import game_logger
from ..services.game_engine import RESET_MESSAGE
from ..utils.helpers import serialize_snapshot, serialize_statuses

game_bp = Blueprint('game', __name__)


def _state_payload(engine, snapshot=None):
    """Serialized snapshot with the board and keyboard colouring."""
    if snapshot is None:
        snapshot = engine.snapshot()
    return serialize_snapshot(snapshot, board=engine.board(), keyboard=engine.keyboard())


def _error_response(action, error, status_code, **kwargs):
    error_response = {
        'success': False,
        'error': str(error),
        **kwargs
    }
    game_logger.log_server_response(request, action, False, error_response)
    return jsonify(error_response), status_code


@game_bp.route('/state', methods=['GET'])
@require_engine
def get_state(engine=None):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state')
        
        response_data = {
            'success': True,
            'state': _state_payload(engine)
        }
        
        game_logger.log_server_response(
            request, 'get_state', True, response_data,
            current_row=engine.state.current_row
        )
        return jsonify(response_data)
        
    except Exception as e:
        game_logger.log_error(request, e, 'get_state')
        return _error_response('get_state', e, 500)


@game_bp.route('/letter', methods=['POST'])
@require_engine
def add_letter(engine=None):
    """Type a letter into the active row."""
    try:
        data = request.get_json(silent=True) or {}
        letter = data.get('letter')
        if not letter or not isinstance(letter, str):
            return _error_response('add_letter', 'Letter is required', 400)
        
        game_logger.log_user_action(request, 'add_letter')
        engine.add_letter(letter)
        
        response_data = {
            'success': True,
            'state': _state_payload(engine)
        }
        game_logger.log_server_response(request, 'add_letter', True, response_data)
        return jsonify(response_data)
        
    except Exception as e:
        game_logger.log_error(request, e, 'add_letter')
        return _error_response('add_letter', e, 500)


@game_bp.route('/letter', methods=['DELETE'])
@require_engine
def remove_letter(engine=None):
    """Remove the last letter of the active row."""
    try:
        game_logger.log_user_action(request, 'remove_letter')
        engine.remove_letter()
        
        response_data = {
            'success': True,
            'state': _state_payload(engine)
        }
        game_logger.log_server_response(request, 'remove_letter', True, response_data)
        return jsonify(response_data)
        
    except Exception as e:
        game_logger.log_error(request, e, 'remove_letter')
        return _error_response('remove_letter', e, 500)


@game_bp.route('/guess', methods=['POST'])
@require_engine
def submit_guess(engine=None):
    """Submit the active row for evaluation."""
    try:
        attempted_guess = engine.state.active_guess
        game_logger.log_user_action(
            request, 'submit_guess',
            guess_length=len(attempted_guess), row=engine.state.current_row
        )
        
        try:
            result = engine.submit_guess()
        except GuessError as e:
            return _error_response('submit_guess', e, 400, reason=e.reason)
        
        snapshot = None
        if result is not None:
            snapshot = engine.snapshot(target_word=result.target_word, result=result)
            game_logger.log_game_event(
                'game_won' if result.won else 'game_lost', request.remote_addr,
                attempts_used=result.attempt_number, target_word=result.target_word,
                final_guess=attempted_guess
            )
        
        response_data = {
            'success': True,
            'game_over': result is not None,
            'state': _state_payload(engine, snapshot)
        }
        game_logger.log_server_response(
            request, 'submit_guess', True, response_data,
            game_over=result is not None
        )
        return jsonify(response_data)
        
    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess')
        return _error_response('submit_guess', e, 500)


@game_bp.route('/keyboard', methods=['GET'])
@require_engine
def get_keyboard(engine=None):
    """Get the colouring of every keyboard key, laid out by rows."""
    try:
        game_logger.log_user_action(request, 'get_keyboard')
        
        rows = [
            [{'key': key, 'status': engine.get_key_status(key).value} for key in row]
            for row in KEYBOARD_ROWS
        ]
        response_data = {
            'success': True,
            'rows': rows,
            'keys': serialize_statuses(engine.keyboard())
        }
        game_logger.log_server_response(request, 'get_keyboard', True, response_data)
        return jsonify(response_data)
        
    except Exception as e:
        game_logger.log_error(request, e, 'get_keyboard')
        return _error_response('get_keyboard', e, 500)


@game_bp.route('/statistics', methods=['GET'])
@require_engine
def get_statistics(engine=None):
    """Get the statistics dialog data."""
    try:
        game_logger.log_user_action(request, 'get_statistics')
        
        response_data = {
            'success': True,
            'statistics': engine.statistics()
        }
        game_logger.log_server_response(request, 'get_statistics', True, response_data)
        return jsonify(response_data)
        
    except Exception as e:
        game_logger.log_error(request, e, 'get_statistics')
        return _error_response('get_statistics', e, 500)


@game_bp.route('/reset', methods=['POST'])
@require_engine
def reset_game(engine=None):
    """Wipe all statistics and start over with a new word."""
    try:
        game_logger.log_user_action(request, 'reset')
        engine.reset_all()
        game_logger.log_game_event('game_reset', request.remote_addr)
        
        response_data = {
            'success': True,
            'message': RESET_MESSAGE,
            'state': _state_payload(engine),
            'statistics': engine.statistics()
        }
        game_logger.log_server_response(request, 'reset', True, response_data)
        return jsonify(response_data)
        
    except Exception as e:
        game_logger.log_error(request, e, 'reset')
        return _error_response('reset', e, 500)


@game_bp.route('/save', methods=['POST'])
@require_engine
def save_progress(engine=None):
    """Store the unfinished game so it can be resumed later."""
    try:
        game_logger.log_user_action(request, 'save_progress')
        engine.persist_progress()
        
        response_data = {'success': True}
        game_logger.log_server_response(request, 'save_progress', True, response_data)
        return jsonify(response_data)
        
    except Exception as e:
        game_logger.log_error(request, e, 'save_progress')
        return _error_response('save_progress', e, 500)


@game_bp.route('/tutorial', methods=['GET'])
def get_tutorial():
    """How-to-play examples, each highlighting one letter."""
    examples = []
    for example in TUTORIAL_EXAMPLES:
        examples.append({
            'word': example['word'],
            'index': example['index'],
            'status': letter_status(example['word'], example['target'], example['index']).value
        })
    
    # Worked example of a scored guess
    worked_example = {
        'target': 'CRANE',
        'guess': 'REACT',
        'statuses': [status.value for status in evaluate_guess("REACT", "CRANE")]
    }
    return jsonify({
        'success': True,
        'examples': examples,
        'worked_example': worked_example
    })


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        engine = get_engine()
        
        response_data = {
            'status': 'healthy',
            'engine_started': bool(engine and engine.started),
            'vocabulary_size': len(engine.word_provider) if engine else 0,
            'log_stats': game_logger.get_log_stats()
        }
        return jsonify(response_data)
        
    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        return jsonify({'status': 'error', 'error': str(e)}), 500
