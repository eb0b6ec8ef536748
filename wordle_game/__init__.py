"""
Wordle Game Application Package

Single-player Wordle served over HTTP and WebSocket. The game engine owns
the state; controllers and socket handlers only translate requests into
engine operations.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config, WORD_LIST
from .services.game_engine import GameEngine
from .services.store import create_store
from .services.word_provider import WordProvider
from .utils.decorators import ENGINE_EXTENSION
from .utils.game_logger import game_logger


def create_engine(config_class=Config, store=None, word_provider=None) -> GameEngine:
    """
    Build and start a game engine from configuration.
    
    Args:
        config_class: Configuration class to use
        store: Storage to use instead of the configured one
        word_provider: Vocabulary to use instead of the bundled word list
        
    Returns:
        GameEngine restored from storage, or initialized with a first word
    """
    if word_provider is None:
        word_provider = WordProvider(
            WORD_LIST,
            max_attempts=config_class.WORD_PICK_MAX_ATTEMPTS,
            word_length=config_class.WORD_LENGTH
        )
    if store is None:
        store = create_store(config_class)
    
    engine = GameEngine(
        word_provider, store,
        word_length=config_class.WORD_LENGTH,
        max_rows=config_class.MAX_ROWS
    )
    engine.resume_or_init()
    return engine


def create_app(config_class=Config, engine=None):
    """
    Application factory pattern for creating Flask app instances.
    
    Args:
        config_class: Configuration class to use
        engine: Started game engine; built from the configuration when omitted
        
    Returns:
        Flask application instance and its SocketIO server
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    
    game_logger.configure(config_class.LOG_DIR, config_class.LOG_LEVEL)
    
    if engine is None:
        engine = create_engine(config_class)
    app.extensions[ENGINE_EXTENSION] = engine
    
    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)
    
    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')
    
    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers, make_snapshot_broadcaster
    register_websocket_handlers(socketio)
    app.unsubscribe_broadcaster = engine.subscribe(make_snapshot_broadcaster(socketio, engine))
    
    # Store socketio instance for use in other modules
    app.socketio = socketio
    
    return app, socketio
