"""
Wordle Game Server - Main Entry Point

This is the main entry point for the Wordle game server.
It restores the game engine from storage and starts the Flask-SocketIO application.
"""

import atexit
import os

from wordle_game import create_app, create_engine
from wordle_game.config import config
from wordle_game.utils.game_logger import game_logger


def main():
    """Main function to initialize the engine and start the server."""
    config_class = config[os.getenv('APP_ENV', 'default')]
    
    try:
        print("Initializing game engine...")
        game_logger.configure(config_class.LOG_DIR, config_class.LOG_LEVEL)
        engine = create_engine(config_class)
        print(f"✓ Game engine ready ({len(engine.word_provider)} words, row {engine.state.current_row}/{engine.max_rows})")
        
        # Keep the unfinished game when the process stops
        atexit.register(engine.persist_progress)
        
        print("Creating Flask application...")
        app, socketio = create_app(config_class, engine=engine)
        print("✓ Flask application created successfully")
        
        game_logger.logger.info("Wordle Server Starting")
        
        print(f"\nStarting Wordle Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)
        
        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG,
                     allow_unsafe_werkzeug=config_class.DEBUG)
        
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        if game_logger.logger:
            game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
