"""
Game Logger Module

This module provides logging for player actions, server responses,
and game events, written as structured JSON lines.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config
from .helpers import get_user_identity


class GameLogger:
    """
    Centralized logging system for the Wordle game server.
    
    Features:
    - Player action tracking with IP identification
    - Server response logging
    - Game event logging (wins, losses, resets)
    - JSON structured logs for easy parsing
    """
    
    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.level = self._resolve_level(level)
        self.logger = None
        
    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file handler."""
        self.log_dir.mkdir(parents=True, exist_ok=True)
        
        logger = logging.getLogger('wordle_game')
        logger.setLevel(self.level)
        
        # Prevent duplicate handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        
        # Create log file with date
        log_file = self._log_file()
        
        # File handler for detailed logs
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(self.level)
        
        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        
        file_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(name)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_formatter = logging.Formatter(
            '%(levelname)s: %(message)s'
        )
        
        file_handler.setFormatter(file_formatter)
        console_handler.setFormatter(console_formatter)
        
        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        
        return logger
    
    def configure(self, log_dir: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
        """(Re)attach handlers, optionally to another directory or level."""
        if log_dir is not None:
            self.log_dir = Path(log_dir)
        if level is not None:
            self.level = self._resolve_level(level)
        self.logger = self._setup_logger()
        return self.logger
    
    @staticmethod
    def _resolve_level(level: str) -> int:
        resolved = logging.getLevelName(str(level).upper())
        return resolved if isinstance(resolved, int) else logging.INFO
    
    def _get_logger(self) -> logging.Logger:
        if self.logger is None:
            self.logger = self._setup_logger()
        return self.logger
    
    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"
    
    def _create_log_entry(self, 
                         event_type: str, 
                         action: str, 
                         user_info: Dict[str, Any],
                         details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)
    
    def log_user_action(self, request, action: str, **kwargs):
        """
        Log player actions with full context.
        
        Args:
            request: Flask request object
            action: Type of action (e.g., 'add_letter', 'submit_guess', 'get_state')
            **kwargs: Additional details to log
        """
        details = {
            'endpoint': getattr(request, 'endpoint', None),
            'method': getattr(request, 'method', None),
            **kwargs
        }
        
        log_message = self._create_log_entry('USER_ACTION', action, get_user_identity(request), details)
        self._get_logger().info(log_message)
    
    def log_server_response(self, 
                           request, 
                           action: str,
                           success: bool,
                           response_data: Dict[str, Any],
                           **kwargs):
        """
        Log server responses with full context.
        
        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            **kwargs: Additional details to log
        """
        details = {
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }
        
        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, get_user_identity(request), details)
        
        if success:
            self._get_logger().info(log_message)
        else:
            self._get_logger().warning(log_message)
    
    def log_game_event(self, event: str, user_ip: str, **kwargs):
        """
        Log game-specific events (wins, losses, resets).
        
        Args:
            event: Type of game event (e.g., 'game_won', 'game_lost', 'game_reset')
            user_ip: Player's IP address
            **kwargs: Additional game details
        """
        user_info = {'user_ip': user_ip, 'session_id': None}
        log_message = self._create_log_entry('GAME_EVENT', event, user_info, dict(kwargs))
        self._get_logger().info(log_message)
    
    def log_error(self, request, error: Exception, action: str):
        """
        Log errors with full context.
        
        Args:
            request: Flask request object
            error: Exception that occurred
            action: Action that was being performed
        """
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        
        log_message = self._create_log_entry('ERROR', action, get_user_identity(request), details)
        self._get_logger().error(log_message)
    
    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Hide the target word and trim large structures from response logs."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}
        
        sanitized = data.copy()
        
        if 'state' in sanitized and isinstance(sanitized['state'], dict):
            state = sanitized['state']
            sanitized['state'] = {
                'current_row': state.get('current_row'),
                'max_rows': state.get('max_rows'),
                'active_guess_length': len(state.get('active_guess') or ''),
                'guesses_count': len(state.get('guessed_words', [])),
                'game_finished': state.get('result') is not None
            }
        
        return sanitized
    
    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about logged events (useful for monitoring)."""
        try:
            log_file = self._log_file()
            if not log_file.exists():
                return {'error': 'No log file found for today'}
            
            stats = {
                'log_file': str(log_file),
                'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
                'total_entries': 0,
                'user_actions': 0,
                'server_responses': 0,
                'game_events': 0,
                'errors': 0
            }
            
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if line.strip():
                        stats['total_entries'] += 1
                        if 'USER_ACTION' in line:
                            stats['user_actions'] += 1
                        elif 'SERVER_RESPONSE' in line:
                            stats['server_responses'] += 1
                        elif 'GAME_EVENT' in line:
                            stats['game_events'] += 1
                        elif 'ERROR' in line:
                            stats['errors'] += 1
            
            return stats
            
        except OSError as e:
            return {'error': f'Failed to get stats: {str(e)}'}


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
