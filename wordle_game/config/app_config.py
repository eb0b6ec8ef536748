"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""
    
    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False
    
    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))
    
    # Game Settings
    WORD_LENGTH = int(os.getenv('WORD_LENGTH', 5))
    MAX_ROWS = int(os.getenv('MAX_ROWS', 6))
    WORD_PICK_MAX_ATTEMPTS = int(os.getenv('WORD_PICK_MAX_ATTEMPTS', 1000))
    
    # Storage Settings
    STORE_BACKEND = os.getenv('STORE_BACKEND')  # "file", "mongo" or "memory"; unset picks mongo when MONGO_URI is set
    STORE_PATH = os.getenv('STORE_PATH', 'data/wordle_store.json')
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DATABASE = os.getenv('MONGO_DATABASE', 'wordle_game')
    MONGO_COLLECTION = os.getenv('MONGO_COLLECTION', 'storage')
    
    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    STORE_BACKEND = 'memory'


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
