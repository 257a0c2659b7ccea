import os
from pathlib import Path

from dotenv import load_dotenv

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / '.env')

class Config:
    """Base configuration class"""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'your-secret-key-here'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Bearer tokens
    JWT_SECRET_KEY = os.environ.get('JWT_SECRET') or os.environ.get('JWT_SECRET_KEY') or 'change-this-jwt-secret'
    JWT_ALGORITHM = 'HS256'
    JWT_EXPIRATION_HOURS = int(os.environ.get('JWT_EXPIRATION_HOURS') or 24)

    # Single allowed frontend origin, read by Flask-CORS
    CORS_ORIGINS = [os.environ.get('CORS_ORIGIN') or 'http://localhost:5173']
    CORS_SUPPORTS_CREDENTIALS = True

    BCRYPT_LOG_ROUNDS = int(os.environ.get('BCRYPT_LOG_ROUNDS') or 12)
    # Pre-hash with SHA-256 so passwords over bcrypt's 72-byte limit still work
    BCRYPT_HANDLE_LONG_PASSWORDS = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
    LOG_JSON = False
    PORT = int(os.environ.get('PORT') or 8000)

    @staticmethod
    def init_app(app):
        pass

class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        f'sqlite:///{BASE_DIR / "resource_manager.db"}'

class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    LOG_JSON = True
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        f'sqlite:///{BASE_DIR / "resource_manager.db"}'

    @staticmethod
    def init_app(app):
        if app.config['JWT_SECRET_KEY'] == 'change-this-jwt-secret':
            app.logger.warning('JWT_SECRET is not set, falling back to the development secret')

class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    JWT_SECRET_KEY = 'test-jwt-secret'
    BCRYPT_LOG_ROUNDS = 4
    LOG_LEVEL = 'WARNING'

# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
