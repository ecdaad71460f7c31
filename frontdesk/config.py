"""
Configuration Module for the Front Desk Application

This module defines configuration classes for different environments:
- DevelopmentConfig: Local development, data files under ./data
- ProductionConfig: Production deployment (SECRET_KEY required)
- TestingConfig: Automated testing configuration
"""

import os
from pathlib import Path
from datetime import timedelta


_project_root = Path(__file__).resolve().parent.parent


class Config:
    """Base configuration with common settings"""

    # Secret key for session id signing and CSRF protection.
    # DO NOT provide an insecure default here.
    # - In development, an ephemeral key is generated by the factory when missing.
    # - In production, the app factory enforces presence.
    SECRET_KEY = os.environ.get('SECRET_KEY')

    SITE_NAME = 'Sifuna Hotel'

    # Directory holding users.json, rooms.json, guests.json and cleaningTasks.json
    DATA_DIR = os.environ.get('FRONTDESK_DATA_DIR') or str(_project_root / 'data')

    # Session configuration
    PERMANENT_SESSION_LIFETIME = timedelta(minutes=720)
    SESSION_REFRESH_EACH_REQUEST = True
    SESSION_COOKIE_NAME = 'frontdesk_session'
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Login throttling (Flask-Limiter)
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = os.environ.get('RATELIMIT_STORAGE_URI', 'memory://')
    LOGIN_RATE_LIMIT = os.environ.get('LOGIN_RATE_LIMIT', '10 per minute')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()


class DevelopmentConfig(Config):
    """Development environment configuration"""

    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production environment configuration"""

    DEBUG = False
    TESTING = False

    # Production security
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing environment configuration"""

    TESTING = True
    DEBUG = True

    # Disable CSRF for testing
    WTF_CSRF_ENABLED = False

    RATELIMIT_ENABLED = False

    # Disable secure cookies for testing
    SESSION_COOKIE_SECURE = False


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
