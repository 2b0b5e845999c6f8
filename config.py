"""
Configuration module for the back-office Flask application.
"""

import os
from pathlib import Path


BASE_DIR = Path(__file__).resolve().parent


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Base configuration, shared by every environment."""

    # Secret key: must be overridden from the environment in production
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")

    # --- MYSQL DATABASE ------------------------------------------------------
    DB_USER = os.environ.get("DB_USER", "backoffice")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "backoffice")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = os.environ.get("DB_PORT", "3306")
    DB_NAME = os.environ.get("DB_NAME", "isp_backoffice")

    DEFAULT_DB_URL = (
        f"mysql+pymysql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
    )

    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", DEFAULT_DB_URL)
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # --- CONNECTION POOL -----------------------------------------------------
    # Fixed upper bound on concurrent connections; requests beyond it queue
    # for up to DB_POOL_TIMEOUT seconds.
    DB_POOL_SIZE = int(os.environ.get("DB_POOL_SIZE", "32"))
    DB_POOL_TIMEOUT = int(os.environ.get("DB_POOL_TIMEOUT", "30"))

    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_size": DB_POOL_SIZE,
        "max_overflow": 0,
        "pool_timeout": DB_POOL_TIMEOUT,
        "pool_pre_ping": True,
    }

    # --- BUSINESS RULES ------------------------------------------------------
    # Reject contract and payment dates earlier than the current time
    ENFORCE_FUTURE_DATES = _env_flag("ENFORCE_FUTURE_DATES", "true")

    # --- LOGGING -------------------------------------------------------------
    LOG_DIR = os.environ.get("LOG_DIR", str(BASE_DIR / "logs"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE_NAME = os.environ.get("LOG_FILE_NAME", "app.log")


class DevConfig(Config):
    """Development configuration."""
    DEBUG = True
    ENV = "development"
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")


class ProdConfig(Config):
    """Production configuration."""
    DEBUG = False
    ENV = "production"
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class TestConfig(Config):
    """Configuration used by the test suite (in-memory SQLite)."""
    TESTING = True
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    # SQLite in memory runs on a single static connection
    SQLALCHEMY_ENGINE_OPTIONS = {}
    LOG_DIR = os.environ.get("TEST_LOG_DIR", str(BASE_DIR / "logs" / "test"))
    LOG_LEVEL = "WARNING"
