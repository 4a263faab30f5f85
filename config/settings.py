# config/settings.py
import os
from dotenv import load_dotenv

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
load_dotenv(os.path.join(BASE_DIR, ".env"))  # load .env if present


def _as_bool(val, default=False):
    if val is None:
        return default
    return str(val).lower() in ("1", "true", "yes", "on")


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR = os.getenv("LOG_DIR", "./logs")
    LOG_JSON = os.getenv("LOG_JSON", "1") == "1"  # JSON lines or plain text
    LOG_TO_FILE = _as_bool(os.getenv("LOG_TO_FILE", "1"), True)
    LOG_MAX_BYTES = int(os.getenv("LOG_MAX_BYTES", 5 * 1024 * 1024))
    LOG_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", 5))
    APP_NAME = os.getenv("APP_NAME", "qa-testing-api")

    # ========= List queries =========
    DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", 10))
    # Soft-deleted roles / permissions still count toward a user's effective
    # permissions unless this is switched off.
    EFFECTIVE_PERMISSIONS_INCLUDE_DELETED = _as_bool(
        os.getenv("EFFECTIVE_PERMISSIONS_INCLUDE_DELETED", "1"), True
    )
    # =================================


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///" + os.path.join(BASE_DIR, "dev.db"))


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")


class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URI", "sqlite:///:memory:")
    LOG_TO_FILE = False


config_map = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}


def get_config(config_name):
    return config_map.get(config_name, DevelopmentConfig)
