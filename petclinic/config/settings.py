"""Application configuration with environment-based settings."""
import os
import logging
from typing import Optional
from dotenv import load_dotenv


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Config:
    """Base configuration read from the environment."""

    # Load environment variables
    load_dotenv()

    # Application
    DEBUG: bool = _env_flag("DEBUG", "false")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")
    WTF_CSRF_ENABLED: bool = _env_flag("WTF_CSRF_ENABLED", "true")

    # Storage
    PET_STORAGE_TYPE: str = os.getenv("PET_STORAGE_TYPE", "memory")
    REDIS_URL: Optional[str] = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    SEED_SAMPLE_DATA: bool = _env_flag("SEED_SAMPLE_DATA", "true")

    # Tracing labels added to the current span on every pet form request
    TRACING_LABELS_ENABLED: bool = _env_flag("TRACING_LABELS_ENABLED", "false")
    TAG_APP_NAME: str = os.getenv("TAG_APP_NAME", "petclinic")
    TAG_NAME: str = os.getenv("TAG_NAME", "pet-controller")

    # Monitoring
    SENTRY_DSN: Optional[str] = os.getenv("SENTRY_DSN")
    SENTRY_TRACES_SAMPLE_RATE: float = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.1"))
    ENABLE_METRICS: bool = _env_flag("ENABLE_METRICS", "true")

    # Rate Limiting
    RATELIMIT_ENABLED: bool = _env_flag("RATELIMIT_ENABLED", "true")
    RATELIMIT_STORAGE_URL: str = os.getenv("RATELIMIT_STORAGE_URL", "memory://")
    RATELIMIT_DEFAULT: str = os.getenv("RATELIMIT_DEFAULT", "200 per minute")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration values."""
        if cls.PET_STORAGE_TYPE.lower() not in ("memory", "redis"):
            raise ValueError(f"Unsupported PET_STORAGE_TYPE: {cls.PET_STORAGE_TYPE}")
        if cls.PET_STORAGE_TYPE.lower() == "redis" and not cls.REDIS_URL:
            logging.warning("PET_STORAGE_TYPE is redis but REDIS_URL is not set")


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    WTF_CSRF_ENABLED = False
    PET_STORAGE_TYPE = "memory"
    SEED_SAMPLE_DATA = True
    TRACING_LABELS_ENABLED = False
    SENTRY_DSN = None
    ENABLE_METRICS = False
    RATELIMIT_ENABLED = False


def get_config() -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = os.getenv("FLASK_ENV", "development").lower()

    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }

    return config_map.get(env, DevelopmentConfig)
