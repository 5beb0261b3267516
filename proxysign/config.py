"""
proxysign configuration
Settings are read from PROXYSIGN_* environment variables or a local .env file
"""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Tool settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="PROXYSIGN_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Domain parameters
    PRIME_BIT_LENGTH: int = 20

    # Digest (attribute name in cryptography.hazmat.primitives.hashes)
    DIGEST_ALGORITHM: str = "SHA256"

    # Artifact file names, written to the working directory
    PUBLIC_KEY_FILE: str = "public.key"
    PRIVATE_KEY_FILE: str = "private.key"
    PROXY_KEY_FILE: str = "proxy.key"
    SIGNATURE_FILE: str = "message.sign"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "[%(asctime)s][%(name)s][%(levelname)s] %(message)s"
    LOG_DATEFMT: str = "%Y-%m-%d  %H:%M:%S %a"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


def configure_logging(debug=False, settings=None):
    """Set up root logging; -d switches every tool to DEBUG."""
    settings = settings or get_settings()
    level = logging.DEBUG if debug else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level,
                        format=settings.LOG_FORMAT,
                        datefmt=settings.LOG_DATEFMT,
                        force=True)
