"""Application configuration"""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from STUDENT_DB_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="STUDENT_DB_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Project
    PROJECT_NAME: str = "Student DB"
    VERSION: str = "0.1.0"
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # Queries
    # WHY: Type-checking every record is O(n) extra work; callers that
    # build their own collections from trusted code may turn it off.
    STRICT_INPUT_CHECKS: bool = True

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise to upper case and reject unknown level names."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def effective_log_level(self) -> str:
        """DEBUG overrides LOG_LEVEL."""
        return "DEBUG" if self.DEBUG else self.LOG_LEVEL


settings = Settings()
