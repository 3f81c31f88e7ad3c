"""
Configuration module for LibroReseñas.

This module defines the Settings class, which loads environment variables
and provides application-wide configuration: database URL, environment,
logging level and the pagination defaults used by the catalog.

Usage:
    Import the `settings` object to access configuration throughout the project.
"""

import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        DATABASE_URL (str): Database connection string.
        ENVIRONMENT (str): Current environment (e.g., 'production', 'development').
        BCRYPT_ROUNDS (int): bcrypt cost factor for new password hashes.
        LOG_LEVEL (str): Root logging level for the API and scripts.
        SQL_ECHO (bool): Echo SQL statements emitted by the engine.
        DEFAULT_PAGE_LIMIT (int): Page size used when a listing omits `limit`.
        BOOK_DETAIL_REVIEW_LIMIT (int): Number of reviews embedded in a book detail.
    """
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./libroresenas.db")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    BCRYPT_ROUNDS: int = 12
    LOG_LEVEL: str = "INFO"
    SQL_ECHO: bool = False
    DEFAULT_PAGE_LIMIT: int = 10
    BOOK_DETAIL_REVIEW_LIMIT: int = 10

    @property
    def is_sqlite(self) -> bool:
        """
        Indicates whether DATABASE_URL points to a SQLite database.

        Returns:
            bool: True for any sqlite:// URL.
        """
        return self.DATABASE_URL.startswith("sqlite")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
