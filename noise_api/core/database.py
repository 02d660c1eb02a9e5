# noise_api/core/database.py - Database connection helper

import logging
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from .config import settings

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Hold the database engine opened at startup"""

    def __init__(self, database_url: str = None):
        self.database_url = database_url
        self.engine: Optional[Engine] = None

    def connect(self) -> bool:
        """Open the engine and run a connectivity probe"""
        if not self.database_url:
            logger.warning("No database URL configured, skipping database connection")
            return False

        try:
            self.engine = create_engine(self.database_url, pool_pre_ping=True)
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            logger.info("Database connected successfully")
            return True
        except Exception as e:
            logger.error(f"Failed to connect to database: {e}")
            if self.engine is not None:
                self.engine.dispose()
            self.engine = None
            return False

    def is_available(self) -> bool:
        return self.engine is not None

    def close(self):
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None
            logger.info("Database connection closed")


def connect_db(database_url: str = None) -> DatabaseManager:
    """Connect to the configured database. Never raises."""
    manager = DatabaseManager(database_url if database_url is not None else settings.DATABASE_URL)
    manager.connect()
    return manager
