"""
Database connection and configuration management.
"""
import logging
from typing import Optional
from contextlib import contextmanager
from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import SQLAlchemyError

from .config import RecordsConfig

logger = logging.getLogger(__name__)


class DatabaseConfig:
    """Database configuration management."""

    def __init__(self, settings: Optional[RecordsConfig] = None):
        self.settings = settings or RecordsConfig()

    def get_url(self, username: Optional[str] = None, password: Optional[str] = None,
                *, database_url: Optional[str] = None) -> URL:
        """Build the connection URL, applying explicit credentials over the configured ones."""
        url = make_url(database_url or self.settings.database_url)

        username = username or self.settings.username
        password = password or self.settings.password
        if username:
            url = url.set(username=username)
        if password:
            url = url.set(password=password)

        return url


class DatabaseManager:
    """Database connection management."""

    def __init__(self, config: Optional[DatabaseConfig] = None):
        self.config = config or DatabaseConfig()
        self.engine = None

    def initialize(self, username: Optional[str] = None, password: Optional[str] = None,
                   *, database_url: Optional[str] = None):
        """Create the database engine."""
        try:
            url = self.config.get_url(username, password, database_url=database_url)
            self.engine = create_engine(url, pool_pre_ping=True)
            # str(URL) masks the password
            logger.info(f"Database engine initialized for {url}")

        except Exception as e:
            logger.error(f"Failed to initialize database engine: {e}")
            raise

    @contextmanager
    def get_connection(self):
        """Open a connection for a single unit of work; it is closed on exit."""
        if not self.engine:
            raise RuntimeError("Database not initialized. Call initialize() first.")

        conn = None
        try:
            conn = self.engine.connect()
            yield conn
        except Exception as e:
            if conn:
                conn.rollback()
            logger.error(f"Database connection error: {e}")
            raise
        finally:
            if conn:
                conn.close()

    def test_connection(self) -> bool:
        """Test database connection."""
        try:
            with self.get_connection() as conn:
                result = conn.execute(text("SELECT 1")).scalar()
                logger.info(f"Database test result: {result}")
                return result == 1
        except SQLAlchemyError as e:
            logger.error(f"Database connection test failed: {e}")
            return False

    def close(self):
        """Dispose of the engine and its pooled connections."""
        if self.engine:
            self.engine.dispose()
            self.engine = None
            logger.info("Database engine disposed")


db_manager = DatabaseManager()
