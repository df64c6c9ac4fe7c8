"""Database connection and session management"""
import logging
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.exc import SQLAlchemyError

from listening_stats.models.db import Base
from listening_stats.db_config import DatabaseManager

logger = logging.getLogger(__name__)

class Database:
    """Database connection and session manager"""

    def __init__(self):
        """Initialize database manager state"""
        self._engine = None
        self._SessionLocal = None

    def _get_connection_string(self) -> str:
        """
        Get database connection string using credential management.

        Raises:
            ValueError: If required settings are missing
        """
        try:
            return DatabaseManager.initialize_from_env()
        except ValueError as e:
            logger.error(f"Failed to initialize database connection: {e}")
            raise

    def _check_schema(self) -> None:
        """
        Make sure the media library tables exist. The database is only read, never migrated.

        Raises:
            RuntimeError: If any of the tables read by the stats queries is missing
        """
        existing = set(inspect(self._engine).get_table_names())
        missing = sorted(set(Base.metadata.tables) - existing)
        if missing:
            raise RuntimeError(f"Media library tables not found: {', '.join(missing)}")

    def init(self, connection_string: Optional[str] = None) -> None:
        """
        Initialize database connection against an existing media library database.

        Args:
            connection_string: Explicit SQLAlchemy URL, resolved from settings when omitted

        Raises:
            ValueError: If required settings are missing
            RuntimeError: If the media library tables are missing
            SQLAlchemyError: If the database cannot be reached
        """
        try:
            if connection_string is None:
                connection_string = self._get_connection_string()
            self._engine = create_engine(connection_string)
            self._check_schema()
            self._SessionLocal = sessionmaker(bind=self._engine)
            logger.info("Database initialized successfully")

        except (SQLAlchemyError, RuntimeError) as e:
            logger.error(f"Database initialization failed: {e}")
            self.dispose()
            raise

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Provide a transactional scope around a series of operations"""
        if not self._SessionLocal:
            raise RuntimeError("Database not initialized. Call init() first.")

        session = self._SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get_session(self) -> Session:
        """Get a new database session"""
        if not self._SessionLocal:
            raise RuntimeError("Database not initialized. Call init() first.")
        return self._SessionLocal()

    def dispose(self) -> None:
        """
        Clean up database connections.
        Should be called during application shutdown.
        """
        if self._engine:
            self._engine.dispose()
            self._engine = None
            self._SessionLocal = None

# Global database instance
db = Database()
