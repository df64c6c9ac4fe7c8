"""Database configuration and credentials management"""
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import URL

from listening_stats.config import Settings, settings as default_settings

@dataclass
class DatabaseCredentials:
    """Database credentials container with validation"""
    host: str
    port: str
    name: str
    user: str
    password: str
    ssl_mode: str = 'disable'

    def to_url(self) -> URL:
        """Build the SQLAlchemy URL, escaping user and password"""
        return URL.create(
            drivername='postgresql',
            username=self.user,
            password=self.password,
            host=self.host,
            port=int(self.port),
            database=self.name,
            query={'sslmode': self.ssl_mode}
        )

    def to_connection_string(self) -> str:
        """Generate database connection string with proper escaping"""
        return self.to_url().render_as_string(hide_password=False)

    @classmethod
    def from_settings(cls, settings: Settings) -> 'DatabaseCredentials':
        """Create credentials from the DB_* settings"""
        db_settings = settings.database_settings
        if not db_settings.password:
            raise ValueError("DB_PASSWORD setting is required when DATABASE_URL is not set")

        return cls(
            host=db_settings.host,
            port=db_settings.port,
            name=db_settings.name,
            user=db_settings.user,
            password=db_settings.password,
            ssl_mode=db_settings.ssl_mode
        )

class DatabaseManager:
    """Resolves the database connection string"""

    @staticmethod
    def get_connection_string(settings: Settings) -> str:
        """
        Generate database connection string from settings

        Args:
            settings: Loaded application settings

        Returns:
            DATABASE_URL when set, otherwise a PostgreSQL URL built from the DB_* parts
        """
        if settings.DATABASE_URL:
            return settings.DATABASE_URL
        return DatabaseCredentials.from_settings(settings).to_connection_string()

    @classmethod
    def initialize_from_env(cls, settings: Optional[Settings] = None) -> str:
        """
        Initialize database connection from environment variables

        Returns:
            Database connection string

        Raises:
            ValueError: If neither DATABASE_URL nor DB_PASSWORD is configured
        """
        return cls.get_connection_string(settings or default_settings)
