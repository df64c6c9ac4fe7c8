"""Application configuration and environment settings"""
from typing import Optional
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class DatabaseSettings(BaseModel):
    """PostgreSQL connection parts"""
    host: str = Field(..., description="Database host")
    port: str = Field(..., description="Database port")
    name: str = Field(..., description="Database name")
    user: str = Field(..., description="Database user")
    password: Optional[str] = Field(None, description="Database password")
    ssl_mode: str = Field("disable", description="libpq sslmode")

class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    # Full SQLAlchemy URL, takes precedence over the DB_* parts
    DATABASE_URL: Optional[str] = Field(None, description="SQLAlchemy database URL")

    DB_HOST: str = Field("localhost", description="Database host")
    DB_PORT: str = Field("5432", description="Database port")
    DB_NAME: str = Field("audiobookshelf", description="Database name")
    DB_USER: str = Field("audiobookshelf", description="Database user")
    DB_PASSWORD: Optional[str] = Field(None, description="Database password")
    DB_SSL_MODE: str = Field("disable", description="libpq sslmode")

    # Report context - only needed by the command line entry point
    USER_ID: Optional[str] = Field(None, description="User to compute the yearly stats for")
    YEAR: Optional[int] = Field(None, description="Calendar year, defaults to the current year")

    OUTPUT_DIR: str = Field("/output", description="Directory for output files")
    LOG_LEVEL: str = Field("INFO", description="Root log level")

    @property
    def database_settings(self) -> DatabaseSettings:
        """Get database connection parts as a separate model"""
        return DatabaseSettings(
            host=self.DB_HOST,
            port=self.DB_PORT,
            name=self.DB_NAME,
            user=self.DB_USER,
            password=self.DB_PASSWORD,
            ssl_mode=self.DB_SSL_MODE
        )

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra='ignore'
    )

settings = Settings()

# Constants
MEDIA_TYPE_BOOK = 'book'
MEDIA_TYPE_PODCAST = 'podcast'
