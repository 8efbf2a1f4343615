"""
Configuration for the Pomotimer API service
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """API service configuration"""

    model_config = SettingsConfigDict(
        env_prefix='',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )

    # Service
    SERVICE_NAME: str = 'pomotimer'
    SERVICE_PORT: int = 8000
    LOG_LEVEL: str = 'INFO'

    # Refresh token cookie
    REFRESH_TOKEN_COOKIE_NAME: str = 'refresh_token'
    COOKIE_SECURE: bool = False

    # CORS
    CORS_ORIGINS: str = '*'


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
