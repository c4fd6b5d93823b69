from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""
    PROJECT_NAME: str = "Inventory Tracker"
    VERSION: str = "1.0.0"
    API_PREFIX: str = ""

    # Database
    DATABASE_URL: str = "sqlite:///./inventory.db"
    SQL_ECHO: bool = False

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # CORS
    BACKEND_CORS_ORIGINS: str = "*"

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env", extra="ignore")

    @field_validator("API_PREFIX")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalise the prefix so routers can be mounted under it directly."""
        return v.rstrip("/")

    @property
    def cors_origins(self) -> List[str]:
        """Parse the comma separated CORS origins."""
        return [origin.strip() for origin in self.BACKEND_CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
