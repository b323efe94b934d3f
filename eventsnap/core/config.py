from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings with type-safe configuration management."""

    # Database Configuration
    DATABASE_URL: str = "postgresql+asyncpg://postgres:postgres@db:5432/eventsnap"

    # Redis Configuration (token revocation)
    REDIS_URL: str = "redis://redis:6379/0"
    REDIS_CONNECT_TIMEOUT: float = 2.0

    # Security Configuration
    SECRET_KEY: str
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7
    ALGORITHM: str = "HS256"

    # CORS Configuration
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:8000"

    # Request throttling for the auth endpoints
    RATE_LIMIT_ENABLED: bool = True

    # Guest upload admission control
    DEFAULT_UPLOAD_RATE_LIMIT: int = 10
    UPLOAD_RATE_LIMIT_WINDOW_MINUTES: int = 60

    # Environment
    ENVIRONMENT: str = "development"

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def allowed_origins_list(self) -> List[str]:
        """Convert comma-separated ALLOWED_ORIGINS string to list."""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]


# Create a single instance to be imported throughout the app
settings = Settings()
