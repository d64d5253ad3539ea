"""Centralized application configuration via Pydantic Settings.

Loads the store connection, HTTP binding and logging options from the
environment (or a local .env file) into a typed Settings instance. Read
once at process start.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Supabase
    SUPABASE_URL: str = Field(..., description="Supabase project URL")
    SUPABASE_KEY: str = Field(..., description="Supabase API key used by the service")
    FINANCE_TABLE: str = Field(default="finances", description="Table holding transaction records")

    # HTTP
    HOST: str = Field(default="0.0.0.0", description="Interface uvicorn binds to")  # nosec B104
    PORT: int = Field(default=5000, description="Port uvicorn listens on")

    # CORS
    ALLOWED_ORIGINS: str = Field(
        default="*",
        description="Comma-separated allowed origins for CORS",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Python log level")
    ENVIRONMENT: str = Field(
        default="development",
        description="Runtime environment: development, staging, production",
    )

    # App
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    READINESS_TIMEOUT_SECONDS: float = Field(
        default=2.0,
        description="Upper bound for the store ping in the readiness check",
    )

    @property
    def allowed_origins(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

    @property
    def log_level(self) -> str:
        return self.LOG_LEVEL

    @property
    def json_logs(self) -> bool:
        return self.ENVIRONMENT == "production"

    model_config = {"env_file": ".env", "extra": "ignore"}


def get_settings() -> Settings:
    """Factory for Settings, allows test override."""
    return Settings()

