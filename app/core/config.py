from pathlib import Path
import os
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[2]  # repo root

ENV_FILE = os.getenv("ENV_FILE", str(BASE_DIR / ".env"))

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILE, extra="ignore")

    APP_ENV: str = "local"
    SERVICE_NAME: str = "employee-service"
    DATABASE_URL: str = "sqlite:///./employees.db"
    API_PREFIX: str = ""  # the original deployment mounted the employee routes under "/v1"
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    CORS_ORIGINS: str = "*"  # Comma-separated list of allowed origins, or "*" for all

    # Listing is unbounded unless a cap is configured
    MAX_PAGE_SIZE: int | None = None
    # Update id mismatch answers 500 unless strict validation is switched on
    STRICT_UPDATE_VALIDATION: bool = False

    # Create missing tables on startup; deployments that run Alembic turn this off
    AUTO_CREATE_SCHEMA: bool = True
    METRICS_ENABLED: bool = True
    OTEL_EXPORTER_OTLP_ENDPOINT: str | None = None

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list, handling '*' for development"""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def tracing_enabled(self) -> bool:
        return bool(self.SERVICE_NAME) and bool(self.OTEL_EXPORTER_OTLP_ENDPOINT)


def get_settings() -> Settings:
    return Settings()
