from pydantic import BaseModel
from dotenv import load_dotenv
import os

from .errors import ConfigurationError

load_dotenv()

# Known weak fallback; never accepted in production.
DEFAULT_JWT_SECRET = "your-secret-key-change-in-production"


class Settings(BaseModel):
    environment: str = os.getenv("APP_ENV", "development")
    database_path: str = os.getenv("DATABASE_PATH", "tasks.db")
    jwt_secret: str = os.getenv("JWT_SECRET", "")
    jwt_expire_days: int = int(os.getenv("JWT_EXPIRE_DAYS", "7"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    cors_origins: list[str] = [
        origin.strip()
        for origin in os.getenv(
            "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
        ).split(",")
        if origin.strip()
    ]

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def signing_secret(self) -> str:
        if self.jwt_secret:
            return self.jwt_secret
        if self.is_production:
            raise ConfigurationError("JWT_SECRET must be set in production")
        return DEFAULT_JWT_SECRET


settings = Settings()
