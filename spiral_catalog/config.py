"""Runtime settings read from the environment (and an optional .env file)."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///./spiral_catalog.db"


class Settings(BaseModel):
    environment: str = "development"
    database_url: str = DEFAULT_DATABASE_URL
    host: str = "127.0.0.1"
    port: int = 5173
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables.

        Unset variables fall back to the field defaults.
        """
        return cls(
            environment=os.getenv("ENVIRONMENT", "development").lower(),
            database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
            host=os.getenv("HOST", "127.0.0.1"),
            port=int(os.getenv("PORT", "5173")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
