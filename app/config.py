# app/config.py
import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

# Read a local .env once, before anything looks at os.environ.
load_dotenv()


class Settings(BaseModel):
    api_key: Optional[str] = None
    api_key_header: str = "x-api-key"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]


def load_settings() -> Settings:
    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        api_key=os.getenv("API_KEY") or None,
        api_key_header=os.getenv("API_KEY_HEADER", "x-api-key").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
    )


settings = load_settings()


def get_settings() -> Settings:
    """FastAPI dependency; tests swap it out through app.dependency_overrides."""
    return settings
