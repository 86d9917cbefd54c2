# worldsmith/config.py
from typing import List
from pydantic_settings import BaseSettings
from functools import lru_cache
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./worldsmith.db"

    # API configuration
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Seeding
    SEED_DATABASE: bool = True
    DEFAULT_USERNAME: str = "gamemaster"
    DEFAULT_PASSWORD: str = "changeme"

    class Config:
        env_file = ".env"


@lru_cache()
def get_settings():
    return Settings()
