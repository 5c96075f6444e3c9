from datetime import date
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # Factorial HR API
    FACTORIAL_API_URL: str = "https://api.factorialhr.com"
    FACTORIAL_TIMEOUT: float = 5.0

    # Fixed once per process: drives /holidays and the period lookups
    HOLIDAYS_YEAR: int = Field(default_factory=lambda: date.today().year)

    CORS_ORIGINS: List[str] = ["*"]
    PUBLIC_DIR: Path = PACKAGE_DIR / "public"

    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    class Config:
        env_file = ".env"


settings = Settings()
