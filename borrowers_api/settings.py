# borrowers_api/settings.py
import os
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Borrowers API")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    LOG_LEVEL: str = Field(default="INFO")

    # http service
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=10000)
    DATA_PATH: str = Field(default=os.path.join("data", "borrowers.json"))

    # tool service
    BORROWERS_API_URL: str = Field(default="https://rag-test-x7m8.onrender.com/api/borrowers")
    REQUEST_TIMEOUT: Optional[float] = None  # seconds; None waits indefinitely

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME


settings = Settings()
