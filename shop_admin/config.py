from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    DATABASE_URL : str
    JWT_SECRET : str
    JWT_ALGORITHM : str = "HS256"
    REDIS_URL : str = "redis://localhost:6379/0"

    ACCESS_TOKEN_EXPIRY_DAYS : int = 7
    JTI_EXPIRY_SECONDS : int = 7 * 24 * 60 * 60  # matches the access token lifetime

    LOG_LEVEL : str = "INFO"
    SQL_ECHO : bool = False
    CORS_ORIGINS : List[str] = ["*"]

    API_PREFIX : str = "/api/v1"

    model_config = SettingsConfigDict(
        env_file = ".env",
        extra = "ignore"
    )


Config = Settings()
