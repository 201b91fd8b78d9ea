from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "tinylinks"

    # Infrastructure Configs (Env Vars - Required to start app)
    DATABASE_URL: str
    DATABASE_SSL: bool = False

    HOST: str = "0.0.0.0"
    PORT: int = 3000
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Public origin for short links; falls back to the request's scheme + host
    BASE_URL: Optional[str] = None

    # codes must fit CODE_PATTERN and the varchar(8) column
    CODE_LENGTH: int = Field(6, ge=6, le=8)
    CODE_MAX_ATTEMPTS: int = Field(10, ge=1)

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()
