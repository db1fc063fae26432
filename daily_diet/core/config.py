from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "postgresql://daily_diet:daily_diet@db:5432/daily_diet"
    # При продакшн/обычной разработке лучше не пересоздавать БД на каждом старте
    RESET_DATABASE: bool = False
    SQL_ECHO: bool = False
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    LOG_LEVEL: str = "INFO"

    SESSION_COOKIE_NAME: str = "sessionId"
    SESSION_COOKIE_MAX_AGE: int = 60 * 60 * 24 * 7  # 7 дней, в секундах

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

settings = Settings()
