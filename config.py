"""Application Settings"""
import os

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Runtime configuration read from HOTEL_* environment variables"""
    secret_key: str = "your-secret-key-keep-it-secret"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = Field(ge=1, default=30)
    log_level: str = "INFO"
    seed_rooms: int = Field(ge=0, default=2)
    max_query_days: int = Field(ge=1, default=366)

    class Config:
        frozen = True


def _from_env() -> Settings:
    values = {
        "secret_key": os.getenv("HOTEL_SECRET_KEY"),
        "algorithm": os.getenv("HOTEL_JWT_ALGORITHM"),
        "access_token_expire_minutes": os.getenv("HOTEL_ACCESS_TOKEN_EXPIRE_MINUTES"),
        "log_level": os.getenv("HOTEL_LOG_LEVEL"),
        "seed_rooms": os.getenv("HOTEL_SEED_ROOMS"),
        "max_query_days": os.getenv("HOTEL_MAX_QUERY_DAYS"),
    }
    return Settings(**{k: v for k, v in values.items() if v is not None})


settings = _from_env()


def get_settings() -> Settings:
    return settings
