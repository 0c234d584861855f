from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BOOKINGMX_")

    store_backend: Literal["memory", "sql"] = "memory"
    database_url: str = "sqlite+pysqlite:///:memory:"
    cities_path: Path = Path(__file__).resolve().parent / "data" / "cities.yaml"
    nearby_max_distance_km: float = 250
    cors_origins: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173", "*"]
    log_level: str = "INFO"


settings = Settings()
