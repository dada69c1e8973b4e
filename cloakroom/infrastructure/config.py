from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CLOAKROOM_")

    database_url: str = "sqlite+pysqlite:///:memory:"
    slot_store: Literal["sqlite", "memory"] = "sqlite"
    num_lockers: int | None = None
    max_items_per_locker: int | None = None
    log_level: str = "WARNING"


settings = Settings()
