from functools import lru_cache

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_VERSION = "0.1.0"


class TelemetryConfig(BaseModel):
    base_url: str = "https://fatduckdn.com/api/v2"
    timeout: float = 30.0


class LookupConfig(BaseModel):
    base_url: str = (
        "https://minerva.fatduckdn.com/api/server/duck/tables/virt.skilltable"
    )
    timeout: float = 10.0


class CacheConfig(BaseModel):
    max_age: int = 3600  # seconds; run data never changes once recorded


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    debug: bool = False
    log_level: str = "INFO"
    api_key: str = ""  # empty = auth disabled
    telemetry: TelemetryConfig = TelemetryConfig()
    lookup: LookupConfig = LookupConfig()
    cache: CacheConfig = CacheConfig()

    @model_validator(mode="after")
    def _check_limits(self):
        if self.telemetry.timeout <= 0:
            raise ValueError("TELEMETRY__TIMEOUT must be > 0")
        if self.lookup.timeout <= 0:
            raise ValueError("LOOKUP__TIMEOUT must be > 0")
        if self.cache.max_age < 0:
            raise ValueError("CACHE__MAX_AGE must be >= 0")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
