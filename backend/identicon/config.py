"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    identicon_env: str = "development"
    identicon_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["*"]

    # Image handler
    identicon_path: str = "/identicon"
    identicon_max_size: int = Field(default=4096, ge=1)

    # Response cache. Expire is in seconds, 0 = entries never expire.
    # With memcache hosts set ("host:port,host:port") the shared memcached
    # cache is used; otherwise identicon_cache_enabled picks the in-process one.
    identicon_memcache_hosts: str = ""
    identicon_memcache_timeout: float = Field(default=1.0, gt=0)
    identicon_cache_enabled: bool = False
    identicon_cache_expire: int = Field(default=0, ge=0)
    identicon_cache_max_entries: int = Field(default=1024, ge=1)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
