from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="APP_", extra="ignore")

    title: str = "Event Gallery"
    api_prefix: str = "/api"


class StorageSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="S3_", extra="ignore")

    bucket_name: str = "ebarb-wedding"
    region: str = "us-east-2"
    cdn_url: str = ""
    # S3-compatible stores (MinIO, LocalStack) only
    endpoint_url: Optional[str] = None
    delimiter: str = "/"
    max_keys: int = 1000
    store_name: str = "S3"
