from typing import TYPE_CHECKING

from pydantic import BaseModel, field_validator

if TYPE_CHECKING:
    from event_gallery.infrastructure.config.settings import StorageSettings


class GalleryConfig(BaseModel):
    bucket_name: str
    region: str
    cdn_url: str = ""
    delimiter: str = "/"
    max_keys: int = 1000
    store_name: str = "S3"

    @field_validator("bucket_name", "region")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()

    @field_validator("cdn_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")

    @classmethod
    def from_settings(cls, settings: "StorageSettings") -> "GalleryConfig":
        return cls(
            bucket_name=settings.bucket_name,
            region=settings.region,
            cdn_url=settings.cdn_url,
            delimiter=settings.delimiter,
            max_keys=settings.max_keys,
            store_name=settings.store_name,
        )
