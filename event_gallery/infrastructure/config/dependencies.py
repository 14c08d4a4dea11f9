from typing import Annotated

from botocore.client import BaseClient
from fastapi import Depends, Request
from pydantic import ValidationError

from event_gallery.domain.exceptions import ConfigurationError
from event_gallery.domain.models.gallery_config import GalleryConfig
from event_gallery.domain.ports.repositories.object_store_repository import ObjectStoreRepository
from event_gallery.domain.ports.services.logger import LoggerPort
from event_gallery.infrastructure.adapters.repositories.s3_object_store_repository import (
    S3ObjectStoreRepository,
    create_public_s3_client,
)
from event_gallery.infrastructure.config.settings import AppSettings, StorageSettings
from event_gallery.infrastructure.logging.std_logger_adapter import StdLoggerAdapter

REQUEST_ID_HEADER = "x-request-id"


def get_logger(request: Request) -> LoggerPort:
    request_id = request.headers.get(REQUEST_ID_HEADER, "no-request-id")
    return StdLoggerAdapter("event_gallery").bind(request_id=request_id)


def get_app_settings() -> AppSettings:
    return AppSettings()


def get_storage_settings() -> StorageSettings:
    return StorageSettings()


def get_gallery_config(storage_settings: Annotated[StorageSettings, Depends(get_storage_settings)]) -> GalleryConfig:
    try:
        return GalleryConfig.from_settings(storage_settings)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid storage settings: {e}") from e


def get_s3_client(storage_settings: Annotated[StorageSettings, Depends(get_storage_settings)]) -> BaseClient:
    return create_public_s3_client(storage_settings.region, storage_settings.endpoint_url)


def get_object_store_repository(
    client: Annotated[BaseClient, Depends(get_s3_client)],
    config: Annotated[GalleryConfig, Depends(get_gallery_config)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> ObjectStoreRepository:
    return S3ObjectStoreRepository(client=client, bucket_name=config.bucket_name, logger=logger)
