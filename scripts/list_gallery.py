import argparse
import asyncio

from event_gallery.applications.interfaces.dtos.gallery import ImagePage
from event_gallery.applications.interfaces.dtos.page_request import PageRequest
from event_gallery.applications.use_cases.gallery.list_images import ListImagesUseCase
from event_gallery.domain.models.gallery_config import GalleryConfig
from event_gallery.infrastructure.adapters.repositories.s3_object_store_repository import (
    S3ObjectStoreRepository,
    create_public_s3_client,
)
from event_gallery.infrastructure.config.settings import StorageSettings
from event_gallery.infrastructure.logging.logger import setup_logging
from event_gallery.infrastructure.logging.std_logger_adapter import StdLoggerAdapter


async def list_gallery(folder: str, page: int, per_page: int) -> ImagePage:
    settings = StorageSettings()
    config = GalleryConfig.from_settings(settings)
    logger = StdLoggerAdapter("event_gallery.scripts").bind(request_id="cli")
    repository = S3ObjectStoreRepository(
        client=create_public_s3_client(settings.region, settings.endpoint_url),
        bucket_name=config.bucket_name,
        logger=logger,
    )
    use_case = ListImagesUseCase(repository, config, logger)
    return await use_case.execute(PageRequest(folder=folder, page=page, per_page=per_page))


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--folder", type=str, default="")
    parser.add_argument("--page", type=int, default=1)
    parser.add_argument("--per_page", type=int, default=10)
    args = parser.parse_args()

    setup_logging()
    result = asyncio.run(list_gallery(args.folder, args.page, args.per_page))
    print(result.model_dump_json(by_alias=True, indent=2))


if __name__ == "__main__":
    main()
