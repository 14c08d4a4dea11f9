from typing import List, Optional

from event_gallery.applications.interfaces.dtos.gallery import ImagePage, ImagePublic, PageMeta
from event_gallery.applications.interfaces.dtos.page_request import PageRequest
from event_gallery.domain.exceptions import ImageFetchError, ObjectStoreError
from event_gallery.domain.models.gallery_config import GalleryConfig
from event_gallery.domain.models.stored_object import StoredObject
from event_gallery.domain.ports.repositories.object_store_repository import ObjectStoreRepository
from event_gallery.domain.ports.services.logger import LoggerPort
from event_gallery.domain.services.image_ordering import folder_to_prefix, page_window, select_images
from event_gallery.domain.services.public_url_service import PublicUrlService


class ListImagesUseCase:
    """
    Lists one page of gallery images stored under a folder.

    The store only paginates with opaque continuation tokens, so every key
    under the prefix is fetched first and the requested page is sliced out of
    the filtered, ordered result.
    """

    def __init__(
        self,
        object_store_repository: ObjectStoreRepository,
        config: GalleryConfig,
        logger: LoggerPort,
    ):
        self.object_store_repository = object_store_repository
        self.config = config
        self.url_service = PublicUrlService(config)
        self.logger = logger

    async def execute(self, page_request: PageRequest) -> ImagePage:
        prefix = folder_to_prefix(page_request.folder)
        self.logger.info(
            f"Query parameters processed: folder={page_request.folder!r} page={page_request.page} "
            f"per_page={page_request.per_page} prefix={prefix!r}"
        )

        try:
            objects = await self._list_all(prefix)
        except ObjectStoreError as e:
            self.logger.error(f"Listing {prefix!r} in bucket {self.config.bucket_name} failed: {e}")
            raise ImageFetchError(self.config.store_name, str(e)) from e
        except Exception as e:
            self.logger.exception(f"Unexpected error listing {prefix!r} in bucket {self.config.bucket_name}")
            raise ImageFetchError(self.config.store_name, str(e)) from e

        images = select_images(objects)
        total_items = len(images)
        total_pages, current_page, start, end = page_window(total_items, page_request.page, page_request.per_page)
        self.logger.info(
            f"Pagination complete: total_items={total_items} total_pages={total_pages} "
            f"current_page={current_page} start={start} end={end}"
        )

        return ImagePage(
            body=[self._to_public(obj) for obj in images[start:end]],
            meta=PageMeta(
                current_page=current_page,
                per_page=page_request.per_page,
                total_items=total_items,
                total_pages=total_pages,
                has_next_page=current_page < total_pages,
                has_previous_page=current_page > 1,
            ),
        )

    async def _list_all(self, prefix: str) -> List[StoredObject]:
        objects: List[StoredObject] = []
        continuation_token: Optional[str] = None
        request_count = 0

        while True:
            request_count += 1
            self.logger.debug(
                f"Listing request #{request_count}: continuation token "
                f"{'present' if continuation_token else 'none'}"
            )
            listing = await self.object_store_repository.list_objects(
                prefix,
                delimiter=self.config.delimiter,
                max_keys=self.config.max_keys,
                continuation_token=continuation_token,
            )
            self.logger.debug(
                f"Listing response #{request_count}: key_count={listing.key_count} "
                f"is_truncated={listing.is_truncated} objects={len(listing.objects)}"
            )
            objects.extend(listing.objects)

            if not listing.is_truncated:
                break
            if not listing.next_continuation_token:
                raise ObjectStoreError("Truncated listing did not include a continuation token")
            continuation_token = listing.next_continuation_token

        self.logger.info(f"Listing complete: total_objects={len(objects)} requests={request_count}")
        return objects

    def _to_public(self, obj: StoredObject) -> ImagePublic:
        return ImagePublic(
            key=obj.key,
            url=self.url_service.url_for(obj.key),
            last_modified=obj.last_modified,
            size=obj.size,
        )
