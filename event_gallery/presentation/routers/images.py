from http import HTTPStatus
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from event_gallery.applications.interfaces.dtos.gallery import ImagePage
from event_gallery.applications.interfaces.dtos.page_request import PageRequest
from event_gallery.applications.use_cases.gallery.list_images import ListImagesUseCase
from event_gallery.domain.exceptions import ImageFetchError
from event_gallery.domain.models.gallery_config import GalleryConfig
from event_gallery.domain.ports.repositories.object_store_repository import ObjectStoreRepository
from event_gallery.domain.ports.services.logger import LoggerPort
from event_gallery.infrastructure.config.dependencies import (
    get_gallery_config,
    get_logger,
    get_object_store_repository,
)

router = APIRouter(tags=["images"])

ObjectStoreRepositoryDep = Annotated[ObjectStoreRepository, Depends(get_object_store_repository)]
GalleryConfigDep = Annotated[GalleryConfig, Depends(get_gallery_config)]
LoggerDep = Annotated[LoggerPort, Depends(get_logger)]


# page and perPage arrive as raw strings so that bad values are clamped
# by PageRequest instead of rejected with a 422.
@router.get("/s3-images", response_model=ImagePage)
async def read_images(
    object_store_repository: ObjectStoreRepositoryDep,
    config: GalleryConfigDep,
    logger: LoggerDep,
    folder: Annotated[Optional[str], Query()] = None,
    page: Annotated[Optional[str], Query()] = None,
    per_page: Annotated[Optional[str], Query(alias="perPage")] = None,
):
    page_request = PageRequest(folder=folder, page=page, per_page=per_page)
    try:
        use_case = ListImagesUseCase(object_store_repository, config, logger)
        result = await use_case.execute(page_request)
    except ImageFetchError as e:
        raise HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail=str(e))

    logger.info(f"Sending response: items={len(result.body)}")
    return result
