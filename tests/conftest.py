from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from event_gallery.app import app
from event_gallery.domain.models.gallery_config import GalleryConfig
from event_gallery.domain.ports.repositories.object_store_repository import ObjectStoreRepository
from event_gallery.domain.ports.services.logger import LoggerPort
from event_gallery.infrastructure.config.dependencies import get_gallery_config, get_object_store_repository

from .factories import StoredObjectFactory


@pytest.fixture
def object_factory():
    return StoredObjectFactory()


@pytest.fixture
def gallery_config():
    return GalleryConfig(bucket_name="b", region="r")


@pytest.fixture
def mock_object_store_repository():
    """Mock object store for use case and API testing"""
    return AsyncMock(spec=ObjectStoreRepository)


@pytest.fixture
def mock_logger():
    logger = MagicMock(spec=LoggerPort)
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def client(mock_object_store_repository, gallery_config):
    """Test HTTP client with the object store and config overridden"""
    app.dependency_overrides[get_object_store_repository] = lambda: mock_object_store_repository
    app.dependency_overrides[get_gallery_config] = lambda: gallery_config

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
