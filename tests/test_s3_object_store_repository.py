from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import boto3
import pytest
from botocore import UNSIGNED
from botocore.awsrequest import AWSRequest
from botocore.client import Config
from botocore.exceptions import EndpointConnectionError
from botocore.stub import Stubber

from event_gallery.domain.exceptions import ObjectStoreError
from event_gallery.domain.ports.services.logger import LoggerPort
from event_gallery.infrastructure.adapters.repositories.s3_object_store_repository import (
    REQUEST_LOG_EVENT,
    S3ObjectStoreRepository,
)


class TestS3ObjectStoreRepository:
    @pytest.fixture
    def s3_client(self):
        return boto3.client("s3", region_name="us-east-2", config=Config(signature_version=UNSIGNED))

    @pytest.fixture
    def repository(self, s3_client, mock_logger):
        return S3ObjectStoreRepository(client=s3_client, bucket_name="ebarb-wedding", logger=mock_logger)

    @pytest.mark.asyncio
    async def test_list_objects_maps_response(self, repository, s3_client):
        modified = datetime(2024, 6, 1, 12, 30, tzinfo=timezone.utc)
        response = {
            "Contents": [
                {"Key": "wedding/a-1.jpg", "Size": 2048, "LastModified": modified},
                {"Key": "wedding/a-2.jpg", "Size": 4096, "LastModified": modified},
            ],
            "KeyCount": 2,
            "IsTruncated": True,
            "NextContinuationToken": "next-token",
        }
        expected_params = {
            "Bucket": "ebarb-wedding",
            "Prefix": "wedding/",
            "Delimiter": "/",
            "MaxKeys": 1000,
            "ContinuationToken": "previous-token",
        }

        with Stubber(s3_client) as stubber:
            stubber.add_response("list_objects_v2", response, expected_params)
            page = await repository.list_objects("wedding/", continuation_token="previous-token")
            stubber.assert_no_pending_responses()

        assert [obj.key for obj in page.objects] == ["wedding/a-1.jpg", "wedding/a-2.jpg"]
        assert page.objects[0].size == 2048
        assert page.objects[0].last_modified == modified
        assert page.key_count == 2
        assert page.is_truncated is True
        assert page.next_continuation_token == "next-token"

    @pytest.mark.asyncio
    async def test_first_request_omits_continuation_token(self, repository, s3_client):
        expected_params = {"Bucket": "ebarb-wedding", "Prefix": "", "Delimiter": "/", "MaxKeys": 50}

        with Stubber(s3_client) as stubber:
            stubber.add_response("list_objects_v2", {"KeyCount": 0, "IsTruncated": False}, expected_params)
            page = await repository.list_objects("", max_keys=50)

        assert page.objects == []
        assert page.is_truncated is False
        assert page.next_continuation_token is None

    @pytest.mark.asyncio
    async def test_client_error_becomes_object_store_error(self, repository, s3_client, mock_logger):
        with Stubber(s3_client) as stubber:
            stubber.add_client_error(
                "list_objects_v2",
                service_error_code="AccessDenied",
                service_message="Access Denied",
                http_status_code=403,
            )
            with pytest.raises(ObjectStoreError, match="Access Denied"):
                await repository.list_objects("wedding/")

        mock_logger.error.assert_called_once()

    def test_malformed_response_becomes_object_store_error(self):
        with pytest.raises(ObjectStoreError, match="Malformed ListObjectsV2 response"):
            S3ObjectStoreRepository._to_listing_page({"Contents": [{"Key": "a.jpg", "Size": "large"}]})

        with pytest.raises(ObjectStoreError, match="Malformed ListObjectsV2 response"):
            S3ObjectStoreRepository._to_listing_page({"Contents": ["a.jpg"]})

    @pytest.mark.asyncio
    async def test_connection_error_becomes_object_store_error(self, repository, s3_client):
        error = EndpointConnectionError(endpoint_url="https://ebarb-wedding.s3.us-east-2.amazonaws.com/")

        with patch.object(s3_client, "list_objects_v2", side_effect=error):
            with pytest.raises(ObjectStoreError, match="Could not connect to the endpoint URL"):
                await repository.list_objects("wedding/")

    def test_outgoing_request_log_redacts_credentials(self, repository, mock_logger):
        request = AWSRequest(
            method="GET",
            url="https://ebarb-wedding.s3.us-east-2.amazonaws.com/?list-type=2",
            headers={"Authorization": "AWS4-HMAC-SHA256 Credential=secret", "User-Agent": "boto3"},
        )

        repository._log_outgoing_request(request)

        message = mock_logger.debug.call_args.args[0]
        assert "***REDACTED***" in message
        assert "Credential=secret" not in message
        assert "boto3" in message
        assert message.startswith("S3 request: GET https://ebarb-wedding.s3.us-east-2.amazonaws.com/")

    def test_shared_client_logs_each_request_once(self, s3_client):
        first_logger = MagicMock(spec=LoggerPort)
        second_logger = MagicMock(spec=LoggerPort)
        S3ObjectStoreRepository(client=s3_client, bucket_name="ebarb-wedding", logger=first_logger)
        S3ObjectStoreRepository(client=s3_client, bucket_name="ebarb-wedding", logger=second_logger)
        request = AWSRequest(method="GET", url="https://ebarb-wedding.s3.us-east-2.amazonaws.com/", headers={})

        s3_client.meta.events.emit(REQUEST_LOG_EVENT, request=request)

        first_logger.debug.assert_not_called()
        second_logger.debug.assert_called_once()
