import asyncio
from typing import Any, Dict, Optional

import boto3
from botocore import UNSIGNED
from botocore.client import BaseClient, Config
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from event_gallery.domain.exceptions import ObjectStoreError
from event_gallery.domain.models.stored_object import ObjectListingPage, StoredObject
from event_gallery.domain.ports.repositories.object_store_repository import ObjectStoreRepository
from event_gallery.domain.ports.services.logger import LoggerPort

REDACTED_HEADERS = {"authorization", "x-amz-security-token"}
REQUEST_LOG_EVENT = "before-send.s3.ListObjectsV2"
REQUEST_LOG_HANDLER_ID = "event-gallery-request-log"


def create_public_s3_client(region: str, endpoint_url: Optional[str] = None) -> BaseClient:
    """S3 client for a public bucket: requests go out unsigned."""
    return boto3.client(
        "s3",
        region_name=region,
        endpoint_url=endpoint_url,
        config=Config(signature_version=UNSIGNED),
    )


class S3ObjectStoreRepository(ObjectStoreRepository):
    def __init__(self, client: BaseClient, bucket_name: str, logger: LoggerPort):
        self.client = client
        self.bucket_name = bucket_name
        self.logger = logger
        # one hook per client; a shared client logs through the newest repository
        self.client.meta.events.unregister(REQUEST_LOG_EVENT, unique_id=REQUEST_LOG_HANDLER_ID)
        self.client.meta.events.register(
            REQUEST_LOG_EVENT, self._log_outgoing_request, unique_id=REQUEST_LOG_HANDLER_ID
        )

    def _log_outgoing_request(self, request, **kwargs):
        headers = {
            name: "***REDACTED***" if name.lower() in REDACTED_HEADERS else value
            for name, value in request.headers.items()
        }
        self.logger.debug(f"S3 request: {request.method} {request.url} headers={headers}")

    async def list_objects(
        self,
        prefix: str,
        delimiter: str = "/",
        max_keys: int = 1000,
        continuation_token: Optional[str] = None,
    ) -> ObjectListingPage:
        params: Dict[str, Any] = {
            "Bucket": self.bucket_name,
            "Prefix": prefix,
            "Delimiter": delimiter,
            "MaxKeys": max_keys,
        }
        if continuation_token:
            params["ContinuationToken"] = continuation_token

        try:
            response = await asyncio.to_thread(self.client.list_objects_v2, **params)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code")
            request_id = e.response.get("ResponseMetadata", {}).get("RequestId")
            self.logger.error(f"ListObjectsV2 failed: code={code} request_id={request_id}")
            raise ObjectStoreError(str(e)) from e
        except BotoCoreError as e:
            raise ObjectStoreError(str(e)) from e

        return self._to_listing_page(response)

    @staticmethod
    def _to_listing_page(response: Dict[str, Any]) -> ObjectListingPage:
        try:
            contents = response.get("Contents") or []
            return ObjectListingPage(
                objects=[
                    StoredObject(
                        key=item.get("Key"),
                        size=item.get("Size", 0),
                        last_modified=item.get("LastModified"),
                    )
                    for item in contents
                ],
                key_count=response.get("KeyCount", len(contents)),
                is_truncated=response.get("IsTruncated", False),
                next_continuation_token=response.get("NextContinuationToken"),
            )
        except (AttributeError, TypeError, ValidationError) as e:
            raise ObjectStoreError(f"Malformed ListObjectsV2 response: {e}") from e
