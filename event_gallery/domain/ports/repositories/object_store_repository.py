from abc import ABC, abstractmethod
from typing import Optional

from event_gallery.domain.models.stored_object import ObjectListingPage


class ObjectStoreRepository(ABC):
    @abstractmethod
    async def list_objects(
        self,
        prefix: str,
        delimiter: str = "/",
        max_keys: int = 1000,
        continuation_token: Optional[str] = None,
    ) -> ObjectListingPage:
        """Return one page of objects stored under ``prefix``.

        Raises:
            ObjectStoreError: the store could not be reached or answered with
                a response that cannot be read.
        """
        pass
