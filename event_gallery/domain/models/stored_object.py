from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StoredObject(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: Optional[str] = None
    size: int = 0
    last_modified: Optional[datetime] = None


class ObjectListingPage(BaseModel):
    """One response of a prefix listing against the object store."""

    objects: List[StoredObject] = Field(default_factory=list)
    key_count: int = 0
    is_truncated: bool = False
    next_continuation_token: Optional[str] = None
