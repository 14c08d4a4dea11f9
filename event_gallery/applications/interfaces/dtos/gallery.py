from datetime import datetime
from http import HTTPStatus
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ImagePublic(CamelModel):
    key: str
    url: str
    last_modified: Optional[datetime] = None
    size: int


class PageMeta(CamelModel):
    current_page: int
    per_page: int
    total_items: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


class ImagePage(CamelModel):
    status_code: int = HTTPStatus.OK.value
    body: List[ImagePublic]
    meta: PageMeta
