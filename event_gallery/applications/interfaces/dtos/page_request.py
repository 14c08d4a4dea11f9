import re
from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10
MAX_PER_PAGE = 100

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _leading_int(value: Any, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else default


class PageRequest(BaseModel):
    """Query parameters of a gallery listing, normalised rather than rejected."""

    folder: str = ""
    page: int = Field(default=DEFAULT_PAGE, ge=1)
    per_page: int = Field(default=DEFAULT_PER_PAGE, ge=1, le=MAX_PER_PAGE)

    @field_validator("folder", mode="before")
    @classmethod
    def _coerce_folder(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("page", mode="before")
    @classmethod
    def _clamp_page(cls, value: Any) -> int:
        return max(1, _leading_int(value, DEFAULT_PAGE))

    @field_validator("per_page", mode="before")
    @classmethod
    def _clamp_per_page(cls, value: Any) -> int:
        return min(MAX_PER_PAGE, max(1, _leading_int(value, DEFAULT_PER_PAGE)))
