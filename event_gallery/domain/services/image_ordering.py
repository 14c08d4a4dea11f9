"""Filtering, ordering and slicing rules for gallery listings."""

import math
import posixpath
import re
from typing import List, Sequence, Tuple

from event_gallery.domain.models.stored_object import StoredObject

IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "webp", "gif"})

_SEQUENCE_PATTERN = re.compile(r"-(\d+)\.")


def folder_to_prefix(folder: str) -> str:
    if not folder:
        return ""
    return folder if folder.endswith("/") else f"{folder}/"


def is_image_key(key: str | None) -> bool:
    if not key:
        return False
    extension = posixpath.splitext(key)[1]
    return extension[1:].lower() in IMAGE_EXTENSIONS


def extract_sequence_number(key: str) -> int:
    """``Grand_Marlin_Proposal-12.jpg`` -> 12; keys without a ``-<digits>.`` run -> 0."""
    match = _SEQUENCE_PATTERN.search(key)
    return int(match.group(1)) if match else 0


def select_images(objects: Sequence[StoredObject]) -> List[StoredObject]:
    images = [obj for obj in objects if is_image_key(obj.key)]
    # sorted() is stable, so equal numbers keep the store's enumeration order
    return sorted(images, key=lambda obj: extract_sequence_number(obj.key))


def page_window(total_items: int, page: int, per_page: int) -> Tuple[int, int, int, int]:
    """Return ``(total_pages, current_page, start, end)`` for a listing.

    Requests past the end are clamped to the last page; an empty listing
    still reports page 1.
    """
    total_pages = math.ceil(total_items / per_page)
    current_page = min(page, max(total_pages, 1))
    start = (current_page - 1) * per_page
    end = min(start + per_page, total_items)
    return total_pages, current_page, start, end
