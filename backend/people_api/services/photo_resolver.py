"""Photo file lookup: Drive file name -> file id -> public URL."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Protocol

logger = logging.getLogger(__name__)

PhotoLookup = Mapping[str, str]


class FolderSource(Protocol):
    async def list_folder(self, folder_id: str) -> list[dict[str, str]]: ...


def build_photo_lookup(files: Iterable[Mapping[str, str | None]]) -> PhotoLookup:
    """Build a read-only name -> id mapping from a folder listing.

    Entries without a name or id are skipped. When two files share a name the
    later one in the listing wins and a warning is logged, since the listing
    order is not guaranteed to be stable.
    """
    lookup: dict[str, str] = {}
    for entry in files:
        name = entry.get("name")
        file_id = entry.get("id")
        if not name or not file_id:
            continue
        if name in lookup and lookup[name] != file_id:
            logger.warning("Duplicate photo name %r (ids %s, %s); using the latter", name, lookup[name], file_id)
        lookup[name] = file_id

    if not lookup:
        logger.info("No files found.")

    return MappingProxyType(lookup)


async def fetch_photo_lookup(source: FolderSource, folder_id: str) -> PhotoLookup:
    files = await source.list_folder(folder_id)
    return build_photo_lookup(files)


def resolve_photo(lookup: PhotoLookup, name_key: str | None, host: str) -> str:
    if not name_key:
        return ""
    file_id = lookup.get(name_key)
    if not file_id:
        return ""
    return f"{host.rstrip('/')}/{file_id}"
