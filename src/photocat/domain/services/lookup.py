"""Find photos by id and resolve album ids to display names."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Optional

from ...config import PHOTO_NOT_FOUND_NOTICE
from ..models import Photo, normalize_id
from ..repositories import ICatalogStore

logger = logging.getLogger(__name__)


class PhotoLookup:
    """Linear lookups over the stored collections.

    Both collections are small enough that every call simply reloads the
    document and scans it.
    """

    def __init__(self, store: ICatalogStore, notifier: Optional[Callable[[str], None]] = None) -> None:
        self._store = store
        self._notify = notifier or (lambda message: None)

    def find_photo(self, photo_id: Any) -> Optional[Photo]:
        """Return the first photo whose id matches *photo_id*.

        A missing photo is not an error: the not-found notice is emitted once
        and ``None`` is returned.
        """

        key = normalize_id(photo_id)
        for photo in self._store.load_photos():
            if photo.id == key:
                return photo

        logger.info("No photo with id %r", key)
        self._notify(PHOTO_NOT_FOUND_NOTICE)
        return None

    def resolve_album_names(self, album_ids: Iterable[Any]) -> List[str]:
        """Return lower-cased names of the albums in *album_ids*.

        Names come back in album-file order, not in the order of *album_ids*.
        No matches yields an empty list.
        """

        wanted = {normalize_id(album_id) for album_id in album_ids}
        return [album.name.lower() for album in self._store.load_albums() if album.id in wanted]
