"""Build display projections of photos."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, List, Optional

from ...errors import DateFormatError
from ..models import FormattedPhoto, Photo
from ..repositories import ICatalogStore
from .lookup import PhotoLookup

logger = logging.getLogger(__name__)

# Fixed US-English month names so the rendering does not depend on the
# process locale.
_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def _parse_calendar_date(value: Any) -> date:
    if not isinstance(value, str) or not value.strip():
        raise DateFormatError(f"Photo date is missing or not a string: {value!r}")
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError as exc:
        raise DateFormatError(f"Unparseable photo date: {value!r}") from exc


def format_long_date(value: Any) -> str:
    """Render an ISO date or date-time string as ``Month D, YYYY``.

    >>> format_long_date("2023-05-01")
    'May 1, 2023'
    """

    parsed = _parse_calendar_date(value)
    return f"{_MONTH_NAMES[parsed.month - 1]} {parsed.day}, {parsed.year}"


class PhotoFormatter:
    def __init__(self, store: ICatalogStore, lookup: PhotoLookup) -> None:
        self._store = store
        self._lookup = lookup

    def format_photo(self, photo_id: Any) -> Optional[FormattedPhoto]:
        photo = self._lookup.find_photo(photo_id)
        if photo is None:
            return None
        return self._project(photo)

    def list_photos_in_album(self, album_name: str) -> List[FormattedPhoto]:
        """Return every photo whose resolved album names contain *album_name*.

        Matching is exact and case-sensitive; album names are already
        lower-cased by the lookup, so callers lower-case the query.
        """

        matches: List[FormattedPhoto] = []
        for photo in self._store.load_photos():
            formatted = self._project(photo)
            if album_name in formatted.album_names:
                matches.append(formatted)
        logger.debug("Album %r holds %d photos", album_name, len(matches))
        return matches

    def _project(self, photo: Photo) -> FormattedPhoto:
        return FormattedPhoto(
            id=photo.id,
            filename=photo.filename,
            title=photo.title,
            formatted_date=format_long_date(photo.date),
            album_names=self._lookup.resolve_album_names(photo.albums),
            tags=list(photo.tags),
        )
