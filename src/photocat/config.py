"""Default configuration values for photocat."""

from __future__ import annotations

from typing import Final

# Both catalog documents live side by side in the data directory, which
# defaults to the process working directory.
PHOTOS_FILE_NAME: Final[str] = "photos.json"
ALBUMS_FILE_NAME: Final[str] = "albums.json"

# ``photos.json`` is rewritten in full on every mutation using the same
# two-space layout the catalog is distributed with.
JSON_INDENT: Final[int] = 2

DEFAULT_LOG_LEVEL: Final[str] = "ERROR"

# ---------------------------------------------------------------------------
# Console notices
# ---------------------------------------------------------------------------

PHOTO_NOT_FOUND_NOTICE: Final[str] = "no photo found with this id"
FILE_UPDATED_NOTICE: Final[str] = "file updated"

# Rendered in place of an empty album name list.
NO_ALBUM_NAME: Final[str] = "No Album for this ID"
