import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

from photocat.config import ALBUMS_FILE_NAME, FILE_UPDATED_NOTICE, JSON_INDENT, PHOTOS_FILE_NAME
from photocat.domain.models import Album, Photo
from photocat.domain.repositories import ICatalogStore
from photocat.errors import CatalogParseError
from photocat.utils.jsonio import read_json, write_json


class JsonCatalogStore(ICatalogStore):
    """Whole-document access to ``photos.json`` and ``albums.json``.

    Every call re-reads the document from disk; nothing is cached between
    calls. ``save_photos`` rewrites the full photo collection.
    """

    def __init__(
        self,
        data_dir: Path,
        photos_file: str = PHOTOS_FILE_NAME,
        albums_file: str = ALBUMS_FILE_NAME,
        notifier: Optional[Callable[[str], None]] = None,
    ):
        self._photos_path = Path(data_dir) / photos_file
        self._albums_path = Path(data_dir) / albums_file
        self._notify = notifier or (lambda message: None)
        self._logger = logging.getLogger(__name__)

    @property
    def photos_path(self) -> Path:
        return self._photos_path

    @property
    def albums_path(self) -> Path:
        return self._albums_path

    def load_photos(self) -> List[Photo]:
        return [Photo.from_dict(entry) for entry in self._read_records(self._photos_path)]

    def load_albums(self) -> List[Album]:
        return [Album.from_dict(entry) for entry in self._read_records(self._albums_path)]

    def save_photos(self, photos: Sequence[Photo]) -> None:
        payload = [photo.to_dict() for photo in photos]
        write_json(self._photos_path, payload, indent=JSON_INDENT)
        self._logger.debug("Saved %d photos to %s", len(payload), self._photos_path)
        self._notify(FILE_UPDATED_NOTICE)

    def _read_records(self, path: Path) -> List[Dict[str, Any]]:
        content = read_json(path)
        if not isinstance(content, list):
            raise CatalogParseError(f"Expected a JSON array in {path}")
        for index, entry in enumerate(content):
            if not isinstance(entry, dict):
                raise CatalogParseError(f"Entry {index} in {path} is not a JSON object")
        self._logger.debug("Loaded %d records from %s", len(content), path)
        return content
