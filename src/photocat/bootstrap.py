from pathlib import Path
from typing import Callable, Optional

from photocat.application.services.catalog_service import CatalogService
from photocat.application.use_cases.add_tag import AddTagUseCase
from photocat.application.use_cases.update_photo import UpdatePhotoUseCase
from photocat.config import ALBUMS_FILE_NAME, PHOTOS_FILE_NAME
from photocat.domain.services.formatter import PhotoFormatter
from photocat.domain.services.lookup import PhotoLookup
from photocat.infrastructure.repositories.json_catalog_store import JsonCatalogStore

def build_catalog_service(
    data_dir: Path,
    *,
    photos_file: str = PHOTOS_FILE_NAME,
    albums_file: str = ALBUMS_FILE_NAME,
    notifier: Optional[Callable[[str], None]] = None,
) -> CatalogService:
    """Wire the store, domain services and use cases behind one facade."""
    store = JsonCatalogStore(data_dir, photos_file, albums_file, notifier=notifier)
    lookup = PhotoLookup(store, notifier=notifier)
    return CatalogService(
        lookup=lookup,
        formatter=PhotoFormatter(store, lookup),
        update_photo_use_case=UpdatePhotoUseCase(store, lookup),
        add_tag_use_case=AddTagUseCase(store, lookup),
    )
