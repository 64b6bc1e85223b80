import logging
from typing import Any, List, Optional

from photocat.application.use_cases.add_tag import AddTagRequest, AddTagUseCase
from photocat.application.use_cases.update_photo import UpdatePhotoRequest, UpdatePhotoUseCase
from photocat.domain.models import FormattedPhoto, Photo, normalize_id
from photocat.domain.services.formatter import PhotoFormatter
from photocat.domain.services.lookup import PhotoLookup

class CatalogService:
    """
    Application Service Facade for catalog operations.
    Queries go straight to the domain services, writes go through Use Cases.
    """
    def __init__(
        self,
        lookup: PhotoLookup,
        formatter: PhotoFormatter,
        update_photo_use_case: UpdatePhotoUseCase,
        add_tag_use_case: AddTagUseCase,
    ):
        self._lookup = lookup
        self._formatter = formatter
        self._update_photo_uc = update_photo_use_case
        self._add_tag_uc = add_tag_use_case
        self._logger = logging.getLogger(__name__)

    def find_photo(self, photo_id: Any) -> Optional[Photo]:
        return self._lookup.find_photo(photo_id)

    def format_photo(self, photo_id: Any) -> Optional[FormattedPhoto]:
        return self._formatter.format_photo(photo_id)

    def list_photos_in_album(self, album_name: str) -> List[FormattedPhoto]:
        return self._formatter.list_photos_in_album(album_name)

    def update_photo(self, photo_id: Any, title: Optional[str] = None, description: Optional[str] = None) -> bool:
        request = UpdatePhotoRequest(photo_id=normalize_id(photo_id), title=title, description=description)
        return self._update_photo_uc.execute(request).success

    def add_tag(self, photo_id: Any, tag: str) -> bool:
        request = AddTagRequest(photo_id=normalize_id(photo_id), tag=tag)
        return self._add_tag_uc.execute(request).success
