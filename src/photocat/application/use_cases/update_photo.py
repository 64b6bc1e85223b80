import logging
from dataclasses import dataclass
from typing import Optional

from .base import UseCase, UseCaseRequest, UseCaseResponse
from photocat.domain.repositories import ICatalogStore
from photocat.domain.services.lookup import PhotoLookup

@dataclass(frozen=True)
class UpdatePhotoRequest(UseCaseRequest):
    title: Optional[str] = None
    description: Optional[str] = None

@dataclass(frozen=True)
class UpdatePhotoResponse(UseCaseResponse):
    pass

class UpdatePhotoUseCase(UseCase[UpdatePhotoRequest, UpdatePhotoResponse]):
    """Merge a new title and/or description into the stored collection.

    Empty values keep the current text. Only the first record with a
    matching id is replaced before the whole collection is written back.
    """

    def __init__(self, store: ICatalogStore, lookup: PhotoLookup):
        self._store = store
        self._lookup = lookup
        self._logger = logging.getLogger(__name__)

    def execute(self, request: UpdatePhotoRequest) -> UpdatePhotoResponse:
        photos = self._store.load_photos()
        photo = self._lookup.find_photo(request.photo_id)
        if photo is None:
            return UpdatePhotoResponse(success=False, error="Photo not found")

        if request.title:
            photo.title = request.title
        if request.description:
            photo.description = request.description

        for index, existing in enumerate(photos):
            if existing.id == photo.id:
                photos[index] = photo
                break

        self._store.save_photos(photos)
        self._logger.info(f"Updated details for photo {photo.id}")
        return UpdatePhotoResponse(success=True)
